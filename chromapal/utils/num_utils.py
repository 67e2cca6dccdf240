import math
from boundednumbers.functions import clamp


def sq(v: float) -> float:
    return v * v


def cub(v: float) -> float:
    return v * v * v


def clamp01(v: float) -> float:
    """Clamp a scalar to the inclusive range ``[0, 1]``."""
    return float(clamp(v, 0.0, 1.0))


def interp_angle(a0: float, a1: float, t: float) -> float:
    """
    Interpolate between two angles in degrees along the shorter arc.

    Args:
        a0: Start angle in degrees
        a1: End angle in degrees
        t: Interpolation coefficient, usually in [0, 1]

    Returns:
        Interpolated angle wrapped into [0, 360)
    """
    delta = math.fmod(math.fmod(a1 - a0, 360.0) + 540.0, 360.0) - 180.0
    return math.fmod(a0 + t * delta + 360.0, 360.0)
