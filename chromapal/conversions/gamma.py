import numpy as np
from numpy import ndarray as NDArray
# No dependencies


def linearize(v: float) -> float:
    """Convert nonlinear sRGB (0..1) to linear-light RGB."""
    if v <= 0.04045:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def delinearize(v: float) -> float:
    """Convert linear-light RGB (0..1) to nonlinear sRGB."""
    if v <= 0.0031308:
        return 12.92 * v
    return 1.055 * (v ** (1.0 / 2.4)) - 0.055


def np_linearize(v: NDArray) -> NDArray:
    """Vectorized: Convert nonlinear sRGB (0..1) to linear-light RGB."""
    v = np.asarray(v, dtype=float)
    # Silence the power on the branch np.where discards.
    with np.errstate(invalid="ignore"):
        return np.where(
            v <= 0.04045,
            v / 12.92,
            ((v + 0.055) / 1.055) ** 2.4
        )


def np_delinearize(v: NDArray) -> NDArray:
    """Vectorized: Convert linear-light RGB (0..1) to nonlinear sRGB."""
    v = np.asarray(v, dtype=float)
    with np.errstate(invalid="ignore"):
        return np.where(
            v <= 0.0031308,
            12.92 * v,
            1.055 * (v ** (1.0 / 2.4)) - 0.055
        )


def linearize_fast(v: float) -> float:
    """
    Polynomial approximation of ``linearize``.

    Only meaningful for ``v`` in [0, 1]; outside that range the result is
    not an approximation of anything.
    """
    v1 = v - 0.5
    v2 = v1 * v1
    v3 = v2 * v1
    v4 = v2 * v2
    return (
        -0.248750514614486
        + 0.925583310193438 * v
        + 1.16740237321695 * v2
        + 0.280457026598666 * v3
        - 0.0757991963780179 * v4
    )


def delinearize_fast(v: float) -> float:
    """
    Piecewise polynomial approximation of ``delinearize``, valid on [0, 1].

    The fractional root is hard to fit with a single polynomial, so the
    domain is split at 0.2 and 0.03.
    """
    if v > 0.2:
        v1 = v - 0.6
        v2 = v1 * v1
        v3 = v2 * v1
        v4 = v2 * v2
        v5 = v3 * v2
        return (
            0.442430344268235
            + 0.592178981271708 * v
            - 0.287864782562636 * v2
            + 0.253214392068985 * v3
            - 0.272557158129811 * v4
            + 0.325554383321718 * v5
        )
    elif v > 0.03:
        v1 = v - 0.115
        v2 = v1 * v1
        v3 = v2 * v1
        v4 = v2 * v2
        v5 = v3 * v2
        return (
            0.194915592891669
            + 1.55227076330229 * v
            - 3.93691860257828 * v2
            + 18.0679839248761 * v3
            - 101.468750302746 * v4
            + 632.341487393927 * v5
        )
    v1 = v - 0.015
    v2 = v1 * v1
    v3 = v2 * v1
    v4 = v2 * v2
    v5 = v3 * v2
    return (
        0.0519565234928877
        + 5.09316778537561 * v
        - 99.0338180489702 * v2
        + 3484.52322764895 * v3
        - 150028.083412663 * v4
        + 7168008.42971613 * v5
    )
