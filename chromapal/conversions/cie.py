"""
CIE color spaces: XYZ, xyY, L*a*b*, L*u*v* and their polar (LCh) forms.

Lightness is scaled to [0, 1] (not [0, 100]) throughout, and a*, b*, u*, v*
are scaled accordingly.
"""

import math

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Triple, WhiteRef
from ..types.white_point import D65
from ..utils.num_utils import sq, cub

RAD_TO_DEG = 180.0 / math.pi
DEG_TO_RAD = math.pi / 180.0

# Linear sRGB <-> XYZ (D65) matrices, row-major. The inverse is computed
# from the 7-digit forward matrix at double precision.
RGB_TO_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

XYZ_TO_RGB = (
    (3.2404548360214092, -1.5371388501025753, -0.498531546868481),
    (-0.96926638987565383, 1.8760109288424913, 0.041556082346673524),
    (0.055643419604213658, -0.20402585426769815, 1.0572251624579287),
)

_LAB_EPSILON = 6.0 / 29.0 * 6.0 / 29.0 * 6.0 / 29.0


def _apply_matrix(m, a, b, c):
    # Written out (no np.dot) so scalar and array inputs round identically.
    return (
        m[0][0] * a + m[0][1] * b + m[0][2] * c,
        m[1][0] * a + m[1][1] * b + m[1][2] * c,
        m[2][0] * a + m[2][1] * b + m[2][2] * c,
    )


# =============================================================================
# XYZ
# =============================================================================
def linear_rgb_to_xyz(r: float, g: float, b: float) -> Triple:
    return _apply_matrix(RGB_TO_XYZ, r, g, b)


def xyz_to_linear_rgb(x: float, y: float, z: float) -> Triple:
    return _apply_matrix(XYZ_TO_RGB, x, y, z)


def np_linear_rgb_to_xyz(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized linear RGB -> XYZ. Returns an array of shape (..., 3)."""
    r, g, b = (np.asarray(ch, dtype=float) for ch in (r, g, b))
    return np.stack(_apply_matrix(RGB_TO_XYZ, r, g, b), axis=-1)


def np_xyz_to_linear_rgb(x: NDArray, y: NDArray, z: NDArray) -> NDArray:
    """Vectorized XYZ -> linear RGB. Returns an array of shape (..., 3)."""
    x, y, z = (np.asarray(ch, dtype=float) for ch in (x, y, z))
    return np.stack(_apply_matrix(XYZ_TO_RGB, x, y, z), axis=-1)


# =============================================================================
# xyY
# =============================================================================
def xyz_to_xyy(x: float, y: float, z: float) -> Triple:
    return xyz_to_xyy_white_ref(x, y, z, D65)


def xyz_to_xyy_white_ref(x: float, y: float, z: float, wref: WhiteRef) -> Triple:
    """
    Convert XYZ to xyY.

    Black has no chromaticity of its own, so the reference white's
    chromaticity is used for it.
    """
    n = x + y + z
    if abs(n) < 1e-14:
        total = wref[0] + wref[1] + wref[2]
        return wref[0] / total, wref[1] / total, y
    return x / n, y / n, y


def xyy_to_xyz(x: float, y: float, big_y: float) -> Triple:
    if -1e-14 < y < 1e-14:
        return 0.0, big_y, 0.0
    return big_y / y * x, big_y, big_y / y * (1.0 - x - y)


# =============================================================================
# L*a*b*
# =============================================================================
def _lab_f(t: float) -> float:
    if t > _LAB_EPSILON:
        return math.cbrt(t)
    return t / 3.0 * 29.0 / 6.0 * 29.0 / 6.0 + 4.0 / 29.0


def _lab_f_inv(t: float) -> float:
    if t > 6.0 / 29.0:
        return t * t * t
    return 3.0 * 6.0 / 29.0 * 6.0 / 29.0 * (t - 4.0 / 29.0)


def xyz_to_lab(x: float, y: float, z: float) -> Triple:
    return xyz_to_lab_white_ref(x, y, z, D65)


def xyz_to_lab_white_ref(x: float, y: float, z: float, wref: WhiteRef) -> Triple:
    fy = _lab_f(y / wref[1])
    l = 1.16 * fy - 0.16
    a = 5.0 * (_lab_f(x / wref[0]) - fy)
    b = 2.0 * (fy - _lab_f(z / wref[2]))
    return l, a, b


def lab_to_xyz(l: float, a: float, b: float) -> Triple:
    return lab_to_xyz_white_ref(l, a, b, D65)


def lab_to_xyz_white_ref(l: float, a: float, b: float, wref: WhiteRef) -> Triple:
    l2 = (l + 0.16) / 1.16
    x = wref[0] * _lab_f_inv(l2 + a / 5.0)
    y = wref[1] * _lab_f_inv(l2)
    z = wref[2] * _lab_f_inv(l2 - b / 2.0)
    return x, y, z


def _np_lab_f(t: NDArray) -> NDArray:
    return np.where(
        t > _LAB_EPSILON,
        np.cbrt(t),
        t / 3.0 * 29.0 / 6.0 * 29.0 / 6.0 + 4.0 / 29.0
    )


def _np_lab_f_inv(t: NDArray) -> NDArray:
    return np.where(
        t > 6.0 / 29.0,
        t * t * t,
        3.0 * 6.0 / 29.0 * 6.0 / 29.0 * (t - 4.0 / 29.0)
    )


def np_xyz_to_lab_white_ref(x: NDArray, y: NDArray, z: NDArray, wref: WhiteRef = D65) -> NDArray:
    """Vectorized XYZ -> L*a*b*. Returns an array of shape (..., 3)."""
    x, y, z = (np.asarray(ch, dtype=float) for ch in (x, y, z))
    fy = _np_lab_f(y / wref[1])
    l = 1.16 * fy - 0.16
    a = 5.0 * (_np_lab_f(x / wref[0]) - fy)
    b = 2.0 * (fy - _np_lab_f(z / wref[2]))
    return np.stack([l, a, b], axis=-1)


def np_lab_to_xyz_white_ref(l: NDArray, a: NDArray, b: NDArray, wref: WhiteRef = D65) -> NDArray:
    """Vectorized L*a*b* -> XYZ. Returns an array of shape (..., 3)."""
    l, a, b = (np.asarray(ch, dtype=float) for ch in (l, a, b))
    l2 = (l + 0.16) / 1.16
    x = wref[0] * _np_lab_f_inv(l2 + a / 5.0)
    y = wref[1] * _np_lab_f_inv(l2)
    z = wref[2] * _np_lab_f_inv(l2 - b / 2.0)
    return np.stack([x, y, z], axis=-1)


# =============================================================================
# L*u*v*
# =============================================================================
def _xyz_to_uv(x: float, y: float, z: float):
    denom = x + 15.0 * y + 3.0 * z
    if denom == 0.0:
        return 0.0, 0.0
    return 4.0 * x / denom, 9.0 * y / denom


def xyz_to_luv(x: float, y: float, z: float) -> Triple:
    return xyz_to_luv_white_ref(x, y, z, D65)


def xyz_to_luv_white_ref(x: float, y: float, z: float, wref: WhiteRef) -> Triple:
    if y / wref[1] <= _LAB_EPSILON:
        l = y / wref[1] * (29.0 / 3.0 * 29.0 / 3.0 * 29.0 / 3.0) / 100.0
    else:
        l = 1.16 * math.cbrt(y / wref[1]) - 0.16
    ubis, vbis = _xyz_to_uv(x, y, z)
    un, vn = _xyz_to_uv(wref[0], wref[1], wref[2])
    u = 13.0 * l * (ubis - un)
    v = 13.0 * l * (vbis - vn)
    return l, u, v


def luv_to_xyz(l: float, u: float, v: float) -> Triple:
    return luv_to_xyz_white_ref(l, u, v, D65)


def luv_to_xyz_white_ref(l: float, u: float, v: float, wref: WhiteRef) -> Triple:
    if l <= 0.08:
        y = wref[1] * l * 100.0 * 3.0 / 29.0 * 3.0 / 29.0 * 3.0 / 29.0
    else:
        y = wref[1] * cub((l + 0.16) / 1.16)
    un, vn = _xyz_to_uv(wref[0], wref[1], wref[2])
    x = z = 0.0
    if l != 0.0:
        ubis = u / (13.0 * l) + un
        vbis = v / (13.0 * l) + vn
        x = y * 9.0 * ubis / (4.0 * vbis)
        z = y * (12.0 - 3.0 * ubis - 20.0 * vbis) / (4.0 * vbis)
    return x, y, z


# =============================================================================
# Polar forms
# =============================================================================
def _polar_hue(x: float, y: float) -> float:
    # Near-degenerate atan2 inputs give an arbitrary hue; pin it to 0.
    if abs(y - x) > 1e-4 and abs(x) > 1e-4:
        return math.fmod(RAD_TO_DEG * math.atan2(y, x) + 360.0, 360.0)
    return 0.0


def lab_to_hcl(l: float, a: float, b: float) -> Triple:
    """L*a*b* -> (h, c, l), the LCh(ab) space in HCL order."""
    return _polar_hue(a, b), math.sqrt(sq(a) + sq(b)), l


def hcl_to_lab(h: float, c: float, l: float) -> Triple:
    hr = DEG_TO_RAD * h
    return l, c * math.cos(hr), c * math.sin(hr)


def luv_to_luv_lch(l: float, u: float, v: float) -> Triple:
    """L*u*v* -> (l, c, h), the LCh(uv) space."""
    return l, math.sqrt(sq(u) + sq(v)), _polar_hue(u, v)


def luv_lch_to_luv(l: float, c: float, h: float) -> Triple:
    hr = DEG_TO_RAD * h
    return l, c * math.cos(hr), c * math.sin(hr)
