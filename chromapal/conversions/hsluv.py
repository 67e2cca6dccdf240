"""
HSLuv and HPLuv, the human-friendly reshapings of CIE LCh(uv).

HSLuv stretches chroma so that saturation 1 always reaches the edge of the
sRGB gamut for the given lightness and hue. HPLuv instead uses the largest
chroma that stays in gamut for every hue at that lightness, so its colors
are pastel but hue changes never leave the gamut.

Both work on LCh(uv) computed under ``HSLUV_D65``; lightness and chroma are
scaled to [0, 100] internally.
"""

import math
import sys
from typing import List, Tuple

from ..types.color_types import Triple
from ..utils.num_utils import clamp01
from .cie import XYZ_TO_RGB

KAPPA = 903.2962962962963
EPSILON = 0.008856451679035631

Line = Tuple[float, float]


def get_bounds(l: float) -> List[Line]:
    """
    Gamut boundary lines at lightness ``l`` (0..100).

    Returns six ``(slope, intercept)`` lines in the (u, v) chroma plane, one
    for each RGB channel hitting 0 or 1.
    """
    sub1 = (l + 16.0) ** 3.0 / 1560896.0
    sub2 = sub1 if sub1 > EPSILON else l / KAPPA

    bounds = []
    for m0, m1, m2 in XYZ_TO_RGB:
        for k in (0, 1):
            top1 = (284517.0 * m0 - 94839.0 * m2) * sub2
            top2 = (838422.0 * m2 + 769860.0 * m1 + 731718.0 * m0) * l * sub2 - 769860.0 * k * l
            bottom = (632260.0 * m2 - 126452.0 * m1) * sub2 + 126452.0 * k
            bounds.append((top1 / bottom, top2 / bottom))
    return bounds


def _length_of_ray_until_intersect(theta: float, x: float, y: float) -> float:
    return y / (math.sin(theta) - x * math.cos(theta))


def max_chroma_for_lh(l: float, h: float) -> float:
    """Largest in-gamut chroma for lightness ``l`` (0..100) and hue ``h`` in degrees."""
    h_rad = h / 360.0 * math.pi * 2.0
    min_length = sys.float_info.max
    for slope, intercept in get_bounds(l):
        length = _length_of_ray_until_intersect(h_rad, slope, intercept)
        if 0.0 < length < min_length:
            min_length = length
    return min_length


def max_safe_chroma_for_l(l: float) -> float:
    """Largest chroma that is in gamut for every hue at lightness ``l`` (0..100)."""
    min_length = sys.float_info.max
    for m1, b1 in get_bounds(l):
        # Foot of the perpendicular from the origin onto the line.
        x = b1 / (-1.0 / m1 - m1)
        dist = math.sqrt(x ** 2.0 + (b1 + x * m1) ** 2.0)
        if dist < min_length:
            min_length = dist
    return min_length


def _is_extreme_lightness(l: float) -> bool:
    return l > 99.9999999 or l < 0.00000001


# =============================================================================
# HSLuv
# =============================================================================
def luv_lch_to_hsluv(l: float, c: float, h: float) -> Triple:
    """LCh(uv) -> (h, s, l) with s and l clamped to [0, 1]."""
    c *= 100.0
    l *= 100.0

    if _is_extreme_lightness(l):
        s = 0.0
    else:
        s = c / max_chroma_for_lh(l, h) * 100.0
    return h, clamp01(s / 100.0), clamp01(l / 100.0)


def hsluv_to_luv_lch(h: float, s: float, l: float) -> Triple:
    """HSLuv (h, s, l) -> LCh(uv) (l, c, h)."""
    l *= 100.0
    s *= 100.0

    if _is_extreme_lightness(l):
        c = 0.0
    else:
        c = max_chroma_for_lh(l, h) / 100.0 * s
    return clamp01(l / 100.0), c / 100.0, h


# =============================================================================
# HPLuv
# =============================================================================
def luv_lch_to_hpluv(l: float, c: float, h: float) -> Triple:
    """LCh(uv) -> (h, p, l). Unlike HSLuv the result is not clamped."""
    c *= 100.0
    l *= 100.0

    if _is_extreme_lightness(l):
        s = 0.0
    else:
        s = c / max_safe_chroma_for_l(l) * 100.0
    return h, s / 100.0, l / 100.0


def hpluv_to_luv_lch(h: float, s: float, l: float) -> Triple:
    l *= 100.0
    s *= 100.0

    if _is_extreme_lightness(l):
        c = 0.0
    else:
        c = max_safe_chroma_for_l(l) / 100.0 * s
    return l / 100.0, c / 100.0, h
