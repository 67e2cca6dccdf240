"""
Factories building a ``Color`` from coordinates in another color space.

None of them clamp except ``from_hsluv`` and ``from_hpluv``; check the result
with ``Color.is_valid()`` when the input may be out of gamut.
"""

from __future__ import annotations
from typing import Any, Sequence, Tuple, Union

from ..conversions import (
    delinearize,
    delinearize_fast,
    hsv_to_rgb,
    hsl_to_rgb,
    xyz_to_linear_rgb,
    xyy_to_xyz,
    lab_to_xyz_white_ref,
    luv_to_xyz_white_ref,
    hcl_to_lab,
    luv_lch_to_luv,
    oklab_to_xyz,
    oklch_to_oklab,
    hsluv_to_luv_lch,
    hpluv_to_luv_lch,
)
from ..types.color_types import WhiteRef
from ..types.white_point import D65, HSLUV_D65
from .color import Color
from .hex import hex_decode


def from_hsv(h: float, s: float, v: float) -> Color:
    """Hue in [0, 360), saturation and value in [0, 1]."""
    return Color(*hsv_to_rgb(h, s, v))


def from_hsl(h: float, s: float, l: float) -> Color:
    return Color(*hsl_to_rgb(h, s, l))


def from_linear_rgb(r: float, g: float, b: float) -> Color:
    return Color(delinearize(r), delinearize(g), delinearize(b))


def from_fast_linear_rgb(r: float, g: float, b: float) -> Color:
    """Like ``from_linear_rgb`` but with the polynomial approximation; inputs must be in [0, 1]."""
    return Color(delinearize_fast(r), delinearize_fast(g), delinearize_fast(b))


def from_xyz(x: float, y: float, z: float) -> Color:
    return from_linear_rgb(*xyz_to_linear_rgb(x, y, z))


def from_xyy(x: float, y: float, big_y: float) -> Color:
    return from_xyz(*xyy_to_xyz(x, y, big_y))


def from_lab(l: float, a: float, b: float) -> Color:
    return from_lab_white_ref(l, a, b, D65)


def from_lab_white_ref(l: float, a: float, b: float, wref: WhiteRef) -> Color:
    return from_xyz(*lab_to_xyz_white_ref(l, a, b, wref))


def from_luv(l: float, u: float, v: float) -> Color:
    return from_luv_white_ref(l, u, v, D65)


def from_luv_white_ref(l: float, u: float, v: float, wref: WhiteRef) -> Color:
    return from_xyz(*luv_to_xyz_white_ref(l, u, v, wref))


def from_hcl(h: float, c: float, l: float) -> Color:
    return from_hcl_white_ref(h, c, l, D65)


def from_hcl_white_ref(h: float, c: float, l: float, wref: WhiteRef) -> Color:
    return from_lab_white_ref(*hcl_to_lab(h, c, l), wref)


def from_luv_lch(l: float, c: float, h: float) -> Color:
    return from_luv_lch_white_ref(l, c, h, D65)


def from_luv_lch_white_ref(l: float, c: float, h: float, wref: WhiteRef) -> Color:
    return from_luv_white_ref(*luv_lch_to_luv(l, c, h), wref)


def from_oklab(l: float, a: float, b: float) -> Color:
    return from_xyz(*oklab_to_xyz(l, a, b))


def from_oklch(l: float, c: float, h: float) -> Color:
    return from_oklab(*oklch_to_oklab(l, c, h))


def from_hsluv(h: float, s: float, l: float) -> Color:
    """HSLuv (h in degrees, s and l in [0, 1]); the result is clamped into gamut."""
    luv = luv_lch_to_luv(*hsluv_to_luv_lch(h, s, l))
    return from_linear_rgb(*xyz_to_linear_rgb(*luv_to_xyz_white_ref(*luv, HSLUV_D65))).clamped()


def from_hpluv(h: float, p: float, l: float) -> Color:
    """HPLuv (h in degrees, p and l in [0, 1]); the result is clamped into gamut."""
    luv = luv_lch_to_luv(*hpluv_to_luv_lch(h, p, l))
    return from_linear_rgb(*xyz_to_linear_rgb(*luv_to_xyz_white_ref(*luv, HSLUV_D65))).clamped()


def from_hex(value: str) -> Color:
    """Alias of ``hex_decode``; raises ``HexParseError`` on malformed input."""
    return hex_decode(value)


def make_color(col: Union[Sequence[float], Any]) -> Tuple[Color, bool]:
    """
    Build a Color from an ``(r, g, b[, a])`` sequence or an object with
    ``r``, ``g``, ``b`` (and optionally ``a``) attributes.

    Channels are taken as-is in [0, 1]. A fully transparent input (``a == 0``)
    has no meaningful color and yields ``(Color(0, 0, 0), False)``.

    Returns:
        Tuple of (color, ok)
    """
    if isinstance(col, (tuple, list)):
        if len(col) not in (3, 4):
            raise ValueError(f"make_color expects 3 or 4 channels, got {len(col)}")
        r, g, b = col[0], col[1], col[2]
        a = col[3] if len(col) == 4 else 1.0
    else:
        r, g, b = col.r, col.g, col.b
        a = getattr(col, 'a', 1.0)

    if a == 0:
        return Color(0.0, 0.0, 0.0), False
    return Color(r, g, b), True
