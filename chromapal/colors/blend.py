"""
Blending two colors by interpolating their coordinates in a color space.

Only the HCL and OkLch blends clamp their result; the others can leave the
sRGB gamut for some pairs and report it through ``Color.is_valid()``.

``t == 0`` and ``t == 1`` return the end colors themselves, since converting
into a space and back is only approximately the identity.
"""

from __future__ import annotations
from enum import Enum
from typing import Callable, Dict, Union

from ..utils.num_utils import interp_angle
from .color import Color
from .constructors import (
    from_linear_rgb,
    from_hsv,
    from_lab,
    from_luv,
    from_hcl,
    from_luv_lch,
    from_oklab,
    from_oklch,
)

# Chroma below which a color counts as achromatic and borrows the other hue.
ACHROMATIC_CHROMA = 0.00015


class BlendSpace(str, Enum):
    RGB = 'rgb'
    LINEAR_RGB = 'linear_rgb'
    HSV = 'hsv'
    LAB = 'lab'
    LUV = 'luv'
    HCL = 'hcl'
    LUV_LCH = 'luv_lch'
    OKLAB = 'oklab'
    OKLCH = 'oklch'


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def _endpoint(c1: Color, c2: Color, t: float):
    if t == 0.0:
        return c1
    if t == 1.0:
        return c2
    return None


def blend_rgb(c1: Color, c2: Color, t: float) -> Color:
    """Blend in sRGB. Usually looks muddy in the middle; prefer Lab or HCL."""
    if (end := _endpoint(c1, c2, t)) is not None:
        return end
    return Color(_lerp(c1.r, c2.r, t), _lerp(c1.g, c2.g, t), _lerp(c1.b, c2.b, t))


def blend_linear_rgb(c1: Color, c2: Color, t: float) -> Color:
    if (end := _endpoint(c1, c2, t)) is not None:
        return end
    r1, g1, b1 = c1.linear_rgb()
    r2, g2, b2 = c2.linear_rgb()
    return from_linear_rgb(_lerp(r1, r2, t), _lerp(g1, g2, t), _lerp(b1, b2, t))


def blend_hsv(c1: Color, c2: Color, t: float) -> Color:
    if (end := _endpoint(c1, c2, t)) is not None:
        return end
    h1, s1, v1 = c1.hsv()
    h2, s2, v2 = c2.hsv()

    # A gray has no hue of its own; take the other one to avoid a hue sweep.
    if s1 == 0.0 and s2 != 0.0:
        h1 = h2
    elif s2 == 0.0 and s1 != 0.0:
        h2 = h1

    return from_hsv(interp_angle(h1, h2, t), _lerp(s1, s2, t), _lerp(v1, v2, t))


def blend_lab(c1: Color, c2: Color, t: float) -> Color:
    if (end := _endpoint(c1, c2, t)) is not None:
        return end
    l1, a1, b1 = c1.lab()
    l2, a2, b2 = c2.lab()
    return from_lab(_lerp(l1, l2, t), _lerp(a1, a2, t), _lerp(b1, b2, t))


def blend_luv(c1: Color, c2: Color, t: float) -> Color:
    if (end := _endpoint(c1, c2, t)) is not None:
        return end
    l1, u1, v1 = c1.luv()
    l2, u2, v2 = c2.luv()
    return from_luv(_lerp(l1, l2, t), _lerp(u1, u2, t), _lerp(v1, v2, t))


def blend_hcl(c1: Color, c2: Color, t: float) -> Color:
    """Blend in HCL. Generally gives the nicest gradients; the result is clamped."""
    if (end := _endpoint(c1, c2, t)) is not None:
        return end.clamped()
    h1, ch1, l1 = c1.hcl()
    h2, ch2, l2 = c2.hcl()

    if ch1 <= ACHROMATIC_CHROMA and ch2 >= ACHROMATIC_CHROMA:
        h1 = h2
    elif ch2 <= ACHROMATIC_CHROMA and ch1 >= ACHROMATIC_CHROMA:
        h2 = h1

    return from_hcl(interp_angle(h1, h2, t), _lerp(ch1, ch2, t), _lerp(l1, l2, t)).clamped()


def blend_luv_lch(c1: Color, c2: Color, t: float) -> Color:
    if (end := _endpoint(c1, c2, t)) is not None:
        return end
    l1, ch1, h1 = c1.luv_lch()
    l2, ch2, h2 = c2.luv_lch()
    return from_luv_lch(_lerp(l1, l2, t), _lerp(ch1, ch2, t), interp_angle(h1, h2, t))


def blend_oklab(c1: Color, c2: Color, t: float) -> Color:
    if (end := _endpoint(c1, c2, t)) is not None:
        return end
    l1, a1, b1 = c1.oklab()
    l2, a2, b2 = c2.oklab()
    return from_oklab(_lerp(l1, l2, t), _lerp(a1, a2, t), _lerp(b1, b2, t))


def blend_oklch(c1: Color, c2: Color, t: float) -> Color:
    """Blend in OkLch; the result is clamped."""
    if (end := _endpoint(c1, c2, t)) is not None:
        return end.clamped()
    l1, ch1, h1 = c1.oklch()
    l2, ch2, h2 = c2.oklch()

    if ch1 <= ACHROMATIC_CHROMA and ch2 >= ACHROMATIC_CHROMA:
        h1 = h2
    elif ch2 <= ACHROMATIC_CHROMA and ch1 >= ACHROMATIC_CHROMA:
        h2 = h1

    return from_oklch(_lerp(l1, l2, t), _lerp(ch1, ch2, t), interp_angle(h1, h2, t)).clamped()


blend_functions: Dict[BlendSpace, Callable[[Color, Color, float], Color]] = {
    BlendSpace.RGB: blend_rgb,
    BlendSpace.LINEAR_RGB: blend_linear_rgb,
    BlendSpace.HSV: blend_hsv,
    BlendSpace.LAB: blend_lab,
    BlendSpace.LUV: blend_luv,
    BlendSpace.HCL: blend_hcl,
    BlendSpace.LUV_LCH: blend_luv_lch,
    BlendSpace.OKLAB: blend_oklab,
    BlendSpace.OKLCH: blend_oklch,
}


def blend(c1: Color, c2: Color, t: float, space: Union[BlendSpace, str] = BlendSpace.LAB) -> Color:
    """
    Blend two colors in the given space.

    Args:
        c1: Color at ``t == 0``
        c2: Color at ``t == 1``
        t: Interpolation coefficient, usually in [0, 1]
        space: A ``BlendSpace`` or its string value, e.g. ``"hcl"``

    Returns:
        The blended color
    """
    try:
        space = BlendSpace(space)
    except ValueError:
        raise ValueError(
            f"Unsupported blend space: {space!r}. Expected one of {[s.value for s in BlendSpace]}"
        ) from None
    return blend_functions[space](c1, c2, t)


Color.blend_rgb = blend_rgb
Color.blend_linear_rgb = blend_linear_rgb
Color.blend_hsv = blend_hsv
Color.blend_lab = blend_lab
Color.blend_luv = blend_luv
Color.blend_hcl = blend_hcl
Color.blend_luv_lch = blend_luv_lch
Color.blend_oklab = blend_oklab
Color.blend_oklch = blend_oklch
Color.blend = blend
