"""
Single random colors.

The fast variants sample a box in HSV, which is cheap but gives uneven
perceived brightness. The slow variants sample a box in HCL and retry until
the color is inside sRGB; they look more consistent over many draws.

The retry loop of the slow variants has no cap. With the built-in ranges a
hit comes after a few draws on average.
"""

from __future__ import annotations

from ..colors import Color, from_hcl, from_hsv
from ..utils.rand import RandomSource, default_random_source


def fast_warm_color_with_rand(rand: RandomSource) -> Color:
    """A dark, warm color from HSV: s in [0.5, 0.8), v in [0.3, 0.6)."""
    return from_hsv(
        rand.next_float64() * 360.0,
        0.5 + rand.next_float64() * 0.3,
        0.3 + rand.next_float64() * 0.3,
    )


def fast_happy_color_with_rand(rand: RandomSource) -> Color:
    """A bright, saturated color from HSV: s in [0.7, 1.0), v in [0.6, 0.9)."""
    return from_hsv(
        rand.next_float64() * 360.0,
        0.7 + rand.next_float64() * 0.3,
        0.6 + rand.next_float64() * 0.3,
    )


def _random_hcl(rand: RandomSource, c_min: float, l_min: float) -> Color:
    return from_hcl(
        rand.next_float64() * 360.0,
        c_min + rand.next_float64() * 0.3,
        l_min + rand.next_float64() * 0.3,
    )


def warm_color_with_rand(rand: RandomSource) -> Color:
    """A dark, warm color from HCL: c in [0.1, 0.4), l in [0.2, 0.5)."""
    while True:
        color = _random_hcl(rand, 0.1, 0.2)
        if color.is_valid():
            return color


def happy_color_with_rand(rand: RandomSource) -> Color:
    """A bright, saturated color from HCL: c in [0.5, 0.8), l in [0.5, 0.8)."""
    while True:
        color = _random_hcl(rand, 0.5, 0.5)
        if color.is_valid():
            return color


def fast_warm_color() -> Color:
    return fast_warm_color_with_rand(default_random_source())


def fast_happy_color() -> Color:
    return fast_happy_color_with_rand(default_random_source())


def warm_color() -> Color:
    return warm_color_with_rand(default_random_source())


def happy_color() -> Color:
    return happy_color_with_rand(default_random_source())
