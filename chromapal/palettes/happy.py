from __future__ import annotations
from typing import List

from ..colors import Color, from_hsv
from ..conversions import lab_to_hcl
from ..utils.rand import RandomSource, default_random_source
from .soft import SoftPaletteSettings, soft_palette_with_rand


def fast_happy_palette_with_rand(count: int, rand: RandomSource) -> List[Color]:
    """Evenly spaced hues with high saturation and value."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return [
        from_hsv(
            i * (360.0 / count),
            0.8 + rand.next_float64() * 0.2,
            0.65 + rand.next_float64() * 0.2,
        )
        for i in range(count)
    ]


def is_happy(l: float, a: float, b: float) -> bool:
    """Happy region of L*a*b*: chroma and lightness both in [0.5, 0.8]."""
    _, c, _ = lab_to_hcl(l, a, b)
    return 0.5 <= c <= 0.8 and 0.5 <= l <= 0.8


HAPPY_SETTINGS = SoftPaletteSettings(check_color=is_happy, iterations=50, many_samples=True)


def happy_palette_with_rand(count: int, rand: RandomSource) -> List[Color]:
    """Soft palette restricted to happy colors; raises ``PaletteGenerationError`` if infeasible."""
    return soft_palette_with_rand(count, HAPPY_SETTINGS, rand)


def fast_happy_palette(count: int) -> List[Color]:
    return fast_happy_palette_with_rand(count, default_random_source())


def happy_palette(count: int) -> List[Color]:
    return happy_palette_with_rand(count, default_random_source())
