from __future__ import annotations
from typing import List

from ..colors import Color, from_hsv
from ..conversions import lab_to_hcl
from ..utils.rand import RandomSource, default_random_source
from .soft import SoftPaletteSettings, soft_palette_with_rand


def fast_warm_palette_with_rand(count: int, rand: RandomSource) -> List[Color]:
    """
    Evenly spaced hues with dark, warm saturation and value.

    Fast and always succeeds, but the colors are not perceptually even; use
    ``warm_palette_with_rand`` when that matters.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    return [
        from_hsv(
            i * (360.0 / count),
            0.55 + rand.next_float64() * 0.2,
            0.35 + rand.next_float64() * 0.2,
        )
        for i in range(count)
    ]


def is_warm(l: float, a: float, b: float) -> bool:
    """Warm region of L*a*b*: chroma in [0.1, 0.4] and lightness in [0.2, 0.5]."""
    _, c, _ = lab_to_hcl(l, a, b)
    return 0.1 <= c <= 0.4 and 0.2 <= l <= 0.5


WARM_SETTINGS = SoftPaletteSettings(check_color=is_warm, iterations=50, many_samples=True)


def warm_palette_with_rand(count: int, rand: RandomSource) -> List[Color]:
    """Soft palette restricted to warm colors; raises ``PaletteGenerationError`` if infeasible."""
    return soft_palette_with_rand(count, WARM_SETTINGS, rand)


def fast_warm_palette(count: int) -> List[Color]:
    return fast_warm_palette_with_rand(count, default_random_source())


def warm_palette(count: int) -> List[Color]:
    return warm_palette_with_rand(count, default_random_source())
