"""
Chromapal Palettes
==================

Random colors and palettes. Every generator has a ``*_with_rand`` form that
takes an explicit ``RandomSource`` and a convenience form that builds an
unseeded ``DefaultRandomSource`` per call.

Single colors:
    fast_warm_color, fast_happy_color       (HSV box, always succeeds)
    warm_color, happy_color                 (HCL box, rejection sampled)

Palettes:
    fast_warm_palette, fast_happy_palette   (evenly spaced HSV hues)
    warm_palette, happy_palette             (soft palettes with a preset constraint)
    soft_palette                            (k-means in L*a*b*, custom constraint)

Usage
-----
>>> from chromapal.palettes import SoftPaletteSettings, soft_palette_with_rand
>>> from chromapal.utils import LCGRandomSource
>>> settings = SoftPaletteSettings(check_color=lambda l, a, b: l > 0.5)
>>> colors = soft_palette_with_rand(5, settings, LCGRandomSource(42))
"""

from .soft import (
    LAB_DELTA,
    SoftPaletteSettings,
    sample_lab_space,
    cluster_lab_samples,
    soft_palette,
    soft_palette_with_rand,
)
from .generators import (
    fast_warm_color,
    fast_warm_color_with_rand,
    fast_happy_color,
    fast_happy_color_with_rand,
    warm_color,
    warm_color_with_rand,
    happy_color,
    happy_color_with_rand,
)
from .warm import (
    is_warm,
    fast_warm_palette,
    fast_warm_palette_with_rand,
    warm_palette,
    warm_palette_with_rand,
)
from .happy import (
    is_happy,
    fast_happy_palette,
    fast_happy_palette_with_rand,
    happy_palette,
    happy_palette_with_rand,
)

__all__ = [
    # Soft palettes
    'LAB_DELTA',
    'SoftPaletteSettings',
    'sample_lab_space',
    'cluster_lab_samples',
    'soft_palette',
    'soft_palette_with_rand',

    # Single colors
    'fast_warm_color',
    'fast_warm_color_with_rand',
    'fast_happy_color',
    'fast_happy_color_with_rand',
    'warm_color',
    'warm_color_with_rand',
    'happy_color',
    'happy_color_with_rand',

    # Warm / happy palettes
    'is_warm',
    'fast_warm_palette',
    'fast_warm_palette_with_rand',
    'warm_palette',
    'warm_palette_with_rand',
    'is_happy',
    'fast_happy_palette',
    'fast_happy_palette_with_rand',
    'happy_palette',
    'happy_palette_with_rand',
]
