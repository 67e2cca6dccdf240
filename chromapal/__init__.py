"""Chromapal: color space conversions, perceptual distances, blending and palette generation."""

import logging

from .errors import ChromapalError, HexParseError, PaletteGenerationError
from .types import D65, D50, HSLUV_D65, DELTA
from .utils import (
    RandomSource,
    DefaultRandomSource,
    LCGRandomSource,
    interp_angle,
)
from .colors import (
    Color,
    hex_encode,
    hex_decode,
    from_hsv,
    from_hsl,
    from_linear_rgb,
    from_fast_linear_rgb,
    from_xyz,
    from_xyy,
    from_lab,
    from_lab_white_ref,
    from_luv,
    from_luv_white_ref,
    from_hcl,
    from_hcl_white_ref,
    from_luv_lch,
    from_luv_lch_white_ref,
    from_oklab,
    from_oklch,
    from_hsluv,
    from_hpluv,
    from_hex,
    make_color,
    distance_rgb,
    distance_linear_rgb,
    distance_riemersma,
    distance_lab,
    distance_cie76,
    distance_luv,
    distance_hsluv,
    distance_hpluv,
    distance_cie94,
    distance_ciede2000,
    distance_ciede2000_klch,
    BlendSpace,
    blend,
    blend_rgb,
    blend_linear_rgb,
    blend_hsv,
    blend_lab,
    blend_luv,
    blend_hcl,
    blend_luv_lch,
    blend_oklab,
    blend_oklch,
)
from .palettes import (
    LAB_DELTA,
    SoftPaletteSettings,
    soft_palette,
    soft_palette_with_rand,
    fast_warm_color,
    fast_warm_color_with_rand,
    fast_happy_color,
    fast_happy_color_with_rand,
    warm_color,
    warm_color_with_rand,
    happy_color,
    happy_color_with_rand,
    fast_warm_palette,
    fast_warm_palette_with_rand,
    warm_palette,
    warm_palette_with_rand,
    fast_happy_palette,
    fast_happy_palette_with_rand,
    happy_palette,
    happy_palette_with_rand,
)
from .sort import sorted_colors

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "ChromapalError", "HexParseError", "PaletteGenerationError",

    # Constants
    "D65", "D50", "HSLUV_D65", "DELTA", "LAB_DELTA",

    # Random sources
    "RandomSource", "DefaultRandomSource", "LCGRandomSource",
    "interp_angle",

    # Color and constructors
    "Color", "hex_encode", "hex_decode",
    "from_hsv", "from_hsl", "from_linear_rgb", "from_fast_linear_rgb",
    "from_xyz", "from_xyy",
    "from_lab", "from_lab_white_ref", "from_luv", "from_luv_white_ref",
    "from_hcl", "from_hcl_white_ref", "from_luv_lch", "from_luv_lch_white_ref",
    "from_oklab", "from_oklch", "from_hsluv", "from_hpluv",
    "from_hex", "make_color",

    # Distances
    "distance_rgb", "distance_linear_rgb", "distance_riemersma",
    "distance_lab", "distance_cie76", "distance_luv",
    "distance_hsluv", "distance_hpluv",
    "distance_cie94", "distance_ciede2000", "distance_ciede2000_klch",

    # Blends
    "BlendSpace", "blend",
    "blend_rgb", "blend_linear_rgb", "blend_hsv", "blend_lab", "blend_luv",
    "blend_hcl", "blend_luv_lch", "blend_oklab", "blend_oklch",

    # Palettes
    "SoftPaletteSettings", "soft_palette", "soft_palette_with_rand",
    "fast_warm_color", "fast_warm_color_with_rand",
    "fast_happy_color", "fast_happy_color_with_rand",
    "warm_color", "warm_color_with_rand",
    "happy_color", "happy_color_with_rand",
    "fast_warm_palette", "fast_warm_palette_with_rand",
    "warm_palette", "warm_palette_with_rand",
    "fast_happy_palette", "fast_happy_palette_with_rand",
    "happy_palette", "happy_palette_with_rand",

    # Sorting
    "sorted_colors",
]
