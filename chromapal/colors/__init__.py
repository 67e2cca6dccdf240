"""
Chromapal Color Type
====================

``Color`` is an immutable sRGB triple. Conversions to other spaces are
methods (``c.lab()``, ``c.hsluv()``); building a color from another space
goes through the ``from_<space>`` constructors. Distances, blends and hex
formatting are plain functions that are also attached to ``Color`` as
methods.

Usage
-----
>>> from chromapal.colors import Color, from_hcl, hex_decode
>>> c1 = hex_decode("#1a1a46")
>>> c2 = from_hcl(120.0, 0.4, 0.6)
>>> c1.distance_ciede2000(c2)
>>> c1.blend_hcl(c2, 0.5).hex()
"""

from .color import Color
from .hex import hex_encode, hex_decode
from .constructors import (
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
)
from .distance import (
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
    ciede2000_lab,
)
from .blend import (
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

__all__ = [
    'Color',
    'hex_encode',
    'hex_decode',

    # Constructors
    'from_hsv',
    'from_hsl',
    'from_linear_rgb',
    'from_fast_linear_rgb',
    'from_xyz',
    'from_xyy',
    'from_lab',
    'from_lab_white_ref',
    'from_luv',
    'from_luv_white_ref',
    'from_hcl',
    'from_hcl_white_ref',
    'from_luv_lch',
    'from_luv_lch_white_ref',
    'from_oklab',
    'from_oklch',
    'from_hsluv',
    'from_hpluv',
    'from_hex',
    'make_color',

    # Distances
    'distance_rgb',
    'distance_linear_rgb',
    'distance_riemersma',
    'distance_lab',
    'distance_cie76',
    'distance_luv',
    'distance_hsluv',
    'distance_hpluv',
    'distance_cie94',
    'distance_ciede2000',
    'distance_ciede2000_klch',
    'ciede2000_lab',

    # Blends
    'BlendSpace',
    'blend',
    'blend_rgb',
    'blend_linear_rgb',
    'blend_hsv',
    'blend_lab',
    'blend_luv',
    'blend_hcl',
    'blend_luv_lch',
    'blend_oklab',
    'blend_oklch',
]
