"""
Chromapal Color Space Conversions
=================================

Pure functions on float triples. sRGB channels are floats in [0, 1]; out of
range inputs are passed through unchanged so callers can detect them with
``Color.is_valid()``.

Features
--------
- sRGB companding, exact and polynomial-fast
- RGB ↔ HSV ↔ HSL
- linear RGB ↔ XYZ ↔ xyY / L*a*b* / L*u*v*, with custom reference whites
- polar forms: HCL (LCh(ab)) and LCh(uv)
- OkLab ↔ OkLch
- LCh(uv) ↔ HSLuv / HPLuv
- Vectorized numpy twins (``np_`` prefix) for the paths used in bulk

Conversion Functions
--------------------

Gamma:
    linearize(v), delinearize(v)
    linearize_fast(v), delinearize_fast(v)
    np_linearize(v), np_delinearize(v)

HSV / HSL:
    rgb_to_hsv(r, g, b), hsv_to_rgb(h, s, v)
    rgb_to_hsl(r, g, b), hsl_to_rgb(h, s, l)

CIE:
    linear_rgb_to_xyz(r, g, b), xyz_to_linear_rgb(x, y, z)
    xyz_to_xyy(x, y, z), xyz_to_xyy_white_ref(x, y, z, wref), xyy_to_xyz(x, y, Y)
    xyz_to_lab(x, y, z), lab_to_xyz(l, a, b)        (+ _white_ref variants)
    xyz_to_luv(x, y, z), luv_to_xyz(l, u, v)        (+ _white_ref variants)
    lab_to_hcl(l, a, b), hcl_to_lab(h, c, l)
    luv_to_luv_lch(l, u, v), luv_lch_to_luv(l, c, h)
    np_linear_rgb_to_xyz, np_xyz_to_linear_rgb
    np_xyz_to_lab_white_ref, np_lab_to_xyz_white_ref

OkLab:
    xyz_to_oklab(x, y, z), oklab_to_xyz(l, a, b)
    oklab_to_oklch(l, a, b), oklch_to_oklab(l, c, h)

HSLuv / HPLuv:
    luv_lch_to_hsluv(l, c, h), hsluv_to_luv_lch(h, s, l)
    luv_lch_to_hpluv(l, c, h), hpluv_to_luv_lch(h, p, l)
    max_chroma_for_lh(l, h), max_safe_chroma_for_l(l)

Examples
--------
>>> from chromapal.conversions import linearize, linear_rgb_to_xyz, xyz_to_lab
>>> r, g, b = (linearize(v) for v in (1.0, 0.0, 0.0))
>>> xyz_to_lab(*linear_rgb_to_xyz(r, g, b))
(0.5324..., 0.8009..., 0.6720...)
"""

from .gamma import (
    linearize,
    delinearize,
    linearize_fast,
    delinearize_fast,
    np_linearize,
    np_delinearize,
)

from .hsv_hsl import rgb_to_hsv, hsv_to_rgb, rgb_to_hsl, hsl_to_rgb

from .cie import (
    linear_rgb_to_xyz,
    xyz_to_linear_rgb,
    np_linear_rgb_to_xyz,
    np_xyz_to_linear_rgb,
    xyz_to_xyy,
    xyz_to_xyy_white_ref,
    xyy_to_xyz,
    xyz_to_lab,
    xyz_to_lab_white_ref,
    lab_to_xyz,
    lab_to_xyz_white_ref,
    np_xyz_to_lab_white_ref,
    np_lab_to_xyz_white_ref,
    xyz_to_luv,
    xyz_to_luv_white_ref,
    luv_to_xyz,
    luv_to_xyz_white_ref,
    lab_to_hcl,
    hcl_to_lab,
    luv_to_luv_lch,
    luv_lch_to_luv,
)

from .oklab import xyz_to_oklab, oklab_to_xyz, oklab_to_oklch, oklch_to_oklab

from .hsluv import (
    luv_lch_to_hsluv,
    hsluv_to_luv_lch,
    luv_lch_to_hpluv,
    hpluv_to_luv_lch,
    max_chroma_for_lh,
    max_safe_chroma_for_l,
)

__all__ = [
    # Gamma
    'linearize',
    'delinearize',
    'linearize_fast',
    'delinearize_fast',
    'np_linearize',
    'np_delinearize',

    # HSV / HSL
    'rgb_to_hsv',
    'hsv_to_rgb',
    'rgb_to_hsl',
    'hsl_to_rgb',

    # CIE
    'linear_rgb_to_xyz',
    'xyz_to_linear_rgb',
    'np_linear_rgb_to_xyz',
    'np_xyz_to_linear_rgb',
    'xyz_to_xyy',
    'xyz_to_xyy_white_ref',
    'xyy_to_xyz',
    'xyz_to_lab',
    'xyz_to_lab_white_ref',
    'lab_to_xyz',
    'lab_to_xyz_white_ref',
    'np_xyz_to_lab_white_ref',
    'np_lab_to_xyz_white_ref',
    'xyz_to_luv',
    'xyz_to_luv_white_ref',
    'luv_to_xyz',
    'luv_to_xyz_white_ref',
    'lab_to_hcl',
    'hcl_to_lab',
    'luv_to_luv_lch',
    'luv_lch_to_luv',

    # OkLab
    'xyz_to_oklab',
    'oklab_to_xyz',
    'oklab_to_oklch',
    'oklch_to_oklab',

    # HSLuv / HPLuv
    'luv_lch_to_hsluv',
    'hsluv_to_luv_lch',
    'luv_lch_to_hpluv',
    'hpluv_to_luv_lch',
    'max_chroma_for_lh',
    'max_safe_chroma_for_l',
]
