from __future__ import annotations
import math
from typing import Callable, Iterator, Tuple

from ..conversions import (
    linearize,
    linearize_fast,
    rgb_to_hsv,
    rgb_to_hsl,
    linear_rgb_to_xyz,
    xyz_to_xyy_white_ref,
    xyz_to_lab_white_ref,
    xyz_to_luv_white_ref,
    lab_to_hcl,
    luv_to_luv_lch,
    xyz_to_oklab,
    oklab_to_oklch,
    luv_lch_to_hsluv,
    luv_lch_to_hpluv,
)
from ..types.color_types import Triple, WhiteRef
from ..types.white_point import D65, HSLUV_D65, DELTA
from ..utils.num_utils import clamp01


class Color:
    """
    An sRGB color with float channels.

    Channels are normally in [0, 1] but are not clamped on construction:
    conversions from wider spaces can land outside the gamut, which
    ``is_valid()`` reports and ``clamped()`` fixes.

    Instances are immutable and hashable.
    """
    __slots__ = ('r', 'g', 'b', '_is_frozen')

    # Attached from sibling modules (distance.py, blend.py, hex.py).
    hex: Callable[[Color], str]
    distance_rgb: Callable[[Color, Color], float]
    distance_linear_rgb: Callable[[Color, Color], float]
    distance_riemersma: Callable[[Color, Color], float]
    distance_lab: Callable[[Color, Color], float]
    distance_cie76: Callable[[Color, Color], float]
    distance_luv: Callable[[Color, Color], float]
    distance_hsluv: Callable[[Color, Color], float]
    distance_hpluv: Callable[[Color, Color], float]
    distance_cie94: Callable[[Color, Color], float]
    distance_ciede2000: Callable[[Color, Color], float]
    distance_ciede2000_klch: Callable[[Color, Color, float, float, float], float]
    blend_rgb: Callable[[Color, Color, float], Color]
    blend_linear_rgb: Callable[[Color, Color, float], Color]
    blend_hsv: Callable[[Color, Color, float], Color]
    blend_lab: Callable[[Color, Color, float], Color]
    blend_luv: Callable[[Color, Color, float], Color]
    blend_hcl: Callable[[Color, Color, float], Color]
    blend_luv_lch: Callable[[Color, Color, float], Color]
    blend_oklab: Callable[[Color, Color, float], Color]
    blend_oklch: Callable[[Color, Color, float], Color]
    blend: Callable[..., Color]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, r: float, g: float, b: float) -> None:
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)
        super().__setattr__('_is_frozen', True)

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[float]:
        return iter((self.r, self.g, self.b))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (self.r, self.g, self.b) == (other.r, other.g, other.b)

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))

    def __repr__(self) -> str:
        return f"Color(r={self.r!r}, g={self.g!r}, b={self.b!r})"

    def values(self) -> Triple:
        return self.r, self.g, self.b

    def rgba(self) -> Tuple[int, int, int, int]:
        """16-bit channels plus an opaque alpha of ``0xffff``."""
        return (
            math.floor(self.r * 65535.0 + 0.5),
            math.floor(self.g * 65535.0 + 0.5),
            math.floor(self.b * 65535.0 + 0.5),
            0xFFFF,
        )

    def rgb255(self) -> Tuple[int, int, int]:
        return (
            math.floor(self.r * 255.0 + 0.5),
            math.floor(self.g * 255.0 + 0.5),
            math.floor(self.b * 255.0 + 0.5),
        )

    def is_valid(self) -> bool:
        """Check whether the color is inside the sRGB gamut, i.e. every channel is in [0, 1]."""
        return 0.0 <= self.r <= 1.0 and 0.0 <= self.g <= 1.0 and 0.0 <= self.b <= 1.0

    def clamped(self) -> Color:
        return Color(clamp01(self.r), clamp01(self.g), clamp01(self.b))

    def almost_equal_rgb(self, other: Color) -> bool:
        """Equality within a summed channel tolerance of ``3 * DELTA`` (DELTA = 1/255)."""
        return (
            abs(self.r - other.r) + abs(self.g - other.g) + abs(self.b - other.b)
            < 3.0 * DELTA
        )

    # ------------------ CONVERSIONS ------------------
    def hsv(self) -> Triple:
        return rgb_to_hsv(self.r, self.g, self.b)

    def hsl(self) -> Triple:
        return rgb_to_hsl(self.r, self.g, self.b)

    def linear_rgb(self) -> Triple:
        return linearize(self.r), linearize(self.g), linearize(self.b)

    def fast_linear_rgb(self) -> Triple:
        """Polynomial approximation of ``linear_rgb``; only meaningful for valid colors."""
        return linearize_fast(self.r), linearize_fast(self.g), linearize_fast(self.b)

    def xyz(self) -> Triple:
        return linear_rgb_to_xyz(*self.linear_rgb())

    def xyy(self) -> Triple:
        return self.xyy_white_ref(D65)

    def xyy_white_ref(self, wref: WhiteRef) -> Triple:
        return xyz_to_xyy_white_ref(*self.xyz(), wref)

    def lab(self) -> Triple:
        return self.lab_white_ref(D65)

    def lab_white_ref(self, wref: WhiteRef) -> Triple:
        return xyz_to_lab_white_ref(*self.xyz(), wref)

    def luv(self) -> Triple:
        return self.luv_white_ref(D65)

    def luv_white_ref(self, wref: WhiteRef) -> Triple:
        return xyz_to_luv_white_ref(*self.xyz(), wref)

    def hcl(self) -> Triple:
        """LCh(ab) in (h, c, l) order."""
        return self.hcl_white_ref(D65)

    def hcl_white_ref(self, wref: WhiteRef) -> Triple:
        return lab_to_hcl(*self.lab_white_ref(wref))

    def luv_lch(self) -> Triple:
        return self.luv_lch_white_ref(D65)

    def luv_lch_white_ref(self, wref: WhiteRef) -> Triple:
        return luv_to_luv_lch(*self.luv_white_ref(wref))

    def oklab(self) -> Triple:
        return xyz_to_oklab(*self.xyz())

    def oklch(self) -> Triple:
        return oklab_to_oklch(*self.oklab())

    def hsluv(self) -> Triple:
        return luv_lch_to_hsluv(*self.luv_lch_white_ref(HSLUV_D65))

    def hpluv(self) -> Triple:
        return luv_lch_to_hpluv(*self.luv_lch_white_ref(HSLUV_D65))
