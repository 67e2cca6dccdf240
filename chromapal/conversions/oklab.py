import math
from ..types.color_types import Triple
# No dependencies


def xyz_to_oklab(x: float, y: float, z: float) -> Triple:
    """Convert CIE XYZ (D65) to OkLab."""
    l_ = math.cbrt(0.8189330101 * x + 0.3618667424 * y - 0.1288597137 * z)
    m_ = math.cbrt(0.0329845436 * x + 0.9293118715 * y + 0.0361456387 * z)
    s_ = math.cbrt(0.0482003018 * x + 0.2643662691 * y + 0.633851707 * z)
    l = 0.2104542553 * l_ + 0.793617785 * m_ - 0.0040720468 * s_
    a = 1.9779984951 * l_ - 2.428592205 * m_ + 0.4505937099 * s_
    b = 0.0259040371 * l_ + 0.7827717662 * m_ - 0.808675766 * s_
    return l, a, b


def oklab_to_xyz(l: float, a: float, b: float) -> Triple:
    """Convert OkLab to CIE XYZ (D65)."""
    l_ = 0.9999999984505196 * l + 0.39633779217376774 * a + 0.2158037580607588 * b
    m_ = 1.0000000088817607 * l - 0.10556134232365633 * a - 0.0638541747717059 * b
    s_ = 1.0000000546724108 * l - 0.08948418209496574 * a - 1.2914855378640917 * b

    ll = l_ ** 3
    m = m_ ** 3
    s = s_ ** 3

    x = 1.2270138511035211 * ll - 0.55779998065182224 * m + 0.28125614896646783 * s
    y = -0.040580178423280593 * ll + 1.11225686961683 * m - 0.071676678665601193 * s
    z = -0.076381284505706901 * ll - 0.42148197841801271 * m + 1.5861632204407949 * s
    return x, y, z


def oklab_to_oklch(l: float, a: float, b: float) -> Triple:
    """OkLab -> (l, c, h) with h in degrees, [0, 360)."""
    c = math.sqrt(a * a + b * b)
    h = math.atan2(b, a)
    if h < 0.0:
        h += 2.0 * math.pi
    return l, c, h * 180.0 / math.pi


def oklch_to_oklab(l: float, c: float, h: float) -> Triple:
    h_rad = h * math.pi / 180.0
    return l, c * math.cos(h_rad), c * math.sin(h_rad)
