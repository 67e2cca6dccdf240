"""
Color difference metrics.

Every function takes two colors and returns a non-negative float; each is
also attached to ``Color`` as a method (``c1.distance_lab(c2)``).

The Lab based metrics use lightness in [0, 1]; CIE94 and CIEDE2000 scale to
the usual [0, 100] range internally and scale the result back by 0.01.
"""

from __future__ import annotations
import math

from ..types.color_types import Triple
from ..utils.num_utils import sq
from .color import Color


def _euclidean(p: Triple, q: Triple) -> float:
    return math.sqrt(sq(p[0] - q[0]) + sq(p[1] - q[1]) + sq(p[2] - q[2]))


def distance_rgb(c1: Color, c2: Color) -> float:
    """Euclidean distance in sRGB. Cheap but not perceptually uniform."""
    return _euclidean(c1.values(), c2.values())


def distance_linear_rgb(c1: Color, c2: Color) -> float:
    return _euclidean(c1.linear_rgb(), c2.linear_rgb())


def distance_riemersma(c1: Color, c2: Color) -> float:
    """Thiadmer Riemersma's low-cost approximation, weighting channels by mean red."""
    r_avg = (c1.r + c2.r) / 2.0
    dr = c1.r - c2.r
    dg = c1.g - c2.g
    db = c1.b - c2.b
    return math.sqrt((2 + r_avg) * dr * dr + 4 * dg * dg + (2 + (1 - r_avg)) * db * db)


def distance_lab(c1: Color, c2: Color) -> float:
    return _euclidean(c1.lab(), c2.lab())


def distance_cie76(c1: Color, c2: Color) -> float:
    """Same as ``distance_lab``."""
    return distance_lab(c1, c2)


def distance_luv(c1: Color, c2: Color) -> float:
    return _euclidean(c1.luv(), c2.luv())


def _distance_hue_first(p: Triple, q: Triple) -> float:
    # Hue in degrees is scaled down to be commensurate with s and l.
    return math.sqrt(sq((p[0] - q[0]) / 100.0) + sq(p[1] - q[1]) + sq(p[2] - q[2]))


def distance_hsluv(c1: Color, c2: Color) -> float:
    return _distance_hue_first(c1.hsluv(), c2.hsluv())


def distance_hpluv(c1: Color, c2: Color) -> float:
    return _distance_hue_first(c1.hpluv(), c2.hpluv())


def distance_cie94(c1: Color, c2: Color) -> float:
    """
    CIE94 color difference with graphic-arts weights.

    The chroma-dependent weights come from ``c1``, the reference color, so
    the metric is not symmetric for colors of different chroma.
    """
    l1, a1, b1 = (v * 100.0 for v in c1.lab())
    l2, a2, b2 = (v * 100.0 for v in c2.lab())

    kl = kc = kh = 1.0
    k1 = 0.045
    k2 = 0.015

    delta_l = l1 - l2
    chroma1 = math.sqrt(sq(a1) + sq(b1))
    chroma2 = math.sqrt(sq(a2) + sq(b2))
    delta_cab = chroma1 - chroma2

    # Not taking the sqrt: it would be squared again below.
    delta_hab2 = sq(a1 - a2) + sq(b1 - b2) - sq(delta_cab)
    sl = 1.0
    sc = 1.0 + k1 * chroma1
    sh = 1.0 + k2 * chroma1

    v_l2 = sq(delta_l / (kl * sl))
    v_c2 = sq(delta_cab / (kc * sc))
    v_h2 = delta_hab2 / sq(kh * sh)

    return math.sqrt(v_l2 + v_c2 + v_h2) * 0.01


def _prime_hue(b: float, ap: float) -> float:
    if b == ap and ap == 0.0:
        return 0.0
    hp = math.atan2(b, ap)
    if hp < 0.0:
        hp += math.pi * 2.0
    return hp * (180.0 / math.pi)


def ciede2000_lab(lab1: Triple, lab2: Triple, kl: float = 1.0, kc: float = 1.0, kh: float = 1.0) -> float:
    """
    CIEDE2000 on two Lab triples with lightness in [0, 1].

    Args:
        lab1: Reference color in L*a*b*
        lab2: Sample color in L*a*b*
        kl: Lightness weight
        kc: Chroma weight
        kh: Hue weight

    Returns:
        Delta E 2000, scaled by 0.01
    """
    l1, a1, b1 = (v * 100.0 for v in lab1)
    l2, a2, b2 = (v * 100.0 for v in lab2)

    cab1 = math.sqrt(sq(a1) + sq(b1))
    cab2 = math.sqrt(sq(a2) + sq(b2))
    cabmean = (cab1 + cab2) / 2.0

    g = 0.5 * (1.0 - math.sqrt(cabmean ** 7 / (cabmean ** 7 + 25.0 ** 7)))
    ap1 = (1.0 + g) * a1
    ap2 = (1.0 + g) * a2
    cp1 = math.sqrt(sq(ap1) + sq(b1))
    cp2 = math.sqrt(sq(ap2) + sq(b2))

    hp1 = _prime_hue(b1, ap1)
    hp2 = _prime_hue(b2, ap2)

    delta_lp = l2 - l1
    delta_cp = cp2 - cp1
    cp_product = cp1 * cp2

    dhp = 0.0
    if cp_product != 0.0:
        dhp = hp2 - hp1
        if dhp > 180.0:
            dhp -= 360.0
        elif dhp < -180.0:
            dhp += 360.0
    delta_hp = 2.0 * math.sqrt(cp_product) * math.sin(dhp / 2.0 * math.pi / 180.0)

    lpmean = (l1 + l2) / 2.0
    cpmean = (cp1 + cp2) / 2.0
    # With a zero chroma the hue is meaningless; the mean is then the plain sum.
    hpmean = hp1 + hp2
    if cp_product != 0.0:
        hpmean /= 2.0
        if abs(hp1 - hp2) > 180.0:
            if hp1 + hp2 < 360.0:
                hpmean += 180.0
            else:
                hpmean -= 180.0

    t = (
        1.0
        - 0.17 * math.cos((hpmean - 30.0) * math.pi / 180.0)
        + 0.24 * math.cos(2.0 * hpmean * math.pi / 180.0)
        + 0.32 * math.cos((3.0 * hpmean + 6.0) * math.pi / 180.0)
        - 0.2 * math.cos((4.0 * hpmean - 63.0) * math.pi / 180.0)
    )
    delta_theta = 30.0 * math.exp(-sq((hpmean - 275.0) / 25.0))
    rc = 2.0 * math.sqrt(cpmean ** 7 / (cpmean ** 7 + 25.0 ** 7))
    sl = 1.0 + 0.015 * sq(lpmean - 50.0) / math.sqrt(20.0 + sq(lpmean - 50.0))
    sc = 1.0 + 0.045 * cpmean
    sh = 1.0 + 0.015 * cpmean * t
    rt = -math.sin(2.0 * delta_theta * math.pi / 180.0) * rc

    return math.sqrt(
        sq(delta_lp / (kl * sl))
        + sq(delta_cp / (kc * sc))
        + sq(delta_hp / (kh * sh))
        + rt * (delta_cp / (kc * sc)) * (delta_hp / (kh * sh))
    ) * 0.01


def distance_ciede2000(c1: Color, c2: Color) -> float:
    return ciede2000_lab(c1.lab(), c2.lab())


def distance_ciede2000_klch(c1: Color, c2: Color, kl: float, kc: float, kh: float) -> float:
    """CIEDE2000 with custom lightness, chroma and hue weights."""
    return ciede2000_lab(c1.lab(), c2.lab(), kl, kc, kh)


Color.distance_rgb = distance_rgb
Color.distance_linear_rgb = distance_linear_rgb
Color.distance_riemersma = distance_riemersma
Color.distance_lab = distance_lab
Color.distance_cie76 = distance_cie76
Color.distance_luv = distance_luv
Color.distance_hsluv = distance_hsluv
Color.distance_hpluv = distance_hpluv
Color.distance_cie94 = distance_cie94
Color.distance_ciede2000 = distance_ciede2000
Color.distance_ciede2000_klch = distance_ciede2000_klch
