import math
from ..types.color_types import Triple
# No dependencies


def rgb_to_hsv(r: float, g: float, b: float) -> Triple:
    """
    Convert sRGB (0..1) to HSV.

    Output:
        h ∈ [0, 360)  (0 for achromatic colors)
        s ∈ [0, 1]
        v ∈ [0, 1]
    """
    min_ = min(r, g, b)
    v = max(r, g, b)
    chroma = v - min_

    s = 0.0
    if v != 0.0:
        s = chroma / v

    h = 0.0
    if min_ != v:
        if v == r:
            h = math.fmod((g - b) / chroma, 6.0)
        elif v == g:
            h = (b - r) / chroma + 2.0
        else:
            h = (r - g) / chroma + 4.0
        h *= 60.0
        if h < 0.0:
            h += 360.0
    return h, s, v


def hsv_to_rgb(h: float, s: float, v: float) -> Triple:
    """Convert HSV (h in [0, 360), s and v in [0, 1]) to sRGB."""
    hp = h / 60.0
    chroma = v * s
    x = chroma * (1.0 - abs(math.fmod(hp, 2.0) - 1.0))
    m = v - chroma

    r = g = b = 0.0
    if 0.0 <= hp < 1.0:
        r, g = chroma, x
    elif 1.0 <= hp < 2.0:
        r, g = x, chroma
    elif 2.0 <= hp < 3.0:
        g, b = chroma, x
    elif 3.0 <= hp < 4.0:
        g, b = x, chroma
    elif 4.0 <= hp < 5.0:
        r, b = x, chroma
    elif 5.0 <= hp < 6.0:
        r, b = chroma, x

    return m + r, m + g, m + b


def rgb_to_hsl(r: float, g: float, b: float) -> Triple:
    """Convert sRGB (0..1) to HSL; hue and saturation are 0 for grays."""
    min_ = min(r, g, b)
    max_ = max(r, g, b)

    l = (max_ + min_) / 2.0
    h = s = 0.0

    if min_ != max_:
        if l < 0.5:
            s = (max_ - min_) / (max_ + min_)
        else:
            s = (max_ - min_) / (2.0 - max_ - min_)

        if max_ == r:
            h = (g - b) / (max_ - min_)
        elif max_ == g:
            h = 2.0 + (b - r) / (max_ - min_)
        else:
            h = 4.0 + (r - g) / (max_ - min_)

        h *= 60.0
        if h < 0.0:
            h += 360.0

    return h, s, l


def _hsl_component(t: float, t1: float, t2: float) -> float:
    if 6.0 * t < 1.0:
        return t2 + (t1 - t2) * 6.0 * t
    if 2.0 * t < 1.0:
        return t1
    if 3.0 * t < 2.0:
        return t2 + (t1 - t2) * (2.0 / 3.0 - t) * 6.0
    return t2


def hsl_to_rgb(h: float, s: float, l: float) -> Triple:
    """Convert HSL (h in [0, 360), s and l in [0, 1]) to sRGB."""
    if s == 0.0:
        return l, l, l

    if l < 0.5:
        t1 = l * (1.0 + s)
    else:
        t1 = l + s - l * s
    t2 = 2.0 * l - t1

    h_norm = h / 360.0
    channels = []
    for t in (h_norm + 1.0 / 3.0, h_norm, h_norm - 1.0 / 3.0):
        if t < 0.0:
            t += 1.0
        if t > 1.0:
            t -= 1.0
        channels.append(_hsl_component(t, t1, t2))

    r, g, b = channels
    return r, g, b
