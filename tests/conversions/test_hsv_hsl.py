from chromapal.conversions import rgb_to_hsv, hsv_to_rgb, rgb_to_hsl, hsl_to_rgb
from ..samples import rgb_grid


def test_hsv_to_rgb_sample():
    r, g, b = hsv_to_rgb(216.0, 0.56, 0.722)
    assert abs(r - 0.31768) < 1e-4
    assert abs(g - 0.479408) < 1e-4
    assert abs(b - 0.722) < 1e-4


def test_rgb_to_hsl_sample():
    h, s, l = rgb_to_hsl(0.5, 0.3, 0.7)
    assert abs(h - 270.0) < 1e-9
    assert abs(s - 0.4) < 1e-9
    assert abs(l - 0.5) < 1e-9


def test_hsl_to_rgb_sample():
    r, g, b = hsl_to_rgb(270.0, 0.4, 0.5)
    assert abs(r - 0.5) < 1e-9
    assert abs(g - 0.3) < 1e-9
    assert abs(b - 0.7) < 1e-9


def test_grays_have_zero_hue_and_saturation():
    for v in (0.0, 0.25, 0.5, 1.0):
        assert rgb_to_hsv(v, v, v) == (0.0, 0.0, v)
        h, s, l = rgb_to_hsl(v, v, v)
        assert (h, s) == (0.0, 0.0)
        assert abs(l - v) < 1e-12


def test_hue_is_in_range():
    for rgb in rgb_grid:
        h, _, _ = rgb_to_hsv(*rgb)
        assert 0.0 <= h < 360.0
        h, _, _ = rgb_to_hsl(*rgb)
        assert 0.0 <= h < 360.0


def test_round_trip():
    for rgb in rgb_grid:
        back = hsv_to_rgb(*rgb_to_hsv(*rgb))
        assert all(abs(a - b) < 1e-9 for a, b in zip(rgb, back)), (rgb, back)
        back = hsl_to_rgb(*rgb_to_hsl(*rgb))
        assert all(abs(a - b) < 1e-9 for a, b in zip(rgb, back)), (rgb, back)
