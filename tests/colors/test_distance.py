from chromapal import (
    Color,
    from_lab,
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
    from_hsluv,
    from_hpluv,
)
from chromapal.colors import ciede2000_lab
from ..samples import samples_lab_distances, rgb_grid, almost_eq

all_distances = [
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
]

symmetric_distances = [
    distance_rgb,
    distance_linear_rgb,
    distance_riemersma,
    distance_lab,
    distance_luv,
    distance_ciede2000,
]

c1 = Color(150.0 / 255.0, 10.0 / 255.0, 150.0 / 255.0)
c2 = Color(53.0 / 255.0, 10.0 / 255.0, 150.0 / 255.0)


def test_reference_lab_distances():
    for (lab1, lab2), (cie76, cie94, ciede2000) in samples_lab_distances.items():
        col1 = from_lab(*lab1)
        col2 = from_lab(*lab2)
        assert almost_eq(distance_cie76(col1, col2), cie76)
        assert almost_eq(distance_cie94(col1, col2), cie94)
        assert almost_eq(distance_ciede2000(col1, col2), ciede2000)
        assert almost_eq(ciede2000_lab(lab1, lab2), ciede2000)


def test_distance_sample():
    assert abs(distance_rgb(c1, c2) - 0.3803921568627451) < 5e-6
    assert abs(distance_lab(c1, c2) - 0.320426) < 5e-5
    assert abs(distance_cie94(c1, c2) - 0.19795) < 5e-5


def test_methods_match_functions():
    assert c1.distance_rgb(c2) == distance_rgb(c1, c2)
    assert c1.distance_linear_rgb(c2) == distance_linear_rgb(c1, c2)
    assert c1.distance_riemersma(c2) == distance_riemersma(c1, c2)
    assert c1.distance_lab(c2) == distance_lab(c1, c2)
    assert c1.distance_cie76(c2) == distance_cie76(c1, c2)
    assert c1.distance_luv(c2) == distance_luv(c1, c2)
    assert c1.distance_hsluv(c2) == distance_hsluv(c1, c2)
    assert c1.distance_hpluv(c2) == distance_hpluv(c1, c2)
    assert c1.distance_cie94(c2) == distance_cie94(c1, c2)
    assert c1.distance_ciede2000(c2) == distance_ciede2000(c1, c2)
    assert c1.distance_ciede2000_klch(c2, 2.0, 1.0, 1.0) == distance_ciede2000_klch(c1, c2, 2.0, 1.0, 1.0)


def test_identity_and_non_negativity():
    for rgb in rgb_grid[::7]:
        c = Color(*rgb)
        for dist in all_distances:
            assert abs(dist(c, c)) < 1e-12, dist.__name__
            assert dist(c, c1) >= 0.0, dist.__name__


def test_symmetry():
    pairs = [(Color(*rgb_grid[i]), Color(*rgb_grid[-1 - i * 3])) for i in range(0, 100, 9)]
    for a, b in pairs:
        for dist in symmetric_distances:
            assert abs(dist(a, b) - dist(b, a)) < 1e-12, dist.__name__


def test_cie94_uses_first_color_as_reference():
    gray = Color(0.5, 0.5, 0.5)
    red = Color(1.0, 0.0, 0.0)
    assert distance_cie94(gray, red) > distance_cie94(red, gray)


def test_ciede2000_weights():
    for a, b in [(c1, c2), (Color(0.2, 0.4, 0.6), Color(0.9, 0.8, 0.1))]:
        assert distance_ciede2000_klch(a, b, 1.0, 1.0, 1.0) == distance_ciede2000(a, b)
        # Larger weights shrink the contribution of that term.
        assert distance_ciede2000_klch(a, b, 2.0, 2.0, 2.0) < distance_ciede2000(a, b)


def test_hsluv_distances_separate_hues():
    assert distance_hsluv(from_hsluv(0.0, 1.0, 0.5), from_hsluv(180.0, 1.0, 0.5)) > 0.0
    assert distance_hpluv(from_hpluv(0.0, 0.5, 0.5), from_hpluv(180.0, 0.5, 0.5)) > 0.0


def test_riemersma_sample():
    d = distance_riemersma(Color(1.0, 0.0, 0.0), Color(0.0, 0.0, 0.0))
    assert abs(d - (2.5 ** 0.5)) < 1e-12
