import numpy as np

from chromapal.conversions import (
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
    np_xyz_to_lab_white_ref,
    np_lab_to_xyz_white_ref,
    xyz_to_luv,
    luv_to_xyz,
    lab_to_hcl,
    hcl_to_lab,
    luv_to_luv_lch,
    luv_lch_to_luv,
)
from chromapal.types import D50, D65
from ..samples import reference_colors, almost_eq_triple


def test_matrices_are_inverse():
    for xyz in [c["xyz"] for c in reference_colors]:
        back = linear_rgb_to_xyz(*xyz_to_linear_rgb(*xyz))
        assert np.allclose(back, xyz, atol=1e-9)


def test_white_maps_to_d65():
    # Each row of the forward matrix sums to the D65 white point.
    assert np.allclose(linear_rgb_to_xyz(1.0, 1.0, 1.0), D65, atol=1e-6)
    assert np.allclose(xyz_to_linear_rgb(*D65), (1.0, 1.0, 1.0), atol=1e-6)


def test_white_has_unit_luminance():
    x, y, z = linear_rgb_to_xyz(1.0, 1.0, 1.0)
    assert abs(y - 1.0) < 1e-6
    assert almost_eq_triple((x, y, z), D65)


def test_np_matrix_matches_scalar():
    rng = np.random.default_rng(7)
    rgb = rng.random((20, 3))
    xyz = np_linear_rgb_to_xyz(rgb[:, 0], rgb[:, 1], rgb[:, 2])
    assert xyz.shape == (20, 3)
    for row, out in zip(rgb.tolist(), xyz):
        assert np.allclose(out, linear_rgb_to_xyz(*row), atol=1e-12)

    back = np_xyz_to_linear_rgb(xyz[:, 0], xyz[:, 1], xyz[:, 2])
    assert np.allclose(back, rgb, atol=1e-9)


def test_np_lab_matches_scalar():
    rng = np.random.default_rng(11)
    xyz = rng.random((30, 3))
    # Include the linear segment near black.
    xyz[0] = (0.001, 0.002, 0.0005)
    lab = np_xyz_to_lab_white_ref(xyz[:, 0], xyz[:, 1], xyz[:, 2])
    lab50 = np_xyz_to_lab_white_ref(xyz[:, 0], xyz[:, 1], xyz[:, 2], D50)
    for row, out, out50 in zip(xyz.tolist(), lab, lab50):
        assert np.allclose(out, xyz_to_lab(*row), atol=1e-12)
        assert np.allclose(out50, xyz_to_lab_white_ref(*row, D50), atol=1e-12)

    back = np_lab_to_xyz_white_ref(lab[:, 0], lab[:, 1], lab[:, 2])
    assert np.allclose(back, xyz, atol=1e-9)
    for row, out in zip(lab.tolist(), back):
        assert np.allclose(out, lab_to_xyz(*row), atol=1e-12)


def test_xyz_to_lab_reference():
    for color in reference_colors:
        assert almost_eq_triple(xyz_to_lab(*color["xyz"]), color["lab"])
        assert almost_eq_triple(xyz_to_lab_white_ref(*color["xyz"], D50), color["lab50"])


def test_xyy_of_black_uses_white_chromaticity():
    x, y, big_y = xyz_to_xyy(0.0, 0.0, 0.0)
    assert abs(x - 0.312727) < 1e-6
    assert abs(y - 0.329023) < 1e-6
    assert big_y == 0.0

    x, y, _ = xyz_to_xyy_white_ref(0.0, 0.0, 0.0, D50)
    assert abs(x - D50[0] / sum(D50)) < 1e-12
    assert abs(y - D50[1] / sum(D50)) < 1e-12


def test_xyy_zero_chromaticity_y():
    assert xyy_to_xyz(0.3, 0.0, 0.5) == (0.0, 0.5, 0.0)


def test_xyy_round_trip():
    for color in reference_colors[:-1]:
        back = xyy_to_xyz(*xyz_to_xyy(*color["xyz"]))
        assert np.allclose(back, color["xyz"], atol=1e-12)


def test_luv_black():
    assert luv_to_xyz(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)
    l, u, v = xyz_to_luv(0.0, 0.0, 0.0)
    assert l == 0.0 and abs(u) < 1e-12 and abs(v) < 1e-12


def test_luv_round_trip():
    for color in reference_colors:
        back = luv_to_xyz(*xyz_to_luv(*color["xyz"]))
        assert np.allclose(back, color["xyz"], atol=1e-9)


def test_polar_forms():
    h, c, l = lab_to_hcl(0.5, 0.1, 0.1 * 3 ** 0.5)
    assert abs(h - 60.0) < 1e-9
    assert abs(c - 0.2) < 1e-12
    assert l == 0.5

    h, _, _ = lab_to_hcl(0.5, -0.3, 0.0)
    assert abs(h - 180.0) < 1e-9

    h, _, _ = lab_to_hcl(0.5, 0.2, -0.2 * 3 ** 0.5)
    assert abs(h - 300.0) < 1e-9

    l, c, h = luv_to_luv_lch(0.5, -0.2, 0.0)
    assert abs(h - 180.0) < 1e-9
    assert abs(c - 0.2) < 1e-12

    assert np.allclose(hcl_to_lab(*lab_to_hcl(0.4, 0.1, -0.25)), (0.4, 0.1, -0.25), atol=1e-12)
    assert np.allclose(luv_lch_to_luv(*luv_to_luv_lch(0.4, -0.3, 0.2)), (0.4, -0.3, 0.2), atol=1e-12)


def test_polar_hue_is_pinned_near_origin():
    h, c, _ = lab_to_hcl(0.5, 1e-6, 2e-6)
    assert h == 0.0
    assert c < 1e-5
