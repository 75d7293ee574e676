from chromashade.conversions import convert, xyz_to_lab, np_xyz_to_lab, lch_to_lab, np_lch_to_lab
from chromashade.samples.colors import samples_rgb_lab, samples_rgb_xyz
import numpy as np

lab_tolerance = 1e-2


def test_rgb_to_lab_reference_values():
    for rgb, (l_exp, a_exp, b_exp) in samples_rgb_lab.items():
        l, a, b = convert(rgb, "rgb", "lab")

        assert abs(l - l_exp) < lab_tolerance
        assert abs(a - a_exp) < lab_tolerance
        assert abs(b - b_exp) < lab_tolerance


def test_xyz_to_lab_black_and_white():
    l, a, b = xyz_to_lab(0.0, 0.0, 0.0)
    assert abs(l) < 1e-9 and abs(a) < 1e-9 and abs(b) < 1e-9

    l, a, b = xyz_to_lab(0.95047, 1.0, 1.08883)
    assert abs(l - 100.0) < 1e-9
    assert abs(a) < 1e-9
    assert abs(b) < 1e-9


def test_xyz_to_lab_linear_segment():
    # below (6/29)^3 the cube root is replaced by a line: L = 903.3 * Y
    l, _, _ = xyz_to_lab(0.0, 0.001, 0.0)
    assert abs(l - 0.9033) < 1e-3


def test_xyz_to_lab_numpy():
    xyz = np.array(list(samples_rgb_xyz.values()))
    expected = np.array([xyz_to_lab(*row) for row in xyz])
    result = np_xyz_to_lab(xyz[..., 0], xyz[..., 1], xyz[..., 2])
    assert np.allclose(result, expected, atol=1e-9)


def test_lch_to_lab():
    l, a, b = lch_to_lab(50.0, 10.0, 90.0)
    assert l == 50.0
    assert abs(a) < 1e-9
    assert abs(b - 10.0) < 1e-9

    l, a, b = lch_to_lab(50.0, 10.0, 180.0)
    assert abs(a + 10.0) < 1e-9
    assert abs(b) < 1e-9


def test_lch_to_lab_numpy():
    lch = np.array([[50.0, 10.0, 0.0], [60.0, 20.0, 270.0], [70.0, 0.0, 123.0]])
    expected = np.array([lch_to_lab(*row) for row in lch])
    result = np_lch_to_lab(lch[..., 0], lch[..., 1], lch[..., 2])
    assert np.allclose(result, expected, atol=1e-12)
