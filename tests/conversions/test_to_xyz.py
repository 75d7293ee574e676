from chromashade.conversions import linearize, np_linearize, rgb_to_xyz, np_rgb_to_xyz, lab_to_xyz, np_lab_to_xyz
from chromashade.samples.colors import samples_rgb_xyz, WHITE_LAB, WHITE_XYZ
import numpy as np

xyz_tolerance = 1e-4


def test_rgb_to_xyz():
    for (r, g, b), (x_exp, y_exp, z_exp) in samples_rgb_xyz.items():
        x, y, z = rgb_to_xyz(r, g, b)

        assert abs(x - x_exp) < xyz_tolerance
        assert abs(y - y_exp) < xyz_tolerance
        assert abs(z - z_exp) < xyz_tolerance


def test_white_maps_to_reference_white():
    x, y, z = rgb_to_xyz(1.0, 1.0, 1.0)
    assert abs(x - 0.9505) < 1e-3
    assert abs(y - 1.0000) < 1e-3
    assert abs(z - 1.0890) < 1e-3


def test_rgb_to_xyz_numpy():
    the_matrix = np.array(list(samples_rgb_xyz.keys()))
    expected = np.array(list(samples_rgb_xyz.values()))
    result = np_rgb_to_xyz(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert result.shape == expected.shape
    assert np.allclose(result, expected, atol=xyz_tolerance)


def test_linearize_branches():
    # linear segment below the threshold, power curve above it
    assert abs(linearize(0.04045) - 0.04045 / 12.92) < 1e-12
    assert abs(linearize(0.5) - 0.21404) < 1e-4
    assert linearize(0.0) == 0.0
    assert abs(linearize(1.0) - 1.0) < 1e-12

    values = np.array([0.0, 0.02, 0.04045, 0.5, 1.0])
    expected = np.array([linearize(v) for v in values])
    assert np.allclose(np_linearize(values), expected)


def test_lab_to_xyz_white():
    x, y, z = lab_to_xyz(*WHITE_LAB)
    assert np.allclose((x, y, z), WHITE_XYZ, atol=1e-9)


def test_lab_to_xyz_custom_white():
    white = (0.96422, 1.0, 0.82521)
    assert np.allclose(lab_to_xyz(100.0, 0.0, 0.0, white=white), white, atol=1e-9)


def test_lab_to_xyz_numpy_matches_scalar():
    labs = np.array([
        [0.0, 0.0, 0.0],
        [5.0, 10.0, -10.0],
        [53.24, 80.09, 67.20],
        [100.0, 0.0, 0.0],
    ])
    expected = np.array([lab_to_xyz(*row) for row in labs])
    result = np_lab_to_xyz(labs[..., 0], labs[..., 1], labs[..., 2])
    assert np.allclose(result, expected, atol=1e-12)
