from chromashade.conversions import (
    convert, np_convert,
    rgb_to_xyz, xyz_to_rgb,
    rgb_to_hsl, hsl_to_rgb,
    lab_to_lch, lch_to_lab,
)
import itertools
import numpy as np

rgb_tolerance = 1e-3
steps = np.linspace(0.0, 1.0, 6)
rgb_grid = list(itertools.product(steps, steps, steps))


def test_round_trip_rgb_xyz():
    for r, g, b in rgb_grid:
        r_out, g_out, b_out = xyz_to_rgb(*rgb_to_xyz(r, g, b))

        assert abs(r - r_out) < rgb_tolerance
        assert abs(g - g_out) < rgb_tolerance
        assert abs(b - b_out) < rgb_tolerance


def test_round_trip_rgb_hsl():
    for r, g, b in rgb_grid:
        r_out, g_out, b_out = hsl_to_rgb(*rgb_to_hsl(r, g, b))

        assert abs(r - r_out) < 1e-9
        assert abs(g - g_out) < 1e-9
        assert abs(b - b_out) < 1e-9


def test_round_trip_lab_lch():
    for lab in [(50.0, 20.0, -30.0), (0.0, 0.0, 0.0), (75.0, -60.0, 10.0)]:
        assert np.allclose(lch_to_lab(*lab_to_lch(*lab)), lab, atol=1e-9)


def test_round_trip_through_every_space():
    for color in rgb_grid:
        for space in ("xyz", "lab", "lch", "hsl"):
            there = convert(color, "rgb", space)
            back = convert(there, space, "rgb")
            assert np.allclose(back, color, atol=rgb_tolerance), (color, space)


def test_round_trip_rgb_lch_numpy():
    the_matrix = np.array(rgb_grid)
    lch = np_convert(the_matrix, "rgb", "lch")
    back = np_convert(lch, "lch", "rgb")
    assert np.allclose(back, the_matrix, atol=rgb_tolerance)
