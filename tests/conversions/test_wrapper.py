from chromashade.conversions import convert, np_convert, conversion_path
import numpy as np
import pytest


def test_convert_returns_tuple():
    result = convert((1.0, 0.5, 0.25), "rgb", "lab")
    assert isinstance(result, tuple)
    assert len(result) == 3


def test_alpha_is_passed_through():
    l, c, h, a = convert((0.2, 0.4, 0.6, 0.5), "rgb", "lch")
    assert a == 0.5

    *_, a = convert((200.0, 0.5, 0.5, 0.25), "hsl", "xyz")
    assert a == 0.25


def test_same_space_is_identity():
    assert convert((0.1, 0.2, 0.3), "rgb", "rgb") == (0.1, 0.2, 0.3)


def test_space_names_are_case_insensitive():
    assert convert((1.0, 1.0, 1.0), "RGB", "Xyz") == convert((1.0, 1.0, 1.0), "rgb", "xyz")


def test_conversion_path():
    assert conversion_path("hsl", "lch") == [
        ("hsl", "rgb"), ("rgb", "xyz"), ("xyz", "lab"), ("lab", "lch"),
    ]
    assert conversion_path("lab", "rgb") == [("lab", "xyz"), ("xyz", "rgb")]
    assert conversion_path("xyz", "xyz") == []


def test_unknown_space_raises():
    with pytest.raises(ValueError):
        convert((1.0, 1.0, 1.0), "rgb", "hsv")


def test_wrong_channel_count_raises():
    with pytest.raises(ValueError):
        convert((1.0, 1.0), "rgb", "lab")
    with pytest.raises(ValueError):
        np_convert(np.zeros((2, 5)), "rgb", "lab")


def test_np_convert_matches_convert():
    colors = np.array([
        [1.0, 0.5, 0.25],
        [0.0, 0.0, 0.0],
        [0.3, 0.9, 0.6],
    ])
    result = np_convert(colors, "rgb", "lch")
    expected = np.array([convert(tuple(c), "rgb", "lch") for c in colors])
    assert np.allclose(result, expected, atol=1e-9)


def test_np_convert_keeps_alpha_column():
    colors = np.array([[1.0, 0.0, 0.0, 0.5], [0.0, 1.0, 0.0, 1.0]])
    result = np_convert(colors, "rgb", "hsl")
    assert result.shape == (2, 4)
    assert np.allclose(result[..., 3], [0.5, 1.0])
    assert np.allclose(result[..., :3], [[0.0, 1.0, 0.5], [120.0, 1.0, 0.5]])
