from chromashade import LCH, Palette, parse_hex
from chromashade.samples.palettes import MATERIAL_PALETTES, GRADES, get_material_palette
import pytest


def test_from_hex():
    palette = Palette.from_hex("duo", {"100": "#BBDEFB", "500": "#2196F3"})
    assert palette.name == "duo"
    assert palette.grades == ("100", "500")
    assert len(palette) == 2
    assert "500" in palette and "900" not in palette
    assert isinstance(palette["500"], LCH)
    assert list(palette) == ["100", "500"]


def test_empty_palette_is_rejected():
    with pytest.raises(ValueError):
        Palette("empty", {})


def test_anchors_are_read_only(material_blue):
    with pytest.raises(TypeError):
        material_blue.anchors["50"] = LCH((0.0, 0.0, 0.0))


def test_material_catalog():
    assert len(MATERIAL_PALETTES) == 19
    for palette in MATERIAL_PALETTES:
        assert palette.grades == GRADES
    with pytest.raises(KeyError):
        get_material_palette("no_such_palette")


def test_lightness_curve_decreases(material_blue):
    values = list(material_blue.lightness_curve().values())
    assert values == sorted(values, reverse=True)


def test_closest_anchor(material_blue, blue_500):
    grade, anchor, distance = material_blue.closest_anchor(blue_500)
    assert grade == "500"
    assert anchor is material_blue["500"]
    assert distance == pytest.approx(0.0, abs=1e-6)


def test_min_delta_e(material_blue):
    assert material_blue.min_delta_e(material_blue["700"]) == pytest.approx(0.0, abs=1e-9)
    assert material_blue.min_delta_e(parse_hex("#F44336")) > 10.0
    assert material_blue.delta_es(material_blue["50"]).shape == (10,)
