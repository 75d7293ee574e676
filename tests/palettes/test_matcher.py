from chromashade import LCH, RGB, EmptyCatalogError, create_palette, match_palette, parse_hex
from chromashade.samples.palettes import MATERIAL_PALETTES
import logging
import pytest


class FixedDistance:
    def __init__(self, name, distance):
        self.name = name
        self.distance = distance

    def min_delta_e(self, color):
        return self.distance


def test_exact_catalog_color_matches_its_palette():
    assert match_palette(parse_hex("#F44336"), MATERIAL_PALETTES).name == "red"
    assert match_palette(parse_hex("#2196F3"), MATERIAL_PALETTES).name == "blue"


def test_every_anchor_matches_its_own_palette():
    for palette in MATERIAL_PALETTES:
        assert match_palette(palette["500"], MATERIAL_PALETTES) is palette


def test_match_is_deterministic():
    color = RGB((0.3, 0.5, 0.2))
    first = match_palette(color, MATERIAL_PALETTES)
    for _ in range(3):
        assert match_palette(color, MATERIAL_PALETTES) is first


def test_ties_keep_the_first_palette():
    catalog = [FixedDistance("a", 1.0), FixedDistance("b", 1.0), FixedDistance("c", 2.0)]
    assert match_palette(RGB((0.0, 0.0, 0.0)), catalog).name == "a"
    catalog = [FixedDistance("c", 2.0), FixedDistance("a", 1.0), FixedDistance("b", 1.0)]
    assert match_palette(RGB((0.0, 0.0, 0.0)), catalog).name == "a"


def test_catalog_is_not_modified():
    catalog = list(MATERIAL_PALETTES)
    match_palette(parse_hex("#4CAF50"), catalog)
    assert catalog == list(MATERIAL_PALETTES)


def test_empty_catalog_raises():
    with pytest.raises(EmptyCatalogError):
        match_palette(RGB((0.5, 0.5, 0.5)), [])
    with pytest.raises(LookupError):
        match_palette(RGB((0.5, 0.5, 0.5)), iter(()))


def test_match_logs_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="chromashade.palettes.matcher")
    match_palette(parse_hex("#F44336"), MATERIAL_PALETTES)
    assert any("Matched" in record.getMessage() for record in caplog.records)


def test_create_palette_reproduces_the_color(blue_500):
    custom = create_palette(blue_500, MATERIAL_PALETTES)
    assert list(custom) == list(MATERIAL_PALETTES[5].grades)
    assert all(isinstance(color, LCH) for color in custom.values())

    target = LCH(blue_500)
    assert custom["500"].lightness == pytest.approx(target.lightness, abs=1e-6)
    assert custom["500"].chroma == pytest.approx(target.chroma, abs=1e-6)


def test_create_palette_shifts_every_anchor():
    base = LCH(parse_hex("#2196F3")).replace(lightness=55.0, alpha=0.5)
    custom = create_palette(base, MATERIAL_PALETTES)
    palette = match_palette(base, MATERIAL_PALETTES)
    _, anchor, _ = palette.closest_anchor(base)
    offset = base.lightness - anchor.lightness

    assert custom["900"].lightness == pytest.approx(palette["900"].lightness + offset)
    assert all(color.alpha == 0.5 for color in custom.values())
