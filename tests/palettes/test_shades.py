from chromashade import (
    LCH, RGB, Palette, Shade, Shades, ShadePolicy,
    EmptyCatalogError, UnknownGradeError, generate_shades, parse_hex,
)
from chromashade.constants import DEFAULT_SHADES
from chromashade.palettes.shades import DEFAULT_GRADES, default_lightness, grade_weight, palette_lightness
import pytest

numeric_grades = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900")


def test_grade_weight():
    assert grade_weight("900") == 1.0
    assert grade_weight("50") == pytest.approx(50.0 / 900.0)
    assert grade_weight("A400") == pytest.approx(400.0 / 900.0)
    with pytest.raises(UnknownGradeError):
        grade_weight("dark")


def test_default_lightness():
    assert default_lightness(50.0, "900") == DEFAULT_SHADES["900"]
    assert default_lightness(50.0, "50") == pytest.approx(50.0 + 48.0 / 18.0)
    with pytest.raises(UnknownGradeError):
        default_lightness(50.0, "950")


def test_default_grades(mid_lch):
    shades = generate_shades(mid_lch)
    assert tuple(shades) == DEFAULT_GRADES
    assert len(shades) == len(DEFAULT_SHADES)


@pytest.mark.parametrize("base_lightness", [18.0, 30.0, 50.0, 70.0, 97.0])
def test_default_curve_is_monotonic(base_lightness):
    base = LCH((base_lightness, 30.0, 200.0))
    shades = generate_shades(base, numeric_grades, output_space="lch")
    values = [shades[g].lightness for g in numeric_grades]
    for lighter, darker in zip(values, values[1:]):
        assert lighter >= darker - 1e-9


def test_hue_and_chroma_are_constant(mid_lch):
    shades = generate_shades(mid_lch, output_space="lch")
    for color in shades.values():
        assert color.chroma == mid_lch.chroma
        assert color.hue == mid_lch.hue


def test_output_space_defaults_to_input_space():
    base = RGB((0.2, 0.4, 0.8, 0.4))
    shades = generate_shades(base, ["100", "700"])
    assert all(isinstance(color, RGB) for color in shades.values())
    assert all(color.alpha == pytest.approx(0.4) for color in shades.values())
    assert shades["100"].convert("lch").lightness > shades["700"].convert("lch").lightness


def test_unknown_grade_raises(mid_lch):
    with pytest.raises(UnknownGradeError) as excinfo:
        generate_shades(mid_lch, ["500", "950"])
    assert excinfo.value.grade == "950"
    assert isinstance(excinfo.value, KeyError)


def test_shades_mapping(mid_lch):
    shades = generate_shades(mid_lch, ["50", "900"])
    assert isinstance(shades, Shades)
    records = shades.shades()
    assert [s.grade for s in records] == ["50", "900"]
    assert all(isinstance(s, Shade) for s in records)
    with pytest.raises(TypeError):
        shades["50"] = mid_lch


def test_palette_policy_keeps_base_at_its_own_anchor(material_blue):
    base = material_blue["500"]
    shades = generate_shades(base, numeric_grades, ShadePolicy.PALETTE, palette=material_blue, output_space="lch")
    assert shades["500"].lightness == pytest.approx(base.lightness, abs=1e-9)
    assert shades["900"].lightness == pytest.approx(material_blue["900"].lightness, abs=1e-9)
    assert shades["900"].hue == base.hue


def test_palette_policy_matches_default_catalog(material_red):
    shades = generate_shades(parse_hex("#F44336"), numeric_grades, "palette", output_space="lch")
    assert shades["500"].lightness == pytest.approx(material_red["500"].lightness, abs=1e-6)
    base_lightness = LCH(parse_hex("#F44336")).lightness
    expected = base_lightness + (material_red["50"].lightness - base_lightness) * 50.0 / 900.0
    assert shades["50"].lightness == pytest.approx(expected, abs=1e-9)
    assert shades["900"].lightness == pytest.approx(material_red["900"].lightness, abs=1e-9)


def test_palette_policy_interpolates_towards_anchors(material_blue):
    base = LCH((40.0, 40.0, 260.0))
    shades = generate_shades(base, ["50", "500", "900"], ShadePolicy.PALETTE, palette=material_blue, output_space="lch")

    for grade in ("50", "500", "900"):
        target = material_blue[grade].lightness
        expected = 40.0 + (target - 40.0) * grade_weight(grade)
        assert shades[grade].lightness == pytest.approx(expected, abs=1e-9)
        assert shades[grade].lightness == pytest.approx(palette_lightness(40.0, grade, material_blue))

    assert shades["50"].lightness == pytest.approx(43.039, abs=1e-2)
    assert shades["500"].lightness == pytest.approx(51.35, abs=1e-2)
    assert shades["900"].lightness == pytest.approx(32.178, abs=1e-2)
    assert shades["500"].chroma == 40.0


def test_palette_policy_falls_back_for_missing_grades():
    palette = Palette.from_hex("duo", {"100": "#BBDEFB", "500": "#2196F3"})
    base = palette["500"]
    shades = generate_shades(base, ["A100", "900"], ShadePolicy.PALETTE, palette=palette, output_space="lch")
    assert shades["A100"].lightness == pytest.approx(default_lightness(base.lightness, "A100"))
    assert shades["900"].lightness == pytest.approx(default_lightness(base.lightness, "900"))


def test_palette_policy_with_empty_catalog(mid_lch):
    with pytest.raises(EmptyCatalogError):
        generate_shades(mid_lch, policy=ShadePolicy.PALETTE, catalog=[])
