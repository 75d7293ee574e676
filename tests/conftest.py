import pytest

from chromashade import LCH, parse_hex
from chromashade.samples.palettes import get_material_palette


@pytest.fixture
def material_blue():
    return get_material_palette("blue")


@pytest.fixture
def material_red():
    return get_material_palette("red")


@pytest.fixture
def blue_500():
    return parse_hex("#2196F3")


@pytest.fixture
def mid_lch():
    return LCH((50.0, 30.0, 200.0))
