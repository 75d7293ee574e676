"""Numeric constants shared by the conversion engine, distance and shades."""
from typing import Dict, Tuple

Matrix3 = Tuple[Tuple[float, float, float], Tuple[float, float, float], Tuple[float, float, float]]

# D65 reference white, 2 degree observer
D65_WHITE: Tuple[float, float, float] = (0.95047, 1.0, 1.08883)

# Linear sRGB -> XYZ (D65)
SRGB_TO_XYZ: Matrix3 = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)

# XYZ (D65) -> linear sRGB
XYZ_TO_SRGB: Matrix3 = (
    (3.2404542, -1.5371385, -0.4985314),
    (-0.9692660, 1.8760108, 0.0415560),
    (0.0556434, -0.2040259, 1.0572252),
)

# sRGB transfer function
LINEARIZE_THRESHOLD = 0.04045
DELINEARIZE_THRESHOLD = 0.0031308
LINEAR_SLOPE = 12.92
GAMMA = 2.4
GAMMA_OFFSET = 0.055

# CIE L*a*b*
LAB_DELTA = 6.0 / 29.0
LAB_DELTA_CUBE = LAB_DELTA ** 3
LAB_OFFSET = 4.0 / 29.0

HUE_360 = 360.0
EPSILON = 1e-12

# CIEDE2000
POW25_7 = 25.0 ** 7

# Target lightness (LCH L, percentage scale) per grade for the default curve.
# (T - T_min) * grade is non-increasing across the numeric grades, which keeps
# the generated curve monotonic for any base lightness within the table range.
DEFAULT_SHADES: Dict[str, float] = {
    "50": 98.0,
    "100": 56.0,
    "200": 35.0,
    "300": 28.0,
    "400": 24.0,
    "500": 22.0,
    "600": 20.0,
    "700": 19.0,
    "800": 18.0,
    "900": 17.0,
    "A100": 70.0,
    "A200": 45.0,
    "A400": 30.0,
    "A700": 22.0,
}

GRADE_DENOMINATOR = 900.0
