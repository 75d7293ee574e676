"""
Chromashade - Color Conversion, Distance and Shade Families
===========================================================

Convert colors between sRGB, CIE XYZ, CIE L*a*b*, CIE LCH and HSL, measure
perceptual difference with CIEDE2000, match colors against a catalog of
reference palettes and derive graded shade families ("50".."900", accents)
from a single base color.

Key Features
------------
- Immutable color values with alpha (RGB, XYZ, Lab, LCH, HSL)
- Normalized floats throughout; 0-255 quantization only in ``formats``
- Scalar and vectorized (numpy) conversions
- CIEDE2000 delta E, scalar and vectorized
- Palette matching over any catalog exposing ``min_delta_e``
- Shade generation from a fixed lightness curve or a matched palette

Quick Start
-----------
>>> from chromashade import RGB, parse_hex, delta_e_2000, generate_shades, ShadePolicy
>>>
>>> blue = parse_hex("#2196F3")
>>> lch = blue.convert("lch")
>>> delta_e_2000(blue, RGB((0.1, 0.55, 0.95)))  # doctest: +SKIP
2.1...
>>> shades = generate_shades(blue, policy=ShadePolicy.PALETTE)
>>> shades["700"]  # doctest: +SKIP
RGB(red=..., green=..., blue=..., alpha=1.0)

Modules
-------
- colors: immutable color value classes
- conversions: color space conversion functions
- distance: CIEDE2000
- palettes: reference palettes, palette matching, shade generation
- formats: hex and CSS text codecs
- samples: Material Design reference catalog
"""
import logging

from .colors import ColorBase, RGB, XYZ, Lab, LCH, HSL, convert_color, get_color_class
from .conversions import convert, np_convert, ColorSpace, SPACES
from .distance import delta_e_2000, np_delta_e_2000
from .palettes import (
    Palette,
    match_palette, create_palette,
    Shade, Shades, ShadePolicy, generate_shades,
)
from .formats import parse_hex, to_hex, to_argb_hex, parse_css_rgb, to_css_rgba
from .errors import ChromashadeError, ColorParseError, EmptyCatalogError, UnknownGradeError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # Color classes
    "ColorBase", "RGB", "XYZ", "Lab", "LCH", "HSL",
    "convert_color", "get_color_class",

    # Conversions
    "convert", "np_convert", "ColorSpace", "SPACES",

    # Distance
    "delta_e_2000", "np_delta_e_2000",

    # Palettes and shades
    "Palette", "match_palette", "create_palette",
    "Shade", "Shades", "ShadePolicy", "generate_shades",

    # Text formats
    "parse_hex", "to_hex", "to_argb_hex", "parse_css_rgb", "to_css_rgba",

    # Errors
    "ChromashadeError", "ColorParseError", "EmptyCatalogError", "UnknownGradeError",

    # Version
    "__version__",
]
