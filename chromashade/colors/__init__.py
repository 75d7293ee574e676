"""
Chromashade Color Classes
=========================

Immutable color values for sRGB, CIE XYZ, CIE L*a*b*, CIE LCH and HSL.

Features
--------
- Immutable instances (frozen after initialization, ``__slots__`` only)
- Every value carries an alpha channel in [0, 1] (defaults to 1.0)
- Out-of-range channels are clamped, hue channels are wrapped into [0, 360)
- Construction from another color converts through the conversion engine
- "Adjustment" builds a new value: ``replace``, ``with_alpha``, ``with_hue``...

Usage
-----
>>> from chromashade.colors import RGB, LCH
>>> orange = RGB((1.0, 0.5, 0.0))
>>> lch = orange.convert("lch")
>>> lch.hue  # doctest: +SKIP
62.0...
>>> LCH(orange) == lch
True
>>> darker = lch.with_lightness(lch.lightness - 20)
>>> translucent = orange.with_alpha(0.5)

Color Classes
-------------
    - RGB: red, green, blue in [0, 1]
    - XYZ: x, y, z (unbounded, Y = 1 for white)
    - Lab: lightness in [0, 100], a, b (unbounded)
    - LCH: lightness in [0, 100], chroma >= 0, hue in [0, 360)
    - HSL: hue in [0, 360), saturation and lightness in [0, 1]
"""

from .color_base import ColorBase
from .rgb import RGB
from .xyz import XYZ
from .lab import Lab
from .lch import LCH
from .hsl import HSL
from .color import color_convert, convert_color, get_color_class, space_to_class


__all__ = [
    'ColorBase',
    'RGB', 'XYZ', 'Lab', 'LCH', 'HSL',
    'color_convert', 'convert_color', 'get_color_class', 'space_to_class',
]
