"""
Chromashade Color Space Conversions
===================================

Scalar and vectorized (numpy) conversions between sRGB, CIE XYZ, CIE L*a*b*,
CIE LCH(ab) and HSL. All channels are normalized floats:

- RGB: r, g, b in [0, 1]
- XYZ: x, y, z relative to the D65 white (Y = 1.0 for white)
- Lab: L in [0, 100], a/b unbounded
- LCH: L in [0, 100], C >= 0, H in [0, 360)
- HSL: H in [0, 360), S and L in [0, 1]

Conversion Functions
--------------------

RGB <-> XYZ:
    rgb_to_xyz(r, g, b) / np_rgb_to_xyz(r, g, b)
    xyz_to_rgb(x, y, z) / np_xyz_to_rgb(x, y, z)   (clamped to [0, 1])

XYZ <-> Lab:
    xyz_to_lab(x, y, z, white=D65_WHITE) / np_xyz_to_lab
    lab_to_xyz(l, a, b, white=D65_WHITE) / np_lab_to_xyz

Lab <-> LCH:
    lab_to_lch(l, a, b) / np_lab_to_lch
    lch_to_lab(l, c, h) / np_lch_to_lab

HSL <-> RGB:
    hsl_to_rgb(h, s, l) / np_hsl_to_rgb
    rgb_to_hsl(r, g, b) / np_rgb_to_hsl

High-Level API
--------------
    convert(color, from_space, to_space)
        Walks the chain hsl <-> rgb <-> xyz <-> lab <-> lch
    np_convert(color, from_space, to_space)
        Same on arrays of shape (..., 3) or (..., 4)

Examples
--------
>>> from chromashade.conversions import convert
>>> x, y, z = convert((1.0, 1.0, 1.0), "rgb", "xyz")  # ~ (0.9505, 1.0, 1.0888)
>>> l, c, h, alpha = convert((0.0, 0.5, 1.0, 0.8), "rgb", "lch")
"""

from .to_xyz import linearize, np_linearize, rgb_to_xyz, np_rgb_to_xyz, lab_to_xyz, np_lab_to_xyz
from .to_rgb import delinearize, np_delinearize, xyz_to_rgb, np_xyz_to_rgb, hsl_to_rgb, np_hsl_to_rgb
from .to_lab import xyz_to_lab, np_xyz_to_lab, lch_to_lab, np_lch_to_lab
from .to_lch import lab_to_lch, np_lab_to_lch
from .to_hsl import rgb_to_hsl, np_rgb_to_hsl

from .wrapper import convert, np_convert, conversion_path

from ..types.color_types import ColorSpace, SPACES

__all__ = [
    # RGB <-> XYZ
    'linearize', 'np_linearize',
    'delinearize', 'np_delinearize',
    'rgb_to_xyz', 'np_rgb_to_xyz',
    'xyz_to_rgb', 'np_xyz_to_rgb',

    # XYZ <-> Lab
    'xyz_to_lab', 'np_xyz_to_lab',
    'lab_to_xyz', 'np_lab_to_xyz',

    # Lab <-> LCH
    'lab_to_lch', 'np_lab_to_lch',
    'lch_to_lab', 'np_lch_to_lab',

    # HSL <-> RGB
    'hsl_to_rgb', 'np_hsl_to_rgb',
    'rgb_to_hsl', 'np_rgb_to_hsl',

    # High-level API
    'convert',
    'np_convert',
    'conversion_path',

    # Types
    'ColorSpace',
    'SPACES',
]
