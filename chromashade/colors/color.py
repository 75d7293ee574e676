from __future__ import annotations
from typing import Dict

from .color_base import ColorBase
from .rgb import RGB
from .xyz import XYZ
from .lab import Lab
from .lch import LCH
from .hsl import HSL
from ..types.color_types import ColorSpace, normalize_space

space_to_class: Dict[ColorSpace, type[ColorBase]] = {
    cls.mode: cls for cls in (RGB, XYZ, Lab, LCH, HSL)
}


def color_convert(self: ColorBase, to_space: ColorSpace) -> ColorBase:
    """
    Convert this color to a different color space.

    Args:
        to_space: Target color space ("rgb", "xyz", "lab", "lch", "hsl")

    Returns:
        New ColorBase instance in the target space; alpha is carried over.
    """
    cls = get_color_class(to_space)
    if cls is type(self):
        return self
    return cls(self)


ColorBase.convert = color_convert


def get_color_class(color_space: str) -> type[ColorBase]:
    return space_to_class[normalize_space(color_space)]


def convert_color(color: ColorBase, to_space: ColorSpace) -> ColorBase:
    """Functional form of ``color.convert(to_space)``."""
    if not isinstance(color, ColorBase):
        raise TypeError(f"Expected a ColorBase instance, got {type(color).__name__}")
    return color_convert(color, to_space)
