from __future__ import annotations
from typing import Literal, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = Union[int, float]
ScalarVector = Tuple[Scalar, ...]
Channels = Tuple[float, float, float]
ColorValue = Tuple[float, float, float, float]
ColorElement = Union[Channels, ColorValue, ScalarVector]
ColorSpace = Literal["rgb", "xyz", "lab", "lch", "hsl"]

# Conversion chain; every space is one step away from its neighbours.
SPACES: Tuple[ColorSpace, ...] = ("hsl", "rgb", "xyz", "lab", "lch")
HUE_SPACES = {"hsl", "lch"}


def element_to_array(element: Union[ColorElement, ndarray]) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: tuple, list or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    return np.asarray(element, dtype=float)


def normalize_space(space: str) -> ColorSpace:
    """
    Lower-case and validate a color space name.

    Raises:
        ValueError: if the space is not one of SPACES
    """
    key = space.lower()
    if key not in SPACES:
        raise ValueError(f"Unknown color space: {space!r} (expected one of {SPACES})")
    return key  # type: ignore[return-value]


def is_hue_space(color_space: str) -> bool:
    """Check if the given color space carries a hue channel (HSL or LCH)."""
    return color_space.lower() in HUE_SPACES
