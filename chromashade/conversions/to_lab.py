import math
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from ..constants import D65_WHITE, LAB_DELTA, LAB_DELTA_CUBE, LAB_OFFSET

## XYZ to Lab conversions

def _f(t: float) -> float:
    if t > LAB_DELTA_CUBE:
        return t ** (1.0 / 3.0)
    return t / (3.0 * LAB_DELTA ** 2) + LAB_OFFSET


def xyz_to_lab(
    x: float, y: float, z: float, white: Tuple[float, float, float] = D65_WHITE
) -> Tuple[float, float, float]:
    """
    Convert CIE XYZ to CIE L*a*b* relative to ``white``.

    Returns:
        Tuple[float, float, float]: (L [0, 100], a, b)
    """
    xn, yn, zn = white
    fx, fy, fz = _f(x / xn), _f(y / yn), _f(z / zn)
    return 116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)


def np_xyz_to_lab(x: NDArray, y: NDArray, z: NDArray, white: Tuple[float, float, float] = D65_WHITE) -> NDArray:
    """Vectorized: Convert XYZ arrays to a Lab array of shape (..., 3)."""
    xn, yn, zn = white
    x, y, z = np.broadcast_arrays(np.asarray(x, dtype=float), np.asarray(y, dtype=float), np.asarray(z, dtype=float))

    def f(t: NDArray) -> NDArray:
        return np.where(t > LAB_DELTA_CUBE, np.cbrt(t), t / (3.0 * LAB_DELTA ** 2) + LAB_OFFSET)

    fx, fy, fz = f(x / xn), f(y / yn), f(z / zn)
    return np.stack([116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)], axis=-1)

## LCH to Lab conversions

def lch_to_lab(l: float, c: float, h: float) -> Tuple[float, float, float]:
    """Polar LCH (hue in degrees) to Cartesian Lab."""
    rad = math.radians(h)
    return l, c * math.cos(rad), c * math.sin(rad)


def np_lch_to_lab(l: NDArray, c: NDArray, h: NDArray) -> NDArray:
    """Vectorized: LCH arrays to a Lab array of shape (..., 3)."""
    l, c, h = np.broadcast_arrays(np.asarray(l, dtype=float), np.asarray(c, dtype=float), np.asarray(h, dtype=float))
    rad = np.radians(h)
    return np.stack([l, c * np.cos(rad), c * np.sin(rad)], axis=-1)
