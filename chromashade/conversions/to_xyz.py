import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from ..constants import (
    D65_WHITE,
    SRGB_TO_XYZ,
    LINEARIZE_THRESHOLD,
    LINEAR_SLOPE,
    GAMMA,
    GAMMA_OFFSET,
    LAB_DELTA,
    LAB_OFFSET,
)

_SRGB_TO_XYZ = np.array(SRGB_TO_XYZ)

## RGB to XYZ conversions

def linearize(c: float) -> float:
    """Inverse sRGB gamma: encoded channel [0, 1] -> linear light [0, 1]."""
    if c <= LINEARIZE_THRESHOLD:
        return c / LINEAR_SLOPE
    return ((c + GAMMA_OFFSET) / (1.0 + GAMMA_OFFSET)) ** GAMMA


def np_linearize(c: NDArray) -> NDArray:
    """Vectorized: inverse sRGB gamma."""
    c = np.asarray(c, dtype=float)
    # abs keeps the unused branch of np.where free of complex/NaN powers
    power = ((np.abs(c) + GAMMA_OFFSET) / (1.0 + GAMMA_OFFSET)) ** GAMMA
    return np.where(c <= LINEARIZE_THRESHOLD, c / LINEAR_SLOPE, power)


def rgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert normalized sRGB to CIE XYZ (D65).

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (x, y, z), Y = 1.0 for white
    """
    rl, gl, bl = linearize(r), linearize(g), linearize(b)
    (m00, m01, m02), (m10, m11, m12), (m20, m21, m22) = SRGB_TO_XYZ
    x = m00 * rl + m01 * gl + m02 * bl
    y = m10 * rl + m11 * gl + m12 * bl
    z = m20 * rl + m21 * gl + m22 * bl
    return x, y, z


def np_rgb_to_xyz(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert normalized sRGB to CIE XYZ.

    Args:
        r, g, b: array-like or scalar, [0, 1]

    Returns:
        xyz: array of shape (..., 3)
    """
    linear = np.stack(np.broadcast_arrays(np_linearize(r), np_linearize(g), np_linearize(b)), axis=-1)
    return linear @ _SRGB_TO_XYZ.T

## Lab to XYZ conversions

def _f_inv(v: float) -> float:
    if v > LAB_DELTA:
        return v ** 3
    return 3.0 * LAB_DELTA ** 2 * (v - LAB_OFFSET)


def lab_to_xyz(
    l: float, a: float, b: float, white: Tuple[float, float, float] = D65_WHITE
) -> Tuple[float, float, float]:
    """
    Convert CIE L*a*b* to XYZ relative to ``white``.

    Args:
        l: Lightness in [0, 100]
        a: green-red axis
        b: blue-yellow axis
        white: reference white (defaults to D65)

    Returns:
        Tuple[float, float, float]: (x, y, z)
    """
    fy = (l + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0
    xn, yn, zn = white
    return xn * _f_inv(fx), yn * _f_inv(fy), zn * _f_inv(fz)


def np_lab_to_xyz(l: NDArray, a: NDArray, b: NDArray, white: Tuple[float, float, float] = D65_WHITE) -> NDArray:
    """Vectorized: Convert L*a*b* arrays to an XYZ array of shape (..., 3)."""
    l, a, b = np.broadcast_arrays(np.asarray(l, dtype=float), np.asarray(a, dtype=float), np.asarray(b, dtype=float))
    fy = (l + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0

    def f_inv(v: NDArray) -> NDArray:
        return np.where(v > LAB_DELTA, v ** 3, 3.0 * LAB_DELTA ** 2 * (v - LAB_OFFSET))

    return np.stack([f_inv(fx), f_inv(fy), f_inv(fz)], axis=-1) * np.asarray(white)
