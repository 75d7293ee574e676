import math
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from boundednumbers.functions import clamp

from ..constants import XYZ_TO_SRGB, DELINEARIZE_THRESHOLD, LINEAR_SLOPE, GAMMA, GAMMA_OFFSET
from ..utils.hue import normalize_hue, np_normalize_hue

_XYZ_TO_SRGB = np.array(XYZ_TO_SRGB)

## XYZ to RGB conversions

def delinearize(v: float) -> float:
    """Forward sRGB gamma: linear light -> encoded channel."""
    if v <= DELINEARIZE_THRESHOLD:
        return LINEAR_SLOPE * v
    return (1.0 + GAMMA_OFFSET) * v ** (1.0 / GAMMA) - GAMMA_OFFSET


def np_delinearize(v: NDArray) -> NDArray:
    """Vectorized: forward sRGB gamma."""
    v = np.asarray(v, dtype=float)
    power = (1.0 + GAMMA_OFFSET) * np.abs(v) ** (1.0 / GAMMA) - GAMMA_OFFSET
    return np.where(v <= DELINEARIZE_THRESHOLD, LINEAR_SLOPE * v, power)


def xyz_to_rgb(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """
    Convert CIE XYZ (D65) to normalized sRGB.

    Out-of-gamut results are clamped per channel to [0, 1].

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    (m00, m01, m02), (m10, m11, m12), (m20, m21, m22) = XYZ_TO_SRGB
    rl = m00 * x + m01 * y + m02 * z
    gl = m10 * x + m11 * y + m12 * z
    bl = m20 * x + m21 * y + m22 * z
    return (
        float(clamp(delinearize(rl), 0.0, 1.0)),
        float(clamp(delinearize(gl), 0.0, 1.0)),
        float(clamp(delinearize(bl), 0.0, 1.0)),
    )


def np_xyz_to_rgb(x: NDArray, y: NDArray, z: NDArray) -> NDArray:
    """
    Vectorized: Convert XYZ to normalized sRGB, clamped to [0, 1].

    Returns:
        rgb: array of shape (..., 3)
    """
    xyz = np.stack(np.broadcast_arrays(np.asarray(x, dtype=float), np.asarray(y, dtype=float), np.asarray(z, dtype=float)), axis=-1)
    linear = xyz @ _XYZ_TO_SRGB.T
    return np.clip(np_delinearize(linear), 0.0, 1.0)

## HSL to RGB conversions

def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """
    Convert HSL to RGB.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#HSL_to_RGB

    Args:
        h: Hue in degrees, any value (wrapped into [0, 360))
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    if s <= 0.0:
        return l, l, l

    chroma = (1.0 - abs(2.0 * l - 1.0)) * s
    h_prime = normalize_hue(h) / 60.0
    x = chroma * (1.0 - abs(h_prime % 2.0 - 1.0))
    m = l - chroma / 2.0

    sector = int(math.floor(h_prime)) % 6
    if sector == 0:
        r, g, b = chroma, x, 0.0
    elif sector == 1:
        r, g, b = x, chroma, 0.0
    elif sector == 2:
        r, g, b = 0.0, chroma, x
    elif sector == 3:
        r, g, b = 0.0, x, chroma
    elif sector == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return r + m, g + m, b + m


def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h, s, l = np.broadcast_arrays(
        np_normalize_hue(h), np.asarray(s, dtype=float), np.asarray(l, dtype=float)
    )

    chroma = (1.0 - np.abs(2.0 * l - 1.0)) * np.clip(s, 0.0, None)
    h_prime = h / 60.0
    x = chroma * (1.0 - np.abs(np.mod(h_prime, 2.0) - 1.0))
    m = l - chroma / 2.0
    zero = np.zeros_like(chroma)

    sector = np.mod(np.floor(h_prime).astype(int), 6)
    r = np.select([sector == 0, sector == 1, sector == 4, sector == 5], [chroma, x, x, chroma], zero)
    g = np.select([sector == 0, sector == 1, sector == 2, sector == 3], [x, chroma, chroma, x], zero)
    b = np.select([sector == 2, sector == 3, sector == 4, sector == 5], [x, chroma, chroma, x], zero)

    return np.stack([r + m, g + m, b + m], axis=-1)
