import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from ..constants import EPSILON
from ..utils.hue import normalize_hue

## RGB to HSL conversions

def rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert RGB to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta <= 0.0:
        return 0.0, 0.0, lightness

    denominator = 1.0 - abs(2.0 * lightness - 1.0)
    saturation = delta / denominator if denominator > EPSILON else 0.0

    if max_c == r:
        hue = 60.0 * (((g - b) / delta) % 6.0)
    elif max_c == g:
        hue = 60.0 * ((b - r) / delta + 2.0)
    else:
        hue = 60.0 * ((r - g) / delta + 4.0)

    return normalize_hue(hue), min(saturation, 1.0), lightness


def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r, g, b = np.broadcast_arrays(np.asarray(r, dtype=float), np.asarray(g, dtype=float), np.asarray(b, dtype=float))

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    saturation = np.zeros_like(lightness)
    denominator = 1.0 - np.abs(2.0 * lightness - 1.0)
    mask_s = (delta > 0) & (denominator > EPSILON)
    saturation[mask_s] = np.minimum(delta[mask_s] / denominator[mask_s], 1.0)

    hue = np.zeros_like(max_c)
    mask = delta > 0
    mask_r = mask & (max_c == r)
    mask_g = mask & (max_c == g) & ~mask_r
    mask_b = mask & ~mask_r & ~mask_g

    hue[mask_r] = 60.0 * np.mod((g[mask_r] - b[mask_r]) / delta[mask_r], 6.0)
    hue[mask_g] = 60.0 * ((b[mask_g] - r[mask_g]) / delta[mask_g] + 2.0)
    hue[mask_b] = 60.0 * ((r[mask_b] - g[mask_b]) / delta[mask_b] + 4.0)
    hue = np.mod(hue + 360.0, 360.0)

    return np.stack([hue, saturation, lightness], axis=-1)
