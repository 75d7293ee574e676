import math
import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple

from ..utils.hue import normalize_hue, np_normalize_hue

## Lab to LCH conversions

def lab_to_lch(l: float, a: float, b: float) -> Tuple[float, float, float]:
    """
    Cartesian Lab to polar LCH.

    Returns:
        Tuple[float, float, float]: (L, chroma >= 0, hue in [0, 360))
    """
    chroma = math.hypot(a, b)
    # atan2(0, 0) is 0, so achromatic colors get hue 0
    hue = normalize_hue(math.degrees(math.atan2(b, a)))
    return l, chroma, hue


def np_lab_to_lch(l: NDArray, a: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Lab arrays to an LCH array of shape (..., 3)."""
    l, a, b = np.broadcast_arrays(np.asarray(l, dtype=float), np.asarray(a, dtype=float), np.asarray(b, dtype=float))
    chroma = np.hypot(a, b)
    hue = np_normalize_hue(np.degrees(np.arctan2(b, a)))
    return np.stack([l, chroma, hue], axis=-1)
