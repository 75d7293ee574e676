"""Circular hue arithmetic in degrees."""
import numpy as np
from numpy import ndarray as NDArray

from ..constants import HUE_360


def normalize_hue(h: float) -> float:
    """Normalize hue to the [0, 360) range."""
    h = (h % HUE_360 + HUE_360) % HUE_360
    # float modulo of a tiny negative value rounds up to 360.0
    return 0.0 if h >= HUE_360 else h


def np_normalize_hue(h: NDArray) -> NDArray:
    """Vectorized: normalize hues to the [0, 360) range."""
    h = np.mod(np.asarray(h, dtype=float), HUE_360)
    return np.where(h >= HUE_360, 0.0, h)


def hue_delta(h1: float, h2: float) -> float:
    """
    Shortest signed difference ``h1 - h2`` on the hue circle.

    The result lies in [-180, 180].
    """
    delta = h1 - h2
    if delta > 180.0:
        delta -= HUE_360
    elif delta < -180.0:
        delta += HUE_360
    return delta


def mean_hue(h1: float, h2: float) -> float:
    """
    Mean of two hues taken along the shorter arc.

    Hues more than 180 degrees apart are averaged across the 0/360 seam.
    """
    mean = (h1 + h2) / 2.0
    if abs(h1 - h2) > 180.0:
        mean += 180.0 if mean < 180.0 else -180.0
    return mean
