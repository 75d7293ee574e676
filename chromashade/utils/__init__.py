from .dimension import get_dimension
from .hue import normalize_hue, np_normalize_hue, hue_delta, mean_hue

__all__ = ["get_dimension", "normalize_hue", "np_normalize_hue", "hue_delta", "mean_hue"]
