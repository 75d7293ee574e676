import numpy as np
from typing import Callable, Dict, List, Tuple

from .to_xyz import rgb_to_xyz, lab_to_xyz, np_rgb_to_xyz, np_lab_to_xyz
from .to_rgb import xyz_to_rgb, hsl_to_rgb, np_xyz_to_rgb, np_hsl_to_rgb
from .to_lab import xyz_to_lab, lch_to_lab, np_xyz_to_lab, np_lch_to_lab
from .to_lch import lab_to_lch, np_lab_to_lch
from .to_hsl import rgb_to_hsl, np_rgb_to_hsl

from ..types.color_types import ColorElement, ColorSpace, SPACES, element_to_array, normalize_space
from ..utils import get_dimension

Step = Callable[[float, float, float], Tuple[float, float, float]]
NpStep = Callable[[np.ndarray, np.ndarray, np.ndarray], np.ndarray]

# One entry per edge of the chain hsl <-> rgb <-> xyz <-> lab <-> lch
CONVERT_SCALAR: Dict[Tuple[str, str], Step] = {
    ("hsl", "rgb"): hsl_to_rgb,
    ("rgb", "hsl"): rgb_to_hsl,
    ("rgb", "xyz"): rgb_to_xyz,
    ("xyz", "rgb"): xyz_to_rgb,
    ("xyz", "lab"): xyz_to_lab,
    ("lab", "xyz"): lab_to_xyz,
    ("lab", "lch"): lab_to_lch,
    ("lch", "lab"): lch_to_lab,
}

CONVERT_NUMPY: Dict[Tuple[str, str], NpStep] = {
    ("hsl", "rgb"): np_hsl_to_rgb,
    ("rgb", "hsl"): np_rgb_to_hsl,
    ("rgb", "xyz"): np_rgb_to_xyz,
    ("xyz", "rgb"): np_xyz_to_rgb,
    ("xyz", "lab"): np_xyz_to_lab,
    ("lab", "xyz"): np_lab_to_xyz,
    ("lab", "lch"): np_lab_to_lch,
    ("lch", "lab"): np_lch_to_lab,
}


def conversion_path(from_space: ColorSpace, to_space: ColorSpace) -> List[Tuple[str, str]]:
    """
    List the chain edges walked to get from ``from_space`` to ``to_space``.

    >>> conversion_path("hsl", "lab")
    [('hsl', 'rgb'), ('rgb', 'xyz'), ('xyz', 'lab')]
    """
    start = SPACES.index(normalize_space(from_space))
    stop = SPACES.index(normalize_space(to_space))
    step = 1 if stop >= start else -1
    return [(SPACES[i], SPACES[i + step]) for i in range(start, stop, step)]


def _split_alpha(values: Tuple[float, ...]) -> Tuple[Tuple[float, float, float], Tuple[float, ...]]:
    if len(values) not in (3, 4):
        raise ValueError(f"Expected 3 channels plus optional alpha, got {len(values)} values")
    return (values[0], values[1], values[2]), tuple(values[3:])


def convert(
    color: ColorElement,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> Tuple[float, ...]:
    """
    Convert a single color tuple between spaces.

    Args:
        color: (c0, c1, c2) or (c0, c1, c2, alpha), normalized floats
        from_space: source space ("rgb", "xyz", "lab", "lch", "hsl")
        to_space: target space

    Returns:
        Converted tuple; alpha, when given, is passed through unchanged.
    """
    base, alpha = _split_alpha(tuple(float(v) for v in color))
    for edge in conversion_path(from_space, to_space):
        base = CONVERT_SCALAR[edge](*base)
    return tuple(float(v) for v in base) + alpha


def np_convert(
    color: np.ndarray,
    from_space: ColorSpace,
    to_space: ColorSpace,
) -> np.ndarray:
    """
    Vectorized convert over an array of shape (..., 3) or (..., 4).

    The optional fourth channel is treated as alpha and passed through.
    """
    arr = element_to_array(color)
    channels = get_dimension(arr)
    if channels not in (3, 4):
        raise ValueError(f"Expected last dimension 3 or 4, got shape {arr.shape}")

    base = arr[..., :3]
    for edge in conversion_path(from_space, to_space):
        base = CONVERT_NUMPY[edge](base[..., 0], base[..., 1], base[..., 2])

    if channels == 4:
        return np.concatenate([base, arr[..., 3:4]], axis=-1)
    return np.array(base, dtype=float)
