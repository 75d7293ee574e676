"""CIEDE2000 color difference.

Implements the CIE 2000 formula (Sharma, Wu & Dalal, 2005) on L*a*b*
values. Inputs may be any color value (converted to Lab) or raw
``(L, a, b)`` tuples; the vectorized form works on ``(..., 3)`` arrays.

Invariants:
    - delta_e_2000(c, c) == 0
    - delta_e_2000(a, b) == delta_e_2000(b, a)
    - never NaN: zero-chroma pairs use hue difference 0
"""
from __future__ import annotations
import math
from typing import Tuple, Union

import numpy as np
from numpy import ndarray as NDArray

from ..colors import ColorBase, Lab
from ..constants import POW25_7
from ..conversions import lab_to_lch
from ..types.color_types import ScalarVector
from ..utils.hue import hue_delta, mean_hue

LabLike = Union[ColorBase, ScalarVector]


def _as_lab(color: LabLike) -> Tuple[float, float, float]:
    if isinstance(color, ColorBase):
        return Lab(color).channels
    if len(color) < 3:
        raise ValueError(f"Expected an (L, a, b) triple, got {color!r}")
    return float(color[0]), float(color[1]), float(color[2])


def _chroma_weight(c_mean: float) -> float:
    c7 = c_mean ** 7
    return math.sqrt(c7 / (c7 + POW25_7))


def delta_e_2000(
    color_a: LabLike,
    color_b: LabLike,
    *,
    kL: float = 1.0,
    kC: float = 1.0,
    kH: float = 1.0,
) -> float:
    """Compute the CIEDE2000 difference between two colors.

    Parameters
    ----------
    color_a, color_b : ColorBase or (L, a, b)
        Colors to compare. Non-Lab colors are converted to Lab first.
    kL, kC, kH : float
        Parametric weighting factors for lightness, chroma, hue (default 1.0)

    Returns
    -------
    float
        Non-negative delta E; 0 iff the Lab values are identical.
    """
    l1, a1, b1 = _as_lab(color_a)
    l2, a2, b2 = _as_lab(color_b)

    # 1. mean chroma of the unprimed inputs
    c_mean = (math.hypot(a1, b1) + math.hypot(a2, b2)) / 2.0

    # 2. a' = a + a * G / 2, then chroma/hue from the primed Lab
    g = 1.0 - _chroma_weight(c_mean)
    _, c1p, h1p = lab_to_lch(l1, a1 + a1 * g / 2.0, b1)
    _, c2p, h2p = lab_to_lch(l2, a2 + a2 * g / 2.0, b2)

    # 3.
    delta_l = l1 - l2
    l_mean = (l1 + l2) / 2.0
    delta_c = c1p - c2p
    c_mean_p = (c1p + c2p) / 2.0

    # 4. + 5. hue terms; undefined hue when either chroma is zero
    if c1p * c2p == 0.0:
        delta_h = 0.0
        h_mean = h1p + h2p
    else:
        delta_h = hue_delta(h1p, h2p)
        h_mean = mean_hue(h1p, h2p)
    delta_hh = 2.0 * math.sqrt(c1p * c2p) * math.sin(math.radians(delta_h / 2.0))

    # 6. weighting functions
    t = (1.0
         - 0.17 * math.cos(math.radians(h_mean - 30.0))
         + 0.24 * math.cos(math.radians(2.0 * h_mean))
         + 0.32 * math.cos(math.radians(3.0 * h_mean + 6.0))
         - 0.20 * math.cos(math.radians(4.0 * h_mean - 63.0)))
    l50 = (l_mean - 50.0) ** 2
    s_l = 1.0 + 0.015 * l50 / math.sqrt(20.0 + l50)
    s_c = 1.0 + 0.045 * c_mean_p
    s_h = 1.0 + 0.015 * c_mean_p * t
    r_t = -2.0 * _chroma_weight(c_mean_p) * math.sin(
        math.radians(60.0 * math.exp(-(((h_mean - 275.0) / 25.0) ** 2)))
    )

    # 7.
    term_l = delta_l / (kL * s_l)
    term_c = delta_c / (kC * s_c)
    term_h = delta_hh / (kH * s_h)
    total = term_l ** 2 + term_c ** 2 + term_h ** 2 + r_t * term_c * term_h
    # rounding can push a zero distance a hair below 0
    return math.sqrt(max(total, 0.0))


def np_delta_e_2000(
    lab1: NDArray,
    lab2: NDArray,
    *,
    kL: float = 1.0,
    kC: float = 1.0,
    kH: float = 1.0,
) -> NDArray:
    """Vectorized CIEDE2000 over broadcastable Lab arrays of shape (..., 3).

    Returns
    -------
    NDArray
        Delta E values with the broadcast shape minus the channel axis.
    """
    lab1, lab2 = np.broadcast_arrays(np.asarray(lab1, dtype=float), np.asarray(lab2, dtype=float))
    l1, a1, b1 = lab1[..., 0], lab1[..., 1], lab1[..., 2]
    l2, a2, b2 = lab2[..., 0], lab2[..., 1], lab2[..., 2]

    c_mean = (np.hypot(a1, b1) + np.hypot(a2, b2)) / 2.0
    c7 = c_mean ** 7
    g = 1.0 - np.sqrt(c7 / (c7 + POW25_7))

    a1p = a1 + a1 * g / 2.0
    a2p = a2 + a2 * g / 2.0
    c1p = np.hypot(a1p, b1)
    c2p = np.hypot(a2p, b2)
    h1p = np.mod(np.degrees(np.arctan2(b1, a1p)), 360.0)
    h2p = np.mod(np.degrees(np.arctan2(b2, a2p)), 360.0)

    delta_l = l1 - l2
    l_mean = (l1 + l2) / 2.0
    delta_c = c1p - c2p
    c_mean_p = (c1p + c2p) / 2.0

    chromatic = (c1p * c2p) != 0.0
    raw = h1p - h2p
    delta_h = np.where(raw > 180.0, raw - 360.0, np.where(raw < -180.0, raw + 360.0, raw))
    delta_h = np.where(chromatic, delta_h, 0.0)

    h_mean = (h1p + h2p) / 2.0
    h_mean = np.where(np.abs(raw) > 180.0, np.where(h_mean < 180.0, h_mean + 180.0, h_mean - 180.0), h_mean)
    h_mean = np.where(chromatic, h_mean, h1p + h2p)

    delta_hh = 2.0 * np.sqrt(c1p * c2p) * np.sin(np.radians(delta_h / 2.0))

    t = (1.0
         - 0.17 * np.cos(np.radians(h_mean - 30.0))
         + 0.24 * np.cos(np.radians(2.0 * h_mean))
         + 0.32 * np.cos(np.radians(3.0 * h_mean + 6.0))
         - 0.20 * np.cos(np.radians(4.0 * h_mean - 63.0)))
    l50 = (l_mean - 50.0) ** 2
    s_l = 1.0 + 0.015 * l50 / np.sqrt(20.0 + l50)
    s_c = 1.0 + 0.045 * c_mean_p
    s_h = 1.0 + 0.015 * c_mean_p * t
    cp7 = c_mean_p ** 7
    r_t = -2.0 * np.sqrt(cp7 / (cp7 + POW25_7)) * np.sin(
        np.radians(60.0 * np.exp(-(((h_mean - 275.0) / 25.0) ** 2)))
    )

    term_l = delta_l / (kL * s_l)
    term_c = delta_c / (kC * s_c)
    term_h = delta_hh / (kH * s_h)
    total = term_l ** 2 + term_c ** 2 + term_h ** 2 + r_t * term_c * term_h
    return np.sqrt(np.maximum(total, 0.0))
