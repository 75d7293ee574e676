from typing import Any
from collections.abc import Sized

import numpy as np


def get_dimension(element: Any) -> int:
    """
    Number of channels in a color element.

    Arrays report their last axis, so a ``(..., 4)`` batch counts as four
    channels; scalars count as one.
    """
    if element is None:
        return 0
    if isinstance(element, np.ndarray):
        return element.shape[-1] if element.ndim else 1
    if isinstance(element, Sized):
        return len(element)
    return 1
