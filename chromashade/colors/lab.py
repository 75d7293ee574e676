from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, Bound
from ._descriptors import ChannelDescriptor


class Lab(ColorBase):
    """CIE L*a*b*: lightness clamped to [0, 100], a and b unbounded."""
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = "lab"
    channel_names: ClassVar[Tuple[str, str, str]] = ("lightness", "a", "b")
    minima:        ClassVar[Tuple[Bound, Bound, Bound]] = (0.0, None, None)
    maxima:        ClassVar[Tuple[Bound, Bound, Bound]] = (100.0, None, None)

    lightness: float = ChannelDescriptor(0)  # type: ignore[assignment]
    a: float = ChannelDescriptor(1)  # type: ignore[assignment]
    b: float = ChannelDescriptor(2)  # type: ignore[assignment]
