from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, Bound
from ._descriptors import ChannelDescriptor


class RGB(ColorBase):
    """Device sRGB, channels normalized to [0, 1] and clamped on construction."""
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = "rgb"
    channel_names: ClassVar[Tuple[str, str, str]] = ("red", "green", "blue")
    minima:        ClassVar[Tuple[Bound, Bound, Bound]] = (0.0, 0.0, 0.0)
    maxima:        ClassVar[Tuple[Bound, Bound, Bound]] = (1.0, 1.0, 1.0)

    red: float = ChannelDescriptor(0)  # type: ignore[assignment]
    green: float = ChannelDescriptor(1)  # type: ignore[assignment]
    blue: float = ChannelDescriptor(2)  # type: ignore[assignment]
