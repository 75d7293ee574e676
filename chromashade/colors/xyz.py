from typing import ClassVar, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase
from ._descriptors import ChannelDescriptor


class XYZ(ColorBase):
    """CIE XYZ tristimulus values relative to D65 (Y = 1.0 for white); unbounded."""
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = "xyz"
    channel_names: ClassVar[Tuple[str, str, str]] = ("x", "y", "z")

    x: float = ChannelDescriptor(0)  # type: ignore[assignment]
    y: float = ChannelDescriptor(1)  # type: ignore[assignment]
    z: float = ChannelDescriptor(2)  # type: ignore[assignment]
