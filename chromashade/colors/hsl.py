from typing import ClassVar, Optional, Tuple
from ..types.color_types import ColorSpace
from .color_base import ColorBase, Bound
from ._descriptors import ChannelDescriptor


class HSL(ColorBase):
    """HSL with hue in degrees (wrapped) and saturation/lightness in [0, 1]."""
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = "hsl"
    channel_names: ClassVar[Tuple[str, str, str]] = ("hue", "saturation", "lightness")
    minima:        ClassVar[Tuple[Bound, Bound, Bound]] = (None, 0.0, 0.0)
    maxima:        ClassVar[Tuple[Bound, Bound, Bound]] = (None, 1.0, 1.0)
    hue_index:     ClassVar[Optional[int]] = 0

    hue: float = ChannelDescriptor(0)  # type: ignore[assignment]
    saturation: float = ChannelDescriptor(1)  # type: ignore[assignment]
    lightness: float = ChannelDescriptor(2)  # type: ignore[assignment]

    @property
    def is_achromatic(self) -> bool:
        return self.saturation == 0.0
