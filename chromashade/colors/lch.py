from __future__ import annotations
from typing import ClassVar, Optional, Tuple
from ..types.color_types import ColorSpace
from ..utils.hue import hue_delta, mean_hue
from .color_base import ColorBase, Bound
from ._descriptors import ChannelDescriptor


class LCH(ColorBase):
    """
    CIE LCH(ab), the polar form of L*a*b*.

    Lightness is clamped to [0, 100], chroma to >= 0 and hue is wrapped into
    [0, 360) whenever a value is built, so arithmetic results stay valid.
    """
    __slots__ = ()

    mode:          ClassVar[ColorSpace] = "lch"
    channel_names: ClassVar[Tuple[str, str, str]] = ("lightness", "chroma", "hue")
    minima:        ClassVar[Tuple[Bound, Bound, Bound]] = (0.0, 0.0, None)
    maxima:        ClassVar[Tuple[Bound, Bound, Bound]] = (100.0, None, None)
    hue_index:     ClassVar[Optional[int]] = 2

    lightness: float = ChannelDescriptor(0)  # type: ignore[assignment]
    chroma: float = ChannelDescriptor(1)  # type: ignore[assignment]
    hue: float = ChannelDescriptor(2)  # type: ignore[assignment]

    def with_lightness(self, lightness: float) -> LCH:
        return self.replace(lightness=lightness)

    def with_chroma(self, chroma: float) -> LCH:
        return self.replace(chroma=chroma)

    def with_hue(self, hue: float) -> LCH:
        return self.replace(hue=hue)

    def subtract(self, other: LCH) -> LCH:
        """
        Channel-wise difference, keeping this color's alpha.

        The result is a regular LCH value, so negative lightness/chroma clamp
        to 0 and the hue difference is wrapped into [0, 360).
        """
        return LCH((
            self.lightness - other.lightness,
            self.chroma - other.chroma,
            self.hue - other.hue,
            self.alpha,
        ))

    def hue_delta(self, other: LCH) -> float:
        """Shortest signed hue difference to ``other``, in [-180, 180]."""
        return hue_delta(self.hue, other.hue)

    def mean_hue(self, other: LCH) -> float:
        """Mean hue with ``other`` along the shorter arc."""
        return mean_hue(self.hue, other.hue)

    def is_dark(self) -> bool:
        return self.lightness < 50.0

    def allows_dark_text(self) -> bool:
        """True when dark text stays readable on a background of this color."""
        return self.lightness > 75.0
