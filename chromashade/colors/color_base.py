from __future__ import annotations
import math
from typing import Any, Callable, ClassVar, Iterator, Optional, Tuple, Union, cast

from boundednumbers.functions import clamp

from ..conversions import convert
from ..types.color_types import ColorElement, ColorSpace, ColorValue, is_hue_space
from ..utils import get_dimension, normalize_hue
from ._descriptors import ChannelDescriptor

Bound = Optional[float]


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # no new attributes, frozen after __init__

    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorSpace]
    channel_names: ClassVar[Tuple[str, str, str]]
    minima:       ClassVar[Tuple[Bound, Bound, Bound]] = (None, None, None)
    maxima:       ClassVar[Tuple[Bound, Bound, Bound]] = (None, None, None)
    hue_index:    ClassVar[Optional[int]] = None
    alpha_max:    ClassVar[float] = 1.0

    # attached in color.py
    convert: Callable[[ColorBase, ColorSpace], ColorBase]

    alpha: float = ChannelDescriptor(-1)  # type: ignore[assignment]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Union[ColorElement, ColorBase]) -> None:
        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode == self.mode:
                value = value.value
            else:
                value = convert(value.value, value.mode, self.mode)

        value_dim = get_dimension(value)
        if value_dim not in (self.num_channels, self.num_channels + 1):
            raise ValueError(
                f"{self.mode} expects {self.num_channels} channels plus optional alpha, got {value!r}"
            )

        raw = tuple(float(v) for v in cast(Tuple[Any, ...], value))
        if not all(math.isfinite(v) for v in raw):
            raise ValueError(f"{self.mode} channels must be finite, got {raw!r}")

        channels = tuple(self._bound_channel(i, v) for i, v in enumerate(raw[:self.num_channels]))
        alpha = raw[self.num_channels] if value_dim > self.num_channels else self.alpha_max
        alpha = float(clamp(alpha, 0.0, self.alpha_max))

        # safe assignment; __setattr__ still allows it during init
        self._value = channels + (alpha,)

        # freeze instance
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _bound_channel(cls, index: int, v: float) -> float:
        if index == cls.hue_index:
            return normalize_hue(v)
        lo, hi = cls.minima[index], cls.maxima[index]
        if lo is None and hi is None:
            return v
        return float(clamp(v, -math.inf if lo is None else lo, math.inf if hi is None else hi))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ColorValue:
        """All channels followed by alpha."""
        return self._value

    @property
    def channels(self) -> Tuple[float, float, float]:
        """Color channels without alpha."""
        return cast(Tuple[float, float, float], self._value[:self.num_channels])

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return is_hue_space(self.mode)

    # ------------------ NEW-VALUE "SETTERS" ------------------
    def with_alpha(self, alpha: float):
        """Return a new instance with the alpha channel replaced."""
        return self.__class__(self.channels + (alpha,))

    def replace(self, **channels: float):
        """
        Return a new instance with the named channels replaced.

        >>> RGB((1.0, 0.0, 0.0)).replace(green=0.5)
        RGB(red=1.0, green=0.5, blue=0.0, alpha=1.0)
        """
        names = self.channel_names + ('alpha',)
        unknown = set(channels) - set(names)
        if unknown:
            raise TypeError(f"{self.__class__.__name__} has no channel(s) {sorted(unknown)}")
        values = tuple(channels.get(name, current) for name, current in zip(names, self._value))
        return self.__class__(values)

    # ------------------ PROTOCOL ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        parts = ", ".join(
            f"{name}={v!r}" for name, v in zip(self.channel_names + ('alpha',), self._value)
        )
        return f"{self.__class__.__name__}({parts})"
