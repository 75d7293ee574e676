"""Property descriptors for color classes."""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


class ChannelDescriptor:
    """Read-only view on one entry of a color's value tuple.

    Args:
        index: Position of the channel in ``_value`` (alpha is -1)

    Example:
        class RGB(ColorBase):
            red: float = ChannelDescriptor(0)
            alpha: float = ChannelDescriptor(-1)
    """

    def __init__(self, index: int):
        self.index = index
        self.public_name: str = f"channel_{index}"  # overwritten by __set_name__

    def __set_name__(self, owner: type, name: str) -> None:
        self.public_name = name

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return obj._value[self.index]

    def __set__(self, obj: Any, value: Any) -> None:
        raise AttributeError(
            f"'{self.public_name}' is read-only on {obj.__class__.__name__}; "
            f"use replace({self.public_name}=...) to build a new color"
        )

    def __repr__(self) -> str:
        return f"ChannelDescriptor({self.public_name!r}, index={self.index})"
