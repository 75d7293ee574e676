"""Hex string codecs (``#RRGGBB``, ``#RRGGBBAA``, ``#AARRGGBB``)."""
import math
import re

from ..colors import ColorBase, RGB
from ..errors import ColorParseError

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def channel_to_byte(channel: float) -> int:
    """Quantize a normalized channel to 0-255."""
    return round_half_up(channel * 255)


def parse_hex(text: str) -> RGB:
    """
    Decode ``#RRGGBB`` or ``#RRGGBBAA`` (case-insensitive, ``#`` optional).

    Alpha defaults to 1.0 when omitted.

    Raises:
        ColorParseError: on any other length or non-hex digits
    """
    match = _HEX_RE.match(text.strip())
    if match is None:
        raise ColorParseError(f"Hex color must be 6 or 8 hex digits, got {text!r}")
    digits = match.group(1)
    values = [int(digits[i:i + 2], 16) / 255.0 for i in range(0, len(digits), 2)]
    return RGB(tuple(values))


def to_hex(color: ColorBase, include_alpha: bool = False) -> str:
    """Encode as ``#RRGGBB`` or, with ``include_alpha``, ``#RRGGBBAA``."""
    rgb = RGB(color)
    channels = rgb.value if include_alpha else rgb.channels
    return "#" + "".join(f"{channel_to_byte(c):02X}" for c in channels)


def to_argb_hex(color: ColorBase) -> str:
    """Encode as ``#AARRGGBB``."""
    rgb = RGB(color)
    return "#" + "".join(f"{channel_to_byte(c):02X}" for c in (rgb.alpha,) + rgb.channels)
