"""CSS ``rgb()`` / ``rgba()`` codecs."""
import re

from ..colors import ColorBase, RGB
from ..errors import ColorParseError
from .hex import channel_to_byte

_NUMBER = r"\s*([+-]?(?:\d+\.?\d*|\.\d+))\s*"
_CSS_RE = re.compile(
    rf"^rgba?\({_NUMBER},{_NUMBER},{_NUMBER}(?:,{_NUMBER})?\)$",
    re.IGNORECASE,
)


def parse_css_rgb(text: str) -> RGB:
    """
    Decode ``rgb(r, g, b)`` or ``rgba(r, g, b, a)``.

    r/g/b are 0-255, alpha is 0-1 and defaults to 1.0.

    Raises:
        ColorParseError: on malformed syntax or out-of-range channels
    """
    match = _CSS_RE.match(text.strip())
    if match is None:
        raise ColorParseError(f"Not a CSS rgb()/rgba() color: {text!r}")

    r, g, b, a = match.groups()
    channels = [float(v) for v in (r, g, b)]
    alpha = float(a) if a is not None else 1.0

    if any(not 0.0 <= c <= 255.0 for c in channels):
        raise ColorParseError(f"rgb channels must be within 0-255, got {text!r}")
    if not 0.0 <= alpha <= 1.0:
        raise ColorParseError(f"Alpha must be within 0-1, got {text!r}")

    return RGB(tuple(c / 255.0 for c in channels) + (alpha,))


def to_css_rgba(color: ColorBase) -> str:
    """Encode as ``rgba(r, g, b, a)``: integer channels, alpha with two decimals."""
    rgb = RGB(color)
    r, g, b = (channel_to_byte(c) for c in rgb.channels)
    return f"rgba({r}, {g}, {b}, {rgb.alpha:.2f})"
