"""
Textual color formats.

Integer quantization (0-255) happens only here; everything inside the
package works on normalized floats.
"""
from .hex import parse_hex, to_hex, to_argb_hex
from .css import parse_css_rgb, to_css_rgba

__all__ = ['parse_hex', 'to_hex', 'to_argb_hex', 'parse_css_rgb', 'to_css_rgba']
