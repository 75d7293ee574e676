from .palette import Palette
from .matcher import match_palette, create_palette, SupportsMinDeltaE
from .shades import (
    Shade, Shades, ShadePolicy,
    generate_shades, grade_weight, default_lightness, palette_lightness,
    DEFAULT_GRADES,
)

__all__ = [
    'Palette',
    'match_palette', 'create_palette', 'SupportsMinDeltaE',
    'Shade', 'Shades', 'ShadePolicy',
    'generate_shades', 'grade_weight', 'default_lightness', 'palette_lightness',
    'DEFAULT_GRADES',
]
