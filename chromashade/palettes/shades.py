from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, Mapping, Optional, Sequence, Tuple

from ..colors import ColorBase, LCH
from ..constants import DEFAULT_SHADES, GRADE_DENOMINATOR
from ..errors import UnknownGradeError
from ..types.color_types import ColorSpace
from .matcher import match_palette
from .palette import Palette

logger = logging.getLogger(__name__)

DEFAULT_GRADES: Tuple[str, ...] = tuple(DEFAULT_SHADES)


class ShadePolicy(str, Enum):
    DEFAULT = "default"
    PALETTE = "palette"


@dataclass(frozen=True)
class Shade:
    grade: str
    color: ColorBase


class Shades(Mapping[str, ColorBase]):
    """Read-only, ordered mapping of grade label to generated color."""

    def __init__(self, shades: Iterable[Shade]) -> None:
        self._shades: Dict[str, Shade] = {shade.grade: shade for shade in shades}

    def __getitem__(self, grade: str) -> ColorBase:
        return self._shades[grade].color

    def __iter__(self) -> Iterator[str]:
        return iter(self._shades)

    def __len__(self) -> int:
        return len(self._shades)

    def shades(self) -> Tuple[Shade, ...]:
        return tuple(self._shades.values())

    def __repr__(self) -> str:
        return f"Shades({list(self._shades)})"


def grade_weight(grade: str) -> float:
    """
    Interpolation weight of a grade: its number over 900.

    Accent grades use their number, so ``"A400"`` weighs 400/900.
    """
    digits = grade[1:] if grade[:1] in ("A", "a") else grade
    if not digits.isdigit():
        raise UnknownGradeError(grade)
    return int(digits) / GRADE_DENOMINATOR


def default_lightness(base_lightness: float, grade: str, table: Mapping[str, float] = DEFAULT_SHADES) -> float:
    """Lightness of ``grade`` on the default curve for a base lightness."""
    if grade not in table:
        raise UnknownGradeError(grade)
    return base_lightness + (table[grade] - base_lightness) * grade_weight(grade)


def _default_catalog() -> Sequence[Palette]:
    from ..samples.palettes import MATERIAL_PALETTES

    return MATERIAL_PALETTES


def palette_lightness(base_lightness: float, grade: str, palette: Palette) -> float:
    """Lightness of ``grade`` interpolated towards the palette's own anchor."""
    target = palette[grade].lightness
    return base_lightness + (target - base_lightness) * grade_weight(grade)


def _palette_curve(base: LCH, palette: Palette, grades: Sequence[str]) -> Dict[str, float]:
    logger.debug("Taking shade targets from palette %s", palette.name)

    curve = {}
    for grade in grades:
        if grade in palette:
            curve[grade] = palette_lightness(base.lightness, grade, palette)
        else:
            logger.debug("Grade %s missing from %s; using the default curve", grade, palette.name)
            curve[grade] = default_lightness(base.lightness, grade)
    return curve


def generate_shades(
    color: ColorBase,
    grades: Optional[Sequence[str]] = None,
    policy: ShadePolicy = ShadePolicy.DEFAULT,
    *,
    palette: Optional[Palette] = None,
    catalog: Optional[Iterable[Palette]] = None,
    output_space: Optional[ColorSpace] = None,
) -> Shades:
    """
    Derive a shade family from a base color.

    Only lightness varies; hue, chroma and alpha of the base are kept.

    Args:
        color: Base color, any space
        grades: Grade labels to generate (defaults to 50..900 and accents)
        policy: ``DEFAULT`` interpolates towards the fixed table,
            ``PALETTE`` interpolates towards the anchors of a reference palette
        palette: Reference palette for ``PALETTE`` (matched from ``catalog``
            when omitted)
        catalog: Palettes to match against (defaults to the Material catalog)
        output_space: Space of the returned colors (defaults to ``color.mode``)

    Returns:
        Shades mapping grade label to color, in ``grades`` order.

    Raises:
        UnknownGradeError: a grade has no target lightness
        EmptyCatalogError: ``PALETTE`` policy with an empty catalog
    """
    policy = ShadePolicy(policy)
    grades = tuple(grades) if grades is not None else DEFAULT_GRADES
    output_space = output_space or color.mode
    base = LCH(color)
    logger.debug("Generating %d shades of %r with %s policy", len(grades), base, policy.value)

    if policy is ShadePolicy.PALETTE:
        if palette is None:
            palette = match_palette(base, catalog if catalog is not None else _default_catalog())
        curve = _palette_curve(base, palette, grades)
    else:
        curve = {grade: default_lightness(base.lightness, grade) for grade in grades}

    return Shades(
        Shade(grade, base.with_lightness(lightness).convert(output_space))
        for grade, lightness in curve.items()
    )
