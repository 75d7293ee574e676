from __future__ import annotations
import logging
import math
from typing import Dict, Iterable, Optional, Protocol, TypeVar

from ..colors import ColorBase, LCH
from ..errors import EmptyCatalogError
from .palette import Palette

logger = logging.getLogger(__name__)


class SupportsMinDeltaE(Protocol):
    """Anything a catalog can hold: reports its closest-anchor distance."""

    def min_delta_e(self, color: ColorBase) -> float: ...


P = TypeVar("P", bound=SupportsMinDeltaE)


def match_palette(color: ColorBase, catalog: Iterable[P]) -> P:
    """
    Find the catalog palette closest to ``color``.

    Linear scan over ``catalog`` scoring each entry with ``min_delta_e``;
    the first palette wins on ties. The catalog is only iterated, never
    modified.

    Raises:
        EmptyCatalogError: if ``catalog`` yields no palettes
    """
    target = LCH(color)
    best: Optional[P] = None
    best_distance = math.inf

    for palette in catalog:
        distance = palette.min_delta_e(target)
        if best is None or distance < best_distance:
            best, best_distance = palette, distance

    if best is None:
        raise EmptyCatalogError("Cannot match a palette against an empty catalog")

    logger.debug("Matched %r to %r (delta E %.4f)", target, best, best_distance)
    return best


def create_palette(color: ColorBase, catalog: Iterable[Palette]) -> Dict[str, LCH]:
    """
    Custom palette for ``color`` derived from its closest catalog palette.

    Every anchor of the matched palette is shifted by the LCH offset between
    ``color`` and that palette's closest anchor, so the closest grade
    reproduces ``color`` itself.
    """
    target = LCH(color)
    palette = match_palette(target, catalog)
    grade, anchor, _ = palette.closest_anchor(target)
    delta_l = target.lightness - anchor.lightness
    delta_c = target.chroma - anchor.chroma
    delta_h = target.hue_delta(anchor)
    logger.debug(
        "Deriving palette from %s grade %s (dL=%.3f, dC=%.3f, dH=%.3f)",
        palette.name, grade, delta_l, delta_c, delta_h,
    )

    return {
        g: LCH((
            a.lightness + delta_l,
            a.chroma + delta_c,
            a.hue + delta_h,
            target.alpha,
        ))
        for g, a in palette.anchors.items()
    }
