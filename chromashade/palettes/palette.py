from __future__ import annotations
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Tuple

import numpy as np

from ..colors import ColorBase, Lab, LCH
from ..distance import np_delta_e_2000
from ..formats import parse_hex


class Palette:
    """
    A named reference palette: ordered tonal anchors keyed by grade label.

    Anchors are stored as LCH values, plus a Lab matrix so a query color is
    scored against every anchor in one vectorized CIEDE2000 pass.

    >>> blue = Palette.from_hex("blue", {"100": "#BBDEFB", "500": "#2196F3"})
    >>> blue.closest_anchor(blue["500"])[0]
    '500'
    """
    __slots__ = ('_name', '_anchors', '_lab')

    def __init__(self, name: str, anchors: Mapping[str, ColorBase]) -> None:
        if not anchors:
            raise ValueError(f"Palette {name!r} needs at least one anchor")
        self._name = name
        self._anchors: Mapping[str, LCH] = MappingProxyType(
            {str(grade): LCH(color) for grade, color in anchors.items()}
        )
        self._lab = np.array([Lab(color).channels for color in self._anchors.values()])

    @classmethod
    def from_hex(cls, name: str, anchors: Mapping[str, str]) -> Palette:
        """Build a palette from ``{grade: "#RRGGBB"}``."""
        return cls(name, {grade: parse_hex(code) for grade, code in anchors.items()})

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def name(self) -> str:
        return self._name

    @property
    def anchors(self) -> Mapping[str, LCH]:
        return self._anchors

    @property
    def grades(self) -> Tuple[str, ...]:
        return tuple(self._anchors)

    def lightness_curve(self) -> Dict[str, float]:
        """Anchor lightness (LCH L) per grade, in anchor order."""
        return {grade: color.lightness for grade, color in self._anchors.items()}

    # ------------------ DISTANCES ------------------
    def delta_es(self, color: ColorBase) -> np.ndarray:
        """CIEDE2000 distance from ``color`` to every anchor, in anchor order."""
        return np_delta_e_2000(self._lab, np.asarray(Lab(color).channels))

    def min_delta_e(self, color: ColorBase) -> float:
        """Distance from ``color`` to the closest anchor of this palette."""
        return float(self.delta_es(color).min())

    def closest_anchor(self, color: ColorBase) -> Tuple[str, LCH, float]:
        """
        Closest anchor to ``color``.

        Returns:
            (grade, anchor, distance); ties resolve to the earliest grade.
        """
        distances = self.delta_es(color)
        index = int(np.argmin(distances))
        grade = self.grades[index]
        return grade, self._anchors[grade], float(distances[index])

    # ------------------ PROTOCOL ------------------
    def __getitem__(self, grade: str) -> LCH:
        return self._anchors[grade]

    def __contains__(self, grade: object) -> bool:
        return grade in self._anchors

    def __iter__(self) -> Iterator[str]:
        return iter(self._anchors)

    def __len__(self) -> int:
        return len(self._anchors)

    def __repr__(self) -> str:
        return f"Palette({self._name!r}, grades={list(self._anchors)})"
