"""Value types flowing through the composition engine.

Rect  → fractional sub-region of a part's own 200-unit square
Box   → absolute rectangle (layout targets and remap sources)
Placement → what a layout function decides: new size plus target boxes
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from kanjicompose.engine.registry import Layout


@dataclass(frozen=True)
class Rect:
    """Useful content region of a part, as fractions of its local square."""

    x: float = 0.0
    y: float = 0.0
    w: float = 1.0
    h: float = 1.0

    def scaled(self, unit: float) -> Box:
        return Box(self.x * unit, self.y * unit, self.w * unit, self.h * unit)

    def as_list(self) -> list[float]:
        return [self.x, self.y, self.w, self.h]


FULL_RECT = Rect()


@dataclass(frozen=True)
class Box:
    x: float
    y: float
    w: float
    h: float


@dataclass(frozen=True)
class BoxPlacement:
    """Existing composite goes to ``box_current``, the new part to ``box_part``."""

    new_size: float
    box_current: Box
    box_part: Box


@dataclass(frozen=True)
class TrianglePlacement:
    """Terminal placement: the composite is discarded, the part is copied into each box."""

    new_size: float
    boxes: tuple[Box, ...]


Placement = Union[BoxPlacement, TrianglePlacement]


@dataclass(frozen=True)
class CompositionResult:
    data: str
    logical_size: float
    area: float


@dataclass(frozen=True)
class CompositionInfo:
    """What a random composition added, for display and logging."""

    char: str
    layout: Layout
