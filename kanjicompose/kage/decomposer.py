"""Stroke decomposition: flatten KAGE definitions into absolute stroke records.

Component references (type 99) are expanded recursively against a lookup
table of identifier → raw definition. Each referenced glyph lives in its own
200-unit square and is mapped into the reference's ``x1:y1:x2:y2`` box, with
the optional KAGE stretch applied first.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Protocol

from kanjicompose.errors import DecompositionError
from kanjicompose.kage.parser import (
    COMPONENT_BOX_FIELDS,
    COMPONENT_NAME_FIELD,
    COMPONENT_STRETCH_FIELDS,
    COORD_START,
    is_component,
    split_records,
    to_int,
)

logger = logging.getLogger(__name__)

StrokeRecord = list[float]

# Edge length of a glyph's own coordinate square
KAGE_UNIT = 200

# Stretch parameters above this value carry a second control point
_STRETCH_SPLIT = 100


class StrokeDecomposer(Protocol):
    """Anything that can turn a raw definition into absolute stroke records."""

    def get_each_strokes(self, definition: str, table: Mapping[str, str]) -> list[StrokeRecord]: ...


class KageDecomposer:
    """In-process KAGE decomposer."""

    def __init__(self, max_depth: int = 16) -> None:
        self.max_depth = max_depth

    def get_each_strokes(self, definition: str, table: Mapping[str, str]) -> list[StrokeRecord]:
        return self._strokes(definition, table, depth=0)

    def _strokes(self, definition: str, table: Mapping[str, str], depth: int) -> list[StrokeRecord]:
        result: list[StrokeRecord] = []
        for fields in split_records(definition):
            if not is_component(fields):
                result.append([to_int(f) for f in fields])
                continue

            if len(fields) <= COMPONENT_NAME_FIELD:
                raise DecompositionError(f"Component reference without a name: {':'.join(fields)}")
            name = fields[COMPONENT_NAME_FIELD].strip()
            part = table.get(name)
            if not part:
                logger.debug("Component %s not in table, skipping", name)
                continue
            if depth >= self.max_depth:
                raise DecompositionError(f"Component nesting deeper than {self.max_depth} at {name}")

            box = tuple(to_int(_field(fields, i)) for i in COMPONENT_BOX_FIELDS)
            stretch = tuple(to_int(_field(fields, i)) for i in COMPONENT_STRETCH_FIELDS)
            inner = self._strokes(part, table, depth + 1)
            result.extend(_place_component(inner, box, stretch))
        return result


def _field(fields: list[str], index: int) -> str:
    return fields[index] if index < len(fields) else ""


def _place_component(
    strokes: list[StrokeRecord],
    box: tuple[int, ...],
    stretch: tuple[int, ...],
) -> list[StrokeRecord]:
    x1, y1, x2, y2 = box
    sx, sy, sx2, sy2 = stretch

    stretching = sx != 0 or sy != 0
    if stretching:
        if sx > _STRETCH_SPLIT:
            sx -= KAGE_UNIT
        else:
            sx2 = 0
            sy2 = 0
        min_x, min_y, max_x, max_y = _bounds(strokes)

    placed: list[StrokeRecord] = []
    for stroke in strokes:
        head = stroke[:COORD_START]
        coords = stroke[COORD_START:]
        out: list[float] = list(head)
        for i, v in enumerate(coords):
            if i % 2 == 0:
                if stretching:
                    v = _stretch(sx, sx2, v, min_x, max_x)
                out.append(x1 + v * (x2 - x1) / KAGE_UNIT)
            else:
                if stretching:
                    v = _stretch(sy, sy2, v, min_y, max_y)
                out.append(y1 + v * (y2 - y1) / KAGE_UNIT)
        placed.append(out)
    return placed


def _stretch(dp: float, sp: float, p: float, lo: float, hi: float) -> float:
    """Piecewise-linear KAGE stretch moving ``sp + 100`` to ``dp + 100`` inside [lo, hi]."""
    if p < sp + _STRETCH_SPLIT:
        p1, p2, p3, p4 = lo, sp + _STRETCH_SPLIT, lo, dp + _STRETCH_SPLIT
    else:
        p1, p2, p3, p4 = sp + _STRETCH_SPLIT, hi, dp + _STRETCH_SPLIT, hi
    if p2 == p1:
        return p
    return math.floor((p - p1) / (p2 - p1) * (p4 - p3) + p3)


def _bounds(strokes: list[StrokeRecord]) -> tuple[float, float, float, float]:
    min_x, min_y = float(KAGE_UNIT), float(KAGE_UNIT)
    max_x, max_y = 0.0, 0.0
    for stroke in strokes:
        if not stroke or stroke[0] == 0:
            continue
        coords = stroke[COORD_START:]
        for x, y in zip(coords[0::2], coords[1::2]):
            min_x = min(min_x, x)
            max_x = max(max_x, x)
            min_y = min(min_y, y)
            max_y = max(max_y, y)
    return (min_x, min_y, max_x, max_y)
