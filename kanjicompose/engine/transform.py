"""Affine remapping of stroke records and the area-preservation rule."""

from __future__ import annotations

import numpy as np

from kanjicompose.engine.context import FULL_RECT, Box, Rect
from kanjicompose.kage.decomposer import KAGE_UNIT, StrokeRecord
from kanjicompose.kage.parser import COORD_START


def part_source_region(rect: Rect | None) -> Box:
    """Source region of a part in its own units; the whole square when no rect is given."""
    return (rect or FULL_RECT).scaled(KAGE_UNIT)


def affine_remap(strokes: list[StrokeRecord], target: Box, source: Box) -> list[StrokeRecord]:
    """Map every coordinate pair from ``source`` onto ``target``, flooring each result.

    Fields before the first coordinate (type, head, tail) are copied unchanged.
    Flooring rather than rounding keeps output byte-identical across runs.
    """
    if source.w <= 0 or source.h <= 0:
        raise ValueError(f"Degenerate source region: {source}")

    scale_x = target.w / source.w
    scale_y = target.h / source.h
    offset_x = target.x - source.x * scale_x
    offset_y = target.y - source.y * scale_y

    remapped: list[StrokeRecord] = []
    for stroke in strokes:
        coords = np.asarray(stroke[COORD_START:], dtype=np.float64)
        coords[0::2] = np.floor(coords[0::2] * scale_x + offset_x)
        coords[1::2] = np.floor(coords[1::2] * scale_y + offset_y)
        remapped.append(list(stroke[:COORD_START]) + [int(v) for v in coords])
    return remapped


def preserve_area(current_area: float, current_size: float, new_size: float, area_factor: float) -> float:
    """Grow area in proportion to logical size, damped or amplified by ``area_factor``.

    ``area_factor`` 1 gives plain proportional growth, 0 keeps the area fixed.
    """
    ratio = new_size / current_size
    base_next_area = current_area * ratio
    delta = (base_next_area - current_area) * area_factor
    return current_area + delta
