"""Composer: attaches a part to the current composite under a layout.

Pure with respect to everything it touches: raw definitions are read, never
mutated, the shared cache is only read (as the decomposition table), and a
failure anywhere aborts the call before any result exists.
"""

from __future__ import annotations

import logging
import math

import kanjicompose.engine.placements  # noqa: F401  (registers every layout)
from kanjicompose.engine.context import (
    Box,
    CompositionResult,
    Rect,
    TrianglePlacement,
)
from kanjicompose.engine.layout_constants import BASE_AREA, TRIANGLE_COPIES
from kanjicompose.engine.registry import Layout, PlacementRegistry, get_registry
from kanjicompose.engine.transform import affine_remap, part_source_region, preserve_area
from kanjicompose.glyphwiki.cache import GlyphCache
from kanjicompose.kage.decomposer import KageDecomposer, StrokeDecomposer, StrokeRecord
from kanjicompose.kage.serializer import stringify

logger = logging.getLogger(__name__)


class Composer:
    """Layout + affine transform + area math over KAGE definitions."""

    def __init__(
        self,
        cache: GlyphCache,
        decomposer: StrokeDecomposer | None = None,
        registry: PlacementRegistry | None = None,
    ) -> None:
        self.cache = cache
        self.decomposer = decomposer or KageDecomposer()
        self.registry = registry or get_registry()

    def flatten(self, definition: str) -> list[StrokeRecord]:
        """Absolute stroke records for a definition, with every cached part available."""
        return self.decomposer.get_each_strokes(definition, self.cache.snapshot())

    def compose(
        self,
        current_data: str,
        part_data: str | None,
        layout: Layout | str,
        current_size: float,
        current_area: float,
        area_factor: float,
        part_rect: Rect | None = None,
    ) -> CompositionResult:
        if part_data is None:
            raise ValueError("Cannot compose an absent part")
        if current_size <= 0:
            raise ValueError(f"Logical size must be positive, got {current_size}")

        layout = Layout(layout)
        spec = self.registry.get(layout)

        strokes_current = self.flatten(current_data)
        strokes_part = self.flatten(part_data)

        placement = spec.fn(current_size)
        source_part = part_source_region(part_rect)

        if isinstance(placement, TrianglePlacement):
            copies: list[StrokeRecord] = []
            for box in placement.boxes:
                copies.extend(affine_remap(strokes_part, box, source_part))
            area = TRIANGLE_COPIES * BASE_AREA * area_factor
            logger.info("Composed %s: %d part strokes x%d", layout.value, len(strokes_part), len(placement.boxes))
            return CompositionResult(data=stringify(copies), logical_size=placement.new_size, area=area)

        new_area = preserve_area(current_area, current_size, placement.new_size, area_factor)

        source_current = Box(0, 0, current_size, current_size)
        moved_current = affine_remap(strokes_current, placement.box_current, source_current)
        moved_part = affine_remap(strokes_part, placement.box_part, source_part)

        logger.info(
            "Composed %s: size %.1f -> %.1f, area %.1f -> %.1f",
            layout.value,
            current_size,
            placement.new_size,
            current_area,
            new_area,
        )
        return CompositionResult(
            data=stringify(moved_current + moved_part),
            logical_size=math.floor(placement.new_size),
            area=new_area,
        )
