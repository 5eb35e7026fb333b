"""TRIANGLE (shinajikei): three copies of the part, the existing composite is dropped.

This is the only terminal layout: the composer does not apply area
preservation or remap the existing strokes for it.
"""

from __future__ import annotations

from kanjicompose.engine.context import Box, TrianglePlacement
from kanjicompose.engine.layout_constants import TRIANGLE_SCALE
from kanjicompose.engine.registry import Layout, placement


@placement(layout=Layout.TRIANGLE, terminal=True, description="Three copies, top and bottom pair")
def triangle(current: float) -> TrianglePlacement:
    new = current * TRIANGLE_SCALE
    half = new / 2
    return TrianglePlacement(
        new_size=new,
        boxes=(
            Box(half / 2, 0, half, half),
            Box(0, half, half, half),
            Box(half, half, half, half),
        ),
    )
