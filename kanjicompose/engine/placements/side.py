"""Side attachments: the part takes a fixed-width strip on one edge.

Strips span the full new side length, so the existing composite is stretched
along the perpendicular axis.
"""

from __future__ import annotations

from kanjicompose.engine.context import Box, BoxPlacement
from kanjicompose.engine.layout_constants import (
    ADD_BOTTOM_EXTENT,
    ADD_LEFT_EXTENT,
    ADD_RIGHT_EXTENT,
    ADD_TOP_EXTENT,
)
from kanjicompose.engine.registry import Layout, placement


@placement(layout=Layout.ADD_RIGHT, description="Attach on the right (tsukuri)")
def add_right(current: float) -> BoxPlacement:
    new = current + ADD_RIGHT_EXTENT
    return BoxPlacement(
        new_size=new,
        box_current=Box(0, 0, current, new),
        box_part=Box(current, 0, ADD_RIGHT_EXTENT, new),
    )


@placement(layout=Layout.ADD_LEFT, description="Attach on the left (hen)")
def add_left(current: float) -> BoxPlacement:
    new = current + ADD_LEFT_EXTENT
    return BoxPlacement(
        new_size=new,
        box_current=Box(ADD_LEFT_EXTENT, 0, current, new),
        box_part=Box(0, 0, ADD_LEFT_EXTENT, new),
    )


@placement(layout=Layout.ADD_TOP, description="Place on top (kanmuri)")
def add_top(current: float) -> BoxPlacement:
    new = current + ADD_TOP_EXTENT
    return BoxPlacement(
        new_size=new,
        box_current=Box(0, ADD_TOP_EXTENT, new, current),
        box_part=Box(0, 0, new, ADD_TOP_EXTENT),
    )


@placement(layout=Layout.ADD_BOTTOM, description="Attach below (ashi)")
def add_bottom(current: float) -> BoxPlacement:
    new = current + ADD_BOTTOM_EXTENT
    return BoxPlacement(
        new_size=new,
        box_current=Box(0, 0, new, current),
        box_part=Box(0, current, new, ADD_BOTTOM_EXTENT),
    )
