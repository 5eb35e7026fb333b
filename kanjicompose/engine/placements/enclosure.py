"""Enclosing layouts: the part is drawn over the whole square and the composite sits inside."""

from __future__ import annotations

from kanjicompose.engine.context import Box, BoxPlacement
from kanjicompose.engine.layout_constants import (
    ENCLOSE_FRAME_SCALE,
    ENCLOSE_MARGIN,
    GATE_CONTENT_SCALE,
    GATE_INNER_RATIO,
    GATE_TOP_OFFSET,
    NYOU_INNER_RATIO,
    NYOU_TOP_OFFSET,
)
from kanjicompose.engine.registry import Layout, placement


@placement(layout=Layout.NYOU, description="Shinnyou, wraps the lower left")
def nyou(current: float) -> BoxPlacement:
    new = current / NYOU_INNER_RATIO
    margin = new - current
    return BoxPlacement(
        new_size=new,
        box_current=Box(margin, new * NYOU_TOP_OFFSET, current, current),
        box_part=Box(0, 0, new, new),
    )


@placement(layout=Layout.ENCLOSE, description="Kunigamae, encloses on all sides")
def enclose(current: float) -> BoxPlacement:
    new = current + ENCLOSE_MARGIN
    frame = new * ENCLOSE_FRAME_SCALE - ENCLOSE_MARGIN
    frame_pad = (new - frame) / 2
    pad = (new - current) / 2
    return BoxPlacement(
        new_size=new,
        box_current=Box(pad, pad, current, current),
        box_part=Box(frame_pad, frame_pad, frame, frame),
    )


@placement(layout=Layout.ENCLOSE_GATE, description="Mongamae, content shrunk into the gate")
def enclose_gate(current: float) -> BoxPlacement:
    new = current / GATE_INNER_RATIO
    content = new * GATE_CONTENT_SCALE
    return BoxPlacement(
        new_size=new,
        box_current=Box((new - content) / 2, new * GATE_TOP_OFFSET, content, content),
        box_part=Box(0, 0, new, new),
    )
