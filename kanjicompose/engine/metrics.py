"""Renderer-side metrics derived from a composite's area and logical size."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class RenderMetrics:
    # Side of the square whose area is the composite's visual area
    visual_size: float
    # Logical units → visual units
    scale_factor: float


def render_metrics(logical_size: float, area: float) -> RenderMetrics:
    visual_size = math.sqrt(area)
    return RenderMetrics(visual_size=visual_size, scale_factor=visual_size / logical_size)
