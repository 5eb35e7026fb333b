"""Layout registry: every layout mode is a placement function registered via decorator.

Usage:
    @placement(layout=Layout.ADD_RIGHT, description="Append on the right")
    def add_right(current: float) -> BoxPlacement:
        ...

A placement function receives the current logical size and returns the new
logical size plus the target boxes in the new logical space. Adding a layout
means adding one decorated function; the composer dispatches on the result
type, so terminal layouts (TRIANGLE) return a TrianglePlacement instead.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from kanjicompose.engine.context import Placement

logger = logging.getLogger(__name__)


class Layout(str, enum.Enum):
    ADD_RIGHT = "ADD_RIGHT"
    ADD_LEFT = "ADD_LEFT"
    ADD_TOP = "ADD_TOP"
    ADD_BOTTOM = "ADD_BOTTOM"
    NYOU = "NYOU"
    ENCLOSE = "ENCLOSE"
    ENCLOSE_GATE = "ENCLOSE_GATE"
    TRIANGLE = "TRIANGLE"


@dataclass
class PlacementSpec:
    layout: Layout
    fn: Callable[[float], "Placement"]
    terminal: bool = False
    description: str = ""


class PlacementRegistry:
    """Registry of placement functions keyed by layout."""

    def __init__(self) -> None:
        self._placements: dict[Layout, PlacementSpec] = {}

    def register(self, spec: PlacementSpec) -> None:
        if spec.layout in self._placements:
            raise ValueError(f"Duplicate placement for layout: {spec.layout.value}")
        self._placements[spec.layout] = spec
        logger.debug("Registered placement %s", spec.layout.value)

    def get(self, layout: Layout) -> PlacementSpec:
        return self._placements[layout]

    def all(self) -> list[PlacementSpec]:
        order = list(Layout)
        return sorted(self._placements.values(), key=lambda s: order.index(s.layout))

    def __contains__(self, layout: object) -> bool:
        return layout in self._placements

    @property
    def count(self) -> int:
        return len(self._placements)


# Module-level registry
_registry = PlacementRegistry()


def get_registry() -> PlacementRegistry:
    return _registry


def placement(
    *,
    layout: Layout,
    terminal: bool = False,
    description: str = "",
):
    """Decorator to register a placement function."""

    def decorator(fn: Callable[[float], "Placement"]):
        _registry.register(
            PlacementSpec(layout=layout, fn=fn, terminal=terminal, description=description)
        )
        return fn

    return decorator
