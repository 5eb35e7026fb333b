"""Placement functions. Importing this package registers every layout."""

from kanjicompose.engine.placements import enclosure, side, triangle

__all__ = ["enclosure", "side", "triangle"]
