"""Composition engine: catalog, layouts, affine remapping, orchestration."""

from kanjicompose.engine.catalog import CATALOG, CatalogEntry, resolve_variant
from kanjicompose.engine.composer import Composer
from kanjicompose.engine.context import CompositionInfo, CompositionResult, Rect
from kanjicompose.engine.orchestrator import compose_entry, compose_random
from kanjicompose.engine.registry import Layout, get_registry, placement

__all__ = [
    "CATALOG",
    "CatalogEntry",
    "resolve_variant",
    "Composer",
    "CompositionInfo",
    "CompositionResult",
    "Rect",
    "compose_entry",
    "compose_random",
    "Layout",
    "get_registry",
    "placement",
]
