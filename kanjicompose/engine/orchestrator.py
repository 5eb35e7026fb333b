"""Composition orchestration: pick (or take) a catalog part, load it, compose it.

Neither function touches the editor state; applying the result is the
caller's job.
"""

from __future__ import annotations

import logging
import random

from kanjicompose.engine.catalog import CATALOG, CatalogEntry, resolve_variant
from kanjicompose.engine.composer import Composer
from kanjicompose.engine.context import CompositionInfo, CompositionResult
from kanjicompose.engine.registry import Layout
from kanjicompose.errors import LoadError
from kanjicompose.glyphwiki.loader import GlyphLoader, to_identifier

logger = logging.getLogger(__name__)


async def compose_entry(
    composer: Composer,
    loader: GlyphLoader,
    entry: CatalogEntry,
    layout: Layout | str,
    current_data: str,
    current_size: float,
    current_area: float,
    area_factor: float,
) -> CompositionResult:
    """Attach ``entry`` under ``layout``. Raises LoadError if the part is unavailable."""
    layout = Layout(layout)
    if layout not in entry.layouts:
        raise ValueError(f"{entry.char} does not permit layout {layout.value}")

    identifier, rect = resolve_variant(entry, layout)
    part_data = await loader.load(identifier)
    if part_data is None:
        raise LoadError(to_identifier(identifier) or identifier, "part unavailable, cannot compose this selection")

    return composer.compose(
        current_data,
        part_data,
        layout,
        current_size,
        current_area,
        area_factor,
        rect,
    )


async def compose_random(
    composer: Composer,
    loader: GlyphLoader,
    current_data: str,
    current_size: float,
    current_area: float,
    area_factor: float,
    rng: random.Random | None = None,
    catalog: tuple[CatalogEntry, ...] = CATALOG,
) -> tuple[CompositionResult, CompositionInfo]:
    """Uniformly pick an entry, then one of its layouts, and compose it."""
    chooser = rng if rng is not None else random.Random()
    entry = chooser.choice(catalog)
    layout = chooser.choice(entry.layouts)
    logger.info("Random composition: %s via %s", entry.char, layout.value)

    result = await compose_entry(
        composer,
        loader,
        entry,
        layout,
        current_data,
        current_size,
        current_area,
        area_factor,
    )
    return result, CompositionInfo(char=entry.char, layout=layout)
