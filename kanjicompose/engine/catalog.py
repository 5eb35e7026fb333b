"""Part catalog and variant resolution.

Each entry names a display character, the layouts it may be attached with,
and optional per-layout variants: a radical form such as kihen (``u6728-01``)
with the fractional region of its 200-unit square that actually holds ink.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Union

from kanjicompose.engine.context import Rect
from kanjicompose.engine.registry import Layout


@dataclass(frozen=True)
class BareIdentifier:
    identifier: str


@dataclass(frozen=True)
class IdentifierWithRect:
    identifier: str
    rect: Rect


Variant = Union[BareIdentifier, IdentifierWithRect]


@dataclass(frozen=True)
class CatalogEntry:
    char: str
    layouts: tuple[Layout, ...]
    variants: Mapping[Layout, Variant] = field(default_factory=dict)


def _variant(identifier: str, x: float, y: float, w: float, h: float) -> IdentifierWithRect:
    return IdentifierWithRect(identifier, Rect(x, y, w, h))


L = Layout

CATALOG: tuple[CatalogEntry, ...] = (
    CatalogEntry(
        "木",
        (L.ADD_RIGHT, L.ADD_LEFT, L.ADD_TOP, L.ADD_BOTTOM),
        {L.ADD_LEFT: _variant("u6728-01", 0, 0, 0.45, 1)},  # kihen
    ),
    CatalogEntry("日", (L.ADD_RIGHT, L.ADD_TOP, L.ADD_BOTTOM)),
    CatalogEntry("口", (L.ADD_RIGHT, L.ADD_LEFT, L.ADD_TOP, L.ADD_BOTTOM)),
    CatalogEntry("田", (L.ADD_RIGHT, L.ADD_TOP, L.ADD_BOTTOM)),
    CatalogEntry("門", (L.ADD_RIGHT, L.ADD_LEFT, L.ENCLOSE_GATE)),
    CatalogEntry(
        "人",
        (L.ADD_RIGHT, L.ADD_TOP, L.ADD_LEFT),
        {L.ADD_LEFT: _variant("u4ebb-01", 0, 0, 0.5, 1)},  # ninben
    ),
    CatalogEntry(
        "水",
        (L.ADD_LEFT, L.ADD_BOTTOM),
        {L.ADD_LEFT: _variant("u6c35-01", 0, 0, 0.45, 1)},  # sanzui
    ),
    CatalogEntry(
        "火",
        (L.ADD_LEFT, L.ADD_BOTTOM),
        {
            L.ADD_LEFT: _variant("u706b-01", 0, 0, 0.5, 1),  # hihen
            L.ADD_BOTTOM: _variant("u706c-04", 0, 0.6, 1, 0.4),  # rekka, drawn in the lower band
        },
    ),
    CatalogEntry(
        "土",
        (L.ADD_RIGHT, L.ADD_BOTTOM, L.ADD_LEFT),
        {L.ADD_LEFT: _variant("u571f-01", 0, 0, 0.55, 1)},  # tsuchihen
    ),
    CatalogEntry("山", (L.ADD_TOP, L.ADD_LEFT)),
    CatalogEntry(
        "雨",
        (L.ADD_TOP, L.ADD_RIGHT),
        {L.ADD_TOP: _variant("u96e8-03", 0, 0, 1, 0.5)},  # amekanmuri
    ),
    CatalogEntry(
        "言",
        (L.ADD_LEFT, L.ADD_RIGHT, L.ADD_BOTTOM),
        {L.ADD_LEFT: _variant("u8a00-01", 0, 0, 0.4, 1)},  # gonben
    ),
    CatalogEntry(
        "心",
        (L.ADD_BOTTOM, L.ADD_RIGHT, L.ADD_LEFT),
        {
            L.ADD_LEFT: _variant("u5fc4-01", 0, 0, 0.4, 1),  # risshinben
            L.ADD_BOTTOM: _variant("u5fc3-04", 0, 0.6, 1, 0.4),  # shitagokoro
        },
    ),
    CatalogEntry(
        "手",
        (L.ADD_LEFT, L.ADD_BOTTOM),
        {L.ADD_LEFT: _variant("u624c-01", 0, 0, 0.45, 1)},  # tehen
    ),
    CatalogEntry(
        "示",
        (L.ADD_LEFT, L.ADD_BOTTOM),
        {L.ADD_LEFT: _variant("u793b-01", 0, 0, 0.45, 1)},  # shimesuhen
    ),
    CatalogEntry(
        "辶",
        (L.NYOU,),
        {L.NYOU: _variant("u8fb6-g", 0, 0, 1, 1)},
    ),
    CatalogEntry("囗", (L.ENCLOSE,)),
)

LAYOUT_LABELS: dict[Layout, str] = {
    L.ADD_RIGHT: "Add right (tsukuri)",
    L.ADD_LEFT: "Add left (hen)",
    L.ADD_TOP: "Place on top (kanmuri)",
    L.ADD_BOTTOM: "Add below (ashi)",
    L.NYOU: "Shinnyou (wraps lower left)",
    L.ENCLOSE: "Enclose (kunigamae)",
    L.ENCLOSE_GATE: "Gate (mongamae, content below)",
    L.TRIANGLE: "Triangle (three copies)",
}

_BY_CHAR: dict[str, CatalogEntry] = {e.char: e for e in CATALOG}


def get_entry(char: str) -> CatalogEntry:
    """Catalog entry for a display character. Raises KeyError if absent."""
    return _BY_CHAR[char]


def resolve_variant(entry: CatalogEntry, layout: Layout) -> tuple[str, Rect | None]:
    """Identifier to load for ``entry`` under ``layout``, plus its effective region.

    Without a declared variant the display character itself is returned; the
    loader turns it into a canonical id.
    """
    variant = entry.variants.get(layout)
    if isinstance(variant, IdentifierWithRect):
        return variant.identifier, variant.rect
    if isinstance(variant, BareIdentifier):
        return variant.identifier, None
    return entry.char, None


def validate_catalog(catalog: tuple[CatalogEntry, ...] = CATALOG) -> list[str]:
    """Consistency problems in a catalog; empty when it is well-formed."""
    problems: list[str] = []
    seen: set[str] = set()
    for entry in catalog:
        if entry.char in seen:
            problems.append(f"{entry.char}: duplicate entry")
        seen.add(entry.char)
        if not entry.layouts:
            problems.append(f"{entry.char}: no layouts")
        if len(set(entry.layouts)) != len(entry.layouts):
            problems.append(f"{entry.char}: duplicate layouts")
        for layout in entry.variants:
            if layout not in entry.layouts:
                problems.append(f"{entry.char}: variant for undeclared layout {layout.value}")
    return problems
