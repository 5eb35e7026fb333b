"""GET /api/catalog, /api/layouts: the composable parts and layout modes."""

from __future__ import annotations

from fastapi import APIRouter

from kanjicompose.engine.catalog import CATALOG, LAYOUT_LABELS, resolve_variant
from kanjicompose.engine.registry import get_registry
from kanjicompose.models.responses import CatalogEntryModel, LayoutModel, VariantModel

router = APIRouter()


@router.get("/catalog", response_model=list[CatalogEntryModel])
async def catalog() -> list[CatalogEntryModel]:
    entries: list[CatalogEntryModel] = []
    for entry in CATALOG:
        variants: dict[str, VariantModel] = {}
        for layout in entry.variants:
            identifier, rect = resolve_variant(entry, layout)
            variants[layout.value] = VariantModel(id=identifier, rect=rect.as_list() if rect else None)
        entries.append(
            CatalogEntryModel(
                char=entry.char,
                layouts=[layout.value for layout in entry.layouts],
                variants=variants,
            )
        )
    return entries


@router.get("/layouts", response_model=list[LayoutModel])
async def layouts() -> list[LayoutModel]:
    return [
        LayoutModel(
            id=spec.layout.value,
            label=LAYOUT_LABELS[spec.layout],
            description=spec.description,
            terminal=spec.terminal,
        )
        for spec in get_registry().all()
    ]
