"""GET /api/glyphs/{name}: load a glyph and every part it references."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from kanjicompose.dependencies import get_loader
from kanjicompose.glyphwiki.loader import GlyphLoader, to_identifier
from kanjicompose.models.responses import GlyphResponse

router = APIRouter()


@router.get("/glyphs/{name}", response_model=GlyphResponse)
async def get_glyph(name: str, loader: GlyphLoader = Depends(get_loader)) -> GlyphResponse:
    data = await loader.load(name)
    if data is None:
        raise HTTPException(status_code=404, detail=f"Glyph {name!r} could not be loaded")
    return GlyphResponse(
        name=name,
        id=to_identifier(name) or name,
        data=data,
        cached_parts=len(loader.cache),
    )
