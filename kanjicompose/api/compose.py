"""POST /api/compose, /api/compose/random: stateless composition."""

from __future__ import annotations

import logging
import random

from fastapi import APIRouter, Depends, HTTPException

from kanjicompose.config import Settings
from kanjicompose.dependencies import get_composer, get_loader, get_rng, get_settings
from kanjicompose.engine.catalog import get_entry
from kanjicompose.engine.composer import Composer
from kanjicompose.engine.context import CompositionInfo, CompositionResult
from kanjicompose.engine.metrics import render_metrics
from kanjicompose.engine.orchestrator import compose_entry, compose_random
from kanjicompose.errors import DecompositionError, LoadError
from kanjicompose.glyphwiki.loader import GlyphLoader
from kanjicompose.models.requests import ComposeRequest, RandomComposeRequest
from kanjicompose.models.responses import CompositionInfoModel, CompositionResponse

router = APIRouter(prefix="/compose")
logger = logging.getLogger(__name__)


def composition_http_error(e: Exception) -> HTTPException:
    """Map a composition failure onto an HTTP error."""
    if isinstance(e, LoadError):
        return HTTPException(status_code=502, detail=str(e))
    if isinstance(e, DecompositionError):
        return HTTPException(status_code=422, detail=f"Malformed glyph data: {e}")
    return HTTPException(status_code=400, detail=str(e))


def info_model(info: CompositionInfo | None) -> CompositionInfoModel | None:
    if info is None:
        return None
    return CompositionInfoModel(char=info.char, layout=info.layout.value)


def to_response(result: CompositionResult, info: CompositionInfo | None = None) -> CompositionResponse:
    metrics = render_metrics(result.logical_size, result.area)
    return CompositionResponse(
        data=result.data,
        logical_size=result.logical_size,
        area=result.area,
        visual_size=metrics.visual_size,
        scale_factor=metrics.scale_factor,
        info=info_model(info),
    )


@router.post("", response_model=CompositionResponse)
async def compose(
    req: ComposeRequest,
    composer: Composer = Depends(get_composer),
    loader: GlyphLoader = Depends(get_loader),
    settings: Settings = Depends(get_settings),
) -> CompositionResponse:
    try:
        entry = get_entry(req.char)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"{req.char!r} is not in the catalog")

    area_factor = req.area_factor if req.area_factor is not None else settings.default_area_factor
    try:
        result = await compose_entry(
            composer,
            loader,
            entry,
            req.layout,
            req.data,
            req.logical_size,
            req.area,
            area_factor,
        )
    except (LoadError, DecompositionError, ValueError) as e:
        logger.warning("Composition of %s via %s failed: %s", req.char, req.layout.value, e)
        raise composition_http_error(e)

    return to_response(result, CompositionInfo(char=entry.char, layout=req.layout))


@router.post("/random", response_model=CompositionResponse)
async def compose_random_part(
    req: RandomComposeRequest,
    composer: Composer = Depends(get_composer),
    loader: GlyphLoader = Depends(get_loader),
    rng: random.Random = Depends(get_rng),
    settings: Settings = Depends(get_settings),
) -> CompositionResponse:
    area_factor = req.area_factor if req.area_factor is not None else settings.default_area_factor
    try:
        result, info = await compose_random(
            composer,
            loader,
            req.data,
            req.logical_size,
            req.area,
            area_factor,
            rng=rng,
        )
    except (LoadError, DecompositionError, ValueError) as e:
        logger.warning("Random composition failed: %s", e)
        raise composition_http_error(e)

    return to_response(result, info)
