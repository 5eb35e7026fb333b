"""/api/state/*: the server-held editor session (history, undo, import/export)."""

from __future__ import annotations

import logging
import random

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response

from kanjicompose.api.compose import composition_http_error, info_model
from kanjicompose.config import Settings
from kanjicompose.dependencies import (
    EditorSession,
    get_composer,
    get_loader,
    get_rng,
    get_session,
    get_settings,
)
from kanjicompose.engine.composer import Composer
from kanjicompose.engine.context import CompositionInfo
from kanjicompose.engine.orchestrator import compose_random
from kanjicompose.errors import DecompositionError, LoadError
from kanjicompose.glyphwiki.loader import GlyphLoader
from kanjicompose.models.requests import ResetFromCharRequest, ResetRequest, StateComposeRequest
from kanjicompose.models.responses import StateResponse, UndoResponse

router = APIRouter(prefix="/state")
logger = logging.getLogger(__name__)


def _state_response(session: EditorSession, info: CompositionInfo | None = None) -> StateResponse:
    state = session.editor.current
    return StateResponse(
        data=state.data,
        logical_size=state.logical_size,
        area=state.area,
        history_depth=session.editor.history_depth,
        info=info_model(info),
    )


@router.get("", response_model=StateResponse)
async def get_state(session: EditorSession = Depends(get_session)) -> StateResponse:
    return _state_response(session)


@router.post("/reset", response_model=StateResponse)
async def reset(req: ResetRequest, session: EditorSession = Depends(get_session)) -> StateResponse:
    async with session.lock:
        session.editor.reset(req.data)
        return _state_response(session)


@router.post("/reset/glyph", response_model=StateResponse)
async def reset_from_glyph(
    req: ResetFromCharRequest,
    session: EditorSession = Depends(get_session),
    loader: GlyphLoader = Depends(get_loader),
) -> StateResponse:
    data = await loader.load(req.name)
    if data is None:
        raise HTTPException(status_code=502, detail=f"Glyph {req.name!r} could not be loaded")
    async with session.lock:
        session.editor.reset(data)
        return _state_response(session)


@router.post("/random", response_model=StateResponse)
async def add_random_part(
    req: StateComposeRequest,
    session: EditorSession = Depends(get_session),
    composer: Composer = Depends(get_composer),
    loader: GlyphLoader = Depends(get_loader),
    rng: random.Random = Depends(get_rng),
    settings: Settings = Depends(get_settings),
) -> StateResponse:
    area_factor = req.area_factor if req.area_factor is not None else settings.default_area_factor
    async with session.lock:
        current = session.editor.current
        try:
            result, info = await compose_random(
                composer,
                loader,
                current.data,
                current.logical_size,
                current.area,
                area_factor,
                rng=rng,
            )
        except (LoadError, DecompositionError, ValueError) as e:
            logger.warning("Random composition on session state failed: %s", e)
            raise composition_http_error(e)

        session.editor.apply(result)
        logger.info("Added %s via %s (history depth %d)", info.char, info.layout.value, session.editor.history_depth)
        return _state_response(session, info)


@router.post("/undo", response_model=UndoResponse)
async def undo(session: EditorSession = Depends(get_session)) -> UndoResponse:
    async with session.lock:
        undone = session.editor.undo()
        return UndoResponse(undone=undone, state=_state_response(session))


@router.get("/export")
async def export_state(session: EditorSession = Depends(get_session)) -> Response:
    return Response(content=session.editor.export_json(), media_type="application/json")


@router.post("/import", response_model=StateResponse)
async def import_state(request: Request, session: EditorSession = Depends(get_session)) -> StateResponse:
    body = await request.body()
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=422, detail="State JSON must be UTF-8")

    async with session.lock:
        if not session.editor.import_json(text):
            raise HTTPException(status_code=422, detail="Invalid state JSON")
        return _state_response(session)
