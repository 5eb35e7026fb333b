"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from kanjicompose import __version__
from kanjicompose.engine.registry import get_registry
from kanjicompose.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        layouts_registered=get_registry().count,
    )
