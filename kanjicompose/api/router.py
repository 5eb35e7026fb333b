"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from kanjicompose.api import catalog, compose, glyphs, health, state

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(catalog.router)
api_router.include_router(glyphs.router)
api_router.include_router(compose.router)
api_router.include_router(state.router)
