"""FastAPI app factory."""

from __future__ import annotations

import logging
import random
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kanjicompose import __version__
from kanjicompose.config import settings
from kanjicompose.dependencies import EditorSession
from kanjicompose.engine.composer import Composer
from kanjicompose.glyphwiki.cache import GlyphCache
from kanjicompose.glyphwiki.client import GlyphWikiClient
from kanjicompose.glyphwiki.loader import Fetcher, GlyphLoader

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.kanjicompose_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)
logger = logging.getLogger(__name__)


def create_app(fetch: Fetcher | None = None, seed: int | None = None) -> FastAPI:
    """Build the app with its own cache, loader, composer and editor session.

    ``fetch`` replaces the GlyphWiki client (tests pass an in-memory fetcher);
    ``seed`` overrides the configured random seed.
    """
    glyphwiki = GlyphWikiClient() if fetch is None else None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        if glyphwiki is not None:
            await glyphwiki.aclose()
            logger.info("GlyphWiki client closed")

    app = FastAPI(
        title="kanjicompose",
        description="Composite kanji builder: attaches GlyphWiki parts under layout rules",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    cache = GlyphCache()
    app.state.glyphwiki = glyphwiki
    app.state.loader = GlyphLoader(fetch or glyphwiki.fetch, cache)
    app.state.composer = Composer(cache)
    app.state.session = EditorSession()
    app.state.rng = random.Random(seed if seed is not None else settings.random_seed)

    from kanjicompose.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
