"""FastAPI dependency injection.

The cache, loader, composer and editor session are created once per app in
``create_app`` and hung off ``app.state``; routes reach them through these
helpers rather than module globals.
"""

from __future__ import annotations

import asyncio
import random
from dataclasses import dataclass, field

from fastapi import Request

from kanjicompose.config import settings
from kanjicompose.engine.composer import Composer
from kanjicompose.glyphwiki.loader import GlyphLoader
from kanjicompose.state.store import EditorState


@dataclass
class EditorSession:
    """Server-held editor state plus the lock that keeps it single-writer."""

    editor: EditorState = field(default_factory=EditorState)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)


def get_settings():
    return settings


def get_loader(request: Request) -> GlyphLoader:
    return request.app.state.loader


def get_composer(request: Request) -> Composer:
    return request.app.state.composer


def get_session(request: Request) -> EditorSession:
    return request.app.state.session


def get_rng(request: Request) -> random.Random:
    return request.app.state.rng
