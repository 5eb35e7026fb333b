"""Shared test fixtures."""

from __future__ import annotations

import asyncio

import pytest

from kanjicompose.errors import LoadError
from kanjicompose.glyphwiki.cache import GlyphCache


# Hand-made KAGE definitions in GlyphWiki's 200-unit space

KI_KAGE = "1:0:0:20:60:180:60$1:0:0:100:20:100:190$2:0:7:95:60:40:150$2:0:7:105:60:160:150"
KIHEN_KAGE = "1:0:0:10:60:80:60$1:0:0:45:20:45:190"
KUCHI_KAGE = "1:0:0:40:40:40:160$1:0:0:40:40:160:40$1:0:0:160:40:160:160$1:0:0:40:160:160:160"
# 林: kihen on the left, full 木 on the right
HAYASHI_KAGE = "99:0:0:0:0:100:200:u6728-01$99:0:0:100:0:200:200:u6728"

SIMPLE_STROKE = "1:0:0:10:10:50:50"

GLYPHS = {
    "u6728": KI_KAGE,
    "u6728-01": KIHEN_KAGE,
    "u53e3": KUCHI_KAGE,
    "u6797": HAYASHI_KAGE,
}


class FakeFetcher:
    """In-memory stand-in for the GlyphWiki client. Records every fetch."""

    def __init__(self, glyphs: dict[str, str], delay: float = 0.0, fail: set[str] | None = None) -> None:
        self.glyphs = dict(glyphs)
        self.delay = delay
        self.fail = set(fail or ())
        self.calls: list[str] = []

    async def __call__(self, identifier: str) -> str:
        self.calls.append(identifier)
        if self.delay:
            await asyncio.sleep(self.delay)
        if identifier in self.fail or identifier not in self.glyphs:
            raise LoadError(identifier, "not found")
        return self.glyphs[identifier]


class AnyGlyphFetcher(FakeFetcher):
    """Serves SIMPLE_STROKE for any identifier it has no explicit entry for."""

    async def __call__(self, identifier: str) -> str:
        self.calls.append(identifier)
        if identifier in self.fail:
            raise LoadError(identifier, "not found")
        return self.glyphs.get(identifier, SIMPLE_STROKE)


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher(GLYPHS)


@pytest.fixture
def cache() -> GlyphCache:
    return GlyphCache()


@pytest.fixture
def loaded_cache() -> GlyphCache:
    return GlyphCache(dict(GLYPHS))
