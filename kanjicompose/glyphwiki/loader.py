"""Dependency loader: resolves a character or id to its definition plus every part it uses.

Each identifier is fetched at most once per cache: hits return immediately,
and concurrent loads of an identifier that is still being fetched await the
same in-flight task. A fetched definition is cached before its component
references are followed, so cycles and diamonds cannot refetch.
"""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Awaitable, Callable

from kanjicompose.errors import LoadError
from kanjicompose.glyphwiki.cache import GlyphCache
from kanjicompose.kage.parser import component_references

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], Awaitable[str]]

_ID_PREFIX = "u"

# u6728, u6728-01, u2ff0-u6728-u6728
_CANONICAL_ID = re.compile(r"^u[0-9a-f]+(-.+)?$")


def char_to_id(char: str) -> str | None:
    """``"木"`` → ``"u6728"``."""
    if not char:
        return None
    return f"{_ID_PREFIX}{ord(char[0]):x}"


def id_to_char(identifier: str) -> str | None:
    """``"u6728"`` or ``"u6728-01"`` → ``"木"``; None for ids that are not code points."""
    if not identifier.startswith(_ID_PREFIX):
        return None
    code = identifier[len(_ID_PREFIX):].split("-", 1)[0]
    try:
        return chr(int(code, 16))
    except (ValueError, OverflowError):
        return None


def to_identifier(name_or_id: str) -> str | None:
    """Canonical ids pass through; anything else is converted from its first character."""
    if not name_or_id:
        return None
    if _CANONICAL_ID.match(name_or_id):
        return name_or_id
    return char_to_id(name_or_id)


class GlyphLoader:
    """Loads raw definitions through ``fetch`` into a shared GlyphCache."""

    def __init__(self, fetch: Fetcher, cache: GlyphCache | None = None) -> None:
        self.cache = cache if cache is not None else GlyphCache()
        self._fetch = fetch
        self._in_flight: dict[str, asyncio.Task[str | None]] = {}
        self.fetch_count = 0

    async def load(self, name_or_id: str) -> str | None:
        """Definition for a character or id, or None when it cannot be fetched."""
        identifier = to_identifier(name_or_id)
        if identifier is None:
            return None
        return await self._load_id(identifier)

    async def _load_id(self, identifier: str) -> str | None:
        # Component references are GlyphWiki ids already (cdp-8c4d, u6728-01)
        cached = self.cache.get(identifier)
        if cached is not None:
            return cached

        task = self._in_flight.get(identifier)
        if task is None:
            task = asyncio.ensure_future(self._load_uncached(identifier))
            self._in_flight[identifier] = task
            task.add_done_callback(lambda t, key=identifier: self._forget(key, t))
        return await task

    async def _load_uncached(self, identifier: str) -> str | None:
        self.fetch_count += 1
        try:
            data = await self._fetch(identifier)
        except LoadError as e:
            logger.warning("Failed to load %s: %s", identifier, e.reason)
            return None

        if not isinstance(data, str):
            logger.warning("Failed to load %s: fetch returned %s", identifier, type(data).__name__)
            return None

        self.cache.add(identifier, data)

        pending = [ref for ref in component_references(data) if ref not in self.cache]
        if pending:
            logger.debug("%s references %d uncached parts: %s", identifier, len(pending), pending)
            await asyncio.gather(*(self._load_id(ref) for ref in pending))
        return data

    def _forget(self, identifier: str, task: asyncio.Task) -> None:
        if self._in_flight.get(identifier) is task:
            del self._in_flight[identifier]
