"""Glyph definition cache: identifier → raw KAGE definition, add-only."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class GlyphCache:
    """Add-only store of raw definitions shared by the loader, composer and renderer.

    Entries are never evicted and never overwritten; a second ``add`` for an
    existing identifier is ignored.
    """

    def __init__(self, entries: dict[str, str] | None = None) -> None:
        self._entries: dict[str, str] = dict(entries or {})

    def get(self, identifier: str) -> str | None:
        return self._entries.get(identifier)

    def add(self, identifier: str, data: str) -> bool:
        """Store a definition. Returns False if the identifier was already cached."""
        if identifier in self._entries:
            return False
        self._entries[identifier] = data
        logger.debug("Cached %s (%d entries)", identifier, len(self._entries))
        return True

    def snapshot(self) -> dict[str, str]:
        """Copy of the whole table, as handed to the stroke decomposer."""
        return dict(self._entries)

    def identifiers(self) -> list[str]:
        return sorted(self._entries)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entries

    def __len__(self) -> int:
        return len(self._entries)
