"""GlyphWiki API client: fetches raw KAGE definitions over HTTP."""

from __future__ import annotations

import logging

import httpx

from kanjicompose.config import settings
from kanjicompose.errors import LoadError

logger = logging.getLogger(__name__)

_GLYPH_ENDPOINT = "/api/glyph"


class GlyphWikiClient:
    """Thin httpx wrapper around ``GET /api/glyph?name=<id>``.

    The response body is JSON of the form ``{"name": ..., "data": "<kage>"}``;
    ``data`` is null for unknown glyphs. One ``httpx.AsyncClient`` (and its
    connection pool) is shared by every fetch until ``aclose``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or settings.glyphwiki_base_url
        self.timeout = timeout if timeout is not None else settings.fetch_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch(self, identifier: str) -> str:
        """Return the raw definition for ``identifier`` or raise LoadError."""
        try:
            response = await self.client.get(_GLYPH_ENDPOINT, params={"name": identifier})
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise LoadError(identifier, str(e)) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise LoadError(identifier, "response is not JSON") from e

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, str):
            raise LoadError(identifier, "no glyph data in response")

        logger.debug("Fetched %s (%d bytes)", identifier, len(data))
        return data
