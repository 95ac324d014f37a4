"""
OMDb API HTTP client.

Async adapter behind ``MovieCatalogPort``. Session handling follows the other
outbound HTTP clients: one lazily created ``aiohttp.ClientSession`` per
client, guarded by an ``asyncio.Lock`` and released by ``close()``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

import aiohttp

from domain.movies import (
    CatalogNotConfiguredError,
    CatalogUnavailableError,
    MovieDetail,
    MovieNotFoundError,
    SearchResult,
)
from infrastructure.config.settings import OMDB_API_KEY, OMDB_BASE_URL, OMDB_TIMEOUT_S

logger = logging.getLogger(__name__)


def _clean(value: Any) -> Optional[str]:
    """OMDb spells missing fields as "N/A"."""
    if value is None:
        return None
    text = str(value).strip()
    if not text or text == "N/A":
        return None
    return text


def _parse_search_result(item: dict[str, Any]) -> Optional[SearchResult]:
    imdb_id = _clean(item.get("imdbID"))
    if not imdb_id:
        return None
    return SearchResult(
        imdb_id=imdb_id,
        title=str(item.get("Title") or ""),
        year=_clean(item.get("Year")),
        poster=_clean(item.get("Poster")),
        kind=_clean(item.get("Type")),
    )


def _parse_movie_detail(data: dict[str, Any]) -> MovieDetail:
    imdb_id = _clean(data.get("imdbID"))
    if not imdb_id:
        raise MovieNotFoundError()
    return MovieDetail(
        imdb_id=imdb_id,
        title=str(data.get("Title") or ""),
        year=_clean(data.get("Year")),
        poster=_clean(data.get("Poster")),
        kind=_clean(data.get("Type")),
        plot=_clean(data.get("Plot")),
        genre=_clean(data.get("Genre")),
        runtime=_clean(data.get("Runtime")),
        director=_clean(data.get("Director")),
        actors=_clean(data.get("Actors")),
        imdb_rating=_clean(data.get("imdbRating")),
        released=_clean(data.get("Released")),
    )


class OMDbClient:
    """Async HTTP client for the OMDb API.

    Attributes:
        _base_url: OMDb endpoint (both search and lookup share it)
        _api_key: OMDb API key, sent as the ``apikey`` query parameter
        _timeout_s: Total request timeout in seconds, ``None`` for none
        _session: aiohttp ClientSession (lazily initialized)
        _lock: Async lock guarding session creation
    """

    def __init__(
        self,
        *,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout_s: float | None = None,
    ) -> None:
        self._base_url = (base_url or OMDB_BASE_URL or "").strip()
        self._api_key = (api_key or OMDB_API_KEY or "").strip()
        timeout = timeout_s if timeout_s is not None else OMDB_TIMEOUT_S
        self._timeout_s = float(timeout) if timeout else None
        self._session: aiohttp.ClientSession | None = None
        self._lock = asyncio.Lock()

    @property
    def configured(self) -> bool:
        return bool(self._base_url and self._api_key)

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is not None and not self._session.closed:
            return self._session

        async with self._lock:
            # Double-check after acquiring lock
            if self._session is not None and not self._session.closed:
                return self._session

            timeout = aiohttp.ClientTimeout(total=self._timeout_s)
            self._session = aiohttp.ClientSession(timeout=timeout)
            return self._session

    async def _get_json(self, params: dict[str, str], *, what: str) -> dict[str, Any]:
        """GET the OMDb endpoint and return the payload of a ``Response: "True"`` reply.

        Raises:
            MovieNotFoundError: non-success HTTP status or ``Response: "False"``.
            CatalogUnavailableError: transport failure, timeout or unreadable body.
        """
        if not self.configured:
            logger.warning("OMDb client not configured (missing base_url or api key)")
            raise CatalogNotConfiguredError("movie catalog is not configured")

        session = await self._get_session()
        logger.debug("OMDb %s url=%s params=%s", what, self._base_url, params)

        try:
            async with session.get(
                self._base_url,
                params={"apikey": self._api_key, **params},
                headers={"accept": "application/json"},
            ) as resp:
                if not 200 <= resp.status < 300:
                    error_text = await resp.text()
                    logger.error("OMDb %s failed (%s): %s", what, resp.status, error_text[:200])
                    raise MovieNotFoundError()
                data = await resp.json(content_type=None)
        except asyncio.TimeoutError:
            logger.error("OMDb %s timeout after %ss params=%s", what, self._timeout_s, params)
            raise CatalogUnavailableError() from None
        except aiohttp.ClientError as exc:
            logger.error("OMDb %s transport error params=%s: %s", what, params, exc)
            raise CatalogUnavailableError() from exc
        except ValueError as exc:
            logger.error("OMDb %s returned invalid JSON params=%s: %s", what, params, exc)
            raise CatalogUnavailableError() from exc

        if not isinstance(data, dict):
            logger.error("OMDb %s returned %s instead of an object", what, type(data).__name__)
            raise CatalogUnavailableError()
        if data.get("Response") == "False":
            logger.info("OMDb %s no match params=%s: %s", what, params, data.get("Error"))
            raise MovieNotFoundError()
        return data

    async def search_movies(self, query: str) -> list[SearchResult]:
        """Search titles (``s=<query>``); the raw ``Search`` array, parsed."""
        data = await self._get_json({"s": query}, what="search")
        rows = data.get("Search") or []
        if not isinstance(rows, list):
            return []
        results: list[SearchResult] = []
        for row in rows:
            if not isinstance(row, dict):
                continue
            parsed = _parse_search_result(row)
            if parsed is not None:
                results.append(parsed)
        return results

    async def get_movie(self, imdb_id: str) -> MovieDetail:
        """Look up one title by IMDb id (``i=<id>``)."""
        data = await self._get_json({"i": imdb_id}, what="lookup")
        return _parse_movie_detail(data)

    async def close(self) -> None:
        """Close the HTTP session and release resources."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None
