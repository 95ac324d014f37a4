from __future__ import annotations

from functools import lru_cache

from application.movies import MovieSession, WatchedListStore
from config.settings import APP_TITLE, SEARCH_MIN_QUERY_LENGTH


@lru_cache(maxsize=1)
def _build_catalog():
    from infrastructure.catalog import OMDbClient

    return OMDbClient()


@lru_cache(maxsize=1)
def _build_key_value_store():
    from infrastructure.config.settings import WATCHED_STORE_PATH
    from infrastructure.persistence.kv import JsonFileKeyValueStore

    return JsonFileKeyValueStore(WATCHED_STORE_PATH)


@lru_cache(maxsize=1)
def _build_movie_session() -> MovieSession:
    from infrastructure.config.settings import WATCHED_STORAGE_KEY

    watched = WatchedListStore(_build_key_value_store(), storage_key=WATCHED_STORAGE_KEY)
    return MovieSession(
        catalog=_build_catalog(),
        watched=watched,
        app_title=APP_TITLE,
        min_query_length=SEARCH_MIN_QUERY_LENGTH,
    )


async def get_movie_session() -> MovieSession:
    """Process-scoped session; the watched list is loaded on first use."""
    session = _build_movie_session()
    await session.ensure_started()
    return session


async def shutdown_dependencies() -> None:
    """Best-effort shutdown hooks for long-lived adapters (HTTP sessions, stores)."""
    if _build_movie_session.cache_info().currsize:
        _build_movie_session().close()

    if _build_catalog.cache_info().currsize:
        await _build_catalog().close()

    if _build_key_value_store.cache_info().currsize:
        await _build_key_value_store().close()
