from __future__ import annotations

from infrastructure.config.settings import (  # noqa: F401
    OMDB_API_KEY,
    OMDB_BASE_URL,
    OMDB_TIMEOUT_S,
    WATCHED_STORAGE_KEY,
    WATCHED_STORE_PATH,
)

__all__ = [
    "OMDB_API_KEY",
    "OMDB_BASE_URL",
    "OMDB_TIMEOUT_S",
    "WATCHED_STORAGE_KEY",
    "WATCHED_STORE_PATH",
]
