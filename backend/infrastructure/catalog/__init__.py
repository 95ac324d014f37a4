from __future__ import annotations

from infrastructure.catalog.omdb_client import OMDbClient

__all__ = ["OMDbClient"]
