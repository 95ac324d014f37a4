from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SearchResult:
    """One row of a catalog title search (immutable API snapshot)."""

    imdb_id: str
    title: str
    year: Optional[str] = None
    poster: Optional[str] = None
    # movie | series | episode
    kind: Optional[str] = None
