from __future__ import annotations

from typing import List, Protocol

from domain.movies import MovieDetail, SearchResult


class MovieCatalogPort(Protocol):
    """Read-only access to the external movie catalog.

    Implementations raise ``CatalogError`` subclasses for every failure other
    than task cancellation, which must propagate untouched.
    """

    async def search_movies(self, query: str) -> List[SearchResult]:
        ...

    async def get_movie(self, imdb_id: str) -> MovieDetail:
        ...

    async def close(self) -> None:
        ...
