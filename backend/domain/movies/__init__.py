from domain.movies.errors import (
    CatalogError,
    CatalogNotConfiguredError,
    CatalogUnavailableError,
    MovieNotFoundError,
)
from domain.movies.movie_detail import MovieDetail
from domain.movies.search_result import SearchResult
from domain.movies.summary import WatchedSummary
from domain.movies.watched_entry import WatchedEntry

__all__ = [
    "CatalogError",
    "CatalogNotConfiguredError",
    "CatalogUnavailableError",
    "MovieDetail",
    "MovieNotFoundError",
    "SearchResult",
    "WatchedEntry",
    "WatchedSummary",
]
