from __future__ import annotations

MOVIE_NOT_FOUND_MESSAGE = "movie not found"
CATALOG_UNAVAILABLE_MESSAGE = "failed to fetch movies"


class CatalogError(Exception):
    """Base class for failures talking to the movie catalog.

    ``str(exc)`` is the user-facing message shown by the search view.
    """


class MovieNotFoundError(CatalogError):
    """HTTP non-success or an application-level ``Response: "False"``."""

    def __init__(self, message: str = MOVIE_NOT_FOUND_MESSAGE) -> None:
        super().__init__(message)


class CatalogUnavailableError(CatalogError):
    """Transport failure: connection error, timeout or an unreadable body."""

    def __init__(self, message: str = CATALOG_UNAVAILABLE_MESSAGE) -> None:
        super().__init__(message)


class CatalogNotConfiguredError(CatalogUnavailableError):
    """No API key was configured for the catalog."""
