from __future__ import annotations

import asyncio
import logging
from typing import List

from application.movies.reactive import FetchPhase, ReactiveFetch
from application.ports.movie_catalog_port import MovieCatalogPort
from domain.movies import CatalogError, SearchResult
from domain.movies.errors import CATALOG_UNAVAILABLE_MESSAGE

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 3


class QuerySearchController(ReactiveFetch):
    """Search-as-you-type over the catalog.

    Outputs are plain attributes: ``error`` (empty string when none),
    ``is_loading`` and ``results``. Queries shorter than
    ``min_query_length`` (after trimming) never reach the network and leave
    the previous ``results`` in place.
    """

    def __init__(self, catalog: MovieCatalogPort, *, min_query_length: int = MIN_QUERY_LENGTH) -> None:
        super().__init__()
        self._catalog = catalog
        self._min_query_length = int(min_query_length)
        self.query = ""
        self.error = ""
        self.results: List[SearchResult] = []

    def set_query(self, query: str) -> None:
        query = query or ""
        if self._started and query == self.query:
            return
        self._started = True

        # Cleanup of the previous run happens before the new one starts.
        self._cancel_pending()
        self.query = query
        self.error = ""
        self.is_loading = True
        self.phase = FetchPhase.LOADING

        if len(query.strip()) < self._min_query_length:
            self.is_loading = False
            self.phase = FetchPhase.SUCCESS
            self._notify()
            return

        self._notify()
        self._task = asyncio.create_task(self._search(query))

    async def _search(self, query: str) -> None:
        try:
            results = await self._catalog.search_movies(query)
        except asyncio.CancelledError:
            logger.debug("search cancelled query=%r", query)
            raise
        except CatalogError as exc:
            if not self._is_current():
                return
            logger.info("search failed query=%r: %s", query, exc)
            self.error = str(exc)
            self.phase = FetchPhase.ERROR
        except Exception:
            if not self._is_current():
                return
            logger.exception("unexpected search failure query=%r", query)
            self.error = CATALOG_UNAVAILABLE_MESSAGE
            self.phase = FetchPhase.ERROR
        else:
            if not self._is_current():
                return
            self.results = list(results)
            self.error = ""
            self.phase = FetchPhase.SUCCESS

        self.is_loading = False
        self._notify()
