from __future__ import annotations

import asyncio
import logging
from typing import Optional

from application.movies.reactive import FetchPhase, ReactiveFetch
from application.ports.movie_catalog_port import MovieCatalogPort
from domain.movies import CatalogError, MovieDetail

logger = logging.getLogger(__name__)


class DetailFetchController(ReactiveFetch):
    """Loads the full record of the selected title.

    Failures are logged and leave ``detail`` as it was. Selecting another id
    cancels the fetch for the previous one, so a slow response can never
    overwrite a newer selection.
    """

    def __init__(self, catalog: MovieCatalogPort) -> None:
        super().__init__()
        self._catalog = catalog
        self.movie_id: Optional[str] = None
        self.detail: Optional[MovieDetail] = None

    def set_movie_id(self, movie_id: Optional[str]) -> None:
        if self._started and movie_id == self.movie_id:
            return
        self._started = True
        self._cancel_pending()
        self.movie_id = movie_id

        if movie_id is None:
            # Detail view closed.
            self.detail = None
            self.is_loading = False
            self.phase = FetchPhase.IDLE
            self._notify()
            return

        self.is_loading = True
        self.phase = FetchPhase.LOADING
        self._notify()
        self._task = asyncio.create_task(self._fetch(movie_id))

    async def _fetch(self, movie_id: str) -> None:
        try:
            detail = await self._catalog.get_movie(movie_id)
        except asyncio.CancelledError:
            logger.debug("detail fetch cancelled imdb_id=%s", movie_id)
            raise
        except CatalogError as exc:
            if not self._is_current():
                return
            logger.warning("detail fetch failed imdb_id=%s: %s", movie_id, exc)
            self.phase = FetchPhase.ERROR
        except Exception:
            if not self._is_current():
                return
            logger.exception("unexpected detail fetch failure imdb_id=%s", movie_id)
            self.phase = FetchPhase.ERROR
        else:
            if not self._is_current():
                return
            self.detail = detail
            self.phase = FetchPhase.SUCCESS

        self.is_loading = False
        self._notify()
