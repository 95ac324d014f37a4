from __future__ import annotations

import asyncio
import logging
from typing import Optional

from application.movies.detail_fetch_controller import DetailFetchController
from application.movies.query_search_controller import MIN_QUERY_LENGTH, QuerySearchController
from application.movies.watched_list import WatchedListStore
from application.ports.movie_catalog_port import MovieCatalogPort
from domain.movies import MovieDetail, WatchedEntry, WatchedSummary
from domain.movies.watched_entry import validate_user_rating

logger = logging.getLogger(__name__)

DEFAULT_APP_TITLE = "usePopcorn"


class MovieSession:
    """One user's search / detail / watched-list state.

    Wires the two fetch controllers to the selection, the pending rating and
    the watched list. The watched list is passed in so its persistence
    backend stays outside this object.
    """

    def __init__(
        self,
        *,
        catalog: MovieCatalogPort,
        watched: WatchedListStore,
        app_title: str = DEFAULT_APP_TITLE,
        min_query_length: int = MIN_QUERY_LENGTH,
    ) -> None:
        self.search = QuerySearchController(catalog, min_query_length=min_query_length)
        self.details = DetailFetchController(catalog)
        self.watched = watched
        self.selected_id: Optional[str] = None
        self.rating: Optional[int] = None
        self._app_title = app_title
        self._start_lock = asyncio.Lock()

    async def start(self) -> None:
        """Load the persisted watched list and run the initial (empty) search."""
        if not self.watched.loaded:
            await self.watched.load()
        self.search.set_query("")

    async def ensure_started(self) -> None:
        """Start once, even when several callers arrive before the first load finishes."""
        async with self._start_lock:
            if not self.watched.loaded:
                await self.start()

    def close(self) -> None:
        self.search.close()
        self.details.close()

    # ── search ───────────────────────────────────────────────────────
    def set_query(self, query: str) -> None:
        self.search.set_query(query)

    @property
    def num_results(self) -> int:
        return len(self.search.results)

    # ── selection ────────────────────────────────────────────────────
    def select(self, imdb_id: str) -> None:
        """Open ``imdb_id``; selecting the open title again closes it."""
        if imdb_id == self.selected_id:
            self.close_detail()
            return
        self.selected_id = imdb_id
        self.details.set_movie_id(imdb_id)

    def close_detail(self) -> None:
        self.selected_id = None
        self.details.set_movie_id(None)

    @property
    def detail(self) -> Optional[MovieDetail]:
        if self.selected_id is None:
            return None
        return self.details.detail

    @property
    def rated_entry(self) -> Optional[WatchedEntry]:
        return self.watched.find(self.selected_id)

    @property
    def page_title(self) -> str:
        detail = self.detail
        if detail is None or not detail.title:
            return self._app_title
        return f"Movie | {detail.title}"

    def set_rating(self, rating: int) -> None:
        self.rating = validate_user_rating(rating)

    # ── watched list ─────────────────────────────────────────────────
    async def add_to_watched(self) -> WatchedEntry:
        if self.selected_id is None:
            raise ValueError("no movie selected")
        detail = self.details.detail
        if self.details.is_loading or detail is None or detail.imdb_id != self.selected_id:
            raise ValueError("movie details are not loaded")
        if self.rated_entry is not None:
            raise ValueError("movie is already on the watched list")
        if self.rating is None:
            raise ValueError("rate the movie first")

        entry = await self.watched.add(WatchedEntry(movie=detail, user_rating=self.rating))
        logger.info("added to watched list imdb_id=%s rating=%d", entry.imdb_id, entry.user_rating)
        self.close_detail()
        self.rating = None
        return entry

    async def delete_watched(self, imdb_id: str) -> bool:
        return await self.watched.remove(imdb_id)

    @property
    def summary(self) -> WatchedSummary:
        return self.watched.summary()
