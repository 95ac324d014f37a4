from application.movies.detail_fetch_controller import DetailFetchController
from application.movies.query_search_controller import MIN_QUERY_LENGTH, QuerySearchController
from application.movies.reactive import FetchPhase
from application.movies.session import DEFAULT_APP_TITLE, MovieSession
from application.movies.watched_list import DEFAULT_STORAGE_KEY, WatchedListStore

__all__ = [
    "DEFAULT_APP_TITLE",
    "DEFAULT_STORAGE_KEY",
    "DetailFetchController",
    "FetchPhase",
    "MIN_QUERY_LENGTH",
    "MovieSession",
    "QuerySearchController",
    "WatchedListStore",
]
