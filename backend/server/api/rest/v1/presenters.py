from __future__ import annotations

from typing import Any, Dict

from application.movies import MovieSession
from domain.movies import SearchResult, WatchedEntry


def search_result_to_dict(item: SearchResult) -> Dict[str, Any]:
    return {
        "imdb_id": item.imdb_id,
        "title": item.title,
        "year": item.year,
        "poster": item.poster,
        "kind": item.kind,
    }


def watched_entry_to_dict(entry: WatchedEntry) -> Dict[str, Any]:
    return entry.to_dict()


def search_state(session: MovieSession) -> Dict[str, Any]:
    search = session.search
    return {
        "query": search.query,
        "error": search.error,
        "is_loading": search.is_loading,
        "phase": search.phase.value,
        "results": [search_result_to_dict(r) for r in search.results],
        "num_results": session.num_results,
    }


def detail_state(session: MovieSession) -> Dict[str, Any]:
    detail = session.detail
    rated = session.rated_entry
    return {
        "selected_id": session.selected_id,
        "is_loading": session.details.is_loading,
        "phase": session.details.phase.value,
        "detail": detail.to_dict() if detail is not None else None,
        "user_rating": rated.user_rating if rated is not None else None,
        "pending_rating": session.rating,
        "page_title": session.page_title,
    }
