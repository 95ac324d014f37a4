from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Response

from application.movies import MovieSession
from server.api.rest.dependencies import get_movie_session
from server.api.rest.v1.presenters import watched_entry_to_dict
from server.models.schemas import WatchedEntryModel, WatchedSummaryResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["watched-v1"])


@router.get("/watched", response_model=List[WatchedEntryModel])
async def list_watched(session: MovieSession = Depends(get_movie_session)) -> List[Dict[str, Any]]:
    return [watched_entry_to_dict(e) for e in session.watched.entries]


@router.post("/watched", response_model=WatchedEntryModel)
async def add_watched(session: MovieSession = Depends(get_movie_session)) -> Dict[str, Any]:
    """Add the selected, rated title to the watched list."""
    try:
        entry = await session.add_to_watched()
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return watched_entry_to_dict(entry)


@router.delete("/watched/{imdb_id}", status_code=204, response_class=Response)
async def delete_watched(imdb_id: str, session: MovieSession = Depends(get_movie_session)) -> Response:
    ok = await session.delete_watched(imdb_id)
    if not ok:
        raise HTTPException(status_code=404, detail="watched entry not found")
    return Response(status_code=204)


@router.get("/watched/summary", response_model=WatchedSummaryResponse)
async def get_watched_summary(session: MovieSession = Depends(get_movie_session)) -> Dict[str, Any]:
    summary = session.summary
    return {
        "count": summary.count,
        "avg_imdb_rating": summary.avg_imdb_rating,
        "avg_user_rating": summary.avg_user_rating,
        "avg_runtime": summary.avg_runtime,
    }
