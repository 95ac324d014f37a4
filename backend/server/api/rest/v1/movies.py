from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from application.movies import MovieSession
from server.api.rest.dependencies import get_movie_session
from server.api.rest.v1.presenters import detail_state, search_state
from server.models.schemas import (
    DetailStateResponse,
    RatingRequest,
    SearchStateResponse,
    SelectRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["movies-v1"])


@router.get("/movies/search", response_model=SearchStateResponse)
async def search_movies(
    query: str = Query("", description="Free-text title query"),
    session: MovieSession = Depends(get_movie_session),
) -> Dict[str, Any]:
    """Set the search query and return the state once the search has settled.

    A newer query arriving meanwhile supersedes this one; the response then
    reflects the newer query's outcome.
    """
    session.set_query(query)
    await session.search.wait_settled()
    return search_state(session)


@router.get("/movies/search/state", response_model=SearchStateResponse)
async def get_search_state(session: MovieSession = Depends(get_movie_session)) -> Dict[str, Any]:
    return search_state(session)


@router.get("/movies/selection", response_model=DetailStateResponse)
async def get_selection(session: MovieSession = Depends(get_movie_session)) -> Dict[str, Any]:
    return detail_state(session)


@router.post("/movies/selection", response_model=DetailStateResponse)
async def select_movie(
    req: SelectRequest,
    session: MovieSession = Depends(get_movie_session),
) -> Dict[str, Any]:
    """Select a title (selecting the open one again closes it)."""
    session.select(req.imdb_id.strip())
    await session.details.wait_settled()
    return detail_state(session)


@router.delete("/movies/selection", status_code=204, response_class=Response)
async def close_selection(session: MovieSession = Depends(get_movie_session)) -> Response:
    session.close_detail()
    return Response(status_code=204)


@router.put("/movies/selection/rating", response_model=DetailStateResponse)
async def rate_selection(
    req: RatingRequest,
    session: MovieSession = Depends(get_movie_session),
) -> Dict[str, Any]:
    if session.selected_id is None:
        raise HTTPException(status_code=400, detail="no movie selected")
    try:
        session.set_rating(req.rating)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return detail_state(session)
