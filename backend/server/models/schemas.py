from pydantic import BaseModel, Field
from typing import Optional, List


class SearchResultModel(BaseModel):
    """One catalog search hit."""
    imdb_id: str
    title: str
    year: Optional[str] = None
    poster: Optional[str] = None
    kind: Optional[str] = None


class SearchStateResponse(BaseModel):
    """Observable state of the search controller."""
    query: str
    error: str = ""
    is_loading: bool = False
    phase: str
    results: List[SearchResultModel] = []
    num_results: int = 0


class MovieDetailModel(SearchResultModel):
    plot: Optional[str] = None
    genre: Optional[str] = None
    runtime: Optional[str] = None
    director: Optional[str] = None
    actors: Optional[str] = None
    imdb_rating: Optional[str] = None
    released: Optional[str] = None


class DetailStateResponse(BaseModel):
    """Observable state of the detail view."""
    selected_id: Optional[str] = None
    is_loading: bool = False
    phase: str
    detail: Optional[MovieDetailModel] = None
    # Rating already on the watched list for this title, if any.
    user_rating: Optional[int] = None
    pending_rating: Optional[int] = None
    page_title: str


class SelectRequest(BaseModel):
    imdb_id: str = Field(..., min_length=1)


class RatingRequest(BaseModel):
    rating: int = Field(..., ge=1, le=10)


class WatchedEntryModel(MovieDetailModel):
    user_rating: int


class WatchedSummaryResponse(BaseModel):
    count: int
    avg_imdb_rating: float
    avg_user_rating: float
    avg_runtime: float
