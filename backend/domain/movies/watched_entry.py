from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from domain.movies.movie_detail import MovieDetail

MIN_USER_RATING = 1
MAX_USER_RATING = 10


def validate_user_rating(rating: Any) -> int:
    # bool is an int subclass; a checkbox value is never a rating.
    if isinstance(rating, bool) or not isinstance(rating, int):
        raise ValueError("rating must be an integer")
    if not MIN_USER_RATING <= rating <= MAX_USER_RATING:
        raise ValueError(f"rating must be between {MIN_USER_RATING} and {MAX_USER_RATING}")
    return rating


@dataclass(frozen=True)
class WatchedEntry:
    """A rated movie on the user's watched list."""

    movie: MovieDetail
    user_rating: int

    def __post_init__(self) -> None:
        validate_user_rating(self.user_rating)

    @property
    def imdb_id(self) -> str:
        return self.movie.imdb_id

    def to_dict(self) -> dict[str, Any]:
        return {**self.movie.to_dict(), "user_rating": self.user_rating}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WatchedEntry":
        return cls(movie=MovieDetail.from_dict(data), user_rating=data.get("user_rating"))
