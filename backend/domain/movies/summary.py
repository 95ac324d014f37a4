from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from domain.movies.watched_entry import WatchedEntry


def average(values: Sequence[float]) -> float:
    """Mean of ``values``; an empty sequence averages to 0.0."""
    if not values:
        return 0.0
    return sum(values) / len(values)


@dataclass(frozen=True)
class WatchedSummary:
    count: int = 0
    avg_imdb_rating: float = 0.0
    avg_user_rating: float = 0.0
    avg_runtime: float = 0.0

    @classmethod
    def from_entries(cls, entries: Iterable[WatchedEntry]) -> "WatchedSummary":
        items = list(entries)
        # Titles without a numeric critic rating or a known runtime are left
        # out of that particular average, not counted as zero.
        imdb = [r for r in (e.movie.imdb_rating_value for e in items) if r is not None]
        runtimes = [float(m) for m in (e.movie.runtime_minutes for e in items) if m is not None]
        return cls(
            count=len(items),
            avg_imdb_rating=average(imdb),
            avg_user_rating=average([float(e.user_rating) for e in items]),
            avg_runtime=average(runtimes),
        )
