from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Optional

_RUNTIME_RE = re.compile(r"^\s*(\d+)\s*min")


def parse_runtime_minutes(runtime: Optional[str]) -> Optional[int]:
    """Parse catalog runtimes like "136 min"; anything else is unknown."""
    if not runtime:
        return None
    m = _RUNTIME_RE.match(runtime)
    if not m:
        return None
    return int(m.group(1))


def parse_rating(rating: Optional[str]) -> Optional[float]:
    if rating is None:
        return None
    try:
        value = float(rating)
    except (TypeError, ValueError):
        return None
    # "nan" and "inf" parse as floats but are not ratings.
    return value if math.isfinite(value) else None


@dataclass(frozen=True)
class MovieDetail:
    """Full catalog record of a single title, fetched per selection."""

    imdb_id: str
    title: str
    year: Optional[str] = None
    poster: Optional[str] = None
    kind: Optional[str] = None
    plot: Optional[str] = None
    genre: Optional[str] = None
    runtime: Optional[str] = None
    director: Optional[str] = None
    actors: Optional[str] = None
    imdb_rating: Optional[str] = None
    released: Optional[str] = None

    @property
    def runtime_minutes(self) -> Optional[int]:
        return parse_runtime_minutes(self.runtime)

    @property
    def imdb_rating_value(self) -> Optional[float]:
        return parse_rating(self.imdb_rating)

    def to_dict(self) -> dict[str, Any]:
        return {
            "imdb_id": self.imdb_id,
            "title": self.title,
            "year": self.year,
            "poster": self.poster,
            "kind": self.kind,
            "plot": self.plot,
            "genre": self.genre,
            "runtime": self.runtime,
            "director": self.director,
            "actors": self.actors,
            "imdb_rating": self.imdb_rating,
            "released": self.released,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MovieDetail":
        imdb_id = str(data.get("imdb_id") or "").strip()
        if not imdb_id:
            raise ValueError("imdb_id is required")
        return cls(
            imdb_id=imdb_id,
            title=str(data.get("title") or ""),
            year=data.get("year"),
            poster=data.get("poster"),
            kind=data.get("kind"),
            plot=data.get("plot"),
            genre=data.get("genre"),
            runtime=data.get("runtime"),
            director=data.get("director"),
            actors=data.get("actors"),
            imdb_rating=data.get("imdb_rating"),
            released=data.get("released"),
        )
