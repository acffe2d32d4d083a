"""Trending movies from The Movie Database (TMDB).

This is the only endpoint that needs a credential; the key is sent as the
``api_key`` query parameter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

import requests

from api_playground.errors import ApiError

from .base import as_dict, as_list, as_text, get_json

TRENDING_URL = "https://api.themoviedb.org/3/trending/movie/day"


@dataclass(frozen=True)
class TrendingMovie:
    title: str
    release_date: str

    @property
    def year(self) -> str:
        return self.release_date[:4] or "N/A"

    @classmethod
    def from_json(cls, data: Any) -> "TrendingMovie":
        data = as_dict(data)
        return cls(
            title=as_text(data.get("title"), "Unknown"),
            release_date=as_text(data.get("release_date")),
        )


def fetch_trending_movies(
    api_key: str, *, timeout: float | None = None, session: requests.Session | None = None
) -> List[TrendingMovie]:
    """Return today's trending movies in rank order."""
    if not api_key:
        raise ApiError("TMDB API key must be provided.")
    data = as_dict(get_json(TRENDING_URL, {"api_key": api_key}, timeout=timeout, session=session))
    return [TrendingMovie.from_json(item) for item in as_list(data.get("results"))]
