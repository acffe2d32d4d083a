"""Studio Ghibli film list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List

import requests

from api_playground.errors import ApiError

from .base import as_dict, as_text, get_json

FILMS_URL = "https://ghibliapi.vercel.app/films"


@dataclass(frozen=True)
class Film:
    title: str
    release_date: str

    @classmethod
    def from_json(cls, data: Any) -> "Film":
        data = as_dict(data)
        return cls(
            title=as_text(data.get("title"), "Unknown"),
            release_date=as_text(data.get("release_date"), "N/A"),
        )


def fetch_films(*, timeout: float | None = None, session: requests.Session | None = None) -> List[Film]:
    """Return every film in the order the API lists them."""
    data = get_json(FILMS_URL, timeout=timeout, session=session)
    if not isinstance(data, list):
        raise ApiError("Film list response is not an array")
    return [Film.from_json(item) for item in data]
