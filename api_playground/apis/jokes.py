"""Safe-mode jokes from JokeAPI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

from api_playground.errors import ApiError

from .base import as_dict, as_text, get_json

JOKE_URL = "https://v2.jokeapi.dev/joke/Any?safe-mode"


@dataclass(frozen=True)
class Joke:
    """Either a one-liner (``joke``) or a two-part ``setup``/``delivery``."""

    kind: str
    joke: str
    setup: str
    delivery: str

    @property
    def is_single(self) -> bool:
        return self.kind == "single"

    @classmethod
    def from_json(cls, data: Any) -> "Joke":
        data = as_dict(data)
        return cls(
            kind=as_text(data.get("type"), "twopart"),
            joke=as_text(data.get("joke"), "N/A"),
            setup=as_text(data.get("setup"), "N/A"),
            delivery=as_text(data.get("delivery"), "N/A"),
        )


def fetch_joke(*, timeout: float | None = None, session: requests.Session | None = None) -> Joke:
    data = as_dict(get_json(JOKE_URL, timeout=timeout, session=session))
    # JokeAPI reports some failures with a 200 and an ``error`` flag.
    if data.get("error") is True:
        raise ApiError(f"JokeAPI error: {as_text(data.get('message'), 'unknown')}")
    return Joke.from_json(data)
