"""Random person profiles from randomuser.me."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

from api_playground.errors import ApiError

from .base import as_dict, as_text, first, get_json

RANDOM_USER_URL = "https://randomuser.me/api/"


@dataclass(frozen=True)
class RandomUser:
    first_name: str
    last_name: str
    email: str
    city: str
    state: str
    country: str
    picture: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def location(self) -> str:
        return ", ".join(part for part in (self.city, self.state, self.country) if part)

    @classmethod
    def from_json(cls, data: Any) -> "RandomUser":
        data = as_dict(data)
        name = as_dict(data.get("name"))
        location = as_dict(data.get("location"))
        return cls(
            first_name=as_text(name.get("first")),
            last_name=as_text(name.get("last")),
            email=as_text(data.get("email"), "N/A"),
            city=as_text(location.get("city")),
            state=as_text(location.get("state")),
            country=as_text(location.get("country")),
            picture=as_text(as_dict(data.get("picture")).get("large")),
        )


def fetch_random_user(
    *, timeout: float | None = None, session: requests.Session | None = None
) -> RandomUser:
    data = as_dict(get_json(RANDOM_USER_URL, timeout=timeout, session=session))
    record = first(data.get("results"))
    if not record:
        raise ApiError("randomuser.me returned no results")
    return RandomUser.from_json(record)
