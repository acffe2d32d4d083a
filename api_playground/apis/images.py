"""Random animal pictures (dog.ceo and thecatapi.com)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

from api_playground.errors import ApiError

from .base import as_dict, as_text, first, get_json

DOG_URL = "https://dog.ceo/api/breeds/image/random"
CAT_URL = "https://api.thecatapi.com/v1/images/search"


@dataclass(frozen=True)
class RandomImage:
    url: str
    alt: str


def fetch_dog_image(
    *, timeout: float | None = None, session: requests.Session | None = None
) -> RandomImage:
    data = as_dict(get_json(DOG_URL, timeout=timeout, session=session))
    url = as_text(data.get("message"))
    if not url:
        raise ApiError("Dog API returned no image")
    return RandomImage(url=url, alt="Random dog")


def fetch_cat_image(
    *, timeout: float | None = None, session: requests.Session | None = None
) -> RandomImage:
    data: Any = get_json(CAT_URL, timeout=timeout, session=session)
    url = as_text(first(data).get("url"))
    if not url:
        raise ApiError("Cat API returned no image")
    return RandomImage(url=url, alt="Random cat")
