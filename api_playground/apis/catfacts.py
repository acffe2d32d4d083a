"""Random cat facts from catfact.ninja."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

from .base import as_dict, as_number, as_text, get_json

FACT_URL = "https://catfact.ninja/fact"


@dataclass(frozen=True)
class CatFact:
    fact: str
    length: int | None

    @classmethod
    def from_json(cls, data: Any) -> "CatFact":
        data = as_dict(data)
        return cls(fact=as_text(data.get("fact"), "Unknown"), length=as_number(data.get("length")))


def fetch_cat_fact(*, timeout: float | None = None, session: requests.Session | None = None) -> CatFact:
    return CatFact.from_json(get_json(FACT_URL, timeout=timeout, session=session))
