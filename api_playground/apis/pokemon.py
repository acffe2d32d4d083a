"""Pokémon species lookup via PokeAPI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

import requests

from .base import as_dict, as_list, as_number, as_text, get_json, path_segment

BASE_URL = "https://pokeapi.co/api/v2/pokemon"


@dataclass(frozen=True)
class Pokemon:
    """Height is reported in decimetres and weight in hectograms."""

    id: int | None
    name: str
    sprite: str
    types: Tuple[str, ...]
    height: int | None
    weight: int | None

    @classmethod
    def from_json(cls, data: Any) -> "Pokemon":
        data = as_dict(data)
        types = tuple(
            name
            for name in (
                as_text(as_dict(as_dict(slot).get("type")).get("name"))
                for slot in as_list(data.get("types"))
            )
            if name
        )
        return cls(
            id=as_number(data.get("id")),
            name=as_text(data.get("name")),
            sprite=as_text(as_dict(data.get("sprites")).get("front_default")),
            types=types,
            height=as_number(data.get("height")),
            weight=as_number(data.get("weight")),
        )


def fetch_pokemon(
    name_or_id: str, *, timeout: float | None = None, session: requests.Session | None = None
) -> Pokemon:
    data = get_json(f"{BASE_URL}/{path_segment(name_or_id)}", timeout=timeout, session=session)
    return Pokemon.from_json(data)
