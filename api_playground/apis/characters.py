"""Fictional character lookups: Rick and Morty API and Bob's Burgers API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

from .base import as_dict, as_text, get_json, path_segment

RICK_AND_MORTY_URL = "https://rickandmortyapi.com/api/character"
BOBS_BURGERS_URL = "https://bobsburgers-api.herokuapp.com/characters"

UNKNOWN = "Unknown"


@dataclass(frozen=True)
class RickAndMortyCharacter:
    name: str
    species: str
    status: str
    origin: str
    image: str

    @classmethod
    def from_json(cls, data: Any) -> "RickAndMortyCharacter":
        data = as_dict(data)
        return cls(
            name=as_text(data.get("name"), UNKNOWN),
            species=as_text(data.get("species"), UNKNOWN),
            status=as_text(data.get("status"), UNKNOWN),
            origin=as_text(as_dict(data.get("origin")).get("name"), UNKNOWN),
            image=as_text(data.get("image")),
        )


@dataclass(frozen=True)
class BobsBurgersCharacter:
    name: str
    gender: str
    hair_color: str
    occupation: str
    image: str

    @classmethod
    def from_json(cls, data: Any) -> "BobsBurgersCharacter":
        data = as_dict(data)
        return cls(
            name=as_text(data.get("name"), UNKNOWN),
            gender=as_text(data.get("gender"), UNKNOWN),
            hair_color=as_text(data.get("hairColor"), UNKNOWN),
            occupation=as_text(data.get("occupation"), UNKNOWN),
            image=as_text(data.get("image")),
        )


def fetch_rick_and_morty_character(
    character_id: str, *, timeout: float | None = None, session: requests.Session | None = None
) -> RickAndMortyCharacter:
    data = get_json(
        f"{RICK_AND_MORTY_URL}/{path_segment(character_id)}", timeout=timeout, session=session
    )
    return RickAndMortyCharacter.from_json(data)


def fetch_bobs_burgers_character(
    character_id: str, *, timeout: float | None = None, session: requests.Session | None = None
) -> BobsBurgersCharacter:
    data = get_json(
        f"{BOBS_BURGERS_URL}/{path_segment(character_id)}", timeout=timeout, session=session
    )
    return BobsBurgersCharacter.from_json(data)
