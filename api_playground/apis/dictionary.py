"""English dictionary entries from dictionaryapi.dev."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

from api_playground.errors import ApiError

from .base import as_dict, as_list, as_text, first, get_json, path_segment

BASE_URL = "https://api.dictionaryapi.dev/api/v2/entries/en"

NO_DEFINITION = "No definition found."


@dataclass(frozen=True)
class DictionaryEntry:
    word: str
    phonetic: str
    part_of_speech: str
    definition: str
    audio_url: str

    @classmethod
    def from_json(cls, data: Any, word: str = "") -> "DictionaryEntry":
        """Decode the first entry of the response array."""
        entry = first(data)
        meaning = first(entry.get("meanings"))
        definition = first(meaning.get("definitions"))

        audio_url = ""
        for phonetic in as_list(entry.get("phonetics")):
            audio_url = as_text(as_dict(phonetic).get("audio"))
            if audio_url:
                break

        return cls(
            word=as_text(entry.get("word"), word or "Unknown"),
            phonetic=as_text(entry.get("phonetic")),
            part_of_speech=as_text(meaning.get("partOfSpeech")),
            definition=as_text(definition.get("definition"), NO_DEFINITION),
            audio_url=audio_url,
        )


def fetch_entry(
    word: str, *, timeout: float | None = None, session: requests.Session | None = None
) -> DictionaryEntry:
    """Return the first dictionary entry for *word*."""
    data = get_json(f"{BASE_URL}/{path_segment(word)}", timeout=timeout, session=session)
    if not as_list(data):
        raise ApiError(f"No dictionary entry for {word!r}")
    return DictionaryEntry.from_json(data, word)
