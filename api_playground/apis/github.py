"""GitHub public user profiles (no authentication)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

from .base import as_dict, as_number, as_text, get_json, path_segment

BASE_URL = "https://api.github.com/users"


@dataclass(frozen=True)
class GitHubProfile:
    login: str
    name: str
    avatar_url: str
    html_url: str
    public_repos: int | None
    followers: int | None

    @classmethod
    def from_json(cls, data: Any) -> "GitHubProfile":
        data = as_dict(data)
        login = as_text(data.get("login"), "Unknown")
        return cls(
            login=login,
            name=as_text(data.get("name"), login),
            avatar_url=as_text(data.get("avatar_url")),
            html_url=as_text(data.get("html_url")),
            public_repos=as_number(data.get("public_repos")),
            followers=as_number(data.get("followers")),
        )


def fetch_profile(
    username: str, *, timeout: float | None = None, session: requests.Session | None = None
) -> GitHubProfile:
    """Return the public profile for *username*."""
    data = get_json(f"{BASE_URL}/{path_segment(username)}", timeout=timeout, session=session)
    return GitHubProfile.from_json(data)
