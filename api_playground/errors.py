"""Exception hierarchy shared by the API clients and the feature handler."""

from __future__ import annotations


class PlaygroundError(Exception):
    """Base class for every error raised inside the playground."""


class ApiError(PlaygroundError):
    """A remote API call failed or returned an unusable document."""

    def __init__(self, message: str, *, status_code: int | None = None, url: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class InputError(PlaygroundError):
    """User supplied input is missing or invalid.

    The message is shown to the user verbatim, so keep it short and
    non-technical.
    """
