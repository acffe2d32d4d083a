"""Thin clients for the public HTTP APIs used by the playground.

Every module exposes a small dataclass describing the part of the response
the page actually uses, decoded once with explicit fallbacks, and a
``fetch_*`` function returning that dataclass:

    from api_playground.apis.github import fetch_profile
    from api_playground.apis.weather import geocode_city, fetch_current_weather

Transport concerns (timeouts, status handling, JSON decoding) live in
``api_playground.apis.base``.
"""

from api_playground.apis.base import get_json, path_segment
from api_playground.errors import ApiError

__all__ = ["ApiError", "get_json", "path_segment"]
