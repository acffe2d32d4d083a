"""HTTP transport and decoding helpers shared by every API client."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from api_playground.config.settings import SETTINGS
from api_playground.errors import ApiError

logger = logging.getLogger(__name__)


def path_segment(value: Any) -> str:
    """Percent-encode *value* for use as a single URL path segment."""
    return quote(str(value), safe="")


def get_json(
    url: str,
    params: Optional[Dict[str, Any]] = None,
    *,
    timeout: float | None = None,
    session: requests.Session | None = None,
) -> Any:
    """GET *url* and return the decoded JSON body.

    Raises:
        ApiError: on transport failure, a non-2xx status or a body that is
            not JSON.
    """
    client = session or requests
    if timeout is None:
        timeout = SETTINGS.http_timeout_sec

    headers = {
        "Accept": "application/json",
        "User-Agent": SETTINGS.http_user_agent,
    }

    # Query strings may carry credentials, only the path is logged.
    logger.debug("GET %s", url)
    try:
        response = client.get(url, params=params, headers=headers, timeout=timeout)
    except requests.RequestException as exc:
        # The exception text repeats the full URL, query string included.
        error = ApiError(f"{type(exc).__name__} while requesting {url}", url=url)
        if params:
            raise error from None
        raise error from exc

    if not 200 <= response.status_code < 300:
        logger.warning("GET %s returned %s", url, response.status_code)
        raise ApiError(
            f"Unexpected status {response.status_code}",
            status_code=response.status_code,
            url=url,
        )

    try:
        return response.json()
    except ValueError as exc:
        raise ApiError("Response body is not valid JSON", url=url) from exc


# ---------------------------------------------------------------------------
# Decoding helpers for untyped JSON documents
# ---------------------------------------------------------------------------

def as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def as_text(value: Any, fallback: str = "") -> str:
    """Return *value* as a non-empty string, else *fallback*."""
    if value is None or isinstance(value, (dict, list)):
        return fallback
    text = str(value).strip()
    return text or fallback


def as_number(value: Any) -> float | int | None:
    """Return *value* when it is a real number (bools excluded), else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    return None


def first(value: Any) -> Dict[str, Any]:
    """First element of a JSON array as a dict, empty dict if unavailable."""
    items = as_list(value)
    return as_dict(items[0]) if items else {}
