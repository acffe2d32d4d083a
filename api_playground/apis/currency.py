"""Exchange rates from open.er-api.com."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

import requests

from api_playground.errors import ApiError

from .base import as_dict, as_number, as_text, get_json, path_segment

BASE_URL = "https://open.er-api.com/v6/latest"


@dataclass(frozen=True)
class ExchangeRates:
    base_code: str
    rates: Dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Any, base_code: str = "") -> "ExchangeRates":
        data = as_dict(data)
        rates = {}
        for code, value in as_dict(data.get("rates")).items():
            number = as_number(value)
            if number is not None:
                rates[str(code).upper()] = number
        return cls(base_code=as_text(data.get("base_code"), base_code), rates=rates)

    def rate_for(self, code: str) -> float | None:
        return self.rates.get(code.upper())


def fetch_rates(
    base_code: str, *, timeout: float | None = None, session: requests.Session | None = None
) -> ExchangeRates:
    """Return every published rate for *base_code*."""
    data = get_json(f"{BASE_URL}/{path_segment(base_code)}", timeout=timeout, session=session)
    return ExchangeRates.from_json(data, base_code)


def fetch_rate(
    base_code: str,
    target_code: str,
    *,
    timeout: float | None = None,
    session: requests.Session | None = None,
) -> float:
    """Return the rate converting one *base_code* into *target_code*.

    Raises ApiError when the target currency is unknown (or quoted as 0).
    """
    rates = fetch_rates(base_code, timeout=timeout, session=session)
    rate = rates.rate_for(target_code)
    if not rate:
        raise ApiError(f"No rate from {base_code} to {target_code}")
    return rate
