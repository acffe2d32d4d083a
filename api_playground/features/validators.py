"""Input validation shared by the feature configurations.

Validators raise ``InputError`` carrying the message shown to the user.
"""

from __future__ import annotations

import math
from typing import Optional

from api_playground.errors import InputError


def require_text(value: Optional[str], message: str, *, case: str | None = None) -> str:
    """Trim *value* and optionally fold its case ("upper" / "lower")."""
    text = (value or "").strip()
    if case == "upper":
        text = text.upper()
    elif case == "lower":
        text = text.lower()
    if not text:
        raise InputError(message)
    return text


def require_amount(value: Optional[str], message: str) -> float:
    """Parse a finite amount strictly greater than zero."""
    try:
        amount = float((value or "").strip())
    except ValueError as exc:
        raise InputError(message) from exc
    if not math.isfinite(amount) or amount <= 0:
        raise InputError(message)
    return amount
