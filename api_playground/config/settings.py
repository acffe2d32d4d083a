"""Minimal configuration for the playground.

Only parameters that the current codebase still uses are kept.
• TMDB_API_KEY      – credential for the trending-movies card (optional).
• HTTP_TIMEOUT_SEC  – per-request timeout passed to requests.
• ENABLED_FEATURES  – comma-separated feature keys to place on the page.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Tuple

from dotenv import load_dotenv  # type: ignore

from api_playground import __version__

# Load variables from .env if present
load_dotenv()


def _get_feature_list(name: str) -> Tuple[str, ...]:
    """Split a comma separated env var into normalised feature keys."""
    raw = os.getenv(name, "")
    return tuple(part.strip().lower() for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class AppSettings:
    """Immutable container for runtime parameters."""

    # --- Credentials ------------------------------------------------------
    tmdb_api_key: str = os.getenv("TMDB_API_KEY", "").strip()

    # --- HTTP transport ---------------------------------------------------
    http_timeout_sec: float = float(os.getenv("HTTP_TIMEOUT_SEC", "10"))
    http_user_agent: str = os.getenv("HTTP_USER_AGENT", f"api-playground/{__version__}")

    # --- Page layout ------------------------------------------------------
    # Empty means every registered feature is placed on the page.
    enabled_features: Tuple[str, ...] = field(
        default_factory=lambda: _get_feature_list("ENABLED_FEATURES")
    )

    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def is_enabled(self, feature_key: str) -> bool:
        if not self.enabled_features:
            return True
        return feature_key.lower() in self.enabled_features


# Singleton used by most callers
SETTINGS = AppSettings()


def update_from_kwargs(**overrides) -> AppSettings:
    """Return a new AppSettings with supplied overrides."""

    return AppSettings(
        tmdb_api_key=overrides.get("tmdb_api_key", SETTINGS.tmdb_api_key),
        http_timeout_sec=overrides.get("http_timeout_sec", SETTINGS.http_timeout_sec),
        http_user_agent=overrides.get("http_user_agent", SETTINGS.http_user_agent),
        enabled_features=tuple(
            key.lower() for key in overrides.get("enabled_features", SETTINGS.enabled_features)
        ),
        log_level=overrides.get("log_level", SETTINGS.log_level),
    )
