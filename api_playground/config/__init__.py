"""Configuration loader helpers."""

from api_playground.config.settings import SETTINGS, AppSettings, update_from_kwargs

__all__ = ["SETTINGS", "AppSettings", "update_from_kwargs"]
