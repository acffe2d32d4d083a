"""Shared fixtures for api-playground tests."""

from unittest.mock import MagicMock

import pytest
import requests

from api_playground.config.settings import update_from_kwargs
from api_playground.features.page import MemoryPage


class FakeHttp:
    """Stand-in for ``requests.get`` routing by URL prefix.

    A route maps to ``(status, payload)`` or to an exception instance.
    ``payload`` may be ``ValueError`` to simulate a non-JSON body.
    """

    def __init__(self):
        self.routes = {}
        self.calls = []

    def route(self, prefix, payload=None, status=200):
        self.routes[prefix] = (status, payload)
        return self

    def fail(self, prefix, exc):
        self.routes[prefix] = exc
        return self

    def urls(self):
        return [url for url, _ in self.calls]

    def __call__(self, url, params=None, headers=None, timeout=None):
        self.calls.append((url, params))
        for prefix, outcome in self.routes.items():
            if url.startswith(prefix):
                break
        else:
            raise requests.ConnectionError(f"no route for {url}")

        if isinstance(outcome, Exception):
            raise outcome

        status, payload = outcome
        response = MagicMock()
        response.status_code = status
        if payload is ValueError:
            response.json.side_effect = ValueError("not json")
        else:
            response.json.return_value = payload
        return response


@pytest.fixture
def http(monkeypatch):
    """Patch ``requests.get`` with a FakeHttp instance."""
    fake = FakeHttp()
    monkeypatch.setattr(requests, "get", fake)
    return fake


@pytest.fixture
def settings():
    """Settings with no credential and every feature enabled."""
    return update_from_kwargs(tmdb_api_key="", enabled_features=(), http_timeout_sec=5)


@pytest.fixture
def page():
    return MemoryPage()
