"""Tests for the shared HTTP transport."""

from unittest.mock import MagicMock

import pytest
import requests

from api_playground.apis.base import as_number, as_text, first, get_json, path_segment
from api_playground.config.settings import SETTINGS
from api_playground.errors import ApiError


class TestGetJson:
    def test_returns_decoded_body(self, http):
        http.route("https://example.test/ok", {"a": 1})
        assert get_json("https://example.test/ok") == {"a": 1}

    def test_non_success_status_raises(self, http):
        http.route("https://example.test/missing", {"error": "nope"}, status=404)

        with pytest.raises(ApiError) as excinfo:
            get_json("https://example.test/missing")

        assert excinfo.value.status_code == 404
        assert excinfo.value.url == "https://example.test/missing"

    def test_transport_error_raises(self, http):
        http.fail("https://example.test/", requests.Timeout("slow"))

        with pytest.raises(ApiError):
            get_json("https://example.test/slow")

    def test_invalid_json_raises(self, http):
        http.route("https://example.test/html", ValueError)

        with pytest.raises(ApiError):
            get_json("https://example.test/html")

    def test_uses_session_and_timeout(self):
        response = MagicMock(status_code=200)
        response.json.return_value = []
        session = MagicMock()
        session.get.return_value = response

        assert get_json("https://example.test/x", {"q": "1"}, timeout=2.5, session=session) == []

        _, kwargs = session.get.call_args
        assert kwargs["params"] == {"q": "1"}
        assert kwargs["timeout"] == 2.5
        assert kwargs["headers"]["User-Agent"] == SETTINGS.http_user_agent

    def test_default_timeout_from_settings(self):
        response = MagicMock(status_code=204)
        response.json.return_value = {}
        session = MagicMock()
        session.get.return_value = response

        get_json("https://example.test/x", session=session)

        assert session.get.call_args.kwargs["timeout"] == SETTINGS.http_timeout_sec


class TestHelpers:
    def test_path_segment_escapes_everything(self):
        assert path_segment("san josé/ca?") == "san%20jos%C3%A9%2Fca%3F"
        assert path_segment(42) == "42"

    def test_as_text_fallbacks(self):
        assert as_text(None, "Unknown") == "Unknown"
        assert as_text("   ", "N/A") == "N/A"
        assert as_text({"x": 1}, "N/A") == "N/A"
        assert as_text(" hi ") == "hi"

    def test_as_number_rejects_bools_and_strings(self):
        assert as_number(True) is None
        assert as_number("4") is None
        assert as_number(0) == 0
        assert as_number(1.5) == 1.5

    def test_first(self):
        assert first([{"a": 1}, {"a": 2}]) == {"a": 1}
        assert first([]) == {}
        assert first({"a": 1}) == {}
        assert first(["text"]) == {}


class TestTransportErrorText:
    def test_query_string_kept_out_of_error(self, http):
        http.fail(
            "https://example.test/",
            requests.ConnectionError("Max retries exceeded with url: /x?api_key=SECRET"),
        )

        with pytest.raises(ApiError) as excinfo:
            get_json("https://example.test/x", {"api_key": "SECRET"})

        assert "SECRET" not in str(excinfo.value)
        assert "ConnectionError" in str(excinfo.value)
        assert excinfo.value.__cause__ is None
        assert excinfo.value.__suppress_context__

    def test_cause_kept_without_query(self, http):
        http.fail("https://example.test/", requests.ConnectionError("offline"))

        with pytest.raises(ApiError) as excinfo:
            get_json("https://example.test/x")

        assert isinstance(excinfo.value.__cause__, requests.ConnectionError)
