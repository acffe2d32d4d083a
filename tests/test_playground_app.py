"""Tests for the playground page running under Streamlit's AppTest harness."""

import pytest
from streamlit.testing.v1 import AppTest


def playground_app():
    from api_playground.config.settings import AppSettings
    from api_playground.ui.playground import render_playground

    render_playground(AppSettings())


@pytest.fixture
def app(monkeypatch):
    def _start(enabled):
        monkeypatch.setenv("ENABLED_FEATURES", enabled)
        at = AppTest.from_function(playground_app, default_timeout=10)
        at.run()
        assert not at.exception
        return at

    return _start


def markdown_text(at):
    return "\n".join(str(el.value) for el in at.markdown)


class TestPlaygroundPage:
    def test_only_enabled_cards_are_rendered(self, app, http):
        at = app("dog")

        assert [el.value for el in at.subheader] == ["Dog Image"]
        assert [b.key for b in at.button] == ["dog-btn"]

    def test_enabled_card_is_bound(self, app, http):
        http.route("https://dog.ceo/", {"message": "https://images.dog.ceo/a.jpg", "status": "success"})
        at = app("dog")

        at.button(key="dog-btn").click().run()

        assert http.urls() == ["https://dog.ceo/api/breeds/image/random"]
        assert not at.error

    def test_click_runs_only_that_card(self, app, http):
        http.route("https://catfact.ninja/fact", {"fact": "Cats purr.", "length": 10})
        at = app("dog,cat-fact")

        at.button(key="catfact-btn").click().run()

        assert http.urls() == ["https://catfact.ninja/fact"]
        assert "Cat Fact: Cats purr." in markdown_text(at)

    def test_output_survives_rerun(self, app, http):
        http.route("https://catfact.ninja/fact", {"fact": "Cats purr.", "length": 10})
        at = app("cat-fact")
        at.button(key="catfact-btn").click().run()

        at.run()

        assert "Cat Fact: Cats purr." in markdown_text(at)
        assert len(http.calls) == 1

    def test_empty_amount_is_rejected(self, app, http):
        at = app("currency")
        at.text_input(key="cur-from").input("usd")
        at.text_input(key="cur-to").input("eur")

        at.button(key="cur-btn").click().run()

        assert [el.value for el in at.error] == ["Enter a valid amount."]
        assert http.calls == []

    def test_amount_converts(self, app, http):
        http.route("https://open.er-api.com/v6/latest/USD", {"rates": {"EUR": 0.92}})
        at = app("currency")
        at.number_input(key="cur-amount").set_value(100.0)
        at.text_input(key="cur-from").input("usd")
        at.text_input(key="cur-to").input("eur")

        at.button(key="cur-btn").click().run()

        assert "100 USD = 92.00 EUR" in markdown_text(at)
