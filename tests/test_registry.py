"""Tests for the feature registry and page setup."""

from collections import Counter

import pytest

from api_playground.features.page import MemoryPage
from api_playground.features.registry import FEATURES, get_feature, setup_features


class TestRegistry:
    def test_element_ids_are_unique(self):
        ids = []
        for feature in FEATURES:
            ids += [feature.trigger_id, feature.output_id] + [field.id for field in feature.inputs]
        duplicates = [i for i, n in Counter(ids).items() if n > 1]
        assert duplicates == []

    def test_keys_are_unique(self):
        keys = [feature.key for feature in FEATURES]
        assert len(keys) == len(set(keys))

    def test_every_feature_has_a_stage(self):
        assert all(feature.stages for feature in FEATURES)

    def test_weather_is_two_stage(self):
        assert len(get_feature("weather").stages) == 2

    def test_get_feature_normalises_key(self):
        assert get_feature(" Pokemon ").trigger_id == "poke-btn"

    def test_unknown_feature(self):
        with pytest.raises(KeyError):
            get_feature("nope")


class TestSetupFeatures:
    def test_binds_only_present_triggers(self, settings):
        page = MemoryPage({"dog-btn", "dog-output", "joke-btn"})

        bound = setup_features(page, settings=settings)

        assert bound == ["dog", "joke"]
        assert set(page.handlers) == {"dog-btn", "joke-btn"}

    def test_empty_page_binds_nothing(self, settings):
        page = MemoryPage()
        assert setup_features(page, settings=settings) == []
        assert page.handlers == {}

    def test_click_runs_bound_feature(self, http, settings):
        http.route("https://catfact.ninja/fact", {"fact": "Cats purr.", "length": 10})
        page = MemoryPage({"catfact-btn", "catfact-output"})
        setup_features(page, settings=settings)

        page.click("catfact-btn")

        assert page.current_html("catfact-output") == (
            "<p>Cat Fact: Cats purr.</p>\n<p class=\"small\">Length: 10</p>"
        )

    def test_registry_order_is_preserved(self, settings):
        page = MemoryPage({f.trigger_id for f in FEATURES})
        assert setup_features(page, settings=settings) == [f.key for f in FEATURES]
