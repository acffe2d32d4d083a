"""Tests for the per-endpoint decoders and fetch functions."""

import pytest

from api_playground.apis import (
    catfacts,
    characters,
    currency,
    dictionary,
    ghibli,
    github,
    images,
    jokes,
    pokemon,
    randomuser,
    tmdb,
    weather,
)
from api_playground.errors import ApiError


class TestGitHub:
    def test_name_falls_back_to_login(self):
        profile = github.GitHubProfile.from_json({"login": "octocat", "public_repos": 8})
        assert profile.name == "octocat"
        assert profile.public_repos == 8
        assert profile.followers is None
        assert profile.avatar_url == ""

    def test_garbage_document(self):
        profile = github.GitHubProfile.from_json(["not", "a", "dict"])
        assert profile.login == "Unknown"


class TestCurrency:
    def test_codes_are_case_insensitive(self):
        rates = currency.ExchangeRates.from_json({"rates": {"eur": 0.9, "bad": "x"}})
        assert rates.rate_for("EUR") == 0.9
        assert rates.rate_for("bad") is None

    def test_zero_rate_is_unusable(self, http):
        http.route("https://open.er-api.com/v6/latest/USD", {"rates": {"EUR": 0}})
        with pytest.raises(ApiError):
            currency.fetch_rate("USD", "EUR")


class TestDictionary:
    def test_picks_first_phonetic_with_audio(self):
        entry = dictionary.DictionaryEntry.from_json(
            [{
                "word": "hello",
                "phonetic": "həˈləʊ",
                "phonetics": [{"text": "a"}, {"audio": ""}, {"audio": "https://a.example/hello.mp3"}],
                "meanings": [{"partOfSpeech": "noun", "definitions": [{"definition": "A greeting."}]}],
            }]
        )
        assert entry.audio_url == "https://a.example/hello.mp3"
        assert entry.part_of_speech == "noun"
        assert entry.definition == "A greeting."

    def test_missing_meanings(self):
        entry = dictionary.DictionaryEntry.from_json([{"word": "hello"}])
        assert entry.definition == dictionary.NO_DEFINITION
        assert entry.audio_url == ""

    def test_empty_array_is_an_error(self, http):
        http.route("https://api.dictionaryapi.dev/", [])
        with pytest.raises(ApiError):
            dictionary.fetch_entry("hello")


class TestImages:
    def test_dog_image(self, http):
        http.route("https://dog.ceo/", {"message": "https://images.dog.ceo/x.jpg", "status": "success"})
        assert images.fetch_dog_image().url == "https://images.dog.ceo/x.jpg"

    def test_cat_without_url(self, http):
        http.route("https://api.thecatapi.com/", [{"id": "abc"}])
        with pytest.raises(ApiError):
            images.fetch_cat_image()


class TestJokes:
    def test_api_error_flag(self, http):
        http.route("https://v2.jokeapi.dev/", {"error": True, "message": "No matching joke found"})
        with pytest.raises(ApiError):
            jokes.fetch_joke()

    def test_single(self):
        joke = jokes.Joke.from_json({"type": "single", "joke": "Ha."})
        assert joke.is_single
        assert joke.joke == "Ha."


class TestWeather:
    def test_place_label_skips_missing_parts(self):
        place = weather.Place("Paris", "", "France", 48.85, 2.35)
        assert place.label == "Paris, France"

    def test_missing_current_weather(self, http):
        http.route("https://api.open-meteo.com/v1/forecast", {"latitude": 1})
        with pytest.raises(ApiError):
            weather.fetch_current_weather(weather.Place("X", "", "", 1.0, 2.0))

    def test_current_weather_placeholders(self):
        current = weather.CurrentWeather.from_json({})
        assert current.temperature is None
        assert current.time == "N/A"


class TestCharacters:
    def test_bobs_burgers_placeholders(self):
        ch = characters.BobsBurgersCharacter.from_json({"name": "Tina Belcher"})
        assert ch.gender == "Unknown"
        assert ch.hair_color == "Unknown"
        assert ch.occupation == "Unknown"
        assert ch.image == ""

    def test_rick_and_morty_origin(self):
        ch = characters.RickAndMortyCharacter.from_json({"name": "Morty", "origin": {"name": "Earth"}})
        assert ch.origin == "Earth"


class TestFilmsAndMovies:
    def test_films_must_be_a_list(self, http):
        http.route("https://ghibliapi.vercel.app/films", {"films": []})
        with pytest.raises(ApiError):
            ghibli.fetch_films()

    def test_trending_requires_key(self, http):
        with pytest.raises(ApiError):
            tmdb.fetch_trending_movies("")
        assert http.calls == []


class TestMisc:
    def test_random_user_without_results(self, http):
        http.route("https://randomuser.me/", {"results": []})
        with pytest.raises(ApiError):
            randomuser.fetch_random_user()

    def test_random_user_location(self):
        user = randomuser.RandomUser.from_json({"name": {"first": "Ada"}, "location": {"country": "UK"}})
        assert user.full_name == "Ada"
        assert user.location == "UK"
        assert user.email == "N/A"

    def test_pokemon_types_filter_empty(self):
        p = pokemon.Pokemon.from_json({"types": [{"type": {"name": "fire"}}, {"type": {}}, "junk"]})
        assert p.types == ("fire",)
        assert p.height is None

    def test_cat_fact_placeholders(self):
        fact = catfacts.CatFact.from_json({})
        assert fact.fact == "Unknown"
        assert fact.length is None
