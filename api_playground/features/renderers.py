"""Pure render functions: decoded API data -> ``View``.

Each function receives the result of the feature's last fetch stage and the
validated input parameters. Missing optional data has already been replaced
by its declared fallback when the response was decoded, so these functions
never guard against ``None`` except for numbers that need formatting.
"""

from __future__ import annotations

from typing import Any, Dict, List

from api_playground.apis.catfacts import CatFact
from api_playground.apis.characters import BobsBurgersCharacter, RickAndMortyCharacter
from api_playground.apis.dictionary import DictionaryEntry
from api_playground.apis.ghibli import Film
from api_playground.apis.github import GitHubProfile
from api_playground.apis.images import RandomImage
from api_playground.apis.jokes import Joke
from api_playground.apis.pokemon import Pokemon
from api_playground.apis.randomuser import RandomUser
from api_playground.apis.tmdb import TrendingMovie
from api_playground.apis.weather import WeatherReport

from .views import Audio, BulletList, Image, Line, Link, View, format_number, rendered

TOP_N = 5

Params = Dict[str, Any]


def render_github_profile(profile: GitHubProfile, params: Params) -> View:
    return rendered(
        Image(profile.avatar_url, "avatar", "thumb") if profile.avatar_url else None,
        Line(profile.name, "strong"),
        Line(f"@{profile.login}", "small"),
        Line(
            f"Repos: {format_number(profile.public_repos)} | "
            f"Followers: {format_number(profile.followers)}",
            "small",
        ),
        Link(profile.html_url, "Open Profile") if profile.html_url else None,
    )


def render_currency(rate: float, params: Params) -> View:
    amount, source, target = params["amount"], params["from"], params["to"]
    converted = f"{amount * rate:.2f}"
    return rendered(
        Line(f"{format_number(amount)} {source} = {converted} {target}", "strong"),
        Line(f"Rate: 1 {source} = {format_number(rate)} {target}", "small"),
    )


def render_definition(entry: DictionaryEntry, params: Params) -> View:
    meaning = f"{entry.part_of_speech}: {entry.definition}" if entry.part_of_speech else entry.definition
    return rendered(
        Line(entry.word, "strong"),
        Line(entry.phonetic, "emphasis") if entry.phonetic else None,
        Line(meaning),
        Audio(entry.audio_url) if entry.audio_url else Line("No audio available.", "small"),
    )


def render_image(image: RandomImage, params: Params) -> View:
    return rendered(Image(image.url, image.alt, "full"))


def render_joke(joke: Joke, params: Params) -> View:
    if joke.is_single:
        return rendered(Line(joke.joke))
    return rendered(Line(joke.setup, "strong"), Line(joke.delivery))


def render_weather(report: WeatherReport, params: Params) -> View:
    current = report.current
    return rendered(
        Line(report.place.label, "strong"),
        Line(f"Temp: {format_number(current.temperature)}°C"),
        Line(f"Wind: {format_number(current.windspeed)} km/h • Time: {current.time}", "small"),
    )


def render_cat_fact(fact: CatFact, params: Params) -> View:
    return rendered(
        Line(f"Cat Fact: {fact.fact}"),
        Line(f"Length: {format_number(fact.length)}", "small"),
    )


def render_rick_and_morty(character: RickAndMortyCharacter, params: Params) -> View:
    return rendered(
        Image(character.image, character.name, "thumb") if character.image else None,
        Line(character.name, "strong"),
        Line(f"{character.species} • {character.status}", "small"),
        Line(f"Origin: {character.origin}", "small"),
    )


def render_ghibli_films(films: List[Film], params: Params) -> View:
    return rendered(
        Line(f"Studio Ghibli (first {TOP_N} films returned):", "strong"),
        BulletList(tuple(f"{film.title} ({film.release_date})" for film in films[:TOP_N])),
        Line(f"Total films: {len(films)}", "small"),
    )


def render_bobs_burgers(character: BobsBurgersCharacter, params: Params) -> View:
    return rendered(
        Line(character.name, "strong"),
        Line(f"Gender: {character.gender}", "small"),
        Line(f"Hair: {character.hair_color} • Occupation: {character.occupation}", "small"),
        Image(character.image, character.name, "full") if character.image else None,
    )


def render_random_user(user: RandomUser, params: Params) -> View:
    name = user.full_name or "Random User"
    return rendered(
        Image(user.picture, name, "thumb") if user.picture else None,
        Line(name, "strong"),
        Line(user.email, "small"),
        Line(user.location, "small") if user.location else None,
    )


def _measure(value: float | int | None, unit: str) -> str:
    # PokeAPI reports decimetres / hectograms.
    if value is None:
        return "N/A"
    return f"{format_number(value / 10)} {unit}"


def render_pokemon(pokemon: Pokemon, params: Params) -> View:
    name = (pokemon.name or "Unknown").upper()
    return rendered(
        Image(pokemon.sprite, pokemon.name, "thumb") if pokemon.sprite else None,
        Line(f"{name} #{format_number(pokemon.id)}", "strong"),
        Line(f"Type: {', '.join(pokemon.types) or 'Unknown'}", "small"),
        Line(
            f"Height: {_measure(pokemon.height, 'm')} • Weight: {_measure(pokemon.weight, 'kg')}",
            "small",
        ),
    )


def render_trending_movies(movies: List[TrendingMovie], params: Params) -> View:
    return rendered(
        Line(f"Trending Movies (Top {TOP_N})", "strong"),
        BulletList(tuple(f"{movie.title} ({movie.year})" for movie in movies[:TOP_N])),
    )
