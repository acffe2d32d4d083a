"""Registry of every feature on the playground page.

``FEATURES`` is the single source of truth for what the page offers;
``setup_features`` binds each of them to a page in order.
"""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Sequence, Tuple

import requests

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
from api_playground.config.settings import SETTINGS, AppSettings
from api_playground.errors import InputError

from . import renderers
from .base import FeatureConfig, FeatureHandler, FetchContext, InputField, Params, Stage
from .page import Page
from .validators import require_amount, require_text

logger = logging.getLogger(__name__)

Values = Mapping[str, Optional[str]]

TMDB_KEY_MISSING = "TMDB API key missing. Set TMDB_API_KEY in your .env file."


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------

def _validate_github(values: Values, settings: AppSettings) -> Params:
    return {"username": require_text(values.get("gh-user"), "Enter a GitHub username.")}


def _validate_currency(values: Values, settings: AppSettings) -> Params:
    amount = require_amount(values.get("cur-amount"), "Enter a valid amount.")
    codes_message = "Enter currency codes like USD/EUR."
    return {
        "amount": amount,
        "from": require_text(values.get("cur-from"), codes_message, case="upper"),
        "to": require_text(values.get("cur-to"), codes_message, case="upper"),
    }


def _validate_word(values: Values, settings: AppSettings) -> Params:
    return {"word": require_text(values.get("word-input"), "Enter a word.")}


def _validate_city(values: Values, settings: AppSettings) -> Params:
    return {"city": require_text(values.get("wx-city"), "Enter a city (example: San Jose).")}


def _character_id(field_id: str):
    def validate(values: Values, settings: AppSettings) -> Params:
        return {"id": require_text(values.get(field_id), "Enter a character id (example: 1).")}

    return validate


def _validate_pokemon(values: Values, settings: AppSettings) -> Params:
    return {
        "name": require_text(
            values.get("poke-name"),
            "Enter a Pokémon name or ID (example: pikachu).",
            case="lower",
        )
    }


def _validate_tmdb(values: Values, settings: AppSettings) -> Params:
    if not settings.tmdb_api_key:
        raise InputError(TMDB_KEY_MISSING)
    return {"api_key": settings.tmdb_api_key}


# ---------------------------------------------------------------------------
# Fetch stages
# ---------------------------------------------------------------------------

def _fetch_github(ctx: FetchContext) -> Any:
    return github.fetch_profile(ctx.params["username"], **ctx.transport())


def _fetch_rate(ctx: FetchContext) -> Any:
    return currency.fetch_rate(ctx.params["from"], ctx.params["to"], **ctx.transport())


def _fetch_definition(ctx: FetchContext) -> Any:
    return dictionary.fetch_entry(ctx.params["word"], **ctx.transport())


def _fetch_dog(ctx: FetchContext) -> Any:
    return images.fetch_dog_image(**ctx.transport())


def _fetch_cat(ctx: FetchContext) -> Any:
    return images.fetch_cat_image(**ctx.transport())


def _fetch_joke(ctx: FetchContext) -> Any:
    return jokes.fetch_joke(**ctx.transport())


def _geocode(ctx: FetchContext) -> Any:
    return weather.geocode_city(ctx.params["city"], **ctx.transport())


def _forecast(ctx: FetchContext) -> Any:
    return weather.fetch_current_weather(ctx.previous, **ctx.transport())


def _fetch_cat_fact(ctx: FetchContext) -> Any:
    return catfacts.fetch_cat_fact(**ctx.transport())


def _fetch_rick_and_morty(ctx: FetchContext) -> Any:
    return characters.fetch_rick_and_morty_character(ctx.params["id"], **ctx.transport())


def _fetch_films(ctx: FetchContext) -> Any:
    return ghibli.fetch_films(**ctx.transport())


def _fetch_bobs_burgers(ctx: FetchContext) -> Any:
    return characters.fetch_bobs_burgers_character(ctx.params["id"], **ctx.transport())


def _fetch_random_user(ctx: FetchContext) -> Any:
    return randomuser.fetch_random_user(**ctx.transport())


def _fetch_pokemon(ctx: FetchContext) -> Any:
    return pokemon.fetch_pokemon(ctx.params["name"], **ctx.transport())


def _fetch_trending(ctx: FetchContext) -> Any:
    return tmdb.fetch_trending_movies(ctx.params["api_key"], **ctx.transport())


# ---------------------------------------------------------------------------
# Feature table
# ---------------------------------------------------------------------------

FEATURES: Tuple[FeatureConfig, ...] = (
    FeatureConfig(
        key="github",
        title="GitHub Profile Search",
        trigger_id="gh-btn",
        output_id="gh-output",
        inputs=(InputField("gh-user", "GitHub username", placeholder="octocat"),),
        validate=_validate_github,
        stages=(Stage(_fetch_github),),
        render=renderers.render_github_profile,
        error_message="Could not load that GitHub profile.",
        button_label="Search",
    ),
    FeatureConfig(
        key="currency",
        title="Currency Converter",
        trigger_id="cur-btn",
        output_id="cur-output",
        inputs=(
            InputField("cur-amount", "Amount", kind="number"),
            InputField("cur-from", "From", placeholder="USD"),
            InputField("cur-to", "To", placeholder="EUR"),
        ),
        validate=_validate_currency,
        stages=(Stage(_fetch_rate),),
        render=renderers.render_currency,
        error_message="Conversion failed. Check your currency codes.",
        button_label="Convert",
    ),
    FeatureConfig(
        key="dictionary",
        title="Dictionary + Audio",
        trigger_id="word-btn",
        output_id="word-output",
        inputs=(InputField("word-input", "Word", placeholder="serendipity"),),
        validate=_validate_word,
        stages=(Stage(_fetch_definition),),
        render=renderers.render_definition,
        error_message="Could not find a definition for that word.",
        button_label="Define",
    ),
    FeatureConfig(
        key="dog",
        title="Dog Image",
        trigger_id="dog-btn",
        output_id="dog-output",
        stages=(Stage(_fetch_dog),),
        render=renderers.render_image,
        error_message="Could not load a dog image.",
        button_label="Fetch dog",
    ),
    FeatureConfig(
        key="cat-image",
        title="Cat Image",
        trigger_id="catimg-btn",
        output_id="catimg-output",
        stages=(Stage(_fetch_cat),),
        render=renderers.render_image,
        error_message="Could not load a cat image.",
        button_label="Fetch cat",
    ),
    FeatureConfig(
        key="joke",
        title="Joke",
        trigger_id="joke-btn",
        output_id="joke-output",
        stages=(Stage(_fetch_joke),),
        render=renderers.render_joke,
        error_message="Could not load a joke.",
        button_label="Tell me one",
    ),
    FeatureConfig(
        key="weather",
        title="Weather",
        trigger_id="wx-btn",
        output_id="wx-output",
        inputs=(InputField("wx-city", "City", placeholder="San Jose"),),
        validate=_validate_city,
        stages=(
            Stage(_geocode, "Looking up city..."),
            Stage(_forecast, "Loading weather..."),
        ),
        render=renderers.render_weather,
        error_message="Could not load weather for that city.",
        button_label="Get weather",
        description="Geocodes the city, then reads its current weather.",
    ),
    FeatureConfig(
        key="cat-fact",
        title="Cat Facts",
        trigger_id="catfact-btn",
        output_id="catfact-output",
        stages=(Stage(_fetch_cat_fact),),
        render=renderers.render_cat_fact,
        error_message="Could not load a cat fact.",
        button_label="New fact",
    ),
    FeatureConfig(
        key="rick-and-morty",
        title="Rick & Morty Character",
        trigger_id="rm-btn",
        output_id="rm-output",
        inputs=(InputField("rm-id", "Character id", default="1", placeholder="1"),),
        validate=_character_id("rm-id"),
        stages=(Stage(_fetch_rick_and_morty),),
        render=renderers.render_rick_and_morty,
        error_message="Could not load that character.",
        button_label="Look up",
    ),
    FeatureConfig(
        key="ghibli",
        title="Studio Ghibli Films",
        trigger_id="ghibli-btn",
        output_id="ghibli-output",
        stages=(Stage(_fetch_films),),
        render=renderers.render_ghibli_films,
        error_message="Could not load Ghibli films.",
        button_label="List films",
    ),
    FeatureConfig(
        key="bobs-burgers",
        title="Bob's Burgers Character",
        trigger_id="bobs-btn",
        output_id="bobs-output",
        inputs=(InputField("bobs-id", "Character id", default="1", placeholder="1"),),
        validate=_character_id("bobs-id"),
        stages=(Stage(_fetch_bobs_burgers),),
        render=renderers.render_bobs_burgers,
        error_message="Could not load that Bob's Burgers character.",
        button_label="Look up",
    ),
    FeatureConfig(
        key="random-user",
        title="Random User",
        trigger_id="user-btn",
        output_id="user-output",
        stages=(Stage(_fetch_random_user),),
        render=renderers.render_random_user,
        error_message="Could not load a random user.",
        button_label="Generate",
    ),
    FeatureConfig(
        key="pokemon",
        title="Pokémon Lookup",
        trigger_id="poke-btn",
        output_id="poke-output",
        inputs=(InputField("poke-name", "Name or ID", placeholder="pikachu"),),
        validate=_validate_pokemon,
        stages=(Stage(_fetch_pokemon),),
        render=renderers.render_pokemon,
        error_message="Could not find that Pokémon. Try a different name or ID.",
        button_label="Look up",
    ),
    FeatureConfig(
        key="tmdb",
        title="Trending Movies",
        trigger_id="tmdb-btn",
        output_id="tmdb-output",
        validate=_validate_tmdb,
        stages=(Stage(_fetch_trending),),
        render=renderers.render_trending_movies,
        error_message="Could not load trending movies.",
        button_label="Show trending",
        description="Requires TMDB_API_KEY.",
    ),
)


def get_feature(key: str) -> FeatureConfig:
    """Return the feature registered under *key*."""
    key = key.lower().strip()
    for feature in FEATURES:
        if feature.key == key:
            return feature
    raise KeyError(f"Unknown feature: {key}")


def setup_features(
    page: Page,
    features: Sequence[FeatureConfig] = FEATURES,
    settings: AppSettings = SETTINGS,
    session: requests.Session | None = None,
) -> List[str]:
    """Bind every feature whose trigger exists on *page*.

    Features without a trigger on the page are skipped silently. Returns the
    keys of the bound features in registry order.
    """
    bound = []
    for feature in features:
        if not page.has_element(feature.trigger_id):
            logger.debug("Skipping %s: trigger %s not on page", feature.key, feature.trigger_id)
            continue
        page.bind(feature.trigger_id, FeatureHandler(feature, page, settings, session))
        bound.append(feature.key)
    logger.info("Bound %d of %d features", len(bound), len(features))
    return bound
