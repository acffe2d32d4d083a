"""City weather via Open-Meteo: geocode the city, then read current weather.

The two calls are dependent: the forecast request needs the coordinates
returned by the geocoder, so a city that cannot be resolved never reaches
the forecast endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import requests

from api_playground.errors import ApiError

from .base import as_dict, as_number, as_text, first, get_json

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"


@dataclass(frozen=True)
class Place:
    name: str
    admin1: str
    country: str
    latitude: float
    longitude: float

    @property
    def label(self) -> str:
        """``name, region, country`` skipping whatever is unknown."""
        return ", ".join(part for part in (self.name, self.admin1, self.country) if part)


@dataclass(frozen=True)
class CurrentWeather:
    temperature: float | None
    windspeed: float | None
    time: str

    @classmethod
    def from_json(cls, data: Any) -> "CurrentWeather":
        data = as_dict(data)
        return cls(
            temperature=as_number(data.get("temperature")),
            windspeed=as_number(data.get("windspeed")),
            time=as_text(data.get("time"), "N/A"),
        )


@dataclass(frozen=True)
class WeatherReport:
    place: Place
    current: CurrentWeather


def geocode_city(
    city: str, *, timeout: float | None = None, session: requests.Session | None = None
) -> Place:
    """Resolve *city* to its best geocoding match.

    Raises ApiError when the geocoder has no result for the name.
    """
    params = {"name": city, "count": 1, "language": "en", "format": "json"}
    data = as_dict(get_json(GEOCODING_URL, params, timeout=timeout, session=session))
    result = first(data.get("results"))
    latitude = as_number(result.get("latitude"))
    longitude = as_number(result.get("longitude"))
    if latitude is None or longitude is None:
        raise ApiError(f"City not found: {city!r}")
    return Place(
        name=as_text(result.get("name"), city),
        admin1=as_text(result.get("admin1")),
        country=as_text(result.get("country")),
        latitude=latitude,
        longitude=longitude,
    )


def fetch_current_weather(
    place: Place, *, timeout: float | None = None, session: requests.Session | None = None
) -> WeatherReport:
    params = {
        "latitude": place.latitude,
        "longitude": place.longitude,
        "current_weather": "true",
    }
    data = as_dict(get_json(FORECAST_URL, params, timeout=timeout, session=session))
    current = data.get("current_weather")
    if not isinstance(current, dict):
        raise ApiError(f"No current weather for {place.label}")
    return WeatherReport(place=place, current=CurrentWeather.from_json(current))
