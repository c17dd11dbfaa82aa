"""
Scaffold responses.

Used when no OpenWeatherMap key is configured: callers still get the full
response shape (and a 200) with every provider-derived field set to null,
so the API contract can be exercised without credentials.
"""

from __future__ import annotations

from .schemas import (
    Coordinates,
    CoordinatesOut,
    Location,
    Place,
    ScaffoldAirQualityOut,
    ScaffoldForecastOut,
    ScaffoldWeatherOut,
    ScaffoldWeatherSummaryOut,
)


def _echo_coordinates(location: Location):
    if isinstance(location, Coordinates):
        return CoordinatesOut(lat=location.lat, lon=location.lon)
    return None


def _echo_place(location: Location):
    if isinstance(location, Place):
        return location.name
    return None


def scaffold_weather(place: Place) -> ScaffoldWeatherOut:
    return ScaffoldWeatherOut(place=place.name)


def scaffold_summary(place: Place) -> ScaffoldWeatherSummaryOut:
    return ScaffoldWeatherSummaryOut(place=place.name)


def scaffold_forecast(location: Location) -> ScaffoldForecastOut:
    return ScaffoldForecastOut(place=_echo_place(location), coordinates=_echo_coordinates(location))


def scaffold_air_quality(location: Location) -> ScaffoldAirQualityOut:
    return ScaffoldAirQualityOut(coordinates=_echo_coordinates(location))
