"""
Map raw OpenWeather payloads into our response models.

A 2xx payload that lacks the keys we rely on is treated as an upstream
failure rather than surfacing a KeyError as an unhandled 500.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .errors import UpstreamError
from .metrics import dew_point, recommendation_text, summary_text
from .schemas import (
    AirQualityOut,
    Coordinates,
    CoordinatesOut,
    ForecastEntry,
    ForecastOut,
    WeatherOut,
    WeatherSummaryOut,
)


def _coords_out(coords: Coordinates) -> CoordinatesOut:
    return CoordinatesOut(lat=coords.lat, lon=coords.lon)


def build_weather(payload: Dict[str, Any]) -> WeatherOut:
    try:
        main = payload["main"]
        temp = float(main["temp"])
        humidity = main["humidity"]
        # summary and recommendation need both, so neither may be missing
        condition = payload["weather"][0]["description"]
        if not condition:
            raise KeyError("description")
        return WeatherOut(
            place=payload.get("name"),
            temperature_c=temp,
            condition=condition,
            humidity_pct=humidity,
            wind_speed_ms=(payload.get("wind") or {}).get("speed"),
            pressure_hpa=main.get("pressure"),
            visibility_m=payload.get("visibility"),
            dew_point_c=dew_point(temp, humidity),
        )
    except (KeyError, IndexError, TypeError, ValueError, AttributeError):
        raise UpstreamError("Unexpected current weather payload from provider")


def build_summary(weather: WeatherOut) -> WeatherSummaryOut:
    """Add summary/recommendation, both pure functions of temperature and condition."""
    return WeatherSummaryOut(
        **weather.model_dump(),
        summary=summary_text(weather.temperature_c, weather.condition),
        recommendation=recommendation_text(weather.temperature_c),
    )


def build_forecast(payload: Dict[str, Any], coords: Coordinates, place: Optional[str] = None) -> ForecastOut:
    """
    Keep the provider's entries in their original order (no grouping, no dedup).

    `coords` is echoed as given: the caller's coordinates for coordinate
    input, the geocoded ones for place input.
    """
    try:
        entries = []
        for item in payload.get("list") or []:
            w = (item.get("weather") or [{}])[0]
            entries.append(ForecastEntry(
                timestamp=datetime.fromtimestamp(int(item["dt"]), tz=timezone.utc),
                temperature_c=(item.get("main") or {}).get("temp"),
                condition=w.get("description"),
            ))
        city = payload.get("city") or {}
    except (KeyError, IndexError, TypeError, ValueError, AttributeError):
        raise UpstreamError("Unexpected forecast payload from provider")

    return ForecastOut(
        place=city.get("name") or place,
        coordinates=_coords_out(coords),
        entries=entries,
    )


def build_air_quality(payload: Dict[str, Any], coords: Coordinates) -> AirQualityOut:
    """The provider returns a list of readings; the current one is first."""
    try:
        reading = payload["list"][0]
        return AirQualityOut(
            coordinates=_coords_out(coords),
            aqi=reading["main"]["aqi"],
            components=reading.get("components") or {},
        )
    except (KeyError, IndexError, TypeError, AttributeError):
        raise UpstreamError("Unexpected air quality payload from provider")
