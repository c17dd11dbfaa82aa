"""
Schemas.

- Location input types (place or coordinates) produced by validation
- Pydantic response models: the contract of our REST endpoints

Provider-derived fields are Optional because scaffold responses
share these shapes with every such field set to null.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

PROVIDER = "OpenWeatherMap"
SCAFFOLD_DESCRIPTION = "API key missing (scaffold)"


def is_place_xor_coordinates(city, lat, lon) -> bool:
    """True when exactly one of {city} or {lat and lon} was supplied."""
    has_city = bool(city)
    has_coords = lat is not None and lon is not None
    return has_city != has_coords


# -------------------------
# Query parameters
# -------------------------

class CityQuery(BaseModel):
    """Current weather and summary: a city is mandatory, coordinates are not accepted."""
    model_config = ConfigDict(extra="forbid")

    city: str = Field(..., min_length=1, max_length=100)
    country: Optional[str] = Field(None, min_length=2, max_length=3)
    state: Optional[str] = Field(None, min_length=1, max_length=100)


class PlaceOrCoordsQuery(BaseModel):
    """Air quality: either a city or both lat and lon, never both."""
    model_config = ConfigDict(extra="forbid")

    city: Optional[str] = Field(None, min_length=1, max_length=100)
    country: Optional[str] = Field(None, min_length=2, max_length=3)
    state: Optional[str] = Field(None, min_length=1, max_length=100)
    lat: Optional[float] = Field(None, ge=-90, le=90, allow_inf_nan=False)
    lon: Optional[float] = Field(None, ge=-180, le=180, allow_inf_nan=False)

    @model_validator(mode="after")
    def place_xor_coordinates(self):
        if not is_place_xor_coordinates(self.city, self.lat, self.lon):
            raise ValueError("Provide either city or both lat and lon, but not both.")
        return self


class ForecastQuery(PlaceOrCoordsQuery):
    """
    `days` is accepted as-is and ignored: the provider's free tier always
    returns its fixed 5-day window.
    """
    days: Optional[str] = None


@dataclass(frozen=True)
class Place:
    """A place identifier: city name plus optional disambiguators."""
    name: str
    country: Optional[str] = None
    state: Optional[str] = None


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lon: float


Location = Union[Place, Coordinates]


class CoordinatesOut(BaseModel):
    lat: float
    lon: float


class WeatherOut(BaseModel):
    """Current conditions for a place (metric units)."""
    place: Optional[str] = None
    temperature_c: Optional[float] = None
    condition: Optional[str] = None
    humidity_pct: Optional[float] = None
    wind_speed_ms: Optional[float] = None
    pressure_hpa: Optional[float] = None
    visibility_m: Optional[float] = None
    dew_point_c: Optional[float] = None
    provider: str = PROVIDER


class WeatherSummaryOut(WeatherOut):
    """Current conditions plus a human-readable summary and clothing advice."""
    summary: Optional[str] = None
    recommendation: Optional[str] = None


class ForecastEntry(BaseModel):
    """One forecast step, as returned by the provider (3-hour increments)."""
    timestamp: datetime
    temperature_c: Optional[float] = None
    condition: Optional[str] = None


class ForecastOut(BaseModel):
    place: Optional[str] = None
    coordinates: Optional[CoordinatesOut] = None
    entries: Optional[List[ForecastEntry]] = None
    provider: str = PROVIDER


class AirQualityOut(BaseModel):
    """Air Quality Index (1=Good .. 5=Very Poor) and pollutant concentrations."""
    coordinates: Optional[CoordinatesOut] = None
    aqi: Optional[int] = None
    components: Optional[Dict[str, float]] = None
    provider: str = PROVIDER


# Scaffold variants: same shape, plus a fixed description.

class ScaffoldWeatherOut(WeatherOut):
    description: str = SCAFFOLD_DESCRIPTION


class ScaffoldWeatherSummaryOut(WeatherSummaryOut):
    description: str = SCAFFOLD_DESCRIPTION


class ScaffoldForecastOut(ForecastOut):
    description: str = SCAFFOLD_DESCRIPTION


class ScaffoldAirQualityOut(AirQualityOut):
    description: str = SCAFFOLD_DESCRIPTION
