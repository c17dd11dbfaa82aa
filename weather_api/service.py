"""
Weather service: the request pipeline behind every endpoint.

    validate (main.py) -> scaffold short-circuit -> geocode (place input only)
    -> provider call -> derived metrics -> response model

Plain object wired by create_app(); no globals.
"""

from __future__ import annotations

from typing import Callable, Optional

import httpx
import structlog

from . import assembler, scaffold
from .errors import ConfigurationError
from .log import mask_key
from .schemas import (
    AirQualityOut,
    Coordinates,
    ForecastOut,
    Location,
    Place,
    WeatherOut,
    WeatherSummaryOut,
)
from .settings import Settings, get_settings
from .weather_clients import OpenWeatherClient

logger = structlog.get_logger()


class WeatherService:
    def __init__(
        self,
        load_settings: Callable[[], Settings] = get_settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.load_settings = load_settings
        self.transport = transport

    def _client(self) -> Optional[OpenWeatherClient]:
        """
        Build a client for this request, or None when scaffold mode applies.

        Settings are re-read every time: the key is a per-request decision.
        """
        settings = self.load_settings()
        api_key = settings.openweathermap_api_key
        if not api_key:
            if not settings.scaffold_fallback:
                raise ConfigurationError("OpenWeatherMap API key not set")
            logger.warning("scaffold_response", openweathermap_api_key=mask_key(api_key))
            return None
        return OpenWeatherClient(
            api_key,
            base=settings.openweathermap_base_url,
            timeout_s=settings.upstream_timeout_s,
            transport=self.transport,
        )

    async def get_weather(self, place: Place) -> WeatherOut:
        client = self._client()
        if client is None:
            return scaffold.scaffold_weather(place)
        payload = await client.current_weather_for_place(place)
        return assembler.build_weather(payload)

    async def get_weather_summary(self, place: Place) -> WeatherSummaryOut:
        client = self._client()
        if client is None:
            return scaffold.scaffold_summary(place)
        payload = await client.current_weather_for_place(place)
        return assembler.build_summary(assembler.build_weather(payload))

    async def get_forecast(self, location: Location, days: Optional[str] = None) -> ForecastOut:
        # `days` is accepted for forward compatibility; the provider window is fixed.
        client = self._client()
        if client is None:
            return scaffold.scaffold_forecast(location)
        coords = await self._resolve(client, location)
        payload = await client.forecast(coords)
        place = location.name if isinstance(location, Place) else None
        return assembler.build_forecast(payload, coords, place)

    async def get_air_quality(self, location: Location) -> AirQualityOut:
        client = self._client()
        if client is None:
            return scaffold.scaffold_air_quality(location)
        coords = await self._resolve(client, location)
        payload = await client.air_pollution(coords)
        return assembler.build_air_quality(payload, coords)

    @staticmethod
    async def _resolve(client: OpenWeatherClient, location: Location) -> Coordinates:
        if isinstance(location, Coordinates):
            return location
        return await client.geocode(location)
