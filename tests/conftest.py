from __future__ import annotations

from typing import Any, Dict, List, Union

import httpx

from weather_api.service import WeatherService
from weather_api.settings import Settings

from tests.fixtures import (
    AIR_POLLUTION_RESPONSE,
    CURRENT_WEATHER_RESPONSE,
    FORECAST_RESPONSE,
    GEOCODING_RESPONSE,
)

GEO = "/geo/1.0/direct"
WEATHER = "/data/2.5/weather"
FORECAST = "/data/2.5/forecast"
AIR = "/data/2.5/air_pollution"

# path -> (status, json body) or an httpx exception class to raise
Route = Union[tuple, type]


class FakeProvider:
    """httpx.MockTransport handler that records every request it serves."""

    def __init__(self, routes: Dict[str, Route]):
        self.routes = routes
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes[request.url.path]
        if isinstance(route, type):
            raise route("simulated failure", request=request)
        status, body = route
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    @property
    def paths(self) -> List[str]:
        return [r.url.path for r in self.requests]


def default_routes() -> Dict[str, Any]:
    return {
        GEO: (200, GEOCODING_RESPONSE),
        WEATHER: (200, CURRENT_WEATHER_RESPONSE),
        FORECAST: (200, FORECAST_RESPONSE),
        AIR: (200, AIR_POLLUTION_RESPONSE),
    }


def make_settings(api_key: str = "test-key", **overrides) -> Settings:
    return Settings(_env_file=None, openweathermap_api_key=api_key, **overrides)


def make_service(routes=None, api_key: str = "test-key", **overrides):
    provider = FakeProvider(routes if routes is not None else default_routes())
    settings = make_settings(api_key, **overrides)
    service = WeatherService(load_settings=lambda: settings, transport=httpx.MockTransport(provider))
    return service, provider

