"""
OpenWeatherMap client.

We keep provider access separate from FastAPI endpoints:
- easier to test in isolation (an httpx transport can be injected)
- one place where HTTP failures become domain errors
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx
import structlog

from .errors import NotFoundError, UpstreamError
from .schemas import Coordinates, Place

logger = structlog.get_logger()


class OpenWeatherClient:
    """
    OpenWeatherMap wrapper.

    Endpoints used:
    - Geocoding:
        /geo/1.0/direct?q=city,state,country&limit=1&appid=KEY
    - Current weather:
        /data/2.5/weather?lat=...&lon=...&units=metric&appid=KEY
    - 5-day forecast (3-hour increments):
        /data/2.5/forecast?lat=...&lon=...&units=metric&appid=KEY
    - Air pollution:
        /data/2.5/air_pollution?lat=...&lon=...&appid=KEY

    No retries: a single failed call fails the request. Upstream status codes
    and messages are passed through unchanged.
    """

    def __init__(
        self,
        api_key: str,
        base: str = "https://api.openweathermap.org",
        timeout_s: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base = base.rstrip("/")
        self.timeout_s = timeout_s
        self.transport = transport

    async def _get(self, path: str, params: Dict[str, Any], failure_message: str) -> Any:
        params = {**params, "appid": self.api_key}
        try:
            async with httpx.AsyncClient(timeout=self.timeout_s, transport=self.transport) as client:
                r = await client.get(f"{self.base}{path}", params=params)
        except httpx.TimeoutException:
            logger.warning("upstream_timeout", path=path, timeout_s=self.timeout_s)
            raise UpstreamError(failure_message)
        except httpx.HTTPError as e:
            logger.warning("upstream_unreachable", path=path, error=str(e))
            raise UpstreamError(failure_message)

        logger.info("upstream_call", path=path, status=r.status_code)
        if not r.is_success:
            raise UpstreamError(_upstream_message(r) or failure_message, r.status_code)

        try:
            return r.json()
        except ValueError:
            raise UpstreamError(f"Unexpected response from provider for {path}")

    async def geocode(self, place: Place) -> Coordinates:
        """
        Resolve a place into coordinates using the single best geocoding match.

        OpenWeather expects disambiguators inside `q`: "Springfield,IL,US".
        """
        query = ",".join(part for part in (place.name, place.state, place.country) if part)
        results = await self._get(
            "/geo/1.0/direct",
            {"q": query, "limit": 1},
            "Failed to resolve city coordinates",
        )

        if not results:
            logger.info("geocode_no_match", query=query)
            raise NotFoundError("City not found")

        best = results[0]
        try:
            return Coordinates(lat=float(best["lat"]), lon=float(best["lon"]))
        except (KeyError, TypeError, ValueError):
            raise UpstreamError("Unexpected geocoding payload from provider")

    async def current_weather(self, coords: Coordinates) -> Dict[str, Any]:
        """Retrieves current weather conditions for a lat/lon."""
        params = {"lat": coords.lat, "lon": coords.lon, "units": "metric"}
        return await self._get("/data/2.5/weather", params, "Failed to fetch weather data")

    async def current_weather_for_place(self, place: Place) -> Dict[str, Any]:
        coords = await self.geocode(place)
        return await self.current_weather(coords)

    async def forecast(self, coords: Coordinates) -> Dict[str, Any]:
        """Retrieves the 5-day forecast in 3-hour increments."""
        params = {"lat": coords.lat, "lon": coords.lon, "units": "metric"}
        return await self._get("/data/2.5/forecast", params, "Failed to fetch forecast data")

    async def air_pollution(self, coords: Coordinates) -> Dict[str, Any]:
        """Retrieves the current air pollution reading (AQI + components)."""
        params = {"lat": coords.lat, "lon": coords.lon}
        return await self._get("/data/2.5/air_pollution", params, "Failed to fetch air quality data")


def _upstream_message(r: httpx.Response) -> Optional[str]:
    """OpenWeather error bodies look like {"cod": 401, "message": "..."}."""
    try:
        body = r.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return None
