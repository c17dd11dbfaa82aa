"""
FastAPI entrypoint.

This file focuses on:
- routing
- request/response handling
- wiring together settings + logging + the weather service
"""

from __future__ import annotations

import time
from typing import Optional

import structlog
from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .errors import WeatherError
from .log import configure_logging
from .service import WeatherService
from .settings import Settings, get_settings
from .validation import validate_air_quality_query, validate_city_query, validate_forecast_query

logger = structlog.get_logger()

CITY_DOC = "City name"
COUNTRY_DOC = "Country code (ISO 3166) for city disambiguation"
STATE_DOC = "State/region/oblast for city disambiguation"


def create_app(service: Optional[WeatherService] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    `settings` only drives process-level concerns (logging, CORS, title);
    the service re-reads the API key on every request.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_json)
    service = service or WeatherService()

    app = FastAPI(title=settings.app_name)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        log = logger.bind(method=request.method, path=request.url.path)
        log.info("request_started", client=request.client.host if request.client else None)
        try:
            response = await call_next(request)
        except Exception as e:
            log.error("request_failed", error=str(e), duration_ms=round((time.perf_counter() - start) * 1000, 1))
            raise
        log.info("request_finished", status=response.status_code, duration_ms=round((time.perf_counter() - start) * 1000, 1))
        return response

    @app.exception_handler(WeatherError)
    async def weather_error_handler(request: Request, exc: WeatherError):
        logger.warning("weather_error", path=request.url.path, status=exc.status_code, error=exc.message)
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail()})

    # -------------------------
    # Status
    # -------------------------

    @app.get("/", response_class=PlainTextResponse)
    async def status():
        """API status check."""
        return "Api is running!"

    # -------------------------
    # Weather APIs
    # -------------------------
    # Query parameters are declared as plain strings for the docs; the rules
    # (lengths, bounds, place-or-coordinates) live on the query models in schemas.py
    # and are applied by validation.py so failures come back as itemised 400s.

    @app.get("/weather")
    async def api_weather(
        request: Request,
        city: Optional[str] = Query(None, description=CITY_DOC),
        country: Optional[str] = Query(None, description=COUNTRY_DOC),
        state: Optional[str] = Query(None, description=STATE_DOC),
    ):
        """Current conditions for a city, with derived dew point."""
        place = validate_city_query(request.query_params)
        return await service.get_weather(place)

    @app.get("/weather/summary")
    async def api_weather_summary(
        request: Request,
        city: Optional[str] = Query(None, description=CITY_DOC),
        country: Optional[str] = Query(None, description=COUNTRY_DOC),
        state: Optional[str] = Query(None, description=STATE_DOC),
    ):
        """Current conditions plus a summary sentence and clothing recommendation."""
        place = validate_city_query(request.query_params)
        return await service.get_weather_summary(place)

    @app.get("/weather/forecast")
    async def api_forecast(
        request: Request,
        city: Optional[str] = Query(None, description=CITY_DOC),
        country: Optional[str] = Query(None, description=COUNTRY_DOC),
        state: Optional[str] = Query(None, description=STATE_DOC),
        lat: Optional[str] = Query(None, description="Latitude (-90 to 90)"),
        lon: Optional[str] = Query(None, description="Longitude (-180 to 180)"),
        days: Optional[str] = Query(None, description="Number of days (reserved, the provider window is fixed at 5)"),
    ):
        """5-day / 3-hour forecast for a city or for coordinates."""
        location, days_value = validate_forecast_query(request.query_params)
        return await service.get_forecast(location, days_value)

    @app.get("/weather/air-quality")
    async def api_air_quality(
        request: Request,
        city: Optional[str] = Query(None, description=CITY_DOC),
        country: Optional[str] = Query(None, description=COUNTRY_DOC),
        state: Optional[str] = Query(None, description=STATE_DOC),
        lat: Optional[str] = Query(None, description="Latitude (-90 to 90)"),
        lon: Optional[str] = Query(None, description="Longitude (-180 to 180)"),
    ):
        """Air Quality Index and pollutant concentrations for a city or for coordinates."""
        location = validate_air_quality_query(request.query_params)
        return await service.get_air_quality(location)

    return app


app = create_app()
