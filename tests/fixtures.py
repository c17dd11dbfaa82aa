"""Canned OpenWeatherMap payloads for tests."""

from __future__ import annotations

GEOCODING_RESPONSE = [
    {"name": "London", "lat": 51.5073219, "lon": -0.1276474, "country": "GB", "state": "England"}
]

GEOCODING_RESPONSE_EMPTY = []

CURRENT_WEATHER_RESPONSE = {
    "coord": {"lon": -0.1276, "lat": 51.5073},
    "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
    "main": {"temp": 18, "feels_like": 17.6, "pressure": 1012, "humidity": 80},
    "visibility": 10000,
    "wind": {"speed": 3.5, "deg": 230},
    "name": "London",
    "cod": 200,
}

FORECAST_RESPONSE = {
    "cod": "200",
    "list": [
        {"dt": 1234567890, "main": {"temp": 18}, "weather": [{"description": "light rain"}]},
        {"dt": 1234578690, "main": {"temp": 16.5}, "weather": [{"description": "overcast clouds"}]},
        {"dt": 1234567890, "main": {"temp": 18}, "weather": [{"description": "light rain"}]},
    ],
    "city": {"name": "London", "coord": {"lat": 51.5073, "lon": -0.1276}, "timezone": 0},
}

AIR_POLLUTION_RESPONSE = {
    "coord": {"lon": -0.1278, "lat": 51.5074},
    "list": [
        {
            "main": {"aqi": 2},
            "components": {"co": 201.94, "no2": 0.01, "o3": 68.66, "pm2_5": 0.5, "pm10": 0.54},
            "dt": 1606147200,
        }
    ],
}

UNAUTHORIZED_RESPONSE = {
    "cod": 401,
    "message": "Invalid API key. Please see https://openweathermap.org/faq#error401 for more info.",
}
