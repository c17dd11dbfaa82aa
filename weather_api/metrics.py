"""
Derived metrics computed from provider values.

Pure functions: no I/O, easy to unit test.
"""

from __future__ import annotations

import math
from typing import Optional

# Magnus formula coefficients
MAGNUS_A = 17.27
MAGNUS_B = 237.7

RECOMMENDATIONS = {
    "hot": "Stay hydrated and wear light clothing.",
    "warm": "A light jacket should be enough.",
    "cool": "Wear a warm jacket.",
    "cold": "Bundle up! It's very cold.",
}


def dew_point(temp_c: Optional[float], humidity_pct: Optional[float]) -> Optional[float]:
    """
    Dew point in Celsius from temperature and relative humidity (0-100).

    Returns None when humidity is missing or not positive: ln(0) has no
    meaningful dew point.
    """
    if temp_c is None or humidity_pct is None or humidity_pct <= 0:
        return None
    alpha = (MAGNUS_A * temp_c) / (MAGNUS_B + temp_c) + math.log(humidity_pct / 100.0)
    return round((MAGNUS_B * alpha) / (MAGNUS_A - alpha), 2)


def temperature_band(temp_c: float) -> str:
    if temp_c > 25:
        return "hot"
    if temp_c > 15:
        return "warm"
    if temp_c > 5:
        return "cool"
    return "cold"


def summary_text(temp_c: float, condition: str) -> str:
    return f"It's {temperature_band(temp_c)} and {condition}."


def recommendation_text(temp_c: float) -> str:
    return RECOMMENDATIONS[temperature_band(temp_c)]
