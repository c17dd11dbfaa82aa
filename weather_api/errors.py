"""
Domain errors.

Every failure the pipeline can produce is a WeatherError carrying the HTTP
status it maps to. main.py turns them into JSON responses in one place.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

# (field, message)
Violation = Tuple[str, str]


class WeatherError(RuntimeError):
    """Raised for user-facing weather lookup failures."""
    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def detail(self):
        return self.message


class ValidationError(WeatherError):
    """Bad, missing or conflicting query parameters."""
    status_code = 400

    def __init__(self, violations: List[Violation]):
        super().__init__("; ".join(message for _, message in violations))
        self.violations = list(violations)

    def detail(self):
        return [{"field": field, "message": message} for field, message in self.violations]


class NotFoundError(WeatherError):
    """Geocoding returned no match for the requested place."""
    status_code = 404


class UpstreamError(WeatherError):
    """Non-2xx answer or transport fault from the provider."""
    status_code = 500


class ConfigurationError(WeatherError):
    """The provider key is missing and scaffold fallback is disabled."""
    status_code = 500
