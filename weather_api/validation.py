"""
Query validation.

Field rules live on the pydantic query models in schemas.py. The functions
here run them and translate pydantic's errors into (field, message)
violations, so a client sees all problems with its request at once.
Nothing here touches the network: invalid input never reaches the provider.
"""

from __future__ import annotations

from typing import List, Mapping, Optional, Tuple, Type

import pydantic

from .errors import ValidationError, Violation
from .schemas import (
    CityQuery,
    Coordinates,
    ForecastQuery,
    Location,
    Place,
    PlaceOrCoordsQuery,
    is_place_xor_coordinates,
)

EXCLUSIVE_MESSAGE = "Provide either city or both lat and lon, but not both."

MESSAGES = {
    "city": "City name must be between 1 and 100 characters.",
    "country": "Country code must be 2 or 3 characters (ISO 3166).",
    "state": "State/region/oblast must be between 1 and 100 characters.",
    "lat": "Latitude must be a valid coordinate (-90 to 90).",
    "lon": "Longitude must be a valid coordinate (-180 to 180).",
}


def _violations(errors: List[dict]) -> List[Violation]:
    violations: List[Violation] = []
    for error in errors:
        loc = error["loc"]
        if not loc:
            violation = ("location", EXCLUSIVE_MESSAGE)
        else:
            field = str(loc[0])
            if error["type"] == "extra_forbidden":
                violation = (field, f"property {field} should not exist.")
            elif error["type"] == "missing" and field == "city":
                violation = (field, "City is required.")
            else:
                violation = (field, MESSAGES.get(field, error["msg"]))
        if violation not in violations:
            violations.append(violation)
    return violations


def _parse(model: Type[pydantic.BaseModel], params: Mapping[str, str]):
    try:
        return model.model_validate(dict(params))
    except pydantic.ValidationError as e:
        violations = _violations(e.errors())

    # Field errors stop pydantic before the model validator runs; the
    # exclusivity rule is still reported alongside them.
    exclusive = ("location", EXCLUSIVE_MESSAGE)
    if (
        issubclass(model, PlaceOrCoordsQuery)
        and exclusive not in violations
        and not is_place_xor_coordinates(params.get("city"), params.get("lat"), params.get("lon"))
    ):
        violations.append(exclusive)
    raise ValidationError(violations)


def _location(query: PlaceOrCoordsQuery) -> Location:
    if query.city:
        return Place(name=query.city, country=query.country, state=query.state)
    return Coordinates(lat=query.lat, lon=query.lon)


def validate_city_query(params: Mapping[str, str]) -> Place:
    query = _parse(CityQuery, params)
    return Place(name=query.city, country=query.country, state=query.state)


def validate_air_quality_query(params: Mapping[str, str]) -> Location:
    return _location(_parse(PlaceOrCoordsQuery, params))


def validate_forecast_query(params: Mapping[str, str]) -> Tuple[Location, Optional[str]]:
    query = _parse(ForecastQuery, params)
    return _location(query), query.days
