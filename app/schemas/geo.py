"""Core value types shared by the coordinate normalizer and distance engine."""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from app.core.parsing import parse_dms_field

Axis = Literal["latitude", "longitude"]
Hemisphere = Literal["N", "S", "E", "W"]


class DmsAngle(BaseModel):
    """
    Degree-minute-second angle with a hemisphere letter.

    Numeric fields are lenient: missing, empty or non-numeric input becomes 0.
    Negative values are rejected; minutes and seconds have no upper bound.
    """
    degrees: float = Field(default=0.0, ge=0)
    minutes: float = Field(default=0.0, ge=0)
    seconds: float = Field(default=0.0, ge=0)
    hemisphere: Hemisphere

    @field_validator("degrees", "minutes", "seconds", mode="before")
    @classmethod
    def parse_lenient(cls, value: Any) -> float:
        return parse_dms_field(value)

    @field_validator("hemisphere", mode="before")
    @classmethod
    def normalize_hemisphere(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


class Coordinate(BaseModel):
    """Point in decimal degrees. Not range-checked here; see app.core.geo.validate_coordinate."""
    latitude: float
    longitude: float


class DistanceResult(BaseModel):
    """Great-circle distance in the three supported units, full precision."""
    kilometers: float
    statute_miles: float
    nautical_miles: float
