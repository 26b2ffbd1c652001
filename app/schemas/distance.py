"""Schemas for distance and coordinate conversion endpoints."""

from typing import Any, Literal, Optional

from pydantic import BaseModel

from app.schemas.geo import Axis, Coordinate, DistanceResult, DmsAngle

# Raw field value as typed by the client, untouched until parse_decimal sees it
RawNumber = Any


class DecimalDistanceRequest(BaseModel):
    """
    Two points in decimal degrees, exactly as entered.

    Fields are not validated by the schema so that empty or non-numeric input
    reaches the endpoint and is reported with the list of offending fields.
    """
    lat1: RawNumber = None
    lon1: RawNumber = None
    lat2: RawNumber = None
    lon2: RawNumber = None


class DmsPoint(BaseModel):
    """A point entered as DMS; latitude takes N/S, longitude takes E/W."""
    latitude: DmsAngle
    longitude: DmsAngle


class DmsDistanceRequest(BaseModel):
    point_a: DmsPoint
    point_b: DmsPoint


class DistanceDisplay(BaseModel):
    """Rounded, unit-suffixed strings, e.g. "199.84 km"."""
    kilometers: str
    statute_miles: str
    nautical_miles: str


class DistanceResponse(BaseModel):
    """Response for POST /api/v1/distance/{mode}."""
    mode: Literal["decimal", "dms"]
    point_a: Coordinate
    point_b: Coordinate
    result: DistanceResult
    display: DistanceDisplay


class DmsToDecimalRequest(BaseModel):
    angle: DmsAngle
    # When set, the hemisphere must belong to this axis
    axis: Optional[Axis] = None


class DmsToDecimalResponse(BaseModel):
    decimal_degrees: float


class DecimalToDmsResponse(BaseModel):
    angle: DmsAngle
