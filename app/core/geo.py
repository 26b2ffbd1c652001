"""Geo utilities: distance (Haversine) and unit conversion."""

import logging
import math

from app.schemas.geo import Coordinate, DistanceResult

logger = logging.getLogger(__name__)

EARTH_RADIUS_KM = 6371.0
KM_TO_MILES = 0.621371
KM_TO_NAUTICAL_MILES = 0.539957

# Coordinate bounds for validation
LAT_MIN, LAT_MAX = -90.0, 90.0
LNG_MIN, LNG_MAX = -180.0, 180.0


class InvalidCoordinateError(ValueError):
    """A latitude or longitude that can't be used: NaN, infinite, or out of range."""

    def __init__(self, field: str, value: float, reason: str, point: str | None = None):
        self.field = field
        self.value = value
        self.reason = reason
        # "point_a" or "point_b" when raised from compute_distance
        self.point = point
        super().__init__(f"Invalid {field} {value!r}: {reason}")


def haversine_distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Compute great-circle distance between two (lat, lon) points in kilometers.
    Uses the Haversine formula.
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    # Rounding near antipodes can push a slightly above 1
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def km_to_miles(km: float) -> float:
    """Convert kilometers to statute miles."""
    return km * KM_TO_MILES


def km_to_nautical_miles(km: float) -> float:
    """Convert kilometers to nautical miles."""
    return km * KM_TO_NAUTICAL_MILES


def validate_coordinate(coord: Coordinate, *, check_ranges: bool = True) -> None:
    """
    Raise InvalidCoordinateError if the point can't go into the distance formula.

    NaN and infinite components are always rejected. Range checks
    (lat in [-90, 90], lon in [-180, 180]) only run when check_ranges is set.
    """
    for field, value in (("latitude", coord.latitude), ("longitude", coord.longitude)):
        if not math.isfinite(value):
            raise InvalidCoordinateError(field, value, "not a finite number")
    if not check_ranges:
        return
    if not LAT_MIN <= coord.latitude <= LAT_MAX:
        raise InvalidCoordinateError("latitude", coord.latitude, f"outside [{LAT_MIN:g}, {LAT_MAX:g}]")
    if not LNG_MIN <= coord.longitude <= LNG_MAX:
        raise InvalidCoordinateError("longitude", coord.longitude, f"outside [{LNG_MIN:g}, {LNG_MAX:g}]")


def compute_distance(a: Coordinate, b: Coordinate, *, validate_ranges: bool = True) -> DistanceResult:
    """
    Great-circle distance between two points in km, statute miles and nautical miles.

    Both points are validated first; nothing is computed for a rejected pair.
    Values are returned at full precision (rounding is up to the caller).
    """
    for point, coord in (("point_a", a), ("point_b", b)):
        try:
            validate_coordinate(coord, check_ranges=validate_ranges)
        except InvalidCoordinateError as e:
            e.point = point
            raise

    km = haversine_distance_km(a.latitude, a.longitude, b.latitude, b.longitude)
    logger.debug(
        "compute_distance a=(%s, %s) b=(%s, %s) km=%s",
        a.latitude, a.longitude, b.latitude, b.longitude, km,
    )
    return DistanceResult(
        kilometers=km,
        statute_miles=km_to_miles(km),
        nautical_miles=km_to_nautical_miles(km),
    )
