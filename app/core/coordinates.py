"""Coordinate normalizer: DMS angles and raw decimal input to signed decimal degrees."""

from app.core.parsing import parse_decimal, parse_dms_field
from app.schemas.geo import Axis, Coordinate, DmsAngle, Hemisphere

__all__ = [
    "HemisphereMismatchError",
    "decimal_to_dms",
    "dms_to_coordinate",
    "hemisphere_axis",
    "parse_decimal",
    "parse_dms_field",
    "to_decimal_degrees",
]

_HEMISPHERE_AXIS: dict[str, Axis] = {
    "N": "latitude",
    "S": "latitude",
    "E": "longitude",
    "W": "longitude",
}
_NEGATIVE_HEMISPHERES = {"S", "W"}


class HemisphereMismatchError(ValueError):
    """Hemisphere letter used on the wrong axis, e.g. a latitude marked E."""

    def __init__(self, hemisphere: str, axis: Axis):
        self.hemisphere = hemisphere
        self.axis = axis
        super().__init__(f"Hemisphere {hemisphere!r} is not valid for {axis}")


def hemisphere_axis(hemisphere: Hemisphere) -> Axis:
    """N/S belong to latitude, E/W to longitude."""
    return _HEMISPHERE_AXIS[hemisphere]


def to_decimal_degrees(angle: DmsAngle, axis: Axis | None = None) -> float:
    """
    Convert a DMS angle to signed decimal degrees.

    degrees + minutes/60 + seconds/3600, negated for S and W.
    If axis is given the hemisphere must belong to it, otherwise
    HemisphereMismatchError is raised.
    """
    if axis is not None and hemisphere_axis(angle.hemisphere) != axis:
        raise HemisphereMismatchError(angle.hemisphere, axis)

    value = angle.degrees + angle.minutes / 60 + angle.seconds / 3600
    if angle.hemisphere in _NEGATIVE_HEMISPHERES:
        value = -value
    return value


def dms_to_coordinate(latitude: DmsAngle, longitude: DmsAngle) -> Coordinate:
    """Convert a latitude/longitude DMS pair, checking each hemisphere against its axis."""
    return Coordinate(
        latitude=to_decimal_degrees(latitude, "latitude"),
        longitude=to_decimal_degrees(longitude, "longitude"),
    )


def decimal_to_dms(value: float, axis: Axis) -> DmsAngle:
    """Split signed decimal degrees into a DMS angle (seconds keep their fraction)."""
    if axis == "latitude":
        hemisphere = "N" if value >= 0 else "S"
    else:
        hemisphere = "E" if value >= 0 else "W"

    magnitude = abs(value)
    degrees = int(magnitude)
    minutes_full = (magnitude - degrees) * 60
    minutes = int(minutes_full)
    seconds = round((minutes_full - minutes) * 60, 6)
    if seconds >= 60:
        seconds -= 60
        minutes += 1
    if minutes >= 60:
        minutes -= 60
        degrees += 1
    return DmsAngle(degrees=degrees, minutes=minutes, seconds=seconds, hemisphere=hemisphere)
