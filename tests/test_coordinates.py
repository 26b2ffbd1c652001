"""Tests for the coordinate normalizer: decimal parsing and DMS conversion."""

import math

import pytest
from pydantic import ValidationError

from app.core.coordinates import (
    HemisphereMismatchError,
    decimal_to_dms,
    dms_to_coordinate,
    hemisphere_axis,
    parse_decimal,
    parse_dms_field,
    to_decimal_degrees,
)
from app.schemas.geo import DmsAngle


def test_dms_north_latitude():
    angle = DmsAngle(degrees=38, minutes=53, seconds=51.36, hemisphere="N")
    assert to_decimal_degrees(angle) == pytest.approx(38.8976, abs=1e-4)


def test_dms_west_longitude_is_negative():
    angle = DmsAngle(degrees=77, minutes=2, seconds=11.76, hemisphere="W")
    assert to_decimal_degrees(angle) == pytest.approx(-77.0366, abs=1e-4)


def test_dms_south_is_negative():
    angle = DmsAngle(degrees=33, minutes=52, seconds=7.68, hemisphere="S")
    assert to_decimal_degrees(angle) == pytest.approx(-33.8688, abs=1e-4)


def test_dms_fields_accept_strings():
    angle = DmsAngle(degrees="38", minutes="53", seconds="51.36", hemisphere="n")
    assert angle.hemisphere == "N"
    assert to_decimal_degrees(angle, "latitude") == pytest.approx(38.8976, abs=1e-4)


def test_dms_missing_fields_default_to_zero():
    """Missing DMS sub-fields are treated as 0 rather than rejected."""
    angle = DmsAngle(degrees="45", hemisphere="E")
    assert angle.minutes == 0
    assert angle.seconds == 0
    assert to_decimal_degrees(angle) == 45.0


@pytest.mark.parametrize("raw", ["", "abc", None, "  "])
def test_dms_unparseable_fields_default_to_zero(raw):
    angle = DmsAngle(degrees=10, minutes=raw, seconds=raw, hemisphere="N")
    assert to_decimal_degrees(angle) == 10.0


def test_dms_all_fields_blank_is_zero():
    angle = DmsAngle(degrees="", minutes="", seconds="", hemisphere="S")
    assert to_decimal_degrees(angle) == 0


def test_dms_invalid_hemisphere_rejected():
    with pytest.raises(ValidationError):
        DmsAngle(degrees=10, hemisphere="X")


@pytest.mark.parametrize(
    "hemisphere, axis",
    [("E", "latitude"), ("W", "latitude"), ("N", "longitude"), ("S", "longitude")],
)
def test_hemisphere_must_match_axis(hemisphere, axis):
    angle = DmsAngle(degrees=10, hemisphere=hemisphere)
    with pytest.raises(HemisphereMismatchError) as exc_info:
        to_decimal_degrees(angle, axis)
    assert exc_info.value.axis == axis
    assert exc_info.value.hemisphere == hemisphere
    assert isinstance(exc_info.value, ValueError)


def test_hemisphere_axis():
    assert hemisphere_axis("N") == "latitude"
    assert hemisphere_axis("S") == "latitude"
    assert hemisphere_axis("E") == "longitude"
    assert hemisphere_axis("W") == "longitude"


def test_dms_to_coordinate():
    coord = dms_to_coordinate(
        DmsAngle(degrees=38, minutes=53, seconds=51.36, hemisphere="N"),
        DmsAngle(degrees=77, minutes=2, seconds=11.76, hemisphere="W"),
    )
    assert coord.latitude == pytest.approx(38.8976, abs=1e-4)
    assert coord.longitude == pytest.approx(-77.0366, abs=1e-4)


def test_dms_to_coordinate_swapped_axes_rejected():
    with pytest.raises(HemisphereMismatchError):
        dms_to_coordinate(
            DmsAngle(degrees=77, hemisphere="W"),
            DmsAngle(degrees=38, hemisphere="N"),
        )


def test_parse_decimal_valid():
    assert parse_decimal("38.8976") == 38.8976
    assert parse_decimal("-77.0366") == -77.0366
    assert parse_decimal("  12.5") == 12.5
    assert parse_decimal(".5") == 0.5
    assert parse_decimal("1e2") == 100.0
    assert parse_decimal(42) == 42.0


def test_parse_decimal_reads_numeric_prefix():
    assert parse_decimal("38.9N") == 38.9
    assert parse_decimal("12abc") == 12.0
    assert parse_decimal("1.2.3") == 1.2


@pytest.mark.parametrize("raw", ["", "abc", None, "   ", "N38", "-", "."])
def test_parse_decimal_failure_is_nan(raw):
    assert math.isnan(parse_decimal(raw))


def test_parse_decimal_infinity():
    assert parse_decimal("Infinity") == math.inf
    assert parse_decimal("-Infinity") == -math.inf


def test_parse_decimal_and_dms_field_disagree_on_failure():
    """Decimal input keeps NaN so it can be rejected; DMS sub-fields fall back to 0."""
    assert math.isnan(parse_decimal("abc"))
    assert parse_dms_field("abc") == 0.0
    assert parse_dms_field("7.5") == 7.5


def test_decimal_to_dms_latitude():
    angle = decimal_to_dms(38.8976, "latitude")
    assert angle.hemisphere == "N"
    assert angle.degrees == 38
    assert angle.minutes == 53
    assert angle.seconds == pytest.approx(51.36, abs=1e-3)


def test_decimal_to_dms_negative_longitude():
    angle = decimal_to_dms(-77.0366, "longitude")
    assert angle.hemisphere == "W"
    assert angle.degrees == 77
    assert angle.minutes == 2
    assert angle.seconds == pytest.approx(11.76, abs=1e-3)
    assert to_decimal_degrees(angle, "longitude") == pytest.approx(-77.0366, abs=1e-9)


def test_decimal_to_dms_zero_is_north_east():
    assert decimal_to_dms(0.0, "latitude").hemisphere == "N"
    assert decimal_to_dms(0.0, "longitude").hemisphere == "E"


def test_decimal_to_dms_carries_rounded_seconds():
    angle = decimal_to_dms(10.99999999999, "latitude")
    assert angle.seconds < 60
    assert angle.minutes < 60
    assert to_decimal_degrees(angle) == pytest.approx(11.0, abs=1e-6)


@pytest.mark.parametrize("field", ["degrees", "minutes", "seconds"])
def test_dms_negative_values_rejected(field):
    """The sign comes from the hemisphere only; -10 S must not turn into +10."""
    with pytest.raises(ValidationError):
        DmsAngle(**{field: -10, "hemisphere": "S"})


def test_dms_negative_string_degrees_rejected():
    with pytest.raises(ValidationError):
        DmsAngle(degrees="-10", hemisphere="S")
