"""Distance endpoints: decimal-degree and DMS input modes."""

import logging
import math

from fastapi import APIRouter, HTTPException

from app.core.config import settings
from app.core.coordinates import HemisphereMismatchError, dms_to_coordinate, parse_decimal
from app.core.geo import InvalidCoordinateError, compute_distance
from app.schemas.distance import (
    DecimalDistanceRequest,
    DistanceDisplay,
    DistanceResponse,
    DmsDistanceRequest,
)
from app.schemas.geo import Coordinate, DistanceResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/distance", tags=["distance"])

CHECK_COORDINATES_MESSAGE = "Please check your coordinates and try again."

# Unit suffixes for the display block
UNIT_SUFFIXES = {
    "kilometers": "km",
    "statute_miles": "mi",
    "nautical_miles": "nm",
}


def _format_display(result: DistanceResult, precision: int) -> DistanceDisplay:
    """Round each unit to `precision` decimals and append its suffix."""
    values = result.model_dump()
    return DistanceDisplay(
        **{unit: f"{values[unit]:.{precision}f} {suffix}" for unit, suffix in UNIT_SUFFIXES.items()}
    )


def _invalid_coordinate_exception(e: InvalidCoordinateError, point: str) -> HTTPException:
    # NaN/inf are not JSON-serializable; report them as strings
    value = e.value if math.isfinite(e.value) else str(e.value)
    return HTTPException(
        status_code=422,
        detail={
            "error": "invalid_coordinates",
            "message": CHECK_COORDINATES_MESSAGE,
            "point": point,
            "field": e.field,
            "value": value,
            "reason": e.reason,
        },
    )


def _calculate(mode: str, point_a: Coordinate, point_b: Coordinate) -> DistanceResponse:
    """Run the distance engine and build the response; engine errors become 422."""
    try:
        result = compute_distance(
            point_a, point_b, validate_ranges=settings.validate_coordinate_ranges
        )
    except InvalidCoordinateError as e:
        logger.warning("Distance rejected: mode=%s point=%s error=%s", mode, e.point, e)
        raise _invalid_coordinate_exception(e, e.point)

    logger.info(
        "Distance computed: mode=%s a=(%s, %s) b=(%s, %s) km=%.3f",
        mode,
        point_a.latitude,
        point_a.longitude,
        point_b.latitude,
        point_b.longitude,
        result.kilometers,
    )
    return DistanceResponse(
        mode=mode,
        point_a=point_a,
        point_b=point_b,
        result=result,
        display=_format_display(result, settings.display_precision),
    )


@router.post("/decimal", response_model=DistanceResponse)
def distance_from_decimal(request: DecimalDistanceRequest) -> DistanceResponse:
    """
    Distance between two points entered in decimal degrees.

    Each field is parsed leniently ("38.9N" reads as 38.9). If any field has no
    numeric value at all, the whole request is rejected with 422 and the
    offending field names, before anything is computed.
    """
    raw = request.model_dump()
    parsed = {name: parse_decimal(value) for name, value in raw.items()}
    bad_fields = [name for name, value in parsed.items() if math.isnan(value)]
    if bad_fields:
        logger.warning("Decimal distance rejected: unparseable fields=%s", bad_fields)
        raise HTTPException(
            status_code=422,
            detail={
                "error": "invalid_coordinates",
                "message": CHECK_COORDINATES_MESSAGE,
                "fields": bad_fields,
            },
        )

    point_a = Coordinate(latitude=parsed["lat1"], longitude=parsed["lon1"])
    point_b = Coordinate(latitude=parsed["lat2"], longitude=parsed["lon2"])
    return _calculate("decimal", point_a, point_b)


@router.post("/dms", response_model=DistanceResponse)
def distance_from_dms(request: DmsDistanceRequest) -> DistanceResponse:
    """
    Distance between two points entered as degrees/minutes/seconds.

    Missing or non-numeric DMS sub-fields count as 0. A hemisphere on the
    wrong axis (latitude marked E/W, longitude marked N/S) is rejected with 422.
    """
    points: dict[str, Coordinate] = {}
    for name, point in (("point_a", request.point_a), ("point_b", request.point_b)):
        try:
            points[name] = dms_to_coordinate(point.latitude, point.longitude)
        except HemisphereMismatchError as e:
            logger.warning("DMS distance rejected: point=%s error=%s", name, e)
            raise HTTPException(
                status_code=422,
                detail={
                    "error": "hemisphere_mismatch",
                    "message": CHECK_COORDINATES_MESSAGE,
                    "point": name,
                    "axis": e.axis,
                    "hemisphere": e.hemisphere,
                },
            )

    return _calculate("dms", points["point_a"], points["point_b"])
