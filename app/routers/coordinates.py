"""Coordinate conversion endpoints (DMS <-> decimal degrees)."""

import logging
import math

from fastapi import APIRouter, HTTPException, Query

from app.core.coordinates import HemisphereMismatchError, decimal_to_dms, to_decimal_degrees
from app.core.geo import LAT_MAX, LAT_MIN, LNG_MAX, LNG_MIN
from app.schemas.distance import DecimalToDmsResponse, DmsToDecimalRequest, DmsToDecimalResponse
from app.schemas.geo import Axis

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/coordinates", tags=["coordinates"])


@router.post("/dms-to-decimal", response_model=DmsToDecimalResponse)
def dms_to_decimal(request: DmsToDecimalRequest) -> DmsToDecimalResponse:
    """Convert one DMS angle to signed decimal degrees (S and W are negative)."""
    try:
        value = to_decimal_degrees(request.angle, request.axis)
    except HemisphereMismatchError as e:
        logger.warning("DMS conversion rejected: %s", e)
        raise HTTPException(
            status_code=422,
            detail={
                "error": "hemisphere_mismatch",
                "message": str(e),
                "axis": e.axis,
                "hemisphere": e.hemisphere,
            },
        )
    if not math.isfinite(value):
        logger.warning("DMS conversion rejected: non-finite result %s", value)
        raise HTTPException(
            status_code=422,
            detail={
                "error": "invalid_coordinates",
                "message": "Please check your coordinates and try again.",
                "value": str(value),
                "reason": "not a finite number",
            },
        )
    return DmsToDecimalResponse(decimal_degrees=value)


@router.get("/decimal-to-dms", response_model=DecimalToDmsResponse)
def decimal_to_dms_endpoint(
    value: float = Query(..., description="Signed decimal degrees"),
    axis: Axis = Query(..., description="latitude or longitude"),
) -> DecimalToDmsResponse:
    """Split signed decimal degrees into degrees, minutes, seconds and a hemisphere."""
    low, high = (LAT_MIN, LAT_MAX) if axis == "latitude" else (LNG_MIN, LNG_MAX)
    if not low <= value <= high:
        raise HTTPException(
            status_code=422,
            detail={
                "error": "invalid_coordinates",
                "message": f"{axis} must be between {low:g} and {high:g}",
            },
        )
    return DecimalToDmsResponse(angle=decimal_to_dms(value, axis))
