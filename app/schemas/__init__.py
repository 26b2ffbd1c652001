from app.schemas.geo import Axis, Coordinate, DistanceResult, DmsAngle, Hemisphere
from app.schemas.distance import (
    DecimalDistanceRequest,
    DecimalToDmsResponse,
    DistanceDisplay,
    DistanceResponse,
    DmsDistanceRequest,
    DmsPoint,
    DmsToDecimalRequest,
    DmsToDecimalResponse,
)

__all__ = [
    "Axis",
    "Coordinate",
    "DistanceResult",
    "DmsAngle",
    "Hemisphere",
    "DecimalDistanceRequest",
    "DecimalToDmsResponse",
    "DistanceDisplay",
    "DistanceResponse",
    "DmsDistanceRequest",
    "DmsPoint",
    "DmsToDecimalRequest",
    "DmsToDecimalResponse",
]
