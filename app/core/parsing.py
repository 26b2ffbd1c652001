"""Lenient number parsing for raw coordinate input.

Decimal-degree fields and DMS sub-fields arrive as whatever the client typed.
Both go through the same prefix parser, but they treat failure differently:
decimal fields keep NaN so the caller can reject the request, DMS sub-fields
fall back to 0.
"""

import logging
import math
import re
from typing import Any

logger = logging.getLogger(__name__)

# Longest leading numeric prefix, the way JavaScript's parseFloat reads it.
_NUMBER_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)"
)


def parse_decimal(value: Any) -> float:
    """
    Parse a decimal-degree value.

    Strings are read up to the first character that can't continue a number,
    so "38.9N" gives 38.9. Returns NaN when nothing numeric is found
    (empty string, "abc", None). Numbers pass through unchanged.
    """
    if value is None or isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    match = _NUMBER_PREFIX.match(str(value).lstrip())
    if not match:
        return math.nan
    return float(match.group(0).replace("Infinity", "inf"))


def parse_dms_field(value: Any) -> float:
    """Parse a degrees/minutes/seconds field; anything unparseable counts as 0."""
    number = parse_decimal(value)
    if math.isnan(number):
        if value not in (None, ""):
            logger.debug("Unparseable DMS field %r, using 0", value)
        return 0.0
    return number
