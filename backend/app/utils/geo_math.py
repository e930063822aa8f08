"""
Geo math — great-circle distance and postal-region reference points.
Version: 1.0.0
"""
import math
from typing import Tuple

from app.core.constants.geo import (
    EARTH_RADIUS_KM,
    POSTAL_REGIONS,
    UNMAPPED_BASE_LAT,
    UNMAPPED_BASE_LNG,
    UNMAPPED_DEGREES_PER_CODE,
    UNMAPPED_PIVOT_CODE,
)


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def region_coordinates(postal_code: str) -> Tuple[float, float]:
    """Reference point of the postal region a code belongs to."""
    try:
        code = int(postal_code)
    except (TypeError, ValueError):
        return UNMAPPED_BASE_LAT, UNMAPPED_BASE_LNG

    for first, last, lat, lng, _city in POSTAL_REGIONS:
        if first <= code <= last:
            return lat, lng

    offset = (code - UNMAPPED_PIVOT_CODE) * UNMAPPED_DEGREES_PER_CODE
    return UNMAPPED_BASE_LAT + offset, UNMAPPED_BASE_LNG + offset
