"""
Distance schemas — geocoding, routing and resolved distance models.
Version: 1.0.0
"""
from typing import Optional

from pydantic import BaseModel, Field


class GeocodeResult(BaseModel):
    lat: float
    lng: float
    display_name: str = ""


class RouteResult(BaseModel):
    distance_m: float
    duration_s: float


class DistanceResult(BaseModel):
    """Driving distance from the workshop to a destination postal code."""
    distance_km: int = Field(..., ge=1)
    place_name: str
    duration_minutes: Optional[int] = None
    source: str  # 'routing', 'geocoding' or 'static'
