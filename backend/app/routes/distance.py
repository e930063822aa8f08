"""
Distance routes — workshop-to-customer distance lookup.
Version: 1.0.0
"""
from fastapi import APIRouter, Depends, HTTPException

from app.container import get_distance_resolver
from app.schemas.distance import DistanceResult
from app.services.distance_service import DistanceResolver
from app.services.shipping_service import is_valid_postal_code

router = APIRouter(prefix="/distance", tags=["distance"])


@router.get("/{postal_code}", response_model=DistanceResult)
async def get_distance(
    postal_code: str,
    resolver: DistanceResolver = Depends(get_distance_resolver),
):
    """Always answers for a valid code; the static region table is the last resort."""
    if not is_valid_postal_code(postal_code):
        raise HTTPException(status_code=422, detail="Postal code must consist of 5 digits")
    return await resolver.resolve(postal_code)
