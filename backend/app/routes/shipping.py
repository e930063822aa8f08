"""
Shipping routes — delivery quote for a sign size and destination.
Version: 1.0.0
"""
from fastapi import APIRouter, Depends

from app.container import get_distance_resolver, get_shipping_calculator
from app.schemas.shipping import ShippingQuoteRequest, ShippingQuoteResponse
from app.services.distance_service import DistanceResolver
from app.services.shipping_service import ShippingCalculator, is_valid_postal_code

router = APIRouter(prefix="/shipping", tags=["shipping"])


@router.post("/quote", response_model=ShippingQuoteResponse)
async def quote_shipping(
    body: ShippingQuoteRequest,
    shipping: ShippingCalculator = Depends(get_shipping_calculator),
    resolver: DistanceResolver = Depends(get_distance_resolver),
):
    distance = None
    if is_valid_postal_code(body.postal_code):
        distance = await resolver.resolve(body.postal_code)

    info = shipping.shipping_info(
        body.longest_side_cm, distance.distance_km if distance else None,
    )
    return ShippingQuoteResponse(
        shipping=info,
        distance_km=distance.distance_km if distance else None,
        place_name=distance.place_name if distance else None,
    )
