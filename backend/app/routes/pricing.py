"""
Pricing routes — single-sign breakdown and full order quotes.

Provides:
- POST /pricing/sign   – price one sign at a requested width
- POST /pricing/order  – lines, shipping, installation, tax and total
Version: 1.0.0
"""
from fastapi import APIRouter, Depends, HTTPException

from app.container import get_design_catalog, get_order_service, get_pricing_calculator
from app.core.exceptions import DesignNotFoundError
from app.schemas.orders import OrderConfiguration, OrderQuote
from app.schemas.pricing import SignPriceBreakdown, SignPriceRequest
from app.services.design_catalog_service import DesignCatalogService
from app.services.order_service import OrderService
from app.services.pricing_service import SignPricingCalculator

router = APIRouter(prefix="/pricing", tags=["pricing"])


@router.post("/sign", response_model=SignPriceBreakdown)
async def price_sign(
    body: SignPriceRequest,
    catalog: DesignCatalogService = Depends(get_design_catalog),
    calculator: SignPricingCalculator = Depends(get_pricing_calculator),
):
    """Height is always derived from the width and the design ratio."""
    try:
        design = catalog.get_design(body.design_id)
    except DesignNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    height = calculator.height_for(design, body.width)
    return calculator.breakdown(
        design,
        body.width,
        height,
        is_waterproof=body.is_waterproof,
        is_multi_part=body.is_multi_part,
        has_uv_print=body.has_uv_print,
        has_hanging_system=body.has_hanging_system,
        express_production=body.express_production,
    )


@router.post("/order", response_model=OrderQuote)
async def price_order(
    body: OrderConfiguration,
    orders: OrderService = Depends(get_order_service),
):
    try:
        return await orders.quote_order(body)
    except DesignNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
