"""
Price routes — cached price table, sync status and manual refresh.

Provides:
- GET  /prices          – current price snapshot with sync status
- GET  /prices/status   – sync status only
- POST /prices/refresh  – pull the board now
Version: 1.0.0
"""
import logging

from fastapi import APIRouter, Depends

from app.container import get_price_table
from app.schemas.prices import PriceRefreshResponse, PriceTableResponse, PriceTableStatus
from app.services.price_table_service import PriceTableService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/prices", tags=["prices"])


@router.get("", response_model=PriceTableResponse)
async def get_prices(price_table: PriceTableService = Depends(get_price_table)):
    """Every logical price key with its current value."""
    return PriceTableResponse(entries=price_table.entries(), status=price_table.status())


@router.get("/status", response_model=PriceTableStatus)
async def get_price_status(price_table: PriceTableService = Depends(get_price_table)):
    return price_table.status()


@router.post("/refresh", response_model=PriceRefreshResponse)
async def refresh_prices(price_table: PriceTableService = Depends(get_price_table)):
    """
    Manual refresh. Shares the scheduled refresh path; a failed pull keeps
    the current prices and is reported in ``status``.
    """
    refreshed = await price_table.refresh()
    logger.info("manual price refresh refreshed=%s", refreshed)
    return PriceRefreshResponse(refreshed=refreshed, status=price_table.status())
