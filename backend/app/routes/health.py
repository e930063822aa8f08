"""
Health routes — liveness check and price sync summary.
Version: 1.0.0
"""
from fastapi import APIRouter, Depends

from app.container import get_price_table
from app.services.price_table_service import PriceTableService

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(price_table: PriceTableService = Depends(get_price_table)):
    """Healthy even on fallback prices; the board state is informational."""
    status = price_table.status()
    return {
        "status": "healthy",
        "price_board_connected": status.is_connected,
        "price_entries": status.item_count,
    }
