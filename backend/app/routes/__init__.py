"""
Route aggregator — mounts all routers under /api/v1 prefix.

Health routes are exported separately for main.py to mount at root.
Version: 1.0.0
"""
from fastapi import APIRouter

from app.routes.prices import router as prices_router
from app.routes.designs import router as designs_router
from app.routes.pricing import router as pricing_router
from app.routes.distance import router as distance_router
from app.routes.shipping import router as shipping_router
from app.routes.orders import router as orders_router
from app.routes.health import router as health_router

v1_router = APIRouter(prefix="/api/v1")

v1_router.include_router(prices_router)
v1_router.include_router(designs_router)
v1_router.include_router(pricing_router)
v1_router.include_router(distance_router)
v1_router.include_router(shipping_router)
v1_router.include_router(orders_router)

__all__ = ["v1_router", "health_router"]
