import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.container import get_price_sync_scheduler, get_price_table
from app.core.config import settings
from app.core.middleware import apply_cors
from app.routes import health_router, v1_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan event handler.

    On startup:
    - Check the price board connection
    - Pull the price board once (fallback prices stay on failure)
    - Start the periodic price sync

    On shutdown:
    - Stop the periodic price sync
    """
    logger.info("=== Sign Configurator Starting ===")

    price_table = get_price_table()
    scheduler = get_price_sync_scheduler()

    if settings.has_monday_token:
        await price_table.check_connection()
        await price_table.refresh()
    else:
        logger.info("MONDAY_API_TOKEN not set, serving fallback prices")

    if settings.price_sync_enabled:
        scheduler.start()
    else:
        logger.info("Price auto-sync disabled (PRICE_SYNC_ENABLED=false)")

    status = price_table.status()
    logger.info(
        "=== Sign Configurator Ready: connected=%s entries=%s designs=%s ===",
        status.is_connected, status.item_count, status.design_count,
    )

    yield

    logger.info("=== Sign Configurator Shutting Down ===")
    scheduler.stop()
    logger.info("Shutdown complete")


app = FastAPI(title="Sign Configurator Pricing Backend", lifespan=lifespan)
logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")

apply_cors(app, settings)

app.include_router(health_router)
app.include_router(v1_router)
