"""
Lazy DI container — singleton access to clients, stores, and services.

Every calculator receives the one shared PriceTableService, so a refresh
is visible to all of them at once. Routes take these getters through
``Depends`` which lets tests swap in fixtures with dependency overrides.
Version: 1.0.0
"""

from functools import lru_cache

from app.core.config import settings
from app.clients.geocoding_client import GeocodingClient
from app.clients.monday_client import MondayClient
from app.clients.routing_client import RoutingClient
from app.db.order_store import OrderStore
from app.services.design_catalog_service import DesignCatalogService
from app.services.distance_service import (
    DistanceResolver,
    GeocodedDistanceStrategy,
    RoutingDistanceStrategy,
    StaticRegionDistanceStrategy,
)
from app.services.order_service import OrderService
from app.services.price_table_service import PriceSyncScheduler, PriceTableService
from app.services.pricing_service import SignPricingCalculator
from app.services.shipping_service import ShippingCalculator


# -- Clients ---------------------------------------------------------------

@lru_cache(maxsize=1)
def get_monday_client():
    return MondayClient(settings)


@lru_cache(maxsize=1)
def get_geocoding_client():
    return GeocodingClient(settings)


@lru_cache(maxsize=1)
def get_routing_client():
    return RoutingClient(settings)


# -- DB Stores -------------------------------------------------------------

@lru_cache(maxsize=1)
def get_order_store():
    return OrderStore(settings=settings)


# -- Price table -----------------------------------------------------------

@lru_cache(maxsize=1)
def get_price_table():
    return PriceTableService(get_monday_client())


@lru_cache(maxsize=1)
def get_price_sync_scheduler():
    return PriceSyncScheduler(get_price_table(), settings.price_sync_interval_seconds)


# -- Calculators -----------------------------------------------------------

@lru_cache(maxsize=1)
def get_distance_resolver():
    geocoder = get_geocoding_client()
    return DistanceResolver(
        strategies=[
            RoutingDistanceStrategy(
                geocoder,
                get_routing_client(),
                timeout_seconds=settings.geocoding_timeout_seconds + settings.routing_timeout_seconds,
            ),
            GeocodedDistanceStrategy(geocoder, timeout_seconds=settings.geocoding_timeout_seconds),
            StaticRegionDistanceStrategy(),
        ],
        origin_postal_code=settings.origin_postal_code,
    )


@lru_cache(maxsize=1)
def get_design_catalog():
    return DesignCatalogService(get_price_table())


@lru_cache(maxsize=1)
def get_pricing_calculator():
    return SignPricingCalculator(get_price_table())


@lru_cache(maxsize=1)
def get_shipping_calculator():
    return ShippingCalculator(get_price_table())


@lru_cache(maxsize=1)
def get_order_service():
    return OrderService(
        calculator=get_pricing_calculator(),
        shipping=get_shipping_calculator(),
        resolver=get_distance_resolver(),
        catalog=get_design_catalog(),
    )
