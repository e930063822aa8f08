"""
Pytest configuration and shared fixtures for the sign configurator tests.

Provides a fallback-only price table, calculators wired to it, a
network-free distance resolver, an in-memory Redis double and sample
designs/orders.
Version: 1.0.0
"""
import os

# Settings read the environment at import time: no board token and no
# background sync for the whole test session.
os.environ["MONDAY_API_TOKEN"] = ""
os.environ["PRICE_SYNC_ENABLED"] = "false"

import pytest
from unittest.mock import AsyncMock, MagicMock

from fastapi.testclient import TestClient

from app.core.config import Settings
from app.db.order_store import OrderStore
from app.schemas.designs import Design
from app.schemas.orders import OrderConfiguration, SignConfiguration
from app.services.design_catalog_service import DesignCatalogService
from app.services.distance_service import DistanceResolver, StaticRegionDistanceStrategy
from app.services.order_service import OrderService
from app.services.price_table_service import PriceTableService
from app.services.pricing_service import SignPricingCalculator
from app.services.shipping_service import ShippingCalculator


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_settings():
    """Settings object with test defaults (no real endpoints)."""
    return Settings(
        monday_api_url="https://monday.test/v2",
        monday_api_token="test-monday-token",
        monday_api_version="2023-10",
        monday_board_id="123456",
        monday_timeout_seconds=5,
        geocoding_url="https://geocoder.test/search",
        routing_url="https://router.test/route/v1/driving",
        redis_url="redis://localhost:6379/15",
        order_ttl_seconds=3600,
    )


# ---------------------------------------------------------------------------
# Clients (mocked)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_monday_client():
    """Mocked MondayClient with a token configured."""
    client = MagicMock()
    client.has_token = True
    client.board_id = "123456"
    client.fetch_board_items = AsyncMock(return_value=[])
    client.check_connection = AsyncMock(return_value="Preise")
    return client


@pytest.fixture
def tokenless_monday_client():
    """Mocked MondayClient without a token."""
    client = MagicMock()
    client.has_token = False
    client.fetch_board_items = AsyncMock(return_value=[])
    client.check_connection = AsyncMock(return_value="")
    return client


@pytest.fixture
def fake_redis():
    """Redis double backed by a dict (get/set/delete only)."""
    data = {}
    client = MagicMock()
    client.set.side_effect = lambda key, value, ex=None: data.__setitem__(key, value) or True
    client.get.side_effect = lambda key: data.get(key)
    client.delete.side_effect = lambda key: 1 if data.pop(key, None) is not None else 0
    client.data = data
    return client


# ---------------------------------------------------------------------------
# Services wired to fallback prices
# ---------------------------------------------------------------------------

@pytest.fixture
def events():
    """Captured calculation events as (event, inputs, outputs) tuples."""
    return []


@pytest.fixture
def on_event(events):
    def _hook(event, inputs, outputs):
        events.append((event, inputs, outputs))
    return _hook


@pytest.fixture
def price_table(tokenless_monday_client):
    """Price table holding only the fallback prices."""
    return PriceTableService(tokenless_monday_client)


@pytest.fixture
def calculator(price_table, on_event):
    return SignPricingCalculator(price_table, on_event=on_event)


@pytest.fixture
def shipping_calculator(price_table, on_event):
    return ShippingCalculator(price_table, on_event=on_event)


@pytest.fixture
def static_resolver():
    """Resolver limited to the static region tier (no network)."""
    return DistanceResolver([StaticRegionDistanceStrategy()], origin_postal_code="67433")


@pytest.fixture
def catalog(price_table):
    return DesignCatalogService(price_table)


@pytest.fixture
def order_service(calculator, shipping_calculator, static_resolver, catalog, on_event):
    return OrderService(
        calculator=calculator,
        shipping=shipping_calculator,
        resolver=static_resolver,
        catalog=catalog,
        on_event=on_event,
    )


@pytest.fixture
def order_store(fake_redis, mock_settings):
    return OrderStore(redis_client=fake_redis, settings=mock_settings)


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_design():
    """400 x 200 cm reference, 12 m LED, 5 elements."""
    return Design(
        id="design-1",
        name="Classic Business Logo",
        original_width=400,
        original_height=200,
        led_length=12,
        elements=5,
    )


@pytest.fixture
def small_design():
    return Design(
        id="design-5",
        name="Minimalist Icon",
        original_width=150,
        original_height=150,
        led_length=8,
        elements=3,
    )


@pytest.fixture
def sample_order(sample_design, small_design):
    """Two enabled signs (200x100 and 50x50) and one disabled sign."""
    return OrderConfiguration(
        signs=[
            SignConfiguration(id="sign-a", design=sample_design, width=200, height=100),
            SignConfiguration(
                id="sign-b", design=small_design, width=50, height=50, is_waterproof=True,
            ),
            SignConfiguration(
                id="sign-c", design=sample_design, width=100, height=50, is_enabled=False,
            ),
        ],
    )


@pytest.fixture
def board_row():
    """Factory for board rows in the shape the Monday client returns."""
    def _make(row_id, name, **columns):
        return {
            "id": row_id,
            "name": name,
            "column_values": [
                {"id": column_id, "text": text, "value": None}
                for column_id, text in columns.items()
            ],
        }
    return _make


# ---------------------------------------------------------------------------
# FastAPI test client
# ---------------------------------------------------------------------------

@pytest.fixture
def client(price_table, catalog, calculator, shipping_calculator, static_resolver,
           order_service, order_store):
    """Test client with every service dependency swapped for a fixture."""
    from app import container
    from app.main import app

    app.dependency_overrides = {
        container.get_price_table: lambda: price_table,
        container.get_design_catalog: lambda: catalog,
        container.get_pricing_calculator: lambda: calculator,
        container.get_shipping_calculator: lambda: shipping_calculator,
        container.get_distance_resolver: lambda: static_resolver,
        container.get_order_service: lambda: order_service,
        container.get_order_store: lambda: order_store,
    }
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides = {}
