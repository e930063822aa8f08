"""
Constants package — re-exports from domain-specific modules.

Centralized business constants for the sign configurator.

Usage:
    from app.core.constants.pricing import FALLBACK_PRICES
    from app.core.constants.board import ITEM_ID_TO_KEY
    # or import everything:
    from app.core.constants import pricing, board, shipping, geo, catalog
Version: 1.0.0
"""

from app.core.constants import pricing, board, shipping, geo, catalog
from app.core.constants.pricing import (
    FALLBACK_PRICES,
    POWER_SUPPLY_TIERS,
    POWER_SUPPLY_TOP_KEY,
    CONTROLLER_MAX_STANDARD_WATT,
    VAT_RATE,
    DEFAULT_CURRENCY,
)
from app.core.constants.board import (
    ITEM_ID_TO_KEY,
    ITEM_NAME_TO_KEY,
    HOURS_ROW_IDS,
)
from app.core.constants.shipping import (
    PARCEL_TIERS,
    LARGE_ITEM_THRESHOLD_CM,
    LOCAL_DELIVERY_MAX_KM,
)
from app.core.constants.geo import (
    POSTAL_REGIONS,
    EXACT_PLACE_NAMES,
    KNOWN_CITIES,
)
from app.core.constants.catalog import (
    STATIC_DESIGNS,
    MIN_WIDTH_CM,
    MAX_WIDTH_CM,
    MAX_SINGLE_PART_WIDTH_CM,
    MAX_SINGLE_PART_HEIGHT_CM,
    MAX_HEIGHT_CM,
)

__all__ = [
    "pricing",
    "board",
    "shipping",
    "geo",
    "catalog",
    "FALLBACK_PRICES",
    "POWER_SUPPLY_TIERS",
    "POWER_SUPPLY_TOP_KEY",
    "CONTROLLER_MAX_STANDARD_WATT",
    "VAT_RATE",
    "DEFAULT_CURRENCY",
    "ITEM_ID_TO_KEY",
    "ITEM_NAME_TO_KEY",
    "HOURS_ROW_IDS",
    "PARCEL_TIERS",
    "LARGE_ITEM_THRESHOLD_CM",
    "LOCAL_DELIVERY_MAX_KM",
    "POSTAL_REGIONS",
    "EXACT_PLACE_NAMES",
    "KNOWN_CITIES",
    "STATIC_DESIGNS",
    "MIN_WIDTH_CM",
    "MAX_WIDTH_CM",
    "MAX_SINGLE_PART_WIDTH_CM",
    "MAX_SINGLE_PART_HEIGHT_CM",
    "MAX_HEIGHT_CM",
]
