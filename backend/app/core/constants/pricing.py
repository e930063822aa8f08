"""
Pricing constants — fallback price table, power tiers, VAT.

Every pricing rule that is not read from the price board lives here.
The fallback table seeds the price cache at startup and is what every
calculation uses while the board is unreachable.
Version: 1.0.0
"""
from typing import Dict, List, Tuple

# Entry kinds (see app.schemas.prices)
KIND_PRICE = "price"
KIND_PERCENT = "percent"
KIND_HOURS = "hours"

# logical key -> (kind, value, unit)
FALLBACK_PRICES: Dict[str, Tuple[str, float, str]] = {
    # Base materials
    "acryl_glass": (KIND_PRICE, 58.46, "€/m²"),
    "uv_print": (KIND_PRICE, 36.22, "€/m²"),
    "led": (KIND_PRICE, 2.50, "€/m"),
    "elements": (KIND_PRICE, 2.00, "€/piece"),
    "assembly": (KIND_PRICE, 150.00, "€/m²"),
    "packaging": (KIND_PRICE, 30.00, "€/m²"),
    "controller": (KIND_PRICE, 20.00, "€/piece"),
    "controller_high_power": (KIND_PRICE, 50.00, "€/piece"),
    # Labor
    "hourly_wage": (KIND_PRICE, 25.00, "€/h"),
    "time_per_m2": (KIND_HOURS, 3.0, "h/m²"),
    "time_per_element": (KIND_HOURS, 0.1, "h/element"),
    # Surcharges (percent of base subtotal)
    "waterproofing": (KIND_PERCENT, 25.0, "%"),
    "multi_part": (KIND_PERCENT, 15.0, "%"),
    "administrative_costs": (KIND_PERCENT, 20.0, "%"),
    "express_production": (KIND_PERCENT, 30.0, "%"),
    # Transport
    "distance_rate": (KIND_PRICE, 1.50, "€/km"),
    # Power supplies
    "power_usb_15w": (KIND_PRICE, 5.00, "€"),
    "power_30w": (KIND_PRICE, 8.00, "€"),
    "power_70w": (KIND_PRICE, 15.00, "€"),
    "power_120w": (KIND_PRICE, 20.00, "€"),
    "power_200w": (KIND_PRICE, 30.00, "€"),
    "power_250w": (KIND_PRICE, 40.00, "€"),
    "power_300w": (KIND_PRICE, 50.00, "€"),
    "power_400w": (KIND_PRICE, 70.00, "€"),
    "power_1000w": (KIND_PRICE, 200.00, "€"),
    # Shipping
    "dhl_klein_20cm": (KIND_PRICE, 20.00, "€"),
    "dhl_mittel_60cm": (KIND_PRICE, 40.00, "€"),
    "dhl_gross_100cm": (KIND_PRICE, 80.00, "€"),
    "spedition_120cm": (KIND_PRICE, 160.00, "€"),
    "gutertransport_240cm": (KIND_PRICE, 500.00, "€"),
    # Add-ons
    "hanging_system": (KIND_PRICE, 15.00, "€"),
}

# Power supply selection: (max watt inclusive, price key). Anything above the
# last ceiling gets POWER_SUPPLY_TOP_KEY.
POWER_SUPPLY_TIERS: List[Tuple[int, str]] = [
    (15, "power_usb_15w"),
    (30, "power_30w"),
    (70, "power_70w"),
    (120, "power_120w"),
    (200, "power_200w"),
    (250, "power_250w"),
    (300, "power_300w"),
    (400, "power_400w"),
]
POWER_SUPPLY_TOP_KEY: str = "power_1000w"

# Standard controller handles up to this wattage (inclusive)
CONTROLLER_MAX_STANDARD_WATT: int = 80

# LED strip power draw and safety margin
LED_WATT_PER_METER: float = 8.0
POWER_SAFETY_FACTOR: float = 1.25

# Shortest LED run we ever build (meters)
MIN_LED_LENGTH_M: float = 1.0

# German VAT
VAT_RATE: float = 0.19

DEFAULT_CURRENCY: str = "EUR"
