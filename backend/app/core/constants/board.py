"""
Price board constants — board column ids and row-to-key mapping tables.

Rows on the price board are matched to logical price keys by item id
first (authoritative) and by display name second.
Version: 1.0.0
"""
from typing import Dict, FrozenSet

# Column ids on the price board
COLUMN_UNIT = "text_mktmnrrm"
COLUMN_PRICE = "numeric_mktmw8n"
COLUMN_PERCENT = "numeric_mktmcycy"
COLUMN_HOURS = "numeric_mktmz717"
COLUMN_PULSE_ID = "pulse_id_mktmzkhz"
COLUMN_WIDTH = "numeric_mkq7ejqj"
COLUMN_HEIGHT = "numeric_mkq7nqpc"
COLUMN_LED_LENGTH = "numeric_mkqq3jcd"
COLUMN_ELEMENTS = "numeric_mkrnkjy6"
COLUMN_ASSET = "file_mkq71vjr"

# Hours column is only meaningful on these two rows
HOURS_ROW_IDS: FrozenSet[str] = frozenset({"2090288932", "2090294337"})

ITEM_ID_TO_KEY: Dict[str, str] = {
    "2090213361": "uv_print",
    "2090249238": "administrative_costs",
    "2090255592": "waterproofing",
    "2090256392": "multi_part",
    "2090288932": "time_per_m2",
    "2090294337": "time_per_element",
    "2090228072": "hourly_wage",
    "2090227751": "assembly",
    "2090242018": "distance_rate",
    "2090232832": "dhl_klein_20cm",
    "2090231734": "dhl_mittel_60cm",
    "2090234197": "dhl_gross_100cm",
    "2090236189": "spedition_120cm",
    "2090240832": "gutertransport_240cm",
    "2090273149": "controller",
    "2091194484": "controller_high_power",
    "2092808058": "hanging_system",
}

ITEM_NAME_TO_KEY: Dict[str, str] = {
    # Base materials
    "Acryl Glass": "acryl_glass",
    "Acrylglas": "acryl_glass",
    "UV Druck": "uv_print",
    "UV-Druck": "uv_print",
    "UV Print": "uv_print",
    "LED": "led",
    "Led": "led",
    "Element": "elements",
    "Elemente": "elements",
    "Montage": "assembly",
    "Assembly": "assembly",
    "Verpackung": "packaging",
    "Packaging": "packaging",
    "Controller": "controller",
    "Steuerung": "controller",
    "Stundenlohn": "hourly_wage",
    "Hourly Wage": "hourly_wage",
    "Lohn": "hourly_wage",
    # Surcharges
    "Wasserdichtigkeit": "waterproofing",
    "Wasserdicht": "waterproofing",
    "Waterproof": "waterproofing",
    "Mehrteilig": "multi_part",
    "Multi Part": "multi_part",
    "Zweiteilig": "multi_part",
    "Verwaltungskosten": "administrative_costs",
    "Verwaltung": "administrative_costs",
    "Admin": "administrative_costs",
    "Administrative Costs": "administrative_costs",
    "Administrative": "administrative_costs",
    "Verwaltungsaufwand": "administrative_costs",
    "Administration": "administrative_costs",
    "Express Herstellung": "express_production",
    "Express Production": "express_production",
    "Express": "express_production",
    "Eilauftrag": "express_production",
    # Transport
    "Kilometer": "distance_rate",
    "Distance Rate": "distance_rate",
    "Entfernung": "distance_rate",
    "Anfahrt": "distance_rate",
    # Power supplies
    "Netzteil USB bis 15W": "power_usb_15w",
    "Power USB 15W": "power_usb_15w",
    "Netzteil 30W": "power_30w",
    "Power 30W": "power_30w",
    "Netzteil 70W": "power_70w",
    "Power 70W": "power_70w",
    "Netzteil 120W": "power_120w",
    "Power 120W": "power_120w",
    "Netzteil 200W": "power_200w",
    "Power 200W": "power_200w",
    "Netzteil 250W": "power_250w",
    "Power 250W": "power_250w",
    "Netzteil 300W": "power_300w",
    "Power 300W": "power_300w",
    "Netzteil 400W": "power_400w",
    "Power 400W": "power_400w",
    "Netzteil 1000W": "power_1000w",
    "Power 1000W": "power_1000w",
    # Shipping
    "DHL Klein Packet": "dhl_klein_20cm",
    "DHL Klein": "dhl_klein_20cm",
    "DHL mittlere Packet": "dhl_mittel_60cm",
    "DHL Mittel": "dhl_mittel_60cm",
    "DHL Große Packet": "dhl_gross_100cm",
    "DHL Groß": "dhl_gross_100cm",
    "Spedition ab 120cm": "spedition_120cm",
    "Spedition": "spedition_120cm",
    "Gütertransport (palettiert) ab 240cm": "gutertransport_240cm",
    "Gütertransport": "gutertransport_240cm",
    # Hanging system
    "Hängesystem": "hanging_system",
    "Hanging System": "hanging_system",
    "Aufhängung": "hanging_system",
}

# Max rows fetched per board query
BOARD_PAGE_LIMIT: int = 100
