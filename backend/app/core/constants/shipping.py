"""
Shipping constants — parcel tiers by longest side, large-item thresholds.

Version: 1.0.0
"""
from typing import List, Tuple

# (longest side upper bound in cm, exclusive; method; price key; description)
PARCEL_TIERS: List[Tuple[int, str, str, str]] = [
    (60, "small_parcel", "dhl_klein_20cm", "DHL small parcel (up to 59 cm)"),
    (100, "medium_parcel", "dhl_mittel_60cm", "DHL medium parcel (60-99 cm)"),
    (120, "large_parcel", "dhl_gross_100cm", "DHL large parcel (100-119 cm)"),
    (240, "freight_carrier", "spedition_120cm", "Freight carrier (120-239 cm)"),
]

# Signs with a longest side from here on are delivered by us or palletized
LARGE_ITEM_THRESHOLD_CM: int = 240

# Up to this distance we deliver large items ourselves (inclusive)
LOCAL_DELIVERY_MAX_KM: int = 300

PARCEL_DAYS: str = "1-3 days"
LOCAL_DELIVERY_DAYS: str = "1-2 days"
PALLET_DAYS: str = "3-5 days"
