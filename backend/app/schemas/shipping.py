"""
Shipping schemas — shipping methods, customer selection and quotes.
Version: 1.0.0
"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ShippingMethod(str, Enum):
    SMALL_PARCEL = "small_parcel"
    MEDIUM_PARCEL = "medium_parcel"
    LARGE_PARCEL = "large_parcel"
    FREIGHT_CARRIER = "freight_carrier"
    POSTAL_CODE_REQUIRED = "postal_code_required"
    LOCAL_DELIVERY = "local_delivery"
    PALLETIZED_FREIGHT = "palletized_freight"


class ShippingSelection(str, Enum):
    """What the customer picked. Carrier vs. personal follows the sign size."""
    PICKUP = "pickup"
    CARRIER = "carrier"
    PERSONAL = "personal"


class ShippingInfo(BaseModel):
    method: ShippingMethod
    cost: float = 0.0
    description: str = ""
    days: str = ""
    requires_postal_code: bool = False


class ShippingQuoteRequest(BaseModel):
    longest_side_cm: float = Field(..., ge=0)
    postal_code: Optional[str] = None


class ShippingQuoteResponse(BaseModel):
    shipping: ShippingInfo
    distance_km: Optional[int] = None
    place_name: Optional[str] = None
