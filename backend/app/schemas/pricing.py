"""
Pricing schemas — single-sign price requests and component breakdown.
Version: 1.0.0
"""
from typing import Optional

from pydantic import BaseModel, Field


class SignOptions(BaseModel):
    """Per-sign option flags."""
    is_waterproof: bool = False
    is_multi_part: bool = False
    has_uv_print: bool = True
    has_hanging_system: bool = False
    express_production: bool = False


class SignPriceRequest(SignOptions):
    design_id: str
    width: float = Field(..., gt=0, description="Requested width in cm")
    height: Optional[float] = Field(
        None,
        description="Ignored when set; height always follows the design ratio",
    )


class SignPriceBreakdown(BaseModel):
    width: float
    height: float
    area_m2: float
    led_length_m: float
    power_watt: int

    acrylic: float
    uv_print: float
    led: float
    elements: float
    packaging: float
    controller: float
    power_supply: float
    labor: float
    hanging_system: float
    base_subtotal: float

    waterproof_surcharge: float
    multi_part_surcharge: float
    express_surcharge: float
    admin_costs: float

    total: float
