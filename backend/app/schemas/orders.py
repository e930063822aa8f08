"""
Order schemas — sign line items, order state, totals and checkout payload.

The order is the flat JSON object persisted between page loads.
Version: 1.0.0
"""
import uuid
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from app.schemas.designs import Design
from app.schemas.distance import DistanceResult
from app.schemas.pricing import SignOptions
from app.schemas.shipping import ShippingInfo, ShippingSelection
from app.utils.scaling import proportional_height


class OrderStatus(str, Enum):
    CONFIGURING = "configuring"
    REVIEWING = "reviewing"
    CONFIRMED = "confirmed"
    SUBMITTED = "submitted"


class SignConfiguration(BaseModel):
    """One configured sign in an order. Several may share a design."""
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    design: Design
    width: float = Field(..., gt=0)
    height: float = Field(0, ge=0, description="Derived from width and the design ratio")
    is_enabled: bool = True
    is_waterproof: bool = False
    is_multi_part: bool = False
    has_uv_print: bool = True
    has_hanging_system: bool = False
    express_production: bool = False

    @model_validator(mode='after')
    def derive_height(self) -> "SignConfiguration":
        """A height sent by the client is replaced, never trusted."""
        self.height = proportional_height(
            self.design.original_width, self.design.original_height, self.width,
        )
        return self


class OrderConfiguration(BaseModel):
    signs: List[SignConfiguration] = []
    postal_code: str = ""
    shipping_selection: Optional[ShippingSelection] = None
    includes_installation: bool = False
    confirmed: bool = False
    status: OrderStatus = OrderStatus.CONFIGURING


class LinePrice(BaseModel):
    sign_id: str
    design_id: str
    design_name: str
    width: float
    height: float
    is_enabled: bool
    price: float


class OrderTotals(BaseModel):
    enabled_line_total: float
    installation: float
    shipping: float
    additional_costs: float
    subtotal: float
    tax: float
    total: float


class OrderQuote(BaseModel):
    lines: List[LinePrice]
    totals: OrderTotals
    shipping: Optional[ShippingInfo] = None
    shipping_selection: Optional[ShippingSelection] = None
    distance: Optional[DistanceResult] = None
    longest_side_cm: float = 0.0
    validation_errors: List[str] = []
    can_checkout: bool = False


class CheckoutPayload(BaseModel):
    """Hand-off to the payment collaborator."""
    line_items: List[LinePrice]
    subtotal: float
    tax: float
    total: float
    shipping_selection: Optional[ShippingSelection] = None
    includes_installation: bool
    postal_code: str


class StatusChangeRequest(BaseModel):
    status: OrderStatus


class CheckoutResponse(BaseModel):
    order: OrderConfiguration
    checkout: CheckoutPayload


class StoredOrderResponse(BaseModel):
    session_id: str
    order: OrderConfiguration
    quote: OrderQuote


class AddSignRequest(SignOptions):
    design_id: str
    width: Optional[float] = Field(None, gt=0, description="Defaults to the design width")


class SignUpdateRequest(BaseModel):
    """Partial update of one sign; omitted fields stay as they are."""
    width: Optional[float] = Field(None, gt=0)
    is_enabled: Optional[bool] = None
    options: Optional[SignOptions] = None


class DeliveryUpdateRequest(BaseModel):
    postal_code: Optional[str] = None
    shipping_selection: Optional[ShippingSelection] = None
    includes_installation: Optional[bool] = None
