"""
Order service — validation, totals, quotes and the order workflow.

Totals:
1. enabled line total: each enabled sign priced with its own flags
2. additional costs: installation + shipping (express stays on the lines)
3. subtotal = line total + additional costs
4. total = subtotal × (1 + VAT), tax = total - subtotal

Workflow: configuring -> reviewing -> confirmed -> submitted, with the
two back-steps reviewing -> configuring and confirmed -> reviewing.
Editing a confirmed order drops the confirmation again.
Version: 1.0.0
"""
import logging
from typing import Dict, FrozenSet, List, Optional, Tuple

from app.core.constants.catalog import (
    MAX_HEIGHT_CM,
    MAX_SINGLE_PART_HEIGHT_CM,
    MAX_SINGLE_PART_WIDTH_CM,
    MAX_WIDTH_CM,
    MIN_WIDTH_CM,
)
from app.core.constants.pricing import VAT_RATE
from app.core.constants.shipping import LARGE_ITEM_THRESHOLD_CM
from app.core.exceptions import (
    CheckoutNotAllowedError,
    InvalidStateTransitionError,
    ValidationError,
)
from app.schemas.distance import DistanceResult
from app.schemas.orders import (
    CheckoutPayload,
    LinePrice,
    OrderConfiguration,
    OrderQuote,
    OrderStatus,
    OrderTotals,
    SignConfiguration,
)
from app.schemas.pricing import SignOptions
from app.schemas.shipping import ShippingInfo, ShippingSelection
from app.services.design_catalog_service import DesignCatalogService
from app.services.distance_service import DistanceResolver
from app.services.pricing_service import SignPricingCalculator
from app.services.shipping_service import ShippingCalculator, is_valid_postal_code
from app.utils.calc_events import CalculationHook, log_calculation
from app.utils.scaling import calculate_area_m2

ALLOWED_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.CONFIGURING: frozenset({OrderStatus.REVIEWING}),
    OrderStatus.REVIEWING: frozenset({OrderStatus.CONFIGURING, OrderStatus.CONFIRMED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.REVIEWING, OrderStatus.SUBMITTED}),
    OrderStatus.SUBMITTED: frozenset(),
}

NOT_CONFIRMED_REASON = "Order must be confirmed before checkout"


def validate_sign(sign: SignConfiguration) -> List[str]:
    """Size rules for one sign. Messages only; pricing is unaffected."""
    errors: List[str] = []
    label = sign.design.name

    if sign.width < MIN_WIDTH_CM:
        errors.append(f"{label}: width must be at least {MIN_WIDTH_CM} cm")
    elif sign.width > MAX_WIDTH_CM:
        errors.append(f"{label}: width must not exceed {MAX_WIDTH_CM} cm")
    elif sign.width > MAX_SINGLE_PART_WIDTH_CM and not sign.is_multi_part:
        errors.append(
            f"{label}: signs wider than {MAX_SINGLE_PART_WIDTH_CM} cm must be made multi-part"
        )

    if sign.height > MAX_HEIGHT_CM:
        errors.append(f"{label}: height must not exceed {MAX_HEIGHT_CM} cm")
    elif sign.height > MAX_SINGLE_PART_HEIGHT_CM and not sign.is_multi_part:
        errors.append(
            f"{label}: signs taller than {MAX_SINGLE_PART_HEIGHT_CM} cm must be made multi-part"
        )
    return errors


def enabled_signs(order: OrderConfiguration) -> List[SignConfiguration]:
    return [sign for sign in order.signs if sign.is_enabled]


def longest_side_cm(order: OrderConfiguration) -> float:
    """Longest side of the largest enabled sign, 0 for an empty order."""
    return max((max(sign.width, sign.height) for sign in enabled_signs(order)), default=0.0)


def validate_order(order: OrderConfiguration) -> List[str]:
    errors: List[str] = []
    signs = enabled_signs(order)
    if not signs:
        errors.append("Add at least one sign to the order")
    for sign in signs:
        errors.extend(validate_sign(sign))

    if order.postal_code and not is_valid_postal_code(order.postal_code):
        errors.append("Postal code must consist of 5 digits")
    elif not order.postal_code:
        if order.includes_installation:
            errors.append("Installation requires a postal code")
        elif (
            order.shipping_selection != ShippingSelection.PICKUP
            and longest_side_cm(order) >= LARGE_ITEM_THRESHOLD_CM
        ):
            errors.append("Delivery of signs from 240 cm requires a postal code")
    return errors


class OrderService:
    def __init__(
        self,
        calculator: SignPricingCalculator,
        shipping: ShippingCalculator,
        resolver: DistanceResolver,
        catalog: DesignCatalogService,
        on_event: Optional[CalculationHook] = None,
    ) -> None:
        self._calculator = calculator
        self._shipping = shipping
        self._resolver = resolver
        self._catalog = catalog
        self._on_event = on_event or log_calculation
        self._logger = logging.getLogger("order_service")

    # -- Pricing ------------------------------------------------------------

    def price_line(self, sign: SignConfiguration) -> LinePrice:
        price = self._calculator.price_single_sign(
            sign.design,
            sign.width,
            sign.height,
            is_waterproof=sign.is_waterproof,
            is_multi_part=sign.is_multi_part,
            has_uv_print=sign.has_uv_print,
            has_hanging_system=sign.has_hanging_system,
            express_production=sign.express_production,
        )
        return LinePrice(
            sign_id=sign.id,
            design_id=sign.design.id,
            design_name=sign.design.name,
            width=sign.width,
            height=sign.height,
            is_enabled=sign.is_enabled,
            price=round(price, 2),
        )

    def calculate_order_totals(
        self,
        order: OrderConfiguration,
        distance_km: Optional[int] = None,
    ) -> Tuple[List[LinePrice], OrderTotals, Optional[ShippingInfo], Optional[ShippingSelection]]:
        """Synchronous totals over the current price snapshot."""
        lines = [self.price_line(sign) for sign in order.signs]
        signs = enabled_signs(order)
        enabled_line_total = sum(line.price for line in lines if line.is_enabled)

        longest = longest_side_cm(order)
        info: Optional[ShippingInfo] = None
        selection: Optional[ShippingSelection] = None
        shipping_cost = 0.0
        if signs:
            info = self._shipping.shipping_info(longest, distance_km)
            selection = self._shipping.effective_selection(
                longest, order.shipping_selection, order.includes_installation,
            )
            shipping_cost = self._shipping.shipping_cost(info, selection, order.includes_installation)

        installation = 0.0
        if order.includes_installation and signs:
            total_area = sum(calculate_area_m2(sign.width, sign.height) for sign in signs)
            installation = self._shipping.installation_cost(total_area, order.postal_code, distance_km)

        additional_costs = installation + shipping_cost
        subtotal = round(enabled_line_total + additional_costs, 2)
        total = round(subtotal * (1 + VAT_RATE), 2)
        tax = round(total - subtotal, 2)

        totals = OrderTotals(
            enabled_line_total=round(enabled_line_total, 2),
            installation=round(installation, 2),
            shipping=round(shipping_cost, 2),
            additional_costs=round(additional_costs, 2),
            subtotal=subtotal,
            tax=tax,
            total=total,
        )
        self._on_event(
            "order_totals",
            {
                "sign_count": len(order.signs),
                "enabled_count": len(signs),
                "distance_km": distance_km,
                "includes_installation": order.includes_installation,
                "shipping_selection": order.shipping_selection,
            },
            totals.model_dump(),
        )
        return lines, totals, info, selection

    async def resolve_distance(self, order: OrderConfiguration) -> Optional[DistanceResult]:
        if not is_valid_postal_code(order.postal_code):
            return None
        return await self._resolver.resolve(order.postal_code)

    def with_catalog_designs(self, order: OrderConfiguration) -> OrderConfiguration:
        """
        Copy of the order whose signs carry the catalog designs.

        Designs sent along with an order are only references: the id is
        looked up again, so reference sizes, LED length and element count
        always come from the catalog. Raises DesignNotFoundError.
        """
        updated = order.model_copy(deep=True)
        updated.signs = [
            SignConfiguration(
                design=self._catalog.get_design(sign.design.id),
                **sign.model_dump(exclude={"design", "height"}),
            )
            for sign in order.signs
        ]
        return updated

    async def quote_order(self, order: OrderConfiguration) -> OrderQuote:
        order = self.with_catalog_designs(order)
        distance = await self.resolve_distance(order)
        distance_km = distance.distance_km if distance else None
        lines, totals, info, selection = self.calculate_order_totals(order, distance_km)
        errors = validate_order(order)
        return OrderQuote(
            lines=lines,
            totals=totals,
            shipping=info,
            shipping_selection=selection,
            distance=distance,
            longest_side_cm=longest_side_cm(order),
            validation_errors=errors,
            can_checkout=order.confirmed and order.status == OrderStatus.CONFIRMED and not errors,
        )

    # -- Mutations ----------------------------------------------------------

    def _editable(self, order: OrderConfiguration) -> OrderConfiguration:
        if order.status == OrderStatus.SUBMITTED:
            raise InvalidStateTransitionError(order.status.value, OrderStatus.CONFIGURING.value)
        updated = order.model_copy(deep=True)
        if updated.status == OrderStatus.CONFIRMED:
            updated.status = OrderStatus.REVIEWING
        updated.confirmed = False
        return updated

    @staticmethod
    def _find_sign(order: OrderConfiguration, sign_id: str) -> SignConfiguration:
        for sign in order.signs:
            if sign.id == sign_id:
                return sign
        raise ValidationError(f"Sign '{sign_id}' is not part of the order")

    def add_sign(
        self,
        order: OrderConfiguration,
        design_id: str,
        width: Optional[float] = None,
        options: Optional[SignOptions] = None,
    ) -> OrderConfiguration:
        """Append a sign; height follows the design ratio."""
        design = self._catalog.get_design(design_id)
        width = width if width is not None else design.original_width
        if width <= 0:
            raise ValidationError("Width must be positive")
        updated = self._editable(order)
        flags = (options or SignOptions()).model_dump()
        updated.signs.append(SignConfiguration(
            design=design,
            width=width,
            height=self._calculator.height_for(design, width),
            **flags,
        ))
        return updated

    def remove_sign(self, order: OrderConfiguration, sign_id: str) -> OrderConfiguration:
        updated = self._editable(order)
        self._find_sign(updated, sign_id)
        updated.signs = [sign for sign in updated.signs if sign.id != sign_id]
        return updated

    def toggle_sign(self, order: OrderConfiguration, sign_id: str) -> OrderConfiguration:
        updated = self._editable(order)
        sign = self._find_sign(updated, sign_id)
        sign.is_enabled = not sign.is_enabled
        return updated

    def resize_sign(self, order: OrderConfiguration, sign_id: str, width: float) -> OrderConfiguration:
        if width <= 0:
            raise ValidationError("Width must be positive")
        updated = self._editable(order)
        sign = self._find_sign(updated, sign_id)
        sign.width = width
        sign.height = self._calculator.height_for(sign.design, width)
        return updated

    def update_sign_options(
        self, order: OrderConfiguration, sign_id: str, options: SignOptions,
    ) -> OrderConfiguration:
        updated = self._editable(order)
        sign = self._find_sign(updated, sign_id)
        for field, value in options.model_dump().items():
            setattr(sign, field, value)
        return updated

    def set_postal_code(self, order: OrderConfiguration, postal_code: str) -> OrderConfiguration:
        updated = self._editable(order)
        updated.postal_code = (postal_code or "").strip()
        return updated

    def select_shipping(
        self, order: OrderConfiguration, selection: Optional[ShippingSelection],
    ) -> OrderConfiguration:
        """Choosing a shipping option turns installation off."""
        updated = self._editable(order)
        updated.shipping_selection = selection
        if selection is not None:
            updated.includes_installation = False
        return updated

    def set_installation(self, order: OrderConfiguration, includes_installation: bool) -> OrderConfiguration:
        """Installation replaces delivery, so it clears the shipping option."""
        updated = self._editable(order)
        updated.includes_installation = includes_installation
        if includes_installation:
            updated.shipping_selection = None
        return updated

    # -- Workflow -----------------------------------------------------------

    def transition(self, order: OrderConfiguration, target: OrderStatus) -> OrderConfiguration:
        current = order.status
        if target not in ALLOWED_TRANSITIONS[current]:
            raise InvalidStateTransitionError(current.value, target.value)
        if target == OrderStatus.SUBMITTED:
            raise InvalidStateTransitionError(current.value, target.value)

        updated = order.model_copy(deep=True)
        updated.status = target
        updated.confirmed = target == OrderStatus.CONFIRMED
        self._logger.info("order status %s -> %s", current.value, target.value)
        return updated

    async def submit(self, order: OrderConfiguration) -> Tuple[OrderConfiguration, CheckoutPayload]:
        """Confirmed -> submitted; returns the payment hand-off payload."""
        if order.status != OrderStatus.CONFIRMED:
            raise InvalidStateTransitionError(order.status.value, OrderStatus.SUBMITTED.value)

        order = self.with_catalog_designs(order)
        reasons = validate_order(order)
        if not order.confirmed:
            reasons.insert(0, NOT_CONFIRMED_REASON)
        if reasons:
            self._logger.info("checkout rejected reasons=%s", reasons)
            raise CheckoutNotAllowedError(reasons)

        quote = await self.quote_order(order)
        payload = CheckoutPayload(
            line_items=[line for line in quote.lines if line.is_enabled],
            subtotal=quote.totals.subtotal,
            tax=quote.totals.tax,
            total=quote.totals.total,
            shipping_selection=quote.shipping_selection,
            includes_installation=order.includes_installation,
            postal_code=order.postal_code,
        )
        submitted = order.model_copy(deep=True)
        submitted.status = OrderStatus.SUBMITTED
        self._logger.info(
            "order submitted lines=%s total=%s", len(payload.line_items), payload.total,
        )
        return submitted, payload
