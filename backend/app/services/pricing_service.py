"""
Pricing service — price a single configured sign.

Order of operations:
1. area, scaled LED length, power draw
2. base subtotal: materials, controller, power supply, labor, add-ons
3. surcharges, each a percentage of the base subtotal (never of each other):
   waterproof, multi-part, express (flag-gated) and admin costs (always)
4. total = base subtotal + surcharges
Version: 1.0.0
"""
from typing import Optional

from app.schemas.designs import Design
from app.schemas.pricing import SignPriceBreakdown
from app.services.price_table_service import PriceTableService
from app.utils.calc_events import CalculationHook, log_calculation
from app.utils.scaling import (
    calculate_area_m2,
    power_from_led_length,
    proportional_height,
    proportional_led_length,
)


class SignPricingCalculator:
    def __init__(self, price_table: PriceTableService, on_event: Optional[CalculationHook] = None) -> None:
        self._prices = price_table
        self._on_event = on_event or log_calculation

    def height_for(self, design: Design, width: float) -> int:
        return proportional_height(design.original_width, design.original_height, width)

    def breakdown(
        self,
        design: Design,
        width: float,
        height: float,
        is_waterproof: bool = False,
        is_multi_part: bool = False,
        has_uv_print: bool = True,
        has_hanging_system: bool = False,
        express_production: bool = False,
    ) -> SignPriceBreakdown:
        prices = self._prices

        area = calculate_area_m2(width, height)
        led_length = proportional_led_length(
            design.original_width, design.original_height, design.led_length, width, height,
        )
        power = power_from_led_length(led_length)

        acrylic = area * prices.acrylic_price()
        uv_print = area * prices.uv_print_price() if has_uv_print else 0.0
        led = led_length * prices.led_price()
        elements = design.elements * prices.element_price()
        packaging = area * prices.packaging_price()
        controller = prices.controller_price_for_watt(power)
        power_supply = prices.power_supply_price(power)
        labor = prices.labor_cost(area, design.elements)
        hanging_system = prices.hanging_system_price() if has_hanging_system else 0.0

        base = (
            acrylic + uv_print + led + elements + packaging
            + controller + power_supply + labor + hanging_system
        )

        waterproof_surcharge = base * prices.waterproof_rate() if is_waterproof else 0.0
        multi_part_surcharge = base * prices.multi_part_rate() if is_multi_part else 0.0
        express_surcharge = base * prices.express_rate() if express_production else 0.0
        admin_costs = base * prices.admin_rate()

        total = base + waterproof_surcharge + multi_part_surcharge + express_surcharge + admin_costs

        result = SignPriceBreakdown(
            width=width,
            height=height,
            area_m2=area,
            led_length_m=led_length,
            power_watt=power,
            acrylic=acrylic,
            uv_print=uv_print,
            led=led,
            elements=elements,
            packaging=packaging,
            controller=controller,
            power_supply=power_supply,
            labor=labor,
            hanging_system=hanging_system,
            base_subtotal=base,
            waterproof_surcharge=waterproof_surcharge,
            multi_part_surcharge=multi_part_surcharge,
            express_surcharge=express_surcharge,
            admin_costs=admin_costs,
            total=total,
        )
        self._on_event(
            "sign_price",
            {
                "design_id": design.id,
                "width": width,
                "height": height,
                "is_waterproof": is_waterproof,
                "is_multi_part": is_multi_part,
                "has_uv_print": has_uv_print,
                "has_hanging_system": has_hanging_system,
                "express_production": express_production,
            },
            {
                "led_length_m": led_length,
                "power_watt": power,
                "base_subtotal": round(base, 2),
                "total": round(total, 2),
            },
        )
        return result

    def price_single_sign(
        self,
        design: Design,
        width: float,
        height: float,
        is_waterproof: bool = False,
        is_multi_part: bool = False,
        has_uv_print: bool = True,
        has_hanging_system: bool = False,
        express_production: bool = False,
    ) -> float:
        return self.breakdown(
            design,
            width,
            height,
            is_waterproof=is_waterproof,
            is_multi_part=is_multi_part,
            has_uv_print=has_uv_print,
            has_hanging_system=has_hanging_system,
            express_production=express_production,
        ).total
