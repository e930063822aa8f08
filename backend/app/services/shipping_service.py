"""
Shipping service — delivery tiers and on-site installation pricing.

Delivery is tiered by the longest side of the largest sign. From 240 cm
on the distance decides: local delivery (round trip per km) up to 300 km,
palletized freight beyond. Installation is priced by area plus distance
and replaces delivery entirely.
Version: 1.0.0
"""
import re
from typing import Optional

from app.core.constants.shipping import (
    LARGE_ITEM_THRESHOLD_CM,
    LOCAL_DELIVERY_DAYS,
    LOCAL_DELIVERY_MAX_KM,
    PALLET_DAYS,
    PARCEL_DAYS,
    PARCEL_TIERS,
)
from app.schemas.shipping import ShippingInfo, ShippingMethod, ShippingSelection
from app.services.price_table_service import PriceTableService
from app.utils.calc_events import CalculationHook, log_calculation

POSTAL_CODE_PATTERN = re.compile(r"^\d{5}$")


def is_valid_postal_code(postal_code: Optional[str]) -> bool:
    return bool(postal_code) and bool(POSTAL_CODE_PATTERN.match(postal_code))


class ShippingCalculator:
    def __init__(self, price_table: PriceTableService, on_event: Optional[CalculationHook] = None) -> None:
        self._prices = price_table
        self._on_event = on_event or log_calculation

    def shipping_info(self, longest_side_cm: float, distance_km: Optional[int] = None) -> ShippingInfo:
        info = self._shipping_info(longest_side_cm, distance_km)
        self._on_event(
            "shipping_info",
            {"longest_side_cm": longest_side_cm, "distance_km": distance_km},
            {"method": info.method.value, "cost": info.cost, "requires_postal_code": info.requires_postal_code},
        )
        return info

    def _shipping_info(self, longest_side_cm: float, distance_km: Optional[int]) -> ShippingInfo:
        for upper_bound, method, price_key, description in PARCEL_TIERS:
            if longest_side_cm < upper_bound:
                return ShippingInfo(
                    method=ShippingMethod(method),
                    cost=self._prices.price(price_key),
                    description=description,
                    days=PARCEL_DAYS,
                )

        if distance_km is None:
            return ShippingInfo(
                method=ShippingMethod.POSTAL_CODE_REQUIRED,
                cost=0.0,
                description="Enter a postal code to calculate delivery",
                requires_postal_code=True,
            )

        if distance_km > LOCAL_DELIVERY_MAX_KM:
            return ShippingInfo(
                method=ShippingMethod.PALLETIZED_FREIGHT,
                cost=self._prices.price("gutertransport_240cm"),
                description=f"Palletized freight (over {LOCAL_DELIVERY_MAX_KM} km)",
                days=PALLET_DAYS,
            )

        # Round trip
        cost = round(distance_km * self._prices.distance_rate() * 2, 2)
        return ShippingInfo(
            method=ShippingMethod.LOCAL_DELIVERY,
            cost=cost,
            description=f"Local delivery ({distance_km} km)",
            days=LOCAL_DELIVERY_DAYS,
        )

    @staticmethod
    def effective_selection(
        longest_side_cm: float,
        requested: Optional[ShippingSelection],
        includes_installation: bool,
    ) -> Optional[ShippingSelection]:
        """Installation clears any selection; otherwise pickup stays, delivery follows size."""
        if includes_installation:
            return None
        if requested == ShippingSelection.PICKUP:
            return ShippingSelection.PICKUP
        if longest_side_cm >= LARGE_ITEM_THRESHOLD_CM:
            return ShippingSelection.PERSONAL
        return ShippingSelection.CARRIER

    @staticmethod
    def shipping_cost(
        info: ShippingInfo,
        selection: Optional[ShippingSelection],
        includes_installation: bool,
    ) -> float:
        if includes_installation or selection == ShippingSelection.PICKUP:
            return 0.0
        return info.cost

    def installation_cost(
        self,
        total_area_m2: float,
        postal_code: Optional[str],
        distance_km: Optional[int],
    ) -> float:
        """assembly €/m² × area + €/km × distance; 0 without a valid postal code."""
        if not is_valid_postal_code(postal_code) or distance_km is None:
            return 0.0
        cost = self._prices.assembly_price() * total_area_m2 + self._prices.distance_rate() * distance_km
        self._on_event(
            "installation_cost",
            {"total_area_m2": total_area_m2, "postal_code": postal_code, "distance_km": distance_km},
            {"installation": round(cost, 2)},
        )
        return cost
