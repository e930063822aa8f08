"""
Price table service — fallback-seeded price cache refreshed from the board.

The cache starts with the fixed fallback table and is overlaid with
board values whenever a refresh succeeds. A refresh builds a complete new
mapping and swaps it in with a single assignment, so readers always see
either the old or the new snapshot. Any failure leaves the current
snapshot untouched and is reported through ``status()``, never raised.
Version: 1.0.0
"""
import asyncio
import logging
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from app.clients.monday_client import MondayClient
from app.core.constants.pricing import (
    CONTROLLER_MAX_STANDARD_WATT,
    FALLBACK_PRICES,
    KIND_HOURS,
    KIND_PERCENT,
    POWER_SUPPLY_TIERS,
    POWER_SUPPLY_TOP_KEY,
)
from app.core.exceptions import AuthenticationError, ConnectionTimeoutError, ExternalAPIError
from app.schemas.designs import Design
from app.schemas.prices import (
    LaborFactor,
    Percentage,
    PriceEntry,
    PriceTableStatus,
    UnitPrice,
)
from app.utils.board_normalize import (
    has_design_fields,
    parse_board_row,
    resolve_price_key,
    to_design,
    to_price_entry,
)

NO_TOKEN_ERROR = "No API token configured"


def build_fallback_entries() -> Dict[str, PriceEntry]:
    """Fresh price entries for every key of the fallback table."""
    entries: Dict[str, PriceEntry] = {}
    for key, (kind, value, unit) in FALLBACK_PRICES.items():
        if kind == KIND_PERCENT:
            entries[key] = Percentage(percent=value, unit=unit, source_id=f"fallback-{key}")
        elif kind == KIND_HOURS:
            entries[key] = LaborFactor(hours=value, unit=unit, source_id=f"fallback-{key}")
        else:
            entries[key] = UnitPrice(price=value, unit=unit, source_id=f"fallback-{key}")
    return entries


def _now() -> datetime:
    return datetime.now(timezone.utc)


class PriceTableService:
    def __init__(self, client: MondayClient) -> None:
        self._client = client
        self._logger = logging.getLogger("price_table")

        self._entries: Mapping[str, PriceEntry] = MappingProxyType(build_fallback_entries())
        self._designs: Mapping[str, Design] = MappingProxyType({})

        self._is_connected = False
        self._last_sync: Optional[datetime] = None
        self._last_attempt: Optional[datetime] = None
        self._last_error: Optional[str] = None if client.has_token else NO_TOKEN_ERROR
        self._error_count = 0
        self.auto_sync_active = False

        self._logger.info("price table seeded with %s fallback entries", len(self._entries))

    # -- Sync ---------------------------------------------------------------

    def _record_failure(self, reason: str) -> None:
        self._is_connected = False
        self._last_error = reason
        self._error_count += 1
        self._last_sync = _now()
        self._logger.warning("price sync failed reason=%s error_count=%s", reason, self._error_count)

    async def refresh(self) -> bool:
        """
        Pull all board rows and overlay them on the current snapshot.

        Returns True when the board delivered data, False when the
        existing snapshot was kept.
        """
        self._last_attempt = _now()

        if not self._client.has_token:
            self._is_connected = False
            self._last_error = NO_TOKEN_ERROR
            self._last_sync = _now()
            self._logger.info("price sync skipped: no API token, using fallback prices")
            return False

        try:
            rows = await self._client.fetch_board_items()
        except (ExternalAPIError, ConnectionTimeoutError, AuthenticationError) as exc:
            self._record_failure(getattr(exc, "reason", None) or str(exc))
            return False
        except Exception as exc:
            self._record_failure(f"Unexpected response: {exc}")
            return False

        if not rows:
            self._record_failure("No items received from board")
            return False

        entries = dict(self._entries)
        designs = dict(self._designs)
        mapped = 0

        for row in rows:
            try:
                parsed = parse_board_row(row)
            except (AttributeError, TypeError, ValueError) as exc:
                self._logger.warning("board row skipped row=%s error=%s", row, exc)
                continue

            key = resolve_price_key(parsed["id"], parsed["name"])
            if key:
                entry = to_price_entry(key, parsed)
                if entry is not None:
                    entries[key] = entry
                    mapped += 1
                else:
                    self._logger.info(
                        "board row id=%s key=%s has no usable value, keeping previous",
                        parsed["id"], key,
                    )

            if has_design_fields(parsed):
                design = to_design(parsed)
                if design is not None:
                    designs[design.id] = design

        self._entries = MappingProxyType(entries)
        self._designs = MappingProxyType(designs)
        self._is_connected = True
        self._last_error = None
        self._error_count = 0
        self._last_sync = _now()

        self._logger.info(
            "price sync ok rows=%s mapped=%s entries=%s designs=%s",
            len(rows), mapped, len(entries), len(designs),
        )
        return True

    async def check_connection(self) -> bool:
        """Lightweight board query; updates connection state only."""
        if not self._client.has_token:
            self._is_connected = False
            self._last_error = NO_TOKEN_ERROR
            return False
        try:
            board_name = await self._client.check_connection()
        except (ExternalAPIError, ConnectionTimeoutError, AuthenticationError) as exc:
            self._is_connected = False
            self._last_error = getattr(exc, "reason", None) or str(exc)
            self._logger.warning("price board connection check failed reason=%s", self._last_error)
            return False
        except Exception as exc:
            self._is_connected = False
            self._last_error = f"Unexpected response: {exc}"
            self._logger.warning("price board connection check failed reason=%s", self._last_error)
            return False
        self._is_connected = True
        self._last_error = None
        self._logger.info("price board connection ok board=%s", board_name)
        return True

    def status(self) -> PriceTableStatus:
        return PriceTableStatus(
            is_connected=self._is_connected,
            has_token=self._client.has_token,
            last_sync=self._last_sync,
            last_attempt=self._last_attempt,
            last_error=self._last_error,
            error_count=self._error_count,
            item_count=len(self._entries),
            design_count=len(self._designs),
            auto_sync_active=self.auto_sync_active,
        )

    # -- Snapshot access ----------------------------------------------------

    def entries(self) -> Dict[str, PriceEntry]:
        return dict(self._entries)

    def get_entry(self, key: str) -> Optional[PriceEntry]:
        return self._entries.get(key)

    def designs(self) -> List[Design]:
        return list(self._designs.values())

    def price(self, key: str) -> float:
        entry = self._entries.get(key)
        if isinstance(entry, UnitPrice):
            return entry.price
        return FALLBACK_PRICES[key][1]

    def rate(self, key: str) -> float:
        """Percentage entry as a fraction (25 % -> 0.25)."""
        entry = self._entries.get(key)
        if isinstance(entry, Percentage):
            return entry.rate
        return FALLBACK_PRICES[key][1] / 100

    def hours(self, key: str) -> float:
        entry = self._entries.get(key)
        if isinstance(entry, LaborFactor):
            return entry.hours
        return FALLBACK_PRICES[key][1]

    # -- Named getters ------------------------------------------------------

    def acrylic_price(self) -> float:
        return self.price("acryl_glass")

    def uv_print_price(self) -> float:
        return self.price("uv_print")

    def led_price(self) -> float:
        return self.price("led")

    def element_price(self) -> float:
        return self.price("elements")

    def assembly_price(self) -> float:
        return self.price("assembly")

    def packaging_price(self) -> float:
        return self.price("packaging")

    def controller_price(self) -> float:
        return self.price("controller")

    def high_power_controller_price(self) -> float:
        return self.price("controller_high_power")

    def hourly_wage(self) -> float:
        return self.price("hourly_wage")

    def time_per_m2(self) -> float:
        return self.hours("time_per_m2")

    def time_per_element(self) -> float:
        return self.hours("time_per_element")

    def distance_rate(self) -> float:
        return self.price("distance_rate")

    def hanging_system_price(self) -> float:
        return self.price("hanging_system")

    def waterproof_rate(self) -> float:
        return self.rate("waterproofing")

    def multi_part_rate(self) -> float:
        return self.rate("multi_part")

    def admin_rate(self) -> float:
        return self.rate("administrative_costs")

    def express_rate(self) -> float:
        return self.rate("express_production")

    # -- Tiered lookups -----------------------------------------------------

    def controller_price_for_watt(self, watt: float) -> float:
        """Standard controller up to 80 W, high-power controller above."""
        if watt <= CONTROLLER_MAX_STANDARD_WATT:
            return self.controller_price()
        return self.high_power_controller_price()

    def power_supply_price(self, watt: float) -> float:
        for ceiling, key in POWER_SUPPLY_TIERS:
            if watt <= ceiling:
                return self.price(key)
        return self.price(POWER_SUPPLY_TOP_KEY)

    def labor_cost(self, area_m2: float, element_count: int) -> float:
        hours = area_m2 * self.time_per_m2() + element_count * self.time_per_element()
        return hours * self.hourly_wage()


class PriceSyncScheduler:
    """Re-runs ``PriceTableService.refresh`` on a fixed interval."""

    def __init__(self, service: PriceTableService, interval_seconds: int) -> None:
        self._service = service
        self._interval = interval_seconds
        self._task: Optional[asyncio.Task] = None
        self._logger = logging.getLogger("price_sync_scheduler")

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            try:
                await self._service.refresh()
            except Exception as exc:
                self._logger.error("scheduled price sync crashed error=%s", exc)

    def start(self, interval_seconds: Optional[int] = None) -> None:
        """Start (or restart) the loop on the running event loop."""
        if interval_seconds is not None:
            self._interval = interval_seconds
        self.stop()
        self._task = asyncio.get_running_loop().create_task(self._run())
        self._service.auto_sync_active = True
        self._logger.info("price auto-sync started interval=%ss", self._interval)

    def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None
            self._logger.info("price auto-sync stopped")
        self._service.auto_sync_active = False
