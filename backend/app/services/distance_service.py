"""
Distance service — workshop-to-customer distance with tiered fallbacks.

Strategies are tried in order, each under its own timeout:

1. RoutingDistanceStrategy   geocode both codes, then a driving route
2. GeocodedDistanceStrategy  great-circle distance between geocoded points
3. StaticRegionDistanceStrategy  great-circle distance between postal regions

A strategy that fails, times out or has no answer hands over to the next
one. The static tier needs no network, so ``resolve`` always returns.
Version: 1.0.0
"""
import asyncio
import logging
from typing import List, Optional, Sequence

from app.clients.geocoding_client import GeocodingClient
from app.clients.routing_client import RoutingClient
from app.core.constants.geo import ESTIMATED_MINUTES_PER_KM
from app.schemas.distance import DistanceResult
from app.utils.geo_math import haversine_km, region_coordinates
from app.utils.place_names import extract_city_name, region_place_name
from app.utils.scaling import round_half_up

logger = logging.getLogger("distance_service")


def _estimated_minutes(distance_km: int) -> int:
    return round_half_up(distance_km * ESTIMATED_MINUTES_PER_KM)


def static_distance(origin_postal_code: str, destination_postal_code: str) -> DistanceResult:
    """Region-to-region approximation; never touches the network."""
    lat1, lng1 = region_coordinates(origin_postal_code)
    lat2, lng2 = region_coordinates(destination_postal_code)
    distance_km = max(1, round_half_up(haversine_km(lat1, lng1, lat2, lng2)))
    return DistanceResult(
        distance_km=distance_km,
        place_name=region_place_name(destination_postal_code),
        duration_minutes=_estimated_minutes(distance_km),
        source="static",
    )


class DistanceStrategy:
    name = "base"
    timeout_seconds: Optional[float] = None

    async def resolve(self, origin: str, destination: str) -> Optional[DistanceResult]:
        raise NotImplementedError


class RoutingDistanceStrategy(DistanceStrategy):
    name = "routing"

    def __init__(self, geocoder: GeocodingClient, router: RoutingClient, timeout_seconds: float) -> None:
        self._geocoder = geocoder
        self._router = router
        self.timeout_seconds = timeout_seconds

    async def resolve(self, origin: str, destination: str) -> Optional[DistanceResult]:
        origin_point, destination_point = await asyncio.gather(
            self._geocoder.geocode_postal_code(origin),
            self._geocoder.geocode_postal_code(destination),
        )
        if origin_point is None or destination_point is None:
            return None

        route = await self._router.fetch_route(origin_point, destination_point)
        distance_km = round_half_up(route.distance_m / 1000)
        duration_minutes = round_half_up(route.duration_s / 60)
        if distance_km <= 0 or duration_minutes <= 0:
            logger.info("routing returned empty route origin=%s destination=%s", origin, destination)
            return None

        return DistanceResult(
            distance_km=distance_km,
            place_name=extract_city_name(destination_point.display_name),
            duration_minutes=duration_minutes,
            source=self.name,
        )


class GeocodedDistanceStrategy(DistanceStrategy):
    name = "geocoding"

    def __init__(self, geocoder: GeocodingClient, timeout_seconds: float) -> None:
        self._geocoder = geocoder
        self.timeout_seconds = timeout_seconds

    async def resolve(self, origin: str, destination: str) -> Optional[DistanceResult]:
        origin_point, destination_point = await asyncio.gather(
            self._geocoder.geocode_postal_code(origin),
            self._geocoder.geocode_postal_code(destination),
        )
        if origin_point is None or destination_point is None:
            return None

        distance_km = max(1, round_half_up(haversine_km(
            origin_point.lat, origin_point.lng, destination_point.lat, destination_point.lng,
        )))
        return DistanceResult(
            distance_km=distance_km,
            place_name=extract_city_name(destination_point.display_name),
            duration_minutes=_estimated_minutes(distance_km),
            source=self.name,
        )


class StaticRegionDistanceStrategy(DistanceStrategy):
    name = "static"

    async def resolve(self, origin: str, destination: str) -> Optional[DistanceResult]:
        return static_distance(origin, destination)


class DistanceResolver:
    def __init__(self, strategies: Sequence[DistanceStrategy], origin_postal_code: str) -> None:
        self._strategies: List[DistanceStrategy] = list(strategies)
        self._origin = origin_postal_code

    @property
    def origin_postal_code(self) -> str:
        return self._origin

    async def resolve(self, destination: str, origin: Optional[str] = None) -> DistanceResult:
        """Best available distance to ``destination``. Never raises."""
        origin = origin or self._origin
        for strategy in self._strategies:
            try:
                if strategy.timeout_seconds:
                    result = await asyncio.wait_for(
                        strategy.resolve(origin, destination), timeout=strategy.timeout_seconds,
                    )
                else:
                    result = await strategy.resolve(origin, destination)
            except asyncio.TimeoutError:
                logger.warning(
                    "distance tier=%s timed out after %ss destination=%s",
                    strategy.name, strategy.timeout_seconds, destination,
                )
                continue
            except Exception as exc:
                logger.warning(
                    "distance tier=%s failed destination=%s error=%s", strategy.name, destination, exc,
                )
                continue

            if result is not None:
                logger.info(
                    "distance resolved tier=%s destination=%s km=%s place=%s",
                    result.source, destination, result.distance_km, result.place_name,
                )
                return result

        return static_distance(origin, destination)
