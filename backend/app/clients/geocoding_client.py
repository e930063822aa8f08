"""
Geocoding HTTP client — postal code to coordinates via Nominatim.
Version: 1.0.0
"""
import logging
from collections import OrderedDict
from typing import Optional

import httpx

from app.core.config import Settings
from app.core.exceptions import ConnectionTimeoutError, ExternalAPIError
from app.schemas.distance import GeocodeResult

logger = logging.getLogger("geocoding_client")

SERVICE_NAME = "Geocoding"
MALFORMED_RESPONSE = "Malformed response"

# Postal codes kept per process; least recently used entries are evicted
GEOCODE_CACHE_SIZE = 1024


class GeocodingClient:
    def __init__(self, settings: Settings) -> None:
        self._url = settings.geocoding_url
        self._country = settings.geocoding_country
        self._user_agent = settings.geocoding_user_agent
        self._timeout = settings.geocoding_timeout_seconds
        self._cache: "OrderedDict[str, GeocodeResult]" = OrderedDict()

    async def geocode_postal_code(self, postal_code: str) -> Optional[GeocodeResult]:
        """Best match for a postal code, or None when the geocoder has none."""
        cached = self._cache.get(postal_code)
        if cached is not None:
            self._cache.move_to_end(postal_code)
            return cached

        params = {
            "postalcode": postal_code,
            "country": self._country,
            "format": "json",
            "limit": 1,
            "addressdetails": 1,
            "accept-language": "de",
        }
        headers = {"User-Agent": self._user_agent, "Accept": "application/json"}

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.get(self._url, params=params, headers=headers)
        except httpx.TimeoutException as exc:
            raise ConnectionTimeoutError(f"Geocoding timeout for {postal_code}") from exc
        except httpx.HTTPError as exc:
            raise ExternalAPIError(SERVICE_NAME, str(exc)) from exc

        if resp.status_code != 200:
            raise ExternalAPIError(SERVICE_NAME, resp.text, status_code=resp.status_code)

        try:
            matches = resp.json()
        except ValueError as exc:
            raise ExternalAPIError(SERVICE_NAME, "Response is not JSON") from exc
        if not matches:
            logger.info("geocoding no match postal_code=%s", postal_code)
            return None
        if not isinstance(matches, list) or not isinstance(matches[0], dict):
            raise ExternalAPIError(SERVICE_NAME, MALFORMED_RESPONSE)

        best = matches[0]
        try:
            lat, lng = float(best["lat"]), float(best["lon"])
        except (KeyError, TypeError, ValueError) as exc:
            raise ExternalAPIError(SERVICE_NAME, MALFORMED_RESPONSE) from exc
        if not (-90 <= lat <= 90 and -180 <= lng <= 180):
            raise ExternalAPIError(SERVICE_NAME, MALFORMED_RESPONSE)

        result = GeocodeResult(
            lat=lat,
            lng=lng,
            display_name=str(best.get("display_name") or best.get("name") or ""),
        )
        self._cache[postal_code] = result
        if len(self._cache) > GEOCODE_CACHE_SIZE:
            self._cache.popitem(last=False)
        return result
