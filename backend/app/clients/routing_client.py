"""
Routing HTTP client — driving distance between two coordinates via OSRM.
Version: 1.0.0
"""
import logging
import math

import httpx

from app.core.config import Settings
from app.core.exceptions import ConnectionTimeoutError, ExternalAPIError
from app.schemas.distance import GeocodeResult, RouteResult

logger = logging.getLogger("routing_client")

SERVICE_NAME = "Routing"
MALFORMED_RESPONSE = "Malformed response"


class RoutingClient:
    def __init__(self, settings: Settings) -> None:
        self._url = settings.routing_url.rstrip("/")
        self._timeout = settings.routing_timeout_seconds

    async def fetch_route(self, origin: GeocodeResult, destination: GeocodeResult) -> RouteResult:
        coords = f"{origin.lng},{origin.lat};{destination.lng},{destination.lat}"
        url = f"{self._url}/{coords}"
        params = {"overview": "false", "steps": "false"}

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.get(url, params=params)
        except httpx.TimeoutException as exc:
            raise ConnectionTimeoutError("Routing timeout") from exc
        except httpx.HTTPError as exc:
            raise ExternalAPIError(SERVICE_NAME, str(exc)) from exc

        logger.info("routing response status=%s", resp.status_code)
        if resp.status_code != 200:
            raise ExternalAPIError(SERVICE_NAME, resp.text, status_code=resp.status_code)

        try:
            body = resp.json()
        except ValueError as exc:
            raise ExternalAPIError(SERVICE_NAME, "Response is not JSON") from exc
        if not isinstance(body, dict):
            raise ExternalAPIError(SERVICE_NAME, MALFORMED_RESPONSE)

        routes = body.get("routes") or []
        if body.get("code", "Ok") != "Ok" or not routes:
            raise ExternalAPIError(SERVICE_NAME, f"No route found (code={body.get('code')})")
        if not isinstance(routes, list) or not isinstance(routes[0], dict):
            raise ExternalAPIError(SERVICE_NAME, MALFORMED_RESPONSE)

        route = routes[0]
        try:
            distance_m = float(route.get("distance") or 0)
            duration_s = float(route.get("duration") or 0)
        except (TypeError, ValueError) as exc:
            raise ExternalAPIError(SERVICE_NAME, MALFORMED_RESPONSE) from exc
        if not (math.isfinite(distance_m) and math.isfinite(duration_s)) or distance_m < 0:
            raise ExternalAPIError(SERVICE_NAME, MALFORMED_RESPONSE)
        return RouteResult(distance_m=distance_m, duration_s=duration_s)
