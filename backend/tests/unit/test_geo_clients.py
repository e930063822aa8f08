"""
Unit tests for GeocodingClient and RoutingClient.
Version: 1.0.0
"""
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

import httpx

from app.clients.geocoding_client import GeocodingClient
from app.clients.routing_client import RoutingClient
from app.core.exceptions import ConnectionTimeoutError, ExternalAPIError
from app.schemas.distance import GeocodeResult


def _mock_get(mock_client_cls, status_code=200, body=None, side_effect=None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.text = "error body"
    resp.json.return_value = body
    mock_http = AsyncMock()
    if side_effect is not None:
        mock_http.get.side_effect = side_effect
    else:
        mock_http.get.return_value = resp
    mock_ctx = AsyncMock()
    mock_ctx.__aenter__.return_value = mock_http
    mock_client_cls.return_value = mock_ctx
    return mock_http


NEUSTADT = {
    "lat": "49.3501",
    "lon": "8.1390",
    "display_name": "Neustadt an der Weinstraße, Rheinland-Pfalz, 67433, Deutschland",
}


@pytest.mark.unit
class TestGeocodingClient:

    @pytest.mark.asyncio
    async def test_returns_best_match(self, mock_settings):
        client = GeocodingClient(mock_settings)
        with patch("app.clients.geocoding_client.httpx.AsyncClient") as mock_cls:
            mock_http = _mock_get(mock_cls, body=[NEUSTADT])
            result = await client.geocode_postal_code("67433")

        assert result == GeocodeResult(lat=49.3501, lng=8.139, display_name=NEUSTADT["display_name"])
        _, kwargs = mock_http.get.call_args
        assert kwargs["params"]["postalcode"] == "67433"
        assert kwargs["params"]["country"] == "Germany"
        assert "User-Agent" in kwargs["headers"]

    @pytest.mark.asyncio
    async def test_memoizes_lookups(self, mock_settings):
        client = GeocodingClient(mock_settings)
        with patch("app.clients.geocoding_client.httpx.AsyncClient") as mock_cls:
            mock_http = _mock_get(mock_cls, body=[NEUSTADT])
            await client.geocode_postal_code("67433")
            await client.geocode_postal_code("67433")
        assert mock_http.get.await_count == 1

    @pytest.mark.asyncio
    async def test_no_match_returns_none(self, mock_settings):
        client = GeocodingClient(mock_settings)
        with patch("app.clients.geocoding_client.httpx.AsyncClient") as mock_cls:
            _mock_get(mock_cls, body=[])
            assert await client.geocode_postal_code("00000") is None

    @pytest.mark.asyncio
    async def test_http_error_status(self, mock_settings):
        client = GeocodingClient(mock_settings)
        with patch("app.clients.geocoding_client.httpx.AsyncClient") as mock_cls:
            _mock_get(mock_cls, status_code=503)
            with pytest.raises(ExternalAPIError) as exc_info:
                await client.geocode_postal_code("67433")
        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_timeout(self, mock_settings):
        client = GeocodingClient(mock_settings)
        with patch("app.clients.geocoding_client.httpx.AsyncClient") as mock_cls:
            _mock_get(mock_cls, side_effect=httpx.ConnectTimeout("slow"))
            with pytest.raises(ConnectionTimeoutError):
                await client.geocode_postal_code("67433")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        {"lat": "49.35"},
        [None],
        [{"lat": "north", "lon": "8.1"}],
        [{"lon": "8.1"}],
        [{"lat": "NaN", "lon": "8.1"}],
    ])
    async def test_malformed_payload(self, mock_settings, body):
        client = GeocodingClient(mock_settings)
        with patch("app.clients.geocoding_client.httpx.AsyncClient") as mock_cls:
            _mock_get(mock_cls, body=body)
            with pytest.raises(ExternalAPIError, match="Malformed response"):
                await client.geocode_postal_code("67433")

    @pytest.mark.asyncio
    async def test_cache_is_bounded(self, mock_settings):
        client = GeocodingClient(mock_settings)
        with patch("app.clients.geocoding_client.GEOCODE_CACHE_SIZE", 2), \
                patch("app.clients.geocoding_client.httpx.AsyncClient") as mock_cls:
            mock_http = _mock_get(mock_cls, body=[NEUSTADT])
            for postal_code in ("67433", "67434", "67433", "67435"):
                await client.geocode_postal_code(postal_code)

        assert list(client._cache) == ["67433", "67435"]
        assert mock_http.get.await_count == 3


@pytest.mark.unit
class TestRoutingClient:

    ORIGIN = GeocodeResult(lat=49.35, lng=8.14, display_name="Neustadt")
    DESTINATION = GeocodeResult(lat=50.11, lng=8.68, display_name="Frankfurt")

    @pytest.mark.asyncio
    async def test_returns_route(self, mock_settings):
        client = RoutingClient(mock_settings)
        body = {"code": "Ok", "routes": [{"distance": 123456.0, "duration": 5400.0}]}
        with patch("app.clients.routing_client.httpx.AsyncClient") as mock_cls:
            mock_http = _mock_get(mock_cls, body=body)
            route = await client.fetch_route(self.ORIGIN, self.DESTINATION)

        assert route.distance_m == 123456.0
        assert route.duration_s == 5400.0
        args, _ = mock_http.get.call_args
        # OSRM expects lng,lat pairs
        assert args[0].endswith("/8.14,49.35;8.68,50.11")

    @pytest.mark.asyncio
    async def test_no_route(self, mock_settings):
        client = RoutingClient(mock_settings)
        with patch("app.clients.routing_client.httpx.AsyncClient") as mock_cls:
            _mock_get(mock_cls, body={"code": "NoRoute", "routes": []})
            with pytest.raises(ExternalAPIError, match="No route"):
                await client.fetch_route(self.ORIGIN, self.DESTINATION)

    @pytest.mark.asyncio
    async def test_http_error_status(self, mock_settings):
        client = RoutingClient(mock_settings)
        with patch("app.clients.routing_client.httpx.AsyncClient") as mock_cls:
            _mock_get(mock_cls, status_code=500)
            with pytest.raises(ExternalAPIError):
                await client.fetch_route(self.ORIGIN, self.DESTINATION)

    @pytest.mark.asyncio
    async def test_timeout(self, mock_settings):
        client = RoutingClient(mock_settings)
        with patch("app.clients.routing_client.httpx.AsyncClient") as mock_cls:
            _mock_get(mock_cls, side_effect=httpx.ReadTimeout("slow"))
            with pytest.raises(ConnectionTimeoutError):
                await client.fetch_route(self.ORIGIN, self.DESTINATION)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        [{"code": "Ok"}],
        {"code": "Ok", "routes": [None]},
        {"code": "Ok", "routes": ["fast"]},
        {"code": "Ok", "routes": {"distance": 1000}},
        {"code": "Ok", "routes": [{"distance": "far", "duration": 60}]},
        {"code": "Ok", "routes": [{"distance": float("inf"), "duration": 60}]},
    ])
    async def test_malformed_payload(self, mock_settings, body):
        client = RoutingClient(mock_settings)
        with patch("app.clients.routing_client.httpx.AsyncClient") as mock_cls:
            _mock_get(mock_cls, body=body)
            with pytest.raises(ExternalAPIError, match="Malformed response"):
                await client.fetch_route(self.ORIGIN, self.DESTINATION)
