"""
Unit tests for MondayClient — GraphQL transport and error mapping.

Tests cover:
- Token handling
- Successful board fetch and connection check
- HTTP status, GraphQL error, timeout and network error mapping

Version: 1.0.0
"""
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

import httpx

from app.clients.monday_client import MondayClient
from app.core.exceptions import (
    AuthenticationError,
    ConnectionTimeoutError,
    ExternalAPIError,
)


@pytest.fixture
def client(mock_settings):
    return MondayClient(mock_settings)


def _response(status_code=200, body=None, json_error=False):
    resp = MagicMock()
    resp.status_code = status_code
    if json_error:
        resp.json.side_effect = ValueError("not json")
    else:
        resp.json.return_value = body if body is not None else {}
    return resp


def _patched_http(mock_client_cls, response=None, side_effect=None):
    mock_http = AsyncMock()
    if side_effect is not None:
        mock_http.post.side_effect = side_effect
    else:
        mock_http.post.return_value = response
    mock_ctx = AsyncMock()
    mock_ctx.__aenter__.return_value = mock_http
    mock_client_cls.return_value = mock_ctx
    return mock_http


@pytest.mark.unit
class TestMondayClientInit:

    def test_has_token(self, client):
        assert client.has_token is True
        assert client.board_id == "123456"

    def test_without_token(self, mock_settings):
        mock_settings.monday_api_token = None
        assert MondayClient(mock_settings).has_token is False

    @pytest.mark.asyncio
    async def test_call_without_token_raises(self, mock_settings):
        mock_settings.monday_api_token = ""
        with pytest.raises(AuthenticationError):
            await MondayClient(mock_settings).fetch_board_items()


@pytest.mark.unit
class TestFetchBoardItems:

    @pytest.mark.asyncio
    async def test_returns_items(self, client):
        items = [{"id": "1", "name": "LED", "column_values": []}]
        body = {"data": {"boards": [{"items_page": {"items": items}}]}}
        with patch("app.clients.monday_client.httpx.AsyncClient") as mock_cls:
            mock_http = _patched_http(mock_cls, _response(200, body))
            result = await client.fetch_board_items()

        assert result == items
        _, kwargs = mock_http.post.call_args
        assert kwargs["headers"]["Authorization"] == "Bearer test-monday-token"
        assert kwargs["headers"]["API-Version"] == "2023-10"
        assert "123456" in kwargs["json"]["query"]

    @pytest.mark.asyncio
    async def test_no_boards_returns_empty(self, client):
        with patch("app.clients.monday_client.httpx.AsyncClient") as mock_cls:
            _patched_http(mock_cls, _response(200, {"data": {"boards": []}}))
            assert await client.fetch_board_items() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status,reason", [
        (401, "Invalid API token"),
        (403, "API token lacks permission"),
        (502, "Monday.com server error"),
        (429, "HTTP 429"),
    ])
    async def test_http_status_mapping(self, client, status, reason):
        with patch("app.clients.monday_client.httpx.AsyncClient") as mock_cls:
            _patched_http(mock_cls, _response(status))
            with pytest.raises(ExternalAPIError) as exc_info:
                await client.fetch_board_items()
        assert exc_info.value.status_code == status
        assert exc_info.value.reason == reason

    @pytest.mark.asyncio
    async def test_graphql_errors(self, client):
        body = {"errors": [{"message": "Board not accessible"}]}
        with patch("app.clients.monday_client.httpx.AsyncClient") as mock_cls:
            _patched_http(mock_cls, _response(200, body))
            with pytest.raises(ExternalAPIError, match="Board not accessible"):
                await client.fetch_board_items()

    @pytest.mark.asyncio
    async def test_invalid_json(self, client):
        with patch("app.clients.monday_client.httpx.AsyncClient") as mock_cls:
            _patched_http(mock_cls, _response(200, json_error=True))
            with pytest.raises(ExternalAPIError):
                await client.fetch_board_items()

    @pytest.mark.asyncio
    async def test_timeout(self, client):
        with patch("app.clients.monday_client.httpx.AsyncClient") as mock_cls:
            _patched_http(mock_cls, side_effect=httpx.ReadTimeout("slow"))
            with pytest.raises(ConnectionTimeoutError):
                await client.fetch_board_items()

    @pytest.mark.asyncio
    async def test_network_error(self, client):
        with patch("app.clients.monday_client.httpx.AsyncClient") as mock_cls:
            _patched_http(mock_cls, side_effect=httpx.ConnectError("refused"))
            with pytest.raises(ExternalAPIError, match="Network error"):
                await client.fetch_board_items()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        [{"data": None}],
        {"data": ["boards"]},
        {"data": {"boards": {"items_page": {}}}},
        {"data": {"boards": [None]}},
        {"data": {"boards": [{"items_page": ["items"]}]}},
        {"data": {"boards": [{"items_page": {"items": "LED"}}]}},
    ])
    async def test_malformed_payload(self, client, body):
        with patch("app.clients.monday_client.httpx.AsyncClient") as mock_cls:
            _patched_http(mock_cls, _response(200, body))
            with pytest.raises(ExternalAPIError, match="Malformed response"):
                await client.fetch_board_items()

    @pytest.mark.asyncio
    async def test_graphql_error_object(self, client):
        body = {"errors": {"message": "Complexity budget exhausted"}}
        with patch("app.clients.monday_client.httpx.AsyncClient") as mock_cls:
            _patched_http(mock_cls, _response(200, body))
            with pytest.raises(ExternalAPIError, match="Complexity budget exhausted"):
                await client.check_connection()


@pytest.mark.unit
class TestCheckConnection:

    @pytest.mark.asyncio
    async def test_returns_board_name(self, client):
        body = {"data": {"boards": [{"id": "123456", "name": "Preise"}]}}
        with patch("app.clients.monday_client.httpx.AsyncClient") as mock_cls:
            _patched_http(mock_cls, _response(200, body))
            assert await client.check_connection() == "Preise"

    @pytest.mark.asyncio
    async def test_missing_board(self, client):
        with patch("app.clients.monday_client.httpx.AsyncClient") as mock_cls:
            _patched_http(mock_cls, _response(200, {"data": {"boards": []}}))
            with pytest.raises(ExternalAPIError, match="Board not found"):
                await client.check_connection()

    @pytest.mark.asyncio
    async def test_malformed_board_entry(self, client):
        with patch("app.clients.monday_client.httpx.AsyncClient") as mock_cls:
            _patched_http(mock_cls, _response(200, {"data": {"boards": ["Preise"]}}))
            with pytest.raises(ExternalAPIError, match="Malformed response"):
                await client.check_connection()
