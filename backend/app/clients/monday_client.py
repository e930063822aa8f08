"""
Monday.com HTTP client — GraphQL queries against the price board.
Version: 1.0.0
"""
import logging
from typing import Any, Dict, List

import httpx

from app.core.config import Settings
from app.core.constants.board import BOARD_PAGE_LIMIT
from app.core.exceptions import (
    AuthenticationError,
    ConnectionTimeoutError,
    ExternalAPIError,
)

logger = logging.getLogger("monday_client")

SERVICE_NAME = "Monday"
MALFORMED_RESPONSE = "Malformed response"


def _http_error_reason(status_code: int) -> str:
    if status_code == 401:
        return "Invalid API token"
    if status_code == 403:
        return "API token lacks permission"
    if status_code >= 500:
        return "Monday.com server error"
    return f"HTTP {status_code}"


class MondayClient:
    def __init__(self, settings: Settings) -> None:
        self._api_url = settings.monday_api_url
        self._token = settings.monday_api_token or ""
        self._api_version = settings.monday_api_version
        self._board_id = settings.monday_board_id
        self._timeout = settings.monday_timeout_seconds

    @property
    def has_token(self) -> bool:
        return bool(self._token)

    @property
    def board_id(self) -> str:
        return self._board_id

    async def _call_graphql(self, query: str) -> Dict[str, Any]:
        if not self._token:
            raise AuthenticationError("No API token configured")

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._token}",
            "API-Version": self._api_version,
        }

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.post(self._api_url, headers=headers, json={"query": query})
        except httpx.TimeoutException as exc:
            raise ConnectionTimeoutError(f"API timeout (>{self._timeout:g}s)") from exc
        except httpx.HTTPError as exc:
            raise ExternalAPIError(SERVICE_NAME, f"Network error: {exc}") from exc

        logger.info("monday response status=%s board=%s", resp.status_code, self._board_id)
        if resp.status_code != 200:
            raise ExternalAPIError(
                SERVICE_NAME,
                _http_error_reason(resp.status_code),
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise ExternalAPIError(SERVICE_NAME, "Response is not JSON") from exc

        if not isinstance(data, dict):
            raise ExternalAPIError(SERVICE_NAME, MALFORMED_RESPONSE)

        errors = data.get("errors")
        if errors:
            first = errors[0] if isinstance(errors, list) else errors
            message = first.get("message") if isinstance(first, dict) else None
            raise ExternalAPIError(SERVICE_NAME, f"GraphQL error: {message or 'unknown'}")
        return data

    @staticmethod
    def _boards(data: Dict[str, Any]) -> List[Dict[str, Any]]:
        """The `boards` list of a query result; each level is type-checked."""
        payload = data.get("data") or {}
        if not isinstance(payload, dict):
            raise ExternalAPIError(SERVICE_NAME, MALFORMED_RESPONSE)
        boards = payload.get("boards") or []
        if not isinstance(boards, list) or not all(isinstance(b, dict) for b in boards):
            raise ExternalAPIError(SERVICE_NAME, MALFORMED_RESPONSE)
        return boards

    async def check_connection(self) -> str:
        """Query the board's name; returns it on success."""
        query = f"query {{ boards(ids: [{self._board_id}]) {{ id name }} }}"
        data = await self._call_graphql(query)
        boards = self._boards(data)
        if not boards:
            raise ExternalAPIError(SERVICE_NAME, "Board not found")
        return boards[0].get("name") or ""

    async def fetch_board_items(self) -> List[Dict[str, Any]]:
        """
        Fetch every row of the price board.

        Returns the raw items: {id, name, column_values: [{id, text, value}]}.
        """
        query = f"""
            query {{
              boards(ids: [{self._board_id}]) {{
                items_page(limit: {BOARD_PAGE_LIMIT}) {{
                  items {{
                    id
                    name
                    column_values {{
                      id
                      text
                      value
                    }}
                  }}
                }}
              }}
            }}
        """
        data = await self._call_graphql(query)
        boards = self._boards(data)
        if not boards:
            return []
        items_page = boards[0].get("items_page") or {}
        if not isinstance(items_page, dict):
            raise ExternalAPIError(SERVICE_NAME, MALFORMED_RESPONSE)
        items = items_page.get("items") or []
        if not isinstance(items, list):
            raise ExternalAPIError(SERVICE_NAME, MALFORMED_RESPONSE)
        return items
