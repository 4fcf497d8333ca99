"""HTTP client for the remote task record store."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote, urlencode

import httpx

from tasks_mcp_server.errors import MCPError, raise_mcp_error

logger = logging.getLogger(__name__)


def format_query_value(value: Any) -> str:
    """Render a query value the way a JSON client would write it.

    Booleans are lowercase and integral floats lose their fraction, so
    ``2.0`` becomes ``2`` and ``True`` becomes ``true``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_list_query(
    filter_expression: Any = None, sort: Any = None, page: Any = None
) -> str:
    """Build the query string for a list request.

    Only truthy values are included, in ``filter``, ``sort``, ``page`` order.
    Parentheses stay literal so filter expressions remain readable.
    """
    params: list[tuple[str, str]] = []
    if filter_expression:
        params.append(("filter", format_query_value(filter_expression)))
    if sort:
        params.append(("sort", format_query_value(sort)))
    if page:
        params.append(("page", format_query_value(page)))
    return urlencode(params, safe="()", quote_via=quote)


def decode_json(response: httpx.Response) -> Any:
    """Parse a response body as JSON without checking its shape."""
    try:
        return response.json()
    except ValueError as exc:
        raise_mcp_error("MalformedResponse", str(exc))


class TaskStoreClient:
    """Thin client for a PocketBase-style records collection.

    Every call opens one :class:`httpx.AsyncClient`, performs a single request
    and closes it again. No timeout is applied.

    Args:
        api_base: URL of the records collection.
        transport: Optional ``httpx`` transport, used to substitute the store.
    """

    def __init__(
        self, api_base: str, *, transport: httpx.AsyncBaseTransport | None = None
    ) -> None:
        self.api_base = api_base.rstrip("/")
        self._transport = transport

    def record_url(self, task_id: Any) -> str:
        """Return the address of a single record."""
        return f"{self.api_base}/{quote(str(task_id), safe='')}"

    async def request(
        self, method: str, url: str, *, body: dict[str, Any] | None = None
    ) -> httpx.Response:
        """Perform one HTTP request against the store.

        Raises:
            MCPError: If the transport fails.
        """
        logger.debug("%s %s", method, url)
        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=None
            ) as client:
                response = await client.request(method, url, json=body)
        except httpx.HTTPError as exc:
            raise MCPError("TransportError", str(exc) or type(exc).__name__) from exc
        logger.debug("%s %s -> %s", method, url, response.status_code)
        return response

    async def create_task(self, fields: dict[str, Any]) -> Any:
        response = await self.request("POST", self.api_base, body=fields)
        return decode_json(response)

    async def list_tasks(
        self, filter_expression: Any = None, sort: Any = None, page: Any = None
    ) -> Any:
        query = build_list_query(filter_expression, sort, page)
        url = f"{self.api_base}?{query}" if query else self.api_base
        response = await self.request("GET", url)
        return decode_json(response)

    async def update_task(self, task_id: Any, changes: dict[str, Any]) -> Any:
        response = await self.request("PATCH", self.record_url(task_id), body=changes)
        return decode_json(response)

    async def delete_task(self, task_id: Any) -> bool:
        """Delete a record and report whether the store answered with 2xx."""
        response = await self.request("DELETE", self.record_url(task_id))
        return response.is_success
