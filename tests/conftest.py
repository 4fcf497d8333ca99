"""Shared test fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest

from tasks_mcp.server import MCPServer
from tasks_mcp_server.store import TaskStoreClient
from tasks_mcp_server.tools import build_server

API_BASE = "http://store.test/api/collections/tasks/records"


class RecordingStore:
    """Fake records API that records requests and replies with canned responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json={})
        )

    def reply_json(self, payload: object, status_code: int = 200) -> None:
        """Answer every request with ``payload`` as JSON."""
        self.responder = lambda request: httpx.Response(status_code, json=payload)

    def reply(self, status_code: int, content: bytes = b"") -> None:
        """Answer every request with a raw body."""
        self.responder = lambda request: httpx.Response(status_code, content=content)

    def refuse_connections(self) -> None:
        """Fail every request at the transport level."""

        def responder(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        self.responder = responder

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request reached the store"
        return self.requests[-1]

    def last_body(self) -> object:
        return json.loads(self.last_request.content)


@pytest.fixture()
def anyio_backend() -> str:
    """Run anyio-marked tests on asyncio, the runtime fastmcp requires."""
    return "asyncio"


@pytest.fixture()
def store() -> RecordingStore:
    """Provide a fake records API."""
    return RecordingStore()


@pytest.fixture()
def store_client(store: RecordingStore) -> TaskStoreClient:
    """Provide a store client wired to the fake records API."""
    return TaskStoreClient(API_BASE, transport=httpx.MockTransport(store.handle))


@pytest.fixture()
def server(store_client: TaskStoreClient) -> MCPServer:
    """Provide a dispatcher with the task tools registered."""
    return build_server(store_client)
