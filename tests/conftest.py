"""
Pytest fixtures for rocketchat_livechat tests.

Stubs the Rocket.Chat server with httpx.MockTransport so no real network
calls are made.

Key fixture pattern:
- mock_server: records every request and answers with a configurable response
- http_client: httpx.AsyncClient wired to mock_server
- livechat: RocketChatLivechat sharing http_client
- Tests verify calls through mock_server.requests / mock_server.last_request
"""

import json
from typing import Any

import httpx
import pytest

from rocketchat_livechat import RocketChatLivechat

SERVER_URL = "https://chat.test"


class MockServer:
    """Request recorder with a canned response.

    Usage:
        mock_server.respond(201, json={"visitor": {"_id": "v1"}})
        mock_server.respond(500, content=b"not json")
        mock_server.fail_with(httpx.ConnectError("Connection refused"))
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._status = 200
        self._kwargs: dict[str, Any] = {"json": {"success": True}}
        self._error: Exception | None = None

    def respond(self, status: int, **kwargs: Any) -> None:
        self._status = status
        self._kwargs = kwargs
        self._error = None

    def fail_with(self, error: Exception) -> None:
        self._error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return httpx.Response(self._status, **self._kwargs)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "No request was sent"
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def mock_server() -> MockServer:
    return MockServer()


@pytest.fixture
async def http_client(mock_server: MockServer):
    """AsyncClient whose transport is the mock server."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(mock_server.handler))
    yield client
    await client.aclose()


@pytest.fixture
def livechat(http_client: httpx.AsyncClient) -> RocketChatLivechat:
    return RocketChatLivechat(SERVER_URL, http_client=http_client)

