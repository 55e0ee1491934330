"""Pytest configuration and fixtures."""

import json

import httpx
import pytest
import pytest_asyncio

from zentral.sdk.client import ZentralClient

BASE_URL = "https://zentral.example.com/api/"
TOKEN = "0123456789abcdef"


class MockServer:
    """Route table served through ``httpx.MockTransport``.

    Routes are keyed by method and path relative to the API base URL. Every
    received request is recorded, so tests can check what was sent.
    """

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, method, path, body=None, *, status_code=200, headers=None):
        if body is None:
            content = b""
        elif isinstance(body, bytes):
            content = body
        elif isinstance(body, str):
            content = body.encode("utf-8")
        else:
            content = json.dumps(body).encode("utf-8")
        self.routes[(method, path)] = (status_code, headers or {}, content)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api/")
        try:
            status_code, headers, content = self.routes[(request.method, path)]
        except KeyError:
            return httpx.Response(404, text="Not found.")
        return httpx.Response(status_code, headers=headers, content=content)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last_request.content)


@pytest.fixture
def server():
    """Mock Zentral API."""
    return MockServer()


@pytest_asyncio.fixture
async def client(server):
    """Client talking to the mock API."""
    zentral = ZentralClient(
        BASE_URL,
        TOKEN,
        transport=httpx.MockTransport(server.handler),
    )
    yield zentral
    await zentral.aclose()
