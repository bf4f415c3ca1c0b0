"""Test configuration and fixtures."""

from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio

from qstash_client import QStashClient, Settings

BASE_URL = "https://qstash.test"
TOKEN = "test_api_key"

Responder = Callable[[httpx.Request], httpx.Response]


class MockQStash:
    """In-memory stand-in for the QStash API, used as an httpx transport handler."""

    def __init__(self):
        self.routes: dict[tuple[str, str], Responder] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        json: Any = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
    ):
        """Register a canned response for a method and raw path."""

        def respond(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status, content=content, headers=headers)
            if json is not None:
                return httpx.Response(status, json=json, headers=headers)
            return httpx.Response(status, headers=headers)

        self.routes[(method, path)] = respond

    def add_responder(self, method: str, path: str, responder: Responder):
        self.routes[(method, path)] = responder

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.raw_path.split(b"?")[0].decode()
        responder = self.routes.get((request.method, path))
        if responder is None:
            return httpx.Response(404, json={"error": f"no route for {request.method} {path}"})
        return responder(request)


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, token=TOKEN, url=BASE_URL)


@pytest.fixture
def mock_api() -> MockQStash:
    return MockQStash()


@pytest_asyncio.fixture
async def client(mock_api: MockQStash, settings: Settings) -> AsyncGenerator[QStashClient]:
    """Client wired to the mock API."""
    client = QStashClient(settings=settings, transport=httpx.MockTransport(mock_api))
    yield client
    await client.close()
