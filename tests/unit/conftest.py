"""
Unit Test Fixtures.

Fixtures for unit tests - the network is replaced by httpx.MockTransport.
Unit tests should be fast and isolated, never touching a real service.
"""

import io
from collections.abc import Callable, Generator
from typing import Any

import httpx
import pytest

from appctl.cli.client import APIClient
from appctl.cli.command import ExecutionContext

TEST_TARGET = "http://apps.test"

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, handler: Handler) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


class FailingStream(httpx.SyncByteStream):
    """Response body that breaks while being read."""

    def __iter__(self):
        raise httpx.ReadError("connection reset by peer")
        yield b""  # pragma: no cover


# =============================================================================
# Transport Fixtures
# =============================================================================


@pytest.fixture
def fake_api() -> Generator[Callable[..., tuple[APIClient, RecordingTransport]], None, None]:
    """
    Factory for an APIClient backed by a recording MockTransport.

    Usage:
        def test_list(fake_api):
            client, transport = fake_api(json=[{"name": "blog"}])
            ...
            assert transport.requests[0].method == "GET"
    """
    clients: list[APIClient] = []

    def _make(
        status_code: int = 200,
        json: Any = None,
        content: bytes = b"",
        handler: Handler | None = None,
        target: str = TEST_TARGET,
    ) -> tuple[APIClient, RecordingTransport]:
        def _respond(request: httpx.Request) -> httpx.Response:
            if handler is not None:
                return handler(request)
            if json is not None:
                return httpx.Response(status_code, json=json)
            return httpx.Response(status_code, content=content)

        transport = RecordingTransport(_respond)
        client = APIClient(base_url=target, timeout=5.0, transport=transport)
        clients.append(client)
        return client, transport

    yield _make

    for client in clients:
        client.close()


# =============================================================================
# Execution Context Fixtures
# =============================================================================


@pytest.fixture
def make_context() -> Callable[..., ExecutionContext]:
    """Factory for an ExecutionContext writing to in-memory streams."""

    def _make(*args: str) -> ExecutionContext:
        return ExecutionContext.create(list(args), stdout=io.StringIO(), stderr=io.StringIO())

    return _make


# =============================================================================
# Failure Handlers
# =============================================================================


@pytest.fixture
def broken_body() -> Handler:
    """Handler whose 200 response fails while its body is read."""
    return lambda request: httpx.Response(200, stream=FailingStream())


@pytest.fixture
def connection_refused() -> Handler:
    """Handler that fails before any response is produced."""

    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return _refuse
