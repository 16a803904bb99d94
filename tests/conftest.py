"""Pytest configuration and shared fixtures."""
import asyncio
from collections.abc import Callable, Mapping

import httpx
import pytest

from tourai.conversation import ConversationClient
from tourai.transport import HttpTransport, HttpxTransport

ENDPOINT = "https://assistant.example.test/prod/ask"


class FakeTransport(HttpTransport):
    """In-memory transport returning queued bodies or raising queued errors."""

    def __init__(self, *outcomes: bytes | Exception) -> None:
        self.outcomes = list(outcomes)
        self.requests: list[dict] = []
        self.gate: asyncio.Event | None = None
        self.closed = False

    async def request(
        self,
        url: str,
        method: str,
        headers: Mapping[str, str],
        body: bytes | None,
        timeout: float,
    ) -> bytes:
        self.requests.append(
            {"url": url, "method": method, "headers": dict(headers), "body": body, "timeout": timeout}
        )
        if self.gate is not None:
            await self.gate.wait()
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def endpoint():
    """Return the endpoint used by test clients."""
    return ENDPOINT


@pytest.fixture
def fake_transport():
    """Return an empty FakeTransport; tests queue outcomes on it."""
    return FakeTransport()


@pytest.fixture
def client(fake_transport, endpoint):
    """Return a ConversationClient wired to the fake transport."""
    return ConversationClient(fake_transport, endpoint=endpoint)


@pytest.fixture
def mock_http():
    """Return a factory building an HttpxTransport around a request handler."""

    def _factory(handler: Callable[[httpx.Request], httpx.Response]) -> HttpxTransport:
        return HttpxTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))

    return _factory
