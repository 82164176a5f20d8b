"""Shared fixtures for unit tests.

Requests are served by ``httpx.MockTransport`` so no test touches the network.
Canned response bodies live in ``tests/fixtures``.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import TYPE_CHECKING, Any

import httpx
import pytest

from questrade_client import AuthenticationSession, QuestradeClient, QuestradeConfig

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

FIXTURES_DIR = Path(__file__).parent / "fixtures"

API_SERVER = "https://api01.iq.questrade.com"


def load_fixture(name: str) -> Any:
    """Load a canned JSON response body by file stem."""
    with (FIXTURES_DIR / f"{name}.json").open() as f:
        return json.load(f)


class FakeQuestrade:
    """Routes requests to canned responses and records every request.

    Routes are keyed by ``(method, host, path)``; unknown routes answer 404.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str, str], tuple[int, Any, bytes | None]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        url: str,
        *,
        status_code: int = 200,
        json: Any = None,
        content: bytes | None = None,
    ) -> None:
        parsed = httpx.URL(url)
        self.routes[(method, parsed.host, parsed.path)] = (status_code, json, content)

    def get(self, endpoint: str, **kwargs: Any) -> None:
        """Register a response for ``GET {API_SERVER}/v1/{endpoint}``."""
        self.add("GET", f"{API_SERVER}/v1/{endpoint}", **kwargs)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.host, request.url.path)
        if key not in self.routes:
            return httpx.Response(404, json={"code": 1001, "message": "Not found"})
        status_code, body, content = self.routes[key]
        if content is not None:
            return httpx.Response(status_code, content=content)
        return httpx.Response(status_code, json=body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def fixture_json() -> Callable[[str], Any]:
    """Loader for canned response bodies, e.g. ``fixture_json("accounts")``."""
    return load_fixture


@pytest.fixture
def fake_api() -> FakeQuestrade:
    """Fake Questrade servers (login and API)."""
    return FakeQuestrade()


@pytest.fixture
def session() -> AuthenticationSession:
    """A live-environment session valid for the next 30 minutes."""
    return AuthenticationSession(
        refresh_token="mock-refresh-token",
        access_token="mock-access-token",
        expires_at=datetime.now(UTC) + timedelta(minutes=30),
        api_server=API_SERVER,
        is_demo=False,
    )


@pytest.fixture
def config() -> QuestradeConfig:
    """Create a test configuration."""
    return QuestradeConfig(is_demo=True, timeout=5.0)


@pytest.fixture
async def http_client(fake_api: FakeQuestrade) -> AsyncIterator[httpx.AsyncClient]:
    """HTTP client whose requests are answered by the fake servers."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_api.handler)) as client:
        yield client


@pytest.fixture
def client(
    config: QuestradeConfig,
    http_client: httpx.AsyncClient,
    session: AuthenticationSession,
) -> QuestradeClient:
    """Client holding a valid session, wired to the fake servers."""
    return QuestradeClient(config, http_client=http_client, session=session)


@pytest.fixture
def anonymous_client(config: QuestradeConfig, http_client: httpx.AsyncClient) -> QuestradeClient:
    """Client wired to the fake servers, without a session."""
    return QuestradeClient(config, http_client=http_client)
