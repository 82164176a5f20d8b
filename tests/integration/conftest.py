"""Pytest configuration for integration tests.

Integration tests require:
- QUESTRADE_PRACTICE_REFRESH_TOKEN environment variable, or a refresh token
  saved by a previous run

Environment variables can be set via:
- .env.integration file (loaded if present)
- Shell environment
- CI/CD secrets
"""

from __future__ import annotations

import asyncio
import os
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from questrade_client import AuthenticationSession, QuestradeClient, QuestradeConfig

# Attempt to load .env.integration if it exists (optional)
try:
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent.parent / ".env.integration"
    if env_file.exists():
        load_dotenv(env_file)
except ImportError:
    pass


# Rotated refresh token storage for integration tests
INTEGRATION_TOKEN_PATH = Path(__file__).parent / ".refresh_token"


def _load_refresh_token() -> str:
    """Get the newest refresh token, or skip."""
    if INTEGRATION_TOKEN_PATH.exists():
        token = INTEGRATION_TOKEN_PATH.read_text().strip()
        if token:
            return token

    token = os.environ.get("QUESTRADE_PRACTICE_REFRESH_TOKEN")
    if not token:
        pytest.skip("Missing required environment variable: QUESTRADE_PRACTICE_REFRESH_TOKEN")
    return token


@pytest.fixture(scope="session")
def integration_config() -> QuestradeConfig:
    """Get Questrade configuration for integration tests."""
    from questrade_client import QuestradeConfig

    config = QuestradeConfig(is_demo=True)

    assert "practicelogin" in config.token_url, "Integration tests must use the practice environment"
    return config


@pytest.fixture(scope="session")
def integration_session(integration_config: QuestradeConfig) -> AuthenticationSession:
    """Exchange the refresh token once per test run.

    The replacement refresh token is saved immediately, since the one just
    used is no longer valid.
    """
    from questrade_client.auth import QuestradeAuth

    auth = QuestradeAuth(integration_config)
    loop = asyncio.new_event_loop()
    try:
        session = loop.run_until_complete(
            auth.exchange_refresh_token(_load_refresh_token(), is_demo=True)
        )
    finally:
        loop.close()

    INTEGRATION_TOKEN_PATH.write_text(session.refresh_token)
    return session


@pytest.fixture
async def async_integration_client(
    integration_config: QuestradeConfig,
    integration_session: AuthenticationSession,
) -> AsyncIterator[QuestradeClient]:
    """Get an authenticated Questrade client for integration tests.

    Note: Function-scoped because httpx.AsyncClient must be created
    in the same event loop where it will be used.
    """
    from questrade_client import QuestradeClient

    async with QuestradeClient(integration_config, session=integration_session) as client:
        yield client


@pytest.fixture
async def account_number(async_integration_client: QuestradeClient) -> str:
    """Number of the first practice account."""
    accounts = await async_integration_client.accounts.list_accounts()
    if not accounts:
        pytest.skip("Practice login has no accounts")
    return accounts[0].number
