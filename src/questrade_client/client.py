"""Main Questrade client."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from questrade_client.api.accounts import AccountsAPI
from questrade_client.api.market import MarketAPI
from questrade_client.api.server import ServerAPI
from questrade_client.api.symbols import SymbolsAPI
from questrade_client.auth import QuestradeAuth
from questrade_client.config import QuestradeConfig

if TYPE_CHECKING:
    from datetime import datetime
    from types import TracebackType

    from questrade_client.models.auth import AuthenticationSession


class QuestradeClient:
    """Questrade API client.

    Provides a unified interface to Questrade's APIs with refresh-token
    authentication. The client holds at most one session; every request
    uses a snapshot of it taken when the request starts.

    Usage (context manager - recommended for connection pooling):
        async with QuestradeClient(QuestradeConfig(is_demo=True)) as client:
            session = await client.authenticate(refresh_token)
            save_somewhere(session.refresh_token)  # the old token is now spent
            accounts = await client.accounts.list_accounts()

    Usage (explicit lifecycle):
        client = QuestradeClient()
        await client.open()
        try:
            await client.authenticate(refresh_token)
            positions = await client.accounts.list_positions("26598145")
        finally:
            await client.close()

    Usage (external HTTP client - shared across integrations):
        http_client = httpx.AsyncClient(timeout=30.0)
        client = QuestradeClient(config, http_client=http_client)
        # Client uses shared pool, doesn't close it

    Usage (no pooling - creates connection per request):
        client = QuestradeClient(config)
        accounts = await client.accounts.list_accounts()  # Per-request connection
    """

    def __init__(
        self,
        config: QuestradeConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        session: AuthenticationSession | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Questrade configuration (defaults to the live environment)
            http_client: Optional httpx.AsyncClient for connection pooling.
                        If provided, the client will use this pool and NOT close it.
                        If not provided, use open()/close() or context manager to
                        enable pooling, or each request creates its own connection.
            session: Optional session obtained earlier (e.g., by another client)
        """
        self.config = config or QuestradeConfig()
        self.auth = QuestradeAuth(self.config, http_client, session=session)

        # HTTP client management
        self._http_client = http_client
        self._owns_http_client = http_client is None  # We manage lifecycle if not provided

        # Initialize API modules
        self.accounts = AccountsAPI(self.config, self.auth, http_client)
        self.markets = MarketAPI(self.config, self.auth, http_client)
        self.symbols = SymbolsAPI(self.config, self.auth, http_client)
        self.server = ServerAPI(self.config, self.auth, http_client)

    def _set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Update HTTP client on the auth handler and all API modules."""
        self._http_client = http_client
        self.auth.set_http_client(http_client)
        self.accounts.set_http_client(http_client)
        self.markets.set_http_client(http_client)
        self.symbols.set_http_client(http_client)
        self.server.set_http_client(http_client)

    async def open(self) -> None:
        """Open connection pool for HTTP requests.

        Creates a shared httpx.AsyncClient for connection pooling.
        Only needed if not using context manager or external http_client.
        """
        if self._http_client is None and self._owns_http_client:
            http_client = httpx.AsyncClient(timeout=self.config.timeout)
            self._set_http_client(http_client)

    async def close(self) -> None:
        """Close connection pool.

        Only closes the pool if this client owns it (not external).
        """
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._set_http_client(None)

    async def __aenter__(self) -> QuestradeClient:
        """Async context manager entry - opens connection pool."""
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Async context manager exit - closes connection pool."""
        await self.close()

    @classmethod
    def from_env(cls) -> QuestradeClient:
        """Create client from environment variables.

        See QuestradeConfig.from_env for the variables read.
        """
        config = QuestradeConfig.from_env()
        return cls(config)

    @property
    def is_authenticated(self) -> bool:
        """Check if the client holds a session."""
        return self.auth.is_authenticated

    @property
    def session(self) -> AuthenticationSession | None:
        """Get the current session, if any."""
        return self.auth.session

    async def authenticate(
        self,
        refresh_token: str,
        *,
        is_demo: bool | None = None,
    ) -> AuthenticationSession:
        """Authenticate with a refresh token.

        The returned session carries a new refresh token that supersedes the
        one passed in. Persist it if you want to authenticate again later.

        Args:
            refresh_token: Refresh token to exchange
            is_demo: Use the practice environment (default: ``config.is_demo``)
        """
        return await self.auth.authenticate(refresh_token, is_demo=is_demo)

    async def refresh(self) -> AuthenticationSession:
        """Exchange the current session's refresh token for a new session.

        Never called automatically: an expired access token surfaces as
        QuestradeNotAuthenticatedError from the request that used it.
        """
        return await self.auth.refresh()

    async def set_session(self, session: AuthenticationSession | None) -> None:
        """Set the session directly (e.g., one obtained by another client)."""
        await self.auth.set_session(session)

    async def clear_session(self) -> None:
        """Discard the current session."""
        await self.auth.clear()

    async def time(self) -> datetime:
        """Retrieve the current server time."""
        return await self.server.get_server_time()
