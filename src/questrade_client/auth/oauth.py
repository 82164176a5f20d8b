"""OAuth2 refresh-token authentication for Questrade API."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

import httpx

from questrade_client.exceptions import QuestradeNotAuthenticatedError, QuestradeValidationError
from questrade_client.models.auth import AuthenticationSession, TokenResponse

if TYPE_CHECKING:
    from questrade_client.config import QuestradeConfig

logger = logging.getLogger(__name__)


class QuestradeAuth:
    """Refresh-token authentication handler for Questrade API.

    Owns the client's single session slot. A refresh token is exchanged at
    the practice or live login server for an access token, the API server to
    use with it, and a replacement refresh token. Every exchange rotates the
    refresh token: keep the one from the latest session if you intend to
    authenticate again later.

    The slot is read and replaced under a lock, so a request in flight always
    carries a complete session even while another task re-authenticates.
    Nothing here refreshes automatically; an expired access token is only
    detected when the server rejects it.
    """

    def __init__(
        self,
        config: QuestradeConfig,
        http_client: httpx.AsyncClient | None = None,
        *,
        session: AuthenticationSession | None = None,
    ) -> None:
        self.config = config
        self._http_client = http_client
        self._session = session
        self._lock = asyncio.Lock()

    def set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Set the shared HTTP client for connection pooling."""
        self._http_client = http_client

    @property
    def session(self) -> AuthenticationSession | None:
        """Get the current session, if any.

        Sessions are immutable, so the returned object is a stable snapshot.
        """
        return self._session

    @property
    def is_authenticated(self) -> bool:
        """Check if a session is set (it may still be expired)."""
        return self._session is not None

    async def set_session(self, session: AuthenticationSession | None) -> None:
        """Replace the current session (e.g., one obtained elsewhere)."""
        async with self._lock:
            self._session = session

    async def clear(self) -> None:
        """Discard the current session."""
        await self.set_session(None)

    async def active_session(self) -> AuthenticationSession:
        """Get the session to use for a request.

        Only the absence of a session is checked here; the expiry time is not.

        Raises:
            QuestradeNotAuthenticatedError: If no session is set (status 401)
        """
        async with self._lock:
            session = self._session
        if session is None:
            raise QuestradeNotAuthenticatedError(
                "Not authenticated. Call authenticate() with a refresh token first.",
                status_code=401,
            )
        return session

    async def authenticate(
        self,
        refresh_token: str,
        *,
        is_demo: bool | None = None,
    ) -> AuthenticationSession:
        """Exchange a refresh token and make the result the current session.

        Args:
            refresh_token: Refresh token from the Questrade API hub (or a previous session)
            is_demo: Use the practice environment (default: ``config.is_demo``)

        Returns:
            The new session, which replaces any previous one
        """
        if is_demo is None:
            is_demo = self.config.is_demo

        session = await self.exchange_refresh_token(refresh_token, is_demo=is_demo)
        await self.set_session(session)
        return session

    async def refresh(self) -> AuthenticationSession:
        """Exchange the current session's refresh token for a new session.

        Raises:
            QuestradeNotAuthenticatedError: If no session is set
        """
        current = await self.active_session()
        session = await self.refresh_session(current)
        await self.set_session(session)
        return session

    async def refresh_session(self, session: AuthenticationSession) -> AuthenticationSession:
        """Exchange a session's refresh token, keeping its environment.

        Does not touch the current session slot.
        """
        return await self.exchange_refresh_token(session.refresh_token, is_demo=session.is_demo)

    async def exchange_refresh_token(
        self,
        refresh_token: str,
        *,
        is_demo: bool,
    ) -> AuthenticationSession:
        """Exchange a refresh token at the environment's login server.

        Does not touch the current session slot.

        Args:
            refresh_token: Refresh token to exchange
            is_demo: Use the practice login server instead of the live one

        Returns:
            A fully populated session

        Raises:
            QuestradeValidationError: If the refresh token is empty
            httpx.HTTPStatusError: If the login server answers with a non-2xx status
            QuestradeMissingFieldError: If the response lacks a token field
            QuestradeInvalidTypeError: If a token field has the wrong type
        """
        if not refresh_token:
            raise QuestradeValidationError("Refresh token must not be empty", field="refresh_token")

        url = self.config.token_url_for(is_demo)
        params = {"grant_type": "refresh_token", "refresh_token": refresh_token}
        headers = {"Content-Length": "0", "Accept": "application/json"}

        logger.debug("Token exchange: POST %s (demo=%s)", url, is_demo)

        if self._http_client is not None:
            response = await self._http_client.post(url, params=params, headers=headers)
        else:
            async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                response = await client.post(url, params=params, headers=headers)

        captured_at = datetime.now(UTC)

        # Failures here are not reinterpreted: there is no session to invalidate yet
        response.raise_for_status()

        token = TokenResponse.from_api_response(response.json())
        session = AuthenticationSession.from_token_response(
            token, is_demo=is_demo, captured_at=captured_at
        )

        logger.info(
            "Authenticated against %s (demo=%s), access token expires at %s",
            session.api_server,
            is_demo,
            session.expires_at.isoformat(),
        )
        return session

    @staticmethod
    def authorization_headers(session: AuthenticationSession) -> dict[str, str]:
        """Build the bearer Authorization header for a session."""
        return {"Authorization": f"Bearer {session.access_token}"}
