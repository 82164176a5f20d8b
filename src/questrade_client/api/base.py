"""Base API client with common functionality."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from questrade_client.config import API_VERSION
from questrade_client.exceptions import QuestradeNotAuthenticatedError, QuestradeValidationError

if TYPE_CHECKING:
    from questrade_client.auth import QuestradeAuth
    from questrade_client.config import QuestradeConfig
    from questrade_client.models.auth import AuthenticationSession
    from questrade_client.models.base import QuestradeModel

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound="QuestradeModel")

# Statuses that mean the access token was rejected
_AUTH_FAILURE_STATUSES = frozenset({401, 403})


def format_time(value: datetime) -> str:
    """Format a datetime as RFC 3339. Naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.isoformat()


def require_account_number(account_number: str) -> str:
    """Reject an empty account number before it turns into a bad URL."""
    if not account_number:
        raise QuestradeValidationError(
            "Account number must not be empty", field="account_number"
        )
    return account_number


class BaseAPI:
    """Base class for Questrade API endpoints.

    Provides the authenticated GET pipeline shared by every endpoint:
    session lookup, URL and header construction, error classification and
    response decoding. Failures are raised once; nothing is retried.
    """

    def __init__(
        self,
        config: QuestradeConfig,
        auth: QuestradeAuth,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = config
        self.auth = auth
        self._http_client = http_client

    def set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Set the shared HTTP client for connection pooling."""
        self._http_client = http_client

    @staticmethod
    def _build_url(session: AuthenticationSession, endpoint: str) -> str:
        """Build ``{api_server}/v1/{endpoint}`` for a session."""
        return f"{session.api_server}/{API_VERSION}/{endpoint.lstrip('/')}"

    async def _get(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Make an authenticated GET request.

        Args:
            endpoint: API endpoint relative to the version root (e.g., "accounts")
            params: Query parameters; None values are dropped

        Returns:
            Parsed JSON response

        Raises:
            QuestradeNotAuthenticatedError: No session, or the server answered 401/403
            httpx.HTTPStatusError: Any other non-2xx status
            httpx.TransportError: Network failure or timeout
        """
        session = await self.auth.active_session()
        url = self._build_url(session, endpoint)

        query_params: dict[str, str] = {}
        if params:
            query_params = {k: str(v) for k, v in params.items() if v is not None}

        headers = self.auth.authorization_headers(session)
        headers["Accept"] = "application/json"

        logger.debug("Request: GET %s", url)
        logger.debug("Params: %s", query_params)

        if self._http_client is not None:
            # Use shared connection pool
            response = await self._http_client.get(
                url,
                params=query_params if query_params else None,
                headers=headers,
            )
        else:
            # Fallback: create per-request client (no pooling)
            async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                response = await client.get(
                    url,
                    params=query_params if query_params else None,
                    headers=headers,
                )

        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> Any:
        """Handle API response, raising appropriate errors."""
        if response.status_code in _AUTH_FAILURE_STATUSES:
            raise QuestradeNotAuthenticatedError(
                f"Access token rejected: {response.status_code}",
                status_code=response.status_code,
            )

        response.raise_for_status()
        return response.json()

    @staticmethod
    def _decode(model: type[ModelT], data: Any) -> ModelT:
        """Decode a response body into its envelope model."""
        return model.from_api_response(data)
