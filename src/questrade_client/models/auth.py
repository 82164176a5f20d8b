"""OAuth token and session models."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from pydantic import Field, field_validator

from questrade_client.models.base import QuestradeModel


class TokenResponse(QuestradeModel):
    """Token exchange response body."""

    refresh_token: str = Field(repr=False, description="Replacement refresh token")
    access_token: str = Field(repr=False, description="Bearer token for API calls")
    expires_in: int = Field(ge=0, description="Access token lifetime in seconds")
    api_server: str = Field(description="Base URL for API calls")


class AuthenticationSession(QuestradeModel):
    """Authenticated credential bundle.

    A session is always fully populated: the access token and the API server
    it is valid for are replaced together by swapping the whole object.
    """

    refresh_token: str = Field(repr=False, description="Token used to obtain the next session")
    access_token: str = Field(repr=False, description="Bearer token for API calls")
    expires_at: datetime = Field(description="Instant the access token expires")
    api_server: str = Field(description="Base URL for API calls, no trailing slash")
    is_demo: bool = Field(description="Whether the session targets the practice environment")

    @field_validator("api_server")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @classmethod
    def from_token_response(
        cls,
        response: TokenResponse,
        *,
        is_demo: bool,
        captured_at: datetime | None = None,
    ) -> AuthenticationSession:
        """Build a session from a token exchange response.

        Args:
            response: Decoded token exchange body
            is_demo: Environment the exchange was made against
            captured_at: Instant the response was received (default: now, UTC)
        """
        captured_at = captured_at or datetime.now(UTC)
        return cls(
            refresh_token=response.refresh_token,
            access_token=response.access_token,
            expires_at=captured_at + timedelta(seconds=response.expires_in),
            api_server=response.api_server,
            is_demo=is_demo,
        )

    def expires_in(self, now: datetime | None = None) -> timedelta:
        """Time left before the access token expires (negative once expired)."""
        return self.expires_at - (now or datetime.now(UTC))

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check whether the access token has passed its expiry instant.

        Informational only: requests are still sent with an expired token and
        fail when the server rejects it.
        """
        return self.expires_in(now) <= timedelta(0)
