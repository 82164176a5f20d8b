"""Typed exceptions for Questrade API client."""


class QuestradeError(Exception):
    """Base exception for all Questrade client errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class QuestradeDecodeError(QuestradeError):
    """A response body could not be decoded into the expected model."""

    def __init__(self, message: str, *, field: str) -> None:
        self.field = field
        super().__init__(message)


class QuestradeMissingFieldError(QuestradeDecodeError):
    """A field required to build a domain value is absent from the response."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing field in json response: {field}", field=field)


class QuestradeInvalidTypeError(QuestradeDecodeError):
    """A field is present but cannot be converted to the required type."""

    def __init__(self, field: str, expected_type: str) -> None:
        self.expected_type = expected_type
        super().__init__(f"Cannot convert field {field} to type {expected_type}", field=field)


class QuestradeNotAuthenticatedError(QuestradeError):
    """No session is set, or the server rejected the access token (401/403)."""

    def __init__(self, message: str = "Not authenticated", *, status_code: int = 401) -> None:
        self.status_code = status_code
        super().__init__(message)


class QuestradeValidationError(QuestradeError):
    """Request validation error before sending to API."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)
