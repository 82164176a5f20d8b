"""Tests for error handling and exception classes."""

from unittest.mock import MagicMock

import httpx
import pytest
from httpx import Request, Response

from questrade_client.api.base import BaseAPI
from questrade_client.exceptions import (
    QuestradeDecodeError,
    QuestradeError,
    QuestradeInvalidTypeError,
    QuestradeMissingFieldError,
    QuestradeNotAuthenticatedError,
    QuestradeValidationError,
)

URL = "https://api01.iq.questrade.com/v1/accounts"


class TestExceptionHierarchy:
    """Tests for exception class hierarchy."""

    def test_questrade_error_is_base(self) -> None:
        """All exceptions should inherit from QuestradeError."""
        assert issubclass(QuestradeDecodeError, QuestradeError)
        assert issubclass(QuestradeNotAuthenticatedError, QuestradeError)
        assert issubclass(QuestradeValidationError, QuestradeError)

    def test_decode_errors(self) -> None:
        """Missing fields and invalid types are both decode errors."""
        assert issubclass(QuestradeMissingFieldError, QuestradeDecodeError)
        assert issubclass(QuestradeInvalidTypeError, QuestradeDecodeError)

    def test_http_errors_stay_outside_hierarchy(self) -> None:
        """Non-auth HTTP failures are httpx's own errors."""
        assert not issubclass(httpx.HTTPStatusError, QuestradeError)


class TestQuestradeError:
    """Tests for base QuestradeError."""

    def test_stores_message(self) -> None:
        """Should store the error message."""
        error = QuestradeError("Something went wrong")

        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"


class TestDecodeErrors:
    """Tests for decode error messages."""

    def test_missing_field(self) -> None:
        """Should name the missing field."""
        error = QuestradeMissingFieldError("accounts.0.number")

        assert error.field == "accounts.0.number"
        assert str(error) == "Missing field in json response: accounts.0.number"

    def test_invalid_type(self) -> None:
        """Should name the field and the type it should have had."""
        error = QuestradeInvalidTypeError("quotes.0.delay", "bool")

        assert error.field == "quotes.0.delay"
        assert error.expected_type == "bool"
        assert str(error) == "Cannot convert field quotes.0.delay to type bool"

    def test_can_catch_as_decode_error(self) -> None:
        """Should be catchable as QuestradeDecodeError."""
        with pytest.raises(QuestradeDecodeError):
            raise QuestradeMissingFieldError("time")


class TestQuestradeNotAuthenticatedError:
    """Tests for QuestradeNotAuthenticatedError."""

    def test_defaults_to_401(self) -> None:
        """Should default status code to 401."""
        error = QuestradeNotAuthenticatedError()

        assert error.status_code == 401
        assert error.message == "Not authenticated"

    def test_stores_status_code(self) -> None:
        """Should store the HTTP status code."""
        error = QuestradeNotAuthenticatedError("Forbidden", status_code=403)

        assert error.status_code == 403


class TestQuestradeValidationError:
    """Tests for QuestradeValidationError."""

    def test_stores_field(self) -> None:
        """Should store the invalid field name."""
        error = QuestradeValidationError("Offset must not be negative", field="offset")

        assert error.field == "offset"
        assert error.message == "Offset must not be negative"

    def test_field_is_optional(self) -> None:
        """Field should be None by default."""
        error = QuestradeValidationError("Validation failed")

        assert error.field is None


class TestHandleResponse:
    """Tests for BaseAPI._handle_response method."""

    @pytest.fixture
    def base_api(self) -> BaseAPI:
        """Create a BaseAPI instance for testing."""
        config = MagicMock()
        auth = MagicMock()
        return BaseAPI(config, auth)

    def test_returns_json_on_success(self, base_api: BaseAPI) -> None:
        """Should return parsed JSON on 2xx response."""
        response = Response(
            200,
            json={"time": "2014-10-24T12:14:42.730000-04:00"},
            request=Request("GET", URL),
        )

        result = base_api._handle_response(response)

        assert result == {"time": "2014-10-24T12:14:42.730000-04:00"}

    @pytest.mark.parametrize("status_code", [401, 403])
    def test_raises_not_authenticated(self, base_api: BaseAPI, status_code: int) -> None:
        """Should raise QuestradeNotAuthenticatedError on 401 and 403."""
        response = Response(
            status_code,
            json={"code": 1017, "message": "Access token is invalid"},
            request=Request("GET", URL),
        )

        with pytest.raises(QuestradeNotAuthenticatedError) as exc_info:
            base_api._handle_response(response)

        assert exc_info.value.status_code == status_code

    @pytest.mark.parametrize("status_code", [400, 404, 429, 500, 502])
    def test_raises_status_error_unchanged(self, base_api: BaseAPI, status_code: int) -> None:
        """Other failures should propagate as httpx.HTTPStatusError."""
        response = Response(status_code, text="error", request=Request("GET", URL))

        with pytest.raises(httpx.HTTPStatusError) as exc_info:
            base_api._handle_response(response)

        assert exc_info.value.response is response

    def test_invalid_json_on_success(self, base_api: BaseAPI) -> None:
        """A 2xx body that is not JSON should not be swallowed."""
        response = Response(200, text="<html>maintenance</html>", request=Request("GET", URL))

        with pytest.raises(ValueError):
            base_api._handle_response(response)
