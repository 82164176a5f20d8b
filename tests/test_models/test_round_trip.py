"""Tests that encoding a decoded record gives back an equal record."""

from datetime import UTC, datetime

import pytest

from questrade_client.models import (
    AccountBalances,
    AccountListResponse,
    ActivityListResponse,
    AuthenticationSession,
    ExecutionListResponse,
    OrderListResponse,
    PositionListResponse,
    QuoteListResponse,
    ServerTimeResponse,
    SymbolSearchResponse,
)


class TestRoundTrip:
    """Tests for to_api_dict followed by from_api_response."""

    @pytest.mark.parametrize(
        ("model", "fixture_name"),
        [
            (AccountListResponse, "accounts"),
            (ActivityListResponse, "account-activities"),
            (OrderListResponse, "account-orders"),
            (ExecutionListResponse, "account-executions"),
            (AccountBalances, "account-balances"),
            (PositionListResponse, "account-positions"),
            (QuoteListResponse, "market-quotes"),
            (SymbolSearchResponse, "symbol-search"),
        ],
    )
    def test_response_bodies(self, model, fixture_name: str, fixture_json) -> None:
        """Every response body survives an encode/decode cycle unchanged."""
        record = model.from_api_response(fixture_json(fixture_name))

        assert model.from_api_response(record.to_api_dict()) == record

    def test_server_time(self) -> None:
        """Server time keeps its offset through an encode/decode cycle."""
        record = ServerTimeResponse.from_api_response({"time": "2014-10-24T12:14:42.730000-04:00"})

        assert ServerTimeResponse.from_api_response(record.to_api_dict()) == record

    def test_session(self) -> None:
        """A session survives an encode/decode cycle, tokens included."""
        record = AuthenticationSession(
            refresh_token="aSBe7wAAdx88QTbwut0tiu3SYic3ox8F",
            access_token="C3lTUKuNQrAAmSD/TPjuV/HI7aNrAwDp",
            expires_at=datetime(2024, 1, 15, 15, 0, tzinfo=UTC),
            api_server="https://api01.iq.questrade.com/",
            is_demo=True,
        )

        decoded = AuthenticationSession.from_api_response(record.to_api_dict())

        assert decoded == record
        assert decoded.access_token == "C3lTUKuNQrAAmSD/TPjuV/HI7aNrAwDp"
