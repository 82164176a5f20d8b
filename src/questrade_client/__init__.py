"""Questrade API client library.

A fully typed, async Python client for Questrade's REST API.

Example:
    from questrade_client import QuestradeClient, QuestradeConfig

    # Practice account
    config = QuestradeConfig(is_demo=True)

    async with QuestradeClient(config) as client:
        # Exchange a refresh token generated in the API hub
        session = await client.authenticate(refresh_token)

        # The refresh token rotates on every exchange: keep the new one
        refresh_token = session.refresh_token

        accounts = await client.accounts.list_accounts()
        balances = await client.accounts.get_balances(accounts[0].number)
        symbols = await client.symbols.search("AAPL")
        quotes = await client.markets.get_quotes([s.symbol_id for s in symbols])
"""

from questrade_client.client import QuestradeClient
from questrade_client.config import API_VERSION, QuestradeConfig, refresh_token_from_env
from questrade_client.exceptions import (
    QuestradeDecodeError,
    QuestradeError,
    QuestradeInvalidTypeError,
    QuestradeMissingFieldError,
    QuestradeNotAuthenticatedError,
    QuestradeValidationError,
)
from questrade_client.models.auth import AuthenticationSession
from questrade_client.models.orders import OrderStateFilter

__version__ = "0.1.0"

__all__ = [
    # Main client
    "QuestradeClient",
    "QuestradeConfig",
    "API_VERSION",
    "refresh_token_from_env",
    # Session
    "AuthenticationSession",
    # Enums (commonly used)
    "OrderStateFilter",
    # Exceptions
    "QuestradeDecodeError",
    "QuestradeError",
    "QuestradeInvalidTypeError",
    "QuestradeMissingFieldError",
    "QuestradeNotAuthenticatedError",
    "QuestradeValidationError",
]
