"""Pydantic models for Questrade API responses."""

from questrade_client.models.accounts import (
    Account,
    AccountActivity,
    AccountBalance,
    AccountBalances,
    AccountListResponse,
    AccountPosition,
    AccountStatus,
    AccountType,
    ActivityListResponse,
    ClientAccountType,
    Currency,
    PositionListResponse,
)
from questrade_client.models.auth import AuthenticationSession, TokenResponse
from questrade_client.models.base import QuestradeModel
from questrade_client.models.market import (
    ListingExchange,
    MarketQuote,
    QuoteListResponse,
    SearchEquitySymbol,
    SecurityType,
    ServerTimeResponse,
    SymbolSearchResponse,
    TickType,
)
from questrade_client.models.orders import (
    AccountExecution,
    AccountOrder,
    ExecutionListResponse,
    OrderListResponse,
    OrderSide,
    OrderState,
    OrderStateFilter,
    OrderTimeInForce,
    OrderType,
)

__all__ = [
    # Base
    "QuestradeModel",
    # Auth
    "AuthenticationSession",
    "TokenResponse",
    # Account enums
    "AccountStatus",
    "AccountType",
    "ClientAccountType",
    "Currency",
    # Account models
    "Account",
    "AccountActivity",
    "AccountBalance",
    "AccountBalances",
    "AccountListResponse",
    "AccountPosition",
    "ActivityListResponse",
    "PositionListResponse",
    # Order enums
    "OrderSide",
    "OrderState",
    "OrderStateFilter",
    "OrderTimeInForce",
    "OrderType",
    # Order models
    "AccountExecution",
    "AccountOrder",
    "ExecutionListResponse",
    "OrderListResponse",
    # Market enums
    "ListingExchange",
    "SecurityType",
    "TickType",
    # Market models
    "MarketQuote",
    "QuoteListResponse",
    "SearchEquitySymbol",
    "ServerTimeResponse",
    "SymbolSearchResponse",
]
