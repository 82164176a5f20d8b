"""Market data and symbol models."""

from datetime import datetime
from decimal import Decimal
from enum import StrEnum
from typing import Any

from pydantic import Field, field_serializer, field_validator
from pydantic_core import PydanticCustomError

from questrade_client.models.accounts import Currency
from questrade_client.models.base import QuestradeModel, empty_as_none


class TickType(StrEnum):
    """Direction of the last trade relative to the one before it."""

    UP = "Up"
    DOWN = "Down"
    EQUAL = "Equal"


class SecurityType(StrEnum):
    """Security types."""

    STOCK = "Stock"
    OPTION = "Option"
    BOND = "Bond"
    RIGHT = "Right"
    GOLD = "Gold"
    MUTUAL_FUND = "MutualFund"
    INDEX = "Index"


class ListingExchange(StrEnum):
    """Primary listing exchanges."""

    TSX = "TSX"
    TSXI = "TSXI"
    TSXV = "TSXV"
    CNSX = "CNSX"
    MX = "MX"
    NASDAQ = "NASDAQ"
    NASDAQI = "NASDAQI"
    NYSE = "NYSE"
    NYSEAM = "NYSEAM"
    NYSEGIF = "NYSEGIF"
    ARCA = "ARCA"
    OPRA = "OPRA"
    PINK_SHEETS = "PINX"
    OTCBB = "OTCBB"
    BATS = "BATS"
    DOW_JONES_AVERAGE = "DJI"
    SP = "S&P"
    NEO = "NEO"
    RUSSELL = "RUSSELL"
    NONE = ""  # Not listed; sent as an empty string


class MarketQuote(QuestradeModel):
    """Level 1 market data quote."""

    symbol: str
    symbol_id: int = Field(alias="symbolId")
    tier: str | None

    # Bid/Ask
    bid_price: Decimal | None = Field(default=None, alias="bidPrice")
    bid_size: int = Field(ge=0, alias="bidSize")
    ask_price: Decimal | None = Field(default=None, alias="askPrice")
    ask_size: int = Field(ge=0, alias="askSize")

    # Last trade
    last_trade_price_tr_hrs: Decimal = Field(alias="lastTradePriceTrHrs")
    last_trade_price: Decimal = Field(alias="lastTradePrice")
    last_trade_size: int = Field(ge=0, alias="lastTradeSize")
    last_trade_tick: TickType = Field(alias="lastTradeTick")

    # Day range
    volume: int = Field(ge=0)
    open_price: Decimal = Field(alias="openPrice")
    high_price: Decimal = Field(alias="highPrice")
    low_price: Decimal = Field(alias="lowPrice")

    # Sent as 0/1
    delay: bool
    is_halted: bool = Field(alias="isHalted")

    @field_validator("tier", mode="before")
    @classmethod
    def parse_empty_tier(cls, v: Any) -> Any:
        """Treat an empty tier as absent."""
        return empty_as_none(v)

    @field_validator("delay", mode="before")
    @classmethod
    def parse_delay(cls, v: Any) -> bool:
        """Convert the API's 0/1 delay indicator to boolean.

        Any other value is rejected rather than clamped.
        """
        if type(v) is int and v in (0, 1):
            return bool(v)
        raise PydanticCustomError(
            "delay_flag",
            "expected delay to be 0 or 1, got {value}",
            {"value": v},
        )

    @field_serializer("delay")
    def serialize_delay(self, v: bool) -> int:
        return int(v)


class QuoteListResponse(QuestradeModel):
    """Response from the market quotes endpoint."""

    quotes: list[MarketQuote]


class SearchEquitySymbol(QuestradeModel):
    """Symbol search result."""

    symbol: str
    symbol_id: int = Field(alias="symbolId")
    description: str
    security_type: SecurityType = Field(alias="securityType")
    listing_exchange: ListingExchange = Field(alias="listingExchange")
    is_quotable: bool = Field(alias="isQuotable")
    is_tradable: bool = Field(alias="isTradable")
    currency: Currency


class SymbolSearchResponse(QuestradeModel):
    """Response from the symbol search endpoint."""

    symbols: list[SearchEquitySymbol]


class ServerTimeResponse(QuestradeModel):
    """Response from the server time endpoint."""

    time: datetime
