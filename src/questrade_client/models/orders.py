"""Order and execution models."""

from datetime import datetime
from decimal import Decimal
from enum import StrEnum
from typing import Any

from pydantic import AliasChoices, Field, field_validator

from questrade_client.models.base import QuestradeModel, empty_as_none, null_as_zero


class OrderSide(StrEnum):
    """Order side values."""

    BUY = "Buy"
    SELL = "Sell"
    SHORT = "Short"
    COVER = "Cov"
    BUY_TO_OPEN = "BTO"
    SELL_TO_CLOSE = "STC"
    SELL_TO_OPEN = "STO"
    BUY_TO_CLOSE = "BTC"


class OrderType(StrEnum):
    """Order price types."""

    MARKET = "Market"
    LIMIT = "Limit"
    STOP = "Stop"
    STOP_LIMIT = "StopLimit"
    TRAIL_STOP_IN_PERCENTAGE = "TrailStopInPercentage"
    TRAIL_STOP_IN_DOLLAR = "TrailStopInDollar"
    TRAIL_STOP_LIMIT_IN_PERCENTAGE = "TrailStopLimitInPercentage"
    TRAIL_STOP_LIMIT_IN_DOLLAR = "TrailStopLimitInDollar"
    LIMIT_ON_OPEN = "LimitOnOpen"
    LIMIT_ON_CLOSE = "LimitOnClose"


class OrderTimeInForce(StrEnum):
    """Order duration/time-in-force."""

    DAY = "Day"
    GOOD_TILL_CANCELED = "GoodTillCanceled"
    GOOD_TILL_EXTENDED_DAY = "GoodTillExtendedDay"
    GOOD_TILL_DATE = "GoodTillDate"
    IMMEDIATE_OR_CANCEL = "ImmediateOrCancel"
    FILL_OR_KILL = "FillOrKill"


class OrderState(StrEnum):
    """Order state values."""

    FAILED = "Failed"
    PENDING = "Pending"
    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    CANCEL_PENDING = "CancelPending"
    CANCELED = "Canceled"
    PARTIAL_CANCELED = "PartialCanceled"
    PARTIAL = "Partial"
    EXECUTED = "Executed"
    REPLACE_PENDING = "ReplacePending"
    REPLACED = "Replaced"
    STOPPED = "Stopped"
    SUSPENDED = "Suspended"
    EXPIRED = "Expired"
    QUEUED = "Queued"
    TRIGGERED = "Triggered"
    ACTIVATED = "Activated"
    PENDING_RISK_REVIEW = "PendingRiskReview"
    CONTINGENT_ORDER = "ContingentOrder"


class OrderStateFilter(StrEnum):
    """Order state filter for order searches."""

    ALL = "All"
    OPEN = "Open"
    CLOSED = "Closed"


class AccountOrder(QuestradeModel):
    """An order placed in an account."""

    id: int
    symbol: str
    symbol_id: int = Field(alias="symbolId")
    total_quantity: Decimal = Field(alias="totalQuantity")

    # Sent as null on some orders; decoded as zero
    open_quantity: Decimal = Field(alias="openQuantity")
    filled_quantity: Decimal = Field(alias="filledQuantity")
    canceled_quantity: Decimal = Field(alias="canceledQuantity")

    side: OrderSide
    order_type: OrderType = Field(
        validation_alias=AliasChoices("orderType", "type"),
        serialization_alias="orderType",
    )

    # Pricing
    limit_price: Decimal | None = Field(default=None, alias="limitPrice")
    stop_price: Decimal | None = Field(default=None, alias="stopPrice")
    trigger_stop_price: Decimal | None = Field(default=None, alias="triggerStopPrice")

    is_all_or_none: bool = Field(alias="isAllOrNone")
    is_anonymous: bool = Field(alias="isAnonymous")
    iceberg_quantity: Decimal | None = Field(default=None, alias="icebergQuantity")
    min_quantity: Decimal | None = Field(default=None, alias="minQuantity")
    avg_exec_price: Decimal | None = Field(default=None, alias="avgExecPrice")
    last_exec_price: Decimal | None = Field(default=None, alias="lastExecPrice")
    source: str
    time_in_force: OrderTimeInForce = Field(alias="timeInForce")
    gtd_date: datetime | None = Field(default=None, alias="gtdDate")

    # Status
    state: OrderState
    rejection_reason: str | None = Field(
        validation_alias=AliasChoices("clientReasonStr", "rejectionReason"),
        serialization_alias="clientReasonStr",
    )
    chain_id: int = Field(alias="chainId")
    creation_time: datetime = Field(alias="creationTime")
    update_time: datetime = Field(alias="updateTime")
    notes: str | None

    # Routing; empty strings mean "not set" except for the mandatory routes
    primary_route: str = Field(alias="primaryRoute")
    secondary_route: str | None = Field(alias="secondaryRoute")
    order_route: str = Field(alias="orderRoute")
    venue_holding_order: str | None = Field(alias="venueHoldingOrder")

    # Field name is misspelled by the API
    commission_charged: Decimal = Field(alias="comissionCharged")
    placement_commission: Decimal = Field(alias="placementCommission")

    exchange_order_id: str = Field(alias="exchangeOrderId")
    is_significant_shareholder: bool = Field(alias="isSignificantShareHolder")
    is_insider: bool = Field(alias="isInsider")
    is_limit_offset_in_dollar: bool = Field(alias="isLimitOffsetInDollar")
    user_id: int = Field(alias="userId")
    strategy_type: str = Field(alias="strategyType")
    order_group_id: int = Field(alias="orderGroupId")
    order_class: str | None = Field(default=None, alias="orderClass")

    @field_validator(
        "open_quantity",
        "filled_quantity",
        "canceled_quantity",
        "commission_charged",
        "placement_commission",
        mode="before",
    )
    @classmethod
    def parse_nullable_amount(cls, v: Any) -> Any:
        """Treat null quantities and commissions as zero."""
        return null_as_zero(v)

    @field_validator(
        "rejection_reason",
        "notes",
        "secondary_route",
        "venue_holding_order",
        mode="before",
    )
    @classmethod
    def parse_empty_string(cls, v: Any) -> Any:
        """Treat empty strings as absent."""
        return empty_as_none(v)


class OrderListResponse(QuestradeModel):
    """Response from the account orders endpoints."""

    orders: list[AccountOrder]


class AccountExecution(QuestradeModel):
    """A (partial) fill of an order."""

    id: int
    order_id: int = Field(alias="orderId")
    symbol: str
    symbol_id: int = Field(alias="symbolId")
    quantity: Decimal
    side: OrderSide
    price: Decimal
    order_chain_id: int = Field(alias="orderChainId")
    timestamp: datetime
    notes: str | None
    commission: Decimal
    execution_fee: Decimal = Field(alias="executionFee")
    sec_fee: Decimal = Field(alias="secFee")
    canadian_execution_fee: Decimal = Field(alias="canadianExecutionFee")
    parent_id: int = Field(alias="parentId")

    @field_validator("notes", mode="before")
    @classmethod
    def parse_empty_notes(cls, v: Any) -> Any:
        """Treat empty notes as absent."""
        return empty_as_none(v)


class ExecutionListResponse(QuestradeModel):
    """Response from the account executions endpoint."""

    executions: list[AccountExecution]
