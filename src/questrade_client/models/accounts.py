"""Account-related models."""

from datetime import datetime
from decimal import Decimal
from enum import StrEnum

from pydantic import Field

from questrade_client.models.base import QuestradeModel


class AccountType(StrEnum):
    """Questrade account types."""

    CASH = "Cash"
    MARGIN = "Margin"
    TFSA = "TFSA"  # Tax Free Savings Account
    RRSP = "RRSP"  # Registered Retirement Savings Plan
    SRRSP = "SRRSP"  # Spousal RRSP
    LRRSP = "LRRSP"  # Locked-In RRSP
    LIRA = "LIRA"  # Locked-In Retirement Account
    LIF = "LIF"  # Life Income Fund
    RIF = "RIF"  # Retirement Income Fund
    SRIF = "SRIF"  # Spousal RIF
    LRIF = "LRIF"  # Locked-In RIF
    RRIF = "RRIF"  # Registered RIF
    PRIF = "PRIF"  # Prescribed RIF
    RESP = "RESP"  # Individual Registered Education Savings Plan
    FRESP = "FRESP"  # Family RESP


class AccountStatus(StrEnum):
    """Account status values."""

    ACTIVE = "Active"
    SUSPENDED_CLOSED = "Suspended (Closed)"
    SUSPENDED_VIEW_ONLY = "Suspended (View Only)"
    LIQUIDATE_ONLY = "Liquidate Only"
    CLOSED = "Closed"


class ClientAccountType(StrEnum):
    """Type of client holding the account."""

    INDIVIDUAL = "Individual"
    JOINT = "Joint"
    INFORMAL_TRUST = "Informal Trust"
    CORPORATION = "Corporation"
    INVESTMENT_CLUB = "Investment Club"
    FORMAL_TRUST = "Formal Trust"
    PARTNERSHIP = "Partnership"
    SOLE_PROPRIETORSHIP = "Sole Proprietorship"
    FAMILY = "Family"
    JOINT_AND_INFORMAL_TRUST = "Joint and Informal Trust"
    INSTITUTION = "Institution"


class Currency(StrEnum):
    """Supported currencies."""

    CAD = "CAD"
    USD = "USD"


class Account(QuestradeModel):
    """Questrade account information."""

    account_type: AccountType = Field(alias="type")
    number: str
    status: AccountStatus
    is_primary: bool = Field(alias="isPrimary")
    is_billing: bool = Field(alias="isBilling")
    client_account_type: ClientAccountType = Field(alias="clientAccountType")


class AccountListResponse(QuestradeModel):
    """Response from the accounts endpoint."""

    accounts: list[Account]


class AccountActivity(QuestradeModel):
    """An activity that occurred in an account (trade, dividend, deposit...)."""

    trade_date: datetime = Field(alias="tradeDate")
    transaction_date: datetime = Field(alias="transactionDate")
    settlement_date: datetime = Field(alias="settlementDate")
    action: str
    symbol: str
    symbol_id: int = Field(alias="symbolId")
    description: str
    currency: str
    quantity: Decimal
    price: Decimal
    gross_amount: Decimal = Field(alias="grossAmount")
    commission: Decimal
    net_amount: Decimal = Field(alias="netAmount")
    activity_type: str = Field(alias="type")


class ActivityListResponse(QuestradeModel):
    """Response from the account activities endpoint."""

    activities: list[AccountActivity]


class AccountBalance(QuestradeModel):
    """Balance figures for one currency."""

    currency: Currency
    cash: Decimal
    market_value: Decimal = Field(alias="marketValue")
    total_equity: Decimal = Field(alias="totalEquity")
    buying_power: Decimal = Field(alias="buyingPower")
    maintenance_excess: Decimal = Field(alias="maintenanceExcess")
    is_real_time: bool = Field(alias="isRealTime")


class AccountBalances(QuestradeModel):
    """Per-currency and combined balances, current and start-of-day.

    The balances endpoint returns this shape as the whole body, without an
    envelope field.
    """

    per_currency_balances: list[AccountBalance] = Field(alias="perCurrencyBalances")
    combined_balances: list[AccountBalance] = Field(alias="combinedBalances")
    sod_per_currency_balances: list[AccountBalance] = Field(alias="sodPerCurrencyBalances")
    sod_combined_balances: list[AccountBalance] = Field(alias="sodCombinedBalances")

    def combined(self, currency: Currency) -> AccountBalance | None:
        """Get the combined balance expressed in a currency, if reported."""
        return next((b for b in self.combined_balances if b.currency == currency), None)

    def per_currency(self, currency: Currency) -> AccountBalance | None:
        """Get the balance held in a currency, if reported."""
        return next((b for b in self.per_currency_balances if b.currency == currency), None)


class AccountPosition(QuestradeModel):
    """A position held in an account."""

    symbol: str
    symbol_id: int = Field(alias="symbolId")
    open_quantity: Decimal = Field(alias="openQuantity")
    closed_quantity: Decimal = Field(alias="closedQuantity")
    current_market_value: Decimal = Field(alias="currentMarketValue")
    current_price: Decimal = Field(alias="currentPrice")
    average_entry_price: Decimal = Field(alias="averageEntryPrice")
    closed_pnl: Decimal = Field(alias="closedPnl")
    open_pnl: Decimal = Field(alias="openPnl")
    total_cost: Decimal = Field(alias="totalCost")
    is_real_time: bool = Field(alias="isRealTime")
    is_under_reorg: bool = Field(alias="isUnderReorg")


class PositionListResponse(QuestradeModel):
    """Response from the account positions endpoint."""

    positions: list[AccountPosition]
