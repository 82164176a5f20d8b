"""Accounts API endpoints."""

from datetime import datetime
from typing import Any

from questrade_client.api.base import BaseAPI, format_time, require_account_number
from questrade_client.models.accounts import (
    Account,
    AccountActivity,
    AccountBalances,
    AccountListResponse,
    AccountPosition,
    ActivityListResponse,
    PositionListResponse,
)
from questrade_client.models.orders import (
    AccountExecution,
    AccountOrder,
    ExecutionListResponse,
    OrderListResponse,
    OrderStateFilter,
)


class AccountsAPI(BaseAPI):
    """Questrade Accounts API.

    Provides access to accounts, activities, orders, executions, balances
    and positions.
    """

    async def list_accounts(self) -> list[Account]:
        """List all accounts associated with the authenticated user."""
        data = await self._get("accounts")
        return self._decode(AccountListResponse, data).accounts

    async def list_activities(
        self,
        account_number: str,
        start_time: datetime,
        end_time: datetime,
    ) -> list[AccountActivity]:
        """Retrieve account activities (cash transactions, dividends, trades, etc.).

        Args:
            account_number: Account number (e.g., "26598145")
            start_time: Start of the time range
            end_time: End of the time range

        Returns:
            Activities in the range
        """
        require_account_number(account_number)
        params = {
            "startTime": format_time(start_time),
            "endTime": format_time(end_time),
        }

        data = await self._get(f"accounts/{account_number}/activities", params=params)
        return self._decode(ActivityListResponse, data).activities

    async def list_orders(
        self,
        account_number: str,
        *,
        start_time: datetime | None = None,
        end_time: datetime | None = None,
        state: OrderStateFilter | None = None,
    ) -> list[AccountOrder]:
        """Search for account orders.

        Args:
            account_number: Account number
            start_time: Start of time range (server default: start of today)
            end_time: End of time range (server default: end of today)
            state: Filter by order state ("All", "Open" or "Closed")

        Returns:
            Matching orders
        """
        require_account_number(account_number)
        params: dict[str, Any] = {}
        if start_time:
            params["startTime"] = format_time(start_time)
        if end_time:
            params["endTime"] = format_time(end_time)
        if state:
            params["stateFilter"] = OrderStateFilter(state).value

        data = await self._get(f"accounts/{account_number}/orders", params=params)
        return self._decode(OrderListResponse, data).orders

    async def get_order(self, account_number: str, order_id: int) -> AccountOrder | None:
        """Retrieve details for an order with a specific id.

        Returns:
            The order, or None if the server returned no matching order
        """
        require_account_number(account_number)
        data = await self._get(f"accounts/{account_number}/orders/{order_id}")
        orders = self._decode(OrderListResponse, data).orders
        return orders[0] if orders else None

    async def list_executions(
        self,
        account_number: str,
        *,
        start_time: datetime | None = None,
        end_time: datetime | None = None,
    ) -> list[AccountExecution]:
        """Retrieve executions for a specific account.

        Args:
            account_number: Account number
            start_time: Start of time range (server default: start of today)
            end_time: End of time range (server default: end of today)
        """
        require_account_number(account_number)
        params: dict[str, Any] = {}
        if start_time:
            params["startTime"] = format_time(start_time)
        if end_time:
            params["endTime"] = format_time(end_time)

        data = await self._get(f"accounts/{account_number}/executions", params=params)
        return self._decode(ExecutionListResponse, data).executions

    async def get_balances(self, account_number: str) -> AccountBalances:
        """Retrieve per-currency and combined balances for an account."""
        require_account_number(account_number)
        data = await self._get(f"accounts/{account_number}/balances")
        return self._decode(AccountBalances, data)

    async def list_positions(self, account_number: str) -> list[AccountPosition]:
        """Retrieve positions in an account."""
        require_account_number(account_number)
        data = await self._get(f"accounts/{account_number}/positions")
        return self._decode(PositionListResponse, data).positions
