"""Questrade API client modules."""

from questrade_client.api.accounts import AccountsAPI
from questrade_client.api.market import MarketAPI
from questrade_client.api.server import ServerAPI
from questrade_client.api.symbols import SymbolsAPI

__all__ = ["AccountsAPI", "MarketAPI", "ServerAPI", "SymbolsAPI"]
