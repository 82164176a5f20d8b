"""Refresh-token authentication for Questrade API."""

from questrade_client.auth.oauth import QuestradeAuth

__all__ = ["QuestradeAuth"]
