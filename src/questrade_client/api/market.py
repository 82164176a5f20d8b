"""Market data API endpoints."""

from collections.abc import Sequence

from questrade_client.api.base import BaseAPI
from questrade_client.exceptions import QuestradeValidationError
from questrade_client.models.market import MarketQuote, QuoteListResponse


class MarketAPI(BaseAPI):
    """Questrade Market Data API.

    Without a real-time data package each call is a snap quote, and once the
    per-market limit is reached the server returns delayed data. Check
    ``MarketQuote.delay``.
    """

    async def get_quotes(self, symbol_ids: Sequence[int]) -> list[MarketQuote]:
        """Get Level 1 quotes for one or more symbols.

        Args:
            symbol_ids: Internal symbol ids (see SymbolsAPI.search)

        Returns:
            One quote per symbol
        """
        if not symbol_ids:
            raise QuestradeValidationError("At least one symbol id is required", field="symbol_ids")

        params = {"ids": ",".join(str(symbol_id) for symbol_id in symbol_ids)}

        data = await self._get("markets/quotes", params=params)
        return self._decode(QuoteListResponse, data).quotes

    async def get_quote(self, symbol_id: int) -> MarketQuote | None:
        """Get a Level 1 quote for a single symbol, or None if not returned."""
        quotes = await self.get_quotes([symbol_id])
        return quotes[0] if quotes else None
