"""Symbols API endpoints."""

from questrade_client.api.base import BaseAPI
from questrade_client.exceptions import QuestradeValidationError
from questrade_client.models.market import SearchEquitySymbol, SymbolSearchResponse


class SymbolsAPI(BaseAPI):
    """Questrade Symbols API."""

    async def search(self, prefix: str, offset: int = 0) -> list[SearchEquitySymbol]:
        """Search for symbols.

        Args:
            prefix: Prefix of a symbol or any word in the description
            offset: Offset in number of records from the start of the result set

        Returns:
            Matching symbols
        """
        if offset < 0:
            raise QuestradeValidationError("Offset must not be negative", field="offset")

        data = await self._get("symbols/search", params={"prefix": prefix, "offset": offset})
        return self._decode(SymbolSearchResponse, data).symbols
