"""Server API endpoints."""

from datetime import datetime

from questrade_client.api.base import BaseAPI
from questrade_client.models.market import ServerTimeResponse


class ServerAPI(BaseAPI):
    """Questrade server information."""

    async def get_server_time(self) -> datetime:
        """Retrieve the current server time."""
        data = await self._get("time")
        return self._decode(ServerTimeResponse, data).time
