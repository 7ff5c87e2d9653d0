"""HTTP client for the Mobilités M API."""

from typing import TYPE_CHECKING, Any

from trip_planner.adapters.http_client import JsonHttpClient
from trip_planner.adapters.mobilites_api.constants import API_NAME, MIN_DELAY_SECONDS

if TYPE_CHECKING:
    from aiohttp import ClientSession


class MobilitesHttpClient(JsonHttpClient):
    """JSON client bound to the Mobilités M base URL."""

    def __init__(
        self,
        base_url: str,
        session: "ClientSession | None" = None,
        origin: str = "mobility-trip-planner",
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize with the API base URL and optional aiohttp session.

        Args:
            base_url: API base URL, e.g. "https://data.mobilites-m.fr/api".
            session: aiohttp ClientSession for HTTP requests.
            origin: Origin header value identifying this client.
            timeout_seconds: Total timeout of a request.
        """
        super().__init__(
            API_NAME,
            session=session,
            headers={"Origin": origin},
            timeout_seconds=timeout_seconds,
            min_delay_seconds=MIN_DELAY_SECONDS,
        )
        self.base_url = base_url.rstrip("/")

    async def get_path(self, path: str, params: dict[str, Any] | None = None) -> Any | None:
        """GET a path relative to the base URL."""
        return await self.get_json(f"{self.base_url}{path}", params=params)
