"""Stop repository adapter resolving stop codes from route stop lists."""

import logging
from typing import Any
from urllib.parse import quote

from trip_planner.adapters.mobilites_api.constants import ROUTE_STOPS_PATH
from trip_planner.adapters.mobilites_api.mobilites_http_client import MobilitesHttpClient
from trip_planner.domain.contracts.route_stop_cache import RouteStopCacheProtocol
from trip_planner.domain.ports.stop_repository import StopRepository

logger = logging.getLogger(__name__)


def find_stop(stops: list[dict[str, Any]], stop_name: str) -> dict[str, Any] | None:
    """First stop whose registered name is contained in stop_name (case-insensitive)."""
    wanted = stop_name.lower()
    for stop in stops:
        registered = str(stop.get("name") or "").lower()
        if registered and registered in wanted:
            return stop
    return None


class MobilitesStopRepository(StopRepository):
    """Resolves stop codes through the cached stop list of each route."""

    def __init__(self, http_client: MobilitesHttpClient, cache: RouteStopCacheProtocol) -> None:
        """Initialize with the API client and the route stop cache.

        Args:
            http_client: Client for the Mobilités M API.
            cache: Cache of route stop lists, already loaded or loading.
        """
        self._http_client = http_client
        self._cache = cache

    async def fetch_route_stops(self, route_id: str) -> list[dict[str, Any]] | None:
        """Stops served by a route, from the cache or the API.

        Returns:
            Stop objects ({"gtfsId", "name", "lat", "lon", ...}), or None if
            the route is unknown or the API failed.
        """
        await self._cache.wait_ready()
        cached = self._cache.get(route_id)
        if cached is not None:
            return cached

        logger.info(f"Fetching stops for route {route_id}")
        path = ROUTE_STOPS_PATH.format(route_id=quote(route_id, safe=":"))
        data = await self._http_client.get_path(path)
        if not isinstance(data, list):
            return None

        stops = [stop for stop in data if isinstance(stop, dict)]
        await self._cache.set(route_id, stops)
        return stops

    async def find_stop_code(self, route_id: str, stop_name: str) -> str | None:
        """Find the code of the stop of route_id matching stop_name."""
        if not stop_name:
            return None

        stops = await self.fetch_route_stops(route_id)
        if not stops:
            return None

        stop = find_stop(stops, stop_name)
        if stop is None:
            logger.debug(f"No stop of route {route_id} matches {stop_name!r}")
            return None
        code = stop.get("gtfsId") or stop.get("code")
        return str(code) if code else None
