"""Protocol for the route to stop-list cache."""

from typing import Any, Protocol


class RouteStopCacheProtocol(Protocol):
    """Protocol for caching the stop list of each route."""

    async def load(self) -> None:
        """Load persisted entries and mark the cache ready."""
        ...

    async def wait_ready(self) -> None:
        """Wait until load() has completed."""
        ...

    def get(self, route_id: str) -> list[dict[str, Any]] | None:
        """Get the cached stops of a route.

        Args:
            route_id: Backend route identifier (e.g. "SEM:C1").

        Returns:
            Cached stop list, or None if the route was never fetched.
        """
        ...

    async def set(self, route_id: str, stops: list[dict[str, Any]]) -> None:
        """Store the stops of a route and persist the cache."""
        ...
