"""Stop repository port."""

from typing import Protocol


class StopRepository(Protocol):
    """Port for resolving backend stop codes."""

    async def find_stop_code(self, route_id: str, stop_name: str) -> str | None:
        """Find the code of the stop served by route_id whose name matches stop_name."""
        ...
