"""Departure repository port."""

from typing import Protocol

from trip_planner.domain.models.departure import DepartureRecord


class DepartureRepository(Protocol):
    """Port for retrieving real-time departures at a stop."""

    async def get_stop_departures(self, stop_code: str) -> list[DepartureRecord]:
        """Get upcoming departures grouped by pattern."""
        ...
