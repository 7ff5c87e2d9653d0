"""Itinerary repository port."""

from typing import Protocol

from trip_planner.domain.models.coordinate import Coordinate
from trip_planner.domain.models.itinerary import ItineraryPlan


class ItineraryRepository(Protocol):
    """Port for requesting itineraries from the journey-planning backend."""

    async def plan(
        self,
        origin: Coordinate,
        destination: Coordinate,
        query: dict[str, str | float],
    ) -> ItineraryPlan | None:
        """Request a plan; None when the backend could not be reached."""
        ...
