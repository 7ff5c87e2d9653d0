"""Itinerary repository adapter for the Mobilités M OTP router."""

import logging

from trip_planner.adapters.mobilites_api.constants import PLAN_PATH
from trip_planner.adapters.mobilites_api.itinerary_parser import ItineraryParser
from trip_planner.adapters.mobilites_api.mobilites_http_client import MobilitesHttpClient
from trip_planner.domain.models.coordinate import Coordinate
from trip_planner.domain.models.itinerary import ItineraryPlan
from trip_planner.domain.ports.itinerary_repository import ItineraryRepository

logger = logging.getLogger(__name__)


class MobilitesItineraryRepository(ItineraryRepository):
    """Requests itineraries from `/routers/default/plan`."""

    def __init__(self, http_client: MobilitesHttpClient) -> None:
        self._http_client = http_client

    async def plan(
        self,
        origin: Coordinate,
        destination: Coordinate,
        query: dict[str, str | float],
    ) -> ItineraryPlan | None:
        """Request a plan between two coordinates.

        Args:
            origin: Start of the trip.
            destination: End of the trip.
            query: Mode and preference parameters (see build_plan_query).

        Returns:
            Parsed plan, or None if the backend could not be reached.
        """
        params: dict[str, str | float] = {
            "fromPlace": origin.as_query_value(),
            "toPlace": destination.as_query_value(),
            **query,
        }
        data = await self._http_client.get_path(PLAN_PATH, params=params)
        if data is None:
            return None

        plan = ItineraryParser.parse_plan(data)
        logger.debug(f"Planner returned {len(plan.itineraries)} itinerary candidate(s)")
        return plan
