"""Trip planning use cases."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING

from trip_planner.application.services.itinerary_selection import select_from_plan
from trip_planner.application.services.route_geometry import extract_path
from trip_planner.application.services.transit_points import extract_boarding_points
from trip_planner.application.services.transport_mode_mapper import (
    build_plan_query,
    query_for_request,
    to_api_mode,
)
from trip_planner.domain.models.transport_mode import UiMode
from trip_planner.domain.models.trip_result import (
    ModeComparison,
    PlanningFailure,
    TripPlanResult,
)

if TYPE_CHECKING:
    from trip_planner.application.services.stop_time_correlation import StopTimeCorrelator
    from trip_planner.domain.models.departure import StopSchedule
    from trip_planner.domain.models.place import GeocodedPlace
    from trip_planner.domain.models.transport_mode import ApiMode
    from trip_planner.domain.models.trip_request import TripRequest
    from trip_planner.domain.ports import (
        EnvironmentRepository,
        GeocodingRepository,
        ItineraryRepository,
    )

logger = logging.getLogger(__name__)


class TripPlanningService:
    """Plans trips and keeps the derived state of the latest search.

    Every search gets a generation number. Results of a search that was
    superseded by a newer one while it was in flight are returned to the
    caller but never stored as the latest state.
    """

    def __init__(
        self,
        geocoding_repository: GeocodingRepository,
        itinerary_repository: ItineraryRepository,
        correlator: StopTimeCorrelator,
        environment_repository: EnvironmentRepository | None = None,
        pause_between_modes_seconds: float = 0.0,
    ) -> None:
        """Initialize with the external collaborators.

        Args:
            geocoding_repository: Resolves place names.
            itinerary_repository: Requests plans from the journey planner.
            correlator: Matches boarding points with real-time departures.
            environment_repository: Optional CO2 estimate provider for comparisons.
            pause_between_modes_seconds: Pause between the sequential requests of compare_modes.
        """
        self._geocoding_repository = geocoding_repository
        self._itinerary_repository = itinerary_repository
        self._correlator = correlator
        self._environment_repository = environment_repository
        self._pause_between_modes_seconds = pause_between_modes_seconds
        self._generation = 0
        self._pending_operations = 0
        self.latest_result: TripPlanResult | None = None
        self.latest_schedules: dict[int, StopSchedule | None] | None = None

    @property
    def is_loading(self) -> bool:
        """Whether a network-bound operation is in progress."""
        return self._pending_operations > 0

    @property
    def generation(self) -> int:
        return self._generation

    def is_current(self, generation: int) -> bool:
        """Whether no newer search has started since the given one."""
        return generation == self._generation

    @contextmanager
    def _loading(self) -> Iterator[None]:
        self._pending_operations += 1
        try:
            yield
        finally:
            self._pending_operations -= 1

    async def plan_trip(self, request: TripRequest) -> TripPlanResult:
        """Plan a trip and derive its path and boarding points.

        Never raises: every failure is reported through TripPlanResult.failure.
        """
        self._generation += 1
        generation = self._generation
        api_mode, query = query_for_request(request)

        if not request.origin.strip() or not request.destination.strip():
            result = TripPlanResult(generation, api_mode, failure=PlanningFailure.MISSING_INPUT)
            return self._store(result)

        with self._loading():
            try:
                result = await self._plan(request, generation, api_mode, query)
            except Exception as e:
                logger.error(f"Error planning trip: {e}", exc_info=True)
                result = TripPlanResult(generation, api_mode, failure=PlanningFailure.UNEXPECTED)

        return self._store(result)

    async def _geocode_endpoints(
        self, origin: str, destination: str
    ) -> tuple[GeocodedPlace | None, GeocodedPlace | None]:
        origin_place, destination_place = await asyncio.gather(
            self._geocoding_repository.geocode(origin),
            self._geocoding_repository.geocode(destination),
        )
        return origin_place, destination_place

    async def _plan(
        self,
        request: TripRequest,
        generation: int,
        api_mode: ApiMode,
        query: dict[str, str | float],
    ) -> TripPlanResult:
        origin, destination = await self._geocode_endpoints(request.origin, request.destination)
        if origin is None or destination is None:
            logger.info(f"Could not geocode {request.origin!r} or {request.destination!r}")
            return TripPlanResult(generation, api_mode, failure=PlanningFailure.PLACE_NOT_FOUND)

        plan = await self._itinerary_repository.plan(
            origin.coordinate, destination.coordinate, query
        )
        itinerary = select_from_plan(plan, api_mode)
        if itinerary is None:
            logger.info(f"No itinerary from {origin.label!r} to {destination.label!r} ({api_mode})")
            return TripPlanResult(
                generation,
                api_mode,
                origin=origin.coordinate,
                destination=destination.coordinate,
                failure=PlanningFailure.NO_ROUTE,
            )

        return TripPlanResult(
            generation,
            api_mode,
            itinerary=itinerary,
            path=tuple(extract_path(plan, api_mode)),
            boarding_points=tuple(extract_boarding_points(plan, api_mode)),
            origin=origin.coordinate,
            destination=destination.coordinate,
        )

    def _store(self, result: TripPlanResult) -> TripPlanResult:
        if self.is_current(result.generation):
            self.latest_result = result
            self.latest_schedules = None
        else:
            logger.info(f"Discarding result of superseded search #{result.generation}")
        return result

    async def correlate_stop_times(
        self, result: TripPlanResult
    ) -> dict[int, StopSchedule | None] | None:
        """Fetch real-time departures for the boarding points of a result.

        Returns:
            Schedules by boarding point index, or None if a newer search
            started while the lookups were in flight.
        """
        if not result.boarding_points:
            schedules: dict[int, StopSchedule | None] = {}
        else:
            with self._loading():
                try:
                    schedules = await self._correlator.correlate(result.boarding_points)
                except Exception as e:
                    logger.error(f"Error correlating stop times: {e}", exc_info=True)
                    schedules = dict.fromkeys(range(len(result.boarding_points)))

        if not self.is_current(result.generation):
            logger.info(f"Discarding stop times of superseded search #{result.generation}")
            return None

        self.latest_schedules = schedules
        return schedules

    async def compare_modes(
        self,
        origin: str,
        destination: str,
        ui_modes: Sequence[str] = tuple(UiMode),
        include_co2: bool = False,
    ) -> list[ModeComparison]:
        """Summarise the best itinerary of each mode between two places.

        Modes are requested one after the other to bound the load on the
        planning backend.
        """
        with self._loading():
            origin_place, destination_place = await self._geocode_endpoints(origin, destination)
            if origin_place is None or destination_place is None:
                logger.info(f"Could not geocode {origin!r} or {destination!r}")
                return []

            comparisons = []
            for i, ui_mode in enumerate(ui_modes):
                comparisons.append(
                    await self._compare_mode(
                        ui_mode, origin_place, destination_place, include_co2=include_co2
                    )
                )
                if self._pause_between_modes_seconds > 0 and i < len(ui_modes) - 1:
                    await asyncio.sleep(self._pause_between_modes_seconds)

            return comparisons

    async def _compare_mode(
        self,
        ui_mode: str,
        origin: GeocodedPlace,
        destination: GeocodedPlace,
        include_co2: bool,
    ) -> ModeComparison:
        api_mode = to_api_mode(ui_mode)
        try:
            plan = await self._itinerary_repository.plan(
                origin.coordinate, destination.coordinate, build_plan_query(api_mode)
            )
        except Exception as e:
            logger.warning(f"Error planning {api_mode} itinerary: {e}")
            plan = None

        itinerary = select_from_plan(plan, api_mode)
        if itinerary is None:
            return ModeComparison(ui_mode=ui_mode, api_mode=api_mode)

        co2_impact = None
        if include_co2 and self._environment_repository is not None:
            co2_impact = await self._environment_repository.co2_impact(
                itinerary.walk_distance / 1000
            )

        return ModeComparison(
            ui_mode=ui_mode,
            api_mode=api_mode,
            duration=itinerary.duration,
            distance=itinerary.walk_distance,
            co2_impact=co2_impact,
        )
