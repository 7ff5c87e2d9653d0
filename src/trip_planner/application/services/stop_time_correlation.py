"""Correlation of boarding points with the real-time departure feed.

The departure feed is keyed by stop code and groups departures by pattern,
while boarding points only carry a route code and a stop name. Each point
is resolved to a stop code first, then the pattern group of its route is
picked from the feed for that stop.

Pattern identifiers look like "SEM:C1:0:1712" or "SEM:12:1:3":
the network prefix, the route code, the direction and a pattern number.
"""

from __future__ import annotations

import asyncio
import logging
import re
from collections.abc import Sequence
from typing import TYPE_CHECKING

from trip_planner.domain.models.departure import DepartureRecord, MatchTier, StopSchedule
from trip_planner.domain.models.transport_mode import SCHEDULED_LEG_MODES, LegMode

if TYPE_CHECKING:
    from trip_planner.domain.models.boarding_point import TransitBoardingPoint
    from trip_planner.domain.ports import DepartureRepository, StopRepository

logger = logging.getLogger(__name__)

DEFAULT_NETWORK_PREFIX = "SEM"

_BUS_ROUTE_NUMBER_PATTERN = re.compile(r"SEM:(\d+):")


def extract_bus_route_number(pattern_id: str) -> str | None:
    """Extract the numeric route of a bus pattern identifier.

    Args:
        pattern_id: Pattern identifier such as "SEM:12:0:1712".

    Returns:
        The digits between "SEM:" and the next colon ("12"), or None if the
        identifier has no numeric route (e.g. "SEM:C1:0:1712").
    """
    match = _BUS_ROUTE_NUMBER_PATTERN.search(pattern_id)
    return match.group(1) if match else None


def pattern_matches_route(pattern_id: str, route: str, mode: LegMode) -> bool:
    """Whether a pattern belongs to the route of a boarding point."""
    if not route:
        return False
    if mode == LegMode.BUS:
        return extract_bus_route_number(pattern_id) == route
    return f":{route}:" in pattern_id


def match_departure_record(
    records: Sequence[DepartureRecord], route: str, mode: LegMode
) -> tuple[DepartureRecord, MatchTier] | None:
    """Pick the departure record of a route among the groups of a stop.

    Exact pattern matches win; otherwise the first group is used since the
    feed is not always route-disambiguated.

    Returns:
        (record, tier), or None if there are no records at all.
    """
    for record in records:
        if pattern_matches_route(record.pattern_id, route, mode):
            return record, MatchTier.EXACT
    if records:
        return records[0], MatchTier.FALLBACK
    return None


class StopTimeCorrelator:
    """Resolves real-time departures for boarding points."""

    def __init__(
        self,
        stop_repository: StopRepository,
        departure_repository: DepartureRepository,
        network_prefix: str = DEFAULT_NETWORK_PREFIX,
    ) -> None:
        """Initialize with the stop lookup and departure feed collaborators.

        Args:
            stop_repository: Resolves (route id, stop name) to a stop code.
            departure_repository: Fetches pattern-grouped departures for a stop code.
            network_prefix: Prefix of backend route ids, used when a point has none.
        """
        self._stop_repository = stop_repository
        self._departure_repository = departure_repository
        self._network_prefix = network_prefix

    def route_id_for(self, point: TransitBoardingPoint) -> str:
        """Backend route id used for the stop lookup of a point."""
        return point.route_id or f"{self._network_prefix}:{point.route}"

    async def correlate(
        self, points: Sequence[TransitBoardingPoint]
    ) -> dict[int, StopSchedule | None]:
        """Match every boarding point to a departure record.

        Bus and tram points are looked up concurrently; other modes are not
        looked up. A failing lookup only affects its own point.

        Returns:
            Mapping from point index to its schedule, None where unavailable.
        """
        results: dict[int, StopSchedule | None] = dict.fromkeys(range(len(points)))
        pending = {
            index: self._correlate_point(point)
            for index, point in enumerate(points)
            if point.mode in SCHEDULED_LEG_MODES
        }
        if not pending:
            return results

        outcomes = await asyncio.gather(*pending.values(), return_exceptions=True)
        for index, outcome in zip(pending, outcomes, strict=True):
            if isinstance(outcome, BaseException):
                logger.warning(
                    f"Stop time lookup failed for boarding point {index} "
                    f"({points[index].route} at {points[index].stop_name}): {outcome}"
                )
                continue
            results[index] = outcome

        return results

    async def _correlate_point(self, point: TransitBoardingPoint) -> StopSchedule | None:
        return await self.lookup(self.route_id_for(point), point.route, point.stop_name, point.mode)

    async def lookup(
        self, route_id: str, route: str, stop_name: str, mode: LegMode
    ) -> StopSchedule | None:
        """Departures of a route at a named stop.

        Args:
            route_id: Backend route id used to list the stops (e.g. "SEM:C1").
            route: Route code matched against pattern ids (e.g. "C1").
            stop_name: Stop name as reported by the journey planner.
            mode: Leg mode, selects the pattern matching rule.
        """
        stop_code = await self._stop_repository.find_stop_code(route_id, stop_name)
        if not stop_code:
            logger.info(f"No stop code for route {route_id} at {stop_name!r}")
            return None

        records = await self._departure_repository.get_stop_departures(stop_code)
        match = match_departure_record(records, route, mode)
        if match is None:
            logger.info(f"No departures at stop {stop_code} for route {route}")
            return None

        record, tier = match
        logger.debug(f"Matched {route} at {stop_code} to {record.pattern_id} ({tier})")
        return StopSchedule(stop_code=stop_code, record=record, tier=tier)
