"""Drawable path of the selected itinerary."""

import logging

from trip_planner.application.services.geometry_codec import PolylineDecodeError, decode
from trip_planner.application.services.itinerary_selection import select_from_plan
from trip_planner.domain.models.coordinate import Coordinate
from trip_planner.domain.models.itinerary import Itinerary, ItineraryPlan
from trip_planner.domain.models.transport_mode import ApiMode

logger = logging.getLogger(__name__)


def itinerary_path(itinerary: Itinerary) -> list[Coordinate]:
    """Concatenate the decoded geometries of all legs in leg order.

    Shared endpoints of adjacent legs are kept. A leg whose geometry is
    missing or fails to decode contributes no points.
    """
    coordinates: list[Coordinate] = []
    for index, leg in enumerate(itinerary.legs):
        if not leg.geometry:
            continue
        try:
            coordinates.extend(decode(leg.geometry))
        except PolylineDecodeError as e:
            logger.warning(f"Skipping geometry of leg {index} ({leg.raw_mode}): {e}")
    return coordinates


def extract_path(plan: ItineraryPlan | None, api_mode: ApiMode) -> list[Coordinate]:
    """Path of the itinerary selected for api_mode, empty if the plan has none."""
    itinerary = select_from_plan(plan, api_mode)
    if itinerary is None:
        return []

    logger.debug(
        f"Selected itinerary: mode {api_mode}, distance {itinerary.walk_distance}m, "
        f"duration {round(itinerary.duration / 60)}min"
    )
    return itinerary_path(itinerary)
