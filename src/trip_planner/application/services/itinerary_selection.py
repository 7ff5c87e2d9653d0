"""Choice of the itinerary to present among the backend's candidates."""

import logging
from collections.abc import Sequence

from trip_planner.domain.models.itinerary import Itinerary, ItineraryPlan
from trip_planner.domain.models.transport_mode import TRANSIT_LEG_MODES, ApiMode

logger = logging.getLogger(__name__)


def has_transit_segments(itinerary: Itinerary) -> bool:
    """Whether any leg of the itinerary rides public transport."""
    return any(leg.mode in TRANSIT_LEG_MODES or leg.transit_leg for leg in itinerary.legs)


def select_itinerary(itineraries: Sequence[Itinerary], api_mode: ApiMode) -> Itinerary | None:
    """Pick the itinerary to present.

    For TRANSIT requests the backend may interleave walk-only fallbacks with
    real transit itineraries, so the first one that actually rides transit
    wins. Otherwise, or when no candidate qualifies, the first one is used.

    Returns:
        The selected itinerary, or None if there are no candidates.
    """
    if not itineraries:
        return None

    if api_mode == ApiMode.TRANSIT:
        for itinerary in itineraries:
            if has_transit_segments(itinerary):
                return itinerary
        logger.debug("No itinerary with transit legs, using the first candidate")

    return itineraries[0]


def select_from_plan(plan: ItineraryPlan | None, api_mode: ApiMode) -> Itinerary | None:
    """Select from a plan envelope, None for a missing or empty plan."""
    if plan is None:
        return None
    return select_itinerary(plan.itineraries, api_mode)
