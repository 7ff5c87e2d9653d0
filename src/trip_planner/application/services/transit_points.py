"""Boarding points of the selected itinerary.

A boarding point marks where the traveller starts a new leg. The first leg
never yields one, since no mode change has happened yet. Every later leg
does, walking legs included; the caller decides how to render each mode.
"""

import logging
import re

from trip_planner.application.services.itinerary_selection import select_from_plan
from trip_planner.domain.models.boarding_point import TransitBoardingPoint
from trip_planner.domain.models.itinerary import Itinerary, ItineraryPlan, Leg
from trip_planner.domain.models.transport_mode import ApiMode

logger = logging.getLogger(__name__)

# Tram lines of the network are single letters with fixed line colours
TRAM_LINE_COLORS = {
    "A": "#3376B8",
    "B": "#479A45",
    "C": "#C20078",
    "D": "#DE9917",
    "E": "#533786",
}

_TRAM_LINE_PATTERN = re.compile(r"[A-E]", re.IGNORECASE)


def route_info(leg: Leg) -> str:
    """Display code of the leg's route.

    routeLongName is overwritten by route, which is overwritten by
    routeShortName, whenever the later field is present.
    """
    info = leg.route_long_name or ""
    if leg.route:
        info = leg.route
    if leg.route_short_name:
        info = leg.route_short_name
    return info


def tram_line(route: str) -> tuple[str, str | None]:
    """Normalise a tram line code and return its colour.

    Returns:
        (route, colour) with the route upper-cased and its line colour when
        it is a single letter A-E, otherwise (route, None).
    """
    if _TRAM_LINE_PATTERN.fullmatch(route):
        line = route.upper()
        return line, TRAM_LINE_COLORS[line]
    return route, None


def _boarding_point(leg: Leg, default_color: str) -> TransitBoardingPoint | None:
    if leg.from_place is None:
        return None

    route, tram_color = tram_line(route_info(leg))
    return TransitBoardingPoint(
        coordinate=leg.from_place.coordinate,
        mode=leg.mode,
        raw_mode=leg.raw_mode,
        route=route,
        stop_name=leg.from_place.name or "",
        agency_name=leg.agency_name or "",
        color=tram_color or default_color,
        headsign=leg.headsign or "",
        route_id=leg.route_id,
    )


def itinerary_boarding_points(
    itinerary: Itinerary, default_color: str = ""
) -> list[TransitBoardingPoint]:
    """Boarding points of every leg after the first, in leg order."""
    points = []
    for leg in itinerary.legs[1:]:
        point = _boarding_point(leg, default_color)
        if point is not None:
            points.append(point)
    return points


def extract_boarding_points(
    plan: ItineraryPlan | None, api_mode: ApiMode, default_color: str = ""
) -> list[TransitBoardingPoint]:
    """Boarding points of the itinerary selected for api_mode.

    Args:
        plan: Backend plan envelope.
        api_mode: Backend mode token the plan was requested with.
        default_color: Colour for points that are not tram lines.

    Returns:
        Boarding points, empty if the plan has no itinerary.
    """
    itinerary = select_from_plan(plan, api_mode)
    if itinerary is None:
        return []
    points = itinerary_boarding_points(itinerary, default_color)
    logger.debug(f"Extracted {len(points)} boarding point(s)")
    return points
