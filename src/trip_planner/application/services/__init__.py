"""Application services: the itinerary pipeline and trip planning use cases."""

from trip_planner.application.services.geometry_codec import PolylineDecodeError, decode, encode
from trip_planner.application.services.itinerary_selection import (
    has_transit_segments,
    select_itinerary,
)
from trip_planner.application.services.route_geometry import extract_path
from trip_planner.application.services.stop_time_correlation import StopTimeCorrelator
from trip_planner.application.services.transit_points import extract_boarding_points
from trip_planner.application.services.transport_mode_mapper import (
    build_plan_query,
    to_api_mode,
)
from trip_planner.application.services.trip_planning_service import TripPlanningService

__all__ = [
    "PolylineDecodeError",
    "StopTimeCorrelator",
    "TripPlanningService",
    "build_plan_query",
    "decode",
    "encode",
    "extract_boarding_points",
    "extract_path",
    "has_transit_segments",
    "select_itinerary",
    "to_api_mode",
]
