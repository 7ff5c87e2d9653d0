"""Domain models for trip planning."""

from trip_planner.domain.models.boarding_point import TransitBoardingPoint
from trip_planner.domain.models.coordinate import Coordinate
from trip_planner.domain.models.departure import (
    DepartureRecord,
    MatchTier,
    ScheduledDeparture,
    StopSchedule,
)
from trip_planner.domain.models.error_details import ErrorDetails
from trip_planner.domain.models.itinerary import Itinerary, ItineraryPlan, Leg, Place
from trip_planner.domain.models.place import AddressSuggestion, GeocodedPlace
from trip_planner.domain.models.transport_mode import ApiMode, LegMode, UiMode
from trip_planner.domain.models.trip_request import TripRequest
from trip_planner.domain.models.trip_result import ModeComparison, PlanningFailure, TripPlanResult

__all__ = [
    "AddressSuggestion",
    "ApiMode",
    "Coordinate",
    "DepartureRecord",
    "ErrorDetails",
    "GeocodedPlace",
    "Itinerary",
    "ItineraryPlan",
    "Leg",
    "LegMode",
    "MatchTier",
    "ModeComparison",
    "Place",
    "PlanningFailure",
    "ScheduledDeparture",
    "StopSchedule",
    "TransitBoardingPoint",
    "TripPlanResult",
    "TripRequest",
    "UiMode",
]
