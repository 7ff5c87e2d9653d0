"""Domain layer - core models and ports."""

from trip_planner.domain.models import (
    Coordinate,
    Itinerary,
    ItineraryPlan,
    Leg,
    TransitBoardingPoint,
)
from trip_planner.domain.ports import (
    DepartureRepository,
    GeocodingRepository,
    ItineraryRepository,
    StopRepository,
)

__all__ = [
    "Coordinate",
    "DepartureRepository",
    "GeocodingRepository",
    "Itinerary",
    "ItineraryPlan",
    "ItineraryRepository",
    "Leg",
    "StopRepository",
    "TransitBoardingPoint",
]
