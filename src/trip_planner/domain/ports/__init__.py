"""Ports (interfaces) for the ports-and-adapters architecture."""

from trip_planner.domain.ports.departure_repository import DepartureRepository
from trip_planner.domain.ports.environment_repository import EnvironmentRepository
from trip_planner.domain.ports.geocoding_repository import GeocodingRepository
from trip_planner.domain.ports.itinerary_repository import ItineraryRepository
from trip_planner.domain.ports.stop_repository import StopRepository

__all__ = [
    "DepartureRepository",
    "EnvironmentRepository",
    "GeocodingRepository",
    "ItineraryRepository",
    "StopRepository",
]
