"""Contracts for infrastructure collaborators."""

from trip_planner.domain.contracts.itinerary_formatter import ItineraryFormatterProtocol
from trip_planner.domain.contracts.route_stop_cache import RouteStopCacheProtocol

__all__ = ["ItineraryFormatterProtocol", "RouteStopCacheProtocol"]
