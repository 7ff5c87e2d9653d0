"""Display formatters."""

from trip_planner.adapters.formatters.itinerary_formatter import ItineraryFormatter

__all__ = ["ItineraryFormatter"]
