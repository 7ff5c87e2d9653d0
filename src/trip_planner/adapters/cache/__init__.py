"""Cache adapters."""

from trip_planner.adapters.cache.route_stop_cache import RouteStopCache

__all__ = ["RouteStopCache"]
