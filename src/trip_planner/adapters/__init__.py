"""Adapters layer - external system integrations."""

from trip_planner.adapters.cache import RouteStopCache
from trip_planner.adapters.config import AppConfig
from trip_planner.adapters.environment_api import EnvironmentApiRepository
from trip_planner.adapters.formatters import ItineraryFormatter
from trip_planner.adapters.geocoding_api import GeocodingApiRepository
from trip_planner.adapters.mobilites_api import (
    MobilitesDepartureRepository,
    MobilitesHttpClient,
    MobilitesItineraryRepository,
    MobilitesStopRepository,
)

__all__ = [
    "AppConfig",
    "EnvironmentApiRepository",
    "GeocodingApiRepository",
    "ItineraryFormatter",
    "MobilitesDepartureRepository",
    "MobilitesHttpClient",
    "MobilitesItineraryRepository",
    "MobilitesStopRepository",
    "RouteStopCache",
]
