"""Mobilités M API adapters (Grenoble OTP router and route index)."""

from trip_planner.adapters.mobilites_api.departure_repository import MobilitesDepartureRepository
from trip_planner.adapters.mobilites_api.itinerary_repository import MobilitesItineraryRepository
from trip_planner.adapters.mobilites_api.mobilites_http_client import MobilitesHttpClient
from trip_planner.adapters.mobilites_api.stop_repository import MobilitesStopRepository

__all__ = [
    "MobilitesDepartureRepository",
    "MobilitesHttpClient",
    "MobilitesItineraryRepository",
    "MobilitesStopRepository",
]
