"""Geocoding adapters."""

from trip_planner.adapters.geocoding_api.geocoding_repository import GeocodingApiRepository

__all__ = ["GeocodingApiRepository"]
