"""Geocoding domain models."""

from dataclasses import dataclass

from trip_planner.domain.models.coordinate import Coordinate


@dataclass(frozen=True)
class GeocodedPlace:
    """A place name resolved to a coordinate."""

    label: str
    coordinate: Coordinate


@dataclass(frozen=True)
class AddressSuggestion:
    """An autocomplete candidate."""

    label: str
    coordinate: Coordinate
