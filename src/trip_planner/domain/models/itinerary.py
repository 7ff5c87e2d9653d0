"""Itinerary domain models: places, legs, itineraries and plans."""

from dataclasses import dataclass, field

from trip_planner.domain.models.coordinate import Coordinate
from trip_planner.domain.models.transport_mode import LegMode


@dataclass(frozen=True)
class Place:
    """One end of a leg."""

    coordinate: Coordinate
    name: str = ""
    stop_id: str | None = None


@dataclass(frozen=True)
class Leg:
    """One uninterrupted segment of an itinerary in a single mode."""

    mode: LegMode
    raw_mode: str
    distance: float = 0.0  # meters
    duration: float = 0.0  # seconds
    start_time: int = 0  # epoch milliseconds
    end_time: int = 0  # epoch milliseconds
    from_place: Place | None = None
    to_place: Place | None = None
    route_short_name: str | None = None
    route_long_name: str | None = None
    route: str | None = None
    route_id: str | None = None  # e.g. "SEM:C1"
    route_color: str | None = None
    agency_name: str | None = None
    headsign: str | None = None
    geometry: str | None = None  # encoded polyline (legGeometry.points)
    transit_leg: bool = False


@dataclass(frozen=True)
class Itinerary:
    """One complete trip option between origin and destination."""

    legs: tuple[Leg, ...]
    duration: float = 0.0  # seconds
    walk_distance: float = 0.0  # meters, used as the itinerary distance
    start_time: int = 0
    end_time: int = 0
    elevation_gained: float | None = None
    elevation_lost: float | None = None


@dataclass(frozen=True)
class ItineraryPlan:
    """Backend response envelope: candidate itineraries for one request."""

    itineraries: tuple[Itinerary, ...] = field(default_factory=tuple)
