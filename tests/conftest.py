"""Shared fixtures for trip planner tests."""

from collections.abc import Callable

import pytest

from trip_planner.adapters.api_rate_limiter import ApiRateLimiter
from trip_planner.application.services.geometry_codec import encode
from trip_planner.domain.models import Coordinate, Itinerary, Leg, LegMode, Place


def make_leg(
    mode: str = "WALK",
    coordinates: list[tuple[float, float]] | None = None,
    geometry: str | None = None,
    route_short_name: str | None = None,
    route: str | None = None,
    route_long_name: str | None = None,
    route_id: str | None = None,
    stop_name: str = "",
    from_coordinate: tuple[float, float] | None = (45.19, 5.72),
    distance: float = 100.0,
    duration: float = 60.0,
) -> Leg:
    """Build a leg, encoding its geometry from coordinates when given."""
    if coordinates is not None and geometry is None:
        geometry = encode(Coordinate(lat, lon) for lat, lon in coordinates)
    from_place = (
        Place(coordinate=Coordinate(*from_coordinate), name=stop_name)
        if from_coordinate is not None
        else None
    )
    return Leg(
        mode=LegMode.parse(mode),
        raw_mode=mode,
        distance=distance,
        duration=duration,
        from_place=from_place,
        route_short_name=route_short_name,
        route=route,
        route_long_name=route_long_name,
        route_id=route_id,
        geometry=geometry,
        transit_leg=mode not in ("WALK", "BICYCLE", "CAR"),
    )


@pytest.fixture
def leg_factory() -> Callable[..., Leg]:
    """Factory for legs."""
    return make_leg


@pytest.fixture
def itinerary_factory() -> Callable[..., Itinerary]:
    """Factory for itineraries from leg mode names or legs."""

    def factory(*legs: str | Leg, duration: float = 600.0, walk_distance: float = 500.0):
        built = tuple(make_leg(leg) if isinstance(leg, str) else leg for leg in legs)
        return Itinerary(legs=built, duration=duration, walk_distance=walk_distance)

    return factory


@pytest.fixture(autouse=True)
def reset_rate_limiters() -> None:
    """Start every test without shared rate limiter state."""
    ApiRateLimiter.reset()
