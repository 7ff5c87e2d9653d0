"""Trip request domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TripRequest:
    """User input for one trip search."""

    origin: str
    destination: str
    ui_mode: str = "walking"
    wheelchair: bool = False
    walk_speed: float | None = None  # m/s as entered by the user
    bike_speed: float | None = None  # m/s as entered by the user
    safe_route: bool = False
    departure: str | None = None  # ISO-8601 timestamp, None for "now"
