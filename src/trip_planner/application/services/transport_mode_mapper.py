"""Mapping from user-facing transport choices to planning backend parameters."""

import logging
from datetime import datetime

from trip_planner.domain.models.transport_mode import ApiMode, UiMode
from trip_planner.domain.models.trip_request import TripRequest

logger = logging.getLogger(__name__)

# The backend reads walkSpeed/bikeSpeed in its own unit; the m/s value from
# the user is divided by this factor before sending.
SPEED_CONVERSION_FACTOR = 2.25

_UI_TO_API: dict[UiMode, ApiMode] = {
    UiMode.WALKING: ApiMode.WALK,
    UiMode.BICYCLE: ApiMode.BICYCLE,
    UiMode.BUS: ApiMode.TRANSIT,
    UiMode.CAR: ApiMode.CAR,
}
_API_TO_UI: dict[ApiMode, UiMode] = {api: ui for ui, api in _UI_TO_API.items()}


def to_api_mode(ui_mode: str) -> ApiMode:
    """Map a UI transport category to a backend mode token. Unknown values give WALK."""
    try:
        return _UI_TO_API[UiMode(ui_mode.strip().lower())]
    except (ValueError, AttributeError):
        logger.debug(f"Unknown transport mode {ui_mode!r}, defaulting to WALK")
        return ApiMode.WALK


def to_ui_mode(api_mode: str) -> UiMode:
    """Map a backend mode token back to its UI category. Unknown values give walking."""
    try:
        return _API_TO_UI[ApiMode(api_mode.strip().upper())]
    except (ValueError, AttributeError):
        return UiMode.WALKING


def convert_speed(speed: float | None) -> float | None:
    """Convert a UI speed (m/s) to the backend unit, None when absent or not positive."""
    if not speed:
        return None
    if speed < 0:
        logger.warning(f"Ignoring negative speed {speed}")
        return None
    return speed / SPEED_CONVERSION_FACTOR


def split_departure(departure: str | datetime | None) -> tuple[str, str] | None:
    """Split an ISO-8601 timestamp into the backend's date and time fields.

    Returns:
        ("YYYY-MM-DD", "HH:MM") or None if the value is absent or not ISO-8601.
    """
    if departure is None or departure == "":
        return None

    if isinstance(departure, datetime):
        moment = departure
    else:
        try:
            moment = datetime.fromisoformat(departure.replace("Z", "+00:00"))
        except (ValueError, AttributeError):
            logger.warning(f"Ignoring invalid departure time {departure!r}")
            return None

    return moment.strftime("%Y-%m-%d"), moment.strftime("%H:%M")


def build_plan_query(
    api_mode: ApiMode,
    wheelchair: bool = False,
    walk_speed: float | None = None,
    bike_speed: float | None = None,
    safe_route: bool = False,
    departure: str | datetime | None = None,
) -> dict[str, str | float]:
    """Build the query parameters of an itinerary request (coordinates excluded)."""
    params: dict[str, str | float] = {"mode": api_mode.value}

    if wheelchair:
        params["wheelchair"] = "true"

    converted_walk_speed = convert_speed(walk_speed)
    if converted_walk_speed is not None:
        params["walkSpeed"] = converted_walk_speed

    converted_bike_speed = convert_speed(bike_speed)
    if converted_bike_speed is not None:
        params["bikeSpeed"] = converted_bike_speed

    if safe_route:
        params["optimize"] = "SAFE"

    date_and_time = split_departure(departure)
    if date_and_time:
        params["date"], params["time"] = date_and_time

    return params


def query_for_request(request: TripRequest) -> tuple[ApiMode, dict[str, str | float]]:
    """Derive the backend mode and query parameters from a trip request."""
    api_mode = to_api_mode(request.ui_mode)
    query = build_plan_query(
        api_mode,
        wheelchair=request.wheelchair,
        walk_speed=request.walk_speed,
        bike_speed=request.bike_speed,
        safe_route=request.safe_route,
        departure=request.departure,
    )
    return api_mode, query
