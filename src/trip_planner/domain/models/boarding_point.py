"""Transit boarding point domain model."""

from dataclasses import dataclass

from trip_planner.domain.models.coordinate import Coordinate
from trip_planner.domain.models.transport_mode import LegMode


@dataclass(frozen=True)
class TransitBoardingPoint:
    """Where the traveller starts a new leg after a mode change."""

    coordinate: Coordinate
    mode: LegMode
    route: str
    stop_name: str = ""
    agency_name: str = ""
    color: str = ""
    headsign: str = ""
    route_id: str | None = None
    raw_mode: str = ""  # backend mode token, kept when mode is UNKNOWN
