"""Trip planning result domain models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from trip_planner.domain.models.boarding_point import TransitBoardingPoint
from trip_planner.domain.models.coordinate import Coordinate
from trip_planner.domain.models.itinerary import Itinerary
from trip_planner.domain.models.transport_mode import ApiMode


class PlanningFailure(Enum):
    """User-facing failure of a trip search, with its display message."""

    MISSING_INPUT = "Veuillez saisir un point de départ et une destination"
    PLACE_NOT_FOUND = "Impossible de trouver les coordonnées des lieux indiqués"
    NO_ROUTE = "Impossible de calculer l'itinéraire"
    UNEXPECTED = "Une erreur est survenue lors de la recherche de l'itinéraire"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class TripPlanResult:
    """Outcome of one trip search and its first-order derivations."""

    generation: int
    api_mode: ApiMode
    itinerary: Itinerary | None = None
    path: tuple[Coordinate, ...] = ()
    boarding_points: tuple[TransitBoardingPoint, ...] = ()
    origin: Coordinate | None = None
    destination: Coordinate | None = None
    failure: PlanningFailure | None = None

    @property
    def succeeded(self) -> bool:
        return self.failure is None and self.itinerary is not None


@dataclass(frozen=True)
class ModeComparison:
    """Summary of the best itinerary for one transport mode."""

    ui_mode: str
    api_mode: ApiMode
    duration: float | None = None  # seconds
    distance: float | None = None  # meters
    co2_impact: dict[str, Any] | None = field(default=None, compare=False)

    @property
    def available(self) -> bool:
        return self.duration is not None
