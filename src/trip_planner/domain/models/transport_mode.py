"""Transport mode enumerations.

Three vocabularies meet here: the categories offered to the user, the mode
tokens accepted by the planning backend, and the per-leg modes it returns.
"""

from enum import StrEnum


class UiMode(StrEnum):
    """Transport categories offered to the user."""

    WALKING = "walking"
    BICYCLE = "bicycle"
    BUS = "bus"
    CAR = "car"


class ApiMode(StrEnum):
    """Mode tokens accepted by the planning backend."""

    WALK = "WALK"
    BICYCLE = "BICYCLE"
    TRANSIT = "TRANSIT"
    CAR = "CAR"


class LegMode(StrEnum):
    """Mode of a single itinerary leg as reported by the backend."""

    WALK = "WALK"
    BICYCLE = "BICYCLE"
    CAR = "CAR"
    BUS = "BUS"
    TRAM = "TRAM"
    RAIL = "RAIL"
    SUBWAY = "SUBWAY"
    CABLE_CAR = "CABLE_CAR"
    GONDOLA = "GONDOLA"
    FUNICULAR = "FUNICULAR"
    FERRY = "FERRY"
    TRANSIT = "TRANSIT"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, value: object) -> "LegMode":
        """Map a raw backend mode string to a LegMode, UNKNOWN if unrecognised."""
        if not isinstance(value, str):
            return cls.UNKNOWN
        try:
            return cls(value.strip().upper())
        except ValueError:
            return cls.UNKNOWN


# Leg modes that make an itinerary count as a public transport itinerary
TRANSIT_LEG_MODES = frozenset({LegMode.BUS, LegMode.TRAM, LegMode.RAIL, LegMode.SUBWAY})

# Leg modes for which the real-time departure feed is queried
SCHEDULED_LEG_MODES = frozenset({LegMode.BUS, LegMode.TRAM})
