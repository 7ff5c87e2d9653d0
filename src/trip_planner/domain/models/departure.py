"""Real-time departure domain models."""

from dataclasses import dataclass
from datetime import UTC, datetime
from enum import StrEnum


@dataclass(frozen=True)
class ScheduledDeparture:
    """A single upcoming departure of a pattern at a stop."""

    service_day: int  # epoch seconds, midnight of the operating day
    realtime_departure: int  # seconds since service_day
    realtime: bool
    scheduled_departure: int | None = None

    @property
    def departure_time(self) -> datetime:
        """Absolute departure time (UTC)."""
        return datetime.fromtimestamp(self.service_day + self.realtime_departure, tz=UTC)

    @property
    def delay_seconds(self) -> int | None:
        """Delay against the timetable, None when not known."""
        if self.scheduled_departure is None:
            return None
        return self.realtime_departure - self.scheduled_departure


@dataclass(frozen=True)
class DepartureRecord:
    """Upcoming departures of one pattern (route + direction) at a stop."""

    pattern_id: str  # e.g. "SEM:C1:0:1712"
    pattern_description: str
    departures: tuple[ScheduledDeparture, ...] = ()


class MatchTier(StrEnum):
    """Which matching rule selected a departure record."""

    EXACT = "exact"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class StopSchedule:
    """Departure record matched to a boarding point."""

    stop_code: str
    record: DepartureRecord
    tier: MatchTier
