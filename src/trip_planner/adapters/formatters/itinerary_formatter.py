"""Formatter for itinerary details and departure times."""

from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

from trip_planner.adapters.config.app_config import AppConfig
from trip_planner.domain.contracts.itinerary_formatter import ItineraryFormatterProtocol
from trip_planner.domain.models.departure import ScheduledDeparture
from trip_planner.domain.models.itinerary import Itinerary, Leg
from trip_planner.domain.models.transport_mode import LegMode, UiMode

LEG_LABELS = {
    LegMode.WALK: "Marche",
    LegMode.BICYCLE: "Vélo",
    LegMode.CAR: "Voiture",
}
DEFAULT_LEG_LABEL = "Transport en commun"

# Modes for which the elevation profile is shown
ELEVATION_MODES = (UiMode.WALKING, UiMode.BICYCLE)

REALTIME_MARKER = "*"


class ItineraryFormatter(ItineraryFormatterProtocol):
    """Formatter for itinerary values based on configuration."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize the formatter.

        Args:
            config: Application configuration with timezone settings.
        """
        self.config = config
        self._timezone = ZoneInfo(config.timezone)

    def _local(self, epoch_ms: int) -> datetime:
        return datetime.fromtimestamp(epoch_ms / 1000, tz=UTC).astimezone(self._timezone)

    def format_duration(self, seconds: float) -> str:
        """Format seconds as '12 min' or '1h 5min'."""
        minutes = int(seconds // 60)
        hours = minutes // 60
        if hours > 0:
            return f"{hours}h {minutes % 60}min"
        return f"{minutes} min"

    def format_distance(self, meters: float) -> str:
        """Format meters as '850 m' or '1.2 km'."""
        if meters < 1000:
            return f"{round(meters)} m"
        return f"{meters / 1000:.1f} km"

    def format_time(self, epoch_ms: int) -> str:
        return self._local(epoch_ms).strftime("%H:%M")

    def format_date(self, epoch_ms: int) -> str:
        return self._local(epoch_ms).strftime("%d/%m/%Y")

    def leg_label(self, mode: LegMode) -> str:
        return LEG_LABELS.get(mode, DEFAULT_LEG_LABEL)

    def format_compact_duration(self, delta: timedelta) -> str:
        """Format timedelta as compact hours and minutes (e.g., '2h40m', '5m', 'now')."""
        total_seconds = int(delta.total_seconds())
        if total_seconds < 0:
            return "now"
        if total_seconds < 60:
            return "<1m"

        total_minutes = total_seconds // 60
        if total_minutes < 60:
            return f"{total_minutes}m"

        hours = total_minutes // 60
        minutes = total_minutes % 60
        if minutes == 0:
            return f"{hours}h"
        return f"{hours}h{minutes}m"

    def format_departure(self, departure: ScheduledDeparture, now: datetime | None = None) -> str:
        """Format time until departure; real-time departures carry a trailing '*'."""
        if now is None:
            now = datetime.now(UTC)
        text = self.format_compact_duration(departure.departure_time - now)
        if departure.realtime:
            return f"{text}{REALTIME_MARKER}"
        return text

    def format_departure_time_absolute(self, departure: ScheduledDeparture) -> str:
        """Format departure time as absolute (HH:MM format)."""
        return departure.departure_time.astimezone(self._timezone).strftime("%H:%M")

    def format_leg(self, leg: Leg) -> str:
        label = self.leg_label(leg.mode)
        if leg.transit_leg and leg.route_short_name:
            label = f"{label} {leg.route_short_name}"
        return (
            f"{label} - {self.format_distance(leg.distance)} • "
            f"{self.format_duration(leg.duration)} "
            f"({self.format_time(leg.start_time)} - {self.format_time(leg.end_time)})"
        )

    def format_itinerary(self, itinerary: Itinerary, ui_mode: str) -> list[str]:
        """Format the detail lines of an itinerary.

        Elevation gained and lost are shown for walking and cycling trips only,
        and only when the backend reported an elevation gain.
        """
        lines = [
            f"{self.format_duration(itinerary.duration)} • "
            f"{self.format_distance(itinerary.walk_distance)} • "
            f"{self.format_time(itinerary.start_time)} - {self.format_time(itinerary.end_time)}",
            f"Date: {self.format_date(itinerary.start_time)}",
            f"Heure départ: {self.format_time(itinerary.start_time)}",
            f"Heure arrivée: {self.format_time(itinerary.end_time)}",
            f"Distance: {self.format_distance(itinerary.walk_distance)}",
        ]

        if ui_mode in ELEVATION_MODES and itinerary.elevation_gained:
            lines.append(f"Montée: {round(itinerary.elevation_gained)} m")
            lines.append(f"Descente: {round(itinerary.elevation_lost or 0)} m")

        if itinerary.legs:
            lines.append("Étapes:")
            lines.extend(f"  {self.format_leg(leg)}" for leg in itinerary.legs)
        return lines
