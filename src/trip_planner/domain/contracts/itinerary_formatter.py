"""Protocol for formatting itineraries and departures for display."""

from datetime import datetime
from typing import Protocol

from trip_planner.domain.models.departure import ScheduledDeparture
from trip_planner.domain.models.itinerary import Itinerary
from trip_planner.domain.models.transport_mode import LegMode


class ItineraryFormatterProtocol(Protocol):
    """Protocol for turning itinerary values into display strings."""

    def format_duration(self, seconds: float) -> str:
        """Format a duration.

        Args:
            seconds: Duration in seconds.

        Returns:
            "<m> min" under an hour, "<h>h <m>min" otherwise.
        """
        ...

    def format_distance(self, meters: float) -> str:
        """Format a distance.

        Args:
            meters: Distance in meters.

        Returns:
            "<n> m" under a kilometer, "<x.y> km" otherwise.
        """
        ...

    def format_time(self, epoch_ms: int) -> str:
        """Format an epoch timestamp in milliseconds as HH:MM local time."""
        ...

    def format_date(self, epoch_ms: int) -> str:
        """Format an epoch timestamp in milliseconds as DD/MM/YYYY local date."""
        ...

    def leg_label(self, mode: LegMode) -> str:
        """Display label of a leg mode."""
        ...

    def format_departure(self, departure: ScheduledDeparture, now: datetime | None = None) -> str:
        """Format a departure as compact time until departure (e.g. '5m', '1h5m', 'now')."""
        ...

    def format_itinerary(self, itinerary: Itinerary, ui_mode: str) -> list[str]:
        """Format the detail lines of an itinerary."""
        ...
