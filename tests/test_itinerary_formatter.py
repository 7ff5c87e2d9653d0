"""Tests for the itinerary formatter."""

from datetime import UTC, datetime, timedelta

import pytest

from trip_planner.adapters.config import AppConfig
from trip_planner.adapters.formatters import ItineraryFormatter
from trip_planner.domain.models import Itinerary, LegMode, ScheduledDeparture

# 2024-03-10 08:15:00 UTC, 09:15 in Paris (CET)
START_MS = int(datetime(2024, 3, 10, 8, 15, tzinfo=UTC).timestamp() * 1000)


@pytest.fixture
def formatter() -> ItineraryFormatter:
    return ItineraryFormatter(AppConfig(_env_file=None, timezone="Europe/Paris"))


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(0, "0 min"), (59, "0 min"), (600, "10 min"), (3599, "59 min"), (3900, "1h 5min")],
)
def test_format_duration(formatter: ItineraryFormatter, seconds: float, expected: str) -> None:
    """Given a duration in seconds, when formatting, then minutes or hours are shown."""
    assert formatter.format_duration(seconds) == expected


@pytest.mark.parametrize(
    ("meters", "expected"), [(0, "0 m"), (149.6, "150 m"), (999, "999 m"), (2350.4, "2.4 km")]
)
def test_format_distance(formatter: ItineraryFormatter, meters: float, expected: str) -> None:
    """Given a distance in meters, when formatting, then meters or kilometers are shown."""
    assert formatter.format_distance(meters) == expected


def test_format_time_and_date_use_configured_timezone(formatter: ItineraryFormatter) -> None:
    """Given an epoch timestamp, when formatting, then Paris local time and date are shown."""
    assert formatter.format_time(START_MS) == "09:15"
    assert formatter.format_date(START_MS) == "10/03/2024"


@pytest.mark.parametrize(
    ("mode", "expected"),
    [
        (LegMode.WALK, "Marche"),
        (LegMode.BICYCLE, "Vélo"),
        (LegMode.CAR, "Voiture"),
        (LegMode.TRAM, "Transport en commun"),
        (LegMode.UNKNOWN, "Transport en commun"),
    ],
)
def test_leg_label(formatter: ItineraryFormatter, mode: LegMode, expected: str) -> None:
    """Given a leg mode, when labelling, then the display label is returned."""
    assert formatter.leg_label(mode) == expected


@pytest.mark.parametrize(
    ("delta", "expected"),
    [
        (timedelta(seconds=-30), "now"),
        (timedelta(seconds=30), "<1m"),
        (timedelta(minutes=5), "5m"),
        (timedelta(hours=1, minutes=5), "1h5m"),
        (timedelta(hours=2), "2h"),
    ],
)
def test_format_compact_duration(
    formatter: ItineraryFormatter, delta: timedelta, expected: str
) -> None:
    """Given a time delta, when formatting compactly, then hours and minutes are shown."""
    assert formatter.format_compact_duration(delta) == expected


def test_format_departure_marks_realtime(formatter: ItineraryFormatter) -> None:
    """Given realtime and scheduled departures, when formatting, then realtime is marked."""
    service_day = int(datetime(2024, 3, 10, tzinfo=UTC).timestamp())
    now = datetime(2024, 3, 10, 8, 0, tzinfo=UTC)
    realtime = ScheduledDeparture(service_day, 8 * 3600 + 5 * 60, realtime=True)
    scheduled = ScheduledDeparture(service_day, 8 * 3600 + 5 * 60, realtime=False)

    assert formatter.format_departure(realtime, now=now) == "5m*"
    assert formatter.format_departure(scheduled, now=now) == "5m"
    assert formatter.format_departure_time_absolute(realtime) == "09:05"


def test_format_itinerary_shows_elevation_for_walking(
    formatter: ItineraryFormatter, leg_factory
) -> None:
    """Given a walking itinerary with elevation, when formatting, then climb lines are shown."""
    itinerary = Itinerary(
        legs=(leg_factory("WALK", distance=850, duration=660),),
        duration=660,
        walk_distance=850,
        start_time=START_MS,
        end_time=START_MS + 660_000,
        elevation_gained=24.6,
        elevation_lost=3.2,
    )

    lines = formatter.format_itinerary(itinerary, "walking")

    assert lines[0] == "11 min • 850 m • 09:15 - 09:26"
    assert "Montée: 25 m" in lines
    assert "Descente: 3 m" in lines
    assert "Étapes:" in lines


def test_format_itinerary_hides_elevation_for_bus(
    formatter: ItineraryFormatter, leg_factory
) -> None:
    """Given a bus itinerary with elevation, when formatting, then no climb lines are shown."""
    itinerary = Itinerary(
        legs=(leg_factory("BUS", route_short_name="C1"),),
        duration=900,
        walk_distance=300,
        start_time=START_MS,
        end_time=START_MS + 900_000,
        elevation_gained=10.0,
        elevation_lost=10.0,
    )

    lines = formatter.format_itinerary(itinerary, "bus")

    assert not any(line.startswith("Montée") for line in lines)
    assert any("Transport en commun C1" in line for line in lines)
