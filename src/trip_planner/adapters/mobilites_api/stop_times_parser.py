"""Parser for stop time responses of the route index."""

import logging
from typing import Any

from trip_planner.domain.models.departure import DepartureRecord, ScheduledDeparture

logger = logging.getLogger(__name__)


class StopTimesParser:
    """Parses `/index/stops/{code}/stoptimes` responses into DepartureRecord objects.

    The response is a list of pattern groups:
    [{"pattern": {"id": "SEM:C1:0:1712", "desc": "GRENOBLE, ..."},
      "times": [{"serviceDay": 1760824800, "realtimeDeparture": 30600,
                 "scheduledDeparture": 30540, "realtime": true}, ...]}, ...]
    """

    @staticmethod
    def parse_stop_times(data: Any) -> list[DepartureRecord]:
        """Parse pattern groups in feed order, skipping malformed ones."""
        if not isinstance(data, list):
            return []

        records = []
        for group in data:
            record = StopTimesParser._parse_group(group)
            if record:
                records.append(record)
        return records

    @staticmethod
    def _parse_group(group: Any) -> DepartureRecord | None:
        if not isinstance(group, dict):
            return None

        pattern = group.get("pattern") or {}
        pattern_id = pattern.get("id") if isinstance(pattern, dict) else None
        if not pattern_id:
            logger.warning("Skipping stop time group without pattern id")
            return None

        departures = tuple(
            d for d in (StopTimesParser._parse_time(t) for t in group.get("times") or []) if d
        )
        return DepartureRecord(
            pattern_id=str(pattern_id),
            pattern_description=str(pattern.get("desc") or pattern.get("shortDesc") or ""),
            departures=departures,
        )

    @staticmethod
    def _parse_time(raw: Any) -> ScheduledDeparture | None:
        if not isinstance(raw, dict):
            return None

        try:
            scheduled = raw.get("scheduledDeparture")
            realtime_departure = raw.get("realtimeDeparture", scheduled)
            return ScheduledDeparture(
                service_day=int(raw["serviceDay"]),
                realtime_departure=int(realtime_departure),
                realtime=raw.get("realtime") is True,
                scheduled_departure=int(scheduled) if scheduled is not None else None,
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Error parsing stop time: {e}")
            return None
