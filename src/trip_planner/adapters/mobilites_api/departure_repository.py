"""Departure repository adapter for the real-time stop times feed."""

import logging
from urllib.parse import quote

from trip_planner.adapters.mobilites_api.constants import STOP_TIMES_PATH
from trip_planner.adapters.mobilites_api.mobilites_http_client import MobilitesHttpClient
from trip_planner.adapters.mobilites_api.stop_times_parser import StopTimesParser
from trip_planner.domain.models.departure import DepartureRecord
from trip_planner.domain.ports.departure_repository import DepartureRepository

logger = logging.getLogger(__name__)


class MobilitesDepartureRepository(DepartureRepository):
    """Fetches `/index/stops/{code}/stoptimes`."""

    def __init__(self, http_client: MobilitesHttpClient) -> None:
        self._http_client = http_client

    async def get_stop_departures(self, stop_code: str) -> list[DepartureRecord]:
        """Get upcoming departures at a stop grouped by pattern, empty on failure."""
        path = STOP_TIMES_PATH.format(stop_code=quote(stop_code, safe=":"))
        data = await self._http_client.get_path(path)
        if data is None:
            return []

        records = StopTimesParser.parse_stop_times(data)
        logger.debug(f"Stop {stop_code}: {len(records)} pattern group(s)")
        return records
