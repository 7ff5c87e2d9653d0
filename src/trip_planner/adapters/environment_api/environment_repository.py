"""Environment repository adapter: CO2 impact, weather and air quality.

These feeds are passed through as the providers return them.
"""

import logging
from typing import TYPE_CHECKING, Any

from trip_planner.adapters.http_client import JsonHttpClient
from trip_planner.domain.models.coordinate import Coordinate
from trip_planner.domain.ports.environment_repository import EnvironmentRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class EnvironmentApiRepository(EnvironmentRepository):
    """Impact CO2 and Open-Meteo lookups."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        impact_co2_url: str = "https://impactco2.fr/api/v1/transport",
        weather_url: str = "https://api.open-meteo.com/v1/forecast",
        air_quality_url: str = "https://air-quality-api.open-meteo.com/v1/air-quality",
        timeout_seconds: float = 10,
    ) -> None:
        self._impact_co2 = JsonHttpClient(
            "impact_co2", session=session, timeout_seconds=timeout_seconds
        )
        self._open_meteo = JsonHttpClient(
            "open_meteo", session=session, timeout_seconds=timeout_seconds
        )
        self._impact_co2_url = impact_co2_url
        self._weather_url = weather_url
        self._air_quality_url = air_quality_url

    async def co2_impact(self, distance_km: float) -> dict[str, Any] | None:
        """CO2 emissions of each transport mode over a distance."""
        params = {"km": round(distance_km, 3), "displayAll": 1}
        return self._as_dict(await self._impact_co2.get_json(self._impact_co2_url, params=params))

    async def weather(self, coordinate: Coordinate) -> dict[str, Any] | None:
        """Current temperature, precipitation and weather code."""
        params = {
            "latitude": coordinate.latitude,
            "longitude": coordinate.longitude,
            "current": "temperature_2m,precipitation,weather_code,wind_speed_10m",
        }
        return self._as_dict(await self._open_meteo.get_json(self._weather_url, params=params))

    async def air_quality(self, coordinate: Coordinate) -> dict[str, Any] | None:
        """Current European AQI and particulate levels."""
        params = {
            "latitude": coordinate.latitude,
            "longitude": coordinate.longitude,
            "current": "european_aqi,pm10,pm2_5,nitrogen_dioxide,ozone",
        }
        return self._as_dict(await self._open_meteo.get_json(self._air_quality_url, params=params))

    @staticmethod
    def _as_dict(data: Any) -> dict[str, Any] | None:
        return data if isinstance(data, dict) else None
