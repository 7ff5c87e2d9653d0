"""Environment repository port."""

from typing import Any, Protocol

from trip_planner.domain.models.coordinate import Coordinate


class EnvironmentRepository(Protocol):
    """Port for CO2, weather and air quality lookups (provider JSON passed through)."""

    async def co2_impact(self, distance_km: float) -> dict[str, Any] | None:
        """CO2 estimate per transport mode for a distance."""
        ...

    async def weather(self, coordinate: Coordinate) -> dict[str, Any] | None:
        """Current weather at a coordinate."""
        ...

    async def air_quality(self, coordinate: Coordinate) -> dict[str, Any] | None:
        """Current air quality at a coordinate."""
        ...
