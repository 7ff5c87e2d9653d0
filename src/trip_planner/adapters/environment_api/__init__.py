"""Environment feed adapters."""

from trip_planner.adapters.environment_api.environment_repository import EnvironmentApiRepository

__all__ = ["EnvironmentApiRepository"]
