"""Composition root of the trip planner."""

import logging
import sys
from dataclasses import dataclass

import aiohttp

from trip_planner.adapters.cache import RouteStopCache
from trip_planner.adapters.config import AppConfig
from trip_planner.adapters.environment_api import EnvironmentApiRepository
from trip_planner.adapters.formatters import ItineraryFormatter
from trip_planner.adapters.geocoding_api import GeocodingApiRepository
from trip_planner.adapters.mobilites_api import (
    MobilitesDepartureRepository,
    MobilitesHttpClient,
    MobilitesItineraryRepository,
    MobilitesStopRepository,
)
from trip_planner.application.services import StopTimeCorrelator, TripPlanningService

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging once for the process."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


@dataclass
class TripPlannerApplication:
    """Wired components, sharing one HTTP session."""

    config: AppConfig
    planning_service: TripPlanningService
    correlator: StopTimeCorrelator
    geocoding_repository: GeocodingApiRepository
    environment_repository: EnvironmentApiRepository
    formatter: ItineraryFormatter
    route_stop_cache: RouteStopCache


async def create_application(
    config: AppConfig, session: aiohttp.ClientSession
) -> TripPlannerApplication:
    """Wire adapters and services, and load the route stop cache.

    Args:
        config: Application configuration.
        session: aiohttp session used by every adapter.
    """
    route_stop_cache = RouteStopCache(config.route_stop_cache_file or None)
    await route_stop_cache.load()

    mobilites_client = MobilitesHttpClient(
        config.mobilites_base_url,
        session=session,
        origin=config.mobilites_origin,
        timeout_seconds=config.api_timeout,
    )
    geocoding_repo = GeocodingApiRepository(
        session=session,
        nominatim_url=config.nominatim_url,
        address_api_url=config.address_api_url,
        locality_suffix=config.locality_suffix,
        user_agent=config.user_agent,
        autocomplete_min_chars=config.autocomplete_min_chars,
        autocomplete_limit=config.autocomplete_limit,
        timeout_seconds=config.api_timeout,
    )
    environment_repo = EnvironmentApiRepository(
        session=session,
        impact_co2_url=config.impact_co2_url,
        weather_url=config.weather_url,
        air_quality_url=config.air_quality_url,
        timeout_seconds=config.api_timeout,
    )

    correlator = StopTimeCorrelator(
        MobilitesStopRepository(mobilites_client, route_stop_cache),
        MobilitesDepartureRepository(mobilites_client),
        network_prefix=config.network_prefix,
    )
    planning_service = TripPlanningService(
        geocoding_repo,
        MobilitesItineraryRepository(mobilites_client),
        correlator,
        environment_repository=environment_repo,
        pause_between_modes_seconds=config.sleep_ms_between_calls / 1000.0,
    )
    logger.debug(f"Trip planner wired against {config.mobilites_base_url}")

    return TripPlannerApplication(
        config=config,
        planning_service=planning_service,
        correlator=correlator,
        geocoding_repository=geocoding_repo,
        environment_repository=environment_repo,
        formatter=ItineraryFormatter(config),
        route_stop_cache=route_stop_cache,
    )


if __name__ == "__main__":
    from trip_planner.cli import cli_main

    cli_main()
