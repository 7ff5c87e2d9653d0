"""Command line interface of the trip planner."""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any

import aiohttp

from trip_planner.adapters.config import AppConfig
from trip_planner.domain.models.departure import StopSchedule
from trip_planner.domain.models.transport_mode import SCHEDULED_LEG_MODES, LegMode, UiMode
from trip_planner.domain.models.trip_request import TripRequest
from trip_planner.main import TripPlannerApplication, configure_logging, create_application

# Departures listed per boarding point in text output
MAX_DEPARTURES_SHOWN = 3


def _json_default(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return str(value)


def to_jsonable(value: Any) -> Any:
    """Convert dataclasses (and lists and dicts of them) to JSON-ready values."""
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, list | tuple):
        return [to_jsonable(item) for item in value]
    if isinstance(value, dict):
        return {str(key): to_jsonable(item) for key, item in value.items()}
    return value


def print_json(value: Any) -> None:
    print(json.dumps(to_jsonable(value), indent=2, ensure_ascii=False, default=_json_default))


def _format_schedule(app: TripPlannerApplication, schedule: StopSchedule | None) -> str:
    if schedule is None:
        return "pas d'horaires"
    departures = schedule.record.departures[:MAX_DEPARTURES_SHOWN]
    if not departures:
        return f"{schedule.record.pattern_description}: aucun départ"
    times = ", ".join(app.formatter.format_departure(departure) for departure in departures)
    return f"{schedule.record.pattern_description}: {times}"


async def plan_command(app: TripPlannerApplication, args: argparse.Namespace) -> int:
    """Plan a trip and print its details and boarding point departures."""
    config = app.config
    request = TripRequest(
        origin=args.origin,
        destination=args.destination,
        ui_mode=args.mode or config.default_mode,
        wheelchair=args.wheelchair or config.wheelchair,
        walk_speed=args.walk_speed if args.walk_speed is not None else config.walk_speed,
        bike_speed=args.bike_speed if args.bike_speed is not None else config.bike_speed,
        safe_route=args.safe or config.safe_route,
        departure=args.depart,
    )

    service = app.planning_service
    result = await service.plan_trip(request)
    if not result.succeeded:
        message = result.failure.message if result.failure else "Aucun itinéraire"
        print(message, file=sys.stderr)
        return 1

    schedules: dict[int, StopSchedule | None] = {}
    if not args.no_stop_times:
        schedules = await service.correlate_stop_times(result) or {}

    if args.json:
        print_json({"result": result, "schedules": schedules})
        return 0

    print(f"\n{args.origin} → {args.destination} ({request.ui_mode})")
    print("=" * 70)
    for line in app.formatter.format_itinerary(result.itinerary, request.ui_mode):
        print(line)

    if result.boarding_points:
        print("\nArrêts:")
        for index, point in enumerate(result.boarding_points):
            line = f"  {point.route} ({point.raw_mode or point.mode}) - {point.stop_name}"
            if point.mode in SCHEDULED_LEG_MODES and not args.no_stop_times:
                line += f" - {_format_schedule(app, schedules.get(index))}"
            print(line)
    return 0


async def compare_command(app: TripPlannerApplication, args: argparse.Namespace) -> int:
    """Compare the best itinerary of every transport mode."""
    comparisons = await app.planning_service.compare_modes(
        args.origin, args.destination, include_co2=args.co2
    )
    if not comparisons:
        print("Impossible de trouver les coordonnées des lieux indiqués", file=sys.stderr)
        return 1

    if args.json:
        print_json(comparisons)
        return 0

    formatter = app.formatter
    for comparison in comparisons:
        if not comparison.available:
            print(f"  {comparison.ui_mode:<8} indisponible")
            continue
        print(
            f"  {comparison.ui_mode:<8} {formatter.format_duration(comparison.duration or 0):>10}"
            f"  {formatter.format_distance(comparison.distance or 0):>8}"
        )
    return 0


async def geocode_command(app: TripPlannerApplication, args: argparse.Namespace) -> int:
    place = await app.geocoding_repository.geocode(args.query)
    if place is None:
        print(f"No place found for '{args.query}'", file=sys.stderr)
        return 1

    if args.json:
        print_json(place)
    else:
        print(f"{place.label}")
        print(f"  {place.coordinate.as_query_value()}")
    return 0


async def suggest_command(app: TripPlannerApplication, args: argparse.Namespace) -> int:
    suggestions = await app.geocoding_repository.autocomplete(args.query)
    if args.json:
        print_json(suggestions)
        return 0

    if not suggestions:
        print(f"No suggestions for '{args.query}'", file=sys.stderr)
        return 1
    for suggestion in suggestions:
        print(f"  {suggestion.label} ({suggestion.coordinate.as_query_value()})")
    return 0


async def departures_command(app: TripPlannerApplication, args: argparse.Namespace) -> int:
    """Show the next departures of a route at a named stop."""
    mode = LegMode.parse(args.mode)
    route_id = f"{app.config.network_prefix}:{args.route}"
    schedule = await app.correlator.lookup(route_id, args.route, args.stop, mode)
    if schedule is None:
        print(f"No departures found for {args.route} at '{args.stop}'", file=sys.stderr)
        return 1

    if args.json:
        print_json(schedule)
        return 0

    formatter = app.formatter
    print(f"{args.route} - {schedule.record.pattern_description} ({schedule.stop_code})")
    for departure in schedule.record.departures:
        print(
            f"  {formatter.format_departure_time_absolute(departure)}"
            f"  {formatter.format_departure(departure)}"
        )
    return 0


async def impact_command(app: TripPlannerApplication, args: argparse.Namespace) -> int:
    impact = await app.environment_repository.co2_impact(args.distance_km)
    if impact is None:
        print("CO2 impact unavailable", file=sys.stderr)
        return 1
    print_json(impact)
    return 0


async def weather_command(app: TripPlannerApplication, args: argparse.Namespace) -> int:
    """Show current weather and air quality at a place."""
    place = await app.geocoding_repository.geocode(args.place)
    if place is None:
        print(f"No place found for '{args.place}'", file=sys.stderr)
        return 1

    environment = app.environment_repository
    weather, air_quality = await asyncio.gather(
        environment.weather(place.coordinate), environment.air_quality(place.coordinate)
    )
    if weather is None and air_quality is None:
        print("Weather unavailable", file=sys.stderr)
        return 1

    if args.json:
        print_json({"place": place, "weather": weather, "air_quality": air_quality})
        return 0

    print(place.label)
    for title, data in (("Météo", weather), ("Qualité de l'air", air_quality)):
        current = (data or {}).get("current") or {}
        units = (data or {}).get("current_units") or {}
        print(f"\n{title}:")
        for key, value in current.items():
            if key in ("time", "interval"):
                continue
            print(f"  {key}: {value}{units.get(key, '')}")
    return 0


COMMANDS = {
    "plan": plan_command,
    "compare": compare_command,
    "geocode": geocode_command,
    "suggest": suggest_command,
    "departures": departures_command,
    "impact": impact_command,
    "weather": weather_command,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Trip planner for the Grenoble public transport network",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Plan a bus trip with real-time departures
  trip-planner plan "Gare de Grenoble" "Campus" --mode bus

  # Compare all modes with CO2 estimates
  trip-planner compare "Gare de Grenoble" "Campus" --co2

  # Next departures of tram B at a stop
  trip-planner departures B "Hubert Dubedout" --mode tram
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    parser.add_argument("--config", help="Path to a TOML configuration file")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    plan_parser = subparsers.add_parser("plan", help="Plan a trip")
    plan_parser.add_argument("origin", help="Start address or place name")
    plan_parser.add_argument("destination", help="Destination address or place name")
    plan_parser.add_argument(
        "--mode", choices=[mode.value for mode in UiMode], help="Transport mode"
    )
    plan_parser.add_argument("--wheelchair", action="store_true", help="Accessible routes only")
    plan_parser.add_argument("--walk-speed", type=float, help="Walking speed")
    plan_parser.add_argument("--bike-speed", type=float, help="Cycling speed")
    plan_parser.add_argument("--safe", action="store_true", help="Prefer safe cycling routes")
    plan_parser.add_argument("--depart", help="Departure time (ISO 8601), default now")
    plan_parser.add_argument(
        "--no-stop-times", action="store_true", help="Skip real-time departure lookups"
    )
    plan_parser.add_argument("--json", action="store_true", help="Output as JSON")

    compare_parser = subparsers.add_parser("compare", help="Compare transport modes")
    compare_parser.add_argument("origin", help="Start address or place name")
    compare_parser.add_argument("destination", help="Destination address or place name")
    compare_parser.add_argument("--co2", action="store_true", help="Include CO2 estimates")
    compare_parser.add_argument("--json", action="store_true", help="Output as JSON")

    geocode_parser = subparsers.add_parser("geocode", help="Resolve a place name")
    geocode_parser.add_argument("query", help="Place name")
    geocode_parser.add_argument("--json", action="store_true", help="Output as JSON")

    suggest_parser = subparsers.add_parser("suggest", help="Suggest addresses")
    suggest_parser.add_argument("query", help="Partial address")
    suggest_parser.add_argument("--json", action="store_true", help="Output as JSON")

    departures_parser = subparsers.add_parser("departures", help="Next departures at a stop")
    departures_parser.add_argument("route", help="Route code (e.g. C1, B, 12)")
    departures_parser.add_argument("stop", help="Stop name")
    departures_parser.add_argument(
        "--mode", choices=["bus", "tram"], default="bus", help="Route mode (default: bus)"
    )
    departures_parser.add_argument("--json", action="store_true", help="Output as JSON")

    impact_parser = subparsers.add_parser("impact", help="CO2 impact of a distance")
    impact_parser.add_argument("distance_km", type=float, help="Distance in kilometers")

    weather_parser = subparsers.add_parser("weather", help="Weather and air quality at a place")
    weather_parser.add_argument("place", help="Place name")
    weather_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


async def run_command(app: TripPlannerApplication, args: argparse.Namespace) -> int:
    return await COMMANDS[args.command](app, args)


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging(logging.INFO if args.verbose else logging.WARNING)

    try:
        config = AppConfig()
        if args.config:
            config.config_file = args.config
        config.load_file_overrides()
    except (ValueError, OSError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        async with aiohttp.ClientSession() as session:
            app = await create_application(config, session)
            return await run_command(app, args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli_main()
