"""Parser for OpenTripPlanner plan responses."""

import logging
from typing import Any

from trip_planner.domain.models.coordinate import Coordinate
from trip_planner.domain.models.itinerary import Itinerary, ItineraryPlan, Leg, Place
from trip_planner.domain.models.transport_mode import LegMode

logger = logging.getLogger(__name__)


class ItineraryParser:
    """Parses OTP `/plan` responses into ItineraryPlan objects."""

    @staticmethod
    def parse_plan(data: Any) -> ItineraryPlan:
        """Parse a plan response.

        Args:
            data: Decoded JSON response.

        Returns:
            ItineraryPlan, with no itineraries when the backend reported an
            error or returned nothing usable.
        """
        if not isinstance(data, dict):
            return ItineraryPlan()

        error = data.get("error")
        if error:
            message = error.get("msg", error) if isinstance(error, dict) else error
            logger.info(f"Planner returned an error: {message}")

        plan = data.get("plan") or {}
        raw_itineraries = plan.get("itineraries", []) if isinstance(plan, dict) else []
        if not isinstance(raw_itineraries, list):
            return ItineraryPlan()

        itineraries = []
        for raw in raw_itineraries:
            itinerary = ItineraryParser._parse_itinerary(raw)
            if itinerary:
                itineraries.append(itinerary)

        return ItineraryPlan(itineraries=tuple(itineraries))

    @staticmethod
    def _parse_itinerary(raw: Any) -> Itinerary | None:
        """Parse a single itinerary, None if it has no usable leg."""
        if not isinstance(raw, dict):
            return None

        legs = tuple(
            leg for leg in (ItineraryParser._parse_leg(r) for r in raw.get("legs") or []) if leg
        )
        if not legs:
            logger.warning("Skipping itinerary without legs")
            return None

        try:
            return Itinerary(
                legs=legs,
                duration=float(raw.get("duration") or 0),
                walk_distance=float(raw.get("walkDistance") or 0),
                start_time=int(raw.get("startTime") or 0),
                end_time=int(raw.get("endTime") or 0),
                elevation_gained=ItineraryParser._optional_float(raw.get("elevationGained")),
                elevation_lost=ItineraryParser._optional_float(raw.get("elevationLost")),
            )
        except (TypeError, ValueError) as e:
            logger.warning(f"Error parsing itinerary: {e}")
            return None

    @staticmethod
    def _parse_leg(raw: Any) -> Leg | None:
        """Parse a single leg, None if it is not an object."""
        if not isinstance(raw, dict):
            return None

        try:
            raw_mode = str(raw.get("mode") or "")
            geometry = raw.get("legGeometry") or {}
            points = geometry.get("points") if isinstance(geometry, dict) else None
            return Leg(
                mode=LegMode.parse(raw_mode),
                raw_mode=raw_mode,
                distance=float(raw.get("distance") or 0),
                duration=float(raw.get("duration") or 0),
                start_time=int(raw.get("startTime") or 0),
                end_time=int(raw.get("endTime") or 0),
                from_place=ItineraryParser._parse_place(raw.get("from")),
                to_place=ItineraryParser._parse_place(raw.get("to")),
                route_short_name=ItineraryParser._optional_str(raw.get("routeShortName")),
                route_long_name=ItineraryParser._optional_str(raw.get("routeLongName")),
                route=ItineraryParser._optional_str(raw.get("route")),
                route_id=ItineraryParser._optional_str(raw.get("routeId")),
                route_color=ItineraryParser._optional_str(raw.get("routeColor")),
                agency_name=ItineraryParser._optional_str(raw.get("agencyName")),
                headsign=ItineraryParser._optional_str(raw.get("headsign")),
                geometry=points if isinstance(points, str) else None,
                transit_leg=raw.get("transitLeg") is True,
            )
        except (TypeError, ValueError) as e:
            logger.warning(f"Error parsing leg: {e}")
            return None

    @staticmethod
    def _parse_place(raw: Any) -> Place | None:
        """Parse a leg endpoint, None if it has no valid coordinate."""
        if not isinstance(raw, dict):
            return None

        try:
            coordinate = Coordinate(latitude=float(raw["lat"]), longitude=float(raw["lon"]))
        except (KeyError, TypeError, ValueError):
            return None

        stop_id = raw.get("stopId")
        return Place(
            coordinate=coordinate,
            name=str(raw.get("name") or ""),
            stop_id=str(stop_id) if stop_id else None,
        )

    @staticmethod
    def _optional_float(value: Any) -> float | None:
        if value is None:
            return None
        try:
            return float(value)
        except (TypeError, ValueError):
            return None

    @staticmethod
    def _optional_str(value: Any) -> str | None:
        """Text of a scalar field; numeric codes such as routeShortName 12 become "12"."""
        if value is None or value == "" or isinstance(value, dict | list):
            return None
        return str(value)
