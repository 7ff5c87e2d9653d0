"""Geocoding repository adapter: Nominatim search and address autocomplete."""

import logging
from typing import TYPE_CHECKING, Any

from trip_planner.adapters.http_client import JsonHttpClient
from trip_planner.domain.models.coordinate import Coordinate
from trip_planner.domain.models.place import AddressSuggestion, GeocodedPlace
from trip_planner.domain.ports.geocoding_repository import GeocodingRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

# Nominatim usage policy: at most one request per second
NOMINATIM_MIN_DELAY_SECONDS = 1.0


class GeocodingApiRepository(GeocodingRepository):
    """Resolves place names with Nominatim and suggests addresses with the address API."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        nominatim_url: str = "https://nominatim.openstreetmap.org/search",
        address_api_url: str = "https://api-adresse.data.gouv.fr/search/",
        locality_suffix: str = ", Grenoble, France",
        user_agent: str = "mobility-trip-planner/0.1",
        autocomplete_min_chars: int = 3,
        autocomplete_limit: int = 5,
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize with optional aiohttp session and service settings.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            nominatim_url: Nominatim search endpoint.
            address_api_url: Address API search endpoint.
            locality_suffix: Appended to every geocoding query.
            user_agent: User-Agent required by Nominatim.
            autocomplete_min_chars: Shorter queries get no suggestions.
            autocomplete_limit: Maximum number of suggestions.
            timeout_seconds: Total timeout of a request.
        """
        headers = {"User-Agent": user_agent}
        self._nominatim = JsonHttpClient(
            "nominatim",
            session=session,
            headers=headers,
            timeout_seconds=timeout_seconds,
            min_delay_seconds=NOMINATIM_MIN_DELAY_SECONDS,
        )
        self._address_api = JsonHttpClient(
            "address_api", session=session, headers=headers, timeout_seconds=timeout_seconds
        )
        self._nominatim_url = nominatim_url
        self._address_api_url = address_api_url
        self._locality_suffix = locality_suffix
        self._autocomplete_min_chars = autocomplete_min_chars
        self._autocomplete_limit = autocomplete_limit

    async def geocode(self, query: str) -> GeocodedPlace | None:
        """Resolve a place name to the first Nominatim result.

        Args:
            query: Free text place name; the locality suffix is appended.

        Returns:
            The first result, or None if there is none or the request failed.
        """
        params = {"q": f"{query}{self._locality_suffix}", "format": "json", "limit": 1}
        data = await self._nominatim.get_json(self._nominatim_url, params=params)
        if not isinstance(data, list) or not data:
            logger.info(f"No geocoding result for {query!r}")
            return None

        return self._parse_nominatim_result(data[0], query)

    @staticmethod
    def _parse_nominatim_result(result: Any, query: str) -> GeocodedPlace | None:
        if not isinstance(result, dict):
            return None
        try:
            coordinate = Coordinate(latitude=float(result["lat"]), longitude=float(result["lon"]))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Invalid geocoding result for {query!r}: {e}")
            return None
        return GeocodedPlace(label=str(result.get("display_name") or query), coordinate=coordinate)

    async def autocomplete(self, query: str) -> list[AddressSuggestion]:
        """Suggest addresses for a partial query.

        Queries shorter than the configured minimum return no suggestions
        without calling the API.
        """
        if len(query.strip()) < self._autocomplete_min_chars:
            return []

        params = {"q": query.strip(), "autocomplete": 1, "limit": self._autocomplete_limit}
        data = await self._address_api.get_json(self._address_api_url, params=params)
        if not isinstance(data, dict):
            return []

        suggestions = []
        for feature in data.get("features") or []:
            suggestion = self._parse_feature(feature)
            if suggestion:
                suggestions.append(suggestion)
        return suggestions

    @staticmethod
    def _parse_feature(feature: Any) -> AddressSuggestion | None:
        """Parse a GeoJSON feature ([lon, lat] coordinates, properties.label)."""
        if not isinstance(feature, dict):
            return None
        try:
            lon, lat = feature["geometry"]["coordinates"][:2]
            label = feature["properties"]["label"]
            return AddressSuggestion(
                label=str(label), coordinate=Coordinate(latitude=float(lat), longitude=float(lon))
            )
        except (KeyError, TypeError, ValueError):
            return None
