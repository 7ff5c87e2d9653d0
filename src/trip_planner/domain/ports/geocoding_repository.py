"""Geocoding repository port."""

from typing import Protocol

from trip_planner.domain.models.place import AddressSuggestion, GeocodedPlace


class GeocodingRepository(Protocol):
    """Port for resolving free text to places."""

    async def geocode(self, query: str) -> GeocodedPlace | None:
        """Resolve a place name to its first matching coordinate."""
        ...

    async def autocomplete(self, query: str) -> list[AddressSuggestion]:
        """Return address candidates for a partial query."""
        ...
