"""Tests for the Mobilités M repositories."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from trip_planner.adapters.cache import RouteStopCache
from trip_planner.adapters.mobilites_api import (
    MobilitesDepartureRepository,
    MobilitesHttpClient,
    MobilitesItineraryRepository,
    MobilitesStopRepository,
)
from trip_planner.adapters.mobilites_api.stop_repository import find_stop
from trip_planner.domain.models import Coordinate

C1_STOPS = [
    {"gtfsId": "SEM:GENCHAVANT", "name": "Chavant", "lat": 45.187, "lon": 5.731},
    {"gtfsId": "SEM:GENVICTHUGO", "name": "Victor Hugo", "lat": 45.189, "lon": 5.726},
]


def mock_client(payload=None) -> MagicMock:
    client = MagicMock(spec=MobilitesHttpClient)
    client.get_path = AsyncMock(return_value=payload)
    return client


class TestFindStop:
    """Tests for stop name matching."""

    def test_when_registered_name_is_contained_then_stop_matches(self) -> None:
        """Given a longer planner stop name, when matching, then the registered name matches."""
        assert find_stop(C1_STOPS, "GRENOBLE, VICTOR HUGO") == C1_STOPS[1]

    def test_when_names_are_equal_ignoring_case_then_stop_matches(self) -> None:
        """Given the same name in another case, when matching, then the stop matches."""
        assert find_stop(C1_STOPS, "chavant") == C1_STOPS[0]

    def test_when_no_name_is_contained_then_no_stop(self) -> None:
        """Given an unrelated name, when matching, then None is returned."""
        assert find_stop(C1_STOPS, "Gares") is None


class TestMobilitesStopRepository:
    """Tests for MobilitesStopRepository."""

    @pytest.mark.asyncio
    async def test_when_route_not_cached_then_stops_are_fetched_and_cached(self) -> None:
        """Given an empty cache, when finding a stop code, then the route stops are fetched once."""
        cache = RouteStopCache()
        await cache.load()
        client = mock_client(C1_STOPS)
        repo = MobilitesStopRepository(client, cache)

        code = await repo.find_stop_code("SEM:C1", "Victor Hugo")
        again = await repo.find_stop_code("SEM:C1", "Chavant")

        assert code == "SEM:GENVICTHUGO"
        assert again == "SEM:GENCHAVANT"
        client.get_path.assert_awaited_once_with("/routers/default/index/routes/SEM:C1/stops")
        assert cache.get("SEM:C1") == C1_STOPS

    @pytest.mark.asyncio
    async def test_when_route_is_cached_then_no_request_is_made(self) -> None:
        """Given a cached route, when finding a stop code, then the API is not called."""
        cache = RouteStopCache()
        await cache.load()
        await cache.set("SEM:C1", C1_STOPS)
        client = mock_client()
        repo = MobilitesStopRepository(client, cache)

        assert await repo.find_stop_code("SEM:C1", "Chavant") == "SEM:GENCHAVANT"
        client.get_path.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_when_api_fails_then_nothing_is_cached(self) -> None:
        """Given an API failure, when finding a stop code, then None and no cache entry."""
        cache = RouteStopCache()
        await cache.load()
        repo = MobilitesStopRepository(mock_client(None), cache)

        assert await repo.find_stop_code("SEM:C1", "Chavant") is None
        assert cache.get("SEM:C1") is None

    @pytest.mark.asyncio
    async def test_when_stop_name_is_empty_then_no_lookup(self) -> None:
        """Given an empty stop name, when finding a stop code, then None without a request."""
        cache = RouteStopCache()
        await cache.load()
        client = mock_client(C1_STOPS)
        repo = MobilitesStopRepository(client, cache)

        assert await repo.find_stop_code("SEM:C1", "") is None
        client.get_path.assert_not_awaited()


class TestMobilitesItineraryRepository:
    """Tests for MobilitesItineraryRepository."""

    @pytest.mark.asyncio
    async def test_when_planning_then_coordinates_and_query_are_sent(self) -> None:
        """Given two coordinates, when planning, then fromPlace/toPlace and the query are sent."""
        client = mock_client({"plan": {"itineraries": [{"legs": [{"mode": "WALK"}]}]}})
        repo = MobilitesItineraryRepository(client)

        plan = await repo.plan(
            Coordinate(45.1885, 5.7245), Coordinate(45.193, 5.768), {"mode": "WALK"}
        )

        assert plan is not None
        assert len(plan.itineraries) == 1
        client.get_path.assert_awaited_once_with(
            "/routers/default/plan",
            params={"fromPlace": "45.1885,5.7245", "toPlace": "45.193,5.768", "mode": "WALK"},
        )

    @pytest.mark.asyncio
    async def test_when_backend_unreachable_then_none_is_returned(self) -> None:
        """Given no response, when planning, then None is returned."""
        repo = MobilitesItineraryRepository(mock_client(None))

        assert await repo.plan(Coordinate(45.0, 5.0), Coordinate(45.1, 5.1), {}) is None


class TestMobilitesDepartureRepository:
    """Tests for MobilitesDepartureRepository."""

    @pytest.mark.asyncio
    async def test_when_fetching_departures_then_stop_times_are_parsed(self) -> None:
        """Given a stop times response, when fetching, then records are returned."""
        client = mock_client([{"pattern": {"id": "SEM:C1:0:1", "desc": "Meylan"}, "times": []}])
        repo = MobilitesDepartureRepository(client)

        records = await repo.get_stop_departures("SEM:GENCHAVANT")

        assert [r.pattern_id for r in records] == ["SEM:C1:0:1"]
        client.get_path.assert_awaited_once_with(
            "/routers/default/index/stops/SEM:GENCHAVANT/stoptimes"
        )

    @pytest.mark.asyncio
    async def test_when_feed_unavailable_then_empty_list(self) -> None:
        """Given no response, when fetching, then an empty list is returned."""
        assert await MobilitesDepartureRepository(mock_client(None)).get_stop_departures("X") == []


def test_http_client_strips_trailing_slash_and_sends_origin() -> None:
    """Given a base URL with trailing slash, when building the client, then it is normalised."""
    client = MobilitesHttpClient("https://data.mobilites-m.fr/api/", origin="tests")

    assert client.base_url == "https://data.mobilites-m.fr/api"
    assert client._headers["Origin"] == "tests"
