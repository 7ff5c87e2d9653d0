"""Tests for the API rate limiter."""

import asyncio
import time

import pytest

from trip_planner.adapters.api_rate_limiter import ApiRateLimiter


class TestApiRateLimiter:
    """Tests for ApiRateLimiter class."""

    @pytest.mark.asyncio
    async def test_when_first_request_then_it_does_not_wait(self) -> None:
        """Given a fresh limiter, when acquiring, then it returns immediately."""
        limiter = ApiRateLimiter("nominatim", min_delay_seconds=1.0)

        start = time.monotonic()
        await limiter.acquire()

        assert time.monotonic() - start < 0.05

    @pytest.mark.asyncio
    async def test_when_requests_follow_each_other_then_delay_is_kept(self) -> None:
        """Given a used limiter, when acquiring again, then the minimum delay is kept."""
        delay = 0.15
        limiter = ApiRateLimiter("mobilites_api", min_delay_seconds=delay)
        await limiter.acquire()

        start = time.monotonic()
        await limiter.acquire()

        assert time.monotonic() - start >= delay * 0.9

    @pytest.mark.asyncio
    async def test_when_delay_has_passed_then_request_does_not_wait(self) -> None:
        """Given the delay already elapsed, when acquiring, then it returns immediately."""
        delay = 0.1
        limiter = ApiRateLimiter("mobilites_api", min_delay_seconds=delay)
        await limiter.acquire()
        await asyncio.sleep(delay * 1.5)

        start = time.monotonic()
        await limiter.acquire()

        assert time.monotonic() - start < 0.05

    @pytest.mark.asyncio
    async def test_when_same_api_requested_then_instance_is_shared(self) -> None:
        """Given one API name, when getting instances, then the same limiter is returned."""
        first = await ApiRateLimiter.get_instance("nominatim", 1.0)
        second = await ApiRateLimiter.get_instance("nominatim", 1.0)
        other = await ApiRateLimiter.get_instance("address_api", 1.0)

        assert first is second
        assert first is not other

    @pytest.mark.asyncio
    async def test_when_requests_are_concurrent_then_they_are_spaced(self) -> None:
        """Given three concurrent callers, when acquiring, then they are spaced by the delay."""
        delay = 0.1
        limiter = ApiRateLimiter("mobilites_api", min_delay_seconds=delay)
        start = time.monotonic()
        finished: list[float] = []

        async def request() -> None:
            async with limiter:
                finished.append(time.monotonic() - start)

        await asyncio.gather(request(), request(), request())

        finished.sort()
        assert finished[0] < 0.05
        assert finished[1] >= delay * 0.8
        assert finished[2] >= delay * 1.6

    @pytest.mark.asyncio
    async def test_when_apis_differ_then_they_do_not_block_each_other(self) -> None:
        """Given two APIs, when one was just used, then the other is immediate."""
        nominatim = await ApiRateLimiter.get_instance("nominatim", 0.5)
        address_api = await ApiRateLimiter.get_instance("address_api", 0.5)
        await nominatim.acquire()

        start = time.monotonic()
        await address_api.acquire()

        assert time.monotonic() - start < 0.05

    @pytest.mark.asyncio
    async def test_when_longer_delay_requested_then_shared_limiter_keeps_it(self) -> None:
        """Given a shared limiter, when a caller asks for a longer delay, then it is raised."""
        first = await ApiRateLimiter.get_instance("nominatim", 0.5)
        second = await ApiRateLimiter.get_instance("nominatim", 1.0)
        third = await ApiRateLimiter.get_instance("nominatim", 0.2)

        assert first is second is third
        assert first.min_delay_seconds == 1.0

    @pytest.mark.asyncio
    async def test_when_reset_then_new_instances_are_created(self) -> None:
        """Given a registered limiter, when resetting, then the next lookup creates a new one."""
        before = await ApiRateLimiter.get_instance("open_meteo", 0.1)

        ApiRateLimiter.reset()
        after = await ApiRateLimiter.get_instance("open_meteo", 0.1)

        assert before is not after
