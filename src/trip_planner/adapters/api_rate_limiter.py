"""Pacing of outgoing requests to the public APIs.

Nominatim allows one request per second per client, and the Mobilités M
API asks clients to space their calls. Every adapter talking to the same
API shares one ApiRateLimiter, looked up by API name.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import ClassVar

logger = logging.getLogger(__name__)


class ApiRateLimiter:
    """Hands out request slots at least min_delay_seconds apart.

    A caller reserves the next free slot under the lock and then sleeps
    until it outside the lock, so concurrent callers queue in order.
    """

    _instances: ClassVar[dict[str, ApiRateLimiter]] = {}
    _registry_lock: ClassVar[asyncio.Lock | None] = None

    def __init__(self, api_name: str, min_delay_seconds: float = 1.0) -> None:
        """Initialize the rate limiter.

        Args:
            api_name: Name of the API (for logging).
            min_delay_seconds: Minimum delay between two request slots.
        """
        self.api_name = api_name
        self.min_delay_seconds = min_delay_seconds
        self._next_slot: float | None = None
        self._lock = asyncio.Lock()

    @classmethod
    async def get_instance(cls, api_name: str, min_delay_seconds: float = 1.0) -> ApiRateLimiter:
        """Get or create the shared limiter of an API.

        When callers ask for different delays, the longest one is kept.
        """
        if cls._registry_lock is None:
            cls._registry_lock = asyncio.Lock()

        async with cls._registry_lock:
            limiter = cls._instances.get(api_name)
            if limiter is None:
                limiter = cls(api_name, min_delay_seconds)
                cls._instances[api_name] = limiter
                logger.info(f"Pacing {api_name} requests {min_delay_seconds}s apart")
            elif min_delay_seconds > limiter.min_delay_seconds:
                logger.info(
                    f"Raising {api_name} delay from {limiter.min_delay_seconds}s "
                    f"to {min_delay_seconds}s"
                )
                limiter.min_delay_seconds = min_delay_seconds
            return limiter

    @classmethod
    def reset(cls) -> None:
        """Forget all shared limiters."""
        cls._instances.clear()
        cls._registry_lock = None

    async def _reserve_slot(self) -> float:
        async with self._lock:
            now = time.monotonic()
            slot = now if self._next_slot is None else max(now, self._next_slot)
            self._next_slot = slot + self.min_delay_seconds
            return slot - now

    async def acquire(self) -> None:
        """Wait for this caller's request slot."""
        wait_time = await self._reserve_slot()
        if wait_time > 0:
            logger.debug(f"{self.api_name}: waiting {wait_time:.2f}s for a request slot")
            await asyncio.sleep(wait_time)

    async def __aenter__(self) -> ApiRateLimiter:
        await self.acquire()
        return self

    async def __aexit__(
        self, _exc_type: type | None, _exc_val: Exception | None, _exc_tb: object
    ) -> None:
        """Slots are not released early."""
