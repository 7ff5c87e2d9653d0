"""Shared JSON-over-HTTP client for the external APIs."""

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Any

import aiohttp

from trip_planner.adapters.api_rate_limiter import ApiRateLimiter
from trip_planner.adapters.api_request_logger import log_api_request, log_api_response
from trip_planner.domain.models.error_details import ErrorDetails

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

DEFAULT_HEADERS = {
    "Accept": "application/json",
}


class JsonHttpClient:
    """GET requests returning decoded JSON, or None on any failure.

    Failures are logged and remembered in last_error; they never propagate.
    """

    def __init__(
        self,
        api_name: str,
        session: "ClientSession | None" = None,
        headers: dict[str, str] | None = None,
        timeout_seconds: float = 10,
        min_delay_seconds: float = 0.0,
    ) -> None:
        """Initialize with optional aiohttp session.

        Args:
            api_name: Name of the API, used for logging and the shared rate limiter.
            session: aiohttp ClientSession for HTTP requests.
            headers: Headers sent with every request.
            timeout_seconds: Total timeout of a request.
            min_delay_seconds: Minimum delay between two requests to this API.
        """
        self.api_name = api_name
        self._session = session
        self._headers = {**DEFAULT_HEADERS, **(headers or {})}
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._min_delay_seconds = min_delay_seconds
        self._rate_limiter: ApiRateLimiter | None = None
        self.last_error: ErrorDetails | None = None

    async def _get_rate_limiter(self) -> ApiRateLimiter:
        """Get the shared rate limiter for this API."""
        if self._rate_limiter is None:
            self._rate_limiter = await ApiRateLimiter.get_instance(
                self.api_name, self._min_delay_seconds
            )
        return self._rate_limiter

    async def _log_error_response(self, response: "ClientResponse", url: str) -> None:
        """Log error response details."""
        error_text = await response.text()
        error_body = error_text[:300] if error_text else "(empty response body)"
        logger.warning(f"{self.api_name} returned status {response.status} for {url}: {error_body}")
        self.last_error = ErrorDetails(status_code=response.status, reason=error_body)

    async def _handle_response(self, response: "ClientResponse", url: str) -> Any | None:
        if response.status != 200:
            await self._log_error_response(response, url)
            return None
        return await response.json(content_type=None)

    async def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any | None:
        """GET url and decode its JSON body.

        Args:
            url: Absolute request URL.
            params: Query parameters.

        Returns:
            Decoded JSON, or None if the session is missing, the request
            failed, the status was not 200 or the body was not JSON.
        """
        if not self._session:
            logger.warning(f"{self.api_name}: no HTTP session available")
            return None

        if self._min_delay_seconds > 0:
            rate_limiter = await self._get_rate_limiter()
            await rate_limiter.acquire()

        log_api_request(self.api_name, url, params=params, headers=self._headers)
        self.last_error = None
        started = time.monotonic()

        try:
            async with self._session.get(
                url, params=params, headers=self._headers, timeout=self._timeout
            ) as response:
                log_api_response(self.api_name, url, response.status, time.monotonic() - started)
                return await self._handle_response(response, url)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.warning(f"Error requesting {self.api_name} ({url}): {e}")
            self.last_error = ErrorDetails(reason=str(e) or type(e).__name__)
            return None
