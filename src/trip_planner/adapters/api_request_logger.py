"""Optional tracing of outgoing API calls, enabled with TRIP_LOG_REQUESTS=true."""

import logging
import os
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

REDACTED = "***"
# Lower-case header names whose values never reach the log
SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key", "proxy-authorization"})


def should_log_requests() -> bool:
    return os.getenv("TRIP_LOG_REQUESTS", "").lower() == "true"


def request_url(url: str, params: dict[str, Any] | None) -> str:
    """Full URL as sent, with query parameters in a stable order."""
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(sorted(params.items()))}"


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    return {
        name: REDACTED if name.lower() in SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def log_api_request(
    api_name: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Log one outgoing GET when request tracing is enabled.

    Args:
        api_name: Name of the API, prefixed to the log line.
        url: Request URL without query string.
        params: Query parameters (optional).
        headers: Request headers (optional, credentials are redacted).
    """
    if not should_log_requests():
        return

    line = f"{api_name}: GET {request_url(url, params)}"
    if headers:
        shown = ", ".join(f"{name}={value}" for name, value in redact_headers(headers).items())
        line += f" [{shown}]"
    logger.info(line)


def log_api_response(api_name: str, url: str, status: int, elapsed_seconds: float) -> None:
    """Log the status and latency of a traced request."""
    if not should_log_requests():
        return
    logger.info(f"{api_name}: {status} from {url} in {elapsed_seconds * 1000:.0f} ms")
