"""Encoded polyline codec for leg geometries.

The backend ships each leg's path as a Google encoded polyline at precision
1e5. Decoding is delegated to the `polyline` package; this module adds the
input validation that package leaves out, so a corrupted string is reported
as a PolylineDecodeError instead of an IndexError or a silently wrong path.
"""

import logging
from collections.abc import Iterable

import polyline

from trip_planner.domain.models.coordinate import Coordinate

logger = logging.getLogger(__name__)

PRECISION = 5

# Every encoded character is a 5-bit chunk offset by 63; bit 0x20 marks
# that another chunk of the same value follows.
_CHAR_OFFSET = 63
_MAX_CHAR = _CHAR_OFFSET + 0x3F
_CONTINUATION_BIT = 0x20


class PolylineDecodeError(ValueError):
    """Raised when an encoded polyline cannot be decoded."""


def _validate(encoded: str) -> None:
    for position, char in enumerate(encoded):
        if not _CHAR_OFFSET <= ord(char) <= _MAX_CHAR:
            raise PolylineDecodeError(f"invalid character {char!r} at position {position}")
    if encoded and (ord(encoded[-1]) - _CHAR_OFFSET) & _CONTINUATION_BIT:
        raise PolylineDecodeError("truncated polyline: last value is incomplete")


def decode(encoded: str) -> list[Coordinate]:
    """Decode an encoded polyline into coordinates.

    Args:
        encoded: Encoded polyline string.

    Returns:
        Coordinates in path order (empty for an empty string).

    Raises:
        PolylineDecodeError: If the string is not a well-formed polyline.
    """
    if not isinstance(encoded, str):
        raise PolylineDecodeError(f"expected str, got {type(encoded).__name__}")

    _validate(encoded)

    try:
        pairs = polyline.decode(encoded, PRECISION)
    except (IndexError, ValueError, TypeError) as e:
        raise PolylineDecodeError(f"malformed polyline: {e}") from e

    try:
        return [Coordinate(latitude=lat, longitude=lon) for lat, lon in pairs]
    except ValueError as e:
        raise PolylineDecodeError(f"decoded point out of range: {e}") from e


def encode(coordinates: Iterable[Coordinate]) -> str:
    """Encode coordinates as a polyline string."""
    return polyline.encode([(c.latitude, c.longitude) for c in coordinates], PRECISION)


def decode_or_empty(encoded: str) -> list[Coordinate]:
    """Decode a polyline, logging and returning an empty list on failure."""
    try:
        return decode(encoded)
    except PolylineDecodeError as e:
        logger.warning(f"Failed to decode polyline: {e}")
        return []
