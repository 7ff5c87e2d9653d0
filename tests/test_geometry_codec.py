"""Tests for the encoded polyline codec."""

import pytest

from trip_planner.application.services.geometry_codec import (
    PolylineDecodeError,
    decode,
    decode_or_empty,
    encode,
)
from trip_planner.domain.models import Coordinate

# Reference polyline from the encoding format documentation
REFERENCE_POLYLINE = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"
REFERENCE_COORDINATES = [
    Coordinate(38.5, -120.2),
    Coordinate(40.7, -120.95),
    Coordinate(43.252, -126.453),
]


def test_when_decoding_reference_polyline_then_coordinates_match() -> None:
    """Given the reference polyline, when decoding, then the documented points are returned."""
    result = decode(REFERENCE_POLYLINE)

    assert result == REFERENCE_COORDINATES


def test_when_decoding_twice_then_results_are_identical() -> None:
    """Given a valid polyline, when decoding it twice, then both results are equal."""
    assert decode(REFERENCE_POLYLINE) == decode(REFERENCE_POLYLINE)


def test_when_decoding_empty_string_then_returns_empty_list() -> None:
    """Given an empty string, when decoding, then no coordinates are returned."""
    assert decode("") == []


def test_when_encoding_reference_coordinates_then_reference_polyline_is_produced() -> None:
    """Given the reference coordinates, when encoding, then the reference polyline is produced."""
    assert encode(REFERENCE_COORDINATES) == REFERENCE_POLYLINE


def test_when_decoding_grenoble_path_then_precision_is_five_decimals() -> None:
    """Given an encoded Grenoble path, when decoding, then points keep 1e-5 precision."""
    path = [Coordinate(45.19052, 5.71411), Coordinate(45.19123, 5.72008)]

    result = decode(encode(path))

    assert result == path


@pytest.mark.parametrize(
    "corrupted",
    [
        "_p~iF~ps|U_",  # last chunk announces a continuation
        "_p~iF ~ps|U",  # space is below the character range
        "_p~iF\x7f~ps|U",  # DEL is above the character range
    ],
)
def test_when_decoding_corrupted_polyline_then_raises_decode_error(corrupted: str) -> None:
    """Given a corrupted polyline, when decoding, then PolylineDecodeError is raised."""
    with pytest.raises(PolylineDecodeError):
        decode(corrupted)


def test_when_decoding_non_string_then_raises_decode_error() -> None:
    """Given a non-string value, when decoding, then PolylineDecodeError is raised."""
    with pytest.raises(PolylineDecodeError, match="expected str"):
        decode(None)  # type: ignore[arg-type]


def test_decode_error_is_a_value_error() -> None:
    """Given a decode error, when catching ValueError, then it is caught."""
    with pytest.raises(ValueError):
        decode("_p~iF~ps|U_")


def test_when_decoding_or_empty_corrupted_polyline_then_returns_empty_list() -> None:
    """Given a corrupted polyline, when using decode_or_empty, then an empty list is returned."""
    assert decode_or_empty("_p~iF~ps|U_") == []


def test_when_decoding_or_empty_valid_polyline_then_returns_coordinates() -> None:
    """Given a valid polyline, when using decode_or_empty, then coordinates are returned."""
    assert decode_or_empty(REFERENCE_POLYLINE) == REFERENCE_COORDINATES
