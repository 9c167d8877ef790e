"""
Purpose: Polyline codec for route geometry.
What it does:
- decode: compact polyline string -> ordered list of Coordinate
- encode: inverse of decode (used for fixtures and simulations)
- midpoint: middle sample point of a decoded path, used to place the
  distance/duration label of a route

The varint/zig-zag work is done by the `polyline` package; this module maps
its (lat, lng) tuples to Coordinate and turns its low-level failures into
DecodeError.

Rule: Pure functions. Malformed input raises DecodeError, never reads past the end.
"""

from __future__ import annotations

from typing import List, Sequence

import polyline as polyline_lib

from .models import Coordinate

PRECISION = 5
# every encoded chunk is chr(value + 63) with value in [0, 63]
MIN_CHAR = "?"
MAX_CHAR = "~"


class GeometryError(ValueError):
    """Base class for malformed or empty route geometry."""
    pass


class DecodeError(GeometryError):
    """Raised when an encoded polyline is truncated or contains invalid characters."""
    pass


class EmptyRouteError(GeometryError):
    """Raised when a midpoint is requested for a route with no points."""
    pass


def _check_characters(encoded: str) -> None:
    # the library does not reject out-of-range characters, it decodes garbage
    for position, char in enumerate(encoded):
        if char < MIN_CHAR or char > MAX_CHAR:
            raise DecodeError(f"Invalid polyline character {char!r} at position {position}")


def decode(encoded: str) -> List[Coordinate]:
    """
    Decode a polyline string into coordinates.

    Args:
        encoded: polyline string (e.g. overview_polyline.points)

    Returns:
        List[Coordinate] in path order. Empty input gives an empty list.
    """
    _check_characters(encoded)

    try:
        pairs = polyline_lib.decode(encoded, PRECISION)
    except (IndexError, ValueError) as e:
        raise DecodeError(f"Polyline truncated or malformed: {e}") from e

    return [Coordinate(latitude=lat, longitude=lng) for lat, lng in pairs]


def encode(points: Sequence[Coordinate]) -> str:
    """Encode coordinates into a polyline string (rounded to 1e-5 degrees)."""
    return polyline_lib.encode([(point.latitude, point.longitude) for point in points], PRECISION)


def midpoint(points: Sequence[Coordinate]) -> Coordinate:
    """
    Middle sample point of a path: the element at index len(points) // 2.

    This is not a geometric midpoint. It is only meant for label placement.
    """
    if not points:
        raise EmptyRouteError("Cannot take the midpoint of an empty route")
    return points[len(points) // 2]
