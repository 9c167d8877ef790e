"""
Purpose: Route computation for the presentation layer.
What it does:
Calls the directions client with an origin/destination pair, validates the
response shape, and turns each returned route into a Route:
- distance/duration text from the FIRST leg only (multi-leg routes are not supported)
- overview polyline decoded into points
- label midpoint = middle sample point of the decoded path
- step instructions from the first leg, when present

Returns at most MAX_ROUTES routes, in response order.

Rule: Stateless. On failure raise FetchError and let the caller keep its
previous RouteSet. No retries.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from geometry import Coordinate, GeometryError, decode, midpoint
from .directions_client import DirectionsClient, FetchError
from .models import MAX_ROUTES, Route, RouteSet

logger = logging.getLogger(__name__)


def _require(mapping: Any, key: str, where: str) -> Any:
    if not isinstance(mapping, dict) or key not in mapping:
        raise FetchError(f"Directions response missing '{key}' in {where}")
    return mapping[key]


def _require_text(mapping: Any, key: str, where: str) -> str:
    value = _require(mapping, key, where)
    if not isinstance(value, str) or not value:
        raise FetchError(f"Directions response has no text for '{key}' in {where}")
    return value


def parse_route(raw: Dict[str, Any], position: int = 0) -> Route:
    """
    Validate and convert one entry of the response's `routes` array.
    """
    where = f"routes[{position}]"

    legs = _require(raw, "legs", where)
    if not isinstance(legs, list) or not legs:
        raise FetchError(f"Directions response has no legs in {where}")
    leg = legs[0]

    distance_text = _require_text(_require(leg, "distance", f"{where}.legs[0]"), "text", f"{where}.legs[0].distance")
    duration_text = _require_text(_require(leg, "duration", f"{where}.legs[0]"), "text", f"{where}.legs[0].duration")

    encoded = _require(_require(raw, "overview_polyline", where), "points", f"{where}.overview_polyline")
    if not isinstance(encoded, str):
        raise FetchError(f"Directions response has a non-string polyline in {where}")

    try:
        points = decode(encoded)
        label_point = midpoint(points)
    except GeometryError as e:
        raise FetchError(f"Bad route geometry in {where}: {e}") from e

    steps = leg.get("steps")
    if steps is None:
        steps = []
    if not isinstance(steps, list):
        raise FetchError(f"Directions response has non-list steps in {where}.legs[0]")
    instructions = tuple(
        step["html_instructions"]
        for step in steps
        if isinstance(step, dict) and isinstance(step.get("html_instructions"), str)
    )

    return Route(
        distance_text=distance_text,
        duration_text=duration_text,
        midpoint=label_point,
        encoded_polyline=encoded,
        points=tuple(points),
        steps=instructions,
    )


def parse_routes(payload: Dict[str, Any]) -> RouteSet:
    """
    Explicit schema step for the directions JSON body.

    Only the first MAX_ROUTES routes are parsed; extra alternatives are dropped.
    """
    raw_routes = _require(payload, "routes", "response")
    if not isinstance(raw_routes, list):
        raise FetchError("Directions response 'routes' is not a list")

    routes: List[Route] = [
        parse_route(raw, position) for position, raw in enumerate(raw_routes[:MAX_ROUTES])
    ]
    return RouteSet.of(routes)


class RouteFetcher:
    """
    Fetches up to two alternative routes between two coordinates.
    """
    def __init__(self, client: Optional[DirectionsClient] = None):
        self.client = client or DirectionsClient()

    def fetch_routes(self, origin: Coordinate, destination: Coordinate) -> RouteSet:
        try:
            payload = self.client.get_directions(origin, destination)
            route_set = parse_routes(payload)
        except FetchError as e:
            logger.error(f"Failed to fetch routes {origin} -> {destination}: {e}")
            raise

        logger.info(f"Fetched {len(route_set)} route(s) {origin} -> {destination}")
        return route_set
