"""
Purpose: Domain models for the routing capability.
What it does:
- Route (distance/duration text from the first leg, encoded polyline,
  decoded points, label midpoint, step instructions)
- RouteSet (ordered, at most MAX_ROUTES entries, first = primary/fastest)

Rule: No HTTP calls, no parsing. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence, Tuple

from geometry import Coordinate

MAX_ROUTES = 2


@dataclass(frozen=True)
class Route:
    """
    One candidate driving route, read-only after creation.
    """
    distance_text: str
    duration_text: str
    midpoint: Coordinate
    encoded_polyline: str

    #decoded geometry, kept so the map layer does not decode twice
    points: Tuple[Coordinate, ...] = ()
    #first leg html_instructions, in order
    steps: Tuple[str, ...] = ()


@dataclass(frozen=True)
class RouteSet:
    """
    Ordered alternatives in service response order.
    Truncated to MAX_ROUTES on construction.
    """
    routes: Tuple[Route, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # frozen dataclass: bypass __setattr__ to normalise the field
        object.__setattr__(self, "routes", tuple(self.routes)[:MAX_ROUTES])

    @classmethod
    def of(cls, routes: Sequence[Route]) -> RouteSet:
        return cls(routes=tuple(routes))

    @property
    def primary(self) -> Optional[Route]:
        return self.routes[0] if self.routes else None

    def narrow_to(self, index: int) -> RouteSet:
        """Keep only the route at `index` (the user's pick)."""
        if index < 0 or index >= len(self.routes):
            raise IndexError(f"No route at index {index} (have {len(self.routes)})")
        return RouteSet(routes=(self.routes[index],))

    def __len__(self) -> int:
        return len(self.routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self.routes)

    def __getitem__(self, index: int) -> Route:
        return self.routes[index]
