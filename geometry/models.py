"""
Purpose: Core value type for the geometry domain.
What it does:
Defines Coordinate (latitude, longitude in degrees, WGS84) as an immutable value.

Rule: No decoding, no math. Models only.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Coordinate:
    """
    Immutable geographic coordinate in decimal degrees.
    """
    latitude: float
    longitude: float

    def as_query(self) -> str:
        """Format as 'lat,lng' for directions request params."""
        return f"{self.latitude},{self.longitude}"

    @classmethod
    def from_lat_lng(cls, location: Mapping[str, Any]) -> Coordinate:
        """
        Build a Coordinate from a {'lat': .., 'lng': ..} mapping
        (the shape used by places search details and directions JSON).
        """
        return cls(latitude=float(location["lat"]), longitude=float(location["lng"]))
