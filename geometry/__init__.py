"""
Geometry package.

Public API:
- Coordinate value type
- polyline codec: decode, encode, midpoint
- bearing between two coordinates

No HTTP, no navigation state. Pure functions only.
"""
from .models import Coordinate
from .polyline import decode, encode, midpoint, GeometryError, DecodeError, EmptyRouteError
from .bearing import bearing

__all__ = ["Coordinate",
           "decode",
             "encode",
             "midpoint",
             "bearing",
             "GeometryError",
             "DecodeError",
             "EmptyRouteError",
             ]
