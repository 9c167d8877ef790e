# bearing.py
# Initial great-circle bearing between two coordinates.
# No side effects, no imports from other project modules except the Coordinate model.

import math

from .models import Coordinate


def bearing(from_: Coordinate, to: Coordinate) -> float:
    """
    Forward azimuth from `from_` to `to` in degrees [0, 360),
    clockwise from true north.

    bearing(A, A) is 0.
    """
    lat1, lon1 = math.radians(from_.latitude), math.radians(from_.longitude)
    lat2, lon2 = math.radians(to.latitude), math.radians(to.longitude)

    d_lon = lon2 - lon1
    y = math.sin(d_lon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon)

    degrees = ((math.degrees(math.atan2(y, x)) % 360) + 360) % 360
    # tiny negative angles round up to exactly 360.0 in float math
    if degrees >= 360.0:
        degrees = 0.0
    return degrees
