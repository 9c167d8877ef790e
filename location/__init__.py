"""
Location package.

Public API:
- LocationProvider / Subscription ports
- PermissionStatus, LocationAccuracy, WatchOptions
"""
from .provider import (
    LocationAccuracy,
    LocationProvider,
    PermissionStatus,
    PositionCallback,
    Subscription,
    WatchOptions,
)

__all__ = ["LocationAccuracy",
           "LocationProvider",
             "PermissionStatus",
             "PositionCallback",
             "Subscription",
             "WatchOptions",
             ]
