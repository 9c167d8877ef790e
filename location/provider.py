"""
Purpose: Geolocation provider port.
What it does:
Describes the device-location service the core consumes:
- a permission request returning a PermissionStatus
- a one-shot current position
- a throttled position watch delivering Coordinates until removed

Concrete providers (platform SDK bridge, scripted replay, test mocks) subclass
LocationProvider.

Rule: No navigation logic here.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from geometry import Coordinate


class PermissionStatus(str, Enum):
    GRANTED = "granted"
    DENIED = "denied"
    UNDETERMINED = "undetermined"


class LocationAccuracy(Enum):
    LOWEST = 1
    LOW = 2
    BALANCED = 3
    HIGH = 4
    HIGHEST = 5
    BEST_FOR_NAVIGATION = 6


@dataclass(frozen=True)
class WatchOptions:
    """
    Throttling for a position watch: an update is delivered at most every
    `time_interval_ms` and only after moving `distance_interval_m`.
    """
    accuracy: LocationAccuracy = LocationAccuracy.HIGH
    time_interval_ms: int = 1000
    distance_interval_m: float = 1.0


PositionCallback = Callable[[Coordinate], None]


class Subscription(ABC):
    """Handle for an active position watch."""

    @abstractmethod
    def remove(self) -> None:
        """Stop delivering updates. Safe to call more than once."""
        pass


class LocationProvider(ABC):
    """
    Blueprint for all geolocation providers.
    """
    @abstractmethod
    def request_foreground_permission(self) -> PermissionStatus:
        pass

    @abstractmethod
    def get_current_position(self) -> Coordinate:
        pass

    @abstractmethod
    def watch_position(self, options: WatchOptions, callback: PositionCallback) -> Subscription:
        pass
