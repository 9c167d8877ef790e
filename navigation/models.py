"""
Purpose: Core data models for the navigation domain.
What it does:
Defines the session state enum and the camera-follow directive handed to the
presentation layer on every live position update.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from geometry import Coordinate


class NavigationState(str, Enum):
    IDLE = "idle"
    NAVIGATING = "navigating"


@dataclass(frozen=True)
class CameraDirective:
    """
    Where the map camera should move next. The presentation layer animates
    to it over `duration_ms`.
    """
    center: Coordinate
    heading: float
    pitch: float = 45.0
    zoom: float = 18.0
    duration_ms: int = 1000


CameraListener = Callable[[CameraDirective], None]
