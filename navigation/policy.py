"""
Purpose: Central configuration for drive mode.
What it does:

Stores all tunable parameters for the navigation session:

CAMERA_PITCH_DEGREES = 45
CAMERA_ZOOM = 18
CAMERA_ANIMATION_MS = 1000
WATCH_TIME_INTERVAL_MS = 1000
WATCH_DISTANCE_INTERVAL_M = 1

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations
from dataclasses import dataclass

from location import LocationAccuracy, WatchOptions


@dataclass(frozen=True)
class NavigationPolicy:
    """
    Central configuration for the camera-follow directive and the position watch.
    """

    # --- Camera follow ---
    camera_pitch_degrees: float = 45.0
    camera_zoom: float = 18.0
    # How long the presentation layer animates towards each directive.
    camera_animation_ms: int = 1000

    # --- Position watch ---
    watch_accuracy: LocationAccuracy = LocationAccuracy.HIGH
    watch_time_interval_ms: int = 1000
    watch_distance_interval_m: float = 1.0

    def watch_options(self) -> WatchOptions:
        return WatchOptions(
            accuracy=self.watch_accuracy,
            time_interval_ms=self.watch_time_interval_ms,
            distance_interval_m=self.watch_distance_interval_m,
        )

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if not 0 <= self.camera_pitch_degrees <= 90:
            raise ValueError("camera_pitch_degrees must be within [0, 90]")

        if self.camera_zoom <= 0:
            raise ValueError("camera_zoom must be > 0")

        if self.camera_animation_ms < 0:
            raise ValueError("camera_animation_ms must be >= 0")

        if self.watch_time_interval_ms <= 0:
            raise ValueError("watch_time_interval_ms must be > 0")

        if self.watch_distance_interval_m < 0:
            raise ValueError("watch_distance_interval_m must be >= 0")


def default_navigation_policy() -> NavigationPolicy:
    """
    Convenience factory for the default policy.
    """
    p = NavigationPolicy()
    p.validate()
    return p
