"""
Purpose: Drive-mode session (the Idle <-> Navigating state machine owner).
What it does:
- start(): checks the foreground location permission and both trip endpoints,
  captures the fixed origin/destination pair and subscribes to live positions
- on each live position: emits a CameraDirective centred on the live position,
  heading = bearing(fixed origin, fixed destination)
- stop() / close(): cancels the position subscription on every exit path

The heading deliberately uses the static origin -> destination pair captured at
start, not the direction of travel. See DESIGN.md before changing it.

Rule: Session owns the subscription. Rendering lives in the presentation layer.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from geometry import Coordinate, bearing
from location import LocationProvider, PermissionStatus, Subscription
from .models import CameraDirective, CameraListener, NavigationState
from .policy import NavigationPolicy, default_navigation_policy
from .state_machines.session_state import transition_to_idle, transition_to_navigating

logger = logging.getLogger(__name__)


class NavigationError(Exception):
    """Base class for recoverable drive-mode errors."""
    pass


class PermissionDenied(NavigationError):
    """Raised when the foreground location permission is not granted."""
    pass


class MissingEndpointError(NavigationError):
    """Raised when drive mode is started without an origin or a destination."""
    pass


class NavigationSession:
    """
    Stateful drive-mode session.

    Usage:
        with NavigationSession(provider) as session:
            session.add_camera_listener(map_view.animate_camera)
            session.start(origin, destination)
            ...
            session.stop()
    """

    def __init__(self, provider: LocationProvider, policy: Optional[NavigationPolicy] = None) -> None:
        self.provider = provider
        self.policy = policy or default_navigation_policy()

        self._state: NavigationState = NavigationState.IDLE
        self._origin: Optional[Coordinate] = None
        self._destination: Optional[Coordinate] = None
        self._subscription: Optional[Subscription] = None
        # identifies the current watch; callbacks from an older watch are ignored
        self._watch_token: Optional[object] = None
        self._listeners: List[CameraListener] = []
        self._last_directive: Optional[CameraDirective] = None

    # ------------------------------------------------------------------
    # Read-only properties
    # ------------------------------------------------------------------

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def is_navigating(self) -> bool:
        return self._state == NavigationState.NAVIGATING

    @property
    def origin(self) -> Optional[Coordinate]:
        return self._origin

    @property
    def destination(self) -> Optional[Coordinate]:
        return self._destination

    @property
    def last_directive(self) -> Optional[CameraDirective]:
        return self._last_directive

    # ------------------------------------------------------------------
    # Presentation hooks
    # ------------------------------------------------------------------

    def add_camera_listener(self, listener: CameraListener) -> None:
        self._listeners.append(listener)

    def remove_camera_listener(self, listener: CameraListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self, origin: Optional[Coordinate], destination: Optional[Coordinate]) -> NavigationState:
        """
        Idle -> Navigating.

        Raises:
            PermissionDenied: foreground permission not granted (state stays IDLE).
            MissingEndpointError: origin or destination is None (state stays IDLE).
        """
        if self.is_navigating:
            logger.debug("start() while already navigating, ignoring")
            return self._state

        status = self.provider.request_foreground_permission()
        if status != PermissionStatus.GRANTED:
            logger.warning(f"Drive mode refused: location permission {status.value}")
            raise PermissionDenied(f"Location permission {status.value}")

        if origin is None or destination is None:
            logger.warning("Drive mode refused: origin or destination not set")
            raise MissingEndpointError("Origin and destination must both be set")

        new_state = transition_to_navigating(self._state)

        token = object()
        self._origin = origin
        self._destination = destination
        self._watch_token = token
        self._state = new_state

        try:
            subscription = self.provider.watch_position(
                self.policy.watch_options(),
                lambda position: self._on_position(token, position),
            )
        except Exception:
            self._reset()
            raise

        # a provider may deliver the first fix synchronously, and a listener may stop() on it
        if token is not self._watch_token:
            subscription.remove()
            logger.info("Drive mode stopped before the position watch was registered")
            return self._state

        self._subscription = subscription
        logger.info(f"Drive mode activated {origin} -> {destination}")
        return self._state

    def stop(self) -> NavigationState:
        """
        Navigating -> Idle. Always cancels the subscription. Safe to call when idle.
        """
        subscription = self._subscription
        was_navigating = self.is_navigating
        self._reset()

        if subscription is not None:
            subscription.remove()

        if was_navigating:
            logger.info("Drive mode stopped")
        return self._state

    def close(self) -> None:
        """Teardown: same as stop()."""
        self.stop()

    def __enter__(self) -> NavigationSession:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Position updates
    # ------------------------------------------------------------------

    def heading(self) -> float:
        """Camera heading for the active trip: bearing of the fixed pair."""
        if self._origin is None or self._destination is None:
            return 0.0
        return bearing(self._origin, self._destination)

    def _on_position(self, token: object, position: Coordinate) -> None:
        if token is not self._watch_token or not self.is_navigating:
            return

        directive = CameraDirective(
            center=position,
            heading=self.heading(),
            pitch=self.policy.camera_pitch_degrees,
            zoom=self.policy.camera_zoom,
            duration_ms=self.policy.camera_animation_ms,
        )
        self._last_directive = directive

        for listener in list(self._listeners):
            listener(directive)

    def _reset(self) -> None:
        self._state = transition_to_idle(self._state)
        self._origin = None
        self._destination = None
        self._subscription = None
        self._watch_token = None
