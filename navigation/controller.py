"""
Purpose: Orchestrator for user actions on the map screen (the "glue").
What it does:
Wires AppState, RouteRefresher and NavigationSession together and exposes one
method per user action:
- locate_origin: permission + one-shot current position -> origin
- set_origin / set_destination: places search result or map press
- pick_route: narrow the route set to the user's choice
- start_drive_mode / stop_drive_mode
Errors are recorded on AppState.error_message for the UI and re-raised.
"""

from __future__ import annotations

import logging
from typing import Optional

from geometry import Coordinate
from location import LocationProvider, PermissionStatus
from routing import Route, RouteFetcher
from .app_state import AppState, RouteRefresher
from .models import CameraListener, NavigationState
from .policy import NavigationPolicy
from .session import MissingEndpointError, NavigationError, NavigationSession, PermissionDenied

logger = logging.getLogger(__name__)

PERMISSION_DENIED_MESSAGE = "Location access denied"
ORIGIN_NOT_SET_MESSAGE = "Origin is not set"
DESTINATION_NOT_SET_MESSAGE = "Destination is not set"
NO_ROUTE_SELECTED_MESSAGE = "No route selected"


class NavigationController:
    """
    Coordinates the map screen's state, route fetching and drive mode.
    """
    def __init__(
        self,
        provider: LocationProvider,
        fetcher: RouteFetcher,
        state: Optional[AppState] = None,
        policy: Optional[NavigationPolicy] = None,
    ):
        self.provider = provider
        self.state = state or AppState()
        self.refresher = RouteRefresher(self.state, fetcher)
        self.session = NavigationSession(provider, policy)

    # --- Endpoints ---

    def locate_origin(self) -> Coordinate:
        """
        Ask for the foreground permission and use the current position as origin.
        """
        status = self.provider.request_foreground_permission()
        if status != PermissionStatus.GRANTED:
            self.state.error_message = PERMISSION_DENIED_MESSAGE
            raise PermissionDenied(f"Location permission {status.value}")

        current = self.provider.get_current_position()
        logger.info(f"Current position {current}")
        self.state.set_origin(current)
        return current

    def set_origin(self, origin: Coordinate) -> None:
        self.state.set_origin(origin)

    def set_destination(self, destination: Coordinate) -> None:
        self.state.set_destination(destination)

    # --- Route choice ---

    def pick_route(self, index: int) -> Route:
        return self.state.select_route(index)

    # --- Drive mode ---

    def add_camera_listener(self, listener: CameraListener) -> None:
        self.session.add_camera_listener(listener)

    def start_drive_mode(self) -> NavigationState:
        if self.state.selected_route is None:
            self.state.error_message = NO_ROUTE_SELECTED_MESSAGE
            raise NavigationError(NO_ROUTE_SELECTED_MESSAGE)

        try:
            return self.session.start(self.state.origin, self.state.destination)
        except PermissionDenied:
            self.state.error_message = PERMISSION_DENIED_MESSAGE
            raise
        except MissingEndpointError:
            if self.state.origin is None:
                self.state.error_message = ORIGIN_NOT_SET_MESSAGE
            else:
                self.state.error_message = DESTINATION_NOT_SET_MESSAGE
            raise

    def stop_drive_mode(self) -> NavigationState:
        return self.session.stop()

    def close(self) -> None:
        self.session.close()
