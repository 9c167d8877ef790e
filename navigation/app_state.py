"""
Purpose: Explicit UI state container plus the "fetch on both present" trigger.
What it does:
- AppState owns origin, destination, routes, selected_route and error_message.
  Each field has exactly one setter; observers are notified on change.
- RouteRefresher observes the (origin, destination) pair and calls
  RouteFetcher whenever both are set, including after any later change.
  A failed fetch keeps the previous RouteSet and records an error message.

Rule: State owns values and notifications. Fetching lives in routing/.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from geometry import Coordinate
from routing import FetchError, Route, RouteFetcher, RouteSet

logger = logging.getLogger(__name__)

EndpointObserver = Callable[[Optional[Coordinate], Optional[Coordinate]], None]
RoutesListener = Callable[[RouteSet], None]

FETCH_FAILED_MESSAGE = "Failed to fetch routes"


class AppState:
    """
    Process-wide screen state, passed explicitly to the components that need it.
    """

    def __init__(self) -> None:
        self._origin: Optional[Coordinate] = None
        self._destination: Optional[Coordinate] = None
        self._routes: RouteSet = RouteSet()
        self._selected_route: Optional[Route] = None
        self.error_message: Optional[str] = None

        self._endpoint_observers: List[EndpointObserver] = []
        self._routes_listeners: List[RoutesListener] = []

    # --- Read-only views ---

    @property
    def origin(self) -> Optional[Coordinate]:
        return self._origin

    @property
    def destination(self) -> Optional[Coordinate]:
        return self._destination

    @property
    def routes(self) -> RouteSet:
        return self._routes

    @property
    def selected_route(self) -> Optional[Route]:
        return self._selected_route

    # --- Observers ---

    def add_endpoint_observer(self, observer: EndpointObserver) -> None:
        self._endpoint_observers.append(observer)

    def add_routes_listener(self, listener: RoutesListener) -> None:
        self._routes_listeners.append(listener)

    # --- Setters (single writer per field) ---

    def set_origin(self, origin: Optional[Coordinate]) -> None:
        if origin == self._origin:
            return
        self._origin = origin
        self._endpoints_changed()

    def set_destination(self, destination: Optional[Coordinate]) -> None:
        if destination == self._destination:
            return
        self._destination = destination
        self._endpoints_changed()

    def set_routes(self, routes: RouteSet) -> None:
        self._routes = routes
        for listener in list(self._routes_listeners):
            listener(routes)

    def select_route(self, index: int) -> Route:
        """
        The user picked a route: narrow the working set to that one route.
        """
        narrowed = self._routes.narrow_to(index)
        self._selected_route = narrowed[0]
        self.set_routes(narrowed)
        return self._selected_route

    def _endpoints_changed(self) -> None:
        # a new search begins, the old pick no longer applies
        self._selected_route = None
        for observer in list(self._endpoint_observers):
            observer(self._origin, self._destination)


class RouteRefresher:
    """
    Observer on the (origin, destination) pair that fetches routes whenever
    both are present.
    """

    def __init__(self, state: AppState, fetcher: RouteFetcher) -> None:
        self.state = state
        self.fetcher = fetcher
        state.add_endpoint_observer(self.on_endpoints_changed)

    def on_endpoints_changed(self, origin: Optional[Coordinate], destination: Optional[Coordinate]) -> None:
        if origin is None or destination is None:
            return
        self.refresh(origin, destination)

    def refresh(self, origin: Coordinate, destination: Coordinate) -> Optional[RouteSet]:
        """
        Fetch and publish routes. On FetchError the previous RouteSet stays.
        """
        try:
            routes = self.fetcher.fetch_routes(origin, destination)
        except FetchError as e:
            self.state.error_message = FETCH_FAILED_MESSAGE
            logger.warning(f"Keeping previous routes after fetch failure: {e}")
            return None

        self.state.error_message = None
        self.state.set_routes(routes)
        return routes
