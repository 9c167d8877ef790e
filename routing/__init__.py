#Marks routing as a package.
#Re-exports the public API (RouteFetcher, DirectionsClient, Route, RouteSet, FetchError)
#so other modules import from routing without knowing internal file names.
#No business logic.

from .directions_client import DirectionsClient, FetchError
from .models import MAX_ROUTES, Route, RouteSet
from .route_fetcher import RouteFetcher, parse_route, parse_routes

__all__ = [
           "DirectionsClient",
           "FetchError",
             "MAX_ROUTES",
             "Route",
             "RouteSet",
             "RouteFetcher",
             "parse_route",
             "parse_routes",
             ]
