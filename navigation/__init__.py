"""
Navigation domain package.

Public API:
- NavigationSession and its errors (NavigationError, PermissionDenied, MissingEndpointError)
- NavigationState, CameraDirective
- NavigationPolicy / default_navigation_policy
- AppState, RouteRefresher, NavigationController
"""
from .models import CameraDirective, NavigationState
from .policy import NavigationPolicy, default_navigation_policy
from .session import MissingEndpointError, NavigationError, NavigationSession, PermissionDenied
from .app_state import AppState, RouteRefresher
from .controller import NavigationController

__all__ = ["CameraDirective",
           "NavigationState",
             "NavigationPolicy",
             "default_navigation_policy",
             "NavigationSession",
             "NavigationError",
             "PermissionDenied",
             "MissingEndpointError",
             "AppState",
             "RouteRefresher",
             "NavigationController",
             ]
