from navigation.models import NavigationState


class SessionStateException(Exception):
    """Raised when an invalid session transition is attempted."""
    pass


def transition_to_navigating(state: NavigationState) -> NavigationState:
    """
    Called when the user activates drive mode, after the session has confirmed
    the permission grant and both trip endpoints.
    """
    if state != NavigationState.IDLE:
        raise SessionStateException(f"Cannot start navigating from {state}")

    return NavigationState.NAVIGATING


def transition_to_idle(state: NavigationState) -> NavigationState:
    """
    Called on stop and on teardown. Always allowed: stopping an idle
    session is a no-op.
    """
    return NavigationState.IDLE
