import pytest

from geometry import Coordinate, bearing
from location import LocationAccuracy, PermissionStatus, WatchOptions
from navigation import (
    MissingEndpointError,
    NavigationPolicy,
    NavigationSession,
    NavigationState,
    PermissionDenied,
)
from navigation.state_machines import SessionStateException, transition_to_navigating

from mocks import EagerLocationProvider, MockLocationProvider


@pytest.fixture
def session(mock_provider):
    return NavigationSession(mock_provider)


def test_start_without_permission_raises_and_stays_idle(kyiv, lviv):
    provider = MockLocationProvider(permission=PermissionStatus.DENIED)
    session = NavigationSession(provider)

    with pytest.raises(PermissionDenied):
        session.start(kyiv, lviv)

    assert session.state == NavigationState.IDLE
    assert provider.subscriptions == []


@pytest.mark.parametrize("missing", ["origin", "destination"])
def test_start_without_endpoint_raises_and_stays_idle(session, mock_provider, kyiv, lviv, missing):
    origin = None if missing == "origin" else kyiv
    destination = None if missing == "destination" else lviv

    with pytest.raises(MissingEndpointError):
        session.start(origin, destination)

    assert session.state == NavigationState.IDLE
    assert mock_provider.subscriptions == []


def test_start_subscribes_with_high_accuracy_watch(session, mock_provider, kyiv, lviv):
    state = session.start(kyiv, lviv)

    assert state == NavigationState.NAVIGATING
    assert session.is_navigating
    assert session.origin == kyiv and session.destination == lviv
    assert mock_provider.watch_options == [
        WatchOptions(accuracy=LocationAccuracy.HIGH, time_interval_ms=1000, distance_interval_m=1.0)
    ]


def test_position_update_emits_directive_with_fixed_pair_heading(session, mock_provider, kyiv, lviv):
    directives = []
    session.add_camera_listener(directives.append)
    session.start(kyiv, lviv)

    live = Coordinate(51.20, 29.00)
    mock_provider.emit(live)

    assert len(directives) == 1
    directive = directives[0]
    assert directive.center == live
    # heading comes from the origin/destination pair, not from the live position
    assert directive.heading == pytest.approx(bearing(kyiv, lviv))
    assert directive.heading != pytest.approx(bearing(live, lviv))
    assert directive.pitch == 45
    assert directive.zoom == 18
    assert directive.duration_ms == 1000
    assert session.last_directive == directive


def test_stop_cancels_subscription_and_ignores_later_updates(session, mock_provider, kyiv, lviv):
    directives = []
    session.add_camera_listener(directives.append)
    session.start(kyiv, lviv)
    mock_provider.emit(Coordinate(50.44, 30.40))

    session.stop()

    # the mock keeps emitting to every callback it ever received
    mock_provider.emit(Coordinate(50.43, 30.30))
    mock_provider.emit(Coordinate(50.42, 30.20))

    assert len(directives) == 1
    assert mock_provider.subscriptions[0].removed
    assert session.state == NavigationState.IDLE
    assert session.origin is None and session.destination is None


def test_stop_is_idempotent(session, mock_provider, kyiv, lviv):
    session.stop()
    session.start(kyiv, lviv)
    session.stop()
    session.stop()

    assert mock_provider.subscriptions[0].remove_calls == 1
    assert session.state == NavigationState.IDLE


def test_start_twice_keeps_single_subscription(session, mock_provider, kyiv, lviv):
    session.start(kyiv, lviv)
    session.start(kyiv, lviv)

    assert len(mock_provider.subscriptions) == 1
    # permission is only asked for the real transition
    assert mock_provider.permission_requests == 1


def test_restart_ignores_callbacks_from_previous_watch(session, mock_provider, kyiv, lviv):
    directives = []
    session.add_camera_listener(directives.append)

    session.start(kyiv, lviv)
    session.stop()
    session.start(lviv, kyiv)

    mock_provider.emit(Coordinate(49.9, 24.5))

    # two callbacks registered, only the live one produces a directive
    assert len(mock_provider.callbacks) == 2
    assert len(directives) == 1
    assert directives[0].heading == pytest.approx(bearing(lviv, kyiv))


def test_context_manager_exit_cancels_subscription(mock_provider, kyiv, lviv):
    with pytest.raises(RuntimeError):
        with NavigationSession(mock_provider) as session:
            session.start(kyiv, lviv)
            raise RuntimeError("screen torn down")

    assert mock_provider.subscriptions[0].removed
    assert session.state == NavigationState.IDLE


def test_listener_error_does_not_leak_subscription(session, mock_provider, kyiv, lviv):
    def broken_listener(directive):
        raise RuntimeError("map surface gone")

    session.add_camera_listener(broken_listener)
    session.start(kyiv, lviv)

    with pytest.raises(RuntimeError):
        mock_provider.emit(Coordinate(50.44, 30.40))

    session.close()
    assert mock_provider.subscriptions[0].removed


def test_removed_listener_gets_nothing(session, mock_provider, kyiv, lviv):
    directives = []
    session.add_camera_listener(directives.append)
    session.remove_camera_listener(directives.append)
    session.start(kyiv, lviv)

    mock_provider.emit(Coordinate(50.44, 30.40))

    assert directives == []


def test_custom_policy_shapes_directive(mock_provider, kyiv, lviv):
    policy = NavigationPolicy(camera_pitch_degrees=30, camera_zoom=16, camera_animation_ms=500,
                              watch_time_interval_ms=2000, watch_distance_interval_m=5)
    session = NavigationSession(mock_provider, policy)
    session.start(kyiv, lviv)

    mock_provider.emit(kyiv)

    assert mock_provider.watch_options[0].time_interval_ms == 2000
    assert mock_provider.watch_options[0].distance_interval_m == 5
    assert session.last_directive.pitch == 30
    assert session.last_directive.zoom == 16
    assert session.last_directive.duration_ms == 500


@pytest.mark.parametrize("kwargs", [
    {"camera_pitch_degrees": 120},
    {"camera_zoom": 0},
    {"camera_animation_ms": -1},
    {"watch_time_interval_ms": 0},
    {"watch_distance_interval_m": -1},
])
def test_policy_validate_rejects_bad_values(kwargs):
    with pytest.raises(ValueError):
        NavigationPolicy(**kwargs).validate()


def test_state_machine_rejects_double_start():
    assert transition_to_navigating(NavigationState.IDLE) == NavigationState.NAVIGATING

    with pytest.raises(SessionStateException):
        transition_to_navigating(NavigationState.NAVIGATING)


def test_stop_from_synchronous_first_fix_cancels_subscription(kyiv, lviv):
    provider = EagerLocationProvider()
    session = NavigationSession(provider)
    directives = []
    session.add_camera_listener(directives.append)
    session.add_camera_listener(lambda directive: session.stop())

    state = session.start(kyiv, lviv)

    assert state == NavigationState.IDLE
    assert not session.is_navigating
    assert len(directives) == 1
    assert provider.subscriptions[0].remove_calls == 1

    # nothing left to cancel
    session.stop()
    assert provider.subscriptions[0].remove_calls == 1


def test_synchronous_first_fix_without_stop_keeps_navigating(kyiv, lviv):
    provider = EagerLocationProvider()
    session = NavigationSession(provider)
    directives = []
    session.add_camera_listener(directives.append)

    session.start(kyiv, lviv)

    assert session.is_navigating
    assert directives[0].center == provider.position
    session.stop()
    assert provider.subscriptions[0].remove_calls == 1
