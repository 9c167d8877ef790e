import pytest

from geometry import Coordinate

from mocks import MockLocationProvider, make_route_json


@pytest.fixture
def kyiv():
    return Coordinate(50.4501, 30.5234)


@pytest.fixture
def lviv():
    return Coordinate(49.8397, 24.0297)


@pytest.fixture
def kyiv_lviv_points(kyiv, lviv):
    # Rough M06 corridor: Kyiv -> Zhytomyr -> Rivne -> Lviv
    return [
        kyiv,
        Coordinate(50.25465, 28.65867),
        Coordinate(50.61999, 26.25161),
        lviv,
    ]


@pytest.fixture
def kyiv_lviv_payload(kyiv_lviv_points, kyiv, lviv):
    return {
        "status": "OK",
        "routes": [
            make_route_json(kyiv_lviv_points, "541 km", "6 hours 38 mins", steps=["Head <b>west</b>"]),
            make_route_json([kyiv, Coordinate(49.55, 27.95), lviv], "560 km", "7 hours 5 mins"),
        ],
    }


@pytest.fixture
def mock_provider():
    return MockLocationProvider()
