"""Shared test fixtures for typed-geometry."""

import pytest

from typed_geometry import Box2D, point2


@pytest.fixture
def square_box():
    """20x20 box centred on the origin."""
    return Box2D(point2(-10.0, -10.0), point2(10.0, 10.0))


@pytest.fixture
def offsets_box():
    """Box used with side offsets."""
    return Box2D.from_points([point2(50.0, 25.0), point2(100.0, 160.0)])


@pytest.fixture
def rounding_box():
    """Box with fractional corners, including a negative half."""
    return Box2D.from_points([point2(-25.5, -40.4), point2(60.3, 36.5)])


@pytest.fixture
def sample_boxes():
    """Well-formed boxes covering overlap, nesting, touching and disjoint cases."""
    return [
        Box2D(point2(-15.0, -20.0), point2(10.0, 20.0)),
        Box2D(point2(-10.0, -20.0), point2(15.0, 20.0)),
        Box2D(point2(-2.0, -3.0), point2(2.0, 3.0)),
        Box2D(point2(10.0, -20.0), point2(15.0, 20.0)),
        Box2D(point2(40.0, 40.0), point2(50.0, 45.0)),
        Box2D(point2(0.0, 0.0), point2(0.0, 5.0)),
    ]
