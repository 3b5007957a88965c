"""Tests for the stereographic sky projection."""

from __future__ import annotations

import math

import numpy as np
import pytest

from planetarium_tools.coordinates import (
    CartesianCoordinates,
    HorizontalCoordinates,
    StereographicProjection,
)


@pytest.fixture
def projection() -> StereographicProjection:
    return StereographicProjection(HorizontalCoordinates.of_deg(45.0, 45.0))


def test_center_projects_to_origin(projection: StereographicProjection) -> None:
    """The projection centre lands on (0, 0)."""
    xy = projection.apply(projection.center)
    assert xy.x == pytest.approx(0.0, abs=1e-12)
    assert xy.y == pytest.approx(0.0, abs=1e-12)


def test_apply_below_center(projection: StereographicProjection) -> None:
    """A point 15° below the centre on the same azimuth."""
    xy = projection.apply(HorizontalCoordinates.of_deg(45.0, 30.0))
    assert xy.x == pytest.approx(0.0, abs=1e-12)
    assert xy.y == pytest.approx(-0.131652497587396, abs=1e-12)


def test_east_of_center_has_positive_x(projection: StereographicProjection) -> None:
    """x grows with azimuth."""
    assert projection.apply(HorizontalCoordinates.of_deg(60.0, 45.0)).x > 0


def test_parallel_circles(projection: StereographicProjection) -> None:
    """Circle of the 27° altitude parallel."""
    parallel = HorizontalCoordinates.of_deg(0.0, 27.0)
    assert projection.circle_center_for_parallel(parallel).y == pytest.approx(0.608998740073319, abs=1e-12)
    assert projection.circle_center_for_parallel(parallel).x == 0.0
    assert projection.circle_radius_for_parallel(parallel) == pytest.approx(0.767383180397855, abs=1e-12)


def test_parallel_through_antipode_is_a_line(projection: StereographicProjection) -> None:
    """The parallel at -45° passes through the antipode of the centre."""
    parallel = HorizontalCoordinates.of_deg(0.0, -45.0)
    assert projection.circle_radius_for_parallel(parallel) == math.inf


def test_apply_to_angle(projection: StereographicProjection) -> None:
    """Projected diameter of a half-degree disc."""
    assert projection.apply_to_angle(math.radians(0.5)) == pytest.approx(0.004363330052625, abs=1e-14)


@pytest.mark.parametrize('az_deg, alt_deg', [(45.0, 45.0), (10.0, 5.0), (300.0, 70.0), (180.0, -20.0)])
def test_inverse_apply_round_trip(
    projection: StereographicProjection, az_deg: float, alt_deg: float
) -> None:
    """inverse_apply(apply(h)) returns h."""
    hor = HorizontalCoordinates.of_deg(az_deg, alt_deg)
    back = projection.inverse_apply(projection.apply(hor))
    assert back.alt_deg == pytest.approx(alt_deg, abs=1e-9)
    delta = (back.az_deg - az_deg + 180.0) % 360.0 - 180.0
    assert delta == pytest.approx(0.0, abs=1e-9)


def test_inverse_apply_origin(projection: StereographicProjection) -> None:
    """The plane origin maps back to the centre."""
    assert projection.inverse_apply(CartesianCoordinates.of(0.0, 0.0)) == projection.center


def test_apply_arrays_match_scalar(projection: StereographicProjection) -> None:
    """apply_arrays agrees with apply."""
    az = np.radians([0.0, 45.0, 120.0, 300.0])
    alt = np.radians([10.0, 30.0, -5.0, 80.0])
    x, y = projection.apply_arrays(az, alt)
    for i in range(4):
        xy = projection.apply(HorizontalCoordinates.of(az[i], alt[i]))
        assert x[i] == pytest.approx(xy.x)
        assert y[i] == pytest.approx(xy.y)
