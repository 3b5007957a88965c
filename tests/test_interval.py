"""Tests for closed and right-open intervals and argument checks."""

from __future__ import annotations

import math

import pytest

from planetarium_tools.interval import (
    ClosedInterval,
    RightOpenInterval,
    check_argument,
    check_in_interval,
)


def test_interval_rejects_inverted_or_empty_bounds() -> None:
    """Construction requires low < high."""
    with pytest.raises(ValueError):
        RightOpenInterval.of(1.0, 1.0)
    with pytest.raises(ValueError):
        ClosedInterval.of(2.0, -2.0)
    with pytest.raises(ValueError):
        ClosedInterval.symmetric(0.0)


def test_symmetric_intervals() -> None:
    """symmetric(size) is centred on zero."""
    closed = ClosedInterval.symmetric(4.0)
    assert (closed.low, closed.high) == (-2.0, 2.0)
    assert closed.contains(2.0)
    right_open = RightOpenInterval.symmetric(4.0)
    assert right_open.contains(-2.0)
    assert not right_open.contains(2.0)
    assert right_open.size == 4.0
    assert right_open.center == 0.0


def test_right_open_reduce_uses_floor_modulo() -> None:
    """Negative values wrap from the top like a true modulo."""
    hours = RightOpenInterval.of(0.0, 24.0)
    assert hours.reduce(25.5) == pytest.approx(1.5)
    assert hours.reduce(-1.0) == pytest.approx(23.0)
    assert hours.reduce(24.0) == 0.0
    assert hours.reduce(-48.0) == 0.0
    shifted = RightOpenInterval.of(-180.0, 180.0)
    assert shifted.reduce(180.0) == -180.0
    assert shifted.reduce(-190.0) == pytest.approx(170.0)


def test_right_open_reduce_never_returns_high() -> None:
    """A tiny negative value must not round up onto the excluded bound."""
    turn = RightOpenInterval.of(0.0, 2 * math.pi)
    value = turn.reduce(-1e-20)
    assert turn.contains(value)


@pytest.mark.parametrize('x', [-1e6, -725.25, -3.0, -0.0, 0.1, 7.0, 359.999, 1e9])
def test_reduce_lands_inside_and_is_idempotent(x: float) -> None:
    """reduce(x) is inside the interval and reduce(reduce(x)) == reduce(x)."""
    for interval in (RightOpenInterval.of(-22.5, 337.5), ClosedInterval.of(-90.0, 90.0)):
        once = interval.reduce(x)
        assert interval.contains(once)
        assert interval.reduce(once) == once


def test_closed_clip_and_reduce() -> None:
    """clip clamps to the bounds; reduce keeps an included upper bound."""
    lat = ClosedInterval.of(-90.0, 90.0)
    assert lat.clip(100.0) == 90.0
    assert lat.clip(-100.0) == -90.0
    assert lat.clip(12.0) == 12.0
    assert lat.reduce(90.0) == 90.0
    assert lat.reduce(100.0) == pytest.approx(-80.0)


def test_interval_strings() -> None:
    """String form marks the open bound with a reversed bracket."""
    assert str(RightOpenInterval.of(0, 24)) == '[0,24['
    assert str(ClosedInterval.of(-1, 1)) == '[-1,1]'


def test_check_helpers() -> None:
    """check_in_interval returns the value and rejects anything outside."""
    interval = ClosedInterval.of(0.0, 1.0)
    assert check_in_interval(interval, 0.5) == 0.5
    with pytest.raises(ValueError, match='not in'):
        check_in_interval(interval, 1.5)
    check_argument(True)
    with pytest.raises(ValueError, match='bad'):
        check_argument(False, 'bad')
