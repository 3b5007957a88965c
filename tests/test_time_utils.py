"""Tests for reference epochs and UTC day helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from planetarium_tools import time_utils
from planetarium_tools.time_utils import Epoch

UTC = timezone.utc


def test_day_numbers_start_at_2000() -> None:
    """rms-julian day 0 is 2000-01-01."""
    assert time_utils.day_from_ymd(2000, 1, 1) == 0
    assert time_utils.day_from_ymd(2009, 12, 31) == 3652
    assert time_utils.ymd_from_day(1421) == (2003, 11, 22)


def test_epoch_instants() -> None:
    """J2000 is noon on 2000-01-01 and J2010 midnight on 2009-12-31 (UTC)."""
    assert Epoch.J2000.as_datetime() == datetime(2000, 1, 1, 12, tzinfo=UTC)
    assert Epoch.J2010.as_datetime() == datetime(2009, 12, 31, tzinfo=UTC)
    assert Epoch.J2000.days_until(Epoch.J2000.as_datetime()) == 0.0
    assert Epoch.J2000.days_until(Epoch.J2010.as_datetime()) == 3651.5


@pytest.mark.parametrize(
    'when, expected',
    [
        (datetime(2003, 7, 27, tzinfo=UTC), -2349.0),
        (datetime(2003, 11, 22, tzinfo=UTC), -2231.0),
        (datetime(2010, 1, 28, 6, tzinfo=UTC), 28.25),
    ],
)
def test_days_since_j2010(when: datetime, expected: float) -> None:
    """Days since J2010 for published worked examples."""
    assert time_utils.days_since_j2010(when) == pytest.approx(expected)


def test_days_until_ignores_time_zone_representation() -> None:
    """The same instant in another zone gives the same day count."""
    zone = timezone(timedelta(hours=2))
    assert Epoch.J2010.days_until(datetime(2003, 11, 22, 2, tzinfo=zone)) == pytest.approx(-2231.0)


def test_julian_centuries_until() -> None:
    """36525 days make one Julian century."""
    assert Epoch.J2000.julian_centuries_until(datetime(2100, 1, 1, 12, tzinfo=UTC)) == pytest.approx(1.0)


def test_naive_datetime_rejected() -> None:
    """Instants must carry a time zone."""
    with pytest.raises(ValueError, match='naive'):
        Epoch.J2010.days_until(datetime(2020, 1, 1))
    with pytest.raises(ValueError):
        time_utils.utc_day_start(datetime(2020, 1, 1))


def test_utc_day_start_and_seconds_into_day() -> None:
    """Truncation happens on the UTC calendar day, not the local one."""
    zone = timezone(timedelta(hours=-5))
    when = datetime(2020, 3, 20, 22, 30, tzinfo=zone)  # 03:30 UTC next day
    assert time_utils.utc_day_start(when) == datetime(2020, 3, 21, tzinfo=UTC)
    assert time_utils.seconds_into_day(when) == pytest.approx(3.5 * 3600)


def test_plus_days_inverts_days_until() -> None:
    """plus_days(days_until(t)) returns t."""
    assert Epoch.J2010.plus_days(-2231) == datetime(2003, 11, 22, tzinfo=UTC)
    assert Epoch.J2000.plus_days(0.25) == datetime(2000, 1, 1, 18, tzinfo=UTC)
    when = datetime(2021, 6, 5, 17, 45, 12, tzinfo=UTC)
    back = Epoch.J2010.plus_days(Epoch.J2010.days_until(when))
    assert abs((back - when).total_seconds()) < 1e-3
