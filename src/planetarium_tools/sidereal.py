"""Greenwich and local sidereal time."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from planetarium_tools import angle_utils
from planetarium_tools.constants import HOURS_PER_DAY, SECONDS_PER_HOUR
from planetarium_tools.interval import RightOpenInterval
from planetarium_tools.polynomial import Polynomial
from planetarium_tools.time_utils import Epoch, seconds_into_day, utc_day_start

if TYPE_CHECKING:
    from planetarium_tools.coordinates.spherical import GeographicCoordinates

_HOURS = RightOpenInterval.of(0.0, HOURS_PER_DAY)

# Sidereal hours at 0h UTC, T in Julian centuries from J2000 to that midnight.
CENTURY_POLY = Polynomial.of(0.000025862, 2400.051336, 6.697374558)
# Sidereal hours elapsed per solar hour.
HOURS_POLY = Polynomial.of(1.002737909, 0)


def greenwich(when: datetime) -> float:
    """Greenwich sidereal time at when.

    Parameters:
        when: Aware datetime, any time zone.

    Returns:
        Sidereal angle in radians, in [0, 2π[.

    Raises:
        ValueError: If when is naive.
    """
    day_start = utc_day_start(when)
    centuries = Epoch.J2000.julian_centuries_until(day_start)
    hours = seconds_into_day(when) / SECONDS_PER_HOUR
    s0 = _HOURS.reduce(CENTURY_POLY.at(centuries))
    s1 = HOURS_POLY.at(hours)
    return angle_utils.normalize_positive(angle_utils.of_hr(s0 + s1))


def local(when: datetime, where: GeographicCoordinates) -> float:
    """Local sidereal time at when for an observer at where (east longitudes add)."""
    return angle_utils.normalize_positive(greenwich(when) + where.lon)
