"""Reference epochs and civil-time helpers on top of rms-julian day numbering."""

from __future__ import annotations

import enum
import math
from datetime import datetime, timedelta, timezone

import julian

from planetarium_tools.constants import (
    DAYS_PER_JULIAN_CENTURY,
    J2000_UTC,
    J2010_UTC,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)


def day_from_ymd(year: int, month: int, day: int) -> int:
    """Convert calendar date to days since 2000-01-01 (rms-julian day number).

    Parameters:
        year, month, day: Gregorian calendar date.

    Returns:
        Days since January 1, 2000 (negative before).
    """
    return int(julian.day_from_ymd(year, month, day))


def ymd_from_day(day: int) -> tuple[int, int, int]:
    """Convert a day number since 2000-01-01 to (year, month, day)."""
    y, m, d = julian.ymd_from_day(day)
    return (int(y), int(m), int(d))


def _require_aware(when: datetime) -> datetime:
    """Return when converted to UTC; naive datetimes are rejected."""
    if when.tzinfo is None or when.utcoffset() is None:
        raise ValueError(f'datetime must carry a time zone, got naive {when!r}')
    return when.astimezone(timezone.utc)


def seconds_into_day(when: datetime) -> float:
    """Seconds elapsed since the start of the UTC day of when."""
    utc = _require_aware(when)
    return (
        utc.hour * SECONDS_PER_HOUR
        + utc.minute * SECONDS_PER_MINUTE
        + utc.second
        + utc.microsecond / 1e6
    )


def utc_day_start(when: datetime) -> datetime:
    """Truncate an aware datetime to 00:00 of its UTC calendar day.

    Parameters:
        when: Aware datetime in any time zone.

    Returns:
        Midnight UTC of the day containing when (tzinfo=UTC).

    Raises:
        ValueError: If when is naive.
    """
    utc = _require_aware(when)
    return utc.replace(hour=0, minute=0, second=0, microsecond=0)


class Epoch(enum.Enum):
    """Fixed reference instants, stored as UTC (year, month, day, seconds into day)."""

    J2000 = J2000_UTC
    J2010 = J2010_UTC

    @property
    def day(self) -> int:
        """rms-julian day number of the epoch's calendar date."""
        year, month, day, _ = self.value
        return day_from_ymd(year, month, day)

    @property
    def seconds(self) -> float:
        return self.value[3]

    def as_datetime(self) -> datetime:
        year, month, day, sec = self.value
        return datetime(year, month, day, tzinfo=timezone.utc) + timedelta(seconds=sec)

    def days_until(self, when: datetime) -> float:
        """Days from the epoch to when (negative if when precedes the epoch).

        Parameters:
            when: Aware datetime.

        Returns:
            Elapsed days as a real number; leap seconds are not counted.

        Raises:
            ValueError: If when is naive.
        """
        utc = _require_aware(when)
        day = day_from_ymd(utc.year, utc.month, utc.day)
        return (day - self.day) + (seconds_into_day(utc) - self.seconds) / SECONDS_PER_DAY

    def julian_centuries_until(self, when: datetime) -> float:
        """Julian centuries (36525 days) from the epoch to when."""
        return self.days_until(when) / DAYS_PER_JULIAN_CENTURY

    def plus_days(self, days: float) -> datetime:
        """UTC instant lying the given number of days after the epoch.

        Inverse of days_until, for collaborators that step through time in days.
        """
        total = self.seconds / SECONDS_PER_DAY + days
        whole = math.floor(total)
        year, month, day = ymd_from_day(self.day + whole)
        start = datetime(year, month, day, tzinfo=timezone.utc)
        return start + timedelta(seconds=(total - whole) * SECONDS_PER_DAY)


def days_since_j2010(when: datetime) -> float:
    """Days since J2010 for when, the time argument of every orbital model."""
    return Epoch.J2010.days_until(when)
