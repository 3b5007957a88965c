"""Angle unit conversions and normalization (radians are the internal unit)."""

from __future__ import annotations

import math

from planetarium_tools.constants import (
    ARCMIN_PER_DEGREE,
    ARCSEC_PER_DEGREE,
    DEGREES_PER_HOUR_RA,
    TAU,
)
from planetarium_tools.interval import RightOpenInterval, check_in_interval

_POSITIVE_RANGE = RightOpenInterval.of(0.0, TAU)
_SEXAGESIMAL_RANGE = RightOpenInterval.of(0.0, 60.0)

_RAD_PER_HOUR = TAU / 24.0


def normalize_positive(rad: float) -> float:
    """Reduce an angle into [0, 2π[.

    Parameters:
        rad: Angle in radians, any sign or magnitude.

    Returns:
        Equivalent angle in [0, 2π[.
    """
    return _POSITIVE_RANGE.reduce(rad)


def of_arcsec(sec: float) -> float:
    """Convert arcseconds to radians."""
    return math.radians(sec / ARCSEC_PER_DEGREE)


def of_dms(deg: int, minutes: int, seconds: float) -> float:
    """Convert degrees, minutes and seconds of arc to radians.

    Parameters:
        deg: Whole degrees (sign of the angle).
        minutes: Minutes of arc in [0, 60[.
        seconds: Seconds of arc in [0, 60[.

    Returns:
        Angle in radians.

    Raises:
        ValueError: If minutes or seconds are outside [0, 60[.
    """
    check_in_interval(_SEXAGESIMAL_RANGE, minutes)
    check_in_interval(_SEXAGESIMAL_RANGE, seconds)
    return math.radians(deg + minutes / ARCMIN_PER_DEGREE + seconds / ARCSEC_PER_DEGREE)


def of_deg(deg: float) -> float:
    return math.radians(deg)


def to_deg(rad: float) -> float:
    return math.degrees(rad)


def of_hr(hr: float) -> float:
    """Convert hours (of right ascension or sidereal time) to radians."""
    return hr * _RAD_PER_HOUR


def to_hr(rad: float) -> float:
    """Convert radians to hours (15° per hour)."""
    return math.degrees(rad) / DEGREES_PER_HOUR_RA
