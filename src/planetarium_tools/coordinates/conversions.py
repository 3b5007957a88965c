"""Rotations between ecliptic, equatorial and horizontal coordinates.

Each conversion is built once for an instant (and observer) and then applied
to as many positions as needed; ``apply_arrays`` does the same on numpy arrays
for catalogue-sized inputs.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

import numpy as np

from planetarium_tools import angle_utils, sidereal
from planetarium_tools.constants import TAU
from planetarium_tools.coordinates.spherical import (
    EclipticCoordinates,
    EquatorialCoordinates,
    GeographicCoordinates,
    HorizontalCoordinates,
)
from planetarium_tools.interval import ClosedInterval
from planetarium_tools.polynomial import Polynomial
from planetarium_tools.time_utils import Epoch

_UNIT = ClosedInterval.of(-1.0, 1.0)

# Obliquity of the ecliptic in radians, T in Julian centuries since J2000.
OBLIQUITY_POLY = Polynomial.of(
    angle_utils.of_arcsec(0.00181),
    angle_utils.of_arcsec(-0.0006),
    angle_utils.of_arcsec(-46.815),
    angle_utils.of_dms(23, 26, 21.45),
)


def obliquity(when: datetime) -> float:
    """Obliquity of the ecliptic at when (radians)."""
    return OBLIQUITY_POLY.at(Epoch.J2000.julian_centuries_until(when))


def _asin(value: float) -> float:
    return math.asin(_UNIT.clip(value))


@dataclass(frozen=True)
class EclipticToEquatorialConversion:
    """Rotation about the vernal equinox axis by the obliquity ε."""

    obliquity: float

    @classmethod
    def for_instant(cls, when: datetime) -> EclipticToEquatorialConversion:
        return cls(obliquity(when))

    def __call__(self, ecl: EclipticCoordinates) -> EquatorialCoordinates:
        """Equatorial position of an ecliptic position.

        Parameters:
            ecl: Ecliptic longitude λ and latitude β.

        Returns:
            Right ascension normalized into [0, 2π[ and declination.
        """
        sin_eps = math.sin(self.obliquity)
        cos_eps = math.cos(self.obliquity)
        sin_lon = math.sin(ecl.lon)
        ra = math.atan2(sin_lon * cos_eps - math.tan(ecl.lat) * sin_eps, math.cos(ecl.lon))
        dec = _asin(math.sin(ecl.lat) * cos_eps + math.cos(ecl.lat) * sin_eps * sin_lon)
        return EquatorialCoordinates.of(angle_utils.normalize_positive(ra), dec)

    def apply_arrays(
        self, lon: np.ndarray, lat: np.ndarray
    ) -> tuple[np.ndarray, np.ndarray]:
        """Vectorised form of the conversion: (λ, β) arrays to (ra, dec) arrays (radians)."""
        lon = np.asarray(lon, dtype=float)
        lat = np.asarray(lat, dtype=float)
        sin_eps = np.sin(self.obliquity)
        cos_eps = np.cos(self.obliquity)
        ra = np.arctan2(np.sin(lon) * cos_eps - np.tan(lat) * sin_eps, np.cos(lon))
        dec = np.arcsin(np.clip(np.sin(lat) * cos_eps + np.cos(lat) * sin_eps * np.sin(lon), -1.0, 1.0))
        return np.mod(ra, TAU), dec


@dataclass(frozen=True)
class EquatorialToHorizontalConversion:
    """Rotation to the local horizon of an observer, through the hour angle H = LST - α."""

    local_sidereal_time: float
    latitude: float

    @classmethod
    def for_observer(
        cls, when: datetime, where: GeographicCoordinates
    ) -> EquatorialToHorizontalConversion:
        """Conversion for the sky seen at when from where.

        Parameters:
            when: Aware observation instant.
            where: Observer location.
        """
        return cls(sidereal.local(when, where), where.lat)

    def __call__(self, equ: EquatorialCoordinates) -> HorizontalCoordinates:
        # At the poles (cos φ = 0) the azimuth is undefined; whatever atan2 yields is kept.
        hour_angle = self.local_sidereal_time - equ.ra
        sin_phi = math.sin(self.latitude)
        cos_phi = math.cos(self.latitude)
        sin_dec = math.sin(equ.dec)
        cos_dec = math.cos(equ.dec)
        sin_alt = sin_dec * sin_phi + cos_dec * cos_phi * math.cos(hour_angle)
        alt = _asin(sin_alt)
        az = math.atan2(-cos_dec * cos_phi * math.sin(hour_angle), sin_dec - sin_phi * math.sin(alt))
        return HorizontalCoordinates.of(angle_utils.normalize_positive(az), alt)

    def apply_arrays(
        self, ra: np.ndarray, dec: np.ndarray
    ) -> tuple[np.ndarray, np.ndarray]:
        """Vectorised form: (ra, dec) arrays to (az, alt) arrays (radians)."""
        hour_angle = self.local_sidereal_time - np.asarray(ra, dtype=float)
        dec = np.asarray(dec, dtype=float)
        sin_phi = np.sin(self.latitude)
        cos_phi = np.cos(self.latitude)
        alt = np.arcsin(
            np.clip(np.sin(dec) * sin_phi + np.cos(dec) * cos_phi * np.cos(hour_angle), -1.0, 1.0)
        )
        az = np.arctan2(-np.cos(dec) * cos_phi * np.sin(hour_angle), np.sin(dec) - sin_phi * np.sin(alt))
        return np.mod(az, TAU), alt


@dataclass(frozen=True)
class HorizontalToEquatorialConversion:
    """Inverse of EquatorialToHorizontalConversion for the same instant and observer."""

    local_sidereal_time: float
    latitude: float

    @classmethod
    def for_observer(
        cls, when: datetime, where: GeographicCoordinates
    ) -> HorizontalToEquatorialConversion:
        return cls(sidereal.local(when, where), where.lat)

    def __call__(self, hor: HorizontalCoordinates) -> EquatorialCoordinates:
        sin_phi = math.sin(self.latitude)
        cos_phi = math.cos(self.latitude)
        sin_alt = math.sin(hor.alt)
        cos_alt = math.cos(hor.alt)
        dec = _asin(sin_alt * sin_phi + cos_alt * cos_phi * math.cos(hor.az))
        hour_angle = math.atan2(-cos_alt * cos_phi * math.sin(hor.az), sin_alt - sin_phi * math.sin(dec))
        return EquatorialCoordinates.of(
            angle_utils.normalize_positive(self.local_sidereal_time - hour_angle), dec
        )
