"""Sun model: Earth's orbit seen from Earth, i.e. the Sun on a Kepler ellipse."""

from __future__ import annotations

import math
from dataclasses import dataclass

from planetarium_tools import angle_utils
from planetarium_tools.bodies.base import Sun
from planetarium_tools.constants import (
    SUN_ANGULAR_SIZE_DEG,
    SUN_ECCENTRICITY,
    SUN_LON_J2010_DEG,
    SUN_LON_PERIGEE_DEG,
    TAU,
    TROPICAL_YEAR_DAYS,
)
from planetarium_tools.coordinates.conversions import EclipticToEquatorialConversion
from planetarium_tools.coordinates.spherical import EclipticCoordinates

ANGULAR_SPEED = TAU / TROPICAL_YEAR_DAYS


@dataclass(frozen=True)
class SunModel:
    """Elements of the Sun's apparent orbit (angles in radians).

    Attributes:
        lon_j2010: Ecliptic longitude at J2010.
        lon_perigee: Ecliptic longitude at perigee.
        eccentricity: Orbit eccentricity.
        angular_size: Angular diameter at one astronomical unit.
    """

    lon_j2010: float
    lon_perigee: float
    eccentricity: float
    angular_size: float

    @property
    def delta_lon(self) -> float:
        """Mean anomaly at J2010."""
        return self.lon_j2010 - self.lon_perigee

    def mean_anomaly(self, days_since_j2010: float) -> float:
        return ANGULAR_SPEED * days_since_j2010 + self.delta_lon

    def at(self, days_since_j2010: float, conversion: EclipticToEquatorialConversion) -> Sun:
        """The Sun days_since_j2010 days after J2010.

        Parameters:
            days_since_j2010: Days since J2010, negative in the past.
            conversion: Ecliptic to equatorial conversion for the same instant.

        Returns:
            Sun on the ecliptic (latitude 0) with its angular size and unreduced
            mean anomaly.
        """
        mean = self.mean_anomaly(days_since_j2010)
        # First-order solution of Kepler's equation.
        true = mean + 2 * self.eccentricity * math.sin(mean)
        ecliptic_pos = EclipticCoordinates.of(angle_utils.normalize_positive(true + self.lon_perigee), 0.0)
        equatorial_pos = conversion(ecliptic_pos)
        angular_size = (
            self.angular_size
            * (1 + self.eccentricity * math.cos(true))
            / (1 - self.eccentricity**2)
        )
        return Sun.of(ecliptic_pos, equatorial_pos, angular_size, mean)


SUN = SunModel(
    lon_j2010=angle_utils.of_deg(SUN_LON_J2010_DEG),
    lon_perigee=angle_utils.of_deg(SUN_LON_PERIGEE_DEG),
    eccentricity=SUN_ECCENTRICITY,
    angular_size=angle_utils.of_deg(SUN_ANGULAR_SIZE_DEG),
)
