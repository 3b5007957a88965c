"""Planet models: heliocentric Kepler ellipses projected to geocentric positions."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

from planetarium_tools import angle_utils
from planetarium_tools.bodies.base import Planet
from planetarium_tools.constants import TAU, TROPICAL_YEAR_DAYS
from planetarium_tools.coordinates.conversions import EclipticToEquatorialConversion
from planetarium_tools.coordinates.spherical import EclipticCoordinates

ANGULAR_SPEED = TAU / TROPICAL_YEAR_DAYS


@dataclass(frozen=True)
class OrbitalElements:
    """Orbital elements of one planet at J2010 (angles in radians).

    Attributes:
        name: Display name.
        revolution_period: Sidereal period in tropical years.
        lon_j2010: Heliocentric longitude at J2010.
        lon_perigee: Longitude at perihelion.
        eccentricity: Orbit eccentricity.
        semi_major_axis: Semi-major axis (AU).
        inclination: Inclination of the orbit to the ecliptic.
        lon_ascending_node: Longitude of the ascending node.
        angular_size: Angular diameter at 1 AU.
        magnitude: Magnitude at 1 AU.
    """

    name: str
    revolution_period: float
    lon_j2010: float
    lon_perigee: float
    eccentricity: float
    semi_major_axis: float
    inclination: float
    lon_ascending_node: float
    angular_size: float
    magnitude: float

    @classmethod
    def of(
        cls,
        name: str,
        revolution_period: float,
        lon_j2010_deg: float,
        lon_perigee_deg: float,
        eccentricity: float,
        semi_major_axis: float,
        inclination_deg: float,
        lon_ascending_node_deg: float,
        angular_size_arcsec: float,
        magnitude: float,
    ) -> OrbitalElements:
        """Elements from the degrees/arcseconds found in published tables."""
        return cls(
            name,
            revolution_period,
            angle_utils.of_deg(lon_j2010_deg),
            angle_utils.of_deg(lon_perigee_deg),
            eccentricity,
            semi_major_axis,
            angle_utils.of_deg(inclination_deg),
            angle_utils.of_deg(lon_ascending_node_deg),
            angle_utils.of_arcsec(angular_size_arcsec),
            magnitude,
        )

    @property
    def delta_lon(self) -> float:
        """Mean anomaly at J2010."""
        return self.lon_j2010 - self.lon_perigee

    def orbit(self, days_since_j2010: float) -> tuple[float, float]:
        """Radius (AU) and heliocentric longitude of the planet in its own orbital plane.

        Uses the first-order solution of Kepler's equation, ν = M + 2e·sin(M).
        """
        mean_anomaly = ANGULAR_SPEED * (days_since_j2010 / self.revolution_period) + self.delta_lon
        true_anomaly = mean_anomaly + 2 * self.eccentricity * math.sin(mean_anomaly)
        radius = (
            self.semi_major_axis
            * (1 - self.eccentricity**2)
            / (1 + self.eccentricity * math.cos(true_anomaly))
        )
        return radius, true_anomaly + self.lon_perigee


class PlanetModel(enum.Enum):
    """The eight planets, Earth included as the reference orbit for the others."""

    MERCURY = OrbitalElements.of(
        'Mercury', 0.24085, 75.5671, 77.612, 0.205627, 0.387098, 7.0051, 48.449, 6.74, -0.42
    )
    VENUS = OrbitalElements.of(
        'Venus', 0.615207, 272.30044, 131.54, 0.006812, 0.723329, 3.3947, 76.769, 16.92, -4.40
    )
    EARTH = OrbitalElements.of(
        'Earth', 0.999996, 99.556772, 103.2055, 0.016671, 0.999985, 0, 0, 0, 0
    )
    MARS = OrbitalElements.of(
        'Mars', 1.880765, 109.09646, 336.217, 0.093348, 1.523689, 1.8497, 49.632, 9.36, -1.52
    )
    JUPITER = OrbitalElements.of(
        'Jupiter', 11.857911, 337.917132, 14.6633, 0.048907, 5.20278, 1.3035, 100.595, 196.74, -9.40
    )
    SATURN = OrbitalElements.of(
        'Saturn', 29.310579, 172.398316, 89.567, 0.053853, 9.51134, 2.4873, 113.752, 165.60, -8.88
    )
    URANUS = OrbitalElements.of(
        'Uranus', 84.039492, 356.135400, 172.884833, 0.046321, 19.21814, 0.773059, 73.926961, 65.80, -7.19
    )
    NEPTUNE = OrbitalElements.of(
        'Neptune', 165.84539, 326.895127, 23.07, 0.010483, 30.1985, 1.7673, 131.879, 62.20, -6.87
    )

    @property
    def elements(self) -> OrbitalElements:
        return self.value

    @property
    def display_name(self) -> str:
        return self.value.name

    @property
    def is_inner(self) -> bool:
        """Whether the planet orbits inside Earth's orbit (decided by identity, not radius)."""
        return self in (PlanetModel.MERCURY, PlanetModel.VENUS)

    @classmethod
    def observable(cls) -> tuple[PlanetModel, ...]:
        """All planets except Earth, in order from the Sun."""
        return tuple(p for p in cls if p is not cls.EARTH)

    def heliocentric(self, days_since_j2010: float) -> tuple[float, float]:
        """Orbital radius (AU) and heliocentric longitude (radians, unreduced)."""
        return self.value.orbit(days_since_j2010)

    def at(self, days_since_j2010: float, conversion: EclipticToEquatorialConversion) -> Planet:
        """The planet as seen from Earth days_since_j2010 days after J2010.

        Parameters:
            days_since_j2010: Days since J2010, negative in the past.
            conversion: Ecliptic to equatorial conversion for the same instant.

        Returns:
            Planet with its equatorial position, angular size (radians) and
            magnitude.

        Raises:
            ValueError: For EARTH, which cannot be observed from itself.
        """
        if self is PlanetModel.EARTH:
            raise ValueError('Earth cannot be observed from Earth')
        el = self.value
        radius, longitude = el.orbit(days_since_j2010)

        # Projection of the orbit onto the ecliptic.
        sin_node = math.sin(longitude - el.lon_ascending_node)
        cos_node = math.cos(longitude - el.lon_ascending_node)
        psi = math.asin(sin_node * math.sin(el.inclination))
        cos_psi = math.cos(psi)
        projected_radius = radius * cos_psi
        projected_lon = angle_utils.normalize_positive(
            math.atan2(sin_node * math.cos(el.inclination), cos_node) + el.lon_ascending_node
        )

        earth_radius, earth_lon = earth_position(days_since_j2010)

        if self.is_inner:
            ecliptic_lon = _inner_geocentric_lon(projected_radius, projected_lon, earth_radius, earth_lon)
        else:
            ecliptic_lon = _outer_geocentric_lon(projected_radius, projected_lon, earth_radius, earth_lon)
        ecliptic_lon = angle_utils.normalize_positive(ecliptic_lon)

        # Unstable near conjunction, where sin(projected_lon - earth_lon) approaches 0.
        ecliptic_lat = math.atan(
            projected_radius * math.tan(psi) * math.sin(ecliptic_lon - projected_lon)
            / (earth_radius * math.sin(projected_lon - earth_lon))
        )
        equatorial_pos = conversion(EclipticCoordinates.of(ecliptic_lon, ecliptic_lat))

        distance = math.sqrt(abs(
            earth_radius**2
            + radius**2
            - 2 * earth_radius * radius * math.cos(longitude - earth_lon) * cos_psi
        ))
        angular_size = el.angular_size / distance

        phase = (1 + math.cos(ecliptic_lon - longitude)) / 2
        magnitude = el.magnitude + 5 * math.log10(radius * distance / math.sqrt(phase))

        return Planet(el.name, equatorial_pos, angular_size, magnitude)


ALL = tuple(PlanetModel)


def earth_position(days_since_j2010: float) -> tuple[float, float]:
    """Earth's heliocentric radius (AU) and longitude (radians, unreduced)."""
    return PlanetModel.EARTH.value.orbit(days_since_j2010)


def _inner_geocentric_lon(
    planet_radius: float, planet_lon: float, earth_radius: float, earth_lon: float
) -> float:
    delta = earth_lon - planet_lon
    return math.pi + earth_lon + math.atan(
        planet_radius * math.sin(delta) / (earth_radius - planet_radius * math.cos(delta))
    )


def _outer_geocentric_lon(
    planet_radius: float, planet_lon: float, earth_radius: float, earth_lon: float
) -> float:
    delta = planet_lon - earth_lon
    return planet_lon + math.atan2(
        earth_radius * math.sin(delta), planet_radius - earth_radius * math.cos(delta)
    )
