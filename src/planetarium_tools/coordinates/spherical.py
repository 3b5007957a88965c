"""Spherical coordinate systems (equatorial, ecliptic, horizontal, geographic) and plane points.

Every system stores a (longitude-like, latitude-like) pair in radians and checks
both against the system's intervals when constructed, so an instance always
holds normalized angles.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from planetarium_tools import angle_utils
from planetarium_tools.constants import HALF_CIRCLE_DEGREES, TAU
from planetarium_tools.interval import ClosedInterval, RightOpenInterval

_POSITIVE_LON = RightOpenInterval.of(0.0, TAU)
_HALF_PI_LAT = ClosedInterval.symmetric(math.pi)
_UNIT = ClosedInterval.of(-1.0, 1.0)

_OCTANTS = RightOpenInterval.of(-22.5, 337.5)


@dataclass(frozen=True)
class _SphericalCoordinates:
    """Angle pair shared by all systems; subclasses set the valid intervals."""

    lon_interval: ClassVar[RightOpenInterval] = _POSITIVE_LON
    lat_interval: ClassVar[ClosedInterval] = _HALF_PI_LAT

    _lon: float
    _lat: float

    def __post_init__(self) -> None:
        cls = type(self)
        if not cls.lon_interval.contains(self._lon):
            raise ValueError(f'{cls.__name__}: longitude {self._lon!r} not in {cls.lon_interval}')
        if not cls.lat_interval.contains(self._lat):
            raise ValueError(f'{cls.__name__}: latitude {self._lat!r} not in {cls.lat_interval}')

    @property
    def lon(self) -> float:
        return self._lon

    @property
    def lon_deg(self) -> float:
        return angle_utils.to_deg(self._lon)

    @property
    def lat(self) -> float:
        return self._lat

    @property
    def lat_deg(self) -> float:
        return angle_utils.to_deg(self._lat)


@dataclass(frozen=True)
class EquatorialCoordinates(_SphericalCoordinates):
    """Right ascension in [0, 2π[ and declination in [-π/2, π/2]."""

    @classmethod
    def of(cls, ra: float, dec: float) -> EquatorialCoordinates:
        return cls(ra, dec)

    @classmethod
    def of_deg(cls, ra_deg: float, dec_deg: float) -> EquatorialCoordinates:
        return cls(angle_utils.of_deg(ra_deg), angle_utils.of_deg(dec_deg))

    @property
    def ra(self) -> float:
        return self._lon

    @property
    def ra_deg(self) -> float:
        return self.lon_deg

    @property
    def ra_hr(self) -> float:
        return angle_utils.to_hr(self._lon)

    @property
    def dec(self) -> float:
        return self._lat

    @property
    def dec_deg(self) -> float:
        return self.lat_deg

    def __str__(self) -> str:
        return f'(ra={self.ra_hr:.4f}h, dec={self.dec_deg:.4f}°)'


@dataclass(frozen=True)
class EclipticCoordinates(_SphericalCoordinates):
    """Ecliptic longitude λ in [0, 2π[ and latitude β in [-π/2, π/2]."""

    @classmethod
    def of(cls, lon: float, lat: float) -> EclipticCoordinates:
        return cls(lon, lat)

    def __str__(self) -> str:
        return f'(λ={self.lon_deg:.4f}°, β={self.lat_deg:.4f}°)'


@dataclass(frozen=True)
class HorizontalCoordinates(_SphericalCoordinates):
    """Azimuth in [0, 2π[ (north = 0, east = π/2) and altitude in [-π/2, π/2]."""

    @classmethod
    def of(cls, az: float, alt: float) -> HorizontalCoordinates:
        return cls(az, alt)

    @classmethod
    def of_deg(cls, az_deg: float, alt_deg: float) -> HorizontalCoordinates:
        return cls(angle_utils.of_deg(az_deg), angle_utils.of_deg(alt_deg))

    @property
    def az(self) -> float:
        return self._lon

    @property
    def az_deg(self) -> float:
        return self.lon_deg

    @property
    def alt(self) -> float:
        return self._lat

    @property
    def alt_deg(self) -> float:
        return self.lat_deg

    def az_octant_name(self, n: str, e: str, s: str, w: str) -> str:
        """Compass label of the azimuth octant, built from the four cardinal labels.

        Octants are 45° wide and centred on N, NE, E, SE, S, SW, W, NW, so
        az_octant_name('N', 'E', 'S', 'W') gives e.g. 'NE' for 30°.
        """
        names = (n, n + e, e, s + e, s, s + w, w, n + w)
        index = int((_OCTANTS.reduce(self.az_deg) - _OCTANTS.low) // 45.0)
        return names[index]

    def angular_distance_to(self, that: HorizontalCoordinates) -> float:
        """Great-circle angle between two horizontal positions (radians)."""
        cos_distance = math.sin(self.alt) * math.sin(that.alt) + math.cos(self.alt) * math.cos(
            that.alt
        ) * math.cos(self.az - that.az)
        return math.acos(_UNIT.clip(cos_distance))

    def __str__(self) -> str:
        return f'(az={self.az_deg:.4f}°, alt={self.alt_deg:.4f}°)'


@dataclass(frozen=True)
class GeographicCoordinates(_SphericalCoordinates):
    """Observer location: longitude in [-π, π[ (east positive), latitude in [-π/2, π/2]."""

    lon_interval: ClassVar[RightOpenInterval] = RightOpenInterval.symmetric(TAU)

    _LON_DEG_INTERVAL: ClassVar[RightOpenInterval] = RightOpenInterval.symmetric(
        2 * HALF_CIRCLE_DEGREES
    )
    _LAT_DEG_INTERVAL: ClassVar[ClosedInterval] = ClosedInterval.symmetric(HALF_CIRCLE_DEGREES)

    @classmethod
    def of_deg(cls, lon_deg: float, lat_deg: float) -> GeographicCoordinates:
        """Build a location from degrees.

        Parameters:
            lon_deg: Longitude in [-180, 180[, east positive.
            lat_deg: Latitude in [-90, 90].

        Raises:
            ValueError: If either value is out of range.
        """
        if not cls.is_valid_lon_deg(lon_deg) or not cls.is_valid_lat_deg(lat_deg):
            raise ValueError(f'invalid longitude/latitude ({lon_deg!r}, {lat_deg!r}) degrees')
        return cls(angle_utils.of_deg(lon_deg), angle_utils.of_deg(lat_deg))

    @classmethod
    def is_valid_lon_deg(cls, lon_deg: float) -> bool:
        return cls._LON_DEG_INTERVAL.contains(lon_deg)

    @classmethod
    def is_valid_lat_deg(cls, lat_deg: float) -> bool:
        return cls._LAT_DEG_INTERVAL.contains(lat_deg)

    def __str__(self) -> str:
        return f'(lon={self.lon_deg:.4f}°, lat={self.lat_deg:.4f}°)'


@dataclass(frozen=True, eq=False)
class CartesianCoordinates:
    """Point of the projection plane. Has no identity: comparing two points is an error."""

    x: float
    y: float

    @classmethod
    def of(cls, x: float, y: float) -> CartesianCoordinates:
        return cls(x, y)

    def __eq__(self, other: object) -> bool:
        raise TypeError('CartesianCoordinates does not support equality')

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f'(x={self.x:.8f}, y={self.y:.8f})'
