"""Celestial object values and the model interface that produces them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, TypeVar

from planetarium_tools.constants import SUN_MAGNITUDE, SUN_NAME
from planetarium_tools.coordinates.conversions import EclipticToEquatorialConversion
from planetarium_tools.coordinates.spherical import EclipticCoordinates, EquatorialCoordinates


@dataclass(frozen=True)
class CelestialObject:
    """A body as seen at one instant: where it is, how large and how bright.

    Attributes:
        name: Display name (non-empty).
        equatorial_pos: Apparent equatorial position.
        angular_size: Apparent diameter in radians (>= 0).
        magnitude: Apparent magnitude (lower is brighter).
    """

    name: str
    equatorial_pos: EquatorialCoordinates
    angular_size: float
    magnitude: float

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError('celestial object name must be non-empty')
        if self.equatorial_pos is None:
            raise TypeError(f'{self.name}: equatorial_pos must not be None')
        if not self.angular_size >= 0:
            raise ValueError(f'{self.name}: angular size must be >= 0, got {self.angular_size!r}')

    def info(self) -> str:
        """Short description shown next to the object."""
        return self.name

    def __str__(self) -> str:
        return self.info()


@dataclass(frozen=True)
class Planet(CelestialObject):
    """A planet seen from Earth."""


@dataclass(frozen=True)
class Sun(CelestialObject):
    """The Sun, with the ecliptic position and mean anomaly it was computed from."""

    ecliptic_pos: EclipticCoordinates
    mean_anomaly: float

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.ecliptic_pos is None:
            raise TypeError('Sun: ecliptic_pos must not be None')

    @classmethod
    def of(
        cls,
        ecliptic_pos: EclipticCoordinates,
        equatorial_pos: EquatorialCoordinates,
        angular_size: float,
        mean_anomaly: float,
    ) -> Sun:
        """Sun with its fixed name and magnitude."""
        return cls(SUN_NAME, equatorial_pos, angular_size, SUN_MAGNITUDE, ecliptic_pos, mean_anomaly)


T_co = TypeVar('T_co', bound=CelestialObject, covariant=True)


class CelestialObjectModel(Protocol[T_co]):
    """Anything that can place a body in the sky for a given day."""

    def at(
        self, days_since_j2010: float, conversion: EclipticToEquatorialConversion
    ) -> T_co:
        """Body modelled for days_since_j2010 (possibly negative), using conversion
        to turn its ecliptic position into an equatorial one."""
        ...
