"""Stereographic projection of the observer's sky onto a plane."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from planetarium_tools import angle_utils
from planetarium_tools.coordinates.spherical import CartesianCoordinates, HorizontalCoordinates
from planetarium_tools.interval import ClosedInterval

_UNIT = ClosedInterval.of(-1.0, 1.0)


@dataclass(frozen=True)
class StereographicProjection:
    """Projection centred on a horizontal position; the centre maps to (0, 0).

    Plane units are unit-sphere radii: a point 90° away from the centre lies at
    distance 1. x grows with azimuth and y with altitude; a renderer that wants
    east on the left flips the x axis.
    """

    center: HorizontalCoordinates

    @property
    def _sin_center_alt(self) -> float:
        return math.sin(self.center.alt)

    @property
    def _cos_center_alt(self) -> float:
        return math.cos(self.center.alt)

    def circle_center_for_parallel(self, hor: HorizontalCoordinates) -> CartesianCoordinates:
        """Centre of the circle a parallel (constant altitude hor.alt) projects to.

        The y coordinate is infinite when the parallel passes through the
        antipode of the centre (the parallel projects to a line).
        """
        denominator = math.sin(hor.alt) + self._sin_center_alt
        y = self._cos_center_alt / denominator if denominator != 0 else math.inf
        return CartesianCoordinates.of(0.0, y)

    def circle_radius_for_parallel(self, hor: HorizontalCoordinates) -> float:
        """Radius of the circle a parallel projects to (infinite for a line)."""
        denominator = math.sin(hor.alt) + self._sin_center_alt
        return math.cos(hor.alt) / denominator if denominator != 0 else math.inf

    def apply_to_angle(self, rad: float) -> float:
        """Projected diameter of a disc of angular size rad seen at the centre."""
        return 2.0 * math.tan(rad / 4.0)

    def apply(self, hor: HorizontalCoordinates) -> CartesianCoordinates:
        """Plane position of a horizontal position."""
        delta_az = hor.az - self.center.az
        sin_alt = math.sin(hor.alt)
        cos_alt = math.cos(hor.alt)
        cos_delta = math.cos(delta_az)
        d = 1.0 / (1.0 + sin_alt * self._sin_center_alt + cos_alt * self._cos_center_alt * cos_delta)
        x = d * cos_alt * math.sin(delta_az)
        y = d * (sin_alt * self._cos_center_alt - cos_alt * self._sin_center_alt * cos_delta)
        return CartesianCoordinates.of(x, y)

    def inverse_apply(self, xy: CartesianCoordinates) -> HorizontalCoordinates:
        """Horizontal position projected to the plane point xy."""
        rho_squared = xy.x * xy.x + xy.y * xy.y
        if rho_squared == 0.0:
            return self.center
        rho = math.sqrt(rho_squared)
        sin_c = 2.0 * rho / (rho_squared + 1.0)
        cos_c = (1.0 - rho_squared) / (rho_squared + 1.0)
        az = (
            math.atan2(
                xy.x * sin_c,
                rho * self._cos_center_alt * cos_c - xy.y * self._sin_center_alt * sin_c,
            )
            + self.center.az
        )
        sin_alt = cos_c * self._sin_center_alt + xy.y * sin_c * self._cos_center_alt / rho
        alt = math.asin(_UNIT.clip(sin_alt))
        return HorizontalCoordinates.of(angle_utils.normalize_positive(az), alt)

    def apply_arrays(self, az: np.ndarray, alt: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        """Vectorised apply for (az, alt) arrays in radians; returns (x, y) arrays."""
        delta_az = np.asarray(az, dtype=float) - self.center.az
        alt = np.asarray(alt, dtype=float)
        cos_alt = np.cos(alt)
        cos_delta = np.cos(delta_az)
        d = 1.0 / (1.0 + np.sin(alt) * self._sin_center_alt + cos_alt * self._cos_center_alt * cos_delta)
        x = d * cos_alt * np.sin(delta_az)
        y = d * (np.sin(alt) * self._cos_center_alt - cos_alt * self._sin_center_alt * cos_delta)
        return x, y

    def __str__(self) -> str:
        return f'StereographicProjection centred at {self.center}'
