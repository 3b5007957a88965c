"""Snapshot of the modelled bodies for one instant and observer."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime

from planetarium_tools.bodies.base import CelestialObject, Planet, Sun
from planetarium_tools.bodies.planets import PlanetModel
from planetarium_tools.bodies.sun import SUN
from planetarium_tools.config import get_default_observer
from planetarium_tools.coordinates.conversions import (
    EclipticToEquatorialConversion,
    EquatorialToHorizontalConversion,
)
from planetarium_tools.coordinates.projection import StereographicProjection
from planetarium_tools.coordinates.spherical import (
    CartesianCoordinates,
    GeographicCoordinates,
    HorizontalCoordinates,
)
from planetarium_tools.time_utils import days_since_j2010

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ObservedSky:
    """Sun and planets seen at when from where.

    Attributes:
        when: Observation instant.
        where: Observer location.
        sun: The Sun.
        planets: Observable planets in order from the Sun (Earth excluded).
        horizontal: Horizontal position of every object, by name.
        positions: Projected plane position of every object, by name; empty
            when the snapshot was taken without a projection.
    """

    when: datetime
    where: GeographicCoordinates
    sun: Sun
    planets: tuple[Planet, ...]
    horizontal: dict[str, HorizontalCoordinates] = field(default_factory=dict)
    positions: dict[str, CartesianCoordinates] = field(default_factory=dict)

    def objects(self) -> tuple[CelestialObject, ...]:
        """Every object of the snapshot, Sun first."""
        return (self.sun, *self.planets)

    def object_closest_to(
        self, point: CartesianCoordinates, max_distance: float
    ) -> CelestialObject | None:
        """Projected object nearest to point, if it lies within max_distance.

        Parameters:
            point: Plane position (same units as the projection).
            max_distance: Search radius in plane units.

        Returns:
            The closest object, or None when none lies within max_distance or
            the snapshot has no projected positions.
        """
        closest: CelestialObject | None = None
        best = max_distance
        for obj in self.objects():
            xy = self.positions.get(obj.name)
            if xy is None:
                continue
            distance = math.hypot(xy.x - point.x, xy.y - point.y)
            if distance <= best:
                closest = obj
                best = distance
        return closest


def observe_sky(
    when: datetime,
    where: GeographicCoordinates | None = None,
    projection: StereographicProjection | None = None,
) -> ObservedSky:
    """Compute the Sun and the observable planets for one instant.

    The ecliptic to equatorial and equatorial to horizontal conversions are
    built once and shared by every body.

    Parameters:
        when: Aware observation instant.
        where: Observer location; the configured default observer if None.
        projection: Optional projection; when given, plane positions are filled.

    Returns:
        ObservedSky snapshot.

    Raises:
        ValueError: If when is naive.
    """
    if where is None:
        where = get_default_observer()
    days = days_since_j2010(when)
    ecl_to_equ = EclipticToEquatorialConversion.for_instant(when)
    equ_to_hor = EquatorialToHorizontalConversion.for_observer(when, where)
    logger.debug('Observing sky at %s from %s (%.6f days since J2010)', when.isoformat(), where, days)

    sun = SUN.at(days, ecl_to_equ)
    planets = tuple(model.at(days, ecl_to_equ) for model in PlanetModel.observable())

    horizontal: dict[str, HorizontalCoordinates] = {}
    positions: dict[str, CartesianCoordinates] = {}
    for obj in (sun, *planets):
        hor = equ_to_hor(obj.equatorial_pos)
        horizontal[obj.name] = hor
        if projection is not None:
            positions[obj.name] = projection.apply(hor)

    return ObservedSky(
        when=when,
        where=where,
        sun=sun,
        planets=planets,
        horizontal=horizontal,
        positions=positions,
    )
