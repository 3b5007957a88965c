"""Planetarium computation core: Sun and planet positions, sidereal time, coordinates.

This package provides the pure computations a sky viewer is built on:
- Coordinates: equatorial, ecliptic, horizontal and geographic angle pairs,
  conversions between them, and the stereographic projection onto a plane
- Sidereal time: Greenwich and local sidereal angle for a civil instant
- Bodies: Kepler-ellipse models of the Sun and the planets producing
  immutable celestial objects (position, angular size, magnitude)
- Sky: one snapshot of every modelled body for an instant and observer

Angles are radians unless the name says otherwise. Nothing here performs I/O.
"""

__all__: list[str] = []
