"""Coordinate systems, conversions between them, and the sky projection."""

from planetarium_tools.coordinates.spherical import (
    CartesianCoordinates,
    EclipticCoordinates,
    EquatorialCoordinates,
    GeographicCoordinates,
    HorizontalCoordinates,
)
from planetarium_tools.coordinates.conversions import (
    EclipticToEquatorialConversion,
    EquatorialToHorizontalConversion,
    HorizontalToEquatorialConversion,
)
from planetarium_tools.coordinates.projection import StereographicProjection

__all__ = [
    'CartesianCoordinates',
    'EclipticCoordinates',
    'EquatorialCoordinates',
    'GeographicCoordinates',
    'HorizontalCoordinates',
    'EclipticToEquatorialConversion',
    'EquatorialToHorizontalConversion',
    'HorizontalToEquatorialConversion',
    'StereographicProjection',
]
