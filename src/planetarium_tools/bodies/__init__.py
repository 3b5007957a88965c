"""Sun and planet models and the celestial objects they produce."""

from planetarium_tools.bodies.base import CelestialObject, CelestialObjectModel, Planet, Sun
from planetarium_tools.bodies.planets import OrbitalElements, PlanetModel, earth_position
from planetarium_tools.bodies.sun import SUN, SunModel

__all__ = [
    'CelestialObject',
    'CelestialObjectModel',
    'Planet',
    'Sun',
    'OrbitalElements',
    'PlanetModel',
    'earth_position',
    'SUN',
    'SunModel',
]
