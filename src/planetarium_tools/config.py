"""Configuration: default observer location from environment."""

from __future__ import annotations

import logging
import os

from planetarium_tools.constants import DEFAULT_OBSERVER_LAT_DEG, DEFAULT_OBSERVER_LON_DEG
from planetarium_tools.coordinates.spherical import GeographicCoordinates

logger = logging.getLogger(__name__)

OBSERVER_LON_ENV = 'PLANETARIUM_OBSERVER_LON_DEG'
OBSERVER_LAT_ENV = 'PLANETARIUM_OBSERVER_LAT_DEG'


def _env_float(name: str, default: float) -> float:
    """Float from environment variable name; default when unset or unparsable."""
    raw = os.environ.get(name, '').strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning('Ignoring %s=%r (not a number); using %s', name, raw, default)
        return default


def get_default_observer() -> GeographicCoordinates:
    """Return the observer used when a caller does not supply one.

    PLANETARIUM_OBSERVER_LON_DEG and PLANETARIUM_OBSERVER_LAT_DEG override the
    built-in location (EPFL, Lausanne).

    Returns:
        GeographicCoordinates of the configured observer.

    Raises:
        ValueError: If a configured value is a number outside [-180, 180[ or
            [-90, 90].
    """
    lon_deg = _env_float(OBSERVER_LON_ENV, DEFAULT_OBSERVER_LON_DEG)
    lat_deg = _env_float(OBSERVER_LAT_ENV, DEFAULT_OBSERVER_LAT_DEG)
    return GeographicCoordinates.of_deg(lon_deg, lat_deg)
