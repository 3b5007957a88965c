"""Fixed constants: unit conversions, reference epochs and Sun model elements."""

import math

TAU = 2.0 * math.pi

# Time: seconds per unit
SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0
HOURS_PER_DAY = 24.0
DAYS_PER_JULIAN_CENTURY = 36525.0
NOON_SECONDS_OFFSET = 12.0 * 3600.0  # seconds from midnight to noon (J2000 epoch)

# Angle: degrees per circle and sexagesimal (DMS/arcmin/arcsec)
DEGREES_PER_CIRCLE = 360.0
HALF_CIRCLE_DEGREES = 180.0
ARCMIN_PER_DEGREE = 60.0
ARCSEC_PER_DEGREE = 3600.0
DEGREES_PER_HOUR_RA = 15.0  # right ascension: 360° / 24 h

# Tropical year (days), sets the mean angular speed of every orbit.
TROPICAL_YEAR_DAYS = 365.242191

# Reference epochs as UTC calendar (year, month, day, seconds into day).
J2000_UTC = (2000, 1, 1, NOON_SECONDS_OFFSET)
J2010_UTC = (2009, 12, 31, 0.0)

# Sun as seen from Earth at J2010 (degrees unless noted)
SUN_NAME = 'Sun'
SUN_MAGNITUDE = -26.7
SUN_LON_J2010_DEG = 279.557208
SUN_LON_PERIGEE_DEG = 283.112438
SUN_ECCENTRICITY = 0.016705
SUN_ANGULAR_SIZE_DEG = 0.533128

# Default observer (EPFL, Lausanne) when none is configured.
DEFAULT_OBSERVER_LON_DEG = 6.57
DEFAULT_OBSERVER_LAT_DEG = 46.52
