from __future__ import annotations

import math


# ------------------------------------------------------------
# Epoch and orbital elements (epoch 1980.0)
# Duffett-Smith, "Practical Astronomy With Your Calculator", 2nd ed.
# ------------------------------------------------------------

EPOCH_1980 = 2444238.5  # 1980 January 0.0

# Sun's apparent orbit
SUN_LONGITUDE_AT_EPOCH = 278.833540    # ecliptic longitude at epoch 1980.0
SUN_LONGITUDE_AT_PERIGEE = 282.596403  # ecliptic longitude at perigee
EARTH_ECCENTRICITY = 0.016718          # eccentricity of Earth's orbit
SUN_SEMI_MAJOR_AXIS_KM = 1.495985e8    # semi-major axis of Earth's orbit
SUN_ANGULAR_SIZE = 0.533128            # at semi-major axis distance, degrees

# Moon's orbit
MOON_MEAN_LONGITUDE_AT_EPOCH = 64.975464
MOON_PERIGEE_LONGITUDE_AT_EPOCH = 349.383063
MOON_ECCENTRICITY = 0.054900
MOON_ANGULAR_SIZE = 0.5181             # at distance a from Earth, degrees
MOON_SEMI_MAJOR_AXIS_KM = 384401.0
MOON_PARALLAX = 0.9507                 # at distance a from Earth, degrees

EARTH_RADIUS_KM = 6378.16

# Periods
TROPICAL_YEAR = 365.2422
SYNODIC_MONTH = 29.53058868  # new Moon to new Moon
HALF_MONTH = 14.76529434     # new Moon to full Moon

# Base date of E. W. Brown's numbered series of lunations (1923 January 16)
BROWN_LUNATION_BASE = 2423436.0

J1900 = 2415020.0  # 1900 January 0.5


# ------------------------------------------------------------
# Angle helpers (degrees)
# ------------------------------------------------------------

def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = x_deg - 360.0 * math.floor(x_deg / 360.0)
    # a tiny negative input rounds up to exactly 360.0
    if y >= 360.0:
        return 0.0
    return y


def dsin(deg: float) -> float:
    return math.sin(math.radians(deg))


def dcos(deg: float) -> float:
    return math.cos(math.radians(deg))


def days_since_epoch(jd: float) -> float:
    """Days elapsed since epoch 1980.0."""
    return jd - EPOCH_1980


def T_centuries_1900(jd: float) -> float:
    """Julian centuries from 1900 January 0.5."""
    return (jd - J1900) / 36525.0
