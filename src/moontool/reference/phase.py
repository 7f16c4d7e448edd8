# reference/phase.py

from __future__ import annotations

import math
from dataclasses import dataclass

from . import astro_args as aa
from . import lunar
from . import solar
from ..core.types import MoonDetails, PhaseName, PhaseResult


@dataclass(frozen=True)
class Longitudes:
    """Sun and Moon geometry feeding the phase (degrees)."""
    sun_longitude_deg: float
    moon_longitude_deg: float
    moon_mean_anomaly_deg: float
    moon_corrected_anomaly_deg: float


def compute_longitudes(jd: float) -> Longitudes:
    """
    Sun's ecliptic longitude and the Moon's true longitude (variation
    included) at JD.
    """
    sun = solar.solar_position(jd)
    moon = lunar.lunar_position(jd, sun)
    return Longitudes(
        sun_longitude_deg=sun.L_deg,
        moon_longitude_deg=moon.true_longitude_deg,
        moon_mean_anomaly_deg=moon.mean_anomaly_deg,
        moon_corrected_anomaly_deg=moon.corrected_anomaly_deg,
    )


def _phase_from_age(moon_age_deg: float) -> PhaseResult:
    illuminated = (1 - math.cos(math.radians(moon_age_deg))) / 2
    fraction = aa.wrap_deg(moon_age_deg) / 360.0
    return PhaseResult(
        phase_fraction=fraction,
        illuminated_fraction=illuminated,
        moon_age_days=aa.SYNODIC_MONTH * fraction,
    )


def phase(jd: float) -> PhaseResult:
    """
    Phase of the Moon at JD.

    The age in degrees (Moon's true longitude minus the Sun's) gives the
    terminator phase as a fraction of the synodic month, the illuminated
    fraction of the disc, and the Moon's age in days.
    """
    lon = compute_longitudes(jd)
    return _phase_from_age(lon.moon_longitude_deg - lon.sun_longitude_deg)


def moon_details(jd: float) -> MoonDetails:
    """Phase plus the Moon's and Sun's distances and angular diameters."""
    sun = solar.solar_position(jd)
    moon = lunar.lunar_position(jd, sun)

    dist = lunar.moon_distance_km(moon.corrected_anomaly_deg)
    return MoonDetails(
        phase=_phase_from_age(moon.true_longitude_deg - sun.L_deg),
        moon_distance_km=dist,
        moon_angular_diameter_deg=lunar.moon_angular_diameter_deg(dist),
        moon_parallax_deg=lunar.moon_parallax_deg(dist),
        sun_distance_km=solar.sun_distance_km(sun.true_anomaly_deg),
        sun_angular_diameter_deg=solar.sun_angular_diameter_deg(sun.true_anomaly_deg),
    )


# ------------------------------------------------------------
# Naming
# ------------------------------------------------------------

def phase_index(illuminated_fraction: float, moon_age_days: float) -> PhaseName:
    """
    Phase octant from the illuminated fraction, split into waxing and
    waning by the Moon's age against half a synodic month.
    """
    waning = moon_age_days > aa.HALF_MONTH
    if illuminated_fraction < 0.04:
        return PhaseName.NEW
    if illuminated_fraction > 0.96:
        return PhaseName.FULL
    if 0.46 < illuminated_fraction < 0.54:
        return PhaseName.LAST_QUARTER if waning else PhaseName.FIRST_QUARTER
    if 0.54 < illuminated_fraction < 0.96:
        return PhaseName.WANING_GIBBOUS if waning else PhaseName.WAXING_GIBBOUS
    return PhaseName.WANING_CRESCENT if waning else PhaseName.WAXING_CRESCENT


def phase_name(result: PhaseResult) -> PhaseName:
    return phase_index(result.illuminated_fraction, result.moon_age_days)
