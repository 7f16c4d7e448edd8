# reference/solar.py

from __future__ import annotations

from dataclasses import dataclass

from . import astro_args as aa
from .kepler import solve_kepler, true_anomaly_deg


@dataclass(frozen=True)
class SolarPosition:
    """Sun's geocentric position, epoch-1980 elements (degrees)."""
    mean_anomaly_deg: float
    true_anomaly_deg: float
    L_deg: float  # geocentric ecliptic longitude, [0,360)


def solar_position(jd: float) -> SolarPosition:
    """
    Sun's geocentric ecliptic longitude at JD via the equation of Kepler.
    """
    day = aa.days_since_epoch(jd)

    # Mean anomaly, converted from perigee co-ordinates to epoch 1980.0
    N = aa.wrap_deg((360 / aa.TROPICAL_YEAR) * day)
    M = aa.wrap_deg(N + aa.SUN_LONGITUDE_AT_EPOCH - aa.SUN_LONGITUDE_AT_PERIGEE)

    E = solve_kepler(M, aa.EARTH_ECCENTRICITY)
    v = true_anomaly_deg(E, aa.EARTH_ECCENTRICITY)
    L = aa.wrap_deg(v + aa.SUN_LONGITUDE_AT_PERIGEE)

    return SolarPosition(mean_anomaly_deg=M, true_anomaly_deg=v, L_deg=L)


def sun_distance_factor(true_anomaly: float) -> float:
    """Ratio of the semi-major axis to the Sun's current distance."""
    e = aa.EARTH_ECCENTRICITY
    return (1 + e * aa.dcos(true_anomaly)) / (1 - e * e)


def sun_distance_km(true_anomaly: float) -> float:
    return aa.SUN_SEMI_MAJOR_AXIS_KM / sun_distance_factor(true_anomaly)


def sun_angular_diameter_deg(true_anomaly: float) -> float:
    return sun_distance_factor(true_anomaly) * aa.SUN_ANGULAR_SIZE
