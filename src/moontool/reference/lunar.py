# reference/lunar.py

from __future__ import annotations

from dataclasses import dataclass

from . import astro_args as aa
from .solar import SolarPosition


@dataclass(frozen=True)
class LunarPosition:
    """Moon's longitude and anomaly after the periodic corrections (degrees)."""
    mean_longitude_deg: float
    mean_anomaly_deg: float
    corrected_anomaly_deg: float
    corrected_longitude_deg: float
    true_longitude_deg: float  # corrected longitude plus the variation


# Amplitudes of the periodic terms (degrees), applied in this order.
EVECTION = 1.2739
ANNUAL_EQUATION = 0.1858
CORRECTION_A3 = 0.37
EQUATION_OF_CENTRE = 6.2886
CORRECTION_A4 = 0.214
VARIATION = 0.6583


def lunar_position(jd: float, sun: SolarPosition) -> LunarPosition:
    """
    Moon's corrected ecliptic longitude at JD, given the Sun's position
    for the same instant.

    The mean longitude and mean anomaly are wrapped to [0,360) before any
    correction uses them; the corrected values are left unwrapped.
    """
    day = aa.days_since_epoch(jd)

    ml = aa.wrap_deg(13.1763966 * day + aa.MOON_MEAN_LONGITUDE_AT_EPOCH)
    MM = aa.wrap_deg(ml - 0.1114041 * day - aa.MOON_PERIGEE_LONGITUDE_AT_EPOCH)

    Ev = EVECTION * aa.dsin(2 * (ml - sun.L_deg) - MM)
    Ae = ANNUAL_EQUATION * aa.dsin(sun.mean_anomaly_deg)
    A3 = CORRECTION_A3 * aa.dsin(sun.mean_anomaly_deg)

    MmP = MM + Ev - Ae - A3

    mEc = EQUATION_OF_CENTRE * aa.dsin(MmP)
    A4 = CORRECTION_A4 * aa.dsin(2 * MmP)

    lP = ml + Ev + mEc - Ae + A4

    V = VARIATION * aa.dsin(2 * (lP - sun.L_deg))
    lPP = lP + V

    return LunarPosition(
        mean_longitude_deg=ml,
        mean_anomaly_deg=MM,
        corrected_anomaly_deg=MmP,
        corrected_longitude_deg=lP,
        true_longitude_deg=lPP,
    )


def equation_of_centre(corrected_anomaly: float) -> float:
    return EQUATION_OF_CENTRE * aa.dsin(corrected_anomaly)


def moon_distance_km(corrected_anomaly: float) -> float:
    """Distance of the Moon from the centre of the Earth."""
    e = aa.MOON_ECCENTRICITY
    return (aa.MOON_SEMI_MAJOR_AXIS_KM * (1 - e * e)) / (
        1 + e * aa.dcos(corrected_anomaly + equation_of_centre(corrected_anomaly))
    )


def moon_angular_diameter_deg(distance_km: float) -> float:
    return aa.MOON_ANGULAR_SIZE / (distance_km / aa.MOON_SEMI_MAJOR_AXIS_KM)


def moon_parallax_deg(distance_km: float) -> float:
    return aa.MOON_PARALLAX / (distance_km / aa.MOON_SEMI_MAJOR_AXIS_KM)
