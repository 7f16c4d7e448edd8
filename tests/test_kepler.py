from __future__ import annotations

import math

import pytest

from moontool.core.errors import ConvergenceFailure
from moontool.reference import astro_args as aa
from moontool.reference.kepler import KEPLER_EPSILON, solve_kepler, true_anomaly_deg
from moontool.reference.solar import solar_position, sun_distance_km


def test_circular_orbit_is_identity():
    for m in (0.0, 10.0, 90.0, 180.0, 300.0):
        assert solve_kepler(m, 0.0) == pytest.approx(math.radians(m), abs=1e-12)


def test_zero_anomaly():
    assert solve_kepler(0.0, aa.EARTH_ECCENTRICITY) == 0.0


@pytest.mark.parametrize("ecc", [aa.EARTH_ECCENTRICITY, aa.MOON_ECCENTRICITY, 0.5])
def test_residual_is_small(ecc):
    for m_deg in range(0, 360, 7):
        e = solve_kepler(float(m_deg), ecc)
        assert abs(e - ecc * math.sin(e) - math.radians(m_deg)) <= KEPLER_EPSILON


def test_true_anomaly_leads_mean_in_first_half():
    e = solve_kepler(60.0, aa.EARTH_ECCENTRICITY)
    v = true_anomaly_deg(e, aa.EARTH_ECCENTRICITY)
    assert 60.0 < v < 62.0


def test_iteration_cap_raises():
    with pytest.raises(ConvergenceFailure):
        solve_kepler(90.0, 0.5, max_iter=1)


def test_sun_at_epoch():
    sun = solar_position(aa.EPOCH_1980)
    assert 0.0 <= sun.L_deg < 360.0
    # Sun's longitude at 1980.0, less the equation of centre near perihelion
    assert abs(sun.L_deg - aa.SUN_LONGITUDE_AT_EPOCH) < 0.5


def test_sun_distance_bounds():
    for jd in (2444238.5, 2451545.0, 2460000.5, 2460100.5, 2460200.5):
        d = sun_distance_km(solar_position(jd).true_anomaly_deg)
        assert 1.47e8 < d < 1.53e8
