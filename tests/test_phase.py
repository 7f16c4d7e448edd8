# tests/test_phase.py

import math
import random

import pytest

from moontool.core.time import civil_to_julian
from moontool.core.types import PhaseName
from moontool.reference import astro_args as aa
from moontool.reference.phase import moon_details, phase, phase_index, phase_name

NEW_MOON_2000_01_06 = civil_to_julian(2000, 1, 6, 18, 14)
FULL_MOON_2000_01_21 = civil_to_julian(2000, 1, 21, 4, 41)


def test_ranges():
    random.seed(3)
    for _ in range(2000):
        jd = random.uniform(2415020.0, 2488070.0)
        r = phase(jd)
        assert 0.0 <= r.phase_fraction < 1.0
        assert 0.0 <= r.illuminated_fraction <= 1.0
        assert 0.0 <= r.moon_age_days < aa.SYNODIC_MONTH


def test_deterministic():
    assert phase(2451545.0) == phase(2451545.0)


# (jd, phase fraction, illuminated fraction, age in days) from moontool's C code
REFERENCE_PHASES = [
    (2417464.9797015381, 0.76818582842685701, 0.44299177863719574, 22.684979729078567),
]


@pytest.mark.parametrize("jd, fraction, illuminated, age", REFERENCE_PHASES)
def test_matches_reference_values(jd, fraction, illuminated, age):
    r = phase(jd)
    assert r.phase_fraction == pytest.approx(fraction, rel=1e-9)
    assert r.illuminated_fraction == pytest.approx(illuminated, rel=1e-9)
    assert r.moon_age_days == pytest.approx(age, rel=1e-9)


@pytest.mark.parametrize("jd", [2305447.5, 2415020.0, 2451545.0, 2488070.0, 2524593.5])
def test_illumination_follows_phase_fraction(jd):
    r = phase(jd)
    assert r.illuminated_fraction == pytest.approx((1 - math.cos(2 * math.pi * r.phase_fraction)) / 2, abs=1e-12)


def test_new_moon():
    r = phase(NEW_MOON_2000_01_06)
    assert r.illuminated_fraction < 0.01
    assert phase_name(r) is PhaseName.NEW
    assert min(r.moon_age_days, aa.SYNODIC_MONTH - r.moon_age_days) < 0.3


def test_full_moon():
    r = phase(FULL_MOON_2000_01_21)
    assert r.illuminated_fraction > 0.99
    assert phase_name(r) is PhaseName.FULL
    assert r.moon_age_days == pytest.approx(aa.HALF_MONTH, abs=0.3)


def test_age_grows_within_a_lunation():
    jd = NEW_MOON_2000_01_06 + 1.0
    prev = phase(jd).moon_age_days
    for i in range(1, 250):
        age = phase(jd + i * 0.1).moon_age_days
        assert age > prev
        prev = age


def test_age_matches_phase_fraction():
    for jd in (2451545.0, 2455000.5, 2460000.5):
        r = phase(jd)
        assert r.moon_age_days == pytest.approx(aa.SYNODIC_MONTH * r.phase_fraction)


@pytest.mark.parametrize(
    "illum, age, expected",
    [
        (0.03, 1.0, PhaseName.NEW),
        (0.03, 28.0, PhaseName.NEW),
        (0.97, 14.0, PhaseName.FULL),
        (0.20, 3.0, PhaseName.WAXING_CRESCENT),
        (0.50, 7.0, PhaseName.FIRST_QUARTER),
        (0.70, 10.0, PhaseName.WAXING_GIBBOUS),
        (0.96, 5.0, PhaseName.WAXING_CRESCENT),
        (0.96, 20.0, PhaseName.WANING_CRESCENT),
        (0.70, 20.0, PhaseName.WANING_GIBBOUS),
        (0.50, 22.0, PhaseName.LAST_QUARTER),
        (0.20, 26.0, PhaseName.WANING_CRESCENT),
    ],
)
def test_phase_index(illum, age, expected):
    assert phase_index(illum, age) is expected


def test_half_month_is_waxing():
    assert phase_index(0.5, aa.HALF_MONTH) is PhaseName.FIRST_QUARTER


def test_moon_details_plausible():
    for jd in (2444238.5, 2451545.0, NEW_MOON_2000_01_06, 2460000.5, 2460015.5):
        d = moon_details(jd)
        assert 350000.0 < d.moon_distance_km < 410000.0
        assert 0.48 < d.moon_angular_diameter_deg < 0.57
        assert 0.88 < d.moon_parallax_deg < 1.03
        assert 1.47e8 < d.sun_distance_km < 1.53e8
        assert 0.52 < d.sun_angular_diameter_deg < 0.55
        assert 0.0 <= d.phase.illuminated_fraction <= 1.0
