# tests/test_phasehunt.py

import random

import pytest

from moontool.core.time import civil_to_julian
from moontool.core.types import Quarter
from moontool.reference import astro_args as aa
from moontool.reference.phasehunt import (
    brown_lunation_number,
    lunation_phases,
    mean_lunation,
    mean_phase,
    phasehunt,
    true_phase,
)

# Observed instants (UTC), 2000 January
NEW_2000_01_06 = civil_to_julian(2000, 1, 6, 18, 14)
FIRST_2000_01_14 = civil_to_julian(2000, 1, 14, 13, 34)
FULL_2000_01_21 = civil_to_julian(2000, 1, 21, 4, 40)
LAST_2000_01_28 = civil_to_julian(2000, 1, 28, 7, 57)
NEW_2000_02_05 = civil_to_julian(2000, 2, 5, 13, 3)

TOL_DAYS = 0.02  # about half an hour


def test_quarter_labels():
    assert Quarter.NEW.label == "New Moon"
    assert Quarter.FIRST_QUARTER.label == "First Quarter"
    assert Quarter.FULL.label == "Full Moon"
    assert Quarter.LAST_QUARTER.label == "Last Quarter"
    assert Quarter.LAST_QUARTER.next() is Quarter.NEW
    assert Quarter.FULL.fraction == 0.5


def test_true_phases_of_january_2000():
    k = mean_lunation(civil_to_julian(2000, 1, 10))
    assert true_phase(k, Quarter.NEW) == pytest.approx(NEW_2000_01_06, abs=TOL_DAYS)
    assert true_phase(k, Quarter.FIRST_QUARTER) == pytest.approx(FIRST_2000_01_14, abs=TOL_DAYS)
    assert true_phase(k, Quarter.FULL) == pytest.approx(FULL_2000_01_21, abs=TOL_DAYS)
    assert true_phase(k, Quarter.LAST_QUARTER) == pytest.approx(LAST_2000_01_28, abs=TOL_DAYS)
    assert true_phase(k + 1, Quarter.NEW) == pytest.approx(NEW_2000_02_05, abs=TOL_DAYS)


def test_mean_lunation_brackets():
    random.seed(11)
    for _ in range(500):
        jd = random.uniform(2415020.0, 2488070.0)
        k = mean_lunation(jd)
        assert mean_phase(jd, k) <= jd + 1e-4
        assert jd < mean_phase(jd, k + 1) + 1e-4


def test_phasehunt_brackets():
    random.seed(42)
    for _ in range(2000):
        jd = random.uniform(2415020.0, 2488070.0)
        h = phasehunt(jd)
        assert h.prev_jd <= jd < h.next_jd
        assert h.next_quarter is h.prev_quarter.next()
        assert 6.0 < h.next_jd - h.prev_jd < 9.0


def test_phasehunt_around_new_moon():
    h = phasehunt(civil_to_julian(2000, 1, 10))
    assert h.prev_quarter is Quarter.NEW
    assert h.prev_jd == pytest.approx(NEW_2000_01_06, abs=TOL_DAYS)
    assert h.next_quarter is Quarter.FIRST_QUARTER
    assert h.next_jd == pytest.approx(FIRST_2000_01_14, abs=TOL_DAYS)


def test_phasehunt_at_phase_instant():
    jd = true_phase(mean_lunation(2451550.0), Quarter.NEW)
    h = phasehunt(jd)
    assert h.prev_jd == jd
    assert h.prev_quarter is Quarter.NEW
    assert h.next_jd > jd


def test_phasehunt_just_before_true_new_moon():
    # the mean bracket already turned over, the true new Moon has not
    random.seed(5)
    for _ in range(200):
        k = random.randint(-500, 1500)
        jd = true_phase(k, Quarter.NEW) - 1e-3
        h = phasehunt(jd)
        assert h.prev_quarter is Quarter.LAST_QUARTER
        assert h.next_quarter is Quarter.NEW
        assert h.prev_jd <= jd < h.next_jd


def test_lunation_phases():
    lun = lunation_phases(civil_to_julian(2000, 1, 10))
    assert [p.quarter for p in lun.phases] == [
        Quarter.NEW,
        Quarter.FIRST_QUARTER,
        Quarter.FULL,
        Quarter.LAST_QUARTER,
        Quarter.NEW,
    ]
    assert lun.new_moon == pytest.approx(NEW_2000_01_06, abs=TOL_DAYS)
    assert lun.next_new_moon == pytest.approx(NEW_2000_02_05, abs=TOL_DAYS)
    assert lun.brown_number == 953


def test_lunation_contains_query():
    random.seed(9)
    for _ in range(500):
        jd = random.uniform(2415020.0, 2488070.0)
        lun = lunation_phases(jd)
        assert lun.new_moon <= jd < lun.next_new_moon
        assert lun.next_new_moon - lun.new_moon == pytest.approx(aa.SYNODIC_MONTH, abs=0.5)


def test_brown_lunation_number():
    # lunation 1 began 1923 January 16
    assert brown_lunation_number(civil_to_julian(1923, 1, 16, 20, 41)) == 1
    assert brown_lunation_number(NEW_2000_01_06) == 953
