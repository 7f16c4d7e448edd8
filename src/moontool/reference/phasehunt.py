# reference/phasehunt.py

from __future__ import annotations

import logging
import math
from typing import Iterator, Tuple

from . import astro_args as aa
from ..core.errors import ConvergenceFailure
from ..core.time import julian_to_civil
from ..core.types import Lunation, PhaseHunt, PhaseInstant, Quarter

logger = logging.getLogger(__name__)

MEAN_NEW_MOON_1900 = 2415020.75933  # mean new Moon of lunation k=0
LUNATIONS_PER_YEAR = 12.3685
SCAN_MAX_STEPS = 1000


# ============================================================
# Mean and true phases (Meeus, "Astronomical Formulae for Calculators")
# ============================================================

def mean_phase(sdate: float, k: float) -> float:
    """
    Mean time of the new Moon of lunation k, with the century argument
    taken from sdate. k counts synodic months from 1900 January 0.5:

        k = (year - 1900) * 12.3685

    with year expressed as a year and fractional year.
    """
    t = aa.T_centuries_1900(sdate)
    return (
        MEAN_NEW_MOON_1900
        + aa.SYNODIC_MONTH * k
        + 0.0001178 * (t * t)
        - 0.000000155 * (t * t * t)
        + 0.00033 * aa.dsin(166.56 + 132.87 * t - 0.009173 * (t * t))
    )


def true_phase(k: float, quarter: Quarter) -> float:
    """
    True (corrected) JD of the given quarter in lunation k.
    """
    k += quarter.fraction
    t = k / 1236.85  # Julian centuries from 1900 January 0.5
    t2 = t * t
    t3 = t2 * t

    pt = (
        MEAN_NEW_MOON_1900
        + aa.SYNODIC_MONTH * k
        + 0.0001178 * t2
        - 0.000000155 * t3
        + 0.00033 * aa.dsin(166.56 + 132.87 * t - 0.009173 * t2)
    )

    m = 359.2242 + 29.10535608 * k - 0.0000333 * t2 - 0.00000347 * t3        # Sun's mean anomaly
    mprime = 306.0253 + 385.81691806 * k + 0.0107306 * t2 + 0.00001236 * t3  # Moon's mean anomaly
    f = 21.2964 + 390.67050646 * k - 0.0016528 * t2 - 0.00000239 * t3        # Moon's argument of latitude

    if quarter in (Quarter.NEW, Quarter.FULL):
        pt += (
            (0.1734 - 0.000393 * t) * aa.dsin(m)
            + 0.0021 * aa.dsin(2 * m)
            - 0.4068 * aa.dsin(mprime)
            + 0.0161 * aa.dsin(2 * mprime)
            - 0.0004 * aa.dsin(3 * mprime)
            + 0.0104 * aa.dsin(2 * f)
            - 0.0051 * aa.dsin(m + mprime)
            - 0.0074 * aa.dsin(m - mprime)
            + 0.0004 * aa.dsin(2 * f + m)
            - 0.0004 * aa.dsin(2 * f - m)
            - 0.0006 * aa.dsin(2 * f + mprime)
            + 0.0010 * aa.dsin(2 * f - mprime)
            + 0.0005 * aa.dsin(m + 2 * mprime)
        )
    else:
        pt += (
            (0.1721 - 0.0004 * t) * aa.dsin(m)
            + 0.0021 * aa.dsin(2 * m)
            - 0.6280 * aa.dsin(mprime)
            + 0.0089 * aa.dsin(2 * mprime)
            - 0.0004 * aa.dsin(3 * mprime)
            + 0.0079 * aa.dsin(2 * f)
            - 0.0119 * aa.dsin(m + mprime)
            - 0.0047 * aa.dsin(m - mprime)
            + 0.0003 * aa.dsin(2 * f + m)
            - 0.0004 * aa.dsin(2 * f - m)
            - 0.0006 * aa.dsin(2 * f + mprime)
            + 0.0021 * aa.dsin(2 * f - mprime)
            + 0.0003 * aa.dsin(m + 2 * mprime)
            + 0.0004 * aa.dsin(m - 2 * mprime)
            - 0.0003 * aa.dsin(2 * m + mprime)
        )
        if quarter is Quarter.FIRST_QUARTER:
            pt += 0.0028 - 0.0004 * aa.dcos(m) + 0.0003 * aa.dcos(mprime)
        else:
            pt += -0.0028 + 0.0004 * aa.dcos(m) - 0.0003 * aa.dcos(mprime)

    return pt


# ============================================================
# Bracketing search
# ============================================================

def mean_lunation(jd: float) -> int:
    """
    Index k of the lunation whose mean new Moon bracket
    [mean_phase(k), mean_phase(k+1)) contains jd.

    Seeded from the calendar date 45 days earlier and advanced one
    synodic month at a time.
    """
    adate = jd - 45
    yy, mm, _ = julian_to_civil(adate)
    k1 = math.floor((yy + ((mm - 1) * (1.0 / 12.0)) - 1900) * LUNATIONS_PER_YEAR)

    adate = nt1 = mean_phase(adate, k1)
    for _ in range(SCAN_MAX_STEPS):
        adate += aa.SYNODIC_MONTH
        k2 = k1 + 1
        nt2 = mean_phase(adate, k2)
        if nt1 <= jd < nt2:
            logger.debug("phasehunt: jd=%.6f bracketed by lunation k=%d", jd, k1)
            return k1
        nt1 = nt2
        k1 = k2
    raise ConvergenceFailure(f"no mean lunation bracket found for JD {jd!r} in {SCAN_MAX_STEPS} steps")


def _true_phases_from(k: int, quarter: Quarter) -> Iterator[PhaseInstant]:
    """True phase instants in time order, starting at (k, quarter)."""
    while True:
        yield PhaseInstant(true_phase(k, quarter), quarter)
        quarter = quarter.next()
        if quarter is Quarter.NEW:
            k += 1


def phasehunt(jd: float) -> PhaseHunt:
    """
    The two quarter-phase instants surrounding jd, prev_jd <= jd < next_jd.

    Walks the true phases of the bracketing lunation in order and returns
    the first one later than jd together with its predecessor. The walk
    starts at the previous lunation's last quarter so that a true new Moon
    falling after jd (the corrections move it up to a day from the mean)
    still leaves a valid predecessor.
    """
    k = mean_lunation(jd)
    walk = _true_phases_from(k - 1, Quarter.LAST_QUARTER)
    prev = next(walk)
    for cur in walk:
        if cur.jd > jd:
            return PhaseHunt(prev.jd, prev.quarter, cur.jd, cur.quarter)
        prev = cur
    raise AssertionError("unreachable")


def lunation_phases(jd: float) -> Lunation:
    """
    The lunation containing jd: its new Moon, quarters, full Moon and the
    following new Moon, numbered in Brown's series.
    """
    k = mean_lunation(jd)
    if true_phase(k, Quarter.NEW) > jd:
        k -= 1
    elif true_phase(k + 1, Quarter.NEW) <= jd:
        k += 1

    walk = _true_phases_from(k, Quarter.NEW)
    phases: Tuple[PhaseInstant, ...] = tuple(next(walk) for _ in range(5))
    return Lunation(phases=phases, brown_number=brown_lunation_number(phases[0].jd))


def brown_lunation_number(new_moon_jd: float) -> int:
    """Brown lunation number of the lunation starting at new_moon_jd."""
    return int(math.floor(((new_moon_jd + 7) - aa.BROWN_LUNATION_BASE) / aa.SYNODIC_MONTH)) + 1
