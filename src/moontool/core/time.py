from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Tuple


SECONDS_PER_DAY = 86400.0

_JD_UNIX_EPOCH = 2440587.5  # JD at 1970-01-01 00:00:00 UTC

# Half a millisecond: absorbs the rounding of a day fraction stored in a JD
# near 2.4e6, whose ulp is ~4e-5 s.
_TIME_GUARD_SECONDS = 5e-4


# ============================================================
# Civil (Gregorian, UTC) <-> astronomical JD
# ============================================================

def civil_day_number(year: int, month: int, day: int) -> int:
    """Julian day number of a proleptic Gregorian date (the JD of its noon)."""
    y, m = year, month
    if m > 2:
        m -= 3
    else:
        m += 9
        y -= 1
    c = y // 100  # century
    y -= 100 * c
    return day + (c * 146097) // 4 + (y * 1461) // 4 + (m * 153 + 2) // 5 + 1721119


def civil_to_julian(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0,
) -> float:
    """
    Civil UTC date and time -> astronomical Julian date.

    Day and month are not validated: an out-of-range day simply runs on
    into the following month.
    """
    day_fraction = (hour * 3600 + minute * 60 + second) / SECONDS_PER_DAY
    return (civil_day_number(year, month, day) - 0.5) + day_fraction


def julian_to_civil(jd: float) -> Tuple[int, int, int]:
    """Astronomical JD -> (year, month, day) of the civil UTC date."""
    j = math.floor(jd + 0.5) - 1721119  # astronomical to civil
    y = (4 * j - 1) // 146097
    j = 4 * j - 1 - 146097 * y
    d = j // 4
    j = (4 * d + 3) // 1461
    d = 4 * d + 3 - 1461 * j
    d = (d + 4) // 4
    m = (5 * d - 3) // 153
    d = 5 * d - 3 - 153 * m
    d = (d + 5) // 5
    y = 100 * y + j
    if m < 10:
        m += 3
    else:
        m -= 9
        y += 1
    return int(y), int(m), int(d)


def julian_to_time(jd: float) -> Tuple[int, int, int]:
    """Astronomical JD -> (hour, minute, second) of the civil UTC time of day."""
    j = jd + 0.5  # astronomical to civil
    secs = int((j - math.floor(j)) * SECONDS_PER_DAY + _TIME_GUARD_SECONDS)
    secs = min(secs, 86399)
    return secs // 3600, (secs // 60) % 60, secs % 60


def jd_to_jdn(jd: float) -> int:
    """JD -> Julian Day Number of the civil day containing it."""
    return int(math.floor(jd + 0.5))


# ============================================================
# datetime / Unix time <-> JD
# ============================================================

def unix_to_julian(t: float) -> float:
    """Seconds since the Unix epoch -> JD."""
    return _JD_UNIX_EPOCH + t / SECONDS_PER_DAY


def datetime_to_julian(dt: datetime) -> float:
    """
    datetime -> JD. Requires a timezone-aware datetime; any zone is
    converted to UTC first.
    """
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")
    u = dt.astimezone(timezone.utc)
    seconds = u.second + u.microsecond / 1e6
    return civil_to_julian(u.year, u.month, u.day, u.hour, u.minute, seconds)


def julian_to_datetime(jd: float) -> datetime:
    """JD -> timezone-aware datetime in UTC, to the nearest microsecond."""
    year, month, day = julian_to_civil(jd)
    j = jd + 0.5
    frac = j - math.floor(j)
    micros = round(frac * SECONDS_PER_DAY * 1e6)
    return datetime(year, month, day, tzinfo=timezone.utc) + timedelta(microseconds=micros)
