"""Free-text date/time parsing for the command-line tools.

Accepted forms, tried in order:

  @<seconds>               Unix time
  +HH:MM[:SS], -HH:MM[:SS] offset from now ('+2d 06:00' adds days too)
  31/12/2024 [HH:MM:SS]    and the other fixed formats below (UTC)
  HH:MM[:SS], 'Jan 06'     time of day / day of year completed from now,
                           in the local time zone
  anything dateutil reads  naive results are taken as UTC
"""
from __future__ import annotations

import re
from datetime import datetime, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil import tz

from .core.errors import DateParseError

# Full dates, read as UTC.
_ABSOLUTE_FORMATS = (
    "%d/%m/%Y %H:%M:%S",
    "%d/%m/%Y",
    "%d-%b-%Y %H:%M:%S",
    "%d-%b-%Y",
    "%d %b %Y %I:%M:%S %p",
    "%d %b %Y %H:%M:%S",
    "%d %b %Y %H:%M",
    "%d %b %Y",
    "%a %b %d %H:%M:%S %Y",  # ctime(3)
)

# Partial forms, completed from the current local date.
_TIME_OF_DAY_FORMATS = (
    "%I:%M:%S %p",
    "%H:%M:%S",
    "%H:%M",
)
_DAY_OF_YEAR_FORMATS = (
    "%b %d %H:%M:%S",
    "%b %d",
)

_RELATIVE_RE = re.compile(r"^(?:(\d+)d\s+)?(\d{1,2}):(\d{2})(?::(\d{2}))?$")


def _strptime(text: str, fmt: str) -> Optional[datetime]:
    try:
        return datetime.strptime(text, fmt)
    except ValueError:
        return None


def _parse_unix(body: str) -> datetime:
    try:
        t = float(body)
        return datetime.fromtimestamp(t, tz=tz.UTC)
    except (ValueError, OverflowError, OSError) as e:
        raise DateParseError(f"Unknown date format: `@{body}`") from e


def _parse_relative(text: str, now: datetime) -> Optional[datetime]:
    m = _RELATIVE_RE.match(text[1:].strip())
    if m is None:
        return None
    days, hours, minutes, seconds = (int(g) if g else 0 for g in m.groups())
    delta = timedelta(days=days, hours=hours, minutes=minutes, seconds=seconds)
    return now + delta if text[0] == "+" else now - delta


def _parse_partial(text: str, now: datetime) -> Optional[datetime]:
    local_now = now.astimezone(tz.tzlocal())
    for fmt in _TIME_OF_DAY_FORMATS:
        dt = _strptime(text, fmt)
        if dt is not None:
            return local_now.replace(hour=dt.hour, minute=dt.minute, second=dt.second, microsecond=0)
    for fmt in _DAY_OF_YEAR_FORMATS:
        # carry the year in the text so Feb 29 parses in leap years
        dt = _strptime(f"{text} {local_now.year}", fmt + " %Y")
        if dt is not None:
            return dt.replace(tzinfo=tz.tzlocal())
    return None


def parse_date(text: str, now: Optional[datetime] = None) -> datetime:
    """
    Parse a date/time string into an aware UTC datetime.

    'now' anchors relative and partial forms; it defaults to the current
    time.
    """
    if now is None:
        now = datetime.now(tz.UTC)
    s = text.strip()
    if not s:
        raise DateParseError("Unknown date format: ``")

    if s.startswith("@"):
        return _parse_unix(s[1:])

    if s[0] in "+-" and (len(s) < 2 or s[1] not in "+-"):
        dt = _parse_relative(s, now)
        if dt is None:
            raise DateParseError(f"Unknown date format: `{text}`")
        return dt.astimezone(tz.UTC)

    for fmt in _ABSOLUTE_FORMATS:
        dt = _strptime(s, fmt)
        if dt is not None:
            return dt.replace(tzinfo=tz.UTC)

    dt = _parse_partial(s, now)
    if dt is not None:
        return dt.astimezone(tz.UTC)

    try:
        dt = date_parser.parse(s)
    except (ValueError, OverflowError) as e:
        raise DateParseError(f"Unknown date format: `{text}`") from e
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=tz.UTC)
    return dt.astimezone(tz.UTC)
