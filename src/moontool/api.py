from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional, Union

from .core.time import datetime_to_julian
from .core.types import Lunation, MoonDetails, PhaseHunt, PhaseName, PhaseResult
from .reference import phase as _phase
from .reference import phasehunt as _hunt
from .render.ascii_moon import MoonArtOptions, render_moon
from .render.text import DEFAULT_FORMAT, format_phase

# A moment: aware datetime, astronomical JD, or None for now.
When = Union[datetime, float, None]


def to_jd(when: When = None) -> float:
    if when is None:
        when = datetime.now(timezone.utc)
    if isinstance(when, datetime):
        return datetime_to_julian(when)
    return float(when)


def moon_phase(when: When = None) -> PhaseResult:
    return _phase.phase(to_jd(when))


def moon_details(when: When = None) -> MoonDetails:
    return _phase.moon_details(to_jd(when))


def phase_name(when: When = None) -> PhaseName:
    return _phase.phase_name(moon_phase(when))


def phasehunt(when: When = None) -> PhaseHunt:
    return _hunt.phasehunt(to_jd(when))


def lunation(when: When = None) -> Lunation:
    return _hunt.lunation_phases(to_jd(when))


def describe(when: When = None, fmt: str = DEFAULT_FORMAT) -> str:
    jd = to_jd(when)
    return format_phase(fmt, jd, _phase.phase(jd))


def ascii_moon(when: When = None, *, lines: int = 23, south: bool = False, show_text: bool = True) -> str:
    opts = MoonArtOptions(lines=lines, south=south, show_text=show_text)
    return render_moon(to_jd(when), opts)
