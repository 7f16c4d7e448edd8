"""moontool: phase, age and illumination of the Moon.

The query functions take an aware datetime, a Julian date, or None for now.
"""

from .api import (
    to_jd,
    moon_phase,
    moon_details,
    phase_name,
    phasehunt,
    lunation,
    describe,
    ascii_moon,
)
from .core.errors import ConvergenceFailure, DateParseError, FormatError, MoontoolError
from .core.time import civil_to_julian, julian_to_civil, julian_to_time
from .core.types import Lunation, MoonDetails, PhaseHunt, PhaseInstant, PhaseName, PhaseResult, Quarter

__all__ = [
    "to_jd",
    "moon_phase",
    "moon_details",
    "phase_name",
    "phasehunt",
    "lunation",
    "describe",
    "ascii_moon",
    "civil_to_julian",
    "julian_to_civil",
    "julian_to_time",
    "Quarter",
    "PhaseName",
    "PhaseResult",
    "PhaseInstant",
    "PhaseHunt",
    "Lunation",
    "MoonDetails",
    "MoontoolError",
    "ConvergenceFailure",
    "DateParseError",
    "FormatError",
]
