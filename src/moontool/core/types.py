from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple


class Quarter(IntEnum):
    """Principal phases, in synodic order."""
    NEW = 0
    FIRST_QUARTER = 1
    FULL = 2
    LAST_QUARTER = 3

    @property
    def fraction(self) -> float:
        # fraction of the synodic cycle, not an angle
        return self.value / 4.0

    @property
    def label(self) -> str:
        return _QUARTER_LABELS[self.value]

    def next(self) -> "Quarter":
        return Quarter((self.value + 1) % 4)


_QUARTER_LABELS = ("New Moon", "First Quarter", "Full Moon", "Last Quarter")


class PhaseName(IntEnum):
    """Phase octant used for naming and emoji lookup."""
    NEW = 0
    WAXING_CRESCENT = 1
    FIRST_QUARTER = 2
    WAXING_GIBBOUS = 3
    FULL = 4
    WANING_GIBBOUS = 5
    LAST_QUARTER = 6
    WANING_CRESCENT = 7


@dataclass(frozen=True)
class PhaseResult:
    phase_fraction: float        # [0, 1) over one synodic month
    illuminated_fraction: float  # [0, 1]
    moon_age_days: float         # [0, synodic month)


@dataclass(frozen=True)
class PhaseInstant:
    jd: float
    quarter: Quarter


@dataclass(frozen=True)
class PhaseHunt:
    """Quarter instants bracketing a query: prev_jd <= jd < next_jd."""
    prev_jd: float
    prev_quarter: Quarter
    next_jd: float
    next_quarter: Quarter

    @property
    def prev(self) -> PhaseInstant:
        return PhaseInstant(self.prev_jd, self.prev_quarter)

    @property
    def next(self) -> PhaseInstant:
        return PhaseInstant(self.next_jd, self.next_quarter)


@dataclass(frozen=True)
class Lunation:
    """Five true-phase instants of one lunation (new .. next new)."""
    phases: Tuple[PhaseInstant, ...]
    brown_number: int

    @property
    def new_moon(self) -> float:
        return self.phases[0].jd

    @property
    def next_new_moon(self) -> float:
        return self.phases[-1].jd


@dataclass(frozen=True)
class MoonDetails:
    phase: PhaseResult
    moon_distance_km: float
    moon_angular_diameter_deg: float
    moon_parallax_deg: float
    sun_distance_km: float
    sun_angular_diameter_deg: float
