# ephemeris/skyfield_phases.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from . import require_ephemeris
from ..core.time import datetime_to_julian, julian_to_datetime
from ..core.types import PhaseInstant, Quarter

logger = logging.getLogger(__name__)

DEFAULT_BSP = "de421.bsp"


@dataclass
class SkyfieldPhases:
    """
    Quarter-phase instants from a JPL ephemeris through skyfield.

    Requires optional deps:
      pip install "moontool[ephemeris]"
    """
    ts: object
    eph: object

    @classmethod
    def load(cls, directory: Optional[str] = None, bsp: str = DEFAULT_BSP) -> "SkyfieldPhases":
        require_ephemeris()
        from skyfield.api import Loader  # type: ignore

        loader = Loader(directory or ".")
        logger.info("loading %s from %s", bsp, directory or ".")
        return cls(ts=loader.timescale(), eph=loader(bsp))

    def _time(self, jd_utc: float):
        return self.ts.from_datetime(julian_to_datetime(jd_utc))

    def phases_between(self, jd_start: float, jd_end: float) -> List[PhaseInstant]:
        """True quarter instants (UTC JD) in [jd_start, jd_end)."""
        from skyfield import almanac  # type: ignore

        t, y = almanac.find_discrete(self._time(jd_start), self._time(jd_end), almanac.moon_phases(self.eph))
        return [
            PhaseInstant(datetime_to_julian(ti.utc_datetime()), Quarter(int(yi)))
            for ti, yi in zip(t, y)
        ]
