# render/ascii_moon.py

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..core.types import PhaseHunt
from ..core.time import SECONDS_PER_DAY
from ..reference.phase import phase
from ..reference.phasehunt import phasehunt
from .backgrounds import BACKGROUNDS

# The canned backgrounds are drawn for this aspect ratio.
ASPECT_RATIO = 0.5

DEFAULT_LINES = 23
TEXT_MAX_LINES = 27


@dataclass(frozen=True)
class MoonArtOptions:
    lines: int = DEFAULT_LINES
    south: bool = False     # mirror the terminator for the southern sky
    show_text: bool = True  # quarter countdowns beside the disc


def format_seconds(secs: int) -> str:
    """'D HH:MM:SS' with the hour space-padded."""
    days, secs = divmod(secs, 86400)
    hours, secs = divmod(secs, 3600)
    minutes, secs = divmod(secs, 60)
    return f"{days} {hours:2d}:{minutes:02d}:{secs:02d}"


def _cell(background: Optional[Sequence[str]], lin: int, col: int) -> str:
    if background is None:
        return "@"
    row = background[lin]
    return row[col] if col < len(row) else " "


def _side_text(lin: int, midlin: int, jd: float, hunt: PhaseHunt) -> str:
    if lin == midlin - 2:
        return f"\t {hunt.prev_quarter.label} +"
    if lin == midlin - 1:
        return "\t " + format_seconds(int((jd - hunt.prev_jd) * SECONDS_PER_DAY))
    if lin == midlin:
        return f"\t {hunt.next_quarter.label} -"
    if lin == midlin + 1:
        return "\t " + format_seconds(int((hunt.next_jd - jd) * SECONDS_PER_DAY))
    return ""


def render_moon(jd: float, options: MoonArtOptions = MoonArtOptions()) -> str:
    """
    ASCII picture of the Moon at jd, one slice per line.

    Each slice spans the disc's chord at that height; the terminator
    shrinks the left edge while the phase angle is below pi (waxing) and
    the right edge after it. Line counts without a canned background are
    drawn with '@'.
    """
    numlines = options.lines
    angphase = phase(jd).phase_fraction * 2.0 * math.pi
    mcap = -math.cos(angphase)

    yrad = numlines / 2.0
    xrad = yrad / ASPECT_RATIO
    centre = int(xrad + 0.5)

    midlin = numlines // 2
    background = BACKGROUNDS.get(numlines)
    with_text = options.show_text and numlines <= TEXT_MAX_LINES
    hunt = phasehunt(jd) if with_text else None

    rows: List[str] = []
    for lin in range(numlines):
        y = lin + 0.5 - yrad
        xright = xrad * math.sqrt(1.0 - (y * y) / (yrad * yrad))
        xleft = -xright
        if 0.0 <= angphase < math.pi:
            xleft = mcap * xleft
        else:
            xright = mcap * xright
        if options.south:
            xleft, xright = -xright, -xleft

        # int() truncates toward zero, as the column arithmetic expects
        colleft = centre + int(xleft + 0.5)
        colright = centre + int(xright + 0.5)

        line = " " * colleft + "".join(_cell(background, lin, col) for col in range(colleft, colright + 1))
        if hunt is not None:
            line += _side_text(lin, midlin, jd, hunt)
        rows.append(line)

    return "\n".join(rows)
