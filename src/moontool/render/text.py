# render/text.py

from __future__ import annotations

import logging

from ..core.errors import FormatError
from ..core.types import PhaseName, PhaseResult
from ..reference.phase import phase_name

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "%p %e (%P%%)"

PHASE_NAMES = (
    "New",
    "Waxing Crescent",
    "First Quarter",
    "Waxing Gibbous",
    "Full",
    "Waning Gibbous",
    "Last Quarter",
    "Waning Crescent",
)

# Northern hemisphere view; the southern one is its mirror image.
EMOJIS = ("🌑", "🌒", "🌓", "🌔", "🌕", "🌖", "🌗", "🌘")
EMOJIS_SOUTH = ("🌑", "🌘", "🌗", "🌖", "🌕", "🌔", "🌓", "🌒")

FORMAT_HELP = (
    "%a Moon Age\t %J Julian Day\n"
    "%e Emoji\t %s Emoji of phase (Southern Hemisphere)\n"
    "%p Phase Name\t %P Illuminated Percent\n"
    "%N Phase Index\t %t Tab\n"
    "%% Percent Sign\t %n Newline"
)


def name_of(index: PhaseName) -> str:
    return PHASE_NAMES[index]


def emoji_of(index: PhaseName, *, south: bool = False) -> str:
    return (EMOJIS_SOUTH if south else EMOJIS)[index]


def format_phase(fmt: str, jd: float, result: PhaseResult) -> str:
    """
    Expand an mprintf-style format string for the phase at jd.

    Unknown flags are dropped with a warning; a lone trailing '%' raises
    FormatError.
    """
    index = phase_name(result)
    out = []
    i = 0
    n = len(fmt)
    while i < n:
        ch = fmt[i]
        i += 1
        if ch != "%":
            out.append(ch)
            continue
        if i >= n:
            raise FormatError(f"Bad output formatting: trailing '%' in {fmt!r}")
        flag = fmt[i]
        i += 1
        if flag == "%":
            out.append("%")
        elif flag == "n":
            out.append("\n")
        elif flag == "t":
            out.append("\t")
        elif flag == "a":
            out.append(f"{result.moon_age_days:2.1f}")
        elif flag == "J":
            out.append(f"{jd:f}")
        elif flag == "e":
            out.append(emoji_of(index))
        elif flag == "s":
            out.append(emoji_of(index, south=True))
        elif flag == "p":
            out.append(name_of(index))
        elif flag == "P":
            out.append(f"{result.illuminated_fraction * 100:2.1f}")
        elif flag == "N":
            out.append(str(int(index)))
        else:
            logger.warning("Unknown flag %%%s in format %r", flag, fmt)
    return "".join(out)
