from __future__ import annotations

import argparse
from typing import List

from moontool.core.time import civil_to_julian, julian_to_civil, julian_to_time
from moontool.core.types import PhaseInstant, Quarter
from moontool.reference.phasehunt import brown_lunation_number, phasehunt


def phases_in_range(jd_start: float, jd_end: float) -> List[PhaseInstant]:
    """Every true quarter instant in [jd_start, jd_end), in order."""
    out: List[PhaseInstant] = []
    h = phasehunt(jd_start)
    if h.prev_jd == jd_start:
        out.append(h.prev)
    inst = h.next
    while inst.jd < jd_end:
        out.append(inst)
        inst = phasehunt(inst.jd).next
    return out


def format_instant(jd: float) -> str:
    y, m, d = julian_to_civil(jd)
    hh, mm, _ = julian_to_time(jd)
    return f"{y:04d}-{m:02d}-{d:02d} {hh:02d}:{mm:02d} UTC"


def print_year(year: int, *, lunations: bool = False) -> None:
    jd0 = civil_to_julian(year, 1, 1)
    jd1 = civil_to_julian(year + 1, 1, 1)
    print(f"Moon phases {year}")
    print("-" * 40)
    for inst in phases_in_range(jd0, jd1):
        line = f"{format_instant(inst.jd)}  {inst.quarter.label}"
        if lunations and inst.quarter is Quarter.NEW:
            line += f"  (lunation {brown_lunation_number(inst.jd)})"
        print(line)
    print()


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print every new, quarter and full Moon in a year (UTC).")
    p.add_argument("--year", type=int, action="append", help="year to print (repeatable)")
    p.add_argument("--lunations", action="store_true", help="show Brown lunation numbers at new Moons")
    args = p.parse_args(argv)

    for y in args.year or [2026]:
        print_year(y, lunations=args.lunations)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
