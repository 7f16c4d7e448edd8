from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys
from typing import Callable, Optional

from .core.errors import MoontoolError

_COMMANDS = ("show", "phoon", "hunt", "lunation", "details", "jd", "table", "ephem")

_LOG_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)

# argparse reads a leading "-" as an option, so negative offsets need "="
_TIME_HELP = "date/time to use instead of now (negative offsets as --time=-HH:MM)"


def _setup_logging(verbosity: int) -> None:
    level = _LOG_LEVELS[min(verbosity, len(_LOG_LEVELS) - 1)]
    logging.basicConfig(stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level)


def _common() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(add_help=False)
    p.add_argument("-v", "--verbose", action="count", default=0, help="more logging on stderr (repeatable)")
    return p


def _positive_int(s: str) -> int:
    n = int(s)
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {s!r}")
    return n


def _when(text: Optional[str]) -> float:
    """JD of a free-text date, or of the current instant."""
    from .api import to_jd
    from .dates import parse_date

    if text is None:
        return to_jd(None)
    return to_jd(parse_date(text))


def _utc(jd: float) -> str:
    from .core.time import julian_to_datetime

    return julian_to_datetime(jd).strftime("%Y-%m-%d %H:%M:%S UTC")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _guarded(prog: str, fn: Callable[[list[str]], int], argv: list[str]) -> int:
    try:
        return fn(argv)
    except MoontoolError as e:
        print(f"{prog}: {e}", file=sys.stderr)
        return 2


# ============================================================
# Subcommands
# ============================================================

def cmd_show(argv: list[str]) -> int:
    from .api import describe
    from .render.text import DEFAULT_FORMAT, FORMAT_HELP

    p = argparse.ArgumentParser(
        prog="moontool show",
        parents=[_common()],
        description="Print the phase of the Moon.",
        epilog="Format flags:\n" + FORMAT_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("-t", "--time", default=None, help=_TIME_HELP)
    p.add_argument("format", nargs="?", default=DEFAULT_FORMAT, help="output format (default: %(default)r)")
    args = p.parse_args(argv)
    if args.verbose:
        _setup_logging(args.verbose)

    print(describe(_when(args.time), args.format))
    return 0


def cmd_phoon(argv: list[str], prog: str = "moontool phoon") -> int:
    from .api import ascii_moon
    from .render.ascii_moon import DEFAULT_LINES

    p = argparse.ArgumentParser(prog=prog, parents=[_common()], description="Show the phase of the Moon as ASCII art.")
    p.add_argument("-l", "--lines", type=_positive_int, default=DEFAULT_LINES, help=f"picture height (default: {DEFAULT_LINES})")
    p.add_argument("--south", action="store_true", help="draw the Moon as seen from the southern hemisphere")
    p.add_argument("--no-text", action="store_true", help="omit the quarter countdowns")
    p.add_argument("date", nargs="*", help="date/time to use instead of now (after -- for negative offsets)")
    args = p.parse_args(argv)
    if args.verbose:
        _setup_logging(args.verbose)

    jd = _when(" ".join(args.date) if args.date else None)
    print(ascii_moon(jd, lines=args.lines, south=args.south, show_text=not args.no_text))
    return 0


def cmd_hunt(argv: list[str]) -> int:
    from .api import phasehunt
    from .render.ascii_moon import format_seconds
    from .core.time import SECONDS_PER_DAY

    p = argparse.ArgumentParser(prog="moontool hunt", parents=[_common()], description="Previous and next quarter phases.")
    p.add_argument("-t", "--time", default=None, help=_TIME_HELP)
    args = p.parse_args(argv)
    if args.verbose:
        _setup_logging(args.verbose)

    jd = _when(args.time)
    h = phasehunt(jd)
    since = format_seconds(int((jd - h.prev_jd) * SECONDS_PER_DAY))
    until = format_seconds(int((h.next_jd - jd) * SECONDS_PER_DAY))
    print(f"Last {h.prev_quarter.label + ':':<15} {_utc(h.prev_jd)}  (+{since})")
    print(f"Next {h.next_quarter.label + ':':<15} {_utc(h.next_jd)}  (-{until})")
    return 0


def cmd_lunation(argv: list[str]) -> int:
    from .api import lunation

    p = argparse.ArgumentParser(prog="moontool lunation", parents=[_common()], description="Phases of the current lunation.")
    p.add_argument("-t", "--time", default=None, help=_TIME_HELP)
    args = p.parse_args(argv)
    if args.verbose:
        _setup_logging(args.verbose)

    lun = lunation(_when(args.time))
    print(f"Lunation {lun.brown_number}")
    for inst in lun.phases:
        print(f"  {inst.quarter.label:<15} {_utc(inst.jd)}")
    return 0


def cmd_details(argv: list[str]) -> int:
    from .api import lunation, moon_details, phase_name
    from .reference import astro_args as aa
    from .render.text import emoji_of, name_of

    p = argparse.ArgumentParser(prog="moontool details", parents=[_common()], description="Full report on the Moon and Sun.")
    p.add_argument("-t", "--time", default=None, help=_TIME_HELP)
    args = p.parse_args(argv)
    if args.verbose:
        _setup_logging(args.verbose)

    jd = _when(args.time)
    d = moon_details(jd)
    index = phase_name(jd)
    lun = lunation(jd)

    age = d.phase.moon_age_days
    days = int(age)
    hours = int(24 * (age - days))
    minutes = int(1440 * (age - days)) % 60

    print(f"Julian date:        {jd:.5f}")
    print(f"Universal time:     {_utc(jd)}")
    print()
    print(f"Age of moon:        {days} days, {hours} hours, {minutes} minutes.")
    print(f"Moon phase:         {d.phase.illuminated_fraction * 100:.0f}%   (0% = New, 100% = Full)")
    print(f"Phase name:         {name_of(index)} {emoji_of(index)}")
    print()
    print(f"Moon's distance:    {d.moon_distance_km:.0f} kilometres, "
          f"{d.moon_distance_km / aa.EARTH_RADIUS_KM:.1f} Earth radii.")
    print(f"Moon subtends:      {d.moon_angular_diameter_deg:.4f} degrees.")
    print()
    print(f"Sun's distance:     {d.sun_distance_km:.0f} kilometres, "
          f"{d.sun_distance_km / aa.SUN_SEMI_MAJOR_AXIS_KM:.3f} astronomical units.")
    print(f"Sun subtends:       {d.sun_angular_diameter_deg:.4f} degrees.")
    print()
    for inst in lun.phases:
        print(f"{inst.quarter.label + ':':<20}{_utc(inst.jd)}")
    print(f"Lunation:           {lun.brown_number}")
    return 0


def cmd_jd(argv: list[str]) -> int:
    from .core.time import julian_to_civil, julian_to_time

    p = argparse.ArgumentParser(prog="moontool jd", parents=[_common()], description="Julian date <-> civil UTC.")
    g = p.add_mutually_exclusive_group()
    g.add_argument("-t", "--time", default=None, help="date/time to convert (default: now; negative offsets as --time=-HH:MM)")
    g.add_argument("--from-jd", type=float, default=None, help="Julian date to convert to civil UTC")
    args = p.parse_args(argv)
    if args.verbose:
        _setup_logging(args.verbose)

    jd = args.from_jd if args.from_jd is not None else _when(args.time)
    y, m, d = julian_to_civil(jd)
    hh, mm, ss = julian_to_time(jd)
    print(f"JD  = {jd:.6f}")
    print(f"UTC = {y:04d}-{m:02d}-{d:02d} {hh:02d}:{mm:02d}:{ss:02d}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # `moontool [-t TIME] [FORMAT]` without a subcommand means `show`
    first = next((a for a in argv if not a.startswith("-")), None)
    if first not in _COMMANDS and "-h" not in argv and "--help" not in argv:
        return _guarded("moontool", cmd_show, argv)

    p = argparse.ArgumentParser(prog="moontool", parents=[_common()], description="Phase of the Moon toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("show", help="Print the phase of the Moon (default)", add_help=False)
    sub.add_parser("phoon", help="Show the phase of the Moon as ASCII art", add_help=False)
    sub.add_parser("hunt", help="Previous and next quarter phases", add_help=False)
    sub.add_parser("lunation", help="Phases and Brown number of the current lunation", add_help=False)
    sub.add_parser("details", help="Full report on the Moon and Sun", add_help=False)
    sub.add_parser("jd", help="Julian date <-> civil UTC", add_help=False)

    # diagnostics
    sub.add_parser("table", help="Every quarter phase in a year (diagnostics)", add_help=False)

    # ephem diagnostics
    p_ephem = sub.add_parser("ephem", help="Ephemeris-based diagnostics (needs moontool[ephemeris])")
    p_ephem.add_argument("tool", choices=["validate"], help="Which ephemeris diagnostic to run")

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.verbose)

    if args.cmd == "table":
        return _guarded("moontool", lambda a: _run_module_main("moontool.diagnostics.phase_table", a), rest)

    if args.cmd == "ephem":
        tool_map = {
            "validate": "moontool.diagnostics.ephem.validate_phasehunt",
        }
        modpath = tool_map[args.tool]
        return _guarded("moontool", lambda a: _run_module_main(modpath, a), rest)

    commands = {
        "show": cmd_show,
        "phoon": cmd_phoon,
        "hunt": cmd_hunt,
        "lunation": cmd_lunation,
        "details": cmd_details,
        "jd": cmd_jd,
    }
    return _guarded("moontool", commands[args.cmd], rest)


def phoon_main(argv: list[str] | None = None) -> int:
    """Entry point of the stand-alone `phoon` script."""
    if argv is None:
        argv = sys.argv[1:]
    _setup_logging(0)
    return _guarded("phoon", lambda a: cmd_phoon(a, prog="phoon"), argv)


if __name__ == "__main__":
    raise SystemExit(main())
