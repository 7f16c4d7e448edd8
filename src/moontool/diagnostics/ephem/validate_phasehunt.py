#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import Dict, List, Optional, Tuple

from moontool.core.errors import EphemerisUnavailableError
from moontool.core.time import civil_to_julian, julian_to_civil
from moontool.core.types import PhaseInstant, Quarter
from moontool.ephemeris.skyfield_phases import DEFAULT_BSP, SkyfieldPhases
from moontool.reference.phasehunt import phasehunt

MINUTES_PER_DAY = 1440.0

# (reference JD, phase-hunt minus reference in minutes)
Residual = Tuple[float, float]


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise EphemerisUnavailableError('Need numpy. Install: pip install "moontool[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise EphemerisUnavailableError('Need matplotlib. Install: pip install "moontool[diagnostics]"') from e


def residuals_minutes(reference: List[PhaseInstant]) -> Dict[Quarter, List[Residual]]:
    """
    Phase-hunt minus reference time, per quarter.

    Each reference instant is matched to whichever of the phase-hunt
    neighbours around it has the same quarter and lies closest.
    """
    out: Dict[Quarter, List[Residual]] = {q: [] for q in Quarter}
    for ref in reference:
        h = phasehunt(ref.jd)
        candidates = [p for p in (h.prev, h.next) if p.quarter is ref.quarter]
        if not candidates:
            continue
        best = min(candidates, key=lambda p: abs(p.jd - ref.jd))
        out[ref.quarter].append((ref.jd, (best.jd - ref.jd) * MINUTES_PER_DAY))
    return out


def summarize(res: Dict[Quarter, List[Residual]]) -> Dict[Quarter, Dict[str, float]]:
    np = _need_numpy()
    stats: Dict[Quarter, Dict[str, float]] = {}
    for q, pairs in res.items():
        if not pairs:
            continue
        a = np.asarray([m for _, m in pairs], dtype=float)
        stats[q] = {
            "n": float(a.size),
            "mean": float(np.mean(a)),
            "rms": float(np.sqrt(np.mean(a * a))),
            "max": float(np.max(np.abs(a))),
        }
    return stats


def _decimal_year(jd: float) -> float:
    y, m, _ = julian_to_civil(jd)
    return y + (m - 0.5) / 12.0


def plot_residuals(res: Dict[Quarter, List[Residual]], out_png: str) -> None:
    plt = _need_matplotlib()

    fig, ax = plt.subplots(figsize=(12, 6))
    for q, pairs in res.items():
        if not pairs:
            continue
        years = [_decimal_year(jd) for jd, _ in pairs]
        ax.scatter(years, [m for _, m in pairs], s=2, alpha=0.6, label=q.label)
    ax.set_title("Phase-hunt instants minus JPL ephemeris")
    ax.set_xlabel("Year")
    ax.set_ylabel("Error (minutes)")
    ax.grid(True, alpha=0.3)
    ax.legend()
    plt.tight_layout()
    plt.savefig(out_png, dpi=200)
    plt.close(fig)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate phase-hunt instants against a JPL ephemeris (skyfield).")
    p.add_argument("--year-start", type=int, default=1990)
    p.add_argument("--year-end", type=int, default=2030)
    p.add_argument("--bsp", default=DEFAULT_BSP, help="ephemeris file (default: %(default)s)")
    p.add_argument("--dir", default=None, help="directory holding/caching the ephemeris file")
    p.add_argument("--out-png", default=None, help="also plot the residuals to this file")
    args = p.parse_args(argv)
    if args.out_png:
        _need_matplotlib()

    print(f"Loading {args.bsp}...")
    sky = SkyfieldPhases.load(args.dir, args.bsp)

    jd0 = civil_to_julian(args.year_start, 1, 1)
    jd1 = civil_to_julian(args.year_end, 1, 1)
    reference = sky.phases_between(jd0, jd1)
    print(f"Comparing {len(reference)} phases from {args.year_start} to {args.year_end}...")

    res = residuals_minutes(reference)
    stats = summarize(res)
    print()
    print(f"{'phase':<15} {'n':>5} {'mean':>9} {'rms':>9} {'max':>9}   (minutes)")
    for q, s in stats.items():
        print(f"{q.label:<15} {int(s['n']):>5} {s['mean']:>9.2f} {s['rms']:>9.2f} {s['max']:>9.2f}")

    if args.out_png:
        plot_residuals(res, args.out_png)
        print(f"Plot saved to {args.out_png}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
