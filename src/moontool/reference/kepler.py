# reference/kepler.py

from __future__ import annotations

import logging
import math

from ..core.errors import ConvergenceFailure

logger = logging.getLogger(__name__)

KEPLER_EPSILON = 1e-6   # radians
KEPLER_MAX_ITER = 100


def solve_kepler(mean_anomaly_deg: float, ecc: float, *, max_iter: int = KEPLER_MAX_ITER) -> float:
    """
    Solve Kepler's equation E - e sin E = M for the eccentric anomaly.

    Newton-Raphson from E0 = M, stopping once the residual of the iterate
    just corrected is within KEPLER_EPSILON. M is given in degrees, E is
    returned in radians.

    Raises ConvergenceFailure if max_iter corrections are not enough; this
    does not happen for the small eccentricities of the Sun and Moon.
    """
    m = math.radians(mean_anomaly_deg)
    e = m
    for n in range(1, max_iter + 1):
        delta = e - ecc * math.sin(e) - m
        e -= delta / (1 - ecc * math.cos(e))
        if abs(delta) <= KEPLER_EPSILON:
            logger.debug("kepler: M=%.6f e=%.6f converged in %d steps", mean_anomaly_deg, ecc, n)
            return e
    raise ConvergenceFailure(
        f"Kepler's equation did not converge in {max_iter} iterations "
        f"(M={mean_anomaly_deg!r} deg, e={ecc!r})"
    )


def true_anomaly_deg(eccentric_anomaly: float, ecc: float) -> float:
    """True anomaly (degrees) from the eccentric anomaly (radians)."""
    v = math.sqrt((1 + ecc) / (1 - ecc)) * math.tan(eccentric_anomaly / 2)
    return 2 * math.degrees(math.atan(v))
