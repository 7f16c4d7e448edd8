"""Diagnostics package.

- diagnostics: always available, light-weight tables (no ephemeris)
- diagnostics.ephem: optional (requires ephemeris extras + a BSP file)
"""

__all__ = ["phase_table"]
