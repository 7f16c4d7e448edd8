"""Ephemeris-based diagnostics (optional extras)."""

__all__ = ["validate_phasehunt"]
