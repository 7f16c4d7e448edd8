class MoontoolError(Exception):
    """Base error."""

class ConvergenceFailure(MoontoolError):
    """Raised when an iterative solve or search exceeds its iteration cap."""

class DateParseError(MoontoolError, ValueError):
    """Raised when a date/time string matches none of the accepted forms."""

class FormatError(MoontoolError, ValueError):
    """Raised for a malformed output format string."""

class EphemerisUnavailableError(MoontoolError):
    """Raised when the optional ephemeris or diagnostics extras are not installed."""
