class SunlightError(Exception):
    """Base error."""

class NonFiniteTimeError(SunlightError, ValueError):
    """Raised when an hour-of-day value is NaN or infinite."""

class UnknownTwilightError(SunlightError, KeyError):
    """Raised for a twilight kind that has no standard altitude."""

class EphemerisUnavailableError(SunlightError, RuntimeError):
    """Raised when the optional ephemeris extras are not installed."""
