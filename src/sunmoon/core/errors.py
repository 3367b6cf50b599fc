class SunmoonError(Exception):
    """Base error."""

class UnknownPhaseError(SunmoonError, KeyError):
    """Raised when a named sun phase is not present in the phase table."""
