"""Exception hierarchy for the catch pattern engine."""
from __future__ import annotations


class PatternAnalysisException(Exception):
    """Base exception for all pattern analysis errors."""
    pass


class TripDataError(PatternAnalysisException):
    """Raised when trip or spot input cannot be read."""
    pass


class ReportError(PatternAnalysisException):
    """Raised when a pattern report cannot be built."""
    pass


class ConfigurationError(PatternAnalysisException):
    """Raised when configuration is invalid or missing."""
    pass


class OperationTimeoutError(PatternAnalysisException, TimeoutError):
    """Raised when a guarded operation does not settle before its deadline.

    The message is always ``"<label> timed out"`` so callers can tell a slow
    lookup apart from a failed one.
    """

    def __init__(self, label: str, milliseconds: float = 0) -> None:
        super().__init__(f"{label} timed out")
        self.label = label
        self.milliseconds = milliseconds
