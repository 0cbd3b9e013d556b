"""Shared building blocks: exceptions, Result type and error helpers."""
from __future__ import annotations

from .exceptions import (
    PatternAnalysisException,
    TripDataError,
    ReportError,
    ConfigurationError,
    OperationTimeoutError,
)
from .result import Result, Success, Failure

__all__ = [
    "PatternAnalysisException",
    "TripDataError",
    "ReportError",
    "ConfigurationError",
    "OperationTimeoutError",
    "Result",
    "Success",
    "Failure",
]
