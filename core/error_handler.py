"""Decorators and a handler object for consistent error reporting."""
from __future__ import annotations

import functools
import time
from typing import Callable, TypeVar

from loguru import logger

from core.result import Success, Failure, Result

T = TypeVar('T')


def as_result(func: Callable[..., T]) -> Callable[..., Result[T, Exception]]:
    """Wrap the return value in Success and any exception in Failure."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> Result[T, Exception]:
        try:
            return Success(func(*args, **kwargs))
        except Exception as e:
            return Failure(e)
    return wrapper


def log_execution_time(logger_instance=logger, level: str = "DEBUG"):
    """Log how long the decorated function took.

    Args:
        logger_instance: Logger to use
        level: Log level name (DEBUG, INFO, ...)
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            try:
                return func(*args, **kwargs)
            finally:
                elapsed = time.perf_counter() - start_time
                log_func = getattr(logger_instance, level.lower(), logger_instance.debug)
                log_func(f"{func.__qualname__} executed in {elapsed:.3f}s")
        return wrapper
    return decorator


class ErrorHandler:
    """Logs unexpected errors at the application boundary."""

    def __init__(self, logger_instance=logger):
        self.logger = logger_instance

    def handle(self, error: Exception, context: str = "") -> None:
        """Log an error with optional context.

        Args:
            error: The exception to report
            context: Where the error happened
        """
        message = f"Error in {context}: {error}" if context else str(error)
        self.logger.error(message)
