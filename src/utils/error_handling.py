"""Standardized error handling and performance utilities.

This module provides:
1. Performance timing decorator and context manager for hot paths
2. Structured context logging for errors
3. User-friendly error message formatting
4. An error collector for batch operations that must not stop on bad items

Usage in services:
    from utils.error_handling import format_error_message, log_exception

    try:
        dataset = version_service.get_results_dataset(project_id, 3)
    except ApiError as e:
        log_exception(e, "Failed to load results")
        print(format_error_message(e))

Performance timing usage:
    from utils.error_handling import timed

    @timed
    def evaluate_performance(rows, criteria):
        ...

    # Enable timing with: TPS_PERF_DEBUG=1
"""

from __future__ import annotations

import logging
import os
import time
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

# Environment variable to enable performance timing
PERF_DEBUG = os.environ.get("TPS_PERF_DEBUG", "0") == "1"

F = TypeVar("F", bound=Callable[..., Any])


def timed(func: F) -> F:
    """Decorator to log execution time of functions.

    Only active when TPS_PERF_DEBUG=1 environment variable is set.
    Logs timing at DEBUG level to avoid noise in production.
    """
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not PERF_DEBUG:
            return func(*args, **kwargs)

        start = time.perf_counter()
        try:
            result = func(*args, **kwargs)
            elapsed = time.perf_counter() - start
            logger.debug(f"PERF: {func.__module__}.{func.__name__} took {elapsed:.3f}s")
            return result
        except Exception:
            elapsed = time.perf_counter() - start
            logger.debug(f"PERF: {func.__module__}.{func.__name__} failed after {elapsed:.3f}s")
            raise

    return wrapper  # type: ignore


class TimingContext:
    """Context manager for timing code blocks.

    Only active when TPS_PERF_DEBUG=1 environment variable is set.

    Example:
        with TimingContext("results_fetch"):
            dataset = service.get_results_dataset(project_id, version)
    """

    def __init__(self, name: str):
        self.name = name
        self.start: float = 0

    def __enter__(self) -> "TimingContext":
        if PERF_DEBUG:
            self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if PERF_DEBUG:
            elapsed = time.perf_counter() - self.start
            status = "failed" if exc_val else "completed"
            logger.debug(f"PERF: {self.name} {status} in {elapsed:.3f}s")


def format_error_message(
    error: Exception,
    context: Optional[str] = None,
    include_type: bool = True,
) -> str:
    """Format an exception into a user-friendly message.

    Args:
        error: The exception that occurred
        context: Optional context describing what was being done
        include_type: Whether to include the exception type name

    Returns:
        Formatted error message suitable for display to users
    """
    error_str = str(error)

    if not error_str or error_str == "None":
        error_str = type(error).__name__
        include_type = False

    parts = []
    if context:
        parts.append(context)

    if include_type:
        parts.append(f"{type(error).__name__}: {error_str}")
    else:
        parts.append(error_str)

    return " - ".join(parts) if len(parts) > 1 else parts[0]


def log_exception(
    error: Exception,
    context: str,
    extra: Optional[dict] = None,
    level: int = logging.ERROR,
) -> None:
    """Log an exception with structured context and its traceback."""
    log_extra = {"event": "error", "error_type": type(error).__name__}
    if extra:
        log_extra.update(extra)

    logger.log(level, f"{context}: {error}", extra=log_extra, exc_info=True)


class ErrorCollector:
    """Collects errors during batch operations without stopping.

    Example:
        collector = ErrorCollector("results load")
        for index, record in enumerate(records):
            with collector.catch(f"record {index}"):
                rows.append(ResultRow.from_record(record))
    """

    def __init__(self, operation_name: str):
        self.operation_name = operation_name
        self.errors: list[str] = []
        self._current_context: Optional[str] = None

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def catch(self, context: str):
        """Context manager that catches and collects errors."""
        self._current_context = context
        return self

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_val is not None and isinstance(exc_val, Exception):
            self.errors.append(format_error_message(exc_val, self._current_context))
            log_exception(
                exc_val,
                f"{self.operation_name}: {self._current_context}",
                level=logging.WARNING,
            )
            return True
        return False

    def add_error(self, message: str) -> None:
        """Manually add an error message."""
        self.errors.append(message)
        logger.warning(f"{self.operation_name}: {message}")

    def get_summary(self) -> str:
        """Get a summary of collected errors."""
        if not self.errors:
            return f"{self.operation_name} completed successfully"
        return f"{self.operation_name} completed with {len(self.errors)} error(s)"
