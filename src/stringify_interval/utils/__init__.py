"""Utility functions for stringify-interval."""

from .durations import Interval, round_to_nearest_multiple, to_seconds
from .logging import (
    TRACE_LEVEL,
    get_logger,
    operation_context,
    setup_logging,
)

__all__ = [
    # Duration utilities
    "Interval",
    "round_to_nearest_multiple",
    "to_seconds",
    # Logging utilities
    "TRACE_LEVEL",
    "get_logger",
    "operation_context",
    "setup_logging",
]
