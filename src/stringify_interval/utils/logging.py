"""Logging utilities with TRACE level support and optional JSON output."""

import json
import logging
import logging.handlers
import sys
import threading
import uuid
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Generator, Optional

# Add TRACE level
TRACE_LEVEL = 5
logging.addLevelName(TRACE_LEVEL, "TRACE")


def trace(self: logging.Logger, message: str, *args: Any, **kwargs: Any) -> None:
    """Log a message with severity 'TRACE'."""
    if self.isEnabledFor(TRACE_LEVEL):
        self._log(TRACE_LEVEL, message, args, **kwargs)


logging.Logger.trace = trace  # type: ignore[attr-defined]

# Thread-local storage for correlation IDs and context
_context = threading.local()

# LogRecord attributes that are not user supplied context
_STANDARD_RECORD_FIELDS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
        "correlation_id",
        "operation",
    }
)


class ContextFilter(logging.Filter):
    """Filter to add the current operation context to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = getattr(_context, "correlation_id", None)
        record.operation = getattr(_context, "operation", None)
        for key, value in getattr(_context, "context", {}).items():
            setattr(record, key, value)
        return True


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def __init__(self, include_traceback: bool = True) -> None:
        """Initialize JSON formatter.

        Args:
            include_traceback: Whether to include traceback in error logs
        """
        super().__init__()
        self.include_traceback = include_traceback

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
            "line": record.lineno,
        }

        if getattr(record, "correlation_id", None):
            log_entry["correlation_id"] = record.correlation_id
        if getattr(record, "operation", None):
            log_entry["operation"] = record.operation

        context = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_RECORD_FIELDS and not key.startswith("_")
        }
        if context:
            log_entry["context"] = context

        if record.exc_info and self.include_traceback:
            log_entry["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": self.formatException(record.exc_info),
            }

        return json.dumps(log_entry, default=str, ensure_ascii=False)


def setup_logging(
    log_level: str = "WARNING",
    log_file: Optional[Path] = None,
    json_format: bool = False,
    console_output: bool = True,
    max_file_size: int = 1024 * 1024,  # 1MB
    backup_count: int = 3,
) -> None:
    """Set up logging for command line use.

    Console output goes to stderr so that stdout only carries results.

    Args:
        log_level: Logging level name, including TRACE
        log_file: Optional file to log to, rotated by size
        json_format: Whether to format records as JSON
        console_output: Whether to log to stderr
        max_file_size: Maximum size of the log file before rotation
        backup_count: Number of rotated files to keep
    """
    if log_level.upper() == "TRACE":
        numeric_level = TRACE_LEVEL
    else:
        numeric_level = getattr(logging, log_level.upper(), logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if json_format:
        formatter: logging.Formatter = JSONFormatter(include_traceback=True)
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    context_filter = ContextFilter()

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_file_size,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(context_filter)
        root_logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(context_filter)
        root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name.

    Args:
        name: Logger name (typically __name__)
    """
    return logging.getLogger(name)


def set_correlation_id(correlation_id: Optional[str] = None) -> str:
    """Set correlation ID for current thread, generating one if None."""
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())

    _context.correlation_id = correlation_id
    return correlation_id


def get_correlation_id() -> Optional[str]:
    """Get current correlation ID."""
    return getattr(_context, "correlation_id", None)


def clear_context() -> None:
    """Clear all context for current thread."""
    for attr in ["correlation_id", "operation", "context"]:
        if hasattr(_context, attr):
            delattr(_context, attr)


@contextmanager
def operation_context(
    operation: str,
    correlation_id: Optional[str] = None,
    **kwargs: Any,
) -> Generator[str, None, None]:
    """Attach an operation name and extra fields to records logged inside.

    Args:
        operation: Operation name
        correlation_id: Correlation ID (generates UUID if None)
        **kwargs: Additional context

    Yields:
        The correlation ID
    """
    old_correlation_id = getattr(_context, "correlation_id", None)
    old_operation = getattr(_context, "operation", None)
    old_context = getattr(_context, "context", {}).copy()

    try:
        actual_correlation_id = set_correlation_id(correlation_id)
        _context.operation = operation
        _context.context = {**old_context, **kwargs}

        yield actual_correlation_id

    finally:
        if old_correlation_id:
            _context.correlation_id = old_correlation_id
        elif hasattr(_context, "correlation_id"):
            delattr(_context, "correlation_id")

        if old_operation:
            _context.operation = old_operation
        elif hasattr(_context, "operation"):
            delattr(_context, "operation")

        _context.context = old_context
