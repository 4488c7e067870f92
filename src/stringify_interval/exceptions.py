"""Exception hierarchy for stringify-interval.

Every error raised by the library derives from StringifyError, which carries
an optional context dictionary for debugging and error reporting.
"""

from typing import Any, Dict, Optional


class StringifyError(Exception):
    """Base exception for all stringify-interval errors.

    Attributes:
        context: Optional dictionary containing additional error context
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        """Initialize the error.

        Args:
            message: The error message
            context: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.context = context or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        base_message = super().__str__()
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{base_message} (context: {context_str})"
        return base_message


class NumberOutOfRangeError(StringifyError):
    """A count or date fell outside the representable range."""

    def __init__(
        self,
        message: str = "Some operation overflowed or some number conversion failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, context)


class NoUnitsEnabledError(StringifyError):
    """No configured unit can display the interval."""

    def __init__(
        self,
        message: str = "No units were enabled",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, context)


class CalendarUnitsWithoutAnchorError(StringifyError):
    """Years or months were requested but no anchor date was supplied."""

    def __init__(
        self,
        message: str = "Cannot display years or months without a date",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, context)
