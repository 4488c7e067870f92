"""Helpers for converting intervals to whole seconds."""

from datetime import timedelta
from typing import Union

Interval = Union[int, timedelta]

_MICROSECONDS_PER_SECOND = 1_000_000


def to_seconds(interval: Interval) -> int:
    """Convert an interval to a signed number of whole seconds.

    Sub-second parts are truncated toward zero, so -1.5 seconds becomes -1.

    Args:
        interval: Number of seconds or a timedelta

    Returns:
        Signed whole seconds
    """
    if isinstance(interval, timedelta):
        microseconds = (
            (interval.days * 86400 + interval.seconds) * _MICROSECONDS_PER_SECOND
            + interval.microseconds
        )
        if microseconds < 0:
            return -(-microseconds // _MICROSECONDS_PER_SECOND)
        return microseconds // _MICROSECONDS_PER_SECOND
    if isinstance(interval, bool) or not isinstance(interval, int):
        raise TypeError(
            f"interval must be an int or timedelta, not {type(interval).__name__}"
        )
    return interval


def round_to_nearest_multiple(number: int, multiple: int) -> int:
    """Round a non-negative number to the nearest multiple, halves rounding up.

    Examples:
        >>> round_to_nearest_multiple(90, 60)
        120
        >>> round_to_nearest_multiple(89, 60)
        60
    """
    return (number + multiple // 2) // multiple * multiple
