"""The stages of the stringify pipeline."""

from .calendar import CalendarResult, resolve_calendar_units
from .enablement import (
    enabled_by_range,
    filter_zeroes,
    round_to_smallest,
    smallest_fixed_unit,
    with_calendar_units,
)
from .formatter import render
from .splitter import split_duration
from .stringifier import stringify_interval

__all__ = [
    "CalendarResult",
    "resolve_calendar_units",
    "enabled_by_range",
    "filter_zeroes",
    "round_to_smallest",
    "smallest_fixed_unit",
    "with_calendar_units",
    "render",
    "split_duration",
    "stringify_interval",
]
