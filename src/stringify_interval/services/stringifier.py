"""The stringify pipeline: from a signed interval to display text."""

from typing import Dict, Optional

from ..exceptions import CalendarUnitsWithoutAnchorError
from ..models.anchor import AnchorSource
from ..models.display import DisplayConfig, Text
from ..models.units import UnitKind
from ..utils.durations import Interval, to_seconds
from ..utils.logging import get_logger
from .calendar import resolve_calendar_units
from .enablement import (
    enabled_by_range,
    filter_zeroes,
    round_to_smallest,
    with_calendar_units,
)
from .formatter import render
from .splitter import split_duration

logger = get_logger(__name__)


def stringify_interval(
    interval: Interval,
    anchor: Optional[AnchorSource],
    config: DisplayConfig,
    text: Text,
) -> str:
    """Stringify an interval.

    Steps:
        1. Take the absolute interval, remembering whether it was negative.
        2. Enable the fixed units whose range contains the interval.
        3. Round to the smallest enabled fixed unit, if there is one.
        4. Resolve years and months against the anchor, if configured.
        5. Split what is left across the enabled fixed units.
        6. Drop zero counts and render.

    Args:
        interval: Signed interval; negative means before the anchor
        anchor: Source of the anchor date, resolved only if years or months
            are configured
        config: Which units to show and how
        text: Labels and separators

    Raises:
        CalendarUnitsWithoutAnchorError: If years or months are configured
            without an anchor
        NumberOutOfRangeError: If a count or date overflows
        NoUnitsEnabledError: If no unit can display the interval
    """
    signed_seconds = to_seconds(interval)
    in_past = signed_seconds < 0
    seconds = abs(signed_seconds)

    enabled = enabled_by_range(seconds, config)

    rounded = round_to_smallest(seconds, enabled)
    should_round_calendar = rounded is None
    if rounded is not None:
        seconds = rounded

    counts: Dict[UnitKind, int] = {}

    if config.has_calendar_units:
        if anchor is None:
            raise CalendarUnitsWithoutAnchorError()
        calendar = resolve_calendar_units(
            anchor.resolve(), seconds, in_past, should_round_calendar, config
        )
        enabled = with_calendar_units(enabled, calendar.years, calendar.months)
        if calendar.years is not None:
            counts[UnitKind.YEARS] = calendar.years
        if calendar.months is not None:
            counts[UnitKind.MONTHS] = calendar.months
        seconds = calendar.remainder

    counts.update(split_duration(seconds, enabled))
    enabled = filter_zeroes(enabled, counts, config)

    output = render(enabled, counts, config, text)
    logger.debug(f"Stringified {signed_seconds}s as '{output}'")
    return output
