"""Resolution of years and months against an anchor date.

Years and months have no fixed length, so they are counted by shifting the
anchor date one calendar month at a time (clamping the day of month, e.g.
Jan 31 + 1 month = Feb 28) and comparing against the date the interval
reaches.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Tuple

from dateutil.relativedelta import relativedelta

from ..exceptions import NumberOutOfRangeError
from ..models.display import DisplayConfig
from ..models.units import UnitKind
from ..utils.durations import to_seconds
from ..utils.logging import get_logger

logger = get_logger(__name__)

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class CalendarResult:
    """Years and months to display and the seconds left for fixed units.

    A count of None means the unit is not displayed.
    """

    years: Optional[int]
    months: Optional[int]
    remainder: int


def shift_months(date: datetime, months: int, in_past: bool) -> datetime:
    """Move a date by whole calendar months, backwards if in_past.

    Raises:
        NumberOutOfRangeError: If the result is outside the datetime range
    """
    delta = relativedelta(months=months)
    try:
        return date - delta if in_past else date + delta
    except (OverflowError, ValueError) as e:
        raise NumberOutOfRangeError(
            f"Date out of range shifting {date.isoformat()} by {months} months",
            {"in_past": in_past},
        ) from e


def target_date_for(anchor: datetime, seconds: int, in_past: bool) -> datetime:
    """Return the date the interval reaches from the anchor.

    Raises:
        NumberOutOfRangeError: If the result is outside the datetime range
    """
    try:
        delta = timedelta(seconds=seconds)
        return anchor - delta if in_past else anchor + delta
    except OverflowError as e:
        raise NumberOutOfRangeError(
            f"Date out of range shifting {anchor.isoformat()} by {seconds} seconds",
            {"in_past": in_past},
        ) from e


def _overshoots(shifted: datetime, target: datetime, in_past: bool) -> bool:
    return shifted < target if in_past else shifted > target


def floor_months(
    anchor: datetime,
    target: datetime,
    estimate: int,
    in_past: bool,
    step: int = 1,
) -> Tuple[int, datetime]:
    """Correct an upper-bound estimate to the whole steps contained in the interval.

    Args:
        anchor: Date the interval starts from
        target: Date the interval reaches
        estimate: Estimated number of steps, at most one too many
        in_past: Whether the target lies before the anchor
        step: Months per step (1 for months, 12 for years)

    Returns:
        The floor count of steps and the anchor shifted by that many steps
    """
    shifted = shift_months(anchor, estimate * step, in_past)
    if _overshoots(shifted, target, in_past):
        estimate -= 1
        shifted = shift_months(anchor, estimate * step, in_past)
    return estimate, shifted


def is_n_months_further_closer(
    target: datetime, date_before: datetime, in_past: bool, n: int
) -> bool:
    """Check whether moving n more months gets at least as close to the target.

    Ties count as closer, so rounding goes away from the anchor.
    """
    n_months_further = shift_months(date_before, n, in_past)
    return abs(target - n_months_further) <= abs(target - date_before)


def _elapsed_seconds(anchor: datetime, shifted: datetime) -> int:
    return to_seconds(abs(anchor - shifted))


def resolve_calendar_units(
    anchor: datetime,
    seconds: int,
    in_past: bool,
    should_round: bool,
    config: DisplayConfig,
) -> CalendarResult:
    """Count the years and months between the anchor and the target date.

    Args:
        anchor: Date the interval is measured from
        seconds: Absolute interval in seconds
        in_past: Whether the interval points backwards from the anchor
        should_round: Round years/months to the nearest unit because no
            fixed unit follows them; otherwise take exact floor values
        config: Display configuration for years and months

    Returns:
        The calendar counts and the remaining interval in seconds

    Raises:
        NumberOutOfRangeError: If date arithmetic leaves the datetime range
    """
    target = target_date_for(anchor, seconds, in_past)
    larger, smaller = (anchor, target) if in_past else (target, anchor)

    estimate = (larger.year - smaller.year) * MONTHS_PER_YEAR + (
        larger.month - smaller.month
    )
    months, month_floor_date = floor_months(anchor, target, estimate, in_past)
    years = months // MONTHS_PER_YEAR

    years_settings = config.get(UnitKind.YEARS)
    months_settings = config.get(UnitKind.MONTHS)
    show_years = years_settings is not None and years_settings.range.contains(years)
    show_months = months_settings is not None and months_settings.range.contains(
        months
    )

    logger.trace(  # type: ignore[attr-defined]
        f"Calendar span {anchor.isoformat()} -> {target.isoformat()}: "
        f"{months} months, {years} years (round={should_round}, "
        f"show_years={show_years}, show_months={show_months})"
    )

    if not show_years and not show_months:
        return CalendarResult(None, None, seconds)

    if not should_round:
        if show_years and not show_months:
            year_floor_date = shift_months(anchor, years * MONTHS_PER_YEAR, in_past)
            remainder = seconds - _elapsed_seconds(anchor, year_floor_date)
            return CalendarResult(years, None, remainder)

        remainder = seconds - _elapsed_seconds(anchor, month_floor_date)
        if show_months and not show_years:
            return CalendarResult(None, months, remainder)
        return CalendarResult(years, months % MONTHS_PER_YEAR, remainder)

    if show_years and not show_months:
        whole_years, year_floor_date = floor_months(
            anchor, target, larger.year - smaller.year, in_past, MONTHS_PER_YEAR
        )
        if is_n_months_further_closer(
            target, year_floor_date, in_past, MONTHS_PER_YEAR
        ):
            whole_years += 1
        return CalendarResult(whole_years, None, 0)

    if is_n_months_further_closer(target, month_floor_date, in_past, 1):
        months += 1
    if show_months and not show_years:
        return CalendarResult(None, months, 0)
    return CalendarResult(months // MONTHS_PER_YEAR, months % MONTHS_PER_YEAR, 0)
