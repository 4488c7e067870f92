"""Selection of the units that make it into the output.

Enabled units are computed in three phases, each a pure function returning a
new frozenset:

1. ``enabled_by_range``: fixed units whose display range contains the
   interval measured in that unit.
2. ``with_calendar_units``: years and months added by the calendar resolver.
3. ``filter_zeroes``: zero-valued units dropped, never leaving the set empty.
"""

from typing import FrozenSet, Mapping, Optional

from ..exceptions import NoUnitsEnabledError
from ..models.display import DisplayConfig
from ..models.units import ALL_UNITS, FIXED_UNITS, SECONDS_PER, UnitKind
from ..utils.durations import round_to_nearest_multiple
from ..utils.logging import get_logger

logger = get_logger(__name__)

EnabledUnits = FrozenSet[UnitKind]


def enabled_by_range(seconds: int, config: DisplayConfig) -> EnabledUnits:
    """Find the fixed units whose display range contains the interval.

    Each unit measures the interval independently in its own scale, so a
    100 minute interval is 1 hour and 100 minutes.

    Args:
        seconds: Absolute interval in seconds
        config: Display configuration

    Returns:
        Enabled fixed units; years and months are never included here
    """
    candidates = set()
    for unit in FIXED_UNITS:
        settings = config.get(unit)
        if settings is not None and settings.range.contains(
            seconds // SECONDS_PER[unit]
        ):
            candidates.add(unit)
    enabled = frozenset(candidates)
    logger.trace(  # type: ignore[attr-defined]
        f"Units enabled by range for {seconds}s: {_names(enabled)}"
    )
    return enabled


def smallest_fixed_unit(enabled: EnabledUnits) -> Optional[UnitKind]:
    """Return the smallest enabled fixed unit, or None if none is enabled."""
    for unit in reversed(FIXED_UNITS):
        if unit in enabled:
            return unit
    return None


def round_to_smallest(seconds: int, enabled: EnabledUnits) -> Optional[int]:
    """Round the interval to the granularity of the smallest enabled unit.

    Args:
        seconds: Absolute interval in seconds
        enabled: Units enabled by range

    Returns:
        The rounded interval, or None when no fixed unit is enabled and
        rounding has to happen on years or months instead
    """
    unit = smallest_fixed_unit(enabled)
    if unit is None:
        return None
    rounded = round_to_nearest_multiple(seconds, SECONDS_PER[unit])
    logger.trace(  # type: ignore[attr-defined]
        f"Rounded {seconds}s to {rounded}s using {unit.name.lower()}"
    )
    return rounded


def with_calendar_units(
    enabled: EnabledUnits, years: Optional[int], months: Optional[int]
) -> EnabledUnits:
    """Add years and months to the enabled set when they were resolved."""
    added = set()
    if years is not None:
        added.add(UnitKind.YEARS)
    if months is not None:
        added.add(UnitKind.MONTHS)
    return enabled | added


def filter_zeroes(
    enabled: EnabledUnits,
    counts: Mapping[UnitKind, int],
    config: DisplayConfig,
) -> EnabledUnits:
    """Drop enabled units that have a zero count and should not display zero.

    If that would drop every unit, the smallest enabled unit is kept so the
    output is never empty.

    Raises:
        NoUnitsEnabledError: If no unit was enabled to begin with
    """
    ordered = [unit for unit in ALL_UNITS if unit in enabled]
    if not ordered:
        raise NoUnitsEnabledError()
    fallback = ordered[-1]

    remaining = frozenset(
        unit
        for unit in ordered
        if counts.get(unit, 0) > 0 or _display_zero(unit, config)
    )
    if not remaining:
        logger.trace(  # type: ignore[attr-defined]
            f"All counts are zero, keeping {fallback.name.lower()}"
        )
        return frozenset({fallback})
    return remaining


def _display_zero(unit: UnitKind, config: DisplayConfig) -> bool:
    settings = config.get(unit)
    return settings is not None and settings.display_zero


def _names(units: EnabledUnits) -> str:
    return ", ".join(unit.name.lower() for unit in ALL_UNITS if unit in units) or "none"
