"""Time unit definitions shared by the stringify pipeline."""

from enum import IntEnum
from typing import Dict, Optional, Tuple


class UnitKind(IntEnum):
    """Units that can appear in output, largest first.

    The integer value is the canonical position used for iteration and
    display order.
    """

    YEARS = 0
    MONTHS = 1
    WEEKS = 2
    DAYS = 3
    HOURS = 4
    MINUTES = 5
    SECONDS = 6

    @property
    def is_calendar(self) -> bool:
        """Whether the unit length depends on the date it is measured from."""
        return self in CALENDAR_UNITS

    @property
    def seconds_per(self) -> Optional[int]:
        """Width of a fixed unit in seconds, or None for calendar units."""
        return SECONDS_PER.get(self)


ALL_UNITS: Tuple[UnitKind, ...] = tuple(UnitKind)
CALENDAR_UNITS: Tuple[UnitKind, ...] = (UnitKind.YEARS, UnitKind.MONTHS)
FIXED_UNITS: Tuple[UnitKind, ...] = (
    UnitKind.WEEKS,
    UnitKind.DAYS,
    UnitKind.HOURS,
    UnitKind.MINUTES,
    UnitKind.SECONDS,
)

SECONDS_PER: Dict[UnitKind, int] = {
    UnitKind.WEEKS: 7 * 24 * 60 * 60,
    UnitKind.DAYS: 24 * 60 * 60,
    UnitKind.HOURS: 60 * 60,
    UnitKind.MINUTES: 60,
    UnitKind.SECONDS: 1,
}

# Largest count the formatter will render
MAX_COUNT = 2**32 - 1


def unit_from_name(name: str) -> UnitKind:
    """Look up a unit by its lower-case plural name (e.g. "days").

    Raises:
        ValueError: If the name does not match any unit
    """
    try:
        return UnitKind[name.strip().upper()]
    except KeyError:
        valid = ", ".join(unit.name.lower() for unit in UnitKind)
        raise ValueError(f"Unknown unit '{name}' (expected one of: {valid})") from None
