"""Turn time intervals into text like "1 day, 5 hours and 20 minutes".

Years and months can be displayed too, measured from an anchor date, since
their length depends on where they fall in the calendar.
"""

from .api import with_date, with_lazy_date, with_now, without_date
from .exceptions import (
    CalendarUnitsWithoutAnchorError,
    NoUnitsEnabledError,
    NumberOutOfRangeError,
    StringifyError,
)
from .models import (
    DisplayConfig,
    DisplayRange,
    DisplaySettings,
    FixedUnitConfig,
    Text,
    ThresholdMap,
    UnitKind,
)

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "without_date",
    "with_date",
    "with_lazy_date",
    "with_now",
    # Configuration
    "DisplayConfig",
    "DisplayRange",
    "DisplaySettings",
    "FixedUnitConfig",
    "Text",
    "ThresholdMap",
    "UnitKind",
    # Errors
    "StringifyError",
    "NumberOutOfRangeError",
    "NoUnitsEnabledError",
    "CalendarUnitsWithoutAnchorError",
]
