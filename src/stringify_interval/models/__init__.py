"""Data models for units, display configuration and labels."""

from .anchor import AnchorSource, FixedAnchor, LazyAnchor
from .display import (
    DisplayConfig,
    DisplayRange,
    DisplaySettings,
    FixedUnitConfig,
    Text,
)
from .threshold_map import ThresholdMap
from .units import ALL_UNITS, CALENDAR_UNITS, FIXED_UNITS, SECONDS_PER, UnitKind

__all__ = [
    "AnchorSource",
    "FixedAnchor",
    "LazyAnchor",
    "DisplayConfig",
    "DisplayRange",
    "DisplaySettings",
    "FixedUnitConfig",
    "Text",
    "ThresholdMap",
    "UnitKind",
    "ALL_UNITS",
    "CALENDAR_UNITS",
    "FIXED_UNITS",
    "SECONDS_PER",
]
