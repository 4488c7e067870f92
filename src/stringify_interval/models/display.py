"""Display configuration and output text models."""

from dataclasses import dataclass, field, replace
from typing import Dict, Iterator, Mapping, Optional, Tuple, Type, TypeVar

from ..utils.logging import get_logger
from .threshold_map import ThresholdMap
from .units import ALL_UNITS, CALENDAR_UNITS, FIXED_UNITS, UnitKind, unit_from_name

logger = get_logger(__name__)

TableT = TypeVar("TableT", bound="_UnitSettingsTable")


@dataclass(frozen=True)
class DisplayRange:
    """Inclusive window of counts for which a unit may be shown.

    An upper bound of None means the window is unbounded.
    """

    lower: int = 0
    upper: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate the bounds."""
        if self.lower < 0:
            logger.error(f"DisplayRange validation failed: negative lower {self.lower}")
            raise ValueError("lower bound must be non-negative")
        if self.upper is not None and self.upper < self.lower:
            logger.error(
                f"DisplayRange validation failed: upper {self.upper} "
                f"below lower {self.lower}"
            )
            raise ValueError("upper bound must not be below the lower bound")

    def contains(self, number: int) -> bool:
        """Check whether a count falls inside the window."""
        return number >= self.lower and (self.upper is None or number <= self.upper)

    def __str__(self) -> str:
        upper = "" if self.upper is None else str(self.upper)
        return f"{self.lower}..{upper}"


@dataclass(frozen=True)
class DisplaySettings:
    """How a single unit is displayed."""

    range: DisplayRange = field(default_factory=DisplayRange)
    pad: int = 0  # Minimum digits, zero-filled
    display_zero: bool = False

    def __post_init__(self) -> None:
        """Validate display settings after initialization."""
        if self.pad < 0:
            logger.error(f"DisplaySettings validation failed: negative pad {self.pad}")
            raise ValueError("pad must be non-negative")

    @classmethod
    def new(
        cls,
        lower: int = 0,
        upper: Optional[int] = None,
        pad: int = 0,
        display_zero: bool = False,
    ) -> "DisplaySettings":
        """Create settings from plain range bounds."""
        return cls(DisplayRange(lower, upper), pad, display_zero)


class _UnitSettingsTable:
    """Immutable table of optional DisplaySettings indexed by UnitKind."""

    UNITS: Tuple[UnitKind, ...] = ()

    def __init__(self, settings: Mapping[UnitKind, Optional[DisplaySettings]]) -> None:
        unsupported = [unit for unit in settings if unit not in self.UNITS]
        if unsupported:
            names = ", ".join(unit.name.lower() for unit in unsupported)
            raise ValueError(f"{self.__class__.__name__} does not support: {names}")
        self._settings: Dict[UnitKind, DisplaySettings] = {
            unit: settings[unit]
            for unit in self.UNITS
            if settings.get(unit) is not None
        }

    def get(self, unit: UnitKind) -> Optional[DisplaySettings]:
        """Get the settings for a unit, or None if it is disabled."""
        return self._settings.get(unit)

    def items(self) -> Iterator[Tuple[UnitKind, DisplaySettings]]:
        """Iterate configured units in canonical order."""
        for unit in ALL_UNITS:
            if unit in self._settings:
                yield unit, self._settings[unit]

    def with_unit(
        self: TableT, unit: UnitKind, settings: Optional[DisplaySettings] = None
    ) -> TableT:
        """Return a copy with a unit enabled (default settings) or replaced."""
        updated = dict(self._settings)
        updated[unit] = settings if settings is not None else DisplaySettings()
        return self.__class__._from_mapping(updated)

    def without_unit(self: TableT, unit: UnitKind) -> TableT:
        """Return a copy with a unit disabled."""
        updated = dict(self._settings)
        updated.pop(unit, None)
        return self.__class__._from_mapping(updated)

    def with_weeks(self: TableT) -> TableT:
        """Return a copy with weeks enabled."""
        return self.with_unit(UnitKind.WEEKS)

    def with_days(self: TableT) -> TableT:
        """Return a copy with days enabled."""
        return self.with_unit(UnitKind.DAYS)

    def with_hours(self: TableT) -> TableT:
        """Return a copy with hours enabled."""
        return self.with_unit(UnitKind.HOURS)

    def with_minutes(self: TableT) -> TableT:
        """Return a copy with minutes enabled."""
        return self.with_unit(UnitKind.MINUTES)

    def with_seconds(self: TableT) -> TableT:
        """Return a copy with seconds enabled."""
        return self.with_unit(UnitKind.SECONDS)

    @classmethod
    def _from_mapping(
        cls: Type[TableT], settings: Mapping[UnitKind, Optional[DisplaySettings]]
    ) -> TableT:
        instance = cls.__new__(cls)
        _UnitSettingsTable.__init__(instance, settings)
        return instance

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._settings == other._settings  # type: ignore[attr-defined]

    def __repr__(self) -> str:
        parts = ", ".join(
            f"{unit.name.lower()}={settings!r}" for unit, settings in self.items()
        )
        return f"{self.__class__.__name__}({parts})"


class FixedUnitConfig(_UnitSettingsTable):
    """Display configuration restricted to units of constant length.

    Used where no anchor date is available, so years and months cannot be
    requested.
    """

    UNITS = FIXED_UNITS

    def __init__(
        self,
        weeks: Optional[DisplaySettings] = None,
        days: Optional[DisplaySettings] = None,
        hours: Optional[DisplaySettings] = None,
        minutes: Optional[DisplaySettings] = None,
        seconds: Optional[DisplaySettings] = None,
    ) -> None:
        super().__init__(
            {
                UnitKind.WEEKS: weeks,
                UnitKind.DAYS: days,
                UnitKind.HOURS: hours,
                UnitKind.MINUTES: minutes,
                UnitKind.SECONDS: seconds,
            }
        )

    @classmethod
    def none(cls) -> "FixedUnitConfig":
        """Configuration with every unit disabled."""
        return cls()

    @classmethod
    def default(cls) -> "FixedUnitConfig":
        """Days, hours and minutes, plus seconds for intervals up to 600 seconds."""
        return cls(
            days=DisplaySettings(),
            hours=DisplaySettings(),
            minutes=DisplaySettings(),
            seconds=DisplaySettings.new(0, 600),
        )

    def to_display_config(self) -> "DisplayConfig":
        """Convert to a full configuration with years and months disabled."""
        return DisplayConfig._from_mapping(self._settings)


class DisplayConfig(_UnitSettingsTable):
    """Display configuration for every unit, including years and months.

    Enabling years or months requires an anchor date when stringifying.
    """

    UNITS = ALL_UNITS

    def __init__(
        self,
        years: Optional[DisplaySettings] = None,
        months: Optional[DisplaySettings] = None,
        weeks: Optional[DisplaySettings] = None,
        days: Optional[DisplaySettings] = None,
        hours: Optional[DisplaySettings] = None,
        minutes: Optional[DisplaySettings] = None,
        seconds: Optional[DisplaySettings] = None,
    ) -> None:
        super().__init__(
            {
                UnitKind.YEARS: years,
                UnitKind.MONTHS: months,
                UnitKind.WEEKS: weeks,
                UnitKind.DAYS: days,
                UnitKind.HOURS: hours,
                UnitKind.MINUTES: minutes,
                UnitKind.SECONDS: seconds,
            }
        )

    @classmethod
    def none(cls) -> "DisplayConfig":
        """Configuration with every unit disabled."""
        return cls()

    @classmethod
    def default(cls) -> "DisplayConfig":
        """Years, months, days, hours and minutes, plus seconds up to 600."""
        return cls(
            years=DisplaySettings(),
            months=DisplaySettings(),
            days=DisplaySettings(),
            hours=DisplaySettings(),
            minutes=DisplaySettings(),
            seconds=DisplaySettings.new(0, 600),
        )

    @classmethod
    def default_without_calendar(cls) -> "DisplayConfig":
        """The default configuration with years and months disabled."""
        return FixedUnitConfig.default().to_display_config()

    @property
    def has_calendar_units(self) -> bool:
        """Whether years or months are configured."""
        return any(unit in self._settings for unit in CALENDAR_UNITS)

    def to_fixed_config(self) -> FixedUnitConfig:
        """Convert to a fixed unit configuration.

        Raises:
            ValueError: If years or months are configured
        """
        return FixedUnitConfig._from_mapping(self._settings)

    def with_years(self) -> "DisplayConfig":
        """Return a copy with years enabled."""
        return self.with_unit(UnitKind.YEARS)

    def with_months(self) -> "DisplayConfig":
        """Return a copy with months enabled."""
        return self.with_unit(UnitKind.MONTHS)


def _plural_labels(singular: str, plural: str) -> ThresholdMap[str]:
    labels = ThresholdMap(plural)
    labels.push(1, singular)
    labels.push(2, plural)
    return labels


def _default_labels() -> Dict[UnitKind, ThresholdMap[str]]:
    return {
        UnitKind.YEARS: _plural_labels("year", "years"),
        UnitKind.MONTHS: _plural_labels("month", "months"),
        UnitKind.WEEKS: _plural_labels("week", "weeks"),
        UnitKind.DAYS: _plural_labels("day", "days"),
        UnitKind.HOURS: _plural_labels("hour", "hours"),
        UnitKind.MINUTES: _plural_labels("minute", "minutes"),
        UnitKind.SECONDS: _plural_labels("second", "seconds"),
    }


@dataclass(frozen=True)
class Text:
    """Labels and separators used to assemble the output string.

    Attributes:
        labels: Label lookup per unit, keyed by the unit's count
        joiner: Placed between elements
        final_joiner: Placed between the last two elements instead of
            joiner, when set
        spacer: Placed between a count and its label
    """

    labels: Mapping[UnitKind, ThresholdMap[str]] = field(
        default_factory=_default_labels, hash=False
    )
    joiner: str = ", "
    final_joiner: Optional[str] = " and "
    spacer: str = " "

    def __post_init__(self) -> None:
        """Validate that every unit has labels."""
        missing = [unit.name.lower() for unit in ALL_UNITS if unit not in self.labels]
        if missing:
            logger.error(f"Text validation failed: missing labels for {missing}")
            raise ValueError(f"labels missing for: {', '.join(missing)}")

    @classmethod
    def default(cls) -> "Text":
        """English labels, e.g. "1 day, 5 hours and 20 minutes"."""
        return cls()

    def label(self, unit: UnitKind, count: int) -> str:
        """Look up the label for a unit and count."""
        return self.labels[unit].get(count)

    def get_joiner(self, remaining_elements: int) -> str:
        """Get the separator following an element.

        Args:
            remaining_elements: Elements left to print, including the current one
        """
        if remaining_elements == 1:
            return ""
        if remaining_elements == 2 and self.final_joiner is not None:
            return self.final_joiner
        return self.joiner

    def with_labels(self, **labels: ThresholdMap[str]) -> "Text":
        """Return a copy with labels replaced by unit name (e.g. hours=...)."""
        updated = dict(self.labels)
        for name, threshold_map in labels.items():
            updated[unit_from_name(name)] = threshold_map
        return replace(self, labels=updated)

    def with_separators(
        self,
        joiner: Optional[str] = None,
        final_joiner: Optional[str] = None,
        spacer: Optional[str] = None,
        drop_final_joiner: bool = False,
    ) -> "Text":
        """Return a copy with the given separators replaced."""
        return replace(
            self,
            joiner=self.joiner if joiner is None else joiner,
            final_joiner=None
            if drop_final_joiner
            else (self.final_joiner if final_joiner is None else final_joiner),
            spacer=self.spacer if spacer is None else spacer,
        )
