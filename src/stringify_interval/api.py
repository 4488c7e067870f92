"""Public entry points.

The functions differ only in how the anchor date for years and months is
obtained.

Example:
    >>> from stringify_interval import without_date
    >>> without_date(1_234_567)
    '14 days, 6 hours and 56 minutes'
"""

from datetime import datetime
from typing import Callable, Optional

from .models.anchor import FixedAnchor, LazyAnchor, utc_now
from .models.display import DisplayConfig, FixedUnitConfig, Text
from .services.stringifier import stringify_interval
from .utils.durations import Interval


def without_date(
    interval: Interval,
    config: Optional[FixedUnitConfig] = None,
    text: Optional[Text] = None,
) -> str:
    """Stringify an interval; years and months cannot be included.

    Args:
        interval: Seconds or a timedelta; the sign is ignored
        config: Fixed unit configuration (default: FixedUnitConfig.default())
        text: Labels and separators (default: Text.default())
    """
    config = config if config is not None else FixedUnitConfig.default()
    return stringify_interval(
        interval,
        None,
        config.to_display_config(),
        text if text is not None else Text.default(),
    )


def with_date(
    interval: Interval,
    date: datetime,
    config: Optional[DisplayConfig] = None,
    text: Optional[Text] = None,
) -> str:
    """Stringify an interval, measuring years and months from the given date.

    Args:
        interval: Seconds or a timedelta; negative intervals count back from date
        date: Anchor date
        config: Display configuration (default: DisplayConfig.default())
        text: Labels and separators (default: Text.default())
    """
    return stringify_interval(
        interval,
        FixedAnchor(date),
        config if config is not None else DisplayConfig.default(),
        text if text is not None else Text.default(),
    )


def with_lazy_date(
    interval: Interval,
    get_date: Callable[[], datetime],
    config: Optional[DisplayConfig] = None,
    text: Optional[Text] = None,
) -> str:
    """Stringify an interval, measuring years and months from a provided date.

    get_date is called at most once, and only if years or months are
    configured.
    """
    return stringify_interval(
        interval,
        LazyAnchor(get_date),
        config if config is not None else DisplayConfig.default(),
        text if text is not None else Text.default(),
    )


def with_now(
    interval: Interval,
    config: Optional[DisplayConfig] = None,
    text: Optional[Text] = None,
) -> str:
    """Stringify an interval, measuring years and months from the current UTC time."""
    return with_lazy_date(interval, utc_now, config, text)
