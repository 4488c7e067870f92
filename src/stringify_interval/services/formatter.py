"""Rendering of resolved unit counts into the output string."""

from typing import List, Mapping

from ..exceptions import NumberOutOfRangeError
from ..models.display import DisplayConfig, Text
from ..models.units import ALL_UNITS, MAX_COUNT, UnitKind
from .enablement import EnabledUnits


def format_unit(count: int, pad: int, spacer: str, label: str) -> str:
    """Render a single count and its label, e.g. "05 minutes"."""
    return f"{str(count).zfill(pad)}{spacer}{label}"


def render(
    enabled: EnabledUnits,
    counts: Mapping[UnitKind, int],
    config: DisplayConfig,
    text: Text,
) -> str:
    """Join the enabled units in canonical order.

    Args:
        enabled: Units that survived zero filtering
        counts: Count per unit
        config: Display configuration, for pad widths
        text: Labels and separators

    Returns:
        The assembled string, e.g. "1 day, 5 hours and 20 minutes"

    Raises:
        NumberOutOfRangeError: If a count does not fit in 32 bits
    """
    units = [unit for unit in ALL_UNITS if unit in enabled]
    parts: List[str] = []

    for remaining, unit in zip(range(len(units), 0, -1), units):
        count = counts.get(unit, 0)
        if count > MAX_COUNT:
            raise NumberOutOfRangeError(
                f"Count for {unit.name.lower()} is too large to display",
                {"count": count},
            )
        settings = config.get(unit)
        pad = settings.pad if settings is not None else 0
        parts.append(format_unit(count, pad, text.spacer, text.label(unit, count)))
        parts.append(text.get_joiner(remaining))

    return "".join(parts)
