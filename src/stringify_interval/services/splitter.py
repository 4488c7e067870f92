"""Apportioning of the remaining interval across fixed units."""

from typing import Dict

from ..models.units import FIXED_UNITS, SECONDS_PER, UnitKind
from ..utils.logging import get_logger
from .enablement import EnabledUnits

logger = get_logger(__name__)


def split_duration(seconds: int, enabled: EnabledUnits) -> Dict[UnitKind, int]:
    """Allocate the interval across the enabled fixed units, largest first.

    Disabled units are skipped, so the next smaller enabled unit absorbs
    their share (e.g. 8 days with weeks and hours enabled is 1 week and
    24 hours).

    Args:
        seconds: Remaining interval in seconds
        enabled: Enabled units; calendar units are ignored

    Returns:
        Counts for the enabled fixed units
    """
    counts: Dict[UnitKind, int] = {}
    for unit in FIXED_UNITS:
        if unit not in enabled:
            continue
        counts[unit], seconds = divmod(seconds, SECONDS_PER[unit])

    if seconds != 0:
        logger.warning(
            f"Interval was not fully allocated to units: {seconds}s left over"
        )

    return counts
