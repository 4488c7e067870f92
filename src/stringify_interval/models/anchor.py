"""Sources for the anchor date that years and months are measured from."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable, Optional

from ..utils.logging import get_logger

logger = get_logger(__name__)


class AnchorSource(ABC):
    """Provides the anchor date for calendar unit calculations."""

    @abstractmethod
    def resolve(self) -> datetime:
        """Return the anchor date."""


class FixedAnchor(AnchorSource):
    """An anchor date known up front."""

    def __init__(self, date: datetime) -> None:
        self.date = date

    def resolve(self) -> datetime:
        return self.date

    def __repr__(self) -> str:
        return f"FixedAnchor({self.date.isoformat()})"


class LazyAnchor(AnchorSource):
    """An anchor date obtained from a zero-argument provider on first use.

    The provider is called at most once; later calls return the cached date.
    """

    def __init__(self, provider: Callable[[], datetime]) -> None:
        self._provider = provider
        self._date: Optional[datetime] = None

    def resolve(self) -> datetime:
        if self._date is None:
            self._date = self._provider()
            logger.trace(  # type: ignore[attr-defined]
                f"Resolved lazy anchor date: {self._date.isoformat()}"
            )
        return self._date

    @property
    def is_resolved(self) -> bool:
        """Whether the provider has already been called."""
        return self._date is not None


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)
