"""Step-function lookup from integer keys to values."""

from bisect import bisect_left, bisect_right
from typing import Generic, Iterable, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class ThresholdMap(Generic[T]):
    """Map that stores values and the thresholds at which they start to apply.

    A map holds N strictly increasing thresholds and N + 1 values. The first
    value is the baseline used for every key below the first threshold; each
    following value applies from its threshold (inclusive) up to the next one.

    Example:
        >>> labels = ThresholdMap.from_iter("days", [(1, "day"), (2, "days")])
        >>> labels.get(0), labels.get(1), labels.get(5)
        ('days', 'day', 'days')
    """

    def __init__(self, lowest_value: T) -> None:
        """Create a map holding only a baseline value.

        Args:
            lowest_value: Value returned for keys below every threshold
        """
        self._thresholds: List[int] = []
        self._values: List[T] = [lowest_value]

    @classmethod
    def single_value(cls, value: T) -> "ThresholdMap[T]":
        """Create a map that returns the same value for every key."""
        return cls(value)

    @classmethod
    def from_iter(
        cls, lowest_value: T, pairs: Iterable[Tuple[int, T]]
    ) -> Optional["ThresholdMap[T]"]:
        """Build a map from (threshold, value) pairs in increasing order.

        Args:
            lowest_value: Value for keys below the first threshold
            pairs: Thresholds and the values applying at or above them

        Returns:
            The map, or None if a threshold was not larger than the one
            before it
        """
        threshold_map = cls(lowest_value)
        for threshold, value in pairs:
            if not threshold_map.push(threshold, value):
                return None
        return threshold_map

    def push(self, threshold: int, value: T) -> bool:
        """Append a threshold larger than every existing one.

        Returns:
            Whether the pair was added; the map is unchanged on failure
        """
        if self._thresholds and self._thresholds[-1] >= threshold:
            return False
        self._thresholds.append(threshold)
        self._values.append(value)
        return True

    def insert(self, threshold: int, value: T) -> bool:
        """Insert a threshold anywhere in the map.

        Returns:
            Whether the pair was added; fails if the threshold already exists
        """
        index = bisect_left(self._thresholds, threshold)
        if index < len(self._thresholds) and self._thresholds[index] == threshold:
            return False
        self._thresholds.insert(index, threshold)
        self._values.insert(index + 1, value)
        return True

    def get(self, key: int) -> T:
        """Return the value of the greatest threshold <= key, else the baseline."""
        return self._values[bisect_right(self._thresholds, key)]

    @property
    def thresholds(self) -> Tuple[int, ...]:
        """Thresholds in increasing order."""
        return tuple(self._thresholds)

    @property
    def values(self) -> Tuple[T, ...]:
        """Baseline value followed by one value per threshold."""
        return tuple(self._values)

    def __len__(self) -> int:
        return len(self._thresholds)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ThresholdMap):
            return NotImplemented
        return self._thresholds == other._thresholds and self._values == other._values

    def __repr__(self) -> str:
        pairs = ", ".join(
            f"{threshold}: {value!r}"
            for threshold, value in zip(self._thresholds, self._values[1:])
        )
        return f"ThresholdMap({self._values[0]!r}, {{{pairs}}})"
