"""
Closed integer intervals.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Range:
    """
    The closed interval [min, max] of integers.

    A range whose min is greater than its max is empty. Empty ranges are
    valid values: they result from intersections, gaps and shrinking.
    """

    min: int
    max: int

    @classmethod
    def closed(cls, lower: int, upper: int) -> Range:
        return cls(lower, upper)

    @classmethod
    def closed_open(cls, lower: int, upper: int) -> Range:
        """The range [lower, upper), as in Python's range()."""
        return cls(lower, upper - 1)

    @classmethod
    def bound(cls, values: Iterable[int]) -> Range:
        """The smallest range containing all the given values."""
        values = list(values)
        if not values:
            raise ValueError("Cannot bound an empty collection of values")
        return cls(min(values), max(values))

    def __str__(self) -> str:
        return f"[{self.min}..{self.max}]"

    # ==============================================================
    # Size and membership
    # ==============================================================

    @property
    def size(self) -> int:
        return max(self.max - self.min + 1, 0)

    def __len__(self) -> int:
        return self.size

    def is_empty(self) -> bool:
        return self.min > self.max

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.contains(value)

    def contains_all(self, other: Range | Iterable[int]) -> bool:
        """Whether a range, or every value of an iterable, lies inside this range."""
        if isinstance(other, Range):
            return other.is_empty() or (self.min <= other.min and other.max <= self.max)
        return all(self.contains(value) for value in other)

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.min, self.max + 1))

    # ==============================================================
    # Set-like operations
    # ==============================================================

    def overlaps(self, other: Range) -> bool:
        return not self.intersection(other).is_empty()

    def intersection(self, other: Range) -> Range:
        return Range(max(self.min, other.min), min(self.max, other.max))

    def span(self, other: Range) -> Range:
        """The smallest range containing both ranges."""
        return Range(min(self.min, other.min), max(self.max, other.max))

    def gap(self, other: Range) -> Range:
        """
        The values strictly between two non-overlapping ranges.

        Adjacent ranges yield an empty range.
        """
        if self.overlaps(other):
            raise ValueError(f"Overlapping ranges: {self} and {other}")
        return Range(min(self.max, other.max) + 1, max(self.min, other.min) - 1)

    def shift(self, delta: int) -> Range:
        return Range(self.min + delta, self.max + delta)

    def extend(self, lower: int, upper: int | None = None) -> Range:
        """
        Grow the range by `lower` below and `upper` above.

        With a single argument both ends move by the same amount. Negative
        amounts shrink the range.
        """
        if upper is None:
            upper = lower
        return Range(self.min - lower, self.max + upper)
