"""Half-open time ranges and time directions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass
class TimeRange:
    """A monotonic time range [begin, end); the default is a null range."""

    begin: float = 0.0
    end: float = 0.0

    def __post_init__(self) -> None:
        if self.begin > self.end:
            raise ValueError("Invalid Time Range")

    @property
    def rbegin(self) -> float:
        return self.end

    @property
    def rend(self) -> float:
        return self.begin

    def mid(self) -> float:
        return 0.5 * (self.begin + self.end)

    def range(self) -> float:
        return self.end - self.begin

    def in_range(self, t: float) -> bool:
        return self.begin <= t < self.end

    def is_null(self) -> bool:
        return self.end == self.begin

    def overlaps(self, other: TimeRange) -> bool:
        return self.end > other.begin or self.begin < other.end

    def contains(self, other: TimeRange) -> bool:
        return self.begin <= other.begin and self.end >= other.end

    def force_range(self, time: float) -> float:
        """Return the time clamped into this range."""
        return min(max(time, self.begin), self.end)

    def combine(self, other: TimeRange) -> None:
        """Extend this range to cover the other one as well."""
        self.begin = min(self.begin, other.begin)
        self.end = max(self.end, other.end)

    def __str__(self) -> str:
        return f" Range [{self.begin:g},{self.end:g}]"


class TimeDir(Enum):
    """Direction of time: forwards is increasing, backwards decreasing."""

    forwards = 0
    backwards = 1
    end = 2

    def next(self) -> TimeDir:
        """Return the following direction; stepping past the end raises."""
        if self is TimeDir.end:
            raise IndexError("TimeDir has no direction after end")
        return TimeDir(self.value + 1)

    def __str__(self) -> str:
        if self is TimeDir.forwards:
            return "forwards"
        if self is TimeDir.backwards:
            return "backwards"
        return "Unknown"