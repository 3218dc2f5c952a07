"""Spans of time on a timeline and their overlap."""

from dataclasses import dataclass
from typing import Optional

from .duration import Duration
from .time_point import TimePoint


@dataclass(frozen=True, order=True)
class TimeSection:
    """Represents a span of time, e.g. the span of a clip in an arrangement."""

    start: TimePoint
    duration: Duration

    @classmethod
    def from_bounds(cls, start: TimePoint, end: TimePoint) -> "TimeSection":
        """Create the section running from ``start`` to ``end``."""
        return cls(start=start, duration=end - start)

    def end(self) -> TimePoint:
        """Get the end point of this section."""
        return self.start + self.duration

    def get_overlap(self, other: "TimeSection") -> Optional["TimeSection"]:
        """Get the overlap between this section and another.

        Sections that merely touch do not overlap.

        Returns:
            The overlapping section, or None
        """
        if self.end() <= other.start or other.end() <= self.start:
            return None

        start = max(self.start, other.start)
        end = min(self.end(), other.end())
        return TimeSection(start=start, duration=end - start)
