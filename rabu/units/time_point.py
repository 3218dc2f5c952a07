"""Points on a timeline and their arithmetic."""

from typing import Any

from ..errors import UnitMismatchError
from .duration import Duration
from .seconds import Seconds, SecondsWrapper


class TimePoint(SecondsWrapper):
    """Represents a point in time, e.g. the start position of a file.

    Supports ``point + offset``, ``point - offset`` and ``point - point``,
    where an offset is a ``Duration`` or ``Seconds``.
    """

    __slots__ = ()

    def __add__(self, other: Any) -> "TimePoint":
        return TimePoint(self._value + _offset(other))

    def __sub__(self, other: Any):
        if isinstance(other, TimePoint):
            return Duration(self._value - other.value)
        return TimePoint(self._value - _offset(other))


def _offset(value: Any) -> float:
    if isinstance(value, (Duration, Seconds)):
        return value.value
    raise UnitMismatchError(
        f"can only offset a TimePoint by Duration or Seconds, got {type(value).__name__}"
    )
