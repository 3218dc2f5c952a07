"""Frequencies in Hz and their periods."""

from .base import Additive, Unit, ieee_divide
from .duration import Duration
from .seconds import Seconds


class Frequency(Additive, Unit):
    """Represents a frequency in Hz."""

    __slots__ = ()

    def period(self) -> Duration:
        """Get the duration of one cycle.

        Example:
            >>> Frequency(20.0).period()
            Duration(0.05)
        """
        return Duration(self.period_seconds())

    def period_seconds(self) -> Seconds:
        """Get the duration of one cycle in seconds."""
        return Seconds(ieee_divide(1.0, self._value))
