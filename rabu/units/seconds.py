"""Durations in seconds and their conversion to sample counts."""

import math
from datetime import timedelta

from .base import Additive, Unit, require_unit
from .sample_rate import SampleRate
from .samples import Samples


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero.

    Python's ``round`` rounds ties to even, which would make ``2.5`` seconds
    at 1 Hz two samples instead of three.
    """
    magnitude = abs(value)
    floor = math.floor(magnitude)
    if magnitude - floor >= 0.5:
        floor += 1
    return -floor if value < 0 else floor


class Seconds(Additive, Unit):
    """Represents seconds in the audio domain."""

    __slots__ = ()

    def to_samples(self, sample_rate: SampleRate) -> Samples:
        """Convert to samples using the given sample rate.

        The product is rounded half away from zero; negative durations
        saturate to zero samples.

        Raises:
            ValueError: If the product is not finite

        Example:
            >>> Seconds(3.0).to_samples(SampleRate(44100))
            Samples(132300)
        """
        require_unit(sample_rate, SampleRate, "sample_rate")
        product = self._value * sample_rate.value
        if not math.isfinite(product):
            raise ValueError(f"Cannot convert {self!r} at {sample_rate!r} to samples")
        return Samples(max(round_half_away_from_zero(product), 0))

    def as_time_point(self) -> "TimePoint":
        """Get this offset as a point on a timeline."""
        from .time_point import TimePoint

        return TimePoint(self)

    def to_timedelta(self) -> timedelta:
        return timedelta(seconds=self._value)

    @classmethod
    def from_timedelta(cls, value: timedelta) -> "Seconds":
        return cls(value.total_seconds())


class SecondsWrapper(Unit):
    """A quantity measured in seconds that keeps its own identity.

    Accepts either a raw float or a ``Seconds`` value.
    """

    __slots__ = ()

    def __init__(self, seconds):
        if isinstance(seconds, Seconds):
            seconds = seconds.value
        super().__init__(seconds)

    @classmethod
    def from_seconds(cls, seconds: float):
        """Create from a raw number of seconds."""
        return cls(seconds)

    def as_seconds(self) -> Seconds:
        return Seconds(self._value)
