"""Lengths of time, e.g. of a clip."""

from datetime import timedelta

from .sample_rate import SampleRate
from .samples import Samples
from .seconds import SecondsWrapper


class Duration(SecondsWrapper):
    """Represents a duration in the time domain, e.g. the length of a clip."""

    __slots__ = ()

    def to_samples(self, sample_rate: SampleRate) -> Samples:
        """Convert the duration to samples using the given sample rate."""
        return self.as_seconds().to_samples(sample_rate)

    def to_timedelta(self) -> timedelta:
        return self.as_seconds().to_timedelta()

    @classmethod
    def from_timedelta(cls, value: timedelta) -> "Duration":
        return cls(value.total_seconds())
