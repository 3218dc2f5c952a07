"""Sample counts and their conversion to seconds."""

import logging

from .base import Additive, IntegerUnit, ieee_divide, require_unit
from .sample_rate import SampleRate

logger = logging.getLogger(__name__)


class Samples(Additive, IntegerUnit):
    """Represents a number of samples in the audio domain."""

    __slots__ = ()

    _unsigned = True

    def to_seconds(self, sample_rate: SampleRate) -> "Seconds":
        """Convert to seconds using the given sample rate.

        A zero sample rate is not an error: the result follows float
        semantics and is ``inf`` (or ``nan`` for zero samples).

        Example:
            >>> Samples(1000).to_seconds(SampleRate(10))
            Seconds(100.0)
        """
        from .seconds import Seconds

        require_unit(sample_rate, SampleRate, "sample_rate")
        if sample_rate.value == 0:
            logger.debug(
                "Converting samples with a zero sample rate",
                extra={"samples": self._value},
            )
        return Seconds(ieee_divide(float(self._value), float(sample_rate.value)))
