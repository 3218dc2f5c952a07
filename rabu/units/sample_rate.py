"""Sample rate unit."""

from .base import IntegerUnit


class SampleRate(IntegerUnit):
    """Represents a sample rate (in Hz).

    Stored as an integer; a float argument is truncated, like a numeric cast.
    """

    __slots__ = ()
