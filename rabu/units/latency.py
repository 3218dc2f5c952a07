"""Latency unit."""

from .seconds import SecondsWrapper


class Latency(SecondsWrapper):
    """Represents a latency in the audio domain."""

    __slots__ = ()
