"""Strongly typed audio units and buffers.

Units convert into each other explicitly:

    >>> from rabu.units import SampleRate, Samples, Seconds
    >>> Seconds(3.0).to_samples(SampleRate(44100))
    Samples(132300)

Buffers are allocated from units and accessed channel by channel:

    >>> from rabu.buffer import Buffer
    >>> from rabu.units import Channels
    >>> buffer = Buffer.allocate(Channels(2), Samples(4))
    >>> for channel in buffer.iter_chans_mut():
    ...     channel[:] = 1.0
"""

from .buffer import Buffer
from .errors import BufferIndexError, RabuError, UnitMismatchError, UnitUnderflowError
from .formats import AudioFormat
from .units import (
    BitDepth,
    Channels,
    Duration,
    Frequency,
    Latency,
    Percentage,
    SampleRate,
    Samples,
    Seconds,
    TimePoint,
    TimeSection,
)

__all__ = [
    "AudioFormat",
    "BitDepth",
    "Buffer",
    "BufferIndexError",
    "Channels",
    "Duration",
    "Frequency",
    "Latency",
    "Percentage",
    "RabuError",
    "SampleRate",
    "Samples",
    "Seconds",
    "TimePoint",
    "TimeSection",
    "UnitMismatchError",
    "UnitUnderflowError",
]
