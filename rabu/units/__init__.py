"""Strongly typed units and quantities for audio.

Each quantity has its own type with the conversions that make sense for it.
For example a ``Seconds`` value converts to ``Samples`` when given a
``SampleRate``.
"""

from .bit_depth import BitDepth
from .channels import Channels
from .duration import Duration
from .frequency import Frequency
from .latency import Latency
from .percentage import Percentage
from .sample_rate import SampleRate
from .samples import Samples
from .seconds import Seconds
from .time_point import TimePoint
from .time_section import TimeSection

__all__ = [
    "BitDepth",
    "Channels",
    "Duration",
    "Frequency",
    "Latency",
    "Percentage",
    "SampleRate",
    "Samples",
    "Seconds",
    "TimePoint",
    "TimeSection",
]
