"""Configuration and common values for rabu.

Values marked with an environment variable can be overridden before rabu is
imported.
"""

import os

import numpy as np

from .units import Channels, SampleRate


def resolve_sample_dtype(name: str) -> np.dtype:
    """Resolve a buffer sample type name, accepting only floating point types.

    Raises:
        ValueError: If the name is not a numpy dtype or not a float type
    """
    try:
        dtype = np.dtype(name)
    except TypeError as e:
        raise ValueError(f"Unknown sample dtype: {name!r}") from e
    if not np.issubdtype(dtype, np.floating):
        raise ValueError(f"Sample dtype must be floating point, got {dtype}")
    return dtype


# Buffer storage (32-bit float samples unless overridden)
SAMPLE_DTYPE = resolve_sample_dtype(os.getenv("RABU_SAMPLE_DTYPE", "float32"))

# Sample rates
DEFAULT_SAMPLE_RATE = SampleRate(int(os.getenv("RABU_DEFAULT_SAMPLE_RATE", "48000")))
CD_SAMPLE_RATE = SampleRate(44100)
DVD_SAMPLE_RATE = SampleRate(48000)
SPEECH_SAMPLE_RATE = SampleRate(16000)

# Channel layouts
MONO = Channels(1)
STEREO = Channels(2)
