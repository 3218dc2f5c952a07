"""Audio format description tying rate, channel count and bit depth together."""

import logging
from typing import Union

from pydantic import BaseModel, ConfigDict

from .buffer import Buffer
from .constants import (
    CD_SAMPLE_RATE,
    DEFAULT_SAMPLE_RATE,
    DVD_SAMPLE_RATE,
    MONO,
    SPEECH_SAMPLE_RATE,
    STEREO,
)
from .errors import UnitMismatchError
from .units import BitDepth, Channels, Duration, SampleRate, Samples, Seconds

logger = logging.getLogger(__name__)


class AudioFormat(BaseModel):
    """Immutable audio format.

    Units validate from raw numbers, so a format can be loaded straight from
    JSON such as ``{"sample_rate": 44100, "channels": 2, "bit_depth": 16}``.
    """

    model_config = ConfigDict(frozen=True)

    sample_rate: SampleRate = DEFAULT_SAMPLE_RATE
    channels: Channels = STEREO
    bit_depth: BitDepth = BitDepth.BITS_16

    def bytes_per_frame(self) -> int:
        """Bytes taken by one sample of every channel in integer PCM."""
        return self.channels.as_int() * self.bit_depth.bytes_per_sample

    def duration_of(self, samples: Samples) -> Seconds:
        """Get how long ``samples`` last at this format's sample rate."""
        return samples.to_seconds(self.sample_rate)

    def samples_in(self, duration: Union[Seconds, Duration]) -> Samples:
        """Get how many samples per channel fit in ``duration``."""
        if not isinstance(duration, (Seconds, Duration)):
            raise UnitMismatchError(
                f"duration must be Seconds or Duration, got {type(duration).__name__}"
            )
        return duration.to_samples(self.sample_rate)

    def allocate(self, duration: Union[Seconds, Duration]) -> Buffer:
        """Allocate a zeroed buffer holding ``duration`` of audio in this format."""
        num_samples = self.samples_in(duration)
        logger.debug(
            "Allocating buffer for audio format",
            extra={
                "sample_rate": self.sample_rate.as_int(),
                "channels": self.channels.as_int(),
                "seconds": duration.as_float(),
            },
        )
        return Buffer.allocate(self.channels, num_samples)


# Common formats
CD_QUALITY = AudioFormat(
    sample_rate=CD_SAMPLE_RATE, channels=STEREO, bit_depth=BitDepth.BITS_16
)
DVD_QUALITY = AudioFormat(
    sample_rate=DVD_SAMPLE_RATE, channels=STEREO, bit_depth=BitDepth.BITS_24
)
SPEECH_MONO = AudioFormat(
    sample_rate=SPEECH_SAMPLE_RATE, channels=MONO, bit_depth=BitDepth.BITS_16
)
