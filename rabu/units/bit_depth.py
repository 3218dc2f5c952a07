"""Bit depths of integer PCM samples."""

from enum import IntEnum


class BitDepth(IntEnum):
    """Bit depth of integer PCM samples."""

    BITS_8 = 8
    BITS_16 = 16
    BITS_24 = 24
    BITS_32 = 32

    def to_int(self) -> int:
        """Get the number of bits."""
        return int(self.value)

    @property
    def bytes_per_sample(self) -> int:
        return self.value // 8
