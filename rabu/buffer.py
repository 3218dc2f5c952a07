"""Multi-channel sample storage.

A ``Buffer`` owns a numpy array of shape ``(channels, samples)``. Each channel
is one row of that array, so channel views never overlap and mutating one
channel can never touch another.
"""

import logging
import operator
from typing import Any, Callable, Iterator

import numpy as np

from . import constants
from .errors import BufferIndexError
from .units import Channels, Samples
from .units.base import require_unit

logger = logging.getLogger(__name__)

_ALLOCATE = object()


class Buffer:
    """Fixed-shape audio buffer with structured channel access.

    Create it with ``Buffer.allocate``, the only constructor; its shape never
    changes afterwards.

    Example:
        >>> buffer = Buffer.allocate(Channels(2), Samples(4))
        >>> for channel in buffer.iter_chans_mut():
        ...     channel[:] = 1.0
        >>> buffer[1, 3]
        1.0
    """

    def __init__(self, num_channels: Channels, num_samples: Samples, *, _token=None):
        if _token is not _ALLOCATE:
            raise TypeError("Buffers are created with Buffer.allocate")
        require_unit(num_channels, Channels, "num_channels")
        require_unit(num_samples, Samples, "num_samples")

        self._num_channels = num_channels
        self._num_samples = num_samples
        self._data = np.zeros(
            (num_channels.as_int(), num_samples.as_int()),
            dtype=constants.SAMPLE_DTYPE,
        )
        logger.debug(
            "Allocated audio buffer",
            extra={
                "channels": num_channels.as_int(),
                "samples": num_samples.as_int(),
                "dtype": str(self._data.dtype),
            },
        )

    @classmethod
    def allocate(cls, num_channels: Channels, num_samples: Samples) -> "Buffer":
        """Allocate a zeroed buffer of ``num_channels`` x ``num_samples``.

        Raises:
            UnitMismatchError: If the arguments are not Channels and Samples
        """
        return cls(num_channels, num_samples, _token=_ALLOCATE)

    def __repr__(self) -> str:
        return "Buffer({} channels x {} samples, {})".format(
            self._num_channels.as_int(),
            self._num_samples.as_int(),
            self._data.dtype,
        )

    @property
    def num_channels(self) -> Channels:
        return self._num_channels

    @property
    def num_samples(self) -> Samples:
        return self._num_samples

    @property
    def shape(self) -> tuple[int, int]:
        """Shape (channels, samples) of the underlying array."""
        return self._data.shape

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def data(self) -> np.ndarray:
        """Get a read-only view of all samples, shaped (channels, samples)."""
        return _read_only(self._data)

    def data_mut(self) -> np.ndarray:
        """Get a writable view of all samples, shaped (channels, samples)."""
        return self._data[...]

    def channel_indices(self) -> range:
        return range(self._num_channels.as_int())

    def sample_indices(self) -> range:
        return range(self._num_samples.as_int())

    def chan(self, index: int) -> np.ndarray:
        """Get a read-only view of one channel.

        Raises:
            BufferIndexError: If the channel does not exist
        """
        return _read_only(self._data[self._channel_index(index)])

    def chan_mut(self, index: int) -> np.ndarray:
        """Get a writable view of one channel.

        Raises:
            BufferIndexError: If the channel does not exist
        """
        return self._data[self._channel_index(index)]

    def iter_chans(self) -> Iterator[np.ndarray]:
        """Iterate over read-only views of each channel, in order."""
        for index in self.channel_indices():
            yield self.chan(index)

    def iter_chans_mut(self) -> Iterator[np.ndarray]:
        """Iterate over writable views of each channel, in order.

        Every view covers exactly one channel's samples.
        """
        for index in self.channel_indices():
            yield self.chan_mut(index)

    def iter_interleaved(self) -> Iterator[float]:
        """Iterate over all samples frame by frame.

        For two channels the order is ``c0[0], c1[0], c0[1], c1[1], ...``.
        """
        for sample in self._data.T.flat:
            yield float(sample)

    def zero_out(self) -> None:
        """Set every sample to zero."""
        self._data.fill(0.0)

    def is_silent(self) -> bool:
        """Check whether every sample is zero."""
        return not np.any(self._data)

    def map_samples(self, func: Callable[[np.ndarray], Any]) -> None:
        """Replace every sample with ``func(samples)``.

        ``func`` receives a read-only (channels, samples) array and returns an
        array or scalar that broadcasts to that shape, e.g. ``lambda s: s * 0.5``.
        It is called once with the whole array, not once per sample, so a
        scalar-only function such as ``lambda s: 1.0 if s > 0 else 0.0`` must be
        wrapped: ``buffer.map_samples(np.vectorize(func))``.
        """
        self._data[...] = func(self.data())

    def __getitem__(self, key: tuple[int, int]) -> float:
        channel, sample = self._position(key)
        return float(self._data[channel, sample])

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        channel, sample = self._position(key)
        self._data[channel, sample] = value

    def _position(self, key: Any) -> tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(
                f"Buffer indices must be a (channel, sample) pair, got {key!r}"
            )
        channel, sample = key
        return self._channel_index(channel), self._sample_index(sample)

    def _channel_index(self, index: Any) -> int:
        return _checked_index(index, self._num_channels.as_int(), "channel")

    def _sample_index(self, index: Any) -> int:
        return _checked_index(index, self._num_samples.as_int(), "sample")


def _checked_index(index: Any, size: int, axis: str) -> int:
    # Negative indices are out of bounds, unlike plain numpy indexing
    index = operator.index(index)
    if not 0 <= index < size:
        raise BufferIndexError(axis, index, size)
    return index


def _read_only(array: np.ndarray) -> np.ndarray:
    view = array.view()
    view.flags.writeable = False
    return view
