"""Tests for the multi-channel Buffer."""

import numpy as np
import pytest

from rabu.buffer import Buffer
from rabu.errors import BufferIndexError, UnitMismatchError
from rabu.units import Channels, Samples, Seconds


class TestAllocate:
    """Tests for Buffer.allocate."""

    def test_shape(self):
        """Buffer has the requested channels and samples."""
        buffer = Buffer.allocate(Channels(2), Samples(4))
        assert buffer.num_channels == Channels(2)
        assert buffer.num_samples == Samples(4)
        assert buffer.shape == (2, 4)

    def test_zero_initialized(self):
        """Every sample starts at 0.0."""
        buffer = Buffer.allocate(Channels(2), Samples(4))
        for channel in buffer.iter_chans():
            assert len(channel) == 4
            assert all(sample == 0.0 for sample in channel)
        assert buffer.is_silent()

    def test_default_dtype_is_float32(self):
        """Samples are 32-bit floats by default."""
        buffer = Buffer.allocate(Channels(1), Samples(1))
        assert buffer.dtype == np.float32

    def test_requires_units(self):
        """Raw numbers are rejected."""
        with pytest.raises(UnitMismatchError):
            Buffer.allocate(2, 4)
        with pytest.raises(UnitMismatchError):
            Buffer.allocate(Channels(2), Seconds(4.0))
        with pytest.raises(UnitMismatchError):
            Buffer.allocate(Samples(4), Channels(2))

    def test_zero_channels_allowed(self):
        """An empty buffer is valid and has nothing to iterate."""
        buffer = Buffer.allocate(Channels(0), Samples(4))
        assert list(buffer.iter_chans()) == []

    def test_repr(self):
        """repr shows the shape."""
        buffer = Buffer.allocate(Channels(2), Samples(4))
        assert repr(buffer) == "Buffer(2 channels x 4 samples, float32)"

    def test_direct_construction_rejected(self):
        """allocate is the only way to build a buffer."""
        with pytest.raises(TypeError):
            Buffer(Channels(2), Samples(4))


class TestChannelIteration:
    """Tests for iter_chans and iter_chans_mut."""

    def test_iterates_every_channel(self):
        """One view per channel."""
        buffer = Buffer.allocate(Channels(2), Samples(10))
        assert Channels(len(list(buffer.iter_chans()))) == buffer.num_channels

    def test_restartable(self):
        """A new iteration can be started at any time."""
        buffer = Buffer.allocate(Channels(3), Samples(2))
        assert len(list(buffer.iter_chans())) == 3
        assert len(list(buffer.iter_chans())) == 3

    def test_lazy(self):
        """Views are produced on demand."""
        buffer = Buffer.allocate(Channels(2), Samples(2))
        chans = buffer.iter_chans()
        first = next(chans)
        assert len(first) == 2

    def test_mutation_visible_to_reads(self):
        """Writes through iter_chans_mut are seen by iter_chans."""
        buffer = Buffer.allocate(Channels(2), Samples(4))
        for channel in buffer.iter_chans_mut():
            for index in range(len(channel)):
                channel[index] = 1.0

        for channel in buffer.iter_chans():
            assert all(sample == 1.0 for sample in channel)

    def test_read_views_are_read_only(self):
        """iter_chans views cannot be written."""
        buffer = Buffer.allocate(Channels(2), Samples(4))
        channel = next(buffer.iter_chans())
        with pytest.raises(ValueError):
            channel[0] = 1.0

    def test_channels_do_not_alias(self):
        """Writing one channel leaves the others untouched."""
        buffer = Buffer.allocate(Channels(2), Samples(4))
        views = list(buffer.iter_chans_mut())
        assert not np.shares_memory(views[0], views[1])

        views[0][:] = 1.0
        np.testing.assert_array_equal(buffer.chan(0), np.ones(4))
        np.testing.assert_array_equal(buffer.chan(1), np.zeros(4))


class TestIndexing:
    """Tests for bounds-checked access."""

    def test_get_and_set(self):
        """buffer[channel, sample] reads and writes one sample."""
        buffer = Buffer.allocate(Channels(2), Samples(3))
        buffer[1, 2] = 0.5
        assert buffer[1, 2] == 0.5
        assert buffer.chan(1)[2] == 0.5
        assert buffer[0, 2] == 0.0

    def test_every_out_of_range_pair_raises(self):
        """Any channel or sample outside the shape is rejected."""
        buffer = Buffer.allocate(Channels(2), Samples(4))
        for channel in range(-1, 4):
            for sample in range(-1, 6):
                in_range = 0 <= channel < 2 and 0 <= sample < 4
                if in_range:
                    assert buffer[channel, sample] == 0.0
                    continue
                with pytest.raises(BufferIndexError):
                    buffer[channel, sample]
                with pytest.raises(BufferIndexError):
                    buffer[channel, sample] = 1.0

    def test_error_is_index_error(self):
        """Bounds errors can be caught as IndexError."""
        buffer = Buffer.allocate(Channels(2), Samples(4))
        with pytest.raises(IndexError):
            buffer[2, 0]

    def test_error_details(self):
        """The error names the offending axis and index."""
        buffer = Buffer.allocate(Channels(2), Samples(4))
        with pytest.raises(BufferIndexError) as exc_info:
            buffer[0, 4]
        assert exc_info.value.axis == "sample"
        assert exc_info.value.index == 4
        assert exc_info.value.size == 4

    def test_chan_bounds(self):
        """chan and chan_mut check the channel index."""
        buffer = Buffer.allocate(Channels(2), Samples(4))
        assert len(buffer.chan(0)) == buffer.num_samples.as_int()
        with pytest.raises(BufferIndexError):
            buffer.chan(2)
        with pytest.raises(BufferIndexError):
            buffer.chan_mut(-1)

    def test_key_must_be_pair(self):
        """A single index is not a valid key."""
        buffer = Buffer.allocate(Channels(2), Samples(4))
        with pytest.raises(TypeError):
            buffer[0]

    def test_index_must_be_integer(self):
        """Float indices are rejected."""
        buffer = Buffer.allocate(Channels(2), Samples(4))
        with pytest.raises(TypeError):
            buffer[0, 1.5]

    def test_index_ranges(self):
        """channel_indices and sample_indices cover the shape."""
        buffer = Buffer.allocate(Channels(2), Samples(3))
        assert buffer.channel_indices() == range(2)
        assert buffer.sample_indices() == range(3)


class TestWholeBuffer:
    """Tests for operations over every sample."""

    def test_interleaved(self):
        """Samples come out frame by frame."""
        buffer = Buffer.allocate(Channels(2), Samples(3))
        channel = buffer.chan_mut(0)
        channel[0] = 1.0
        channel[1] = 1.0
        channel[2] = 1.0

        assert list(buffer.iter_interleaved()) == [1.0, 0.0, 1.0, 0.0, 1.0, 0.0]

    def test_map_samples_scalar(self):
        """A constant result fills every sample."""
        buffer = Buffer.allocate(Channels(2), Samples(3))
        buffer.map_samples(lambda _: 0.5)
        assert buffer[1, 2] == 0.5

    def test_map_samples_array(self):
        """An array result replaces the samples."""
        buffer = Buffer.allocate(Channels(2), Samples(3))
        buffer[0, 1] = 0.25
        buffer.map_samples(lambda samples: samples * 2)
        assert buffer[0, 1] == 0.5
        assert buffer[1, 1] == 0.0

    def test_map_samples_per_sample_function(self):
        """A function of one sample is applied through np.vectorize."""
        buffer = Buffer.allocate(Channels(2), Samples(3))
        buffer[1, 2] = 0.25
        buffer.map_samples(np.vectorize(lambda s: 1.0 if s > 0 else 0.0))
        np.testing.assert_array_equal(buffer.chan(1), [0.0, 0.0, 1.0])
        np.testing.assert_array_equal(buffer.chan(0), np.zeros(3))

    def test_zero_out(self):
        """zero_out silences the buffer."""
        buffer = Buffer.allocate(Channels(2), Samples(3))
        buffer[1, 0] = 1.0
        assert not buffer.is_silent()
        buffer.zero_out()
        assert buffer.is_silent()

    def test_data_views(self):
        """data is read-only, data_mut writes through."""
        buffer = Buffer.allocate(Channels(2), Samples(3))
        with pytest.raises(ValueError):
            buffer.data()[0, 0] = 1.0

        buffer.data_mut()[1, 1] = 1.0
        assert buffer[1, 1] == 1.0
        assert buffer.data().shape == (2, 3)
