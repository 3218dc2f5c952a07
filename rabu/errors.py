"""Exceptions raised by rabu.

Each exception also derives from the builtin it refines, so callers may catch
either ``RabuError`` or the familiar builtin.
"""


class RabuError(Exception):
    """Base exception for rabu errors."""

    pass


class BufferIndexError(RabuError, IndexError):
    """Raised when a channel or sample index is outside a buffer's shape."""

    def __init__(self, axis: str, index: int, size: int):
        super().__init__(f"{axis} index {index} out of range for {size} {axis}s")
        self.axis = axis
        self.index = index
        self.size = size


class UnitMismatchError(RabuError, TypeError):
    """Raised when quantities of different units are compared or combined."""

    pass


class UnitUnderflowError(RabuError, OverflowError):
    """Raised when subtraction would make an unsigned quantity negative."""

    pass
