"""Channel count unit."""

from .base import Additive, IntegerUnit


class Channels(Additive, IntegerUnit):
    """Represents a number of audio channels."""

    __slots__ = ()

    _unsigned = True
