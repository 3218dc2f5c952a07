"""Percentage unit."""

from .base import Unit


class Percentage(Unit):
    """Represents a percentage, e.g. the export progress."""

    __slots__ = ()
