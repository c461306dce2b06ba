"""Contains all the custom-defined exceptions raised by :mod:`marsdate`."""

from __future__ import annotations


class DayCountError(ValueError):
    """Base exception for malformed day count arguments."""


class NotAnIntegerError(DayCountError):
    """A purported day number has a non-zero fractional part."""


class FractionOutOfRangeError(DayCountError):
    """A purported day fraction lies outside the range [0, 1)."""


class MissingDayFractionError(DayCountError):
    """An integral conversion between differently delimited days was given no day fraction."""


class MissingZoneOffsetError(DayCountError):
    """A conversion across zone-relativeness was given no zone offset."""


class UnknownFlavourError(DayCountError):
    """A flavour name does not match any known day count flavour."""


class MixedRepresentationError(TypeError):
    """Exact rational and floating point values were combined in a single conversion."""
