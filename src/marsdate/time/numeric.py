"""Numeric helpers shared by every day count conversion.

Day counts are accepted in two representations:

* exact rationals, :class:`fractions.Fraction` (any :class:`numbers.Rational`), and
* floating point, ``float`` (any other :class:`numbers.Real`, e.g. ``numpy.float64``).

Plain integers belong to neither and combine with both, so ``(-300000, 0.0)`` is a floating point
day pair and ``(-300000, Fraction(1, 8))`` an exact one. Combining exact and floating values in a
single conversion raises :class:`.MixedRepresentationError` because Python would otherwise round
the exact value to a float without warning.

Floating point results are subject to rounding and, for extremely large values, overflow. Neither
is treated as an error. Use :class:`~fractions.Fraction` when exact results matter.
"""

from __future__ import annotations

# Standard Library Imports
import math
from fractions import Fraction
from numbers import Integral, Rational, Real
from typing import NamedTuple

# Third Party Imports
from numpy import floor, isfinite

# Local Imports
from ..common.exceptions import (
    FractionOutOfRangeError,
    MixedRepresentationError,
    NotAnIntegerError,
)
from ..common.logger import marsdateLogError

INTEGRAL = "integral"
"""``str``: tag for integers, which combine with either representation."""
EXACT = "exact"
"""``str``: tag for exact rational values."""
FLOAT = "float"
"""``str``: tag for floating point values."""


class DayPair(NamedTuple):
    """Integral form of a day count.

    Attributes:
        day_number (``Real``): count of complete days since the flavour's epoch.
        day_fraction (``Real``): time of day since midnight, in the range [0, 1).
    """

    day_number: Real
    day_fraction: Real


def representationOf(value: Real) -> str:
    """Classify the numeric representation of a single value.

    Args:
        value (``Real``): day count, day number, day fraction, or zone offset.

    Raises:
        TypeError: if `value` is not a real number.

    Returns:
        ``str``: one of :data:`.INTEGRAL`, :data:`.EXACT`, or :data:`.FLOAT`.
    """
    if isinstance(value, Integral):
        return INTEGRAL
    if isinstance(value, Rational):
        return EXACT
    if isinstance(value, Real):
        return FLOAT

    marsdateLogError(f"Unsupported day count type: {type(value).__name__}")
    raise TypeError(type(value))


def checkRepresentation(*values: Real | None) -> str:
    """Determine the common representation of the operands of one conversion.

    ``None`` entries (omitted optional arguments) are skipped.

    Raises:
        MixedRepresentationError: if exact and floating point operands are combined.

    Returns:
        ``str``: :data:`.EXACT` or :data:`.FLOAT` if any operand has that representation,
        otherwise :data:`.INTEGRAL`.
    """
    found = {representationOf(value) for value in values if value is not None}
    if EXACT in found and FLOAT in found:
        msg = f"Cannot combine exact and floating point day counts: {values!r}"
        marsdateLogError(msg)
        raise MixedRepresentationError(msg)

    for representation in (EXACT, FLOAT):
        if representation in found:
            return representation

    return INTEGRAL


def isExact(value: Real) -> bool:
    """Return whether `value` is free of floating point rounding."""
    return representationOf(value) != FLOAT


def zeroLike(value: Real) -> Real:
    """Return a zero with the same representation as `value`."""
    representation = representationOf(value)
    if representation == EXACT:
        return Fraction(0)
    if representation == FLOAT:
        return type(value)(0)

    return 0


def isIntegral(value: Real) -> bool:
    """Return whether `value` has no fractional part.

    NaN and infinite floats are never integral.
    """
    representation = representationOf(value)
    if representation == INTEGRAL:
        return True
    if representation == EXACT:
        return value.denominator == 1

    return bool(isfinite(value)) and floor(value) == value


def splitDayCount(day_count: Real) -> DayPair:
    """Split a fractional day count into its day number and day fraction.

    The day number is the mathematical floor of `day_count`, so negative counts round towards
    negative infinity: ``-0.25`` splits into ``(-1, 0.75)``.

    Exact values are floored without passing through a float, and the day number keeps the type of
    `day_count` (``Fraction`` stays ``Fraction``, ``int`` stays ``int``). Floating point values are
    floored with :func:`numpy.floor` and keep their float type.

    Args:
        day_count (``Real``): fractional day count in any flavour.

    Returns:
        :class:`.DayPair`: day number and day fraction, with ``0 <= day_fraction < 1``.
    """
    representation = representationOf(day_count)
    if representation == FLOAT:
        day_number = type(day_count)(floor(day_count))
        day_fraction = day_count - day_number
        # A tiny negative count rounds up to a whole day
        if day_fraction >= 1:
            day_number += 1
            day_fraction = type(day_count)(0)

        return DayPair(day_number, day_fraction)

    day_number = math.floor(day_count)
    if representation == EXACT:
        day_number = Fraction(day_number)

    return DayPair(day_number, day_count - day_number)


def checkDayNumber(day_number: Real, day_fraction: Real) -> None:
    """Validate the integral form of a day count.

    Args:
        day_number (``Real``): purported count of complete days.
        day_fraction (``Real``): purported time of day.

    Raises:
        NotAnIntegerError: if `day_number` has a non-zero fractional part.
        FractionOutOfRangeError: if `day_fraction` is outside the range [0, 1).
    """
    if not isIntegral(day_number):
        msg = f"purported day number {day_number!r} is not an integer"
        marsdateLogError(msg)
        raise NotAnIntegerError(msg)

    representationOf(day_fraction)
    if not 0 <= day_fraction < 1:
        msg = f"purported day fraction {day_fraction!r} is out of range [0, 1)"
        marsdateLogError(msg)
        raise FractionOutOfRangeError(msg)


def parseDayValue(text: str, representation: str = EXACT) -> Real:
    """Parse a day count, fraction, or zone offset from a string.

    Args:
        text (``str``): decimal (``"46236.625"``), ratio (``"1/8"``), or exponent (``"1e3"``) form.
        representation (``str``, optional): :data:`.EXACT` to produce a ``Fraction``, or
            :data:`.FLOAT` to produce a ``float``. Defaults to :data:`.EXACT`.

    Raises:
        ValueError: if `text` is not a number in the requested representation.

    Returns:
        ``Real``: the parsed value.
    """
    if representation == EXACT:
        return Fraction(text.strip())
    if representation == FLOAT:
        if "/" in text:
            return float(Fraction(text.strip()))
        return float(text)

    marsdateLogError(f"Unknown numeric representation: {representation!r}")
    raise ValueError(representation)
