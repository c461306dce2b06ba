"""Conversions between flavours of Mars Sol Date.

Every conversion is a change of epoch, plus a timezone adjustment when exactly one side is
interpreted in a timezone (CMSD). The four generic functions below implement this once for any
pair of :class:`.Flavour` objects:

* :func:`.convert`: fractional count to fractional count.
* :func:`.convertToDayNumber`: fractional count to day number and day fraction.
* :func:`.convertFromDayNumber`: day number and day fraction to fractional count.
* :func:`.convertDayNumber`: day number (and day fraction) to day number and day fraction.

For each ordered pair of built-in flavours a set of named entry points is generated, e.g. for MSD
to CMSD:

.. code-block:: python

    msd_to_cmsd(msd, zone)              # -> cmsd
    msd_to_cmsdn(msd, zone)             # -> cmsdn
    msd_to_cmsdnn(msd, zone)            # -> DayPair(cmsdn, cmsdf)
    msdn_to_cmsd(msdn, msdf, zone)      # -> cmsd
    msdn_to_cmsdn(msdn, msdf, zone)     # -> cmsdn
    msdn_to_cmsdnn(msdn, msdf, zone)    # -> DayPair(cmsdn, cmsdf)

The ``zone`` argument, a timezone offset in fractional days from Airy Mean Time, exists only for
pairs that cross between an absolute count (MSD, JS) and a timezone-relative one (CMSD).

When converting day numbers between flavours whose days begin at different instants, the day
number alone does not determine the result and a representative day fraction is required. Between
flavours that delimit days identically (e.g. MSD and JS) the day fraction defaults to zero.
"""

from __future__ import annotations

# Standard Library Imports
from itertools import product
from typing import TYPE_CHECKING

# Local Imports
from ..common.exceptions import MissingDayFractionError, MissingZoneOffsetError, UnknownFlavourError
from ..common.logger import marsdateLogDebug, marsdateLogError
from .flavours import FLAVOURS, getFlavour
from .numeric import DayPair, checkDayNumber, checkRepresentation, splitDayCount, zeroLike

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Callable
    from numbers import Rational, Real

    # Local Imports
    from .flavours import Flavour


def epochDelta(src: Flavour | str, dst: Flavour | str) -> Rational:
    """Return the constant added to a `src` count to give a `dst` count, ignoring timezones.

    Returns:
        ``int`` | ``Fraction``: exact epoch difference, as an ``int`` when it is a whole number of
        days so that it combines with any representation.
    """
    delta = getFlavour(src).epoch_msd - getFlavour(dst).epoch_msd
    if delta.denominator == 1:
        return int(delta)

    return delta


def crossesZone(src: Flavour | str, dst: Flavour | str) -> bool:
    """Return whether converting `src` to `dst` requires a zone offset."""
    return getFlavour(src).zone_relative != getFlavour(dst).zone_relative


def boundariesAligned(src: Flavour | str, dst: Flavour | str) -> bool:
    """Return whether `src` and `dst` days begin at the same instants.

    That is the case when the epochs differ by a whole number of days and neither or both
    flavours are timezone-relative. Only then does a day number convert without a day fraction.
    """
    return epochDelta(src, dst).denominator == 1 and not crossesZone(src, dst)


def _applyOffset(src: Flavour, dst: Flavour, day_count: Real, zone: Real | None) -> Real:
    """Shift a `src` day count to `dst`, assuming arguments were already checked."""
    delta = epochDelta(src, dst)
    if not crossesZone(src, dst):
        if zone is not None:
            marsdateLogDebug(f"Ignoring zone offset {zone!r} for {src} to {dst} conversion")
        return day_count + delta

    if zone is None:
        msg = f"Converting {src} to {dst} requires a zone offset"
        marsdateLogError(msg)
        raise MissingZoneOffsetError(msg)

    # Timezone-relative counts run ahead of absolute ones by the zone offset
    if dst.zone_relative:
        return day_count + delta + zone

    return day_count + delta - zone


def _usedZone(src: Flavour, dst: Flavour, zone: Real | None) -> Real | None:
    return zone if crossesZone(src, dst) else None


def convert(
    src: Flavour | str,
    dst: Flavour | str,
    day_count: Real,
    zone: Real | None = None,
) -> Real:
    """Convert a fractional day count from one flavour to another.

    Args:
        src (:class:`.Flavour` | ``str``): flavour of `day_count`.
        dst (:class:`.Flavour` | ``str``): flavour of the result.
        day_count (``Real``): point in time, as a fractional `src` day count.
        zone (``Real``, optional): timezone offset in fractional days. Required when exactly one
            of `src` and `dst` is timezone-relative, otherwise ignored.

    Raises:
        MissingZoneOffsetError: if a required `zone` is not given.
        MixedRepresentationError: if exact and floating point arguments are combined.

    Returns:
        ``Real``: the same point in time as a fractional `dst` day count, in the representation
        of the arguments.
    """
    src, dst = getFlavour(src), getFlavour(dst)
    checkRepresentation(day_count, _usedZone(src, dst, zone))

    return _applyOffset(src, dst, day_count, zone)


def convertToDayNumber(
    src: Flavour | str,
    dst: Flavour | str,
    day_count: Real,
    zone: Real | None = None,
) -> DayPair:
    """Convert a fractional day count to the `dst` day number in effect at that instant.

    See Also:
        :func:`.convert` for the arguments and exceptions.

    Returns:
        :class:`.DayPair`: `dst` day number and the day fraction since its midnight.
    """
    return splitDayCount(convert(src, dst, day_count, zone))


def convertFromDayNumber(
    src: Flavour | str,
    dst: Flavour | str,
    day_number: Real,
    day_fraction: Real,
    zone: Real | None = None,
) -> Real:
    """Convert a day number and day fraction to a fractional day count.

    Args:
        src (:class:`.Flavour` | ``str``): flavour of `day_number`.
        dst (:class:`.Flavour` | ``str``): flavour of the result.
        day_number (``Real``): integral `src` day number.
        day_fraction (``Real``): time of day since midnight, in the range [0, 1).
        zone (``Real``, optional): timezone offset in fractional days, see :func:`.convert`.

    Raises:
        NotAnIntegerError: if `day_number` is not an integer.
        FractionOutOfRangeError: if `day_fraction` is outside [0, 1).
        MissingZoneOffsetError: if a required `zone` is not given.
        MixedRepresentationError: if exact and floating point arguments are combined.

    Returns:
        ``Real``: the same point in time as a fractional `dst` day count.
    """
    src, dst = getFlavour(src), getFlavour(dst)
    checkRepresentation(day_number, day_fraction, _usedZone(src, dst, zone))
    checkDayNumber(day_number, day_fraction)

    return _applyOffset(src, dst, day_number + day_fraction, zone)


def convertDayNumber(
    src: Flavour | str,
    dst: Flavour | str,
    day_number: Real,
    day_fraction: Real | None = None,
    zone: Real | None = None,
) -> DayPair:
    """Convert a day number (and day fraction) to a day number of another flavour.

    If `src` and `dst` days begin at different instants, a day fraction is required to identify
    which `dst` day applies. For a conversion covering most of a day, give a representative time
    of day within it.

    Args:
        src (:class:`.Flavour` | ``str``): flavour of `day_number`.
        dst (:class:`.Flavour` | ``str``): flavour of the result.
        day_number (``Real``): integral `src` day number.
        day_fraction (``Real``, optional): time of day since midnight, in the range [0, 1).
            Defaults to zero when :func:`.boundariesAligned` holds, and is required otherwise.
        zone (``Real``, optional): timezone offset in fractional days, see :func:`.convert`.

    Raises:
        MissingDayFractionError: if a required `day_fraction` is not given.

    Returns:
        :class:`.DayPair`: `dst` day number and day fraction.
    """
    if day_fraction is None:
        if not boundariesAligned(src, dst):
            msg = (
                f"Converting {getFlavour(src)} to {getFlavour(dst)} day numbers requires a day "
                "fraction, as their days are delimited differently"
            )
            marsdateLogError(msg)
            raise MissingDayFractionError(msg)
        day_fraction = zeroLike(day_number)

    return splitDayCount(convertFromDayNumber(src, dst, day_number, day_fraction, zone))


def _finish(func: Callable, name: str, summary: str, src: Flavour, dst: Flavour) -> Callable:
    """Give a generated entry point its public name and docstring."""
    func.__name__ = func.__qualname__ = name
    func.__module__ = __name__
    func.__doc__ = f"{summary}\n\nGenerated by :func:`.makeConversions` for {src} to {dst}."
    if crossesZone(src, dst):
        func.__doc__ += "\n\n`zone` is the timezone offset in fractional days."
    return func


def makeConversions(src: Flavour | str, dst: Flavour | str) -> dict[str, Callable]:
    """Build the named entry points converting `src` to `dst`.

    The functions take a ``zone`` argument only when `src` and `dst` differ in
    timezone-relativeness.

    Returns:
        ``dict``: the six conversion functions, keyed by name (e.g. ``"msdn_to_jsnn"``).
    """
    src, dst = getFlavour(src), getFlavour(dst)

    if crossesZone(src, dst):

        def toCount(day_count, zone):
            return convert(src, dst, day_count, zone)

        def toNumber(day_count, zone):
            return convertToDayNumber(src, dst, day_count, zone).day_number

        def toPair(day_count, zone):
            return convertToDayNumber(src, dst, day_count, zone)

        def fromNumber(day_number, day_fraction, zone):
            return convertFromDayNumber(src, dst, day_number, day_fraction, zone)

        def numberToNumber(day_number, day_fraction=None, zone=None):
            return convertDayNumber(src, dst, day_number, day_fraction, zone).day_number

        def numberToPair(day_number, day_fraction=None, zone=None):
            return convertDayNumber(src, dst, day_number, day_fraction, zone)

    else:

        def toCount(day_count):
            return convert(src, dst, day_count)

        def toNumber(day_count):
            return convertToDayNumber(src, dst, day_count).day_number

        def toPair(day_count):
            return convertToDayNumber(src, dst, day_count)

        def fromNumber(day_number, day_fraction):
            return convertFromDayNumber(src, dst, day_number, day_fraction)

        def numberToNumber(day_number, day_fraction=None):
            return convertDayNumber(src, dst, day_number, day_fraction).day_number

        def numberToPair(day_number, day_fraction=None):
            return convertDayNumber(src, dst, day_number, day_fraction)

    forms = (
        (f"{src.name}_to_{dst.name}", toCount, f"Convert {src} to {dst}."),
        (f"{src.name}_to_{dst.name}n", toNumber, f"Convert {src} to {dst}N."),
        (f"{src.name}_to_{dst.name}nn", toPair, f"Convert {src} to ({dst}N, {dst}F)."),
        (f"{src.name}n_to_{dst.name}", fromNumber, f"Convert ({src}N, {src}F) to {dst}."),
        (f"{src.name}n_to_{dst.name}n", numberToNumber, f"Convert {src}N to {dst}N."),
        (f"{src.name}n_to_{dst.name}nn", numberToPair, f"Convert {src}N to ({dst}N, {dst}F)."),
    )

    return {name: _finish(func, name, summary, src, dst) for name, func, summary in forms}


CONVERSIONS: dict[str, Callable] = {}
"""``dict``: every generated conversion function between built-in flavours, keyed by name."""

for _src, _dst in product(FLAVOURS.values(), repeat=2):
    CONVERSIONS.update(makeConversions(_src, _dst))

globals().update(CONVERSIONS)


def getConversion(name: str) -> Callable:
    """Look up a generated conversion function by name, e.g. ``"cmsd_to_jsnn"``.

    Raises:
        UnknownFlavourError: if no conversion has that name.
    """
    try:
        return CONVERSIONS[name.lower()]
    except KeyError:
        msg = f"No conversion function named {name!r}"
        marsdateLogError(msg)
        raise UnknownFlavourError(msg) from None


__all__ = [  # noqa: PLE0604
    "CONVERSIONS",
    "boundariesAligned",
    "convert",
    "convertDayNumber",
    "convertFromDayNumber",
    "convertToDayNumber",
    "crossesZone",
    "epochDelta",
    "getConversion",
    "makeConversions",
    *CONVERSIONS,
]
