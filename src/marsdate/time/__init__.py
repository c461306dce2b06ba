"""Contains the flavours of Martian day count and the conversions between them.

Day counts come in a fractional form (e.g. MSD) and an integral form, a day number (MSDN) plus a
day fraction (MSDF) in the range [0, 1). The day fraction is the time of day since midnight.
"""

from __future__ import annotations

# Local Imports
from .conversions import (
    CONVERSIONS,
    boundariesAligned,
    convert,
    convertDayNumber,
    convertFromDayNumber,
    convertToDayNumber,
    crossesZone,
    epochDelta,
    getConversion,
    makeConversions,
)
from .flavours import CMSD, FLAVOURS, JS, MSD, Flavour, getFlavour
from .numeric import DayPair, checkDayNumber, splitDayCount

globals().update(CONVERSIONS)

__all__ = [  # noqa: PLE0604
    "CMSD",
    "CONVERSIONS",
    "FLAVOURS",
    "JS",
    "MSD",
    "DayPair",
    "Flavour",
    "boundariesAligned",
    "checkDayNumber",
    "convert",
    "convertDayNumber",
    "convertFromDayNumber",
    "convertToDayNumber",
    "crossesZone",
    "epochDelta",
    "getConversion",
    "getFlavour",
    "makeConversions",
    "splitDayCount",
    *CONVERSIONS,
]
