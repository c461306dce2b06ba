"""Defines the :class:`.Flavour` descriptor and the table of built-in Martian day counts.

All calendar dates below are in the Darian calendar for Mars, with an hour number appended after a
"T". A trailing "Z" marks Airy Mean Time (time on the Martian prime meridian).

MSD (Mars Sol Date)
    Days elapsed since 0140-19-26T00Z, approximately MJD 5521.50 in Terrestrial Time. This epoch
    is the most recent near coincidence of midnight on the Martian prime meridian with noon on the
    Terran prime meridian.

JS (Julian Sol)
    Days elapsed since 0000-01-01T00Z (MSD -94129.0), the epoch of the Darian calendar. It is an
    Airy midnight approximating the last northward equinox before the first telescopic
    observations of Mars.

CMSD (Chronological Mars Solar Date)
    Days elapsed since -0608-23-20T00 in the timezone of interest, so
    ``CMSD = MSD + 500000.0 + zone`` where ``zone`` is the timezone offset in fractional days.

A day count is only meaningful for a particular kind of day. Conversion between the time scales
that a day can be measured in is out of scope for this package.
"""

from __future__ import annotations

# Standard Library Imports
from dataclasses import dataclass
from fractions import Fraction
from numbers import Rational
from types import MappingProxyType
from typing import TYPE_CHECKING

# Local Imports
from ..common.exceptions import UnknownFlavourError
from ..common.logger import marsdateLogError

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Mapping


@dataclass(frozen=True)
class Flavour:
    """Descriptor of one linear count of Martian solar days."""

    name: str
    """``str``: lower case name used to build conversion function names, e.g. ``"msd"``."""

    epoch_msd: Fraction
    """``Fraction``: the flavour's epoch expressed as a Mars Sol Date."""

    zone_relative: bool = False
    """``bool``: whether the count is interpreted in a caller-supplied timezone."""

    description: str = ""
    """``str``: human readable name of the flavour."""

    def __post_init__(self):
        """Normalize the name and store the epoch exactly."""
        if not self.name.isidentifier():
            raise ValueError(f"Flavour name must be a valid identifier: {self.name!r}")
        object.__setattr__(self, "name", self.name.lower())
        if not isinstance(self.epoch_msd, Rational):
            # Go through `str` so that `-94129.1` means what it says
            object.__setattr__(self, "epoch_msd", Fraction(str(self.epoch_msd)))
        else:
            object.__setattr__(self, "epoch_msd", Fraction(self.epoch_msd))

    def __str__(self):
        """Return the conventional upper case abbreviation."""
        return self.name.upper()


MSD = Flavour("msd", Fraction(0), description="Mars Sol Date")
JS = Flavour("js", Fraction(-94129), description="Julian Sol")
CMSD = Flavour(
    "cmsd",
    Fraction(-500000),
    zone_relative=True,
    description="Chronological Mars Solar Date",
)

FLAVOURS: Mapping[str, Flavour] = MappingProxyType(
    {flavour.name: flavour for flavour in (MSD, JS, CMSD)},
)
"""``Mapping``: read-only table of the built-in flavours, keyed by name."""


def getFlavour(flavour: Flavour | str) -> Flavour:
    """Resolve a flavour name (case-insensitive) to its :class:`.Flavour`.

    Args:
        flavour (:class:`.Flavour` | ``str``): flavour object, which is returned unchanged, or name.

    Raises:
        UnknownFlavourError: if `flavour` names no built-in flavour.

    Returns:
        :class:`.Flavour`: the matching descriptor.
    """
    if isinstance(flavour, Flavour):
        return flavour

    try:
        return FLAVOURS[str(flavour).lower()]
    except KeyError:
        msg = f"Unknown day count flavour {flavour!r}, expected one of {tuple(FLAVOURS)}"
        marsdateLogError(msg)
        raise UnknownFlavourError(msg) from None
