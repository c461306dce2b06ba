"""Main Module Documentation.

Conversions between linear counts of Martian solar days ("sols"): Mars Sol Date (MSD), Julian Sol
(JS), and Chronological Mars Solar Date (CMSD), each in fractional and integral forms. The
conversions themselves live in :mod:`.time`. The top-level module serves as the command line entry
point.
"""

from __future__ import annotations

# Standard Library Imports
from decimal import Decimal, localcontext
from fractions import Fraction
from typing import TYPE_CHECKING

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from numbers import Real

    # Local Imports
    from .time.flavours import Flavour
    from .time.numeric import DayPair

__version__ = "0.1.0"


def formatDayValue(value: Real) -> str:
    """Format a day count for display, without rounding exact values.

    Fractions with a terminating decimal expansion are printed as decimals, other fractions as
    ``numerator/denominator``.
    """
    if not isinstance(value, Fraction):
        return str(value)
    if value.denominator == 1:
        return str(value.numerator)

    denominator, places = value.denominator, 0
    for factor in (2, 5):
        count = 0
        while denominator % factor == 0:
            denominator //= factor
            count += 1
        places = max(places, count)
    if denominator != 1:
        return str(value)

    with localcontext() as ctx:
        ctx.prec = len(str(abs(value.numerator))) + places + 2
        return str(Decimal(value.numerator) / Decimal(value.denominator))


def runConversion(
    value: str,
    src: Flavour | str,
    dst: Flavour | str,
    fraction: str | None = None,
    zone: str | None = None,
    integral_input: bool = False,
    integral_output: bool = False,
    representation: str | None = None,
) -> Real | DayPair:
    """Parse string arguments and run the matching conversion.

    Args:
        value (``str``): fractional day count, or day number if `integral_input`.
        src (:class:`.Flavour` | ``str``): flavour of `value`.
        dst (:class:`.Flavour` | ``str``): flavour of the result.
        fraction (``str``, optional): day fraction accompanying an integral `value`.
        zone (``str``, optional): timezone offset in fractional days.
        integral_input (``bool``, optional): whether `value` is a day number. Defaults to ``False``.
        integral_output (``bool``, optional): whether to return a day number and day fraction.
            Defaults to ``False``.
        representation (``str``, optional): ``"exact"`` or ``"float"``. Defaults to the
            ``numeric.Representation`` config value.

    Returns:
        ``Real`` | :class:`.DayPair`: the converted day count.
    """
    # Local Imports
    from .common.behavioral_config import BehavioralConfig
    from .common.exceptions import MissingDayFractionError
    from .common.logger import marsdateLogError
    from .time.conversions import (
        convert,
        convertDayNumber,
        convertFromDayNumber,
        convertToDayNumber,
    )
    from .time.numeric import parseDayValue

    if representation is None:
        representation = BehavioralConfig.getConfig().numeric.Representation

    def parse(text):
        return None if text is None else parseDayValue(text, representation)

    day_value, day_fraction, zone_offset = parse(value), parse(fraction), parse(zone)

    if not integral_input:
        if fraction is not None:
            marsdateLogError(f"Unexpected day fraction {fraction!r} for a fractional day count")
            raise ValueError(fraction)
        if integral_output:
            return convertToDayNumber(src, dst, day_value, zone_offset)
        return convert(src, dst, day_value, zone_offset)

    if integral_output:
        return convertDayNumber(src, dst, day_value, day_fraction, zone_offset)

    if day_fraction is None:
        msg = "Converting a day number to a fractional day count requires a day fraction"
        marsdateLogError(msg)
        raise MissingDayFractionError(msg)

    return convertFromDayNumber(src, dst, day_value, day_fraction, zone_offset)


def main(argv: list[str] | None = None) -> int:
    """Command line entry point.

    This is the function that the :command:`marsdate` command points to. See :mod:`.cli` for
    details on what command line options are available.

    Returns:
        ``int``: exit status, ``2`` if the arguments could not be converted.
    """
    # Local Imports
    from .common.behavioral_config import BehavioralConfig
    from .common.cli import getCommandLineParser
    from .common.exceptions import DayCountError, MixedRepresentationError
    from .common.logger import Logger

    parser = getCommandLineParser()
    cli_args = parser.parse_args(argv)

    if cli_args.config_path:
        BehavioralConfig.resetConfig()
        BehavioralConfig.getConfig(cli_args.config_path)

    logger = Logger("marsdate")

    try:
        result = runConversion(
            cli_args.value,
            cli_args.src,
            cli_args.dst,
            fraction=cli_args.fraction,
            zone=cli_args.zone,
            integral_input=cli_args.integral_input,
            integral_output=cli_args.integral_output,
            representation=cli_args.representation,
        )
    except (DayCountError, MixedRepresentationError, ValueError) as err:
        logger.error(f"Conversion failed: {err}")
        return 2

    if cli_args.integral_output:
        print(f"{formatDayValue(result.day_number)} {formatDayValue(result.day_fraction)}")
    else:
        print(formatDayValue(result))

    return 0
