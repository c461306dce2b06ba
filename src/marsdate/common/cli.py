"""Define the command line interface for the ``marsdate`` conversion tool."""

from __future__ import annotations

# Standard Library Imports
import argparse
import os.path

# Local Imports
from ..time.flavours import FLAVOURS, getFlavour
from .logger import marsdateLogError


def fileChecker(filepath):
    """Checks for valid filepaths passed to the CLI parser.

    Args:
        filepath (``str``): filepath given to CLI parser.

    Raises:
        ValueError: if the file does not exist

    Returns:
        ``str``: fully validated, absolute path to the file
    """
    filepath = os.path.abspath(os.path.realpath(os.path.normpath(filepath)))
    if not os.path.isfile(filepath):
        marsdateLogError("Bad filepath given to CLI")
        raise ValueError(filepath)
    return filepath


def getCommandLineParser():
    """Create parser for command line arguments.

    Returns:
        ``argparse.ArgumentParser``: valid parser object
    """
    parser = argparse.ArgumentParser(
        description="Convert between flavours of Mars Sol Date (MSD, JS, CMSD)",
    )
    flavour_group = parser.add_argument_group("Flavours")
    form_group = parser.add_argument_group("Integral forms")
    representation_group = parser.add_mutually_exclusive_group()

    parser.add_argument(
        "value",
        metavar="VALUE",
        type=str,
        help="Fractional day count, or day number with --integral-input",
    )

    parser.add_argument(
        "fraction",
        metavar="FRACTION",
        nargs="?",
        default=None,
        type=str,
        help="Day fraction in [0, 1), only with --integral-input",
    )

    flavour_group.add_argument(
        "-f",
        "--from",
        dest="src",
        metavar="FLAVOUR",
        required=True,
        type=getFlavour,
        help=f"Flavour of VALUE, one of: {', '.join(FLAVOURS)}",
    )

    flavour_group.add_argument(
        "-t",
        "--to",
        dest="dst",
        metavar="FLAVOUR",
        required=True,
        type=getFlavour,
        help=f"Flavour of the result, one of: {', '.join(FLAVOURS)}",
    )

    parser.add_argument(
        "-z",
        "--zone",
        dest="zone",
        metavar="DAYS",
        default=None,
        type=str,
        help="Timezone offset in fractional days, needed between CMSD and MSD/JS",
    )

    form_group.add_argument(
        "-i",
        "--integral-input",
        dest="integral_input",
        action="store_true",
        default=False,
        help="Read VALUE [FRACTION] as a day number and day fraction",
    )

    form_group.add_argument(
        "-n",
        "--integral-output",
        dest="integral_output",
        action="store_true",
        default=False,
        help="Print the result as a day number and day fraction",
    )

    representation_group.add_argument(
        "--exact",
        dest="representation",
        action="store_const",
        const="exact",
        default=None,
        help="Use exact rational arithmetic. DEFAULT: from the behavior config",
    )

    representation_group.add_argument(
        "--float",
        dest="representation",
        action="store_const",
        const="float",
        help="Use floating point arithmetic",
    )

    parser.add_argument(
        "-c",
        "--config",
        dest="config_path",
        metavar="CONFIG_FILE",
        default=None,
        type=fileChecker,
        help="Path to a behavior config file",
    )

    return parser
