"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from fractions import Fraction
from pathlib import Path

# Common file paths
FIXTURE_DATA_DIR = Path(__file__).parent / "datafiles"
CUSTOM_CONFIG_FILE = "custom_behavior.config"

# Reference instant, as (MSD, JS, CMSD) with a zone offset of 1/8 sol
REFERENCE_ZONE = Fraction(1, 8)
REFERENCE_INSTANTS: tuple[tuple[Fraction, Fraction, Fraction], ...] = (
    (Fraction("-1000000.25"), Fraction("-905871.25"), Fraction("-500000.125")),
    (Fraction("-300000.25"), Fraction("-205871.25"), Fraction("199999.875")),
)
