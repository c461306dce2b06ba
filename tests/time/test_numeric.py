from __future__ import annotations

# Standard Library Imports
import logging
from fractions import Fraction

# Third Party Imports
import numpy as np
import pytest

# marsdate Imports
from marsdate.common.exceptions import (
    FractionOutOfRangeError,
    MixedRepresentationError,
    NotAnIntegerError,
)
from marsdate.time.numeric import (
    EXACT,
    FLOAT,
    INTEGRAL,
    DayPair,
    checkDayNumber,
    checkRepresentation,
    isExact,
    isIntegral,
    parseDayValue,
    representationOf,
    splitDayCount,
    zeroLike,
)

SPLIT_CASES: list[tuple] = [
    (Fraction(9, 4), Fraction(2), Fraction(1, 4)),
    (Fraction(-1, 4), Fraction(-1), Fraction(3, 4)),
    (Fraction(-7), Fraction(-7), Fraction(0)),
    (7, 7, 0),
    (-7, -7, 0),
    (2.5, 2.0, 0.5),
    (-0.25, -1.0, 0.75),
    (-300000.25, -300001.0, 0.75),
    (2.0, 2.0, 0.0),
]


@pytest.mark.parametrize(("day_count", "day_number", "day_fraction"), SPLIT_CASES)
def testSplitDayCount(day_count, day_number, day_fraction):
    """Test the day number is the floor, never the truncation, of the day count."""
    split = splitDayCount(day_count)
    assert split == (day_number, day_fraction)
    assert isinstance(split, DayPair)
    assert type(split.day_number) is type(day_count)
    assert type(split.day_fraction) is type(day_count)
    assert split.day_number + split.day_fraction == day_count
    assert 0 <= split.day_fraction < 1


def testSplitNumpyFloat():
    """Test numpy floats keep their type when split."""
    split = splitDayCount(np.float32(-2.5))
    assert split == (-3.0, 0.5)
    assert isinstance(split.day_number, np.float32)
    assert isinstance(split.day_fraction, np.float32)


def testSplitTinyNegativeFloat():
    """Test a count just below zero never yields a day fraction of one."""
    day_number, day_fraction = splitDayCount(-1e-20)
    assert 0 <= day_fraction < 1
    assert day_number + day_fraction == pytest.approx(-1e-20)


def testSplitLargeFraction():
    """Test exact values are floored without passing through a float."""
    huge = Fraction(10**30 + 1, 10**12)
    day_number, day_fraction = splitDayCount(huge)
    assert day_number == 10**18
    assert day_fraction == Fraction(1, 10**12)


@pytest.mark.parametrize(
    ("value", "representation"),
    [
        (3, INTEGRAL),
        (np.int64(3), INTEGRAL),
        (True, INTEGRAL),
        (Fraction(1, 3), EXACT),
        (0.5, FLOAT),
        (np.float64(0.5), FLOAT),
    ],
)
def testRepresentationOf(value, representation):
    """Test classification of supported numeric types."""
    assert representationOf(value) == representation


def testRepresentationOfBadType(caplog: pytest.LogCaptureFixture):
    """Test non-real values are rejected and logged."""
    with pytest.raises(TypeError):
        representationOf("12.5")
    with pytest.raises(TypeError):
        representationOf(1 + 2j)

    assert caplog.record_tuples[0][:2] == ("marsdate", logging.ERROR)


def testCheckRepresentation():
    """Test integers combine with either representation but the two never mix."""
    assert checkRepresentation(1, 2) == INTEGRAL
    assert checkRepresentation(1, Fraction(1, 2)) == EXACT
    assert checkRepresentation(1, 0.5, None) == FLOAT
    assert checkRepresentation(Fraction(1, 2), None) == EXACT
    assert checkRepresentation() == INTEGRAL

    with pytest.raises(MixedRepresentationError):
        checkRepresentation(Fraction(1, 2), 0.5)
    with pytest.raises(MixedRepresentationError):
        checkRepresentation(1, np.float64(0.5), Fraction(1, 8))


def testIsExact():
    """Test only floats are inexact."""
    assert isExact(Fraction(1, 3))
    assert isExact(12)
    assert not isExact(1.5)


def testZeroLike():
    """Test zero keeps the representation of its template."""
    assert type(zeroLike(Fraction(5))) is Fraction
    assert type(zeroLike(5.0)) is float
    assert type(zeroLike(np.float32(5.0))) is np.float32
    assert type(zeroLike(5)) is int
    assert zeroLike(-300000.0) == 0


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (5, True),
        (5.0, True),
        (-5.0, True),
        (5.5, False),
        (Fraction(10, 2), True),
        (Fraction(11, 2), False),
        (float("nan"), False),
        (float("inf"), False),
        (np.float64(3.0), True),
    ],
)
def testIsIntegral(value, expected):
    """Test detection of a non-zero fractional part."""
    assert bool(isIntegral(value)) is expected


def testCheckDayNumberValid():
    """Test valid integral day counts pass silently."""
    checkDayNumber(5, 0.2)
    checkDayNumber(5.0, 0.999)
    checkDayNumber(-300000, 0.0)
    checkDayNumber(Fraction(-3), Fraction(7, 8))
    checkDayNumber(np.int64(3), Fraction(1, 2))


@pytest.mark.parametrize(
    "day_number",
    [5.5, Fraction(11, 2), float("nan"), float("inf")],
)
def testCheckDayNumberNotAnInteger(day_number, caplog: pytest.LogCaptureFixture):
    """Test day numbers with a fractional part are rejected."""
    with pytest.raises(NotAnIntegerError, match="is not an integer"):
        checkDayNumber(day_number, 0.2)

    assert caplog.record_tuples[0][:2] == ("marsdate", logging.ERROR)


@pytest.mark.parametrize(
    "day_fraction",
    [1.0, 1, -0.1, Fraction(-1, 3), Fraction(4, 3), float("nan")],
)
def testCheckDayNumberFractionOutOfRange(day_fraction):
    """Test day fractions outside [0, 1) are rejected."""
    with pytest.raises(FractionOutOfRangeError, match="out of range"):
        checkDayNumber(5, day_fraction)


def testCheckDayNumberOrder():
    """Test the day number is validated before the day fraction."""
    with pytest.raises(NotAnIntegerError):
        checkDayNumber(5.5, 1.0)


@pytest.mark.parametrize(
    ("text", "representation", "expected"),
    [
        ("46236.625", EXACT, Fraction(369893, 8)),
        ("1/8", EXACT, Fraction(1, 8)),
        (" -3 ", EXACT, Fraction(-3)),
        ("1e3", EXACT, Fraction(1000)),
        ("46236.625", FLOAT, 46236.625),
        ("1/8", FLOAT, 0.125),
    ],
)
def testParseDayValue(text, representation, expected):
    """Test parsing day counts from strings."""
    value = parseDayValue(text, representation)
    assert value == expected
    assert type(value) is type(expected)


def testParseDayValueErrors():
    """Test bad strings and bad representations are rejected."""
    with pytest.raises(ValueError, match="abc"):
        parseDayValue("abc", EXACT)
    with pytest.raises(ValueError, match="abc"):
        parseDayValue("abc", FLOAT)
    with pytest.raises(ValueError, match="decimal"):
        parseDayValue("1.5", "decimal")
