"""Unit tests for input normalization."""

from decimal import Decimal

import pytest

from numspeak.errors import NegativeInfinityError, NormalizationError, NotANumberError, PositiveInfinityError
from numspeak.normalize import NormalizedNumber, Sign, normalize

POS, NEG = Sign.POSITIVE, Sign.NEGATIVE


@pytest.mark.parametrize(
    "raw, expected",
    [
        (0, NormalizedNumber(POS, 0)),
        (42, NormalizedNumber(POS, 42)),
        (-7, NormalizedNumber(NEG, 7)),
        (10**40, NormalizedNumber(POS, 10**40)),
        (0.1, NormalizedNumber(POS, 0, (1,))),
        (2.5, NormalizedNumber(POS, 2, (5,))),
        (-0.0, NormalizedNumber(POS, 0)),
        ("-12.50", NormalizedNumber(NEG, 12, (5,))),
        ("  42 ", NormalizedNumber(POS, 42)),
        ("0.05", NormalizedNumber(POS, 0, (0, 5))),
        ("0.000", NormalizedNumber(POS, 0)),
        ("123.4500", NormalizedNumber(POS, 123, (4, 5))),
        ("1e3", NormalizedNumber(POS, 1000)),
        (Decimal("-0"), NormalizedNumber(POS, 0)),
        (Decimal("3.14159"), NormalizedNumber(POS, 3, (1, 4, 1, 5, 9))),
    ],
)
def test_normalize(raw: object, expected: NormalizedNumber) -> None:
    """
    Test that supported inputs normalize to sign, integer part and trimmed fraction.

    Parameters:
        raw (object): Raw input value
        expected (NormalizedNumber): Expected normalized value
    """
    assert normalize(raw) == expected


@pytest.mark.parametrize("raw", [None, True, False, "", "   ", "abc", "1_000", "1.2.3", [1], float("nan"), "NaN"])
def test_not_a_number(raw: object) -> None:
    with pytest.raises(NotANumberError):
        normalize(raw)


@pytest.mark.parametrize(
    "raw, error",
    [
        (float("inf"), PositiveInfinityError),
        (float("-inf"), NegativeInfinityError),
        ("Infinity", PositiveInfinityError),
        ("-inf", NegativeInfinityError),
        (Decimal("-Infinity"), NegativeInfinityError),
    ],
)
def test_infinities(raw: object, error: type[NormalizationError]) -> None:
    with pytest.raises(error):
        normalize(raw)


def test_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        normalize("twelve")


def test_normalized_number_invariants() -> None:
    with pytest.raises(ValueError):
        NormalizedNumber(POS, -1)
    with pytest.raises(ValueError):
        NormalizedNumber(POS, 1, (5, 0))
    with pytest.raises(ValueError):
        NormalizedNumber(POS, 1, (12,))

    assert NormalizedNumber(POS, 0).is_zero
    assert not NormalizedNumber(NEG, 0, (5,)).is_zero
    assert NormalizedNumber(NEG, 0, (5,)).is_negative
