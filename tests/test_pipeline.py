"""Unit tests for the verbalize entry point."""

# ruff: noqa: RUF001
from decimal import Decimal

import pytest

from numspeak.errors import ScaleLadderError, UnsupportedOptionError
from numspeak.normalize import NormalizedNumber, Sign, normalize
from numspeak.options import Mode, RenderOptions
from numspeak.pipeline import verbalize
from numspeak.profile import LocaleGrammarProfile
from numspeak.registry import lookup


@pytest.fixture
def en() -> LocaleGrammarProfile:
    return lookup("en")


def test_default_options_read_a_cardinal(en: LocaleGrammarProfile) -> None:
    assert verbalize(normalize(1234), en) == "one thousand two hundred thirty-four"


def test_negative_prefix(en: LocaleGrammarProfile) -> None:
    assert verbalize(normalize(-5), en) == "minus five"
    assert verbalize(normalize(-5), en, RenderOptions(negative_prefix="negative")) == "negative five"


def test_negative_zero_has_no_prefix(en: LocaleGrammarProfile) -> None:
    assert verbalize(normalize("-0.0"), en) == "zero"


def test_no_joiner_before_negative_in_cjk() -> None:
    assert verbalize(normalize(-5), lookup("zh")) == "负五"
    assert verbalize(normalize(-3), lookup("ja")) == "マイナス三"


def test_output_has_no_stray_whitespace(en: LocaleGrammarProfile) -> None:
    result = verbalize(normalize(1000001), en)
    assert result == "one million one"
    assert "  " not in result
    assert result == result.strip()


def test_huge_numbers_are_exact(en: LocaleGrammarProfile) -> None:
    value = NormalizedNumber(Sign.POSITIVE, 10**24 - 1)
    assert verbalize(value, en) == (
        "nine hundred ninety-nine sextillion nine hundred ninety-nine quintillion "
        "nine hundred ninety-nine quadrillion nine hundred ninety-nine trillion "
        "nine hundred ninety-nine billion nine hundred ninety-nine million "
        "nine hundred ninety-nine thousand nine hundred ninety-nine"
    )
    below_sextillion = verbalize(NormalizedNumber(Sign.POSITIVE, 10**21 - 1), en)
    assert below_sextillion.startswith("nine hundred ninety-nine quintillion ")
    assert verbalize(normalize(Decimal("1E+30")), en) == "one nonillion"


def test_too_large_for_the_ladder(en: LocaleGrammarProfile) -> None:
    with pytest.raises(ScaleLadderError):
        verbalize(normalize(10**36), en)


def test_verbalize_is_deterministic(en: LocaleGrammarProfile) -> None:
    """
    Test that the same inputs always give the same output.

    A profile is shared across calls, so nothing may leak from one call into the next.
    """
    options = RenderOptions(mode=Mode.CURRENCY)
    first = [verbalize(normalize(n), en, options) for n in ("1.01", "0", "12.5")]
    second = [verbalize(normalize(n), en, options) for n in ("1.01", "0", "12.5")]
    assert first == second


@pytest.mark.parametrize(
    "n, zero_tens, expected",
    [
        (101, None, "một trăm linh một"),
        (101, "le", "một trăm lẻ một"),
        (101, "linh", "một trăm linh một"),
        (1005, "le", "một nghìn không trăm lẻ năm"),
        (110, "le", "một trăm mười"),
    ],
)
def test_zero_tens_variant(n: int, zero_tens: str | None, expected: str) -> None:
    """
    Test the alternate Vietnamese word for an empty tens place.

    Parameters:
        n (int): Number to read
        zero_tens (str | None): Name of the alternate word, or None for the locale default
        expected (str): Expected reading
    """
    assert verbalize(normalize(n), lookup("vi"), RenderOptions(zero_tens=zero_tens)) == expected


def test_zero_tens_variant_leaves_the_shared_profile_alone() -> None:
    vi = lookup("vi")
    verbalize(normalize(101), vi, RenderOptions(zero_tens="le"))
    assert vi.zero_policy.zero_tens == "linh"
    assert verbalize(normalize(101), vi) == "một trăm linh một"


def test_unknown_zero_tens_variant(en: LocaleGrammarProfile) -> None:
    with pytest.raises(UnsupportedOptionError) as exc_info:
        verbalize(normalize(101), en, RenderOptions(zero_tens="le"))
    assert exc_info.value.option == "zero-tens variant"
    assert exc_info.value.available == []
