"""
Mode formatters.

Each formatter takes the normalized value, the locale profile and the render
options and returns the phrase for its mode. The decimal formatter also serves
plain mode. Only the year formatter looks at the sign; the pipeline prefixes
the negative word for the others.
"""

from loguru import logger

from .agreement import agree
from .compose import spell_integer
from .normalize import NormalizedNumber
from .options import RenderOptions
from .profile import CurrencyRule, CurrencyUnit, EraMarker, EraPosition, HundredStyle, LocaleGrammarProfile, ZeroMinor


def format_decimal(value: NormalizedNumber, profile: LocaleGrammarProfile, options: RenderOptions) -> str:
    """
    Read the integer part as a cardinal and the fraction digit by digit.

    Examples:
        >>> format_decimal(normalize("2.5"), en, RenderOptions())
        'two point five'
        >>> format_decimal(normalize("1.5"), ru, RenderOptions(decimal_separator="point"))
        'один точка пять'
    """
    integer = spell_integer(
        value.integer_digits,
        profile,
        gender=options.gender,
        include_and=options.include_and,
    )
    if not value.fractional_digits:
        return integer

    rule = profile.decimal
    digits = rule.joiner.join(rule.digits.get(d, profile.words.digits[d]) for d in value.fractional_digits)
    return f"{integer}{rule.glue}{rule.separator(options.decimal_separator)}{rule.glue}{digits}"


def _split_year(year: int, profile: LocaleGrammarProfile, options: RenderOptions) -> str | None:
    """Century reading ("nineteen eighty-four") when a split range covers ``year``."""
    for split in profile.year.splits:
        if not split.covers(year):
            continue
        high, low = divmod(year, 100)
        words = profile.words
        parts = [spell_integer(high, profile, year=True)]
        if split.hundred is HundredStyle.ALWAYS or (split.hundred is HundredStyle.BELOW_TEN and low < 10):
            parts.append(words.hundred or "")
            if low and options.include_and and words.conjunction and split.hundred is HundredStyle.BELOW_TEN:
                parts.append(words.conjunction)
        if low:
            parts.append(spell_integer(low, profile, year=True))
        return profile.joiners.chunk.join(parts)
    return None


def _ordinal(cardinal: str, table: dict[str, str]) -> str:
    head, _, last = cardinal.rpartition(" ")
    if last not in table:
        logger.debug("No ordinal form for {!r}, keeping the cardinal", last)
        return cardinal
    return f"{head} {table[last]}" if head else table[last]


def _with_era(text: str, marker: EraMarker | None, joiner: str) -> str:
    if marker is None:
        return text
    if marker.position is EraPosition.PREFIX:
        return f"{marker.text}{joiner}{text}"
    return f"{text}{joiner}{marker.text}"


def format_year(value: NormalizedNumber, profile: LocaleGrammarProfile, options: RenderOptions) -> str:
    """
    Read a calendar year.

    Only the integer part is used; a fraction is dropped. Negative years carry
    the locale's BC marker instead of the minus word, positive years carry the
    AD marker when ``options.include_era`` is set.
    """
    rule = profile.year
    year = value.integer_digits
    if value.fractional_digits:
        logger.debug("Year mode ignores the fractional part of {}", value)

    if year == 0:
        return profile.words.zero

    if rule.digit_by_digit:
        text = profile.joiners.chunk.join(profile.words.digits[int(d)] for d in str(year))
    else:
        text = _split_year(year, profile, options) or spell_integer(
            year,
            profile,
            omit_leading_one=rule.omit_leading_one,
            include_and=options.include_and,
            year=True,
        )
    if rule.ordinal:
        text = _ordinal(text, rule.ordinal)
    if rule.suffix:
        text = f"{text}{profile.joiners.chunk}{rule.suffix}"

    if value.is_negative:
        return _with_era(text, rule.bc, rule.era_joiner)
    if options.include_era:
        return _with_era(text, rule.ad, rule.era_joiner)
    return text


def _amount(count: int, unit: CurrencyUnit, rule: CurrencyRule, profile: LocaleGrammarProfile) -> str:
    agreement = agree(count, profile.count_scheme, unit.gender)
    words = spell_integer(count, profile, gender=agreement.gender)
    return f"{words}{rule.unit_joiner}{unit.forms.pick(agreement.count_class)}"


def _split_amount(value: NormalizedNumber, places: int, round_half_up: bool) -> tuple[int, int]:
    """Major and minor amounts, rounded half-up or truncated to ``places`` digits."""
    digits = value.fractional_digits
    kept = digits[:places] + (0,) * max(0, places - len(digits))
    minor = int("".join(map(str, kept)) or "0")
    major = value.integer_digits
    if round_half_up and len(digits) > places and digits[places] >= 5:
        minor += 1
        if minor == 10**places:
            major, minor = major + 1, 0
    return major, minor


def format_currency(value: NormalizedNumber, profile: LocaleGrammarProfile, options: RenderOptions) -> str:
    """
    Read an amount of money in the locale's currency, or in the one ``options.currency`` names.

    Examples:
        >>> format_currency(normalize("1.01"), en, RenderOptions(mode="currency"))
        'one dollar and one cent'
        >>> format_currency(normalize("2.5"), zh, RenderOptions(mode="currency"))
        '二元五角'
        >>> format_currency(normalize("1.5"), en, RenderOptions(mode="currency", currency="EUR"))
        'one euro and fifty cents'
    """
    rule = profile.currency_for(options.currency)
    places = rule.minor_places
    # currencies without a minor unit drop the fraction
    major, minor = _split_amount(value, places, options.round_currency and places > 0)

    show_major = major > 0 or minor == 0 or not rule.omit_zero_major
    show_minor = places > 0 and (
        minor > 0 or rule.zero_minor is ZeroMinor.ALWAYS or (rule.zero_minor is ZeroMinor.ZERO_TOTAL and major == 0)
    )

    parts: list[str] = []
    if show_major:
        parts.append(_amount(major, rule.major, rule, profile))
    if show_minor:
        if rule.minor_tiers:
            minor_text = _tiered_minor(minor, rule, profile, after_major=show_major)
        else:
            assert rule.minor is not None
            minor_text = _amount(minor, rule.minor, rule, profile)
        if parts and rule.separator:
            parts.append(rule.separator)
        parts.append(minor_text)
    elif places and rule.whole_marker:
        parts.append(rule.whole_marker)
    return rule.joiner.join(parts)


def _tiered_minor(minor: int, rule: CurrencyRule, profile: LocaleGrammarProfile, *, after_major: bool) -> str:
    """Minor amount split across tiers such as 角 and 分, with 零 for a skipped tier."""
    filler = profile.zero_policy.gap_filler
    parts: list[str] = []
    skipped = False
    remaining = minor
    for tier in rule.minor_tiers:
        count, remaining = divmod(remaining, tier.value)
        if count == 0:
            skipped = skipped or bool(parts) or after_major
            continue
        if skipped and filler:
            parts.append(filler)
        parts.append(f"{spell_integer(count, profile)}{rule.unit_joiner}{tier.word}")
        skipped = False
    if not parts:
        return f"{profile.words.zero}{rule.unit_joiner}{rule.minor_tiers[-1].word}"
    return rule.joiner.join(parts)
