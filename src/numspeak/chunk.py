"""Render one group value (below 1000, or below 10000 for myriad locales) as words."""

from .profile import Gender, Lexicon, LocaleGrammarProfile, OmitPolicy


def _omits_one(policy: OmitPolicy, first: bool) -> bool:
    return policy is OmitPolicy.ALWAYS or (policy is OmitPolicy.LEADING and first)


def _multiplied(digit: int, word: str, words: Lexicon, policy: OmitPolicy, first: bool) -> list[str]:
    """Digit followed by a power word, e.g. "two hundred", 三千, 십."""
    if digit == 1 and _omits_one(policy, first):
        return [word]
    return [words.attached.get(digit, words.digits[digit]), word]


def _unit(
    digit: int,
    words: Lexicon,
    *,
    tens: int = 0,
    gender: Gender | None = None,
    attached: bool = False,
    year: bool = False,
) -> str:
    for override in words.unit_after_tens:
        if override.digit == digit and tens >= override.min_tens and (year or not override.year_only):
            return override.word
    if attached and digit in words.attached:
        return words.attached[digit]
    if gender is not None and digit in words.gendered.get(gender, {}):
        return words.gendered[gender][digit]
    return words.digits[digit]


def _below_hundred(
    value: int,
    words: Lexicon,
    *,
    first: bool,
    gender: Gender | None,
    attached: bool,
    year: bool,
) -> list[str]:
    if words.below_hundred is not None:
        return [words.below_hundred[value]]
    if value < 10:
        return [_unit(value, words, gender=gender, attached=attached, year=year)]
    if value < 20 and words.teens is not None:
        return [words.teens[value - 10]]

    tens, units = divmod(value, 10)
    if words.tens is not None:
        tens_words = [words.tens[tens]]
    else:
        assert words.ten is not None
        tens_words = _multiplied(tens, words.ten, words, words.omit_one.ten, first)
    if units == 0:
        return tens_words

    if words.units_first_link is not None:
        # German style: "einundzwanzig"
        unit = words.attached.get(units, words.digits[units])
        return [unit, words.units_first_link, *tens_words]

    unit = _unit(units, words, tens=tens, gender=gender, attached=attached, year=year)
    if words.tens_units_joiner is not None:
        return [words.tens_units_joiner.join([*tens_words, unit])]
    return [*tens_words, unit]


def render_chunk(
    value: int,
    profile: LocaleGrammarProfile,
    *,
    gender: Gender | None = None,
    attached: bool = False,
    leading: bool = True,
    include_and: bool = False,
    year: bool = False,
) -> list[str]:
    """
    Render a single group as a list of words.

    Parameters:
        value: Group value, ``0 <= value < profile.chunk_base``
        profile: Grammar profile supplying the word tables
        gender: Gender of the noun the trailing unit agrees with
        attached: The chunk is fused with a following scale word ("eintausend")
        leading: This is the most significant group of the number
        include_and: Insert the locale's conjunction after the hundreds
        year: Apply year-only unit overrides

    Returns:
        list[str]: The words, to be joined with ``profile.joiners.chunk``.
        Zero renders as an empty list.

    Raises:
        ValueError: If ``value`` does not fit in one group

    Examples:
        >>> render_chunk(121, ru, gender=Gender.FEMININE)
        ['сто', 'двадцать', 'одна']
        >>> render_chunk(1010, zh, leading=False)
        ['一', '千', '零', '一', '十']
    """
    if not 0 <= value < profile.chunk_base:
        raise ValueError(f"Chunk value out of range for {profile.code}: {value}")
    words = profile.words
    zero_policy = profile.zero_policy

    thousands, rest = divmod(value, 1000)
    hundreds, below = divmod(rest, 100)

    parts: list[str] = []
    started = False
    skipped = False

    def place(tokens: list[str]) -> None:
        nonlocal started, skipped
        if skipped and zero_policy.gap_filler:
            parts.append(zero_policy.gap_filler)
        parts.extend(tokens)
        started, skipped = True, False

    def skip() -> None:
        nonlocal skipped
        if started:
            skipped = True

    if thousands:
        assert words.thousand is not None
        place(_multiplied(thousands, words.thousand, words, words.omit_one.thousand, leading))
    elif profile.chunk_base > 1000:
        skip()

    if hundreds:
        if words.hundreds is not None:
            place([words.hundreds[hundreds]])
        else:
            assert words.hundred is not None
            first = leading and not started
            place(_multiplied(hundreds, words.hundred, words, words.omit_one.hundred, first))
    elif not leading and below and zero_policy.zero_hundred and profile.chunk_base == 1000:
        # fixed-width reading of an inner group: "không trăm"
        place([zero_policy.zero_hundred])
    else:
        skip()

    if below:
        hundreds_shown = bool(parts)
        if below < 10 and hundreds_shown and zero_policy.zero_tens:
            place([zero_policy.zero_tens])
        elif hundreds_shown and include_and and words.conjunction:
            place([words.conjunction])
        elif below < 10:
            skip()
        first = leading and not started
        place(_below_hundred(below, words, first=first, gender=gender, attached=attached, year=year))

    return parts
