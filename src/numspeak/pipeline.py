import re
from typing import assert_never

from .formatters import format_currency, format_decimal, format_year
from .normalize import NormalizedNumber
from .options import Mode, RenderOptions
from .profile import LocaleGrammarProfile

_WHITESPACE = re.compile(r"\s+")


def verbalize(
    value: NormalizedNumber,
    profile: LocaleGrammarProfile,
    options: RenderOptions | None = None,
) -> str:
    """
    Convert a normalized number into words.

    This is the pure core of numspeak: it performs no I/O and holds no state,
    so any number of calls may share one profile.

    Parameters:
        value: The number, as produced by :func:`numspeak.normalize`
        profile: Grammar profile of the target locale
        options: Rendering mode and overrides; defaults to plain cardinal reading

    Returns:
        str: The spoken form

    Raises:
        ScaleLadderError: If the number is too large for the profile's scale ladder
        UnsupportedOptionError: If the options name a currency or variant the locale lacks

    Examples:
        >>> verbalize(normalize(-5), lookup("en"))
        'minus five'
        >>> verbalize(normalize(1900), lookup("en"), RenderOptions(mode="year"))
        'nineteen hundred'
    """
    options = options or RenderOptions()
    if options.zero_tens is not None:
        profile = profile.with_zero_tens(options.zero_tens)

    match options.mode:
        case Mode.YEAR:
            return _collapse(format_year(value, profile, options))
        case Mode.CURRENCY:
            text = format_currency(value, profile, options)
        case Mode.PLAIN | Mode.DECIMAL:
            text = format_decimal(value, profile, options)
        case _:
            assert_never(options.mode)

    if value.is_negative:
        prefix = profile.negative_prefix if options.negative_prefix is None else options.negative_prefix
        text = f"{prefix}{profile.joiners.negative}{text}"
    return _collapse(text)


def _collapse(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()
