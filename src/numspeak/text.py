import re
from typing import Any

from .converter import NumberVerbalizer

# digit runs with an optional decimal part, not glued to letters or other digits
NUMBER_PATTERN = re.compile(r"(?<![\w.])(?<!\d,)\d+(?:\.\d+)?(?!\w|[.,]\d)")


def verbalize_numbers(text: str, locale: str = "en", **options: Any) -> str:
    """
    Replace every standalone number in ``text`` with its spoken form.

    Useful as a text-to-speech preprocessing step. Anything that is not a plain
    digit run (``3.14`` counts, ``v2`` and ``1,000`` do not) is left untouched.

    Parameters:
        text: Input text
        locale: Locale code of the output
        **options: Fields of :class:`numspeak.RenderOptions`

    Returns:
        str: ``text`` with its numbers spelled out

    Examples:
        >>> verbalize_numbers("I have 3 apples and 2.5 pears.")
        'I have three apples and two point five pears.'
    """
    converter = NumberVerbalizer(locale)
    return NUMBER_PATTERN.sub(lambda match: converter.convert(match.group(0), **options), text)
