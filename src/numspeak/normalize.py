"""
Input normalization.

Turns the values callers hand us (ints, floats, strings, Decimals) into a
``NormalizedNumber``: a sign, an unbounded integer part and the fractional
digits. Floats are read through their shortest repr so ``0.1`` stays ``0.1``.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
import math

from .errors import NegativeInfinityError, NotANumberError, PositiveInfinityError


class Sign(Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


@dataclass(frozen=True)
class NormalizedNumber:
    sign: Sign
    integer_digits: int
    fractional_digits: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if self.integer_digits < 0:
            raise ValueError("integer_digits must be non-negative")
        if any(not 0 <= digit <= 9 for digit in self.fractional_digits):
            raise ValueError("fractional digits must be single decimal digits")
        if self.fractional_digits and self.fractional_digits[-1] == 0:
            raise ValueError("fractional digits must not end in zero")

    @property
    def is_zero(self) -> bool:
        return self.integer_digits == 0 and not self.fractional_digits

    @property
    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE


def _from_decimal(value: Decimal) -> NormalizedNumber:
    if value.is_nan():
        raise NotANumberError("NaN is not a number")
    if value.is_infinite():
        raise NegativeInfinityError("-Infinity") if value < 0 else PositiveInfinityError("Infinity")

    negative, digits, exponent = value.as_tuple()
    assert isinstance(exponent, int)
    if exponent >= 0:
        integer = int("".join(map(str, digits)) or "0") * 10**exponent
        fraction: tuple[int, ...] = ()
    else:
        padded = (0,) * max(0, -exponent - len(digits)) + tuple(digits)
        split = len(padded) + exponent
        integer = int("".join(map(str, padded[:split])) or "0")
        fraction = tuple(padded[split:])
        while fraction and fraction[-1] == 0:
            fraction = fraction[:-1]

    sign = Sign.NEGATIVE if negative and (integer or fraction) else Sign.POSITIVE
    return NormalizedNumber(sign, integer, fraction)


def normalize(raw: object) -> NormalizedNumber:
    """
    Convert a raw value into a ``NormalizedNumber``.

    Parameters:
        raw: An ``int``, ``float``, ``str`` or ``decimal.Decimal``

    Returns:
        NormalizedNumber: Sign, integer part and trimmed fractional digits

    Raises:
        NotANumberError: For ``None``, booleans, NaN, unparsable strings and other types
        PositiveInfinityError: For positive infinity
        NegativeInfinityError: For negative infinity

    Examples:
        >>> normalize("-12.50")
        NormalizedNumber(sign=<Sign.NEGATIVE: 'negative'>, integer_digits=12, fractional_digits=(5,))
        >>> normalize(-0.0).sign
        <Sign.POSITIVE: 'positive'>
    """
    if raw is None or isinstance(raw, bool):
        raise NotANumberError(f"{raw!r} is not a number")
    if isinstance(raw, int):
        return NormalizedNumber(Sign.NEGATIVE if raw < 0 else Sign.POSITIVE, abs(raw))
    if isinstance(raw, float):
        if math.isnan(raw):
            raise NotANumberError("NaN is not a number")
        if math.isinf(raw):
            raise NegativeInfinityError("-Infinity") if raw < 0 else PositiveInfinityError("Infinity")
        return _from_decimal(Decimal(repr(raw)))
    if isinstance(raw, Decimal):
        return _from_decimal(raw)
    if isinstance(raw, str):
        text = raw.strip()
        # Decimal() would accept "1_000"
        if not text or "_" in text:
            raise NotANumberError(f"{raw!r} is not a number")
        try:
            return _from_decimal(Decimal(text))
        except InvalidOperation:
            raise NotANumberError(f"{raw!r} is not a number") from None
    raise NotANumberError(f"Unsupported type {type(raw).__name__}")
