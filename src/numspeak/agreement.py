"""Count-class resolution: which inflected form a noun takes after a number."""

from typing import NamedTuple

from .profile import CountClass, CountScheme, Gender


class Agreement(NamedTuple):
    count_class: CountClass
    gender: Gender | None


def classify(n: int, scheme: CountScheme) -> CountClass:
    """
    Return the count class a noun following ``n`` must agree with.

    Parameters:
        n: The non-negative count
        scheme: The locale's agreement scheme

    Returns:
        CountClass: ``one``, ``few``, ``many`` or ``other``

    Examples:
        >>> classify(21, CountScheme.EAST_SLAVIC)
        <CountClass.ONE: 'one'>
        >>> classify(12, CountScheme.EAST_SLAVIC)
        <CountClass.MANY: 'many'>
    """
    if scheme is CountScheme.INVARIANT:
        return CountClass.OTHER
    if scheme is CountScheme.SINGULAR_PLURAL:
        return CountClass.ONE if n == 1 else CountClass.OTHER

    last_two = n % 100
    last = n % 10
    if scheme is CountScheme.EAST_SLAVIC:
        # 11-14 take the plural genitive before the last-digit rules apply
        if 11 <= last_two <= 14:
            return CountClass.MANY
        if last == 1:
            return CountClass.ONE
        if 2 <= last <= 4:
            return CountClass.FEW
        return CountClass.MANY
    if scheme is CountScheme.WEST_SLAVIC:
        if n == 1:
            return CountClass.ONE
        if 2 <= last <= 4 and not 12 <= last_two <= 14:
            return CountClass.FEW
        return CountClass.MANY
    raise ValueError(f"Unsupported count scheme: {scheme}")


def agree(n: int, scheme: CountScheme, gender: Gender | None = None) -> Agreement:
    """Classify ``n`` and carry the gender of the noun it counts along with it."""
    return Agreement(classify(n, scheme), gender)
