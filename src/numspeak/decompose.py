"""Split a non-negative integer into scale groups."""

from collections.abc import Iterator
from itertools import chain, repeat
from typing import NamedTuple, assert_never

from .profile import GroupingScheme


class Group(NamedTuple):
    value: int
    scale_index: int


def group_divisors(grouping: GroupingScheme) -> Iterator[int]:
    """
    Yield the divisor for each group position, least significant first.

    Uniform and myriad schemes use a constant base. The South Asian scheme
    takes a thousand first and then a hundred per position (lakh, crore, ...).
    """
    match grouping:
        case GroupingScheme.UNIFORM_1000:
            return repeat(1000)
        case GroupingScheme.MYRIAD_10000 | GroupingScheme.SINO_TIERED:
            return repeat(10000)
        case GroupingScheme.SOUTH_ASIAN:
            return chain([1000], repeat(100))
        case _:
            assert_never(grouping)


def decompose(n: int, grouping: GroupingScheme, *, cap: int | None = None) -> list[Group]:
    """
    Decompose ``n`` into groups, most significant first.

    Zero groups are kept so the composer can decide how to mark the gap. When
    ``cap`` is given, everything from scale index ``cap`` upwards is folded into
    one group whose value may exceed the base.

    Parameters:
        n: Non-negative integer of any size
        grouping: The locale's grouping scheme
        cap: Highest scale index to produce

    Returns:
        list[Group]: The groups, ``[Group(0, 0)]`` for zero

    Raises:
        ValueError: If ``n`` is negative

    Examples:
        >>> decompose(1234567, GroupingScheme.UNIFORM_1000)
        [Group(value=1, scale_index=2), Group(value=234, scale_index=1), Group(value=567, scale_index=0)]
        >>> decompose(12345678, GroupingScheme.SOUTH_ASIAN)
        [Group(value=1, scale_index=3), Group(value=23, scale_index=2), Group(value=45, scale_index=1), Group(value=678, scale_index=0)]
    """
    if n < 0:
        raise ValueError(f"Cannot decompose a negative number: {n}")
    if n == 0:
        return [Group(0, 0)]

    groups: list[Group] = []
    for index, divisor in enumerate(group_divisors(grouping)):
        if n == 0:
            break
        if cap is not None and index == cap:
            groups.append(Group(n, index))
            break
        n, value = divmod(n, divisor)
        groups.append(Group(value, index))

    groups.reverse()
    return groups
