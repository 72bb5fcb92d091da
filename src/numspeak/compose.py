"""Attach scale words to rendered groups and join them into one phrase."""

from .agreement import agree
from .chunk import render_chunk
from .decompose import Group, decompose
from .profile import Gender, LocaleGrammarProfile


def compose(
    groups: list[Group],
    profile: LocaleGrammarProfile,
    *,
    gender: Gender | None = None,
    omit_leading_one: bool = False,
    include_and: bool = False,
    year: bool = False,
) -> str:
    """
    Turn decomposed groups into a phrase.

    Each non-zero group is rendered, followed by its scale word in the form its
    value agrees with. Zero groups are dropped; in locales with a gap filler a
    filler word marks the hole instead, so 10001 reads 一万零一 rather than 一万一.

    Parameters:
        groups: Groups from :func:`decompose`, most significant first
        profile: Grammar profile
        gender: Gender the units group agrees with
        omit_leading_one: Drop a leading "one" before the first scale word
        include_and: Use the locale's conjunction inside and before the last group
        year: Apply year-only overrides

    Returns:
        str: The phrase, empty when every group is zero

    Raises:
        ScaleLadderError: If a group needs a scale word the profile lacks
    """
    joiners = profile.joiners
    filler = profile.zero_policy.gap_filler
    conjunction = profile.words.conjunction if include_and else None

    text = ""
    pending_joiner = ""
    gap = False
    for group in groups:
        if group.value == 0:
            gap = gap or bool(text)
            continue

        scale = profile.scale_for(group.scale_index)
        leading = not text
        # the group agrees with its scale noun; the units group with the caller's gender
        agreement = agree(group.value, profile.count_scheme, scale.gender if scale else gender)

        if scale is not None and group.value == 1 and (scale.omit_one or (omit_leading_one and leading)):
            count = ""
        elif group.value >= profile.chunk_base:
            count = spell_integer(group.value, profile, gender=agreement.gender)
        else:
            words = render_chunk(
                group.value,
                profile,
                gender=agreement.gender,
                attached=scale.attached if scale else False,
                leading=leading,
                include_and=include_and,
                year=year,
            )
            count = joiners.chunk.join(words)

        phrase = count
        if scale is not None:
            noun = scale.forms.pick(agreement.count_class)
            scale_joiner = joiners.scale if scale.joiner is None else scale.joiner
            phrase = f"{count}{scale_joiner}{noun}" if count else noun

        if not leading:
            lead_in = []
            if filler and (gap or group.value < profile.chunk_base // 10):
                lead_in.append(filler)
            elif conjunction and group.scale_index == 0 and group.value < 100:
                lead_in.append(conjunction)
            if lead_in:
                phrase = joiners.chunk.join([*lead_in, phrase])
            text += pending_joiner + phrase
        else:
            text = phrase

        pending_joiner = joiners.group if scale is None or scale.group_joiner is None else scale.group_joiner
        gap = False

    return text


def spell_integer(
    n: int,
    profile: LocaleGrammarProfile,
    *,
    gender: Gender | None = None,
    omit_leading_one: bool = False,
    include_and: bool = False,
    year: bool = False,
) -> str:
    """
    Spell a non-negative integer as a cardinal number.

    Examples:
        >>> spell_integer(1001, en)
        'one thousand one'
        >>> spell_integer(10**18, hi)
        'दस शंख'
    """
    if n == 0:
        return profile.words.zero
    cap = len(profile.scales) if profile.recursive_top_scale else None
    groups = decompose(n, profile.grouping, cap=cap)
    return compose(
        groups,
        profile,
        gender=gender,
        omit_leading_one=omit_leading_one,
        include_and=include_and,
        year=year,
    )
