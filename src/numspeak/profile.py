"""
Grammar profile model.

A ``LocaleGrammarProfile`` is everything the engine knows about one language:
word tables, joiners, zero handling, the scale ladder and the rules for the
year, currency and decimal modes. Profiles are plain data loaded from YAML and
validated here; they are frozen once built so a single instance can be shared
by every call.
"""

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from .errors import ScaleLadderError, UnsupportedOptionError
from .utils import read_yaml


class Gender(str, Enum):
    MASCULINE = "masculine"
    FEMININE = "feminine"
    NEUTER = "neuter"


class CountClass(str, Enum):
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


class CountScheme(str, Enum):
    INVARIANT = "invariant"
    SINGULAR_PLURAL = "singular-plural"
    EAST_SLAVIC = "east-slavic"
    WEST_SLAVIC = "west-slavic"


class GroupingScheme(str, Enum):
    UNIFORM_1000 = "uniform-1000"
    MYRIAD_10000 = "myriad-10000"
    SOUTH_ASIAN = "south-asian-lakh-crore"
    SINO_TIERED = "sino-tiered"


class DecimalSeparator(str, Enum):
    POINT = "point"
    COMMA = "comma"
    GENERIC = "generic"

    @classmethod
    def _missing_(cls, value: object) -> "DecimalSeparator | None":
        # "period" is accepted as another name for the point style
        if isinstance(value, str) and value.lower() == "period":
            return cls.POINT
        return None


class OmitPolicy(str, Enum):
    NEVER = "never"
    ALWAYS = "always"
    LEADING = "leading"


class ZeroMinor(str, Enum):
    NEVER = "never"
    ALWAYS = "always"
    ZERO_TOTAL = "zero-total"


class HundredStyle(str, Enum):
    ALWAYS = "always"
    BELOW_TEN = "below-ten"
    NEVER = "never"


class EraPosition(str, Enum):
    PREFIX = "prefix"
    SUFFIX = "suffix"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class NounForms(_Frozen):
    """Inflected forms of one noun, keyed by count class."""

    one: str | None = None
    two: str | None = None
    few: str | None = None
    many: str | None = None
    other: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _from_plain_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"other": data}
        return data

    @model_validator(mode="after")
    def _require_a_form(self) -> "NounForms":
        if not any((self.one, self.two, self.few, self.many, self.other)):
            raise ValueError("a noun needs at least one form")
        return self

    def pick(self, count_class: CountClass) -> str:
        """
        Return the form for ``count_class``.

        Missing classes fall back to ``other``, then ``many``, then ``one``, so a
        locale only lists the forms its grammar actually distinguishes.
        """
        for name in (count_class.value, "other", "many", "one"):
            form = getattr(self, name)
            if form is not None:
                return form
        raise AssertionError("unreachable: validated forms are never all empty")


class ScaleWord(_Frozen):
    forms: NounForms
    gender: Gender = Gender.MASCULINE
    # the count is fused with the scale word and takes the attached unit form
    attached: bool = False
    omit_one: bool = False
    joiner: str | None = None
    group_joiner: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _from_plain_string(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"forms": data}
        return data


class UnitOverride(_Frozen):
    """Replacement word for a unit digit that follows a tens word."""

    digit: int = Field(ge=1, le=9)
    word: str
    min_tens: int = Field(default=1, ge=1, le=9)
    year_only: bool = False


class OmitOne(_Frozen):
    ten: OmitPolicy = OmitPolicy.NEVER
    hundred: OmitPolicy = OmitPolicy.NEVER
    thousand: OmitPolicy = OmitPolicy.NEVER


class Lexicon(_Frozen):
    zero: str
    digits: list[str]
    teens: list[str] | None = None
    tens: list[str] | None = None
    ten: str | None = None
    hundred: str | None = None
    hundreds: list[str] | None = None
    thousand: str | None = None
    below_hundred: list[str] | None = None
    gendered: dict[Gender, dict[int, str]] = {}
    attached: dict[int, str] = {}
    unit_after_tens: list[UnitOverride] = []
    units_first_link: str | None = None
    tens_units_joiner: str | None = None
    omit_one: OmitOne = OmitOne()
    conjunction: str | None = None

    @model_validator(mode="after")
    def _check_tables(self) -> "Lexicon":
        expected = {"digits": 10, "teens": 10, "tens": 10, "hundreds": 10, "below_hundred": 100}
        for name, size in expected.items():
            table = getattr(self, name)
            if table is not None and len(table) != size:
                raise ValueError(f"{name} must list {size} words, got {len(table)}")
        if self.below_hundred is None and self.tens is None and self.ten is None:
            raise ValueError("either tens, ten or below_hundred is required")
        if self.hundred is None and self.hundreds is None:
            raise ValueError("either hundred or hundreds is required")
        return self


class Joiners(_Frozen):
    chunk: str = " "
    group: str = " "
    scale: str = " "
    negative: str = " "


class ZeroPolicy(_Frozen):
    gap_filler: str | None = None
    zero_hundred: str | None = None
    zero_tens: str | None = None
    # alternate words for zero_tens, selected per call by name
    zero_tens_variants: dict[str, str] = {}


class DecimalRule(_Frozen):
    separators: dict[DecimalSeparator, str]
    default: DecimalSeparator = DecimalSeparator.POINT
    digits: dict[int, str] = {}
    joiner: str = " "
    glue: str = " "

    @model_validator(mode="after")
    def _check_default(self) -> "DecimalRule":
        if self.default not in self.separators:
            raise ValueError(f"no separator word for the default style {self.default.value!r}")
        return self

    def separator(self, style: DecimalSeparator | None) -> str:
        if style is not None and style in self.separators:
            return self.separators[style]
        return self.separators[self.default]


class CurrencyUnit(_Frozen):
    forms: NounForms
    gender: Gender = Gender.MASCULINE


class MinorTier(_Frozen):
    word: str
    value: int = Field(ge=1)


class CurrencyRule(_Frozen):
    code: str | None = None
    major: CurrencyUnit
    minor: CurrencyUnit | None = None
    minor_per_major: int = 100
    minor_tiers: list[MinorTier] = []
    separator: str | None = None
    whole_marker: str | None = None
    omit_zero_major: bool = False
    zero_minor: ZeroMinor = ZeroMinor.NEVER
    unit_joiner: str = " "
    joiner: str = " "

    @field_validator("code")
    @classmethod
    def _upper_code(cls, value: str | None) -> str | None:
        return value.upper() if value else value

    @model_validator(mode="after")
    def _check_subunits(self) -> "CurrencyRule":
        places = len(str(self.minor_per_major)) - 1
        if self.minor_per_major != 10**places:
            raise ValueError("minor_per_major must be a power of ten")
        return self

    @property
    def minor_places(self) -> int:
        if self.minor is None and not self.minor_tiers:
            return 0
        return len(str(self.minor_per_major)) - 1


class CenturySplit(_Frozen):
    start: int
    end: int
    hundred: HundredStyle = HundredStyle.BELOW_TEN
    round_only: bool = False

    def covers(self, year: int) -> bool:
        return self.start <= year <= self.end and (not self.round_only or year % 100 == 0)


class EraMarker(_Frozen):
    text: str
    position: EraPosition = EraPosition.SUFFIX


class YearRule(_Frozen):
    digit_by_digit: bool = False
    splits: list[CenturySplit] = []
    ordinal: dict[str, str] = {}
    omit_leading_one: bool = False
    suffix: str | None = None
    bc: EraMarker | None = None
    ad: EraMarker | None = None
    era_joiner: str = " "


class Messages(_Frozen):
    not_a_number: str
    infinity: str
    negative_infinity: str


_CURRENCY_STYLE = ("separator", "whole_marker", "omit_zero_major", "zero_minor", "unit_joiner", "joiner")


class LocaleGrammarProfile(_Frozen):
    """Frozen description of one locale's numeral grammar."""

    code: str
    name: str
    grouping: GroupingScheme
    count_scheme: CountScheme
    words: Lexicon
    joiners: Joiners = Joiners()
    zero_policy: ZeroPolicy = ZeroPolicy()
    scales: list[ScaleWord] = []
    scale_tiers: list[str] = []
    recursive_top_scale: bool = False
    negative_prefix: str
    decimal: DecimalRule
    currency: CurrencyRule
    currencies: dict[str, CurrencyRule] = {}
    year: YearRule = YearRule()
    messages: Messages

    @model_validator(mode="before")
    @classmethod
    def _inherit_currency_style(cls, data: Any) -> Any:
        """
        Give every extra currency the default currency's presentation.

        Only the units differ between the entries under ``currencies``; the
        separator word, joiners and zero handling are the locale's and are
        copied from ``currency`` unless an entry sets them itself.
        """
        if not isinstance(data, dict) or not data.get("currencies"):
            return data
        base = data.get("currency")
        if isinstance(base, CurrencyRule):
            base = base.model_dump(exclude_unset=True)
        style = {key: base[key] for key in _CURRENCY_STYLE if isinstance(base, dict) and key in base}

        currencies = {}
        for code, entry in data["currencies"].items():
            if isinstance(entry, dict):
                entry = {**style, "code": code, **entry}
            currencies[str(code).upper()] = entry
        return {**data, "currencies": currencies}

    @model_validator(mode="after")
    def _check_ladder(self) -> "LocaleGrammarProfile":
        if self.grouping is GroupingScheme.SINO_TIERED:
            if len(self.scale_tiers) != 2:
                raise ValueError("sino-tiered profiles need exactly two scale tiers")
        elif not self.scales:
            raise ValueError("the scale ladder is empty")
        return self

    @property
    def chunk_base(self) -> int:
        """Largest value + 1 a single group may hold."""
        if self.grouping in (GroupingScheme.MYRIAD_10000, GroupingScheme.SINO_TIERED):
            return 10000
        return 1000

    def scale_for(self, index: int) -> ScaleWord | None:
        """
        Return the scale word for group ``index`` (``None`` for the units group).

        Sino-tiered profiles build the word from their two tiers: odd positions
        carry the low tier and every pair of positions adds one high tier, which
        yields 万, 亿, 万亿, 亿亿, 万亿亿 and so on without an upper bound.

        Raises:
            ScaleLadderError: If the ladder has no word for ``index``.
        """
        if index == 0:
            return None
        if self.grouping is GroupingScheme.SINO_TIERED:
            low, high = self.scale_tiers
            word = (low if index % 2 else "") + high * (index // 2)
            return ScaleWord(forms=NounForms(other=word), joiner="", group_joiner="")
        if index > len(self.scales):
            raise ScaleLadderError(self.code, index)
        return self.scales[index - 1]

    @property
    def currency_codes(self) -> list[str]:
        codes = set(self.currencies)
        if self.currency.code:
            codes.add(self.currency.code)
        return sorted(codes)

    def currency_for(self, code: str | None) -> CurrencyRule:
        """
        Return the currency rule for an ISO 4217 ``code``, or the locale's own currency for ``None``.

        Raises:
            UnsupportedOptionError: If the locale has no words for the currency
        """
        if code is None:
            return self.currency
        key = code.upper()
        if key == self.currency.code:
            return self.currency
        if key in self.currencies:
            return self.currencies[key]
        raise UnsupportedOptionError(self.code, "currency", code, self.currency_codes)

    def with_zero_tens(self, variant: str) -> "LocaleGrammarProfile":
        """
        Return a copy whose empty tens place is filled with the named alternate word.

        Vietnamese, for one, reads 101 as "một trăm linh một" or "một trăm lẻ một"
        depending on the region; both words are listed under ``zero_tens_variants``.

        Raises:
            UnsupportedOptionError: If the profile lists no such variant
        """
        variants = self.zero_policy.zero_tens_variants
        if variant not in variants:
            raise UnsupportedOptionError(self.code, "zero-tens variant", variant, sorted(variants))
        policy = self.zero_policy.model_copy(update={"zero_tens": variants[variant]})
        return self.model_copy(update={"zero_policy": policy})

    @classmethod
    def from_yaml(cls, path: str | Path) -> "LocaleGrammarProfile":
        """
        Load a profile from a YAML file.

        Parameters:
            path: Path to the locale file

        Returns:
            LocaleGrammarProfile: The validated, frozen profile

        Raises:
            OSError: If the file cannot be read
            pydantic.ValidationError: If the data does not describe a valid profile
        """
        return cls.model_validate(read_yaml(path))
