"""numspeak - spell out numbers, years and amounts of money in many languages."""

from loguru import logger

from .converter import NumberVerbalizer
from .errors import (
    NegativeInfinityError,
    NormalizationError,
    NotANumberError,
    NumspeakError,
    PositiveInfinityError,
    ProfileError,
    ScaleLadderError,
    UnknownLocaleError,
    UnsupportedOptionError,
)
from .normalize import NormalizedNumber, Sign, normalize
from .options import Mode, RenderOptions
from .pipeline import verbalize
from .profile import DecimalSeparator, Gender, LocaleGrammarProfile
from .registry import LocaleRegistry, lookup
from .text import verbalize_numbers

# library code stays quiet until an application enables the "numspeak" logger
logger.disable("numspeak")

__version__ = "0.1.0"
__all__ = [
    "DecimalSeparator",
    "Gender",
    "LocaleGrammarProfile",
    "LocaleRegistry",
    "Mode",
    "NegativeInfinityError",
    "NormalizationError",
    "NormalizedNumber",
    "NotANumberError",
    "NumberVerbalizer",
    "NumspeakError",
    "PositiveInfinityError",
    "ProfileError",
    "RenderOptions",
    "ScaleLadderError",
    "Sign",
    "UnknownLocaleError",
    "UnsupportedOptionError",
    "lookup",
    "normalize",
    "verbalize",
    "verbalize_numbers",
]
