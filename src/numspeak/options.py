from enum import Enum

from pydantic import BaseModel, ConfigDict

from .profile import DecimalSeparator, Gender


class Mode(str, Enum):
    PLAIN = "plain"
    YEAR = "year"
    CURRENCY = "currency"
    DECIMAL = "decimal"


class RenderOptions(BaseModel):
    """Per-call rendering choices. Every field has a default."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    mode: Mode = Mode.PLAIN
    decimal_separator: DecimalSeparator | None = None
    negative_prefix: str | None = None
    round_currency: bool = True
    gender: Gender | None = None
    include_and: bool = False
    include_era: bool = False
    # ISO 4217 code; None reads the locale's own currency
    currency: str | None = None
    # name of an alternate zero-tens word from the locale profile, e.g. "le" in Vietnamese
    zero_tens: str | None = None
