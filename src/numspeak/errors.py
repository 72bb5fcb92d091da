"""Exception hierarchy shared by every numspeak module."""


class NumspeakError(Exception):
    """Base class for all errors raised by numspeak."""


class NormalizationError(NumspeakError, ValueError):
    """The raw input could not be turned into a finite number."""


class NotANumberError(NormalizationError):
    """Raised for NaN, ``None``, unparsable strings and unsupported types."""


class PositiveInfinityError(NormalizationError):
    pass


class NegativeInfinityError(NormalizationError):
    pass


class UnknownLocaleError(NumspeakError, LookupError):
    """No grammar profile is registered under the requested code."""

    def __init__(self, code: str, available: list[str]) -> None:
        self.code = code
        self.available = available
        super().__init__(f"Unknown locale {code!r}; available: {', '.join(available) or 'none'}")


class ProfileError(NumspeakError, ValueError):
    """A grammar profile is malformed."""


class ScaleLadderError(ProfileError):
    """A magnitude needs a scale word the profile's ladder does not provide."""

    def __init__(self, code: str, scale_index: int) -> None:
        self.code = code
        self.scale_index = scale_index
        super().__init__(f"Locale {code!r} has no scale word for group {scale_index}")


class UnsupportedOptionError(NumspeakError, LookupError):
    """A render option names something the locale does not provide, such as an unknown currency."""

    def __init__(self, code: str, option: str, value: str, available: list[str]) -> None:
        self.code = code
        self.option = option
        self.value = value
        self.available = available
        super().__init__(
            f"Locale {code!r} has no {option} {value!r}; available: {', '.join(available) or 'none'}"
        )
