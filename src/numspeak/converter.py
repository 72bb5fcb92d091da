from typing import Any

from loguru import logger

from .config import VerbalizerConfig
from .errors import NegativeInfinityError, NotANumberError, PositiveInfinityError, UnknownLocaleError
from .normalize import normalize
from .options import RenderOptions
from .pipeline import verbalize
from .profile import LocaleGrammarProfile
from .registry import LOCALE_DIR, LocaleRegistry, default_registry


class NumberVerbalizer:
    """
    Convenience front end that turns raw values into words in a chosen locale.

    It normalizes the input, looks up the locale profile and calls
    :func:`numspeak.verbalize`. Values that are not finite numbers do not raise:
    infinities become the locale's infinity phrases and everything else that
    cannot be read as a number becomes ``fallback_on_error`` (or the locale's
    "not a number" phrase when no fallback is set).

    Example usage:
        >>> converter = NumberVerbalizer("ru")
        >>> converter(21, mode="currency")
        'двадцать один рубль'
        >>> converter(float("nan"))
        'Не число'
    """

    def __init__(
        self,
        locale: str = "en",
        fallback_on_error: str | None = None,
        registry: LocaleRegistry | None = None,
    ) -> None:
        self.registry = registry if registry is not None else default_registry()
        self.fallback_on_error = fallback_on_error
        self._profile = self.registry.lookup(locale)

    @classmethod
    def from_config(cls, config: VerbalizerConfig) -> "NumberVerbalizer":
        registry = LocaleRegistry([LOCALE_DIR, *config.locale_paths]) if config.locale_paths else None
        return cls(config.locale, fallback_on_error=config.fallback_on_error, registry=registry)

    @property
    def locale(self) -> str:
        return self._profile.code

    @property
    def profile(self) -> LocaleGrammarProfile:
        return self._profile

    def set_locale(self, code: str, *, fallback_to_default: bool = False, default: str = "en") -> None:
        """
        Switch to another locale.

        Parameters:
            code: Locale code such as ``"de"`` or ``"pt-BR"``
            fallback_to_default: Use ``default`` instead of raising when ``code`` is unknown
            default: Locale used by the fallback

        Raises:
            UnknownLocaleError: If ``code`` is unknown and the fallback is off
        """
        try:
            self._profile = self.registry.lookup(code)
        except UnknownLocaleError:
            if not fallback_to_default:
                raise
            logger.warning("Unknown locale {!r}, falling back to {!r}", code, default)
            self._profile = self.registry.lookup(default)

    def convert(self, number: Any, options: RenderOptions | None = None, **overrides: Any) -> str:
        """
        Convert ``number`` to words.

        Parameters:
            number: ``int``, ``float``, ``str`` or ``Decimal``
            options: Render options; keyword ``overrides`` are applied on top

        Returns:
            str: The spoken form, or a fixed phrase for values that are not finite numbers
        """
        if options is None:
            options = RenderOptions(**overrides)
        elif overrides:
            options = RenderOptions.model_validate({**options.model_dump(), **overrides})

        messages = self._profile.messages
        try:
            value = normalize(number)
        except PositiveInfinityError:
            return messages.infinity
        except NegativeInfinityError:
            return messages.negative_infinity
        except NotANumberError as exc:
            logger.debug("Cannot verbalize {!r}: {}", number, exc)
            return self.fallback_on_error if self.fallback_on_error is not None else messages.not_a_number

        return verbalize(value, self._profile, options)

    __call__ = convert
