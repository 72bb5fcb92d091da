"""Locale registry: finds, loads and caches grammar profiles from YAML files."""

from collections.abc import Iterable
from functools import cache
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from .errors import ProfileError, UnknownLocaleError
from .profile import LocaleGrammarProfile

LOCALE_DIR = Path(__file__).parent / "locales"


def _canonical(code: str) -> str:
    """``en-US``, ``en_us`` and ``EN`` all select the ``en`` profile."""
    return code.strip().replace("_", "-").split("-")[0].lower()


class LocaleRegistry:
    """
    Maps locale codes to grammar profiles.

    Profiles are discovered as ``<code>.yaml`` files in the search paths; later
    paths override earlier ones, so user directories can replace or add to the
    bundled locales. Each file is parsed on first lookup and kept for the life
    of the registry.
    """

    def __init__(self, search_paths: Iterable[str | Path] | None = None) -> None:
        self.search_paths = [LOCALE_DIR] if search_paths is None else [Path(p) for p in search_paths]
        self._files: dict[str, Path] = {}
        for directory in self.search_paths:
            if not directory.is_dir():
                logger.warning("Locale directory {} does not exist, skipping", directory)
                continue
            for path in sorted(directory.glob("*.yaml")):
                self._files[path.stem.lower()] = path
        self._profiles: dict[str, LocaleGrammarProfile] = {}
        logger.debug("Locale registry found {} profiles", len(self._files))

    def available(self) -> list[str]:
        return sorted(self._files)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and _canonical(code) in self._files

    def lookup(self, code: str) -> LocaleGrammarProfile:
        """
        Return the profile for ``code``.

        Raises:
            UnknownLocaleError: If no profile file exists for the code
            ProfileError: If the file exists but does not describe a valid profile
        """
        key = _canonical(code)
        if key in self._profiles:
            return self._profiles[key]
        if key not in self._files:
            raise UnknownLocaleError(code, self.available())

        path = self._files[key]
        logger.debug("Loading locale profile {}", path)
        try:
            profile = LocaleGrammarProfile.from_yaml(path)
        except ValidationError as exc:
            raise ProfileError(f"Invalid locale profile {path.name}: {exc}") from exc
        if profile.code.lower() != key:
            raise ProfileError(f"{path.name} declares code {profile.code!r}")

        self._profiles[key] = profile
        return profile


@cache
def default_registry() -> LocaleRegistry:
    """Registry over the locales bundled with the package."""
    return LocaleRegistry()


def lookup(code: str) -> LocaleGrammarProfile:
    """Look up ``code`` in the bundled locales."""
    return default_registry().lookup(code)
