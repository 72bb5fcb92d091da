"""Unit tests for locale discovery and lookup."""

from collections.abc import Generator
from pathlib import Path

import pytest

from numspeak.errors import ProfileError, UnknownLocaleError
from numspeak.registry import LOCALE_DIR, LocaleRegistry, default_registry, lookup

BUNDLED = ["de", "en", "hi", "ja", "ko", "pl", "ru", "uk", "vi", "zh"]


@pytest.fixture
def registry() -> Generator[LocaleRegistry, None, None]:
    """Provide a fresh registry over the bundled locales for each test."""
    yield LocaleRegistry()


def test_available(registry: LocaleRegistry) -> None:
    assert registry.available() == BUNDLED


@pytest.mark.parametrize("code", ["en", "EN", "en-US", "en_gb", " en "])
def test_codes_are_canonicalized(registry: LocaleRegistry, code: str) -> None:
    """
    Test that region subtags, case and separators do not matter.

    Parameters:
        registry (LocaleRegistry): Registry under test
        code (str): A spelling of the English locale code
    """
    assert code in registry
    assert registry.lookup(code).code == "en"


def test_lookup_caches_profiles(registry: LocaleRegistry) -> None:
    assert registry.lookup("de") is registry.lookup("de-AT")


def test_unknown_locale(registry: LocaleRegistry) -> None:
    assert "xx" not in registry
    assert 42 not in registry
    with pytest.raises(UnknownLocaleError) as exc_info:
        registry.lookup("xx")
    assert exc_info.value.code == "xx"
    assert exc_info.value.available == BUNDLED
    assert isinstance(exc_info.value, LookupError)


def test_user_directory_overrides_bundled(tmp_path: Path) -> None:
    text = (LOCALE_DIR / "en.yaml").read_text(encoding="utf-8")
    (tmp_path / "en.yaml").write_text(text.replace("negative_prefix: minus", "negative_prefix: negative"))
    registry = LocaleRegistry([LOCALE_DIR, tmp_path])
    assert registry.lookup("en").negative_prefix == "negative"
    assert registry.lookup("de").negative_prefix == "minus"


def test_invalid_profile(tmp_path: Path) -> None:
    (tmp_path / "xx.yaml").write_text("code: xx\nname: Broken\n")
    with pytest.raises(ProfileError, match="xx.yaml"):
        LocaleRegistry([tmp_path]).lookup("xx")


def test_profile_code_must_match_file_name(tmp_path: Path) -> None:
    (tmp_path / "yy.yaml").write_text((LOCALE_DIR / "en.yaml").read_text(encoding="utf-8"), encoding="utf-8")
    with pytest.raises(ProfileError, match="declares code 'en'"):
        LocaleRegistry([tmp_path]).lookup("yy")


def test_missing_directory_is_skipped(tmp_path: Path) -> None:
    registry = LocaleRegistry([tmp_path / "missing", LOCALE_DIR])
    assert registry.available() == BUNDLED


def test_module_level_lookup() -> None:
    assert lookup("ru") is default_registry().lookup("ru")
