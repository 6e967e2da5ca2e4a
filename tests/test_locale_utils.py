"""Tests for locale utility functions."""

import pytest

from localecatalog.locale_utils import (
    get_babel_locale,
    is_known_locale,
    normalize_locale,
)


class TestNormalizeLocale:
    """Test BCP-47 to POSIX conversion."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("en-US", "en_US"), (" pt-BR ", "pt_BR"), ("en", "en"), ("zh-Hans-CN", "zh_Hans_CN")],
    )
    def test_normalize(self, raw: str, expected: str) -> None:
        """Hyphens become underscores and whitespace is stripped."""
        assert normalize_locale(raw) == expected


class TestBabelLookup:
    """Test Babel-backed helpers."""

    def test_get_babel_locale_cached(self) -> None:
        """Repeated lookups return the cached Locale."""
        first = get_babel_locale("de-DE")
        assert first is get_babel_locale("de-DE")
        assert first.territory == "DE"

    @pytest.mark.parametrize("code", ["en", "de_DE", "lv-LV", "zh-Hans-CN"])
    def test_known(self, code: str) -> None:
        """CLDR locales are known."""
        assert is_known_locale(code)

    @pytest.mark.parametrize("code", ["", "xx_YY", "strings", "12"])
    def test_unknown(self, code: str) -> None:
        """Unknown or malformed codes are not."""
        assert not is_known_locale(code)
