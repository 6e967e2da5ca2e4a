"""Tests for LocaleTag parsing, normalization and comparison.

Tests verify:
- BCP-47 and POSIX spellings normalize to the same tag
- Casing rules (language lower, script title, territory upper)
- Empty input yields the undetermined tag
- Encoding and modifier suffixes are dropped
- Invalid identifiers raise InvalidLocaleError (a ValueError)
- Language-granularity matching and ordering
"""

import pytest
from hypothesis import given

from localecatalog.core import UND, LocaleTag
from localecatalog.diagnostics import DiagnosticCode, InvalidLocaleError
from tests.strategies import locale_codes, locale_spellings


class TestParse:
    """Test LocaleTag.parse normalization."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("en", LocaleTag("en")),
            ("en-US", LocaleTag("en", territory="US")),
            ("en_us", LocaleTag("en", territory="US")),
            ("EN-us", LocaleTag("en", territory="US")),
            ("zh-hans-cn", LocaleTag("zh", script="Hans", territory="CN")),
            ("sr_Latn_RS", LocaleTag("sr", script="Latn", territory="RS")),
            ("es-419", LocaleTag("es", territory="419")),
            ("de_DE.UTF-8", LocaleTag("de", territory="DE")),
            ("sr_RS@latin", LocaleTag("sr", territory="RS")),
            ("  fr-CA  ", LocaleTag("fr", territory="CA")),
        ],
    )
    def test_spellings_normalize(self, raw: str, expected: LocaleTag) -> None:
        """Different spellings produce the canonical tag."""
        assert LocaleTag.parse(raw) == expected

    def test_empty_is_undetermined(self) -> None:
        """Empty and whitespace-only input map to "und"."""
        assert LocaleTag.parse("") == UND
        assert LocaleTag.parse("   ") == UND
        assert LocaleTag.parse("").is_undetermined

    def test_und_literal(self) -> None:
        """The literal "und" parses to the undetermined tag."""
        assert LocaleTag.parse("und") == UND

    def test_tag_passthrough(self) -> None:
        """Passing a LocaleTag returns the same object."""
        tag = LocaleTag("de", territory="AT")
        assert LocaleTag.parse(tag) is tag

    @pytest.mark.parametrize("raw", ["e", "123", "en-US-x-!", "toolonglanguage", "-", "__"])
    def test_invalid_raises(self, raw: str) -> None:
        """Unparseable identifiers raise InvalidLocaleError."""
        with pytest.raises(InvalidLocaleError) as exc_info:
            LocaleTag.parse(raw)
        assert exc_info.value.locale == raw
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.LOCALE_INVALID

    def test_invalid_is_value_error(self) -> None:
        """InvalidLocaleError can be caught as ValueError."""
        with pytest.raises(ValueError, match="Invalid locale"):
            LocaleTag.parse("1")

    @given(locale_spellings())
    def test_spelling_variants_are_equal(self, spelling: str) -> None:
        """Every generated spelling parses to its canonical form."""
        canonical = str(LocaleTag.parse(spelling))
        assert LocaleTag.parse(canonical) == LocaleTag.parse(spelling)

    @given(locale_codes())
    def test_str_round_trips(self, code: str) -> None:
        """str() of a parsed canonical code is the code itself."""
        assert str(LocaleTag.parse(code)) == code


class TestRendering:
    """Test string forms of a tag."""

    def test_str_is_bcp47(self) -> None:
        """str() joins subtags with hyphens."""
        assert str(LocaleTag.parse("zh_Hans_CN")) == "zh-Hans-CN"

    def test_posix(self) -> None:
        """posix joins subtags with underscores."""
        assert LocaleTag.parse("pt-BR").posix == "pt_BR"

    def test_und_str(self) -> None:
        """The undetermined tag renders as "und"."""
        assert str(UND) == "und"


class TestMatching:
    """Test language granularity and ordering."""

    def test_matches_language_ignores_territory(self) -> None:
        """en-US and en-GB share a language."""
        assert LocaleTag.parse("en-US").matches_language(LocaleTag.parse("en-GB"))

    def test_matches_language_ignores_script(self) -> None:
        """sr-Latn and sr-Cyrl share a language."""
        assert LocaleTag.parse("sr-Latn").matches_language(LocaleTag.parse("sr-Cyrl-RS"))

    def test_different_languages_do_not_match(self) -> None:
        """en and fr are different languages."""
        assert not LocaleTag.parse("en").matches_language(LocaleTag.parse("fr"))

    def test_language_tag(self) -> None:
        """language_tag() drops every subtag except the language."""
        assert LocaleTag.parse("zh-Hans-CN").language_tag() == LocaleTag("zh")

    def test_is_undetermined(self) -> None:
        """Only "und" is undetermined."""
        assert UND.is_undetermined
        assert not LocaleTag.parse("en").is_undetermined

    def test_hashable(self) -> None:
        """Equal tags collapse in sets and dict keys."""
        tags = {LocaleTag.parse("en-US"), LocaleTag.parse("en_us"), LocaleTag.parse("EN-US")}
        assert len(tags) == 1

    def test_ordering(self) -> None:
        """Tags sort by language, then script, then territory."""
        tags = [LocaleTag.parse(code) for code in ("fr", "en-US", "en", "de-AT")]
        assert [str(tag) for tag in sorted(tags)] == ["de-AT", "en", "en-US", "fr"]

    def test_immutable(self) -> None:
        """Tags are frozen."""
        tag = LocaleTag.parse("en")
        with pytest.raises(AttributeError):
            tag.language = "fr"  # type: ignore[misc]
