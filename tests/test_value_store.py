"""Tests for ValueStore lookups, writes and formatting.

Tests verify:
- get() returns None for absent IDs; require() raises TextNotFoundError
- put() replaces and rebinds the entry to the store's tag
- format() never raises in the default configuration
- Strict configuration raises instead of returning errors
- Concurrent writers and readers observe a consistent store
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from hypothesis import given
from hypothesis import strategies as st

from localecatalog.core import LocaleTag
from localecatalog.diagnostics import (
    DiagnosticCode,
    FormattingError,
    TextNotFoundError,
)
from localecatalog.runtime import CatalogConfig, TextEntry, Value, ValueStore
from tests.strategies import entry_ids


@pytest.fixture
def store() -> ValueStore:
    """English store with a few entries."""
    store = ValueStore(LocaleTag.parse("en-US"))
    store.put(TextEntry("greeting", "en-us", "Hello, %s!"))
    store.put(TextEntry("items", "en-us", "You have %d items"))
    store.put(TextEntry("named", "en-us", "{name} sent {count:d} files"))
    store.put(TextEntry("plain", "en-us", "Welcome"))
    return store


class TestLookup:
    """Test get, require and container protocol."""

    def test_get_present(self, store: ValueStore) -> None:
        """get() returns the stored entry."""
        entry = store.get("greeting")
        assert entry is not None
        assert entry.text == "Hello, %s!"

    def test_get_absent_returns_none(self, store: ValueStore) -> None:
        """Absence is reported as None."""
        assert store.get("nope") is None

    def test_require_absent_raises(self, store: ValueStore) -> None:
        """require() raises TextNotFoundError carrying ID and locale."""
        with pytest.raises(TextNotFoundError) as exc_info:
            store.require("nope")
        error = exc_info.value
        assert error.entry_id == "nope"
        assert error.locale == "en-US"
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.TEXT_NOT_FOUND

    def test_text_not_found_is_lookup_error(self, store: ValueStore) -> None:
        """TextNotFoundError can be caught as LookupError."""
        with pytest.raises(LookupError):
            store.require("nope")

    def test_len_and_contains(self, store: ValueStore) -> None:
        """len() counts entries; `in` tests IDs."""
        assert len(store) == 4
        assert "plain" in store
        assert "nope" not in store

    def test_ids_and_texts_are_snapshots(self, store: ValueStore) -> None:
        """ids() and texts() are detached copies."""
        ids = store.ids()
        texts = store.texts()
        store.put(TextEntry("later", "en", "Later"))
        assert "later" not in ids
        assert "later" not in texts
        assert texts["plain"] == "Welcome"

    def test_tag_and_locale(self, store: ValueStore) -> None:
        """tag is the normalized tag; locale its BCP-47 spelling."""
        assert store.tag == LocaleTag("en", territory="US")
        assert store.locale == "en-US"

    def test_repr(self, store: ValueStore) -> None:
        """repr names tag and entry count."""
        assert repr(store) == "ValueStore(tag=en-US, entries=4)"


class TestPut:
    """Test writes."""

    def test_put_binds_store_tag(self, store: ValueStore) -> None:
        """The entry's tag is the store's normalized tag, not its raw locale."""
        entry = TextEntry("bye", "EN_us", "Bye")
        store.put(entry)
        assert entry.tag == store.tag
        assert entry.locale == "EN_us"

    def test_put_replaces(self, store: ValueStore) -> None:
        """Last writer wins."""
        store.put(TextEntry("plain", "en", "Hi there"))
        entry = store.get("plain")
        assert entry is not None
        assert entry.text == "Hi there"
        assert len(store) == 4

    def test_put_all_counts(self) -> None:
        """put_all() returns the number of entries written."""
        store = ValueStore(LocaleTag.parse("de"))
        written = store.put_all(TextEntry(f"k{i}", "de", f"Wert {i}") for i in range(5))
        assert written == 5
        assert len(store) == 5

    def test_rebind(self, store: ValueStore) -> None:
        """rebind() moves an entry's tag and reports absence."""
        other = LocaleTag.parse("en-GB")
        assert store.rebind("plain", other)
        entry = store.get("plain")
        assert entry is not None
        assert entry.tag == other  # type: ignore[attr-defined]
        assert store.rebind("plain")
        assert entry.tag == store.tag  # type: ignore[attr-defined]
        assert not store.rebind("nope")

    def test_text_entry_is_value(self) -> None:
        """TextEntry satisfies the Value protocol."""
        assert isinstance(TextEntry("a", "en", "b"), Value)

    def test_custom_value(self) -> None:
        """Any object implementing the protocol can be stored."""

        class Upper:
            def __init__(self) -> None:
                self.id = "shout"
                self.locale = "en"
                self.text = "HEY %s"
                self.bound = None

            def update_tag(self, tag: LocaleTag) -> None:
                self.bound = tag

        value = Upper()
        store = ValueStore(LocaleTag.parse("en"))
        store.put(value)
        assert value.bound == LocaleTag("en")
        assert store.format("shout", "you") == ("HEY you", ())


class TestFormat:
    """Test format() results and errors."""

    def test_printf_positional(self, store: ValueStore) -> None:
        """printf directives take positional arguments."""
        assert store.format("items", 3) == ("You have 3 items", ())

    def test_brace_keywords(self, store: ValueStore) -> None:
        """Brace directives take keyword arguments."""
        text, errors = store.format("named", name="Anna", count=2)
        assert text == "Anna sent 2 files"
        assert errors == ()

    def test_plain_text(self, store: ValueStore) -> None:
        """Texts without directives are returned unchanged."""
        assert store.format("plain") == ("Welcome", ())

    def test_printf_keywords(self) -> None:
        """printf named directives take keyword arguments."""
        store = ValueStore(LocaleTag.parse("en"))
        store.put(TextEntry("total", "en", "%(count)d of %(total)d"))
        assert store.format("total", count=1, total=5) == ("1 of 5", ())

    def test_percent_escape(self) -> None:
        """"%%" renders a literal percent sign."""
        store = ValueStore(LocaleTag.parse("en"))
        store.put(TextEntry("rate", "en", "%d%% done"))
        assert store.format("rate", 40) == ("40% done", ())

    def test_literal_percent_in_brace_text(self) -> None:
        """A bare percent sign beside brace fields stays literal."""
        store = ValueStore(LocaleTag.parse("en"))
        store.put(TextEntry("off", "en", "Save 20% on {item}"))
        assert store.format("off", item="shoes") == ("Save 20% on shoes", ())

    def test_star_width(self) -> None:
        """"*" width is filled from the positional arguments."""
        store = ValueStore(LocaleTag.parse("en"))
        store.put(TextEntry("col", "en", "[%*d]"))
        assert store.format("col", 4, 7) == ("[   7]", ())

    def test_missing_returns_id(self, store: ValueStore, caplog: pytest.LogCaptureFixture) -> None:
        """A missing ID yields the ID itself and a TextNotFoundError."""
        with caplog.at_level(logging.WARNING, logger="localecatalog.runtime.store"):
            text, errors = store.format("nope")
        assert text == "nope"
        assert len(errors) == 1
        assert isinstance(errors[0], TextNotFoundError)
        assert "not found" in caplog.text

    def test_bad_arguments_return_raw_text(self, store: ValueStore) -> None:
        """A substitution failure yields the raw text and a FormattingError."""
        text, errors = store.format("items", "three", "four")
        assert text == "You have %d items"
        assert len(errors) == 1
        error = errors[0]
        assert isinstance(error, FormattingError)
        assert error.fallback_value == "You have %d items"
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.FORMATTING_FAILED

    def test_missing_arguments(self, store: ValueStore) -> None:
        """Too few arguments is a formatting failure, not an exception."""
        text, errors = store.format("greeting")
        assert text == "Hello, %s!"
        assert isinstance(errors[0], FormattingError)

    def test_plain_text_with_arguments(self, store: ValueStore) -> None:
        """Arguments for a text without directives are a formatting failure."""
        text, errors = store.format("plain", 1)
        assert text == "Welcome"
        assert isinstance(errors[0], FormattingError)

    def test_mixed_printf_arguments(self) -> None:
        """printf texts reject positional and keyword arguments together."""
        store = ValueStore(LocaleTag.parse("en"))
        store.put(TextEntry("x", "en", "%s"))
        _, errors = store.format("x", "a", b="c")
        assert isinstance(errors[0], FormattingError)


class TestStrict:
    """Test strict configuration."""

    @pytest.fixture
    def strict_store(self) -> ValueStore:
        store = ValueStore(LocaleTag.parse("en"), CatalogConfig(strict=True))
        store.put(TextEntry("items", "en", "You have %d items"))
        return store

    def test_strict_missing_raises(self, strict_store: ValueStore) -> None:
        """Strict mode raises TextNotFoundError."""
        with pytest.raises(TextNotFoundError):
            strict_store.format("nope")

    def test_strict_bad_arguments_raise(self, strict_store: ValueStore) -> None:
        """Strict mode raises FormattingError chained to the cause."""
        with pytest.raises(FormattingError) as exc_info:
            strict_store.format("items", "many")
        assert isinstance(exc_info.value.__cause__, TypeError)

    def test_strict_success(self, strict_store: ValueStore) -> None:
        """Strict mode formats normally when arguments fit."""
        assert strict_store.format("items", 2) == ("You have 2 items", ())

    def test_negative_lock_timeout_rejected(self) -> None:
        """CatalogConfig validates lock_timeout."""
        with pytest.raises(ValueError, match="lock_timeout"):
            CatalogConfig(lock_timeout=-1)


class TestConcurrency:
    """Test concurrent access."""

    def test_parallel_puts_then_gets(self) -> None:
        """N concurrent puts of distinct IDs are all visible afterwards."""
        store = ValueStore(LocaleTag.parse("lv"))
        count = 200

        def put(i: int) -> None:
            store.put(TextEntry(f"id{i}", "lv", f"teksts {i}"))

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(put, range(count)))

        assert len(store) == count

        def get(i: int) -> str:
            entry = store.get(f"id{i}")
            assert entry is not None
            return entry.text

        with ThreadPoolExecutor(max_workers=8) as pool:
            texts = list(pool.map(get, range(count)))
        assert texts == [f"teksts {i}" for i in range(count)]

    def test_readers_see_whole_entries(self) -> None:
        """Readers never observe an entry without text while writers replace it."""
        store = ValueStore(LocaleTag.parse("en"))
        store.put(TextEntry("x", "en", "v0"))
        stop = threading.Event()
        seen: list[str] = []

        def reader() -> None:
            while not stop.is_set():
                text, errors = store.format("x")
                assert errors == ()
                seen.append(text)

        threads = [threading.Thread(target=reader) for _ in range(4)]
        for thread in threads:
            thread.start()
        for i in range(1, 200):
            store.put(TextEntry("x", "en", f"v{i}"))
        stop.set()
        for thread in threads:
            thread.join()

        assert all(text.startswith("v") for text in seen)

    @given(st.lists(entry_ids(), min_size=1, max_size=20))
    def test_ids_match_puts(self, ids: list[str]) -> None:
        """ids() is exactly the set of IDs put."""
        store = ValueStore(LocaleTag.parse("fr"))
        for entry_id in ids:
            store.put(TextEntry(entry_id, "fr", "texte"))
        assert store.ids() == frozenset(ids)
