"""Tests for the lookup facade and Translator.

Python 3.13+.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

import pytest
from hypothesis import given

from fluent_i18n.catalog import Catalog, load_catalog
from fluent_i18n.lookup import Translator, lookup, render_builtin
from fluent_i18n.resolver import set_locale
from fluent_i18n.state import set_fallback_locale, set_raw_mode
from tests.strategies.locale import message_ids

LOCALES_DIR = Path(__file__).parent / "locales"


class TestLookupFound:
    """Keys present in the current locale or its chain."""

    def test_plain_message(self, catalog: Catalog) -> None:
        """A message without arguments."""
        set_locale("fr-FR")
        assert lookup(catalog, "greeting") == "Bonjour, le monde!"

    def test_interpolation(self, catalog: Catalog) -> None:
        """A named argument is interpolated."""
        set_locale("en-US")
        assert lookup(catalog, "welcome", {"name": "Orhun"}) == "Welcome, Orhun!"

    @pytest.mark.parametrize(
        ("locale", "count", "expected"),
        [
            ("en-US", 1, "You have 1 item"),
            ("en-US", 5, "You have 5 items"),
            ("fr-FR", 1, "Vous avez 1 élément"),
            ("fr-FR", 5, "Vous avez 5 éléments"),
            ("ja-JP", 5, "5個のアイテムがあります"),
        ],
    )
    def test_plurals(self, catalog: Catalog, locale: str, count: int, expected: str) -> None:
        """Plural categories follow the current locale."""
        set_locale(locale)
        assert lookup(catalog, "count-items", {"count": count}) == expected

    def test_default_locale_when_nothing_set(self, catalog: Catalog) -> None:
        """With no locale stored and no fallback, en-US is used."""
        assert lookup(catalog, "greeting") == "Hello, world!"

    def test_process_fallback_used_when_nothing_stored(self, catalog: Catalog) -> None:
        """The process fallback selects the locale before set_locale()."""
        set_fallback_locale("ja-JP")
        assert lookup(catalog, "greeting") == "こんにちは、世界！"

    def test_missing_translation_falls_back_to_english(self, catalog: Catalog) -> None:
        """Keys missing in French come from the catalog fallback."""
        set_locale("fr-FR")
        assert lookup(catalog, "missing-in-other") == "This message only exists in English"

    def test_unknown_locale_renders_fallback(self, catalog: Catalog) -> None:
        """A well-formed locale nobody translates into still renders."""
        set_locale("unknown-locale")
        assert lookup(catalog, "greeting") == "Hello, world!"

    def test_path_argument(self, catalog: Catalog) -> None:
        """Paths are accepted as arguments."""
        set_locale("en-US")
        args = {"context": "reading", "path": PurePosixPath("/etc/app.conf")}
        assert lookup(catalog, "error-io-path", args) == "I/O error while reading: /etc/app.conf"

    def test_invalid_utf8_path_argument(self, catalog: Catalog) -> None:
        """Undecodable path bytes are replaced, not fatal."""
        set_locale("en-US")
        args = {"context": "writing", "path": b"/tmp/caf\xe9"}
        assert lookup(catalog, "error-io-path", args) == "I/O error while writing: /tmp/caf�"

    def test_none_argument(self, catalog: Catalog) -> None:
        """None is an explicit absent value, not a missing argument."""
        set_locale("en-US")
        assert lookup(catalog, "selected-file", {"path": None}) == "No file selected"

    def test_pairs_last_write_wins(self, catalog: Catalog) -> None:
        """Duplicate argument names keep the last value."""
        set_locale("en-US")
        args = [("name", "Orhun"), ("name", "Ayşe")]
        assert lookup(catalog, "welcome", args) == "Welcome, Ayşe!"


class TestLookupFailSoft:
    """lookup() always returns a string."""

    def test_missing_key(self, catalog: Catalog) -> None:
        """Keys missing everywhere produce a diagnostic naming the key."""
        set_locale("en-US")
        assert lookup(catalog, "no-such-key") == 'Unknown localization key: "no-such-key"'

    def test_french_only_key_not_found_from_english(self, catalog: Catalog) -> None:
        """The catalog fallback never searches other locales."""
        set_locale("en-US")
        assert lookup(catalog, "only-in-french") == (
            'Unknown localization key: "only-in-french"'
        )

    def test_unconvertible_argument(
        self, catalog: Catalog, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Arguments without a catalog representation yield {???}."""
        set_locale("en-US")
        with caplog.at_level(logging.WARNING, logger="fluent_i18n.lookup"):
            assert lookup(catalog, "welcome", {"name": object()}) == "{???}"
        assert "Invalid arguments for 'welcome'" in caplog.text

    def test_missing_argument_visible(self, catalog: Catalog) -> None:
        """A missing argument does not hide the rest of the message."""
        set_locale("en-US")
        assert lookup(catalog, "welcome", {}) == "Welcome, {$name}!"

    def test_missing_argument_in_fallback_message(self) -> None:
        """A message from the fallback locale with a missing argument still renders."""
        catalog = Catalog(fallback="en-US")
        catalog.add_resource("en-US", "saved-to = Saved { $count } file(s) to { $path }")
        set_locale("fr-FR")
        t = Translator(catalog)
        assert t("saved-to", count=2) == "Saved 2 file(s) to {$path}"
        assert t("saved-to") == "Saved {$count} file(s) to {$path}"

    @given(message_ids())
    def test_unknown_keys_never_raise(self, key: str) -> None:
        """Any identifier not in the catalog gives the diagnostic string."""
        empty = Catalog()
        assert lookup(empty, key) == f'Unknown localization key: "{key}"'


class TestRawMode:
    """Raw mode returns keys."""

    def test_returns_key(self, catalog: Catalog) -> None:
        """Translations are bypassed."""
        set_locale("fr-FR")
        set_raw_mode(True)
        assert lookup(catalog, "greeting") == "greeting"

    def test_ignores_arguments(self, catalog: Catalog) -> None:
        """Arguments are not interpolated or validated."""
        set_raw_mode(True)
        assert lookup(catalog, "welcome", {"name": object()}) == "welcome"

    def test_missing_key(self, catalog: Catalog) -> None:
        """Missing keys are returned as-is too."""
        set_raw_mode(True)
        assert lookup(catalog, "no-such-key") == "no-such-key"

    def test_switching_back(self, catalog: Catalog) -> None:
        """Disabling raw mode restores translations."""
        set_raw_mode(True)
        set_raw_mode(False)
        assert lookup(catalog, "greeting") == "Hello, world!"


class TestCatalogFallbackOverride:
    """A catalog loaded with a non-English fallback."""

    def test_french_fallback(self) -> None:
        """Keys and locales missing elsewhere resolve through French."""
        catalog = load_catalog(LOCALES_DIR, fallback="fr-FR")
        set_locale("de-DE")
        assert lookup(catalog, "greeting") == "Bonjour, le monde!"
        assert lookup(catalog, "only-in-french") == "Ceci est uniquement en français"

    def test_process_fallback_drives_default_locale(self) -> None:
        """Without set_locale(), the registered fallback is current."""
        catalog = load_catalog(LOCALES_DIR, fallback="fr-FR")
        assert lookup(catalog, "welcome", {"name": "Orhun"}) == "Bienvenue, Orhun!"


class TestTranslator:
    """Translator binds a catalog and accepts keyword arguments."""

    def test_call_without_args(self, catalog: Catalog) -> None:
        """t(key) formats in the current locale."""
        set_locale("ar-SA")
        assert Translator(catalog)("greeting") == "مرحبا بالعالم!"

    def test_keyword_arguments(self, catalog: Catalog) -> None:
        """Keyword arguments are message arguments."""
        set_locale("en-US")
        assert Translator(catalog)("welcome", name="Orhun") == "Welcome, Orhun!"

    def test_keywords_override_mapping(self, catalog: Catalog) -> None:
        """Keywords are applied after the positional arguments."""
        set_locale("en-US")
        t = Translator(catalog)
        assert t("welcome", {"name": "Orhun"}, name="Ayşe") == "Welcome, Ayşe!"
        assert t("welcome", [("name", "Orhun")], name="Ayşe") == "Welcome, Ayşe!"

    def test_key_argument_name_allowed(self, catalog: Catalog) -> None:
        """Message arguments may be called 'key' or 'args'."""
        set_locale("en-US")
        t = Translator(catalog)
        assert t("welcome", name="Orhun", key="k", args="a") == "Welcome, Orhun!"

    def test_catalog_and_repr(self, catalog: Catalog) -> None:
        """The bound catalog is exposed."""
        t = Translator(catalog)
        assert t.catalog is catalog
        assert repr(t) == f"Translator({catalog!r})"


class TestRenderBuiltin:
    """fluent-i18n's own message rendering."""

    def test_missing_builtin_key_uses_default(self) -> None:
        """render_builtin never produces the missing-key diagnostic."""
        assert render_builtin("no-such-error", default="plain text") == "plain text"

    def test_renders_in_current_locale(self) -> None:
        """Builtin messages follow the current locale."""
        set_locale("de-DE")
        result = render_builtin("error-locale-parse", {"locale": "x"}, default="-")
        assert result == 'Konnte die Spracheinstellung "x" nicht analysieren'
