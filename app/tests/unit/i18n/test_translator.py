"""Tests for i18nkit.translator module."""

import pytest

from i18nkit import CatalogError, TranslationKey, Translator
from i18nkit.configuration import settings
from tests.factories.i18n import make_translator


class TestTranslator:
    """Tests for Translator service."""

    @pytest.fixture
    def translator(self):
        """Create Translator with the sample catalogs."""
        return make_translator(locale="en", fallback_locale="en")

    def test_translator_initialization(self, translator):
        """Catalogs are flattened and registered per locale."""
        assert sorted(translator.get_available_locales()) == ["en", "fr", "ru"]
        assert translator.catalogs["en"].has_message("cart.apple")

    def test_defaults_from_settings(self):
        """Locale and fallback default to the configured values."""
        translator = Translator()
        assert translator.locale == settings.i18n.default_locale
        assert translator.fallback_locale == settings.i18n.fallback_locale
        assert translator.catalogs == {}

    def test_trans_interpolates(self, translator):
        """trans() substitutes placeholders."""
        assert translator.trans("cart.greeting", {"name": "ada"}) == "Hello ada"

    def test_trans_other_locale(self, translator):
        """trans() honours the locale argument and placeholder casing."""
        result = translator.trans("cart.greeting", {"name": "ada"}, locale="fr")
        assert result == "Bonjour Ada"

    def test_trans_with_translation_key(self, translator):
        """TranslationKey instances are accepted."""
        key = TranslationKey("cart", "greeting")
        assert translator.trans(key, {"name": "ada"}) == "Hello ada"

    def test_trans_longest_placeholder_first(self, translator):
        """Overlapping placeholder names resolve to the longest key."""
        result = translator.trans("cart.summary", {"count": 2, "count_total": 9})
        assert result == "9 items, 2 selected"

    def test_trans_missing_key_returns_key(self, translator):
        """A missing key is returned as-is."""
        assert translator.trans("cart.missing") == "cart.missing"

    def test_trans_choice_explicit_rules(self, translator):
        """trans_choice() applies interval rules and injects :count."""
        assert translator.trans_choice("cart.items", 0) == "Your cart is empty"
        assert translator.trans_choice("cart.items", 1) == "One item"
        assert translator.trans_choice("cart.items", 3) == "3 items"

    def test_trans_choice_plural_rules(self, translator):
        """trans_choice() uses the locale's plural form."""
        assert translator.trans_choice("cart.apple", 0, locale="fr") == "pomme"
        assert translator.trans_choice("cart.apple", 2, locale="fr") == "pommes"
        assert translator.trans_choice("cart.apple", 0) == "apples"

    @pytest.mark.parametrize(
        "count,expected",
        [(1, "1 яблоко"), (3, "3 яблока"), (11, "11 яблок"), (22, "22 яблока")],
    )
    def test_trans_choice_russian(self, translator, count, expected):
        """Three-form locales pick among three variants."""
        assert translator.trans_choice("cart.apple", count, locale="ru") == expected

    def test_trans_choice_normalizes_locale(self):
        """Regional locale codes use their language's plural rule."""
        translator = Translator(
            catalogs={"fr-CA": {"cart": {"apple": "pomme|pommes"}}},
            locale="fr-CA",
            fallback_locale="fr-CA",
        )
        assert translator.trans_choice("cart.apple", 0) == "pomme"
        assert translator.trans_choice("cart.apple", 2) == "pommes"

    def test_trans_choice_count_override(self, translator):
        """A supplied count replacement wins over the numeric count."""
        assert translator.trans_choice("cart.items", 3, {"count": "three"}) == "three items"

    def test_fallback_locale(self, translator):
        """Keys missing in the locale come from the fallback locale."""
        assert translator.trans_choice("cart.items", 0, locale="fr") == "Your cart is empty"
        assert translator.get_message("cart.items", locale="fr") is not None

    def test_get_message_missing(self, translator):
        """get_message() returns None when no catalog has the key."""
        assert translator.get_message("nope.nothing") is None

    def test_has(self, translator):
        """has() does not consult the fallback locale."""
        assert translator.has("cart.apple", "fr")
        assert not translator.has("cart.items", "fr")
        assert not translator.has("cart.apple", "de")

    def test_add_catalog_merges(self, translator):
        """add_catalog() merges into an existing catalog."""
        translator.add_catalog("en", {"cart.new": "New"})
        assert translator.has("cart.new")
        assert translator.has("cart.greeting")

    def test_add_catalog_rejects_bad_messages(self, translator):
        """Non-string leaves raise CatalogError."""
        with pytest.raises(CatalogError):
            translator.add_catalog("en", {"cart": {"bad": ["x"]}})
