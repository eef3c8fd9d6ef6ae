"""Tests for i18nkit.catalog module."""

import pytest

from i18nkit.catalog import TranslationCatalog, TranslationKey, flatten
from i18nkit.errors import CatalogError
from tests.factories.i18n import make_translation_catalog, make_translation_key


class TestFlatten:
    """Tests for flatten()."""

    def test_flatten_nested(self):
        """Nested mappings become dotted paths."""
        nested = {"cart": {"empty": "Empty", "items": {"one": "One item"}}, "title": "Shop"}
        assert flatten(nested) == {
            "cart.empty": "Empty",
            "cart.items.one": "One item",
            "title": "Shop",
        }

    def test_flatten_with_prefix(self):
        """A path prefix is prepended to every key."""
        assert flatten({"a": "x"}, "root") == {"root.a": "x"}

    def test_flatten_already_flat(self):
        """Flat mappings pass through unchanged."""
        assert flatten({"cart.empty": "Empty"}) == {"cart.empty": "Empty"}

    def test_flatten_empty(self):
        """An empty mapping flattens to an empty dict."""
        assert flatten({}) == {}

    def test_flatten_rejects_non_string_leaf(self):
        """Leaves must be strings."""
        with pytest.raises(CatalogError) as exc_info:
            flatten({"cart": {"count": 3}})
        assert exc_info.value.path == "cart.count"


class TestTranslationKey:
    """Tests for TranslationKey model."""

    def test_str_representation(self):
        """__str__() returns dot-separated path."""
        assert str(make_translation_key("cart", "items")) == "cart.items"

    def test_from_string(self):
        """from_string() splits on the first dot."""
        key = TranslationKey.from_string("cart.items.one")
        assert key.namespace == "cart"
        assert key.message_key == "items.one"

    @pytest.mark.parametrize("text", ["cart", "cart.", ".items"])
    def test_from_string_invalid(self, text):
        """from_string() requires a namespace and a key."""
        with pytest.raises(ValueError):
            TranslationKey.from_string(text)

    def test_key_is_hashable(self):
        """Frozen keys can be used in sets."""
        assert len({make_translation_key(), make_translation_key()}) == 1


class TestTranslationCatalog:
    """Tests for TranslationCatalog model."""

    def test_from_nested(self):
        """from_nested() flattens messages."""
        catalog = make_translation_catalog("en")
        assert catalog.locale == "en"
        assert catalog.get_message("cart.apple") == "apple|apples"

    def test_get_message_by_key(self):
        """Messages can be looked up by TranslationKey."""
        catalog = make_translation_catalog("en")
        assert catalog.get_message(TranslationKey("cart", "greeting")) == "Hello :name"
        assert catalog.get_message("cart.missing") is None

    def test_has_and_set_message(self):
        """set_message() adds messages visible to has_message()."""
        catalog = TranslationCatalog(locale="en")
        assert not catalog.has_message("a.b")
        catalog.set_message("a.b", "text")
        assert catalog.has_message("a.b")

    def test_merge_overrides(self):
        """Later catalogs override earlier entries."""
        base = TranslationCatalog(locale="en", messages={"a.b": "old", "a.c": "keep"})
        base.merge(TranslationCatalog(locale="en", messages={"a.b": "new"}))
        assert base.messages == {"a.b": "new", "a.c": "keep"}
