"""Test data factories for i18n testing.

Provides deterministic test data builders for:
- TranslationKey
- TranslationCatalog
- Translator with sample catalogs
"""

from typing import Optional

from i18nkit import TranslationCatalog, TranslationKey, Translator


def make_translation_key(
    namespace: str = "cart", message_key: str = "items"
) -> TranslationKey:
    """Create a TranslationKey instance."""
    return TranslationKey(namespace=namespace, message_key=message_key)


def make_messages(locale: str = "en") -> dict:
    """Create nested sample messages for a locale.

    Args:
        locale: One of "en", "fr", "ru".

    Returns:
        Nested dict {namespace: {key: message}}.
    """
    messages = {
        "en": {
            "cart": {
                "items": "{0} Your cart is empty|{1} One item|[2,*] :count items",
                "apple": "apple|apples",
                "greeting": "Hello :name",
                "summary": ":count_total items, :count selected",
            },
        },
        "fr": {
            "cart": {
                "apple": "pomme|pommes",
                "greeting": "Bonjour :Name",
            },
        },
        "ru": {
            "cart": {
                "apple": ":count яблоко|:count яблока|:count яблок",
            },
        },
    }
    return messages[locale]


def make_translation_catalog(
    locale: str = "en",
    messages: Optional[dict] = None,
) -> TranslationCatalog:
    """Create a TranslationCatalog from nested messages."""
    if messages is None:
        messages = make_messages(locale)
    return TranslationCatalog.from_nested(locale, messages)


def make_translator(
    locale: str = "en",
    fallback_locale: str = "en",
    locales: tuple = ("en", "fr", "ru"),
) -> Translator:
    """Create a Translator preloaded with the sample catalogs."""
    return Translator(
        catalogs={code: make_messages(code) for code in locales},
        locale=locale,
        fallback_locale=fallback_locale,
    )
