"""Translation service: catalog lookup, plural selection and interpolation.

Composes the catalogs, the plural variant selector and the placeholder
interpolator for callers that already hold their messages in memory.
"""

from typing import Any, Dict, Mapping, Optional

from i18nkit.catalog import TranslationCatalog, TranslationKey, flatten
from i18nkit.configuration import settings
from i18nkit.interpolation import apply_replacements
from i18nkit.logging import get_module_logger
from i18nkit.resolvers import normalize_locale
from i18nkit.selector import choose

logger = get_module_logger()


class Translator:
    """Service for translating messages with placeholder interpolation.

    Attributes:
        catalogs: Loaded TranslationCatalogs by locale code.
        locale: Locale used when a call does not name one.
        fallback_locale: Locale searched when a key is missing.
    """

    def __init__(
        self,
        catalogs: Optional[Mapping[str, Mapping[str, Any]]] = None,
        locale: Optional[str] = None,
        fallback_locale: Optional[str] = None,
    ):
        """Initialize Translator.

        Args:
            catalogs: Optional locale -> messages (nested or flat).
            locale: Active locale (default: settings.i18n.default_locale).
            fallback_locale: Fallback locale (default: settings.i18n.fallback_locale).
        """
        self.locale = locale or settings.i18n.default_locale
        self.fallback_locale = fallback_locale or settings.i18n.fallback_locale
        self.catalogs: Dict[str, TranslationCatalog] = {}

        for catalog_locale, messages in (catalogs or {}).items():
            self.add_catalog(catalog_locale, messages)

        logger.info(
            "initialized_translator",
            locale=self.locale,
            fallback_locale=self.fallback_locale,
            locale_count=len(self.catalogs),
        )

    def add_catalog(self, locale: str, messages: Mapping[str, Any]) -> TranslationCatalog:
        """Add messages for a locale, merging into any existing catalog.

        Args:
            locale: Locale code.
            messages: Nested or already flattened messages.

        Returns:
            The locale's catalog after the merge.

        Raises:
            CatalogError: If messages contain non-string leaves.
        """
        incoming = TranslationCatalog(locale=locale, messages=flatten(messages))
        catalog = self.catalogs.setdefault(locale, TranslationCatalog(locale=locale))
        catalog.merge(incoming)
        logger.info("catalog_added", locale=locale, message_count=len(incoming.messages))
        return catalog

    def has(self, key: "TranslationKey | str", locale: Optional[str] = None) -> bool:
        """Check if a message exists for key in locale (no fallback)."""
        catalog = self.catalogs.get(locale or self.locale)
        return catalog.has_message(key) if catalog else False

    def get_available_locales(self) -> list:
        return list(self.catalogs.keys())

    def get_message(
        self, key: "TranslationKey | str", locale: Optional[str] = None
    ) -> Optional[str]:
        """Look up the raw message for key, falling back to fallback_locale.

        Returns:
            Message text, or None if the key is missing in both locales.
        """
        locale = locale or self.locale

        catalog = self.catalogs.get(locale)
        message = catalog.get_message(key) if catalog else None

        if message is None and locale != self.fallback_locale:
            fallback_catalog = self.catalogs.get(self.fallback_locale)
            message = fallback_catalog.get_message(key) if fallback_catalog else None

            if message is not None:
                logger.info(
                    "used_fallback_translation",
                    key=str(key),
                    requested_locale=locale,
                    fallback_locale=self.fallback_locale,
                )

        return message

    def trans(
        self,
        key: "TranslationKey | str",
        replacements: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> str:
        """Translate a key and interpolate its placeholders.

        A key missing from both the requested and fallback locales is
        returned as-is (after interpolation), so untranslated keys stay
        visible instead of breaking the caller.

        Args:
            key: Dotted key or TranslationKey.
            replacements: Placeholder values.
            locale: Locale to translate to (default: self.locale).

        Returns:
            Translated and interpolated message.
        """
        message = self._resolve(key, locale)
        return apply_replacements(message, replacements or {})

    def trans_choice(
        self,
        key: "TranslationKey | str",
        count: int,
        replacements: Optional[Mapping[str, Any]] = None,
        locale: Optional[str] = None,
    ) -> str:
        """Translate a pluralized key for a count.

        ``:count`` is available as a placeholder unless replacements
        already provide it.

        Args:
            key: Dotted key or TranslationKey.
            count: The number being described.
            replacements: Placeholder values.
            locale: Locale to translate to (default: self.locale).

        Returns:
            The selected variant, interpolated.
        """
        locale = locale or self.locale
        message = self._resolve(key, locale)
        variant = choose(message, count, normalize_locale(locale))

        values: Dict[str, Any] = {"count": count}
        values.update(replacements or {})
        return apply_replacements(variant, values)

    def _resolve(self, key: "TranslationKey | str", locale: Optional[str]) -> str:
        message = self.get_message(key, locale)
        if message is None:
            logger.warning(
                "translation_not_found",
                key=str(key),
                locale=locale or self.locale,
                fallback_locale=self.fallback_locale,
            )
            return str(key)
        return message
