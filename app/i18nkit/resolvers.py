"""Locale resolution from the host environment and from HTTP headers.

Provides strategies for resolving the active locale from the process
environment (``LC_ALL``, ``LANG``...) or an Accept-Language header, and for
reducing a full locale tag to the language code used by the plural rules.
"""

import os
import re
from typing import Iterable, List, Mapping, Optional, Tuple

from i18nkit.configuration import settings
from i18nkit.logging import get_module_logger

logger = get_module_logger()

# Checked in order, as by gettext.
ENVIRONMENT_VARIABLES = ("LC_ALL", "LC_MESSAGES", "LANG", "LANGUAGE")

_NEUTRAL_LOCALES = {"c", "posix"}
_TAG_SEPARATORS = re.compile(r"[-_.@]")


def normalize_locale(locale: Optional[str]) -> str:
    """Reduce a locale tag to its lowercase language code.

    ``"fr_FR.UTF-8"`` -> ``"fr"``, ``"pt-BR"`` -> ``"pt"``, ``"EN"`` -> ``"en"``.
    Empty or missing input gives ``""``.
    """
    if not locale:
        return ""
    return _TAG_SEPARATORS.split(locale.strip(), 1)[0].lower()


def parse_accept_language(accept_language: str) -> List[Tuple[str, float]]:
    """Parse an Accept-Language header into (language range, quality) pairs.

    ``"en-US,en;q=0.9,fr-FR;q=0.8"`` -> ``[("en-US", 1.0), ("en", 0.9), ("fr-FR", 0.8)]``.
    Unparseable quality values count as 1.0.
    """
    preferences = []
    for part in accept_language.split(","):
        lang_range = part.split(";")[0].strip()
        if not lang_range:
            continue
        quality = 1.0

        if ";" in part and "q=" in part:
            try:
                quality = float(part.split("q=")[1])
            except ValueError:
                quality = 1.0

        preferences.append((lang_range, quality))
    return preferences


class LocaleResolver:
    """Resolves the active locale from context sources.

    Fallback chain:
    1. Explicit request parameter (handled by callers)
    2. Accept-Language header (web context)
    3. Process environment (command line context)
    4. Default locale
    """

    def __init__(self, default_locale: Optional[str] = None):
        """Initialize locale resolver.

        Args:
            default_locale: Fallback locale when no preference is found.
                Defaults to settings.i18n.default_locale.
        """
        self.default_locale = default_locale or settings.i18n.default_locale
        self.log = logger.bind(default_locale=self.default_locale)

    def resolve_from_environment(
        self,
        environ: Optional[Mapping[str, str]] = None,
    ) -> str:
        """Resolve the locale of the host environment.

        Args:
            environ: Environment mapping (default: os.environ).

        Returns:
            Language code of the first locale variable set to something other
            than ``C``/``POSIX``, or the default locale.
        """
        environ = os.environ if environ is None else environ

        for variable in ENVIRONMENT_VARIABLES:
            # LANGUAGE may hold a colon-separated priority list.
            value = (environ.get(variable) or "").split(":")[0]
            language = normalize_locale(value)
            if language and language not in _NEUTRAL_LOCALES:
                self.log.debug(
                    "resolved_from_environment", variable=variable, locale=language
                )
                return language

        self.log.debug("no_locale_in_environment")
        return self.default_locale

    def resolve_from_header(
        self,
        accept_language: Optional[str],
        supported_locales: Optional[Iterable[str]] = None,
    ) -> str:
        """Resolve locale from an HTTP Accept-Language header.

        Args:
            accept_language: Accept-Language header value.
            supported_locales: Locale codes to choose from. When omitted, the
                first language of the highest-quality range is returned.

        Returns:
            Resolved locale, or the default if none match.
        """
        if not accept_language:
            return self.default_locale

        preferences = sorted(
            parse_accept_language(accept_language), key=lambda x: x[1], reverse=True
        )

        if supported_locales is None:
            for lang_range, _ in preferences:
                if lang_range != "*":
                    return normalize_locale(lang_range)
            return self.default_locale

        supported = list(supported_locales)
        match = LanguageNegotiator.find_best_match(
            [lang_range for lang_range, _ in preferences], supported
        )
        if match is not None:
            self.log.debug("resolved_from_header", locale=match)
            return match

        self.log.debug("no_matching_locale_in_header", header=accept_language)
        return self.default_locale


class LanguageNegotiator:
    """Language range matching (e.g. "pt-BR" requested, only "pt" available)."""

    @staticmethod
    def matches_language(
        requested: str,
        available: str,
        strict: bool = False,
    ) -> bool:
        """Check if available language matches requested language.

        Args:
            requested: Requested language tag (e.g., "en-US").
            available: Available language tag (e.g., "en").
            strict: If True, requires exact match. If False, allows language-only match.

        Returns:
            True if languages match.
        """
        if requested.lower() == available.lower():
            return True

        if strict:
            return False

        return normalize_locale(requested) == normalize_locale(available)

    @staticmethod
    def find_best_match(
        requested: Iterable[str],
        available: List[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Find best matching language from available options.

        Args:
            requested: Requested language tags in preference order.
            available: Available language tags.
            default: Returned if nothing matches.

        Returns:
            Best matching language from available, or default.
        """
        for req_lang in requested:
            for avail_lang in available:
                if LanguageNegotiator.matches_language(req_lang, avail_lang, strict=True):
                    return avail_lang

            for avail_lang in available:
                if LanguageNegotiator.matches_language(req_lang, avail_lang, strict=False):
                    return avail_lang

        return default
