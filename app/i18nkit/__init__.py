"""i18nkit - locale-aware message formatting.

Main components:
- intervals: interval expressions guarding catalog messages ({0}, [2,*])
- plurals: per-locale plural form selection
- interpolation: case-preserving :placeholder substitution
- selector: choosing a variant of a "one|many" message
- catalog, resolvers, translator: in-memory catalogs, locale resolution and
  the Translator facade composing the above
"""

from i18nkit.catalog import TranslationCatalog, TranslationKey, flatten
from i18nkit.errors import CatalogError, I18nError, IntervalParseError
from i18nkit.interpolation import CaseStyle, apply_replacements, detect_case_style
from i18nkit.intervals import (
    DiscreteSet,
    Interval,
    Range,
    match_interval_prefix,
    parse_interval,
    test_interval,
)
from i18nkit.plurals import (
    PLURAL_RULES,
    PluralRule,
    get_plural_form,
    get_plural_rule,
    plural_form_count,
)
from i18nkit.resolvers import LanguageNegotiator, LocaleResolver, normalize_locale
from i18nkit.selector import choose
from i18nkit.translator import Translator

__all__ = [
    "apply_replacements",
    "CaseStyle",
    "detect_case_style",
    "test_interval",
    "parse_interval",
    "match_interval_prefix",
    "Interval",
    "DiscreteSet",
    "Range",
    "get_plural_form",
    "get_plural_rule",
    "plural_form_count",
    "PluralRule",
    "PLURAL_RULES",
    "choose",
    "flatten",
    "TranslationKey",
    "TranslationCatalog",
    "LocaleResolver",
    "LanguageNegotiator",
    "normalize_locale",
    "Translator",
    "I18nError",
    "IntervalParseError",
    "CatalogError",
]
