"""Plural form selection per locale.

Returns the plural position to use for a locale and a count. Positions are
indexes into the locale's ordered list of plural forms, e.g. for ``en``
``0`` is the singular and ``1`` the plural, for ``ar`` ``0..5`` cover
zero, one, two, few, many and other.

Negative counts are evaluated on their absolute value, the CLDR operand
``n``. This deliberately departs from the Zend and Symfony tables, which
apply the predicates to the signed count: here ``-1`` is singular in ``en``
(form 0, where those tables give 1) and ``-21`` is form 0 in ``ru`` (where
they give 2).

The rules are derived from code of the Zend Framework (2010-09-25), which is
subject to the new BSD license (http://framework.zend.com/license/new-bsd).
Copyright (c) 2005-2010 Zend Technologies USA Inc. (http://www.zend.com)
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping


@dataclass(frozen=True)
class PluralRule:
    """A plural rule shared by a family of locales.

    Attributes:
        name: Family name, for diagnostics.
        forms: Number of plural forms; ``select`` returns ``0..forms-1``.
        select: Pure function mapping a non-negative count to a form index.
    """

    name: str
    forms: int
    select: Callable[[int], int]

    def __call__(self, count: int) -> int:
        return self.select(abs(count))


def _single(n: int) -> int:
    return 0


def _one_other(n: int) -> int:
    return 0 if n == 1 else 1


def _zero_one_other(n: int) -> int:
    return 0 if n in (0, 1) else 1


def _east_slavic(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if 2 <= n % 10 <= 4 and (n % 100 < 10 or n % 100 >= 20):
        return 1
    return 2


def _czech(n: int) -> int:
    if n == 1:
        return 0
    if 2 <= n <= 4:
        return 1
    return 2


def _irish(n: int) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    return 2


def _lithuanian(n: int) -> int:
    if n % 10 == 1 and n % 100 != 11:
        return 0
    if n % 10 >= 2 and (n % 100 < 10 or n % 100 >= 20):
        return 1
    return 2


def _slovenian(n: int) -> int:
    if n % 100 == 1:
        return 0
    if n % 100 == 2:
        return 1
    if n % 100 in (3, 4):
        return 2
    return 3


def _macedonian(n: int) -> int:
    return 0 if n % 10 == 1 else 1


def _maltese(n: int) -> int:
    if n == 1:
        return 0
    if n == 0 or 1 < n % 100 < 11:
        return 1
    if 10 < n % 100 < 20:
        return 2
    return 3


def _latvian(n: int) -> int:
    if n == 0:
        return 0
    if n % 10 == 1 and n % 100 != 11:
        return 1
    return 2


def _polish(n: int) -> int:
    if n == 1:
        return 0
    if 2 <= n % 10 <= 4 and (n % 100 < 12 or n % 100 > 14):
        return 1
    return 2


def _welsh(n: int) -> int:
    if n == 1:
        return 0
    if n == 2:
        return 1
    if n in (8, 11):
        return 2
    return 3


def _romanian(n: int) -> int:
    if n == 1:
        return 0
    if n == 0 or 0 < n % 100 < 20:
        return 1
    return 2


def _arabic(n: int) -> int:
    if n == 0:
        return 0
    if n == 1:
        return 1
    if n == 2:
        return 2
    if 3 <= n % 100 <= 10:
        return 3
    if 11 <= n % 100 <= 99:
        return 4
    return 5


SINGLE = PluralRule("single", 1, _single)
ONE_OTHER = PluralRule("one_other", 2, _one_other)
ZERO_ONE_OTHER = PluralRule("zero_one_other", 2, _zero_one_other)
EAST_SLAVIC = PluralRule("east_slavic", 3, _east_slavic)
CZECH = PluralRule("czech", 3, _czech)
IRISH = PluralRule("irish", 3, _irish)
LITHUANIAN = PluralRule("lithuanian", 3, _lithuanian)
SLOVENIAN = PluralRule("slovenian", 4, _slovenian)
MACEDONIAN = PluralRule("macedonian", 2, _macedonian)
MALTESE = PluralRule("maltese", 4, _maltese)
LATVIAN = PluralRule("latvian", 3, _latvian)
POLISH = PluralRule("polish", 3, _polish)
WELSH = PluralRule("welsh", 4, _welsh)
ROMANIAN = PluralRule("romanian", 3, _romanian)
ARABIC = PluralRule("arabic", 6, _arabic)

# Unknown locales use the universal single-form rule.
DEFAULT_RULE = SINGLE

_FAMILIES: Dict[PluralRule, List[str]] = {
    SINGLE: [
        "az", "bo", "dz", "id", "ja", "jv", "ka", "km", "kn", "ko", "ms",
        "th", "tr", "vi", "zh",
    ],
    ONE_OTHER: [
        "af", "bn", "bg", "ca", "da", "de", "el", "en", "eo", "es", "et",
        "eu", "fa", "fi", "fo", "fur", "fy", "gl", "gu", "ha", "he", "hu",
        "is", "it", "ku", "lb", "ml", "mn", "mr", "nah", "nb", "ne", "nl",
        "nn", "no", "om", "or", "pa", "pap", "ps", "pt", "so", "sq", "sv",
        "sw", "ta", "te", "tk", "ur", "zu",
    ],
    ZERO_ONE_OTHER: [
        "am", "bh", "fil", "fr", "gun", "hi", "hy", "ln", "mg", "nso",
        "xbr", "ti", "wa",
    ],
    EAST_SLAVIC: ["be", "bs", "hr", "ru", "sr", "uk"],
    CZECH: ["cs", "sk"],
    IRISH: ["ga"],
    LITHUANIAN: ["lt"],
    SLOVENIAN: ["sl"],
    MACEDONIAN: ["mk"],
    MALTESE: ["mt"],
    LATVIAN: ["lv"],
    POLISH: ["pl"],
    WELSH: ["cy"],
    ROMANIAN: ["ro"],
    ARABIC: ["ar"],
}

PLURAL_RULES: Mapping[str, PluralRule] = MappingProxyType(
    {locale: rule for rule, locales in _FAMILIES.items() for locale in locales}
)


def get_plural_rule(locale: str) -> PluralRule:
    """Return the rule for an exact locale code, or the default rule."""
    return PLURAL_RULES.get(locale, DEFAULT_RULE)


def get_plural_form(count: int, locale: str) -> int:
    """Return the plural position for a count in a locale.

    Args:
        count: The number being described.
        locale: Locale code such as ``"en"``, ``"ru"`` or ``"ar"``. Codes with
            no rule fall back to form 0.

    Returns:
        Index of the plural form, always in ``range(plural_form_count(locale))``.
    """
    return get_plural_rule(locale)(count)


def plural_form_count(locale: str) -> int:
    """Number of plural forms a locale distinguishes."""
    return get_plural_rule(locale).forms


def supported_locales() -> List[str]:
    """Locale codes that have an explicit plural rule, sorted."""
    return sorted(PLURAL_RULES)
