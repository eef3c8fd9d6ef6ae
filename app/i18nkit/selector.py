"""Choose one variant of a pluralized message.

A pluralized message lists its variants separated by ``|``::

    "apple|apples"
    "{0} no apples|{1} one apple|[2,*] :count apples"
    "one: :count apple|other: :count apples"

Variants that start with an interval are explicit rules and win when the
count falls in the interval. The others are standard rules, picked by the
locale's plural form index.
"""

import re
from typing import List

from i18nkit.intervals import match_interval_prefix
from i18nkit.logging import get_module_logger
from i18nkit.plurals import get_plural_form

logger = get_module_logger()

# A single pipe separates variants; "||" is a literal pipe.
_SEGMENT_SEPARATOR = re.compile(r"(?<!\|)\|(?!\|)")
_RULE_LABEL = re.compile(r"^\w+:\s*(.*)$", re.DOTALL)


def split_segments(message: str) -> List[str]:
    """Split a message into its variants, unescaping ``||``."""
    return [part.replace("||", "|") for part in _SEGMENT_SEPARATOR.split(message)]


def strip_rule_label(segment: str) -> str:
    """Drop an optional ``label:`` prefix such as ``one:`` or ``other:``."""
    segment = segment.strip()
    match = _RULE_LABEL.match(segment)
    return match.group(1) if match else segment


def choose(message: str, count: int, locale: str) -> str:
    """Select the variant of ``message`` to use for ``count``.

    Args:
        message: Message with ``|``-separated variants.
        count: The number being described.
        locale: Locale code used for the plural form index.

    Returns:
        The selected variant, trimmed. If the plural index has no matching
        variant, the first standard variant is used; a message with no
        standard variants and no matching interval is returned whole.
    """
    standard_rules: List[str] = []

    for segment in split_segments(message):
        prefixed = match_interval_prefix(segment)
        if prefixed is None:
            standard_rules.append(strip_rule_label(segment))
            continue

        interval, text = prefixed
        if interval.contains(count):
            return text.strip()

    if not standard_rules:
        logger.debug("no_variant_matched", count=count, locale=locale)
        return message.strip()

    position = get_plural_form(count, locale)
    if position < len(standard_rules):
        return standard_rules[position]

    logger.debug(
        "plural_variant_missing",
        count=count,
        locale=locale,
        position=position,
        variant_count=len(standard_rules),
    )
    return standard_rules[0]
