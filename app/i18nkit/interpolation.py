"""Placeholder substitution for message templates.

Placeholders are a colon followed by a name, e.g. ``:name``. The casing of
the placeholder as written in the template decides the casing of the
inserted value::

    :NAME  -> value uppercased
    :Name  -> value with its first character uppercased
    :name  -> value inserted as given
"""

import re
from enum import Enum
from typing import Any, Mapping

PLACEHOLDER_SENTINEL = ":"


class CaseStyle(Enum):
    """Casing convention inferred from a placeholder token."""

    UPPER = "upper"
    TITLE = "title"
    VERBATIM = "verbatim"

    def apply(self, value: str) -> str:
        if self is CaseStyle.UPPER:
            return value.upper()
        if self is CaseStyle.TITLE:
            return value[:1].upper() + value[1:]
        return value


def _capitalize_first_letter(text: str) -> str:
    for index, char in enumerate(text):
        if char.isalpha():
            return text[:index] + char.upper() + text[index + 1 :]
    return text


def detect_case_style(token: str) -> CaseStyle:
    """Classify a matched placeholder (e.g. ``":Name"``) by its casing.

    Args:
        token: The placeholder text exactly as it appears in the message.

    Returns:
        UPPER if every letter is uppercase, TITLE if only the first letter
        needs to be uppercase to reproduce the token, VERBATIM otherwise.
    """
    if token == token.upper():
        return CaseStyle.UPPER
    if token == _capitalize_first_letter(token):
        return CaseStyle.TITLE
    return CaseStyle.VERBATIM


def apply_replacements(message: str, replacements: Mapping[str, Any]) -> str:
    """Substitute ``:key`` placeholders in a message.

    Keys are applied longest first so that ``:count_total`` is not consumed
    by ``:count``. Matching is case-insensitive and each match takes the
    casing of the placeholder it replaces. Placeholders without a value are
    left untouched and unused values are ignored.

    Args:
        message: Template text.
        replacements: Placeholder names (without the colon) to values.
            Values are converted with ``str()``.

    Returns:
        The message with placeholders replaced.
    """
    for key in sorted(replacements, key=len, reverse=True):
        if not key:
            continue
        value = str(replacements[key])
        pattern = re.compile(PLACEHOLDER_SENTINEL + re.escape(key), re.IGNORECASE)
        message = pattern.sub(
            lambda match: detect_case_style(match.group()).apply(value), message
        )
    return message
