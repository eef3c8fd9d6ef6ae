"""In-memory message catalogs.

Catalogs hold already-parsed messages keyed by dotted path
(``"cart.items"``). Nested mappings are flattened on the way in.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from i18nkit.errors import CatalogError


def flatten(messages: Mapping[str, Any], path: Optional[str] = None) -> Dict[str, str]:
    """Flatten nested messages into a dotted-path mapping.

    Args:
        messages: Mapping whose values are strings or nested mappings.
        path: Prefix for the keys of this level.

    Returns:
        Single-level dict, e.g. ``{"cart": {"empty": "..."}}`` becomes
        ``{"cart.empty": "..."}``.

    Raises:
        CatalogError: If a leaf is neither a string nor a mapping.
    """
    flat: Dict[str, str] = {}
    for key, value in messages.items():
        flat_path = f"{path}.{key}" if path else str(key)

        if isinstance(value, str):
            flat[flat_path] = value
        elif isinstance(value, Mapping):
            flat.update(flatten(value, flat_path))
        else:
            raise CatalogError(
                f"Message at '{flat_path}' must be a string or a mapping, "
                f"got {type(value).__name__}",
                path=flat_path,
            )
    return flat


@dataclass(frozen=True)
class TranslationKey:
    """A dotted message key.

    Attributes:
        namespace: Top-level group (e.g. "cart").
        message_key: Remaining path within the namespace (e.g. "items.count").
    """

    namespace: str
    message_key: str

    def __str__(self) -> str:
        return f"{self.namespace}.{self.message_key}"

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create a TranslationKey from ``"namespace.key"``.

        Raises:
            ValueError: If key_string has no dot.
        """
        parts = key_string.split(".", 1)
        if len(parts) != 2 or not all(parts):
            raise ValueError(
                f"Translation key must be in format 'namespace.key': {key_string}"
            )
        return cls(namespace=parts[0], message_key=parts[1])


@dataclass
class TranslationCatalog:
    """Flat messages for one locale.

    Attributes:
        locale: Locale code the messages are written in.
        messages: Dotted path to message text.
    """

    locale: str
    messages: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_nested(cls, locale: str, messages: Mapping[str, Any]) -> "TranslationCatalog":
        return cls(locale=locale, messages=flatten(messages))

    def get_message(self, key: "TranslationKey | str") -> Optional[str]:
        return self.messages.get(str(key))

    def has_message(self, key: "TranslationKey | str") -> bool:
        return str(key) in self.messages

    def set_message(self, key: "TranslationKey | str", message: str) -> None:
        self.messages[str(key)] = message

    def merge(self, other: "TranslationCatalog") -> None:
        """Merge another catalog into this one; entries of ``other`` win."""
        self.messages.update(other.messages)
