"""Errors raised by i18nkit."""

from typing import Optional


class I18nError(Exception):
    """Base class for i18nkit errors."""


class IntervalParseError(I18nError, ValueError):
    """Raised when an interval expression does not conform to the grammar.

    Attributes:
        interval: the offending interval text
        position: character offset where parsing failed, if known
    """

    def __init__(self, interval: str, position: Optional[int] = None, reason: str = ""):
        message = f"Invalid interval: {interval}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.interval = interval
        self.position = position
        self.reason = reason


class CatalogError(I18nError, ValueError):
    """Raised when a message catalog has an unexpected shape."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
