"""Structured logging for i18nkit using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_logger(): Get a logger instance with a specific name
    - get_module_logger(): Get a logger for the calling module

Example:
    from i18nkit.logging import get_module_logger

    logger = get_module_logger()
    logger.info("catalog_added", locale="fr")
"""

from i18nkit.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "get_module_logger",
]
