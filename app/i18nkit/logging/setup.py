"""Structlog configuration and logger setup.

Importing i18nkit configures nothing: module loggers are lazy structlog
proxies that follow whatever configuration the host application installs.
Applications that want i18nkit's pipeline call ``configure_logging()``
explicitly at startup.

Usage:
    from i18nkit.logging import configure_logging, get_module_logger

    # At application startup (optional)
    configure_logging()

    logger = get_module_logger()
    logger.info("event_name", key="value")

Dependencies:
    - i18nkit.configuration.Settings
"""

import inspect
import logging
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from i18nkit.configuration import Settings
from i18nkit.configuration import settings as default_settings


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging for the whole process.

    Configures structlog with:
    - Context variable merging for correlation IDs
    - File/line/function callsite context
    - Exception formatting with stack traces
    - ConsoleRenderer in development, JSONRenderer in production

    Args:
        settings: Settings instance to read defaults from. Defaults to the
            module-level singleton.
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        is_production: Optional override for production mode. Controls JSON
            vs console output.

    Returns:
        Configured logger instance
    """
    settings = settings or default_settings

    prod_mode = is_production if is_production is not None else settings.is_production

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if not prod_mode:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


def _calling_module(depth: int = 2):
    frame = inspect.currentframe()
    for _ in range(depth):
        if frame is None:
            return None
        frame = frame.f_back
    if frame is None:
        return None
    return inspect.getmodule(frame)


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Get a lazy logger bound to a name.

    If name is provided, binds the logger to that name. Otherwise the
    calling module's name is used.

    Args:
        name: Optional logger name (typically __name__ in calling module)

    Returns:
        Logger proxy with context
    """
    if name:
        return structlog.stdlib.get_logger(logger_name=name)

    module = _calling_module()
    if module:
        return structlog.stdlib.get_logger(logger_name=module.__name__)

    return structlog.stdlib.get_logger(logger_name="unknown")


def get_module_logger() -> BoundLogger:
    """Get a lazy logger for the calling module with full path context.

    Binds ``component`` (last dotted segment) and ``module_path``. The
    logger resolves the structlog configuration when it first logs, not
    when it is created.

    Returns:
        Logger proxy with module context

    Example:
        # In i18nkit/selector.py
        logger = get_module_logger()
        # context: {"component": "selector", "module_path": "i18nkit.selector"}
    """
    module = _calling_module()
    if module:
        module_name = module.__name__
        return structlog.stdlib.get_logger(
            component=module_name.split(".")[-1],
            module_path=module_name,
        )

    return structlog.stdlib.get_logger(component="unknown")
