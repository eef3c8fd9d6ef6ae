"""Fixtures for i18nkit.logging tests."""

import logging

import pytest
import structlog
from unittest.mock import Mock

from i18nkit.configuration import Settings


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    return settings


@pytest.fixture
def restore_logging():
    """Restore structlog defaults and the root logger after a test."""
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    structlog.reset_defaults()
    root.setLevel(level)
    root.handlers[:] = handlers
