"""Shared fixtures for the i18nkit test suite."""

import pytest

from i18nkit.resolvers import ENVIRONMENT_VARIABLES


@pytest.fixture
def clean_locale_env(monkeypatch):
    """Remove locale variables from the process environment."""
    for variable in ENVIRONMENT_VARIABLES:
        monkeypatch.delenv(variable, raising=False)
    return monkeypatch
