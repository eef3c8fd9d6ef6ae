"""Configuration module - public API.

Centralized configuration for i18nkit using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Locale settings class (for testing)

Example:
    ```python
    from i18nkit.configuration import settings

    default_locale = settings.i18n.default_locale

    if settings.is_production:
        # Production-specific logic...
    ```
"""

from i18nkit.configuration.base import I18nSettings
from i18nkit.configuration.settings import Settings, settings

__all__ = ["Settings", "I18nSettings", "settings"]
