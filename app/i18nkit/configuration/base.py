"""Shared base classes for settings modules."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ComponentSettings(BaseSettings):
    """Base class for component settings.

    All component settings should inherit from this class to ensure
    consistent configuration behavior (env file loading, case sensitivity).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class I18nSettings(ComponentSettings):
    """Locale configuration for message formatting.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale used when none is requested (default: en)
        I18N_FALLBACK_LOCALE: Locale searched when a key is missing (default: en)

    Example:
        ```python
        from i18nkit.configuration import settings

        locale = settings.i18n.default_locale
        ```
    """

    default_locale: str = Field(
        default="en",
        alias="I18N_DEFAULT_LOCALE",
        description="Locale used when no locale is requested",
    )
    fallback_locale: str = Field(
        default="en",
        alias="I18N_FALLBACK_LOCALE",
        description="Locale searched when a key is missing in the requested locale",
    )

    @field_validator("default_locale", "fallback_locale", mode="before")
    @classmethod
    def validate_locale(cls, v: str) -> str:
        """Strip whitespace and reject empty locale codes."""
        value = str(v).strip()
        if not value:
            raise ValueError("Locale code must not be empty")
        return value
