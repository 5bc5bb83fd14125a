"""Configuration module - public API.

Centralized configuration management using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translator defaults (for testing/overrides)

Example:
    ```python
    from gettext_catalog.configuration import settings

    domain = settings.i18n.DEFAULT_DOMAIN
    ```
"""

from gettext_catalog.configuration.settings import (
    DEFAULT_CONTEXT_DELIMITER,
    I18nSettings,
    Settings,
    settings,
)

__all__ = ["DEFAULT_CONTEXT_DELIMITER", "I18nSettings", "Settings", "settings"]
