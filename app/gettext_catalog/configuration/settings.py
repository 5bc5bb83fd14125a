"""gettext-catalog configuration settings - main aggregator."""

from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gettext_catalog.configuration.base import LibrarySettings

DEFAULT_CONTEXT_DELIMITER = "\x04"


class I18nSettings(LibrarySettings):
    """Defaults applied to every new Translator.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Active locale of new translators (default "en").
        I18N_DEFAULT_DOMAIN: Active message domain (default "messages").
        I18N_CONTEXT_DELIMITER: Separator between msgctxt and msgid (default EOT).
        I18N_CATALOG_DIR: Directory scanned by create_translator() for catalogs.
    """

    DEFAULT_LOCALE: str = Field(default="en", alias="I18N_DEFAULT_LOCALE")
    DEFAULT_DOMAIN: str = Field(default="messages", alias="I18N_DEFAULT_DOMAIN")
    CONTEXT_DELIMITER: str = Field(
        default=DEFAULT_CONTEXT_DELIMITER, alias="I18N_CONTEXT_DELIMITER"
    )
    CATALOG_DIR: Optional[str] = Field(default=None, alias="I18N_CATALOG_DIR")

    @field_validator("DEFAULT_LOCALE", "DEFAULT_DOMAIN", "CONTEXT_DELIMITER")
    @classmethod
    def _not_empty(cls, v: Any) -> Any:
        """Reject empty values, a translator cannot run without them."""
        if not v:
            raise ValueError("value must not be empty")
        return v


class Settings(BaseSettings):
    """gettext-catalog configuration settings.

    Environment Variables:
        PREFIX: Environment prefix, an empty prefix means production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from gettext_catalog.configuration import settings

        locale = settings.i18n.DEFAULT_LOCALE
        if settings.is_production:
            ...
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the library is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        if "i18n" not in kwargs:
            kwargs["i18n"] = I18nSettings()
        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the settings instance
settings = Settings()
