"""Shared base class for settings modules."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class LibrarySettings(BaseSettings):
    """Base class for library-level settings.

    Ensures consistent configuration behavior (env file loading, case
    sensitivity) across every settings group.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
