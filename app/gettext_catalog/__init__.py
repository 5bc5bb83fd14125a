"""gettext-catalog: gettext-style translation resolution over in-memory catalogs."""

from logging import NullHandler, getLogger

from gettext_catalog.i18n import (
    InvalidArgumentError,
    InvalidPluralFormError,
    Translator,
    UnsupportedPluralFormError,
    create_translator,
)

__version__ = "1.0.0"

# Records stay silent unless the host application configures logging
getLogger(__name__).addHandler(NullHandler())

__all__ = [
    "InvalidArgumentError",
    "InvalidPluralFormError",
    "Translator",
    "UnsupportedPluralFormError",
    "create_translator",
]
