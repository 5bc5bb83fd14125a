"""i18n system - gettext-style message resolution.

Resolves message ids into localized, interpolated strings from a
multi-domain, multi-locale catalog.

Main components:
- locales: normalize_locale and expand_locale fallback chains
- models: Plural, Singular, PluralForms
- catalog: MessageCatalog store
- plurals: PluralRuleResolver and compile_plural_forms
- interpolation: strfmt placeholder substitution
- translator: Translator resolution engine
- loader: CatalogLoader, JSONCatalogLoader, YAMLCatalogLoader
- converter: po_to_catalog for gettext .po files
"""

from gettext_catalog.i18n.catalog import MessageCatalog
from gettext_catalog.i18n.exceptions import (
    I18nError,
    InvalidArgumentError,
    InvalidPluralFormError,
    UnsupportedPluralFormError,
)
from gettext_catalog.i18n.factory import create_translator
from gettext_catalog.i18n.interpolation import strfmt
from gettext_catalog.i18n.loader import (
    CatalogLoader,
    JSONCatalogLoader,
    YAMLCatalogLoader,
)
from gettext_catalog.i18n.locales import expand_locale, normalize_locale
from gettext_catalog.i18n.models import Plural, PluralForms, Singular
from gettext_catalog.i18n.plurals import (
    PluralRuleResolver,
    compile_plural_forms,
    default_plural_rule,
)
from gettext_catalog.i18n.translator import Translator

__all__ = [
    "CatalogLoader",
    "I18nError",
    "InvalidArgumentError",
    "InvalidPluralFormError",
    "JSONCatalogLoader",
    "MessageCatalog",
    "Plural",
    "PluralForms",
    "PluralRuleResolver",
    "Singular",
    "Translator",
    "UnsupportedPluralFormError",
    "YAMLCatalogLoader",
    "compile_plural_forms",
    "create_translator",
    "default_plural_rule",
    "expand_locale",
    "normalize_locale",
    "strfmt",
]
