"""Translation service resolving message ids into localized strings.

Core component of the i18n system: walks the locale fallback chain through
the catalog, picks plural forms and interpolates positional arguments.
"""

from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from gettext_catalog.configuration import I18nSettings, settings as app_settings
from gettext_catalog.i18n.catalog import MessageCatalog
from gettext_catalog.i18n.exceptions import I18nError, InvalidArgumentError
from gettext_catalog.i18n.interpolation import remove_context, strfmt
from gettext_catalog.i18n.locales import expand_locale, normalize_locale
from gettext_catalog.i18n.models import (
    Plural,
    PluralForms,
    PluralRule,
    Singular,
    Translation,
)
from gettext_catalog.i18n.plurals import PluralRuleResolver, default_plural_rule
from gettext_catalog.logging import get_module_logger

if TYPE_CHECKING:
    from gettext_catalog.i18n.loader import CatalogLoader

logger = get_module_logger()

HEADER_KEY = ""


class Translator:
    """Service for translating messages with gettext semantics.

    One instance owns its catalog, its plural rules and its active locale,
    domain and context delimiter. Instances never share state.

    Attributes:
        catalog: MessageCatalog holding every registered translation.
        plurals: PluralRuleResolver holding per-locale plural rules.
        default_domain: Domain load_catalog() uses when none is given.
        default_plural_rule: Rule used for untranslated plural lookups.
        loader: Optional CatalogLoader feeding load_catalogs().

    Usage:
        translator = Translator(locale="fr", messages={"apple": "pomme"})
        translator.gettext("apple")                 # "pomme"
        translator.ngettext("apple", "apples", 2)   # "apples"
    """

    def __init__(
        self,
        locale: Optional[str] = None,
        domain: Optional[str] = None,
        context_delimiter: Optional[str] = None,
        messages: Optional[Mapping[str, Any]] = None,
        plural_forms: Optional[Union[str, PluralRule]] = None,
        settings: Optional[I18nSettings] = None,
        loader: Optional["CatalogLoader"] = None,
    ):
        """Initialize Translator.

        Args:
            locale: Active locale (default: settings I18N_DEFAULT_LOCALE).
            domain: Active domain (default: settings I18N_DEFAULT_DOMAIN).
            context_delimiter: msgctxt separator (default: settings, EOT).
            messages: Initial key map for the active domain and locale.
            plural_forms: Declaration or rule for the initial locale. Invalid
                declarations are ignored the same way set_messages does.
            settings: I18nSettings to read defaults from.
            loader: CatalogLoader used by load_catalogs().
        """
        settings = settings or app_settings.i18n

        self.default_domain = settings.DEFAULT_DOMAIN
        self.locale = normalize_locale(locale or settings.DEFAULT_LOCALE)
        self.domain = domain or settings.DEFAULT_DOMAIN
        self.context_delimiter = context_delimiter or settings.CONTEXT_DELIMITER
        self.default_plural_rule: PluralRule = default_plural_rule

        self.catalog = MessageCatalog()
        self.plurals = PluralRuleResolver()
        self.loader = loader

        if messages:
            self.catalog.set_messages(self.domain, self.locale, messages)

        if plural_forms:
            self._install_plural_rule(self.locale, plural_forms)

        logger.info(
            "initialized_translator",
            locale=self.locale,
            domain=self.domain,
        )

    # Configuration

    def set_locale(self, locale: str) -> "Translator":
        """Change the active locale (normalized)."""
        self.locale = normalize_locale(locale)
        logger.info("locale_changed", locale=self.locale)
        return self

    def get_locale(self) -> str:
        """Return the active locale."""
        return self.locale

    def textdomain(self, domain: Optional[str] = None) -> Union[str, "Translator"]:
        """Get the active domain, or set it when domain is given.

        Returns:
            The active domain when called without argument, otherwise the
            translator itself for chaining.
        """
        if not domain:
            return self.domain
        self.domain = domain
        return self

    def set_context_delimiter(self, delimiter: str) -> "Translator":
        """Change the separator between msgctxt and msgid."""
        if not delimiter:
            raise InvalidArgumentError("The context delimiter must not be empty")
        self.context_delimiter = delimiter
        return self

    def set_default_plural_rule(self, rule: PluralRule) -> "Translator":
        """Change the rule applied to untranslated plural lookups."""
        self.default_plural_rule = rule
        return self

    def register_plural_rule(
        self, locale: str, rule_or_declaration: Union[str, PluralRule]
    ) -> "Translator":
        """Register a plural rule for a locale.

        Unlike set_messages, compilation errors propagate.

        Raises:
            InvalidPluralFormError: Declaration fails the syntax check.
            UnsupportedPluralFormError: Declaration is not literal integers.
        """
        self.plurals.register(normalize_locale(locale), rule_or_declaration)
        return self

    # Catalog population

    def set_messages(
        self,
        domain: str,
        locale: str,
        messages: Mapping[str, Any],
        plural_forms: Optional[Union[str, PluralRule]] = None,
    ) -> "Translator":
        """Register the translations of one domain and locale.

        Replaces any key map previously stored for the same pair.

        Args:
            domain: Message domain.
            locale: Locale tag (normalized).
            messages: Mapping of key -> str or list of str.
            plural_forms: Optional declaration string or callable rule for
                the locale. A declaration that fails to compile is ignored,
                leaving the locale on its native CLDR rule.

        Raises:
            InvalidArgumentError: If domain, locale or messages is missing.
        """
        locale = self.catalog.set_messages(domain, locale, messages)
        if plural_forms:
            self._install_plural_rule(locale, plural_forms)
        return self

    def load_catalog(
        self, data: Mapping[str, Any], domain: Optional[str] = None
    ) -> "Translator":
        """Import a structured catalog.

        The catalog must carry a header under the empty key with "language"
        and "plural-forms" entries; every other key is a message.

        Args:
            data: Structured catalog, e.g. the output of po_to_catalog().
            domain: Target domain (default: the default domain).

        Raises:
            InvalidArgumentError: If the header or one of its fields is missing.
        """
        headers = data.get(HEADER_KEY) if isinstance(data, Mapping) else None
        if (
            not isinstance(headers, Mapping)
            or not headers.get("language")
            or not headers.get("plural-forms")
        ):
            raise InvalidArgumentError(
                'Wrong catalog, it must have an empty key ("") with '
                '"language" and "plural-forms" information'
            )

        messages = {key: value for key, value in data.items() if key != HEADER_KEY}
        return self.set_messages(
            domain or self.default_domain,
            headers["language"],
            messages,
            headers["plural-forms"],
        )

    def load_catalogs(self) -> int:
        """Load every catalog of the attached loader.

        Returns:
            Number of catalog files loaded.

        Raises:
            InvalidArgumentError: If the translator has no loader.
        """
        if self.loader is None:
            raise InvalidArgumentError("No catalog loader attached to this translator")
        return self.loader.load_into(self)

    def _install_plural_rule(
        self, locale: str, plural_forms: Union[str, PluralRule]
    ) -> None:
        try:
            self.plurals.register(locale, plural_forms)
        except I18nError as e:
            logger.warning(
                "plural_forms_rejected",
                locale=locale,
                plural_forms=plural_forms,
                error=str(e),
            )

    # Lookups

    def gettext(self, msgid: str, *args: Any) -> str:
        """Translate a singular message."""
        return self.dcnpgettext(None, None, msgid, None, None, *args)

    def ngettext(
        self,
        msgid: str,
        msgid_plural: str,
        n: Any,
        *args: Any,
        plural_rule: Optional[Union[str, PluralRule]] = None,
    ) -> str:
        """Translate a message with a plural form selected by n."""
        return self.dcnpgettext(
            None, None, msgid, msgid_plural, n, *args, plural_rule=plural_rule
        )

    def pgettext(self, msgctxt: str, msgid: str, *args: Any) -> str:
        """Translate a singular message within a context."""
        return self.dcnpgettext(None, msgctxt, msgid, None, None, *args)

    def npgettext(
        self,
        msgctxt: str,
        msgid: str,
        msgid_plural: str,
        n: Any,
        *args: Any,
        plural_rule: Optional[Union[str, PluralRule]] = None,
    ) -> str:
        """Translate a plural message within a context."""
        return self.dcnpgettext(
            None, msgctxt, msgid, msgid_plural, n, *args, plural_rule=plural_rule
        )

    def dgettext(self, domain: str, msgid: str, *args: Any) -> str:
        """Translate a singular message from another domain."""
        return self.dcnpgettext(domain, None, msgid, None, None, *args)

    def dngettext(
        self,
        domain: str,
        msgid: str,
        msgid_plural: str,
        n: Any,
        *args: Any,
        plural_rule: Optional[Union[str, PluralRule]] = None,
    ) -> str:
        """Translate a plural message from another domain."""
        return self.dcnpgettext(
            domain, None, msgid, msgid_plural, n, *args, plural_rule=plural_rule
        )

    _ = gettext
    _n = ngettext
    _p = pgettext

    def dcnpgettext(
        self,
        domain: Optional[str],
        msgctxt: Optional[str],
        msgid: str,
        msgid_plural: Optional[str] = None,
        n: Any = None,
        *args: Any,
        plural_rule: Optional[Union[str, PluralRule]] = None,
    ) -> str:
        """Resolve, pluralize and interpolate a message.

        Args:
            domain: Domain to look in (default: the active domain).
            msgctxt: Optional disambiguation context.
            msgid: Source message, also the untranslated fallback.
            msgid_plural: Source plural message; makes this a plural lookup.
            n: Cardinal number selecting the plural form.
            *args: Values for the %1, %2... placeholders.
            plural_rule: Ad-hoc rule or declaration for this lookup only.

        Returns:
            The translated and interpolated message, or the interpolated
            source text when no usable translation exists.

        Raises:
            InvalidArgumentError: If msgid_plural is given without n.
            InvalidPluralFormError: If plural_rule is an invalid declaration.
            UnsupportedPluralFormError: If plural_rule is not literal integers.
        """
        domain = domain or self.domain
        is_plural = msgid_plural is not None

        if is_plural and n is None:
            raise InvalidArgumentError("A plural lookup requires n")

        rule: Optional[PluralRule] = None
        if plural_rule is not None:
            rule = self.plurals.to_rule(plural_rule)

        key = f"{msgctxt}{self.context_delimiter}{msgid}" if msgctxt else msgid
        wanted = PluralForms if is_plural else Singular

        entry = self.catalog.lookup(
            domain,
            key,
            expand_locale(self.locale),
            # Stored shape must match the request; empty entries are unusable
            accept=lambda t: isinstance(t, wanted) and bool(t),
        )

        if entry is None:
            logger.debug(
                "translation_not_found",
                key=key,
                domain=domain,
                locale=self.locale,
            )

        if not is_plural:
            template = entry.text if entry is not None else msgid
            return self.strfmt(self._strip_context(template), *args)

        if entry is None:
            forms = (msgid, msgid_plural)
            plural = Plural.coerce(self.default_plural_rule(n))
        else:
            forms = entry.forms
            plural = self.plurals.resolve(self.locale, n, rule)

        index = self._clamp(plural, len(forms), key)
        return self.strfmt(self._strip_context(forms[index]), *args)

    def has_translation(
        self,
        msgid: str,
        msgctxt: Optional[str] = None,
        domain: Optional[str] = None,
        plural: bool = False,
    ) -> bool:
        """Check if a usable translation exists along the active locale chain."""
        key = f"{msgctxt}{self.context_delimiter}{msgid}" if msgctxt else msgid
        wanted = PluralForms if plural else Singular
        entry: Optional[Translation] = self.catalog.lookup(
            domain or self.domain,
            key,
            expand_locale(self.locale),
            accept=lambda t: isinstance(t, wanted) and bool(t),
        )
        return entry is not None

    # Helpers

    def strfmt(self, fmt: str, *args: Any) -> str:
        """Interpolate %N placeholders, see interpolation.strfmt."""
        return strfmt(fmt, *args)

    def _strip_context(self, text: str) -> str:
        return remove_context(text, self.context_delimiter)

    def _clamp(self, plural: Plural, available: int, key: str) -> int:
        index = plural.plural
        if (
            index is None
            or index < 0
            or index > plural.nplurals
            or index >= available
        ):
            logger.debug(
                "plural_index_clamped",
                key=key,
                plural=index,
                nplurals=plural.nplurals,
                available=available,
            )
            return 0
        return index
