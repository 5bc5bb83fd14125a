"""Plural rule resolution.

Maps a locale and a cardinal number to a Plural(nplurals, plural) result,
using, in order of precedence:

1. an ad-hoc rule passed for a single lookup
2. a rule registered for the exact locale
3. Babel's CLDR plural rules for the locale

Plural-forms declarations (``nplurals=2; plural=0;``) are validated against
a restricted character class and compiled into constant rules. They are
never evaluated.
"""

import re
from typing import Any, Dict, Optional, Union

from babel import Locale as BabelLocale
from babel.core import UnknownLocaleError

from gettext_catalog.i18n.exceptions import (
    InvalidPluralFormError,
    UnsupportedPluralFormError,
)
from gettext_catalog.i18n.locales import expand_locale
from gettext_catalog.i18n.models import Plural, PluralRule
from gettext_catalog.logging import get_module_logger

logger = get_module_logger()

# CLDR category -> translation index. two/few share a slot; keep as is.
CATEGORY_INDEX: Dict[str, int] = {
    "zero": 0,
    "one": 0,
    "two": 1,
    "few": 1,
    "many": 2,
    "other": 1,
}

NATIVE_FALLBACK_LOCALE = "en"

_PLURAL_FORMS_RE = re.compile(
    r"\s*nplurals\s*=\s*[0-9]+\s*;\s*plural\s*=\s*(?:\s|[-?|&=!<>+*/%:;n0-9()])+"
)


def default_plural_rule(n: Any) -> Plural:
    """English rule used for untranslated messages: singular only for 1."""
    return Plural(nplurals=2, plural=1 if n != 1 else 0)


def _parse_literal_int(value: str) -> Optional[int]:
    """Parse value as a base-10 integer only if it round-trips unchanged."""
    try:
        parsed = int(value, 10)
    except ValueError:
        return None
    return parsed if str(parsed) == value else None


def compile_plural_forms(declaration: str) -> PluralRule:
    """Compile a plural-forms declaration into a plural rule.

    Only literal integers are supported for both clauses, so the compiled
    rule ignores n and always returns the same Plural.

    Args:
        declaration: Text such as ``"nplurals=1; plural=0;"``.

    Returns:
        Callable (n) -> Plural.

    Raises:
        InvalidPluralFormError: If the text contains anything outside the
            accepted character class or has trailing content.
        UnsupportedPluralFormError: If a clause is not a literal integer.
    """
    if not _PLURAL_FORMS_RE.fullmatch(declaration):
        raise InvalidPluralFormError(declaration)

    nplurals: Optional[int] = None
    plural: Optional[int] = None
    for part in (p.strip() for p in declaration.split(";")):
        if part.startswith("nplurals="):
            nplurals = _parse_literal_int(part[len("nplurals=") :].strip())
        elif part.startswith("plural="):
            plural = _parse_literal_int(part[len("plural=") :].strip())

    if nplurals is None or plural is None:
        raise UnsupportedPluralFormError(declaration)

    result = Plural(nplurals=nplurals, plural=plural)

    def _constant_rule(_n: Any) -> Plural:
        return result

    return _constant_rule


def _native_locale(locale: str) -> BabelLocale:
    for tag in expand_locale(locale):
        try:
            return BabelLocale.parse(tag, sep="-")
        except (UnknownLocaleError, ValueError):
            continue
    logger.debug(
        "unknown_native_locale", locale=locale, fallback=NATIVE_FALLBACK_LOCALE
    )
    return BabelLocale.parse(NATIVE_FALLBACK_LOCALE)


def native_plural(locale: str, n: Any) -> Plural:
    """Select a plural index with the CLDR rules of locale.

    nplurals is the number of categories the locale defines, "other"
    included. The category is mapped through CATEGORY_INDEX.
    """
    rule = _native_locale(locale).plural_form
    nplurals = len(rule.tags | {"other"})
    return Plural(nplurals=nplurals, plural=CATEGORY_INDEX.get(rule(n), 0))


class PluralRuleResolver:
    """Registry of per-locale plural rules with CLDR fallback.

    Attributes:
        rules: Registered rules by normalized locale.
    """

    def __init__(self) -> None:
        self.rules: Dict[str, PluralRule] = {}

    @staticmethod
    def to_rule(rule_or_declaration: Union[str, PluralRule]) -> PluralRule:
        """Return a callable rule, compiling declaration strings.

        Raises:
            InvalidPluralFormError: Declaration fails the syntax check.
            UnsupportedPluralFormError: Declaration is not literal integers.
        """
        if isinstance(rule_or_declaration, str):
            return compile_plural_forms(rule_or_declaration)
        return rule_or_declaration

    def register(
        self, locale: str, rule_or_declaration: Union[str, PluralRule]
    ) -> PluralRule:
        """Install the rule of a locale, replacing any previous one.

        Raises:
            InvalidPluralFormError: Declaration fails the syntax check.
            UnsupportedPluralFormError: Declaration is not literal integers.
        """
        rule = self.to_rule(rule_or_declaration)
        self.rules[locale] = rule
        return rule

    def unregister(self, locale: str) -> None:
        """Remove the rule of a locale, if any."""
        self.rules.pop(locale, None)

    def get_rule(self, locale: str) -> Optional[PluralRule]:
        """Return the rule registered for exactly this locale."""
        return self.rules.get(locale)

    def resolve(
        self,
        locale: str,
        n: Any,
        rule: Optional[PluralRule] = None,
    ) -> Plural:
        """Resolve the plural index for n in locale.

        Args:
            locale: Active locale. Only its own registered rule is used, not
                the rules of its fallback chain.
            n: Cardinal number.
            rule: Ad-hoc rule taking precedence over everything else.

        Returns:
            Plural result, not yet clamped to the available forms.
        """
        if rule is not None:
            return Plural.coerce(rule(n))

        registered = self.rules.get(locale)
        if registered is not None:
            return Plural.coerce(registered(n))

        return native_plural(locale, n)
