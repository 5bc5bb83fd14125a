"""Catalog store: domain -> locale -> key -> Translation."""

import threading
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from gettext_catalog.i18n.exceptions import InvalidArgumentError
from gettext_catalog.i18n.locales import normalize_locale
from gettext_catalog.i18n.models import Translation, as_translation
from gettext_catalog.logging import get_module_logger

logger = get_module_logger()


class MessageCatalog:
    """In-memory store of translations for several domains and locales.

    Each (domain, locale) pair owns one key map that is replaced as a whole
    on every write. Values are converted to Singular / PluralForms at write
    time so their shape never changes afterwards.

    Attributes:
        messages: Nested dict {domain: {locale: {key: Translation}}}.
    """

    def __init__(self) -> None:
        self.messages: Dict[str, Dict[str, Dict[str, Translation]]] = {}
        self._lock = threading.RLock()

    def set_messages(
        self,
        domain: str,
        locale: str,
        messages: Mapping[str, Any],
    ) -> str:
        """Store the key map of one domain and locale.

        Args:
            domain: Message domain (e.g., "messages").
            locale: Locale tag, normalized before storing.
            messages: Mapping of key -> str (singular) or list of str (plural).

        Returns:
            The normalized locale the messages were stored under.

        Raises:
            InvalidArgumentError: If domain, locale or messages is empty, or
                a value is neither a string nor a list of strings.
        """
        locale = normalize_locale(locale) if locale else locale
        if not domain or not locale or not messages:
            raise InvalidArgumentError(
                "You must provide a domain, a locale and messages"
            )

        converted = {key: as_translation(value) for key, value in messages.items()}

        with self._lock:
            self.messages.setdefault(domain, {})[locale] = converted

        logger.info(
            "messages_registered",
            domain=domain,
            locale=locale,
            message_count=len(converted),
        )
        return locale

    def get(self, domain: str, locale: str, key: str) -> Optional[Translation]:
        """Return the entry stored for domain, locale and key, or None."""
        return self.messages.get(domain, {}).get(locale, {}).get(key)

    def lookup(
        self,
        domain: str,
        key: str,
        locales: Iterable[str],
        accept: Optional[Callable[[Translation], bool]] = None,
    ) -> Optional[Translation]:
        """Walk locales in order and return the first matching entry.

        Args:
            domain: Message domain.
            key: Qualified message key.
            locales: Candidate locales, most specific first.
            accept: Optional predicate; rejected entries are skipped and the
                walk continues with the next locale.

        Returns:
            First accepted Translation, or None if no locale has one.
        """
        for locale in locales:
            entry = self.get(domain, locale, key)
            if entry is None:
                continue
            if accept is None or accept(entry):
                return entry
        return None

    def has_message(self, domain: str, locale: str, key: str) -> bool:
        """Check if an entry exists for domain, locale and key."""
        return self.get(domain, locale, key) is not None

    def get_messages(self, domain: str, locale: str) -> Dict[str, Translation]:
        """Return a copy of the key map stored for domain and locale."""
        return dict(self.messages.get(domain, {}).get(normalize_locale(locale), {}))

    def domains(self) -> List[str]:
        """List domains holding at least one locale."""
        return list(self.messages.keys())

    def locales(self, domain: str) -> List[str]:
        """List locales stored under domain."""
        return list(self.messages.get(domain, {}).keys())

    def clear(self) -> None:
        """Drop every stored translation."""
        with self._lock:
            self.messages.clear()
        logger.info("catalog_cleared")
