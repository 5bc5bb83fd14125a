"""Locale tag helpers: normalization and fallback chains."""

import re
from typing import List

_POSIX_SUFFIX = re.compile(r"[.@]")


def normalize_locale(locale: str) -> str:
    """Convert a locale tag to its hyphenated form.

    POSIX tags lose their encoding and variant suffix
    (``"pt_BR.UTF-8@euro"`` becomes ``"pt-BR"``).
    """
    locale = locale.replace("_", "-")
    match = _POSIX_SUFFIX.search(locale)
    if match:
        locale = locale[: match.start()]
    return locale


def expand_locale(locale: str) -> List[str]:
    """Build the fallback chain of a locale tag, most specific first.

    Args:
        locale: Hyphen-delimited locale tag (e.g., "de-CH-1996").

    Returns:
        The tag followed by each shorter prefix,
        e.g. ["de-CH-1996", "de-CH", "de"].
    """
    locales = [locale]
    i = locale.rfind("-")
    while i > 0:
        locale = locale[:i]
        locales.append(locale)
        i = locale.rfind("-")
    return locales
