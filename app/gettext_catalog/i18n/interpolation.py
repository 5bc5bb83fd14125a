"""Positional placeholder interpolation for translated templates."""

import re
from typing import Any

# "%%" is matched first so an escaped percent never starts a placeholder
_PLACEHOLDER = re.compile(r"%%|%(\d+)")


def strfmt(fmt: str, *args: Any) -> str:
    """Substitute ``%1``, ``%2``... with positional arguments.

    Placeholders are 1-based, may repeat and may appear in any order.
    ``%%`` produces a literal percent sign. A placeholder without a matching
    argument is replaced by an empty string.

    Examples:
        >>> strfmt("%1 dogs are in %2", 7, "the kitchen")
        '7 dogs are in the kitchen'
        >>> strfmt("foo %%1 bar")
        'foo %1 bar'
    """

    def _replace(match: "re.Match[str]") -> str:
        index = match.group(1)
        if index is None:
            return "%"
        position = int(index) - 1
        if 0 <= position < len(args):
            return str(args[position])
        return ""

    return _PLACEHOLDER.sub(_replace, fmt)


def remove_context(text: str, delimiter: str) -> str:
    """Strip a ``msgctxt + delimiter`` prefix from text, if present."""
    if delimiter in text:
        return text.partition(delimiter)[2]
    return text
