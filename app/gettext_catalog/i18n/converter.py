"""Convert gettext ``.po`` files into structured catalogs.

The output is the shape Translator.load_catalog() consumes: a header under
the empty key plus one entry per translated message.

Usage:
    po2catalog messages.fr.po messages.fr.json
"""

import json
import sys
from pathlib import Path
from typing import Any, BinaryIO, Dict, List, Optional

from babel.messages.pofile import read_po

from gettext_catalog.configuration import DEFAULT_CONTEXT_DELIMITER
from gettext_catalog.logging import get_module_logger

logger = get_module_logger()


def po_to_catalog(
    fileobj: BinaryIO,
    context_delimiter: str = DEFAULT_CONTEXT_DELIMITER,
) -> Dict[str, Any]:
    """Build a structured catalog from a ``.po`` file.

    Messages without any non-empty translation are skipped. Plural messages
    are keyed by their singular msgid and stored as a list when they hold
    more than one form.

    The plural-forms header is Babel's normalized rendering of the
    declaration. A file without Plural-Forms gets the CLDR default of its
    language.

    Args:
        fileobj: Open ``.po`` file.
        context_delimiter: Separator placed between msgctxt and msgid.

    Returns:
        Dict with "" -> {"language", "plural-forms"} and key -> str | list.
    """
    catalog = read_po(fileobj)
    data: Dict[str, Any] = {
        "": {
            "language": catalog.locale_identifier,
            "plural-forms": catalog.plural_forms,
        }
    }

    for message in catalog:
        if not message.id:
            continue

        key = message.id[0] if message.pluralizable else message.id
        if message.context:
            key = f"{message.context}{context_delimiter}{key}"

        forms = list(message.string) if message.pluralizable else [message.string]
        if not any(forms):
            continue

        data[key] = forms if len(forms) > 1 else forms[0]

    return data


def convert_po_file(source: Path, destination: Path) -> Dict[str, Any]:
    """Convert source ``.po`` file into a JSON catalog at destination."""
    with open(source, "rb") as f:
        data = po_to_catalog(f)

    with open(destination, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=4, ensure_ascii=False)

    logger.info(
        "po_file_converted",
        source=str(source),
        destination=str(destination),
        message_count=len(data) - 1,
    )
    return data


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point of the po2catalog console script."""
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 2:
        print("Usage: po2catalog pofile jsonfile", file=sys.stderr)
        return 2

    source, destination = Path(argv[0]), Path(argv[1])
    convert_po_file(source, destination)
    print(f"{source} converted to {destination}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
