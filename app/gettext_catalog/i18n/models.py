"""Translation models for the i18n system.

Defines the stored translation variants and the plural selection result.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Tuple, Union

from gettext_catalog.i18n.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class Plural:
    """Outcome of a plural rule for one cardinal number.

    Attributes:
        nplurals: Number of plural forms the rule knows about.
        plural: Zero-based index of the selected form, None when undecided.
    """

    nplurals: int
    plural: Optional[int]

    @classmethod
    def coerce(cls, value: Any) -> "Plural":
        """Accept a Plural or a mapping with "nplurals" and "plural" keys.

        Args:
            value: Whatever a plural rule returned.

        Returns:
            Plural instance.

        Raises:
            InvalidArgumentError: If value has neither shape.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping) and "nplurals" in value:
            return cls(nplurals=value["nplurals"], plural=value.get("plural"))
        raise InvalidArgumentError(
            f"A plural rule must return nplurals and plural, got {value!r}"
        )


# Any callable (n) -> Plural, or a mapping shaped like one
PluralRule = Callable[[Any], Any]


@dataclass(frozen=True)
class Singular:
    """Single-template translation entry."""

    text: str

    def __bool__(self) -> bool:
        return bool(self.text)


@dataclass(frozen=True)
class PluralForms:
    """Plural translation entry, one template per plural index."""

    forms: Tuple[str, ...]

    def __bool__(self) -> bool:
        return bool(self.forms)

    def __len__(self) -> int:
        return len(self.forms)

    def __getitem__(self, index: int) -> str:
        return self.forms[index]


Translation = Union[Singular, PluralForms]


def as_translation(value: Any) -> Translation:
    """Convert a raw catalog value into its stored variant.

    Args:
        value: A string, a list/tuple of strings, or an existing variant.

    Returns:
        Singular for strings, PluralForms for sequences.

    Raises:
        InvalidArgumentError: For any other value type.
    """
    if isinstance(value, (Singular, PluralForms)):
        return value
    if isinstance(value, str):
        return Singular(value)
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return PluralForms(tuple(value))
    raise InvalidArgumentError(
        f"Invalid translation type {type(value).__name__}, expected str or list of str"
    )
