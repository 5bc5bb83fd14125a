"""Custom exceptions for the i18n system.

Every concrete error also derives from ValueError so callers catching the
builtin keep working.
"""


class I18nError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            translator.load_catalog(data)
        except I18nError as e:
            logger.error("catalog_rejected", error=str(e))
    """

    pass


class InvalidArgumentError(I18nError, ValueError):
    """Raised when a registration or import call is missing required input.

    Example:
        >>> translator.set_messages("", "fr", {"apple": "pomme"})
        Traceback (most recent call last):
        ...
        InvalidArgumentError: You must provide a domain, a locale and messages
    """

    pass


class InvalidPluralFormError(I18nError, ValueError):
    """Raised when a plural-forms declaration fails the syntax check.

    The message embeds the rejected declaration verbatim.
    """

    def __init__(self, declaration: str):
        self.declaration = declaration
        super().__init__(f'The plural form "{declaration}" is not valid')


class UnsupportedPluralFormError(I18nError, ValueError):
    """Raised when a declaration is well-formed but not made of literal integers.

    Example:
        >>> compile_plural_forms("nplurals=2; plural=n>1;")
        Traceback (most recent call last):
        ...
        UnsupportedPluralFormError: Unsupported plural form nplurals=2; plural=n>1;
    """

    def __init__(self, declaration: str):
        self.declaration = declaration
        super().__init__(f"Unsupported plural form {declaration}")
