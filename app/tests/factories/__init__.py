"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    CTX,
    make_i18n_settings,
    make_messages,
    make_structured_catalog,
    make_translator,
)

__all__ = [
    "CTX",
    "make_i18n_settings",
    "make_messages",
    "make_structured_catalog",
    "make_translator",
]
