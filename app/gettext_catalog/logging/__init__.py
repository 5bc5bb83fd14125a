"""Structured logging infrastructure.

Public API:
    - configure_logging(): Opt-in logging setup for applications
    - get_module_logger(): Get a logger for the calling module
"""

from gettext_catalog.logging.setup import configure_logging, get_module_logger

__all__ = [
    "configure_logging",
    "get_module_logger",
]
