"""Structlog configuration and logger setup.

Importing the library leaves logging untouched. Module loggers wrap standard
library loggers under the ``gettext_catalog`` namespace, so records only show
up once the host application configures logging, either on its own or by
calling configure_logging().

Usage:
    from gettext_catalog.logging import configure_logging, get_module_logger

    # Optional, at application startup
    configure_logging()

    # In a library module
    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from gettext_catalog.configuration import settings


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging for an application using the library.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        is_production: Optional override for production mode. Defaults to
            settings.is_production if not provided. Controls JSON vs console output.

    Returns:
        Configured logger instance
    """
    prod_mode = is_production if is_production is not None else settings.is_production

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if not prod_mode:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    The logger resolves the structlog configuration lazily, so it follows a
    configure_logging() call made after the module was imported.

    Example:
        # In gettext_catalog/i18n/translator.py
        logger = get_module_logger()
        # context: {"component": "translator", "module_path": "gettext_catalog.i18n.translator"}
    """
    module_name = "gettext_catalog"
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(frame) if frame is not None else None
    if module is not None:
        module_name = module.__name__

    return structlog.wrap_logger(
        logging.getLogger(module_name),
        wrapper_class=structlog.stdlib.BoundLogger,
        component=module_name.split(".")[-1],
        module_path=module_name,
    )
