"""Structured logging for the localization package.

Loggers are lazy structlog proxies on the stdlib ``localization`` logger, so
they follow whatever configuration is in place when they first log. The
embedding application may configure structlog itself or call
``configure_logging()`` with the localization settings.

Usage:
    from localization.logging import get_module_logger

    logger = get_module_logger()
    logger.info("dictionary_built", locale_count=3)
"""

import inspect
import logging
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from localization.config import LocalizationSettings
from localization.config import settings as default_settings

LOGGER_NAME = "localization"


def configure_logging(
    settings: Optional[LocalizationSettings] = None,
    log_level: Optional[str] = None,
) -> BoundLogger:
    """Configure structlog for the localization logger.

    Console rendering outside production, JSON lines in production, both
    decided by ``settings.is_production``.

    Args:
        settings: Settings to read PREFIX and LOG_LEVEL from (default: the
            environment-loaded singleton).
        log_level: Optional override of settings.LOG_LEVEL.

    Returns:
        Logger bound to the localization logger name.
    """
    settings = settings or default_settings

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.is_production
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(format="%(message)s")
    logging.getLogger(LOGGER_NAME).setLevel(getattr(logging, level_name, logging.INFO))

    return get_logger()


def get_logger(**context) -> BoundLogger:
    """Get a lazy logger on the localization logger name."""
    return structlog.stdlib.get_logger(LOGGER_NAME, **context)


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Binds ``component`` (last segment of the module name) and
    ``module_path`` (full module name).
    """
    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame is not None else None
    module = inspect.getmodule(frame) if frame is not None else None

    if module is None:
        return get_logger(component="unknown")

    module_name = module.__name__
    return get_logger(component=module_name.split(".")[-1], module_path=module_name)
