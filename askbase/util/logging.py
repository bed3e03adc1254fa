"""Logging configuration.

Modules log through the standard library with ``get_logger(__name__)``.
Records from the ``askbase`` loggers go to stdout and are also forwarded
to logfire, so they show up inside the span that was open when they were
written.
"""

import logging
import sys

import logfire

from askbase.config import Settings

PACKAGE_LOGGER = "askbase"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def log_level(settings: Settings) -> int:
    """Log level for the configured environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Safe to call more than once; the logfire handler is attached only once.

    Args:
        settings: Application settings
    """
    level = log_level(settings)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    if not any(
        isinstance(h, logfire.LogfireLoggingHandler) for h in package_logger.handlers
    ):
        package_logger.addHandler(logfire.LogfireLoggingHandler())

    get_logger(__name__).info(
        f"Logging configured: environment={settings.environment}, "
        f"level={logging.getLevelName(level)}"
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
