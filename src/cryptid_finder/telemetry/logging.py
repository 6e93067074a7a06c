"""Route the package loggers to a rich console handler."""

import logging

from rich.logging import RichHandler

PACKAGE_LOGGER = "cryptid_finder"


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Attach a single RichHandler to the package logger and set its level."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        logger.addHandler(RichHandler(show_path=False, rich_tracebacks=True))
    logger.propagate = False
    return logger
