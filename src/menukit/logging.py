"""
menukit logging

Everything in the package logs through the ``menukit`` logger. Reported
menu errors are logged at ERROR with ``ERROR_PREFIX`` in front; element
creation, alias substitution and visibility recomputation are traced at
DEBUG, which the menu's debug switch turns on.
"""

import logging
from typing import IO, Optional

logger = logging.getLogger("menukit")

ERROR_PREFIX = "menukit » "

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    level: int = logging.WARNING,
    format_str: Optional[str] = None,
    date_format: Optional[str] = None,
    stream: Optional[IO[str]] = None,
):
    """
    Route menukit records to a single stream handler.

    Replaces any handler installed earlier and stops propagation to the
    root logger, so an application's own logging setup does not print
    menu traces twice.

    Args:
        level: Threshold for the menukit logger
        format_str: Record format (DEFAULT_FORMAT if omitted)
        date_format: Timestamp format (DEFAULT_DATE_FORMAT if omitted)
        stream: Destination (stderr if omitted)
    """
    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        logging.Formatter(
            format_str or DEFAULT_FORMAT,
            datefmt=date_format or DEFAULT_DATE_FORMAT,
        )
    )

    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False


def set_debug_enabled(enabled: bool):
    """Switch the menukit logger between DEBUG and WARNING."""
    logger.setLevel(logging.DEBUG if enabled else logging.WARNING)


def is_debug_enabled() -> bool:
    return logger.level <= logging.DEBUG


def log_reported_error(message: str) -> None:
    """Log a reported menu error with the menukit prefix."""
    logger.error(f"{ERROR_PREFIX}{message}")


# Warnings and reported errors only, until a menu turns debug on
configure_logging()
