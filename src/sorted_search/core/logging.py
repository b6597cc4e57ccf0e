"""
Logging configuration for sorted-search.

This module provides a consistent logging setup across all package modules.
It uses Rich for console output when running interactively.

Configuration:
    LOG_LEVEL environment variable controls the logging level.
    Valid values: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: INFO)

Usage:
    from sorted_search.core.logging import get_logger

    logger = get_logger(__name__)
    logger.debug("Searching %d values", len(values))
"""

import logging
import os
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# Package-level logger name
LOGGER_NAME = "sorted_search"

# Default format for non-Rich handlers (e.g., piped output)
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logging_configured = False


def _get_log_level() -> int:
    """Return the logging level named by LOG_LEVEL, falling back to INFO."""
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    level: Optional[int] = None,
    use_rich: bool = True,
) -> None:
    """
    Configure the package-level logger.

    Runs on the first ``get_logger`` call (at import of the package's
    modules) unless called explicitly beforehand. Later calls are no-ops;
    use ``set_level`` to change the level afterwards, as ``--verbose`` does.

    Args:
        level: Logging level. If None, reads from LOG_LEVEL env var.
        use_rich: Whether to use RichHandler for console output.
                  Set to False when output is being piped or redirected.
    """
    global _logging_configured

    if _logging_configured:
        return

    log_level = level if level is not None else _get_log_level()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    logger.handlers.clear()

    is_interactive = sys.stdout.isatty() and use_rich

    if is_interactive:
        console = Console(stderr=True)
        handler = RichHandler(
            console=console,
            show_time=True,
            show_path=False,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            markup=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
        )

    handler.setLevel(log_level)
    logger.addHandler(handler)

    # Prevent propagation to root logger
    logger.propagate = False

    _logging_configured = True


def set_level(level: int) -> None:
    """
    Change the level of an already configured package logger.

    ``--verbose`` may arrive after something has logged and configured
    the logger at the default level, so the level is applied to the
    logger and all its handlers.
    """
    configure_logging(level=level)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the specified module.

    Returns a child logger of the package-level logger, configuring
    logging with default settings on first use.

    Args:
        name: Module name, typically __name__ from the calling module.
              Names outside the package namespace are prefixed.

    Returns:
        Configured logger instance.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Found %r at %d", target, index)
    """
    if not _logging_configured:
        configure_logging()

    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"

    return logging.getLogger(name)
