"""Package logger for heapspf.

All modules log through children of the ``heapspf`` logger obtained with
`get_logger(__name__)`. The package logger owns at most one handler, installed
by `configure_logging`; calling it again swaps that handler instead of
stacking a second one. Records also propagate to the root logger so
applications and pytest's ``caplog`` see them.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "heapspf"

_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handler currently owned by the package logger, if any
_handler: Optional[logging.Handler] = None


def configure_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Install the package handler, replacing any previous one.

    Args:
        level: Level for the package logger and its handler.
        format_string: Record format; defaults to a timestamped one-line format.
        handler: Destination; defaults to a StreamHandler on stdout.

    Returns:
        The ``heapspf`` package logger.
    """
    global _handler

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _handler is not None:
        package_logger.removeHandler(_handler)

    _handler = handler if handler is not None else logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(format_string or _DEFAULT_FORMAT))
    _handler.setLevel(level)
    package_logger.addHandler(_handler)
    package_logger.setLevel(level)
    package_logger.propagate = True
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger inheriting the package level.

    Args:
        name: Module name, normally ``__name__`` of a heapspf module.
    """
    if _handler is None:
        configure_logging()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_log_level(level: int) -> None:
    """Change the level of the package logger and its handler."""
    if _handler is None:
        configure_logging(level)
        return
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
    _handler.setLevel(level)


def enable_debug_logging() -> None:
    """Show per-query SPF records."""
    set_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_log_level(logging.INFO)
