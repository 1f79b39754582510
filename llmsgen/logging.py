"""Logging utilities for llmsgen commands."""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "llmsgen"
_CONSOLE_FORMAT = "[llmsgen] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the llmsgen hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def _console_level(verbose: bool, quiet: bool) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(
    *, verbose: bool = False, quiet: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route llmsgen records to stderr and, optionally, a UTF-8 log file.

    ``quiet`` limits the console to warnings such as output collisions; the
    log file always receives everything down to INFO (DEBUG with ``verbose``).
    """
    console_level = _console_level(verbose, quiet)
    file_level = logging.DEBUG if verbose else logging.INFO

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(min(console_level, file_level) if log_file is not None else console_level)
    logger.propagate = False

    # Repeated CLI invocations in one process must not stack handlers.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
