"""Logging setup for the volley_vision namespace.

Reports are printed to stdout, so log records go to stderr by default and
never interleave with the stats table.
"""

import logging
import sys
from pathlib import Path
from typing import TextIO

from volley_vision.core.config import LoggingSettings

LOGGER_NAMESPACE = "volley_vision"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its numeric value.

    Raises:
        ValueError: If the name is not a standard logging level
    """
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach console and optional file handlers to the package logger.

    Calling this again replaces the handlers from the previous call.

    Args:
        level: Log level name
        log_file: Optional path to a log file; parent directories are created
        stream: Console stream (stderr if None)

    Returns:
        The package logger
    """
    log_level = resolve_level(level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    package_logger.setLevel(log_level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    return package_logger


def configure_logging(settings: LoggingSettings) -> logging.Logger:
    """Set up logging from the ``LOG_*`` settings section."""
    return setup_logging(settings.level, settings.file)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger under the volley_vision namespace."""
    if name != LOGGER_NAMESPACE and not name.startswith(f"{LOGGER_NAMESPACE}."):
        name = f"{LOGGER_NAMESPACE}.{name}"
    return logging.getLogger(name)
