"""Package-wide logging for misctools.

A single ``misctools`` logger writes to stdout; every module asks for a child of
it through :func:`get_logger` so records carry the dotted module name while the
handler is installed exactly once.
"""

import logging
import sys

from misctools.core.config import settings

__all__ = ["logger", "setup_logger", "get_logger"]

ROOT_LOGGER_NAME = "misctools"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return the package logger.

    Args:
        name: Logger name (the package name by default)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Falls back to
            ``settings.LOG_LEVEL``.
        format_string: Custom format string

    Returns:
        Configured logger instance

    Raises:
        ValueError: If ``level`` is not a known logging level name.
    """
    level = (level or settings.LOG_LEVEL).upper()
    numeric_level = logging.getLevelName(level)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: '{level}'")

    logger = logging.getLogger(name)

    # Configure once; repeated imports must not stack handlers
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            fmt=format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(numeric_level)
        logger.propagate = False

    return logger


def get_logger(module_name: str) -> logging.Logger:
    """Return a child of the package logger for ``module_name``.

    ``misctools.functional.records`` becomes ``misctools.functional.records``;
    names outside the package are nested under it.
    """
    if module_name == ROOT_LOGGER_NAME:
        return logger
    prefix = ROOT_LOGGER_NAME + "."
    suffix = module_name[len(prefix) :] if module_name.startswith(prefix) else module_name
    return logger.getChild(suffix)


logger = setup_logger()
