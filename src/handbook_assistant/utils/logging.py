"""
Logging setup for the assistant's processes.

Library modules only call ``logging.getLogger(__name__)``; the API server and
the UI launcher attach the stderr handler once at startup.
"""

import logging
import sys

from handbook_assistant.exceptions import ConfigError

PACKAGE_LOGGER = "handbook_assistant"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """
    Get a logger that writes to stderr.

    A handler is attached only the first time a given name is requested.

    Args:
        name: Logger name (defaults to the package logger)

    Returns:
        Logger with a stderr handler
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger


def parse_log_level(level: int | str) -> int:
    """
    Resolve a level name such as ``"debug"`` or ``"WARNING"`` to its number.

    Raises:
        ConfigError: If the name is not a standard logging level
    """
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level).strip().upper(), None)
    if not isinstance(value, int):
        raise ConfigError(f"Unknown log level: {level!r}")
    return value


def set_log_level(level: int | str) -> None:
    """Set the level of the package logger."""
    logging.getLogger(PACKAGE_LOGGER).setLevel(parse_log_level(level))


def configure_logging(level: int | str = "INFO") -> logging.Logger:
    """Attach the stderr handler to the package logger and apply ``level``."""
    logger = get_logger(PACKAGE_LOGGER)
    set_log_level(level)
    return logger
