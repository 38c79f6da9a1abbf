"""Logging helpers for fieldtree.

Modules obtain their logger with ``get_logger(__name__)``. Nothing is
configured on import; applications call :func:`setup_logging` when they want
fieldtree's records on stderr.
"""

import logging

PACKAGE_LOGGER_NAME = "fieldtree"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
HANDLER_NAME = "fieldtree-stream"


def get_logger(name: str) -> logging.Logger:
    """Return a logger for a fieldtree module."""
    return logging.getLogger(name)


def setup_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Configure the package logger with a single stream handler.

    Calling this again only updates the level.

    Args:
        level: Level name (e.g. ``"DEBUG"``) or numeric level

    Returns:
        The configured package logger

    Raises:
        ValueError: If ``level`` is not a known level name
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: '{level}'")
        level = resolved
    logger.setLevel(level)

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
