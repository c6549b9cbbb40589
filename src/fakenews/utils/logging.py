"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``fakenews`` namespace.
    - Allow optional verbose/debug modes for the CLI.

Notes/Edge cases:
    - The package logger carries a ``NullHandler`` so library use stays silent
      unless the application configures logging.
    - :func:`configure_logging` is idempotent: calling it twice does not stack
      handlers.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "fakenews"
DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"

_HANDLER_ATTR = "_fakenews_handler"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger nested under the package logger.

    ``name`` may be a module ``__name__`` (``"fakenews.generators.lines"``) or a
    short suffix (``"cli"``).  ``None`` returns the package logger itself.
    """

    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(
    level: int | str = logging.WARNING, fmt: str = DEFAULT_FORMAT
) -> logging.Logger:
    """Attach a single stream handler to the package logger and set ``level``."""

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"unknown log level: {level}")
        level = resolved

    handler = next((h for h in logger.handlers if getattr(h, _HANDLER_ATTR, False)), None)
    if handler is None:
        handler = logging.StreamHandler()
        setattr(handler, _HANDLER_ATTR, True)
        logger.addHandler(handler)
    # setStream() would flush the previous stream, which may already be closed.
    handler.stream = sys.stderr
    handler.setFormatter(logging.Formatter(fmt))
    logger.setLevel(level)
    return logger


__all__ = ["ROOT_LOGGER_NAME", "DEFAULT_FORMAT", "get_logger", "configure_logging"]
