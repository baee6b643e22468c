"""Logging configuration for the inquiry template service."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "inquiry-templates"


def configure_logging(level: str | int = "INFO") -> None:
    """Send application logs to stdout at ``level``.

    Calling this more than once only updates the level; the stdout handler
    is installed a single time.
    """

    resolved = logging.getLevelName(level.upper()) if isinstance(level, str) else level
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved)

    if not any(handler.get_name() == _HANDLER_NAME for handler in root_logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(handler)

    logging.getLogger(__name__).debug(
        "Logging initialized at %s level", logging.getLevelName(resolved)
    )


__all__ = ["DATE_FORMAT", "LOG_FORMAT", "configure_logging"]
