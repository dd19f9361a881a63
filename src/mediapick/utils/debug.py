"""Logging helpers for MediaPick.

Library modules log through ``logging.getLogger(__name__)``, i.e. children of
the ``mediapick`` logger. :func:`setup_logger` gives that parent one handler
writing to stderr, so log lines never interleave with picker listings on
stdout. :func:`debug` and :func:`warn` are shorthands for the CLI and the
navigators.

Set ``MEDIAPICK_DEBUG=1`` to see navigation steps and mkvmerge exit codes;
otherwise only warnings and errors are shown.
"""

import logging
import os
import sys
from typing import Optional

LOGGER_NAME = "mediapick"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_logger: Optional[logging.Logger] = None


def debug_enabled() -> bool:
    return os.getenv("MEDIAPICK_DEBUG", "0").lower() in {"1", "true", "yes"}


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is at emit time (CliRunner swaps it)."""

    @property  # type: ignore[override]
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        pass


def setup_logger() -> logging.Logger:
    """Return the ``mediapick`` logger, attaching the stderr handler once.

    The level follows ``MEDIAPICK_DEBUG`` on every call.
    """
    global _logger
    if _logger is None:
        logger = logging.getLogger(LOGGER_NAME)
        if not logger.handlers:
            handler = _StderrHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)
        _logger = logger
    _logger.setLevel(logging.DEBUG if debug_enabled() else logging.WARNING)
    return _logger


def debug(msg: str) -> None:
    """Log a debug message if debugging is enabled."""
    if debug_enabled():
        setup_logger().debug(msg)


def warn(msg: str) -> None:
    """Log a warning message."""
    setup_logger().warning(msg)
