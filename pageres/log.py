"""Logging helpers that keep every pageres logger under one namespace."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

_ROOT = "pageres"
_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return the ``pageres.<name>`` logger (``name`` may already be namespaced)."""
    if name == _ROOT or name.startswith(_ROOT + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT}.{name}")


def setup_logging(level: str | int = logging.WARNING, stream: Optional[TextIO] = None) -> logging.Logger:
    """Configure the ``pageres`` root logger once and return it.

    Repeated calls only adjust the level; a second handler is never added.
    """
    logger = logging.getLogger(_ROOT)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logger.setLevel(level)

    if not any(getattr(h, "_pageres", False) for h in logger.handlers):
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._pageres = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
