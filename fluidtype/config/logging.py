"""Logging setup. The library never calls configure_logging() itself."""

from __future__ import annotations

import logging
import os
import sys

_LEVEL_ENV_VAR = "FLUIDTYPE_LOG_LEVEL"


def configure_logging(level: str | None = None) -> None:
    """Send log records to stdout at *level* (or $FLUIDTYPE_LOG_LEVEL, default WARNING)."""
    level_name = level or os.environ.get(_LEVEL_ENV_VAR, "WARNING")
    resolved = getattr(logging, level_name.upper(), logging.WARNING)

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt = "%Y-%m-%dT%H:%M:%S"

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))

    root = logging.getLogger("fluidtype")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolved)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)
