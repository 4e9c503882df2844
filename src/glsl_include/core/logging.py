"""Stdlib logging setup for the glsl-include CLI.

Library modules only create ``logging.getLogger(__name__)`` loggers; handlers
are installed here, on the ``glsl_include`` package logger, by the CLI.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from glsl_include.core.utils.io import ensure_parent_dir

PACKAGE_LOGGER = "glsl_include"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_INSTALLED_HANDLER: logging.Handler | None = None


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(*, level: str = "WARNING", log_path: Optional[Path] = None) -> logging.Logger:
    """Route package logs to stderr, or to ``log_path`` when given.

    Stdout is never used, so merged output and JSON payloads stay clean.
    Calling again replaces the previously installed handler.
    """
    global _INSTALLED_HANDLER

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(_level_from_name(level))

    if _INSTALLED_HANDLER is not None:
        logger.removeHandler(_INSTALLED_HANDLER)
        _INSTALLED_HANDLER.close()
        _INSTALLED_HANDLER = None

    handler: logging.Handler
    if log_path is not None:
        resolved = Path(log_path).resolve()
        ensure_parent_dir(resolved)
        handler = logging.FileHandler(resolved, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    _INSTALLED_HANDLER = handler
    return logger


def reset_logging_for_tests() -> None:
    """Test-only: remove the installed handler."""
    global _INSTALLED_HANDLER
    logger = logging.getLogger(PACKAGE_LOGGER)
    if _INSTALLED_HANDLER is not None:
        logger.removeHandler(_INSTALLED_HANDLER)
        _INSTALLED_HANDLER.close()
    _INSTALLED_HANDLER = None
    logger.setLevel(logging.NOTSET)


__all__ = ["configure_logging", "reset_logging_for_tests"]
