"""Logging utilities for zconduit.

Library modules log through ``get_logger(__name__)``. Nothing is emitted per
iteration; the engine reports finalization outcomes and method switches at
DEBUG and failed solves at INFO.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_DEFAULT_LEVEL = logging.WARNING
_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_loggers: dict[str, logging.Logger] = {}


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger under the ``zconduit`` namespace.

    Loggers are cached to avoid duplicate handlers.

    Args:
        name: Logger name (typically ``__name__``). If None, returns the
            package logger.

    Example:
        >>> from zconduit.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("bracket found")
    """
    if name is None:
        name = "zconduit"
    logger_name = name if name == "zconduit" or name.startswith("zconduit.") else f"zconduit.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def _as_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def set_log_level(level: int | str) -> None:
    """Set the level of every zconduit logger, current and future.

    Args:
        level: Logging level (``logging.DEBUG``...) or its name (``"DEBUG"``).
    """
    level = _as_level(level)
    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Reconfigure level, format and output stream of zconduit loggers.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses the default.
        stream: Output stream (default: sys.stderr).
    """
    level = _as_level(level)
    if stream is None:
        stream = sys.stderr
    formatter = logging.Formatter(format_string or _FORMAT)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level


__all__ = ["configure_logging", "get_logger", "set_log_level"]
