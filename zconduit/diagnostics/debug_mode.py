"""Debug mode management for zconduit.

Debug mode is a single process-wide flag. It is read when an iterator is
built and when :func:`zconduit.find_zero` finishes, and changes two things:

* :func:`zconduit.init` attaches a recording
  :class:`~zconduit.core.tracks.Tracks` unless a recording tracker was passed
  explicitly. An explicit :class:`~zconduit.core.tracks.NullTracks` is
  replaced as well, so every iterate is kept for inspection.
* :func:`zconduit.find_zero` logs the rendered trace on the
  ``zconduit.core.problem`` logger at ``DEBUG`` level when ``verbose`` is not
  set. Nothing appears unless that level is enabled, for instance with
  :func:`zconduit.logging.configure_logging`.

Iterates, stopping decisions and evaluation counts are the same with and
without debug mode.

The initial value comes from the ``ZCONDUIT_DEBUG`` environment variable at
import time; ``1``, ``true``, ``yes`` and ``on`` (any case) enable it. Use
:func:`set_debug_enabled` or :func:`debug_context` to change it at run time.
The flag is a module global shared by all threads, not a per-thread or
per-call setting.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "ZCONDUIT_DEBUG"
_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in (
    "1",
    "true",
    "yes",
    "on",
)


def is_debug_enabled() -> bool:
    """
    Return whether zconduit debug mode is currently enabled.

    Debug mode can be toggled via set_debug_enabled(...) or the
    ZCONDUIT_DEBUG environment variable.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Globally enable or disable zconduit debug mode."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Context manager to temporarily enable or disable debug mode.

    Example
    -------
    >>> from zconduit import find_zero
    >>> import math
    >>> with debug_context(True):
    ...     x = find_zero(math.sin, 3.0)
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
