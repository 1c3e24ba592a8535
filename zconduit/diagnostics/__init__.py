"""Diagnostics and debugging utilities for zconduit."""

from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)
from .trace import format_trace, show_trace

__all__ = [
    "debug_context",
    "format_trace",
    "is_debug_enabled",
    "set_debug_enabled",
    "show_trace",
]
