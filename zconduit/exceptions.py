"""Exception classes for zero finding."""

from __future__ import annotations

from typing import Any, Optional


class ZeroFindingError(Exception):
    """Base exception for zero-finding errors."""

    pass


class BracketError(ZeroFindingError, ValueError):
    """Raised when a bracket doesn't contain a sign change."""

    pass


class ConvergenceFailed(ZeroFindingError):
    """Raised by :func:`zconduit.find_zero` when no zero is identified.

    Attributes:
        x: Last iterate produced before the algorithm stopped.
        message: Diagnostic text accumulated in the iteration state.
        state: The final :class:`~zconduit.core.state.ZeroState`, if available.
    """

    def __init__(self, x: Any, message: str = "", state: Optional[Any] = None) -> None:
        self.x = x
        self.message = message
        self.state = state
        super().__init__(f"Stopped at: xn = {x}. {message}".rstrip())


__all__ = ["ZeroFindingError", "BracketError", "ConvergenceFailed"]
