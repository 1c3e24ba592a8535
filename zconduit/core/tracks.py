"""Recorders for the iterates visited by an algorithm.

The tracker is picked once when an iterator is built. ``NullTracks`` keeps the
hot loop free of any branching on a verbosity flag.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Tuple


class AbstractTracks(ABC):
    """Interface for step loggers."""

    @abstractmethod
    def log_step(self, state: Any, init: bool = False) -> None:
        """Record the current iterate of ``state``."""


class NullTracks(AbstractTracks):
    """Tracker that records nothing."""

    def log_step(self, state: Any, init: bool = False) -> None:
        return None


class Tracks(AbstractTracks):
    """Append-only log of ``(x, f(x))`` pairs."""

    def __init__(self) -> None:
        self.xs: List[Any] = []
        self.fs: List[Any] = []

    def log_step(self, state: Any, init: bool = False) -> None:
        self.xs.append(state.x_cur)
        self.fs.append(state.f_cur)

    def __len__(self) -> int:
        return len(self.xs)

    def __iter__(self) -> Iterator[Tuple[Any, Any]]:
        return iter(zip(self.xs, self.fs))

    def __repr__(self) -> str:
        return f"Tracks(n={len(self)})"


__all__ = ["AbstractTracks", "NullTracks", "Tracks"]
