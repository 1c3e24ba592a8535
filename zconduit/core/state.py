"""Mutable iteration state shared by every zero-finding method.

The state holds

* the last two iterates ``x_prev``, ``x_cur`` and their values ``f_prev``,
  ``f_cur``,
* the accepted zero ``x_star``, ``f_star`` (NaN until a convergence flag is
  set),
* auxiliary storage ``aux_x``, ``aux_f`` for methods that keep more points,
* the counters ``steps`` and ``fnevals``,
* the convergence flags and an ordered list of diagnostics.

A state belongs to exactly one problem iterator. :meth:`ZeroState.reset`
clears flags and diagnostics so the numeric fields can be reused by another
method.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, List, TypeVar

from .. import numeric

T = TypeVar("T")
S = TypeVar("S")


class DiagnosticCode(Enum):
    """Reasons recorded while iterating or finalizing."""

    NAN_PRODUCED = "NaN produced by algorithm."
    INF_PRODUCED = "Inf produced by algorithm."
    X_CONVERGED = "x_n ≈ x_{n-1}."
    TOO_MANY_STEPS = "too many steps taken."
    TOO_MANY_FNEVALS = "too many function evaluations taken."
    SIGN_CHANGE = "change of sign at x_n identified."
    RELAXED = (
        "algorithm stopped early, but |f(x_n)| < ε^(1/3), "
        "where ε depends on x_n, rtol, and atol."
    )
    NOTE = ""


@dataclass(frozen=True)
class Diagnostic:
    """One entry of the diagnostic log."""

    code: DiagnosticCode
    detail: str = ""

    def render(self) -> str:
        if self.code is DiagnosticCode.NOTE:
            return self.detail
        if self.detail:
            return f"{self.code.value} ({self.detail})"
        return self.code.value


@dataclass
class ZeroState(Generic[T, S]):
    """Iteration state of a univariate zero-finding algorithm."""

    x_prev: T
    x_cur: T
    f_prev: S
    f_cur: S
    x_star: T
    f_star: S
    aux_x: List[T] = field(default_factory=list)
    aux_f: List[S] = field(default_factory=list)
    steps: int = 0
    fnevals: int = 0
    stopped: bool = False
    x_converged: bool = False
    f_converged: bool = False
    convergence_failed: bool = False
    messages: List[Diagnostic] = field(default_factory=list)

    @property
    def message(self) -> str:
        """Diagnostics rendered as text, in the order they were recorded."""
        return " ".join(filter(None, (d.render() for d in self.messages)))

    @property
    def converged(self) -> bool:
        return self.x_converged or self.f_converged

    def add_message(self, code: DiagnosticCode, detail: str = "") -> None:
        self.messages.append(Diagnostic(code, detail))

    def increment_steps(self, k: int = 1) -> None:
        if k < 0:
            raise ValueError("steps can only increase")
        self.steps += k

    def increment_fnevals(self, k: int = 1) -> None:
        if k < 0:
            raise ValueError("fnevals can only increase")
        self.fnevals += k

    def reset(self) -> None:
        """Clear convergence flags and diagnostics; numeric fields are kept."""
        self.stopped = False
        self.x_converged = False
        self.f_converged = False
        self.convergence_failed = False
        self.messages = []

    @property
    def x_type(self) -> Any:
        return numeric.dtype_of(self.x_cur)

    @property
    def f_type(self) -> Any:
        return numeric.dtype_of(self.f_cur)


def init_state(x0: Any, x1: Any, fx0: Any, fx1: Any, **fields: Any) -> ZeroState:
    """Build a state with ``x0`` as the previous and ``x1`` as the current iterate.

    ``x_star`` and ``f_star`` start as NaN in the types of ``x1`` and ``fx1``.
    Extra keyword arguments set the remaining fields (``aux_x``, ``fnevals``...).
    """
    x0, x1 = numeric.as_number(x0), numeric.as_number(x1)
    fx0, fx1 = numeric.as_number(fx0), numeric.as_number(fx1)
    state = ZeroState(
        x_prev=x0,
        x_cur=x1,
        f_prev=fx0,
        f_cur=fx1,
        x_star=numeric.nan_like(x1),
        f_star=numeric.nan_like(fx1),
    )
    for name, value in fields.items():
        if not hasattr(state, name):
            raise TypeError(f"ZeroState has no field {name!r}")
        setattr(state, name, value)
    return state


__all__ = ["DiagnosticCode", "Diagnostic", "ZeroState", "init_state"]
