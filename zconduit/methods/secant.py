"""Derivative-free non-bracketing methods."""

from __future__ import annotations

from typing import Any

from ..core.methods import NonBracketingMethod, SecantMethod
from ..core.state import ZeroState


class Secant(SecantMethod):
    """Secant method, ``x_{n+1} = x_n - f(x_n) (x_n - x_{n-1}) / (f(x_n) - f(x_{n-1}))``.

    Superlinear (order ≈ 1.618) near a simple zero. A scalar guess ``x`` is
    paired with a point at relative distance about ``eps**(1/3)``; a pair of
    points is used as given.
    """

    def update_state(self, F: Any, state: ZeroState, options: Any) -> None:
        x0, x1 = state.x_prev, state.x_cur
        f0, f1 = state.f_prev, state.f_cur
        x = x1 - f1 * (x1 - x0) / (f1 - f0)
        fx = F(x)
        state.increment_fnevals(F.evals_per_call)
        state.x_prev, state.f_prev = x1, f1
        state.x_cur, state.f_cur = x, fx


Order1 = Secant


class Steffensen(NonBracketingMethod):
    """Steffensen's method, ``x_{n+1} = x_n - f(x_n)**2 / (f(x_n + f(x_n)) - f(x_n))``.

    Quadratic near a simple zero without derivatives, at two evaluations per
    step.
    """

    def update_state(self, F: Any, state: ZeroState, options: Any) -> None:
        x1, f1 = state.x_cur, state.f_cur
        slope = (F(x1 + f1) - f1) / f1
        x = x1 - f1 / slope
        fx = F(x)
        state.increment_fnevals(2 * F.evals_per_call)
        state.x_prev, state.f_prev = x1, f1
        state.x_cur, state.f_cur = x, fx


Order2 = Steffensen


__all__ = ["Order1", "Order2", "Secant", "Steffensen"]
