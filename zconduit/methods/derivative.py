"""Classical methods using caller-supplied derivatives.

The function is given as a tuple ``(f, f')`` or ``(f, f', f'')``, or as a
single callable returning the packed values ``(f, f/f', f'/f'')``. The ratios
at ``x_cur`` are kept in ``aux_f``, with ``aux_x = [x_cur]`` recording the
point they belong to.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, Sequence

from .. import numeric
from ..core.methods import NonBracketingMethod, bracket_endpoints, is_bracket
from ..core.state import ZeroState, init_state


class DerivativeMethod(NonBracketingMethod):
    """Base for methods needing ``fn_argout - 1`` derivative ratios.

    A scalar guess is paired with one step of the method itself.
    """

    fn_argout = 2

    @abstractmethod
    def step(self, x: Any, ratios: Sequence[Any]) -> Any:
        """Next iterate from ``x`` and ``(f/f', f'/f'', ...)`` at ``x``."""

    def init_state(self, F: Any, x0: Any) -> ZeroState:
        if is_bracket(x0):
            a, b = bracket_endpoints(x0)
            va = F(a)
        else:
            a = numeric.as_number(x0)
            va = F(a)
            b = self.step(a, va[1:])
        vb = F(b)
        state = init_state(a, b, va[0], vb[0])
        state.aux_x = [state.x_cur]
        state.aux_f = list(vb[1:])
        state.increment_fnevals(2 * F.evals_per_call)
        return state

    def prepare_state(self, F: Any, state: ZeroState) -> None:
        if state.aux_x == [state.x_cur] and len(state.aux_f) == self.fn_argout - 1:
            return
        values = F(state.x_cur)
        state.increment_fnevals(F.evals_per_call)
        state.aux_x = [state.x_cur]
        state.aux_f = list(values[1:])

    def update_state(self, F: Any, state: ZeroState, options: Any) -> None:
        x = self.step(state.x_cur, state.aux_f)
        values = F(x)
        state.increment_fnevals(F.evals_per_call)
        state.x_prev, state.f_prev = state.x_cur, state.f_cur
        state.x_cur, state.f_cur = x, values[0]
        state.aux_x = [x]
        state.aux_f = list(values[1:])


class Newton(DerivativeMethod):
    """Newton's method, ``x_{n+1} = x_n - f(x_n)/f'(x_n)``.

    Quadratic near a simple zero. Pass ``(f, fp)`` or a function returning
    ``(f(x), f(x)/f'(x))``.
    """

    fn_argout = 2

    def step(self, x: Any, ratios: Sequence[Any]) -> Any:
        return x - ratios[0]


class Halley(DerivativeMethod):
    """Halley's method, cubic near a simple zero.

    ``x_{n+1} = x_n - Δ / (1 - Δ / (2 r))`` with ``Δ = f/f'`` and ``r = f'/f''``.
    """

    fn_argout = 3

    def step(self, x: Any, ratios: Sequence[Any]) -> Any:
        delta, r = ratios[0], ratios[1]
        return x - delta / (1 - delta / (2 * r))


class Schroder(DerivativeMethod):
    """Schröder's method, quadratic also at zeros of unknown multiplicity.

    ``x_{n+1} = x_n - Δ / (1 - Δ / r)`` with ``Δ = f/f'`` and ``r = f'/f''``.
    """

    fn_argout = 3

    def step(self, x: Any, ratios: Sequence[Any]) -> Any:
        delta, r = ratios[0], ratios[1]
        return x - delta / (1 - delta / r)


__all__ = ["DerivativeMethod", "Halley", "Newton", "Schroder"]
