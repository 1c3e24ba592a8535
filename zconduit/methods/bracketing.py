"""Bracketing methods.

Each method keeps ``(x_prev, x_cur)`` (Brent: ``(x_cur, aux_x[0])``) as an
interval whose endpoint values have opposite signs, with ``x_cur`` the most
recent (or best) point.

References:
    - Dowell & Jarratt, "A modified regula falsi method" (Illinois), BIT 1971
    - Anderson & Björk, "A new high order method of regula falsi type", BIT 1973
    - Brent, *Algorithms for Minimization without Derivatives* (1973), ch. 4
"""

from __future__ import annotations

import math
from typing import Any

from .. import numeric
from ..core.methods import BracketingMethod
from ..core.state import ZeroState


def _exhausted(state: ZeroState) -> None:
    # no representable point strictly inside the bracket
    if abs(state.f_prev) < abs(state.f_cur):
        state.x_prev, state.x_cur = state.x_cur, state.x_prev
        state.f_prev, state.f_cur = state.f_cur, state.f_prev
    state.x_converged = True


def _keep_bracket(state: ZeroState, x: Any, fx: Any) -> bool:
    """Make ``x`` the current point; return True if the old one was replaced."""
    replaced = numeric.opposite_signs(fx, state.f_cur)
    if replaced:
        state.x_prev, state.f_prev = state.x_cur, state.f_cur
    state.x_cur, state.f_cur = x, fx
    return replaced


class Bisection(BracketingMethod):
    """Bisection on the bit representation of the bracket.

    Tolerances default to zero and the step budget is unbounded: the method
    stops when no representable midpoint remains (at most 64 steps for
    ``float64``) or when it hits an exact zero. Positive tolerances passed by
    the caller are honored.
    """

    def default_tolerances(self, x_type: Any = float, f_type: Any = float) -> dict[str, Any]:
        tols = super().default_tolerances(x_type, f_type)
        tols.update(xabstol=0.0, xreltol=0.0, abstol=0.0, reltol=0.0, maxevals=math.inf)
        return tols

    def update_state(self, F: Any, state: ZeroState, options: Any) -> None:
        a, b = state.x_prev, state.x_cur
        m = numeric.middle(a, b)
        if m == a or m == b:
            _exhausted(state)
            return
        fm = F(m)
        state.increment_fnevals(F.evals_per_call)
        _keep_bracket(state, m, fm)


_FALSE_POSITION_VARIANTS = ("illinois", "pegasus", "anderson_bjork")


class FalsePosition(BracketingMethod):
    """Regula falsi with a reduction of the stale endpoint value.

    Parameters
    ----------
    variant:
        ``"illinois"`` (halve), ``"pegasus"`` (``fb / (fb + fx)``) or
        ``"anderson_bjork"`` (``1 - fx / fb``, halving when not positive).

    The effective value of the retained endpoint lives in ``aux_f[0]``; the
    state's ``f_prev`` stays the true function value.
    """

    def __init__(self, variant: str = "anderson_bjork") -> None:
        if variant not in _FALSE_POSITION_VARIANTS:
            raise ValueError(
                f"unknown false position variant {variant!r}; "
                f"expected one of {', '.join(_FALSE_POSITION_VARIANTS)}"
            )
        self.variant = variant

    def _prepare_bracket(self, state: ZeroState) -> None:
        state.aux_f = [state.f_prev]

    def _scale(self, fb: Any, fx: Any) -> Any:
        if self.variant == "illinois":
            return 0.5
        if self.variant == "pegasus":
            return fb / (fb + fx)
        m = 1 - fx / fb
        return m if m > 0 else 0.5

    def update_state(self, F: Any, state: ZeroState, options: Any) -> None:
        a, b = state.x_prev, state.x_cur
        fa, fb = state.aux_f[0], state.f_cur
        x = b - fb * (b - a) / (fb - fa)
        lo, hi = (a, b) if a < b else (b, a)
        if numeric.isnan(x) or not (lo < x < hi):
            x = numeric.middle(a, b)
        if x == a or x == b:
            _exhausted(state)
            return
        fx = F(x)
        state.increment_fnevals(F.evals_per_call)
        if _keep_bracket(state, x, fx):
            state.aux_f[0] = fb
        else:
            state.aux_f[0] = fa * self._scale(fb, fx)

    def __repr__(self) -> str:
        return f"FalsePosition({self.variant!r})"


class Brent(BracketingMethod):
    """Brent's method: inverse quadratic interpolation guarded by bisection.

    ``x_cur`` is the best estimate ``b``, ``x_prev`` the previous one ``a``;
    the contrapoint ``c`` (with ``f(b) f(c) < 0``) and the last two step
    lengths ``d``, ``e`` live in ``aux_x = [c, d, e]``, ``aux_f = [f(c)]``.
    """

    def _prepare_bracket(self, state: ZeroState) -> None:
        if abs(state.f_prev) < abs(state.f_cur):
            state.x_prev, state.x_cur = state.x_cur, state.x_prev
            state.f_prev, state.f_cur = state.f_cur, state.f_prev
        a, b = state.x_prev, state.x_cur
        state.aux_x = [a, b - a, b - a]
        state.aux_f = [state.f_prev]

    def update_state(self, F: Any, state: ZeroState, options: Any) -> None:
        a, b, fa, fb = state.x_prev, state.x_cur, state.f_prev, state.f_cur
        c, d, e = state.aux_x
        fc = state.aux_f[0]

        tol = 2 * numeric.eps(b) * abs(b) + options.xabstol / 2
        m = (c - b) / 2
        if abs(m) <= tol or fb == 0:
            state.x_converged = True
            return

        if abs(e) >= tol and abs(fa) > abs(fb):
            s = fb / fa
            if a == c:
                # secant
                p = 2 * m * s
                q = 1 - s
            else:
                # inverse quadratic interpolation
                q = fa / fc
                r = fb / fc
                p = s * (2 * m * q * (q - r) - (b - a) * (r - 1))
                q = (q - 1) * (r - 1) * (s - 1)
            if p > 0:
                q = -q
            else:
                p = -p
            if 2 * p < min(3 * m * q - abs(tol * q), abs(e * q)):
                e = d
                d = p / q
            else:
                d = m
                e = m
        else:
            d = m
            e = m

        a, fa = b, fb
        if abs(d) > tol:
            b = b + d
        elif m > 0:
            b = b + tol
        else:
            b = b - tol
        fb = F(b)
        state.increment_fnevals(F.evals_per_call)

        if not numeric.opposite_signs(fb, fc):
            c, fc = a, fa
            d = e = b - a
        if abs(fc) < abs(fb):
            a, b, c = b, c, b
            fa, fb, fc = fb, fc, fb

        state.x_prev, state.f_prev = a, fa
        state.x_cur, state.f_cur = b, fb
        state.aux_x = [c, d, e]
        state.aux_f = [fc]


__all__ = ["Bisection", "Brent", "FalsePosition"]
