"""Convergence assessment for iterative zero finding.

Two phases:

* :func:`assess_convergence` runs once per step and decides whether to stop.
* :func:`decide_convergence` runs once after the loop and decides whether the
  stopping point is accepted as a zero.

With floating point a computed ``f(x*)`` is rarely exactly zero; near a
simple zero ``f(x*) ≈ x* f'(x*) eps``, so the tests below are relative to
``|x|``. When a run stops without ``|f(x_n)|`` small enough, and ``strict`` is
false, the last iterate is tested once more against the cube root of the
tolerance.
"""

from __future__ import annotations

from typing import Any

from .. import numeric
from ..logging import get_logger
from .state import DiagnosticCode, ZeroState

logger = get_logger(__name__)


def is_f_approx_0(fx: Any, x: Any, atol: Any, rtol: Any, relaxed: bool = False) -> bool:
    """Test ``|f(x)| <= max(atol, |x| rtol)``; with ``relaxed`` use its cube root."""
    tol = max(atol, abs(x) * rtol)
    if relaxed:
        tol = numeric.cbrt(abs(tol))
    return bool(abs(fx) <= tol)


def check_steps_fnevals(state: ZeroState, options: Any) -> bool:
    """Stop when the step or function-evaluation budget is exhausted."""
    if state.steps > options.maxevals:
        state.stopped = True
        state.add_message(DiagnosticCode.TOO_MANY_STEPS)
        return True
    if state.fnevals > options.maxfnevals:
        state.stopped = True
        state.add_message(DiagnosticCode.TOO_MANY_FNEVALS)
        return True
    return False


def assess_convergence(method: Any, state: ZeroState, options: Any) -> bool:
    """Decide whether iteration should stop, updating ``state`` flags.

    Returns ``False`` to keep iterating. Otherwise returns ``True`` after
    setting one of

    * ``f_converged`` if ``|f(x_n)| <= max(atol, |x_n| rtol)``,
    * ``x_converged`` if ``|x_n - x_{n-1}| < max(xatol, max(|x_n|, |x_{n-1}|) xrtol)``,
    * ``convergence_failed`` if ``x_n`` or ``f(x_n)`` is NaN or infinite,
    * ``stopped`` if ``steps > maxevals`` or ``fnevals > maxfnevals``.

    ``x_star``/``f_star`` are set when a convergence flag is set. A state a
    method already flagged as converged only gets ``x_star`` filled in; a
    state already flagged as failed stops unchanged.
    """
    x0, x1 = state.x_prev, state.x_cur
    fx1 = state.f_cur

    if state.convergence_failed:
        return True

    if state.x_converged or state.f_converged:
        if numeric.isnan(state.x_star):
            state.x_star, state.f_star = x1, fx1
        return True

    if numeric.isnan(x1) or numeric.isnan(fx1):
        state.convergence_failed = True
        state.add_message(DiagnosticCode.NAN_PRODUCED)
        return True

    if numeric.isinf(x1) or numeric.isinf(fx1):
        state.convergence_failed = True
        state.add_message(DiagnosticCode.INF_PRODUCED)
        return True

    if is_f_approx_0(fx1, x1, options.abstol, options.reltol):
        state.x_star, state.f_star = x1, fx1
        state.f_converged = True
        return True

    if abs(x1 - x0) < max(options.xabstol, max(abs(x1), abs(x0)) * options.xreltol):
        state.x_star, state.f_star = x1, fx1
        state.add_message(DiagnosticCode.X_CONVERGED)
        state.x_converged = True
        return True

    return check_steps_fnevals(state, options)


def _sign_change_near(F: Any, state: ZeroState, x: Any, fx: Any) -> bool:
    found = False
    for u in (numeric.prevfloat(x), numeric.nextfloat(x)):
        fu = F(u)
        state.increment_fnevals(F.evals_per_call)
        if isinstance(fu, tuple):
            fu = fu[0]
        if fu == 0 or numeric.opposite_signs(fu, fx):
            found = True
    return found


def decide_convergence(method: Any, F: Any, state: ZeroState, options: Any) -> Any:
    """Finalize a stopped run and return ``x_star`` (NaN when not converged).

    Only a run that stopped, or converged in ``x`` alone, is examined:

    1. for real problems the neighbours ``prevfloat(x)``/``nextfloat(x)`` of
       the candidate are evaluated; a zero or a sign change there accepts it;
    2. with ``strict`` or zero ``f`` tolerances an ``x``-convergence is
       accepted as is and anything else fails;
    3. otherwise the last iterate is accepted when
       ``|f(x_n)| <= cbrt(max(atol, |x_n| rtol))``.
    """
    if (state.stopped or state.x_converged) and not (state.f_converged or state.convergence_failed):
        if state.x_converged:
            x, fx = state.x_star, state.f_star
        else:
            x, fx = state.x_cur, state.f_cur

        finite = not (numeric.isnan(x) or numeric.isnan(fx) or numeric.isinf(x))
        if finite and numeric.is_real(x) and numeric.is_real(fx) and _sign_change_near(F, state, x, fx):
            state.x_star, state.f_star = x, fx
            state.add_message(DiagnosticCode.SIGN_CHANGE)
            state.f_converged = True
        else:
            delta = max(abs(options.abstol), abs(options.reltol))
            if options.strict or delta == 0:
                if state.x_converged:
                    state.f_converged = True
                else:
                    state.convergence_failed = True
            elif is_f_approx_0(state.f_cur, state.x_cur, options.abstol, options.reltol, relaxed=True):
                state.x_star, state.f_star = state.x_cur, state.f_cur
                state.add_message(DiagnosticCode.RELAXED)
                state.f_converged = True
            else:
                state.convergence_failed = True
        logger.debug(
            "%r finalized after %d steps: f_converged=%s, %s",
            method,
            state.steps,
            state.f_converged,
            state.message,
        )

    if not state.f_converged:
        state.x_star = numeric.nan_like(state.x_cur)
        state.f_star = numeric.nan_like(state.f_cur)

    return state.x_star


__all__ = [
    "assess_convergence",
    "check_steps_fnevals",
    "decide_convergence",
    "is_f_approx_0",
]
