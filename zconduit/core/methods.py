"""Method tags and the update-rule contract.

A method declares how many values it needs per evaluation (``fn_argout``),
how a state is seeded from an initial guess and how one step mutates the
state. Adding an algorithm means subclassing one of the families below and
implementing :meth:`ZeroMethod.update_state`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

from .. import numeric
from ..exceptions import BracketError
from .options import default_tolerances
from .state import DiagnosticCode, ZeroState, init_state


def is_bracket(x0: Any) -> bool:
    """True when ``x0`` specifies two or more points rather than a scalar."""
    if isinstance(x0, (tuple, list)):
        return True
    shape = getattr(x0, "shape", ())
    return len(shape) > 0


def bracket_endpoints(x0: Any) -> tuple:
    """Return ``(a, b)`` from a pair, or the extrema of a longer sequence.

    The values are promoted to a common type first, so the tolerances derived
    from the iterate type match every later iterate.
    """
    values = list(numeric.promote(*_flatten(x0)))
    if len(values) < 2:
        raise ValueError("a bracket needs at least two values")
    if len(values) == 2:
        return values[0], values[1]
    return min(values), max(values)


def _flatten(x0: Any) -> Sequence[Any]:
    if isinstance(x0, (tuple, list)):
        return list(x0)
    return list(x0.reshape(-1))


class MethodTag:
    """Identity of a method: its arity, name and parameters."""

    fn_argout: int = 1

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash(type(self))


class ZeroMethod(MethodTag, ABC):
    """Base class for methods that advance a state one step at a time."""

    def default_tolerances(self, x_type: Any = float, f_type: Any = float) -> dict[str, Any]:
        return default_tolerances(x_type, f_type)

    def init_state(self, F: Any, x0: Any) -> ZeroState:
        """Seed a state from a scalar guess or a pair of points."""
        if is_bracket(x0):
            a, b = bracket_endpoints(x0)
        else:
            a, b = self.seed_points(numeric.as_number(x0))
        fa, fb = F(a), F(b)
        state = self._state_from_values(a, b, fa, fb)
        state.increment_fnevals(2 * F.evals_per_call)
        return state

    def seed_points(self, x: Any) -> tuple:
        return x, default_secant_step(x)

    def _state_from_values(self, a: Any, b: Any, fa: Any, fb: Any) -> ZeroState:
        return init_state(a, b, fa, fb)

    def prepare_state(self, F: Any, state: ZeroState) -> None:
        """Rebuild method-specific storage from the current iterates.

        Called when a problem iterator is built, so a state that was reset
        after running another method can be continued by this one. Methods
        without auxiliary storage need nothing; a state already prepared by
        this method is left unchanged and no evaluations are made.
        """

    @abstractmethod
    def update_state(self, F: Any, state: ZeroState, options: Any) -> None:
        """Advance ``state`` by exactly one step.

        Implementations overwrite ``x_prev``/``x_cur``/``f_prev``/``f_cur``
        (and auxiliary storage) and add the number of evaluations performed
        to ``state.fnevals``.
        """


class NonBracketingMethod(ZeroMethod):
    """Methods using function values only, without convergence guarantees."""


class SecantMethod(NonBracketingMethod):
    """Two-point methods built on the secant line through the last iterates."""


def default_secant_step(x: Any) -> Any:
    """A point close to ``x``: ``x + h + |x| h**2`` with ``h = eps**(1/3)``."""
    h = numeric.eps(x) ** (1 / 3)
    return x + h + abs(x) * h * h


class BracketingMethod(ZeroMethod):
    """Methods keeping an interval whose endpoint values change sign."""

    def init_state(self, F: Any, x0: Any) -> ZeroState:
        if not is_bracket(x0):
            raise BracketError(f"{self!r} needs a bracket, got the scalar {x0!r}")
        a, b = bracket_endpoints(x0)
        if not (numeric.is_real(a) and numeric.is_real(b)):
            raise BracketError("bracketing methods need real endpoints")
        if b < a:
            a, b = b, a
        fa, fb = F(a), F(b)
        if numeric.isnan(fa) or numeric.isnan(fb):
            raise BracketError(f"NaN at a bracket endpoint: f({a})={fa}, f({b})={fb}")
        if numeric.sign(fa) * numeric.sign(fb) > 0:
            raise BracketError(
                f"f(a) and f(b) must have opposite signs, got f({a})={fa}, f({b})={fb}"
            )
        state = self._state_from_values(a, b, fa, fb)
        state.increment_fnevals(2 * F.evals_per_call)
        self.prepare_state(F, state)
        return state

    def prepare_state(self, F: Any, state: ZeroState) -> None:
        """Check that ``(x_prev, x_cur)`` brackets a zero, then seed storage.

        A pair without a sign change marks the state ``convergence_failed``
        rather than raising, so a reused state ends the iteration cleanly.
        """
        fa, fb = state.f_prev, state.f_cur
        real = numeric.is_real(fa) and numeric.is_real(fb)
        if not real or not (fa == 0 or fb == 0 or numeric.opposite_signs(fa, fb)):
            state.convergence_failed = True
            state.add_message(DiagnosticCode.NOTE, "x_prev and x_cur do not bracket a zero.")
            return
        # x_cur holds a zero endpoint so the first assessment sees it
        if fa == 0 and fb != 0:
            state.x_prev, state.x_cur = state.x_cur, state.x_prev
            state.f_prev, state.f_cur = fb, fa
        self._prepare_bracket(state)

    def _prepare_bracket(self, state: ZeroState) -> None:
        pass


class HybridMethod(MethodTag):
    """Run a non-bracketing method until a bracket appears, then a bracketing one.

    A hybrid has no update rule of its own. :func:`zconduit.init` builds a
    hybrid iterator that steps ``non_bracketing`` and, once two iterates
    change sign, starts a new problem for ``bracketing`` on that pair.
    """

    def __init__(self, non_bracketing: NonBracketingMethod, bracketing: BracketingMethod) -> None:
        self.non_bracketing = non_bracketing
        self.bracketing = bracketing

    @property
    def fn_argout(self) -> int:  # type: ignore[override]
        return self.non_bracketing.fn_argout

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.non_bracketing!r}, {self.bracketing!r})"


__all__ = [
    "BracketingMethod",
    "HybridMethod",
    "MethodTag",
    "NonBracketingMethod",
    "SecantMethod",
    "ZeroMethod",
    "bracket_endpoints",
    "default_secant_step",
    "is_bracket",
]
