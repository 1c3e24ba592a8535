"""Problem/iterator interface for zero finding.

A zero is found from

* a method (:class:`~zconduit.core.methods.ZeroMethod`),
* the function(s), wrapped in a :class:`~zconduit.core.callable.CallableFunction`,
* an initial guess: a scalar, or two (or more) points,
* tolerances (:class:`~zconduit.core.options.ZeroOptions`).

``init`` assembles a :class:`ZeroProblemIterator`; iterating it yields the
successive iterates and ``solve`` drains it. The iterator API returns NaN
rather than raising when no zero is identified; :func:`find_zero` raises
:class:`~zconduit.exceptions.ConvergenceFailed` instead.

Example
-------
>>> import math
>>> from zconduit import ZeroProblem, Secant, Bisection, init
>>> it = init(ZeroProblem(math.sin, 3.0), Secant())
>>> for x in it:
...     s = it.state
...     if s.f_prev * s.f_cur < 0:
...         it = init(ZeroProblem(math.sin, (s.x_prev, s.x_cur)), Bisection())
...         break
>>> round(float(it.solve()), 12)
3.14159265359
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

import numpy as np

from .. import numeric
from ..diagnostics.debug_mode import is_debug_enabled
from ..diagnostics.trace import format_trace, show_trace
from ..exceptions import ConvergenceFailed
from ..logging import get_logger
from .callable import CallableFunction
from .convergence import assess_convergence, decide_convergence
from .methods import HybridMethod, MethodTag, ZeroMethod, is_bracket
from .options import ZeroOptions, init_options
from .state import ZeroState
from .tracks import AbstractTracks, NullTracks, Tracks

logger = get_logger(__name__)

# IEEE semantics for NumPy scalars: overflow and 0/0 give inf and nan silently
_IEEE = {"divide": "ignore", "invalid": "ignore", "over": "ignore"}


@dataclass(frozen=True)
class ZeroProblem:
    """A function (or tuple of functions) and an initial guess."""

    f: Any
    x0: Any


def _pick_tracks(verbose: bool, tracks: Optional[AbstractTracks]) -> AbstractTracks:
    if tracks is not None and not isinstance(tracks, NullTracks):
        return tracks
    if verbose or is_debug_enabled():
        return Tracks()
    return tracks if tracks is not None else NullTracks()


def default_method(x0: Any) -> MethodTag:
    """``Order0()`` for a scalar guess, ``Bisection()`` for a bracket."""
    from ..methods import Bisection, Order0

    return Bisection() if is_bracket(x0) else Order0()


class ZeroProblemIterator:
    """Iterator over the iterates of one method on one problem.

    Each ``next`` assesses convergence; when the run is over it finalizes with
    :func:`~zconduit.core.convergence.decide_convergence` and stops, otherwise
    it performs one update and returns the new ``x_cur``. The iterator owns
    its state and cannot be restarted.

    On construction ``method.prepare_state`` rebuilds the method's auxiliary
    storage, so a state reset after running another method can be passed in.
    """

    def __init__(
        self,
        method: ZeroMethod,
        F: CallableFunction,
        state: ZeroState,
        options: ZeroOptions,
        tracks: Optional[AbstractTracks] = None,
    ) -> None:
        self.method = method
        self.F = F
        self.state = state
        self.options = options
        self.tracks = tracks if tracks is not None else NullTracks()
        self._started = False
        self._done = False
        with np.errstate(**_IEEE):
            method.prepare_state(F, state)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        state = self.state
        if not self._started:
            self.tracks.log_step(state, init=True)
            self._started = True
        if self._done:
            raise StopIteration
        if assess_convergence(self.method, state, self.options):
            with np.errstate(**_IEEE):
                decide_convergence(self.method, self.F, state, self.options)
            self._done = True
            raise StopIteration
        with np.errstate(**_IEEE):
            self.method.update_state(self.F, state, self.options)
        self.tracks.log_step(state)
        state.increment_steps()
        return state.x_cur

    @property
    def done(self) -> bool:
        return self._done

    def solve(self) -> Any:
        """Iterate to completion and return ``x_star`` (NaN on failure)."""
        for _ in self:
            pass
        return self.last()

    def last(self) -> Any:
        return self.state.x_star

    def decide_convergence(self) -> Any:
        return decide_convergence(self.method, self.F, self.state, self.options)

    def format_trace(self) -> str:
        return format_trace(self.method, self.state, self.tracks)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(method={self.method!r}, steps={self.state.steps}, "
            f"fnevals={self.state.fnevals})"
        )


class HybridZeroProblemIterator:
    """Iterator for a :class:`~zconduit.core.methods.HybridMethod`.

    Runs the non-bracketing method; as soon as two consecutive real iterates
    have values of opposite sign a new problem is built on that bracket and
    iteration continues with the bracketing method. The new state carries
    over the steps and evaluations spent so far and shares the tracker.
    """

    def __init__(
        self,
        problem: ZeroProblem,
        method: HybridMethod,
        p: Any = None,
        tracks: Optional[AbstractTracks] = None,
        **kwargs: Any,
    ) -> None:
        self.problem = problem
        self.method = method
        self.p = p
        self._kwargs = kwargs
        self.active = init(problem, method.non_bracketing, p, tracks=tracks, **kwargs)
        self.tracks = self.active.tracks
        self.switched = False

    @property
    def state(self) -> ZeroState:
        return self.active.state

    @property
    def options(self) -> ZeroOptions:
        return self.active.options

    @property
    def F(self) -> CallableFunction:
        return self.active.F

    @property
    def done(self) -> bool:
        return self.active.done

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        x = next(self.active)
        if not self.switched:
            state = self.state
            if numeric.is_real(state.f_cur) and numeric.opposite_signs(state.f_prev, state.f_cur):
                self._switch(state)
        return x

    def _switch(self, state: ZeroState) -> None:
        bracket = (state.x_prev, state.x_cur)
        bracketed = init(
            ZeroProblem(self.problem.f, bracket),
            self.method.bracketing,
            self.p,
            tracks=self.tracks,
            **self._kwargs,
        )
        bracketed._started = True
        bracketed.state.increment_steps(state.steps)
        bracketed.state.increment_fnevals(state.fnevals)
        logger.debug(
            "bracket (%s, %s) found after %d steps; switching to %r",
            state.x_prev,
            state.x_cur,
            state.steps,
            self.method.bracketing,
        )
        self.active = bracketed
        self.switched = True

    def solve(self) -> Any:
        for _ in self:
            pass
        return self.last()

    def last(self) -> Any:
        return self.active.last()

    def decide_convergence(self) -> Any:
        return self.active.decide_convergence()

    def format_trace(self) -> str:
        bracketing = self.method.bracketing if self.switched else None
        return format_trace(self.method, self.state, self.tracks, bracketing=bracketing)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(method={self.method!r}, switched={self.switched}, "
            f"steps={self.state.steps}, fnevals={self.state.fnevals})"
        )


def init(
    problem: ZeroProblem,
    method: Optional[MethodTag] = None,
    p: Any = None,
    *,
    verbose: bool = False,
    tracks: Optional[AbstractTracks] = None,
    **kwargs: Any,
) -> ZeroProblemIterator | HybridZeroProblemIterator:
    """Set up an iterator for ``problem``.

    Parameters
    ----------
    problem:
        Function(s) and initial guess.
    method:
        Method to use; defaults to :func:`default_method` of the guess.
    p:
        Optional parameter passed as ``f(x, p)``.
    verbose:
        Record the iterates in a :class:`~zconduit.core.tracks.Tracks`.
    tracks:
        Explicit tracker; a recording tracker takes precedence over ``verbose``.
    **kwargs:
        Tolerance overrides, see :func:`~zconduit.core.options.init_options`.
    """
    if method is None:
        method = default_method(problem.x0)
    tracks = _pick_tracks(verbose, tracks)
    if isinstance(method, HybridMethod):
        return HybridZeroProblemIterator(problem, method, p, tracks=tracks, **kwargs)
    F = CallableFunction(method, problem.f, p)
    with np.errstate(**_IEEE):
        state = method.init_state(F, problem.x0)
    options = init_options(method, state.x_type, state.f_type, **kwargs)
    return ZeroProblemIterator(method, F, state, options, tracks)


def solve(problem: ZeroProblem, method: Optional[MethodTag] = None, p: Any = None, **kwargs: Any) -> Any:
    """Solve ``problem``; returns NaN, not an error, when no zero is identified."""
    return init(problem, method, p, **kwargs).solve()


def find_zero(
    f: Any,
    x0: Any,
    method: Optional[MethodTag] = None,
    p: Any = None,
    *,
    verbose: bool = False,
    tracks: Optional[AbstractTracks] = None,
    **kwargs: Any,
) -> Any:
    """Find a zero of ``f`` starting from ``x0``.

    ``x0`` is a scalar guess or a bracket ``(a, b)``. Without a method a
    scalar guess uses the hybrid ``Order0()`` (secant steps, switching to
    Brent's method once a sign change is seen) and a bracket uses
    ``Bisection()``. Derivative methods take a tuple ``(f, f', ...)``.

    Tolerances are adjusted with ``xatol``, ``xrtol``, ``atol``, ``rtol``,
    ``maxevals``, ``maxfnevals`` and ``strict``.

    Raises
    ------
    ConvergenceFailed
        If the algorithm stops without identifying a zero.

    Example
    -------
    >>> import math
    >>> round(float(find_zero(math.sin, 3)), 12)
    3.14159265359
    >>> round(float(find_zero(math.sin, (3, 4))), 12)
    3.14159265359
    """
    it = init(ZeroProblem(f, x0), method, p, verbose=verbose, tracks=tracks, **kwargs)
    xstar = it.solve()
    if verbose:
        show_trace(it.method, it.state, it.tracks, bracketing=_bracketing_of(it))
    elif is_debug_enabled():
        logger.debug("\n%s", it.format_trace())
    if numeric.isnan(xstar):
        logger.info("no zero identified by %r: %s", it.method, it.state.message)
        raise ConvergenceFailed(it.state.x_cur, it.state.message, state=it.state)
    return xstar


def _bracketing_of(it: Any) -> Optional[ZeroMethod]:
    if isinstance(it, HybridZeroProblemIterator) and it.switched:
        return it.method.bracketing
    return None


__all__ = [
    "HybridZeroProblemIterator",
    "ZeroProblem",
    "ZeroProblemIterator",
    "default_method",
    "find_zero",
    "init",
    "solve",
]
