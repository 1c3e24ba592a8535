"""Tolerances and limits for zero finding."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional

from .. import numeric

MAXEVALS = 40

# (canonical field, accepted keyword names in priority order)
_ALIASES = (
    ("xabstol", ("xatol", "xabstol")),
    ("xreltol", ("xrtol", "xreltol")),
    ("abstol", ("atol", "abstol")),
    ("reltol", ("rtol", "reltol")),
    ("maxevals", ("maxevals", "maxsteps")),
    ("maxfnevals", ("maxfnevals",)),
    ("strict", ("strict",)),
)


@dataclass(frozen=True)
class ZeroOptions:
    """Immutable tolerances shared by the convergence tests.

    ``xabstol`` and ``abstol`` are absolute tolerances on ``x`` and ``f(x)``;
    ``xreltol`` and ``reltol`` are relative (unitless). ``maxevals`` bounds the
    number of steps and ``maxfnevals`` the number of function evaluations.
    With ``strict=True`` no relaxed tolerance is tried when a run stops.
    """

    xabstol: float
    xreltol: float
    abstol: float
    reltol: float
    maxevals: float = MAXEVALS
    maxfnevals: float = math.inf
    strict: bool = False


def default_tolerances(x_type: Any = float, f_type: Any = float) -> dict[str, Any]:
    """Default tolerances for iterates of ``x_type`` and values of ``f_type``.

    ``xatol = xrtol = eps(x_type)``, ``atol = rtol = 4 eps(f_type)``,
    ``maxevals = 40``, unlimited function evaluations, not strict. Complex
    types use the epsilon of their real part.
    """
    ex = numeric.eps(x_type)
    ef = numeric.eps(f_type)
    return {
        "xabstol": ex,
        "xreltol": ex,
        "abstol": 4 * ef,
        "reltol": 4 * ef,
        "maxevals": MAXEVALS,
        "maxfnevals": math.inf,
        "strict": False,
    }


def init_options(
    method: Optional[Any] = None,
    x_type: Any = float,
    f_type: Any = float,
    **kwargs: Any,
) -> ZeroOptions:
    """Build :class:`ZeroOptions` from the method defaults and keyword overrides.

    Accepted keywords: ``xatol``/``xabstol``, ``xrtol``/``xreltol``,
    ``atol``/``abstol``, ``rtol``/``reltol``, ``maxevals``/``maxsteps``,
    ``maxfnevals`` and ``strict``. For each pair the first name present wins.
    """
    known = {name for _, names in _ALIASES for name in names}
    unknown = sorted(set(kwargs) - known)
    if unknown:
        raise TypeError(f"unknown tolerance option(s): {', '.join(unknown)}")

    if method is None:
        defaults = default_tolerances(x_type, f_type)
    else:
        defaults = method.default_tolerances(x_type, f_type)

    values = {}
    for canonical, names in _ALIASES:
        value = defaults[canonical]
        for name in names:
            if name in kwargs and kwargs[name] is not None:
                value = kwargs[name]
                break
        values[canonical] = value
    values["strict"] = bool(values["strict"])
    return ZeroOptions(**values)


__all__ = ["MAXEVALS", "ZeroOptions", "default_tolerances", "init_options"]
