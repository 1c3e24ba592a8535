"""Generic iteration engine: adapter, state, options, convergence, iterators."""

from .callable import CallableFunction
from .convergence import (
    assess_convergence,
    check_steps_fnevals,
    decide_convergence,
    is_f_approx_0,
)
from .methods import (
    BracketingMethod,
    HybridMethod,
    MethodTag,
    NonBracketingMethod,
    SecantMethod,
    ZeroMethod,
)
from .options import ZeroOptions, default_tolerances, init_options
from .problem import (
    HybridZeroProblemIterator,
    ZeroProblem,
    ZeroProblemIterator,
    find_zero,
    init,
    solve,
)
from .state import Diagnostic, DiagnosticCode, ZeroState, init_state
from .tracks import AbstractTracks, NullTracks, Tracks

__all__ = [
    "AbstractTracks",
    "BracketingMethod",
    "CallableFunction",
    "Diagnostic",
    "DiagnosticCode",
    "HybridMethod",
    "HybridZeroProblemIterator",
    "MethodTag",
    "NonBracketingMethod",
    "NullTracks",
    "SecantMethod",
    "Tracks",
    "ZeroMethod",
    "ZeroOptions",
    "ZeroProblem",
    "ZeroProblemIterator",
    "ZeroState",
    "assess_convergence",
    "check_steps_fnevals",
    "decide_convergence",
    "default_tolerances",
    "find_zero",
    "init",
    "init_options",
    "init_state",
    "is_f_approx_0",
    "solve",
]
