"""Zero Conduit - univariate zero finding on a shared iteration engine.

Example
-------
>>> import math
>>> from zconduit import find_zero, Newton
>>> round(float(find_zero(math.sin, 3.0)), 12)
3.14159265359
>>> round(float(find_zero((math.sin, math.cos), 3.0, Newton())), 12)
3.14159265359
"""

__version__ = "0.1.0"

# Engine
from .core import (
    AbstractTracks,
    BracketingMethod,
    CallableFunction,
    Diagnostic,
    DiagnosticCode,
    HybridMethod,
    HybridZeroProblemIterator,
    MethodTag,
    NonBracketingMethod,
    NullTracks,
    SecantMethod,
    Tracks,
    ZeroMethod,
    ZeroOptions,
    ZeroProblem,
    ZeroProblemIterator,
    ZeroState,
    assess_convergence,
    decide_convergence,
    default_tolerances,
    find_zero,
    init,
    init_options,
    init_state,
    solve,
)

# Diagnostics
from .diagnostics import (
    debug_context,
    format_trace,
    is_debug_enabled,
    set_debug_enabled,
    show_trace,
)
from .exceptions import BracketError, ConvergenceFailed, ZeroFindingError
from .logging import configure_logging, get_logger, set_log_level

# Methods
from .methods import (
    Bisection,
    Brent,
    FalsePosition,
    Halley,
    Newton,
    Order0,
    Order1,
    Order2,
    Schroder,
    Secant,
    Steffensen,
)

__all__ = [
    "__version__",
    # Engine
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
    "decide_convergence",
    "default_tolerances",
    "find_zero",
    "init",
    "init_options",
    "init_state",
    "solve",
    # Methods
    "Bisection",
    "Brent",
    "FalsePosition",
    "Halley",
    "Newton",
    "Order0",
    "Order1",
    "Order2",
    "Schroder",
    "Secant",
    "Steffensen",
    # Errors
    "BracketError",
    "ConvergenceFailed",
    "ZeroFindingError",
    # Diagnostics and logging
    "configure_logging",
    "debug_context",
    "format_trace",
    "get_logger",
    "is_debug_enabled",
    "set_debug_enabled",
    "set_log_level",
    "show_trace",
]
