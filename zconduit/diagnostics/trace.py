"""Human-readable report of a zero-finding run.

``format_trace`` returns the text; ``show_trace`` prints it. Use the state
and tracker directly for programmatic access.
"""

from __future__ import annotations

import sys
from typing import IO, Any, Optional

from .. import numeric
from ..core.tracks import Tracks


def _fmt(value: Any) -> str:
    if numeric.is_real(value):
        return f"{float(value): 18.16f}"
    z = complex(value)
    return f"{z.real: .16f}{z.imag:+.16f}im"


def format_trace(method: Any, state: Any, tracks: Any = None, bracketing: Optional[Any] = None) -> str:
    """
    Render the outcome of a run and the recorded iterates.

    Parameters
    ----------
    method:
        Method used (rendered with ``repr``).
    state:
        Final iteration state.
    tracks:
        A :class:`~zconduit.core.tracks.Tracks` log; other trackers render no
        trace lines.
    bracketing:
        Bracketing method a hybrid switched to, if any.
    """
    lines = ["Results of univariate zero finding:", ""]
    if state.x_converged or state.f_converged:
        lines.append(f"* Converged to: {state.x_star}")
        if bracketing is None:
            lines.append(f"* Algorithm: {method!r}")
        else:
            lines.append(f"* Algorithm: {method!r}, with possible bracketing with {bracketing!r}")
        lines.append(f"* iterations: {state.steps}")
        lines.append(f"* function evaluations: {state.fnevals}")
        if state.x_converged:
            lines.append("* stopped as x_n ≈ x_{n-1} using atol=xatol, rtol=xrtol")
        if state.f_converged and not state.messages:
            lines.append("* stopped as |f(x_n)| ≤ max(δ, |x|⋅ϵ) using δ = atol, ϵ = rtol")
        if state.messages:
            lines.append(f"* Note: {state.message}")
    else:
        lines.append(f"* Convergence failed: {state.message}")
        lines.append(f"* Algorithm {method!r}")
    lines.append("")
    lines.append("Trace:")
    if isinstance(tracks, Tracks):
        for i, (x, fx) in enumerate(tracks):
            lines.append(f"x_{i} = {_fmt(x)},\t fx_{i} = {_fmt(fx)}")
    lines.append("")
    return "\n".join(lines)


def show_trace(
    method: Any,
    state: Any,
    tracks: Any = None,
    bracketing: Optional[Any] = None,
    file: Optional[IO[str]] = None,
) -> None:
    """
    Print :func:`format_trace` to stdout or a file.

    This is a utility for interactive use, so it uses print() intentionally.
    """
    if file is None:
        file = sys.stdout
    print(format_trace(method, state, tracks, bracketing=bracketing), file=file)


__all__ = ["format_trace", "show_trace"]
