"""Uniform calling convention for the function(s) whose zero is sought.

Methods ask for ``fn_argout`` values per evaluation. Newton-like methods with
``fn_argout = 2`` receive ``(f, f/f')``, Halley-like methods with
``fn_argout = 3`` receive ``(f, f/f', f'/f'')`` and in general a tuple of
``K`` callables ``(f0, ..., f_{K-1})`` yields
``(f0, f0/f1, f1/f2, ..., f_{K-2}/f_{K-1})``.

The calling strategy is fixed when the :class:`CallableFunction` is built.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from .. import numeric


def _first(value: Any) -> Any:
    if isinstance(value, (tuple, list)):
        return value[0]
    return value


def _ratios(values: Sequence[Any]) -> tuple:
    values = [numeric.as_number(v) for v in values]
    out = [values[0]]
    for i in range(len(values) - 1):
        out.append(values[i] / values[i + 1])
    return tuple(out)


def _single_value(f: Callable, p: Any) -> Callable[[Any], Any]:
    if p is None:
        return lambda x: numeric.as_number(_first(f(x)))
    return lambda x: numeric.as_number(_first(f(x, p)))


def _packed_values(f: Callable, p: Any, n: int) -> Callable[[Any], tuple]:
    if p is None:
        return lambda x: tuple(numeric.as_number(v) for v in f(x)[:n])
    return lambda x: tuple(numeric.as_number(v) for v in f(x, p)[:n])


def _tuple_ratios(fs: Sequence[Callable], p: Any) -> Callable[[Any], tuple]:
    if p is None:
        return lambda x: _ratios([fi(x) for fi in fs])
    return lambda x: _ratios([fi(x, p) for fi in fs])


class CallableFunction:
    """Adapter returning the values a method needs at a point.

    Parameters
    ----------
    method:
        Method instance (or an integer arity) declaring ``fn_argout``.
    f:
        A callable, or a tuple/list of callables ``(f, f', f'', ...)``.
    p:
        Optional parameter; when given every callable is invoked as ``f(x, p)``.
    """

    def __init__(self, method: Any, f: Any, p: Any = None) -> None:
        if isinstance(f, CallableFunction):
            p = f.p if p is None else p
            f = f.f
        n = method if isinstance(method, int) else getattr(method, "fn_argout", 1)
        if n < 1:
            raise ValueError("fn_argout must be at least 1")
        self.f = f
        self.p = p
        self.fn_argout = n
        self.is_tuple = isinstance(f, (tuple, list))
        self._call = self._resolve(f, p, n)

    def _resolve(self, f: Any, p: Any, n: int) -> Callable[[Any], Any]:
        if self.is_tuple:
            fs = tuple(f)
            if not fs or not all(callable(fi) for fi in fs):
                raise ValueError("expected a non-empty tuple of callables")
            if n == 1:
                self.evals_per_call = 1
                return _single_value(fs[0], p)
            if len(fs) != n:
                raise ValueError(
                    f"method needs {n} functions (f and {n - 1} derivatives), got {len(fs)}"
                )
            self.evals_per_call = n
            return _tuple_ratios(fs, p)
        if not callable(f):
            raise ValueError(f"{f!r} is not callable")
        self.evals_per_call = 1
        if n == 1:
            return _single_value(f, p)
        return _packed_values(f, p, n)

    def __call__(self, x: Any) -> Any:
        return self._call(x)

    def __repr__(self) -> str:
        return f"CallableFunction(fn_argout={self.fn_argout}, p={self.p!r})"


__all__ = ["CallableFunction"]
