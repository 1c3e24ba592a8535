"""Tests for bisection, false position and Brent's method."""

import math

import numpy as np
import pytest
import torch

from zconduit import (
    BracketError,
    Bisection,
    Brent,
    FalsePosition,
    ZeroProblem,
    find_zero,
    init,
    solve,
)
from zconduit import numeric

EPS = np.finfo(np.float64).eps

PROBLEMS = [
    (math.sin, (3.0, 4.0), math.pi),
    (lambda x: x**3 - 2 * x - 5, (2.0, 3.0), 2.0945514815423265),
    (lambda x: math.exp(x) - 2, (0.0, 1.0), math.log(2.0)),
    (lambda x: x**5 - 0.5, (-1.0, 1.0), 0.5**0.2),
]

METHODS = [
    Bisection(),
    FalsePosition("illinois"),
    FalsePosition("pegasus"),
    FalsePosition("anderson_bjork"),
    Brent(),
]


def bracket_holds(method, state):
    if state.f_cur == 0:
        return True
    other = state.aux_f[0] if isinstance(method, Brent) else state.f_prev
    return numeric.opposite_signs(state.f_cur, other)


@pytest.mark.parametrize("method", METHODS, ids=repr)
@pytest.mark.parametrize("f, bracket, root", PROBLEMS)
def test_bracket_is_maintained(method, f, bracket, root):
    it = init(ZeroProblem(f, bracket), method)
    assert bracket_holds(method, it.state)
    for _ in it:
        assert bracket_holds(method, it.state)
    assert abs(it.last() - root) <= 1e-12 * max(1.0, abs(root))


@pytest.mark.parametrize("f, bracket, root", PROBLEMS)
def test_bisection_reaches_machine_precision(f, bracket, root):
    it = init(ZeroProblem(f, bracket), Bisection())
    x = it.solve()
    assert it.state.converged
    assert it.state.steps <= 64
    assert abs(x - root) <= 4 * EPS * max(1.0, abs(root))


def test_bisection_hits_exact_zero():
    it = init(ZeroProblem(lambda x: x, (-1.0, 2.0)), Bisection())
    assert it.solve() == 0.0
    assert it.state.f_converged
    assert it.state.steps == 1


def test_zero_endpoint_returns_immediately():
    it = init(ZeroProblem(lambda x: x, (0.0, 1.0)), Brent())
    assert it.solve() == 0.0
    assert it.state.steps == 0
    assert it.state.fnevals == 2


def test_bisection_float32_keeps_type():
    f = lambda x: x * x - np.float32(2.0)
    x = solve(ZeroProblem(f, (np.float32(1.0), np.float32(2.0))), Bisection())
    assert x.dtype == np.float32
    assert abs(x - np.sqrt(np.float32(2.0))) <= 4 * np.finfo(np.float32).eps


def test_bisection_honors_positive_tolerance():
    it = init(ZeroProblem(math.sin, (3.0, 4.0)), Bisection(), xatol=1e-3)
    x = it.solve()
    assert abs(x - math.pi) < 1e-2
    assert it.state.steps < 20


def test_brent_is_fast():
    it = init(ZeroProblem(lambda x: x**3 - 2 * x - 5, (2.0, 3.0)), Brent())
    it.solve()
    assert it.state.steps < 15


def test_false_position_rejects_unknown_variant():
    with pytest.raises(ValueError, match="illinois"):
        FalsePosition("regula")


def test_false_position_repr_and_equality():
    assert repr(FalsePosition("pegasus")) == "FalsePosition('pegasus')"
    assert FalsePosition() == FalsePosition("anderson_bjork")
    assert FalsePosition("illinois") != FalsePosition("pegasus")


def test_longer_sequence_uses_extrema():
    it = init(ZeroProblem(math.sin, [3.5, 4.0, 3.0]), Bisection())
    assert {it.state.x_prev, it.state.x_cur} == {3.0, 4.0}


def test_numpy_array_bracket():
    assert abs(find_zero(math.sin, np.array([3.0, 4.0])) - math.pi) < 1e-14


@pytest.mark.parametrize("method", METHODS, ids=repr)
def test_same_sign_bracket_raises(method):
    with pytest.raises(BracketError, match="opposite signs"):
        init(ZeroProblem(math.sin, (1.0, 2.0)), method)


def test_bracket_error_is_value_error():
    with pytest.raises(ValueError):
        find_zero(math.sin, (1.0, 2.0))


def test_scalar_guess_rejected():
    with pytest.raises(BracketError, match="needs a bracket"):
        init(ZeroProblem(math.sin, 3.0), Bisection())


def test_complex_bracket_rejected():
    with pytest.raises(BracketError):
        init(ZeroProblem(lambda z: z, (1j, -1j)), Brent())


def test_nan_endpoint_rejected():
    with pytest.raises(BracketError, match="NaN"):
        init(ZeroProblem(lambda x: math.nan if x > 1 else -1.0, (0.0, 2.0)), Bisection())


@pytest.mark.parametrize("method", [Bisection(), Brent(), FalsePosition()], ids=repr)
def test_mixed_precision_bracket_is_promoted(method):
    it = init(ZeroProblem(math.sin, (np.float32(3.0), 4.0)), method)
    assert it.state.x_prev.dtype == it.state.x_cur.dtype == np.float64
    x = it.solve()
    assert x.dtype == np.float64
    assert abs(x - math.pi) <= 1e-12


def test_mixed_precision_bracket_uses_wider_tolerances():
    it = init(ZeroProblem(math.sin, (np.float32(3.0), 4.0)), Brent())
    assert it.options.xabstol == EPS
    assert it.options.abstol == 4 * EPS


def test_mixed_precision_torch_bracket():
    a = torch.tensor(3.0, dtype=torch.float32)
    b = torch.tensor(4.0, dtype=torch.float64)
    x = solve(ZeroProblem(torch.sin, (a, b)), Brent())
    assert x.dtype == torch.float64
    assert abs(float(x) - math.pi) <= 1e-12
