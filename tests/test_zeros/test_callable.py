"""Tests for CallableFunction, the uniform calling convention."""

import math

import numpy as np
import pytest

from zconduit import CallableFunction, Halley, Newton, Secant


def test_single_callable_returns_value():
    F = CallableFunction(Secant(), math.sin)
    assert F(0.5) == pytest.approx(math.sin(0.5))
    assert F.evals_per_call == 1
    assert isinstance(F(0.5), np.float64)


def test_single_callable_returning_tuple_uses_first_value():
    F = CallableFunction(Secant(), lambda x: (x**2, 2 * x))
    assert F(3.0) == 9.0


def test_parameter_is_passed_second():
    F = CallableFunction(Secant(), lambda x, p: x - p, p=2.0)
    assert F(5.0) == 3.0


def test_newton_tuple_gives_ratio():
    F = CallableFunction(Newton(), (lambda x: x**2 - 2, lambda x: 2 * x))
    fx, delta = F(3.0)
    assert fx == 7.0
    assert delta == pytest.approx(7.0 / 6.0)
    assert F.evals_per_call == 2


def test_halley_tuple_gives_two_ratios():
    F = CallableFunction(Halley(), (math.sin, math.cos, lambda x: -math.sin(x)))
    fx, delta, r = F(1.0)
    assert fx == pytest.approx(math.sin(1.0))
    assert delta == pytest.approx(math.tan(1.0))
    assert r == pytest.approx(-math.cos(1.0) / math.sin(1.0))
    assert F.evals_per_call == 3


def test_general_arity_chains_ratios():
    fs = (lambda x: 8.0, lambda x: 4.0, lambda x: 2.0, lambda x: 0.5)
    F = CallableFunction(4, fs)
    assert F(0.0) == (8.0, 2.0, 2.0, 4.0)
    assert F.evals_per_call == 4


def test_packed_single_callable_is_truncated_to_arity():
    F = CallableFunction(Newton(), lambda x: (x - 1, (x - 1) / 1, "unused"))
    assert F(3.0) == (2.0, 2.0)
    assert F.evals_per_call == 1


def test_tuple_for_arity_one_uses_first_function():
    calls = []
    F = CallableFunction(Secant(), (math.sin, lambda x: calls.append(x)))
    assert F(0.0) == 0.0
    assert calls == []
    assert F.evals_per_call == 1


def test_tuple_with_parameter():
    F = CallableFunction(Newton(), (lambda x, p: x**2 - p, lambda x, p: 2 * x), p=4.0)
    assert F(4.0) == (12.0, 1.5)


def test_arity_mismatch_raises():
    with pytest.raises(ValueError, match="needs 2 functions"):
        CallableFunction(Newton(), (math.sin, math.cos, math.sin))
    with pytest.raises(ValueError):
        CallableFunction(Halley(), (math.sin, math.cos))


def test_non_callables_raise():
    with pytest.raises(ValueError):
        CallableFunction(Secant(), 3.0)
    with pytest.raises(ValueError):
        CallableFunction(Newton(), (math.sin, 2.0))
    with pytest.raises(ValueError):
        CallableFunction(Newton(), ())


def test_rewrapping_keeps_parameter():
    inner = CallableFunction(Secant(), lambda x, p: x * p, p=3.0)
    outer = CallableFunction(Secant(), inner)
    assert outer.p == 3.0
    assert outer(2.0) == 6.0
