"""Tests for tolerance defaults and option handling."""

import dataclasses
import math

import numpy as np
import pytest
import torch

from zconduit import Bisection, Secant, ZeroOptions, default_tolerances, init_options

EPS = np.finfo(np.float64).eps


def test_defaults_for_float64():
    options = init_options()
    assert options.xabstol == EPS
    assert options.xreltol == EPS
    assert options.abstol == 4 * EPS
    assert options.reltol == 4 * EPS
    assert options.maxevals == 40
    assert options.maxfnevals == math.inf
    assert options.strict is False


def test_aliases_are_accepted():
    options = init_options(
        Secant(), xatol=1e-3, xreltol=1e-4, abstol=1e-5, rtol=1e-6, maxsteps=7, maxfnevals=20, strict=True
    )
    assert options == ZeroOptions(1e-3, 1e-4, 1e-5, 1e-6, 7, 20, True)


def test_first_alias_wins():
    options = init_options(xatol=1.0, xabstol=2.0, maxevals=3, maxsteps=5)
    assert options.xabstol == 1.0
    assert options.maxevals == 3


def test_none_keeps_default():
    assert init_options(atol=None).abstol == 4 * EPS


def test_unknown_option_raises():
    with pytest.raises(TypeError, match="tolerance"):
        init_options(Secant(), tolerance=1e-8)


def test_options_are_immutable():
    options = init_options()
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.abstol = 1.0


def test_bisection_defaults():
    options = init_options(Bisection())
    assert options.xabstol == options.xreltol == 0.0
    assert options.abstol == options.reltol == 0.0
    assert options.maxevals == math.inf
    assert init_options(Bisection(), xatol=1e-3).xabstol == 1e-3


@pytest.mark.parametrize(
    "low, high",
    [
        (np.float16, np.float32),
        (np.float32, np.float64),
        (np.complex64, np.complex128),
        (torch.float32, torch.float64),
        (torch.float16, torch.float32),
    ],
)
def test_tolerances_shrink_with_precision(low, high):
    coarse = default_tolerances(low, low)
    fine = default_tolerances(high, high)
    for key in ("xabstol", "xreltol", "abstol", "reltol"):
        assert fine[key] <= coarse[key]


def test_x_and_f_types_scale_independently():
    tols = default_tolerances(np.float64, np.float32)
    assert tols["xabstol"] == EPS
    assert tols["abstol"] == 4 * np.finfo(np.float32).eps


def test_options_follow_state_types():
    options = init_options(Secant(), torch.float32, torch.float32)
    assert options.abstol == pytest.approx(4 * np.finfo(np.float32).eps)
