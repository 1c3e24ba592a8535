"""
Example: Univariate zero finding with Zero Conduit

This example walks through the main entry points: the find_zero function
with its default methods, derivative-based methods, the low-level iterator
for custom stopping logic, and PyTorch scalars.
"""

import math

import numpy as np
import torch

from zconduit import (
    Bisection,
    ConvergenceFailed,
    FalsePosition,
    Halley,
    Newton,
    Secant,
    ZeroProblem,
    find_zero,
    init,
)
from zconduit import numeric


def example_defaults():
    """Example: scalar guess versus bracket."""
    print("=" * 60)
    print("Example 1: Default methods")
    print("=" * 60)

    x = find_zero(math.sin, 3.0)
    print(f"Order0 from 3.0:        x = {x!r}")
    x = find_zero(math.sin, (3.0, 4.0))
    print(f"Bisection on (3, 4):    x = {x!r}")

    # Kepler's equation E - e sin(E) = M, with the parameter (e, M)
    kepler = lambda E, p: E - p[0] * math.sin(E) - p[1]
    E = find_zero(kepler, (0.0, 2 * math.pi), FalsePosition(), (0.3, 1.0))
    print(f"Kepler, e=0.3, M=1.0:   E = {E!r}")
    print()


def example_derivatives():
    """Example: Newton and Halley with caller-supplied derivatives."""
    print("=" * 60)
    print("Example 2: Derivative methods")
    print("=" * 60)

    f = lambda x: x**3 - 2 * x - 5
    fp = lambda x: 3 * x**2 - 2
    fpp = lambda x: 6 * x
    print(f"Newton:  x = {find_zero((f, fp), 2.0, Newton())!r}")
    print(f"Halley:  x = {find_zero((f, fp, fpp), 2.0, Halley())!r}")

    try:
        find_zero(lambda x: x * x + 1, 0.5, Secant())
    except ConvergenceFailed as err:
        print(f"No real zero of x^2 + 1: {err}")
    print()


def example_iterator():
    """Example: stepping the secant method and switching to bisection."""
    print("=" * 60)
    print("Example 3: Problem iterator")
    print("=" * 60)

    it = init(ZeroProblem(math.sin, 3.0), Secant())
    for x in it:
        state = it.state
        print(f"  step {state.steps}: x = {x!r}")
        if numeric.opposite_signs(state.f_prev, state.f_cur):
            print("  sign change found, bisecting")
            it = init(ZeroProblem(math.sin, (state.x_prev, state.x_cur)), Bisection())
            break
    x = it.solve()
    print(f"Result after {it.state.steps} bisection steps: x = {x!r}")
    print()


def example_precision():
    """Example: tolerances follow the floating point type."""
    print("=" * 60)
    print("Example 4: Precision")
    print("=" * 60)

    for value in (np.float32(3.0), torch.tensor(3.0, dtype=torch.float64)):
        f = torch.sin if isinstance(value, torch.Tensor) else np.sin
        x = find_zero(f, value)
        print(f"{type(value).__name__:>8} start: x = {x}")

    find_zero(math.sin, 3.0, verbose=True)


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("Zero Conduit - Univariate Zero Finding Examples")
    print("=" * 60 + "\n")

    example_defaults()
    example_derivatives()
    example_iterator()
    example_precision()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)
