"""Update rules for the zero-finding engine.

Bracketing: :class:`Bisection`, :class:`FalsePosition`, :class:`Brent`.
Derivative-free: :class:`Secant` (``Order1``), :class:`Steffensen` (``Order2``).
With derivatives: :class:`Newton`, :class:`Halley`, :class:`Schroder`.
Hybrid: :class:`Order0`.
"""

from .bracketing import Bisection, Brent, FalsePosition
from .derivative import DerivativeMethod, Halley, Newton, Schroder
from .hybrid import Order0
from .secant import Order1, Order2, Secant, Steffensen

__all__ = [
    "Bisection",
    "Brent",
    "DerivativeMethod",
    "FalsePosition",
    "Halley",
    "Newton",
    "Order0",
    "Order1",
    "Order2",
    "Schroder",
    "Secant",
    "Steffensen",
]
