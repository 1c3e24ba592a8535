"""Default hybrid method for scalar guesses."""

from __future__ import annotations

from typing import Optional

from ..core.methods import BracketingMethod, HybridMethod, NonBracketingMethod
from .bracketing import Brent
from .secant import Secant


class Order0(HybridMethod):
    """Secant steps until a sign change is seen, then Brent's method.

    Slower than a pure secant iteration on easy problems but far more robust:
    once two iterates bracket a zero, convergence is guaranteed.
    """

    def __init__(
        self,
        non_bracketing: Optional[NonBracketingMethod] = None,
        bracketing: Optional[BracketingMethod] = None,
    ) -> None:
        super().__init__(
            non_bracketing if non_bracketing is not None else Secant(),
            bracketing if bracketing is not None else Brent(),
        )

    def __repr__(self) -> str:
        if self.non_bracketing == Secant() and self.bracketing == Brent():
            return "Order0()"
        return super().__repr__()


__all__ = ["Order0"]
