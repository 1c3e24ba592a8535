"""Pytest configuration and shared fixtures for Zero Conduit tests.

This module provides:
- Deterministic numpy and torch seeds
- A counting wrapper to compare ``state.fnevals`` with actual calls
- Isolation of the process-wide debug mode
"""

import os
from typing import Any, Callable

import numpy as np
import pytest
import torch

from zconduit.diagnostics import is_debug_enabled, set_debug_enabled


class Counted:
    """Callable wrapper recording how often ``f`` was invoked."""

    def __init__(self, f: Callable[..., Any]) -> None:
        self.f = f
        self.calls = 0

    def __call__(self, *args: Any) -> Any:
        self.calls += 1
        return self.f(*args)


@pytest.fixture
def counted() -> Callable[[Callable[..., Any]], Counted]:
    """Factory wrapping a function in a call counter."""
    return Counted


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Auto-use fixture to set global random seeds for reproducibility."""
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    np.random.seed(seed)
    torch.manual_seed(seed)


@pytest.fixture(autouse=True)
def restore_debug_mode():
    """Leave the global debug flag as each test found it."""
    original = is_debug_enabled()
    yield
    set_debug_enabled(original)
