"""Scalar number model shared by the zero-finding engine.

Iterates and function values may be Python numbers, NumPy scalars or 0-d
PyTorch tensors. Python numbers are promoted to NumPy scalars on entry so
that every update rule follows IEEE semantics: dividing by zero produces
``inf`` or ``nan`` rather than raising.
"""

from __future__ import annotations

import math
from typing import Any, Union

import numpy as np
import torch

Number = Union[float, complex, np.generic, torch.Tensor]

_UINT_FOR_SIZE = {2: np.uint16, 4: np.uint32, 8: np.uint64}

_TORCH_REAL_OF_COMPLEX = {
    torch.complex64: torch.float32,
    torch.complex128: torch.float64,
}


def as_number(value: Any) -> Any:
    """Return ``value`` as a scalar with IEEE arithmetic.

    Python ``int``/``float`` become ``numpy.float64``, Python ``complex``
    becomes ``numpy.complex128``, NumPy integers become ``numpy.float64`` and
    0-d arrays are unwrapped. NumPy floating scalars and torch tensors are
    returned unchanged.
    """
    if isinstance(value, torch.Tensor):
        return value
    if isinstance(value, np.ndarray):
        if value.ndim != 0:
            raise ValueError(f"expected a scalar, got an array of shape {value.shape}")
        value = value[()]
    if isinstance(value, (np.integer, np.bool_)):
        return np.float64(value)
    if isinstance(value, np.generic):
        return value
    if isinstance(value, (bool, int, float)):
        return np.float64(value)
    if isinstance(value, complex):
        return np.complex128(value)
    return value


def dtype_of(value: Any) -> Any:
    """Return the NumPy or torch dtype of a scalar value."""
    if isinstance(value, torch.Tensor):
        return value.dtype
    if isinstance(value, (np.generic, np.ndarray)):
        return value.dtype
    try:
        return np.dtype(type(value))
    except TypeError:
        return np.dtype(np.float64)


def eps(kind: Any = float) -> float:
    """Machine epsilon for a dtype, a Python type or a value.

    Complex types use the epsilon of their real part; integer types are
    treated as ``float64``.
    """
    if isinstance(kind, torch.Tensor):
        kind = kind.dtype
    if isinstance(kind, torch.dtype):
        kind = _TORCH_REAL_OF_COMPLEX.get(kind, kind)
        if not kind.is_floating_point:
            kind = torch.float64
        return float(torch.finfo(kind).eps)
    if not isinstance(kind, (type, np.dtype)):
        kind = dtype_of(kind)
    dt = np.dtype(kind)
    if dt.kind not in "fc":
        dt = np.dtype(np.float64)
    return float(np.finfo(dt).eps)


def is_real(value: Any) -> bool:
    if isinstance(value, torch.Tensor):
        return not value.is_complex()
    return not np.iscomplexobj(value)


def isnan(value: Any) -> bool:
    if isinstance(value, torch.Tensor):
        return bool(torch.isnan(value))
    return bool(np.isnan(value))


def isinf(value: Any) -> bool:
    if isinstance(value, torch.Tensor):
        return bool(torch.isinf(value))
    return bool(np.isinf(value))


def sign(value: Any) -> Any:
    if isinstance(value, torch.Tensor):
        return torch.sign(value)
    return np.sign(value)


def opposite_signs(a: Any, b: Any) -> bool:
    """True when ``a`` and ``b`` are nonzero with different signs."""
    return bool(sign(a) * sign(b) < 0)


def cbrt(value: Any) -> float:
    return float(np.cbrt(float(value)))


def nan_like(value: Any) -> Any:
    """NaN in the type of ``value``."""
    if isinstance(value, torch.Tensor):
        return torch.full_like(value, math.nan)
    if isinstance(value, np.generic):
        return value.dtype.type(np.nan)
    return np.float64(np.nan)


def zero_like(value: Any) -> Any:
    if isinstance(value, torch.Tensor):
        return torch.zeros_like(value)
    if isinstance(value, np.generic):
        return value.dtype.type(0)
    return np.float64(0.0)


def nextfloat(value: Any) -> Any:
    """Next representable value above ``value`` in its own precision."""
    if isinstance(value, torch.Tensor):
        return torch.nextafter(value, torch.full_like(value, math.inf))
    value = as_number(value)
    return np.nextafter(value, value.dtype.type(np.inf))


def prevfloat(value: Any) -> Any:
    """Next representable value below ``value`` in its own precision."""
    if isinstance(value, torch.Tensor):
        return torch.nextafter(value, torch.full_like(value, -math.inf))
    value = as_number(value)
    return np.nextafter(value, value.dtype.type(-np.inf))


def promote(*values: Any) -> tuple:
    """Convert scalars to one common type.

    If any value is a torch tensor all become tensors of the promoted torch
    dtype; otherwise all become NumPy scalars of ``np.result_type``.
    """
    values = [as_number(v) for v in values]
    if any(isinstance(v, torch.Tensor) for v in values):
        tensors = [v if isinstance(v, torch.Tensor) else torch.as_tensor(v) for v in values]
        dtype = tensors[0].dtype
        for t in tensors[1:]:
            dtype = torch.promote_types(dtype, t.dtype)
        return tuple(t.to(dtype) for t in tensors)
    dt = np.result_type(*values)
    return tuple(dt.type(v) for v in values)


def middle(a: Any, b: Any) -> Any:
    """Midpoint of a bracket.

    For IEEE binary16/32/64 NumPy scalars of one sign this is the midpoint of
    the bit patterns, so every call halves the count of representable values
    between ``a`` and ``b`` and bisection ends after at most 64 steps. Ends of
    opposite sign give zero.
    """
    if opposite_signs(a, b):
        return zero_like(a)
    if (
        isinstance(a, np.floating)
        and isinstance(b, np.floating)
        and a.dtype == b.dtype
        and a.dtype.itemsize in _UINT_FOR_SIZE
    ):
        negative = bool(a < 0 or b < 0)
        utype = _UINT_FOR_SIZE[a.dtype.itemsize]
        one = utype(1)
        ia = np.array(abs(a), dtype=a.dtype).view(utype)
        ib = np.array(abs(b), dtype=a.dtype).view(utype)
        bits = (ia >> one) + (ib >> one) + (ia & ib & one)
        mid = np.asarray(bits, dtype=utype).view(a.dtype)[()]
        return -mid if negative else mid
    return a + (b - a) / 2


__all__ = [
    "Number",
    "as_number",
    "cbrt",
    "dtype_of",
    "eps",
    "is_real",
    "isinf",
    "isnan",
    "middle",
    "nan_like",
    "nextfloat",
    "opposite_signs",
    "prevfloat",
    "promote",
    "sign",
    "zero_like",
]
