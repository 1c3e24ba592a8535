"""Tests for the scalar number model."""

import math

import numpy as np
import pytest
import torch

from zconduit import numeric


def test_as_number_promotes_python_numbers():
    assert isinstance(numeric.as_number(3), np.float64)
    assert isinstance(numeric.as_number(2.5), np.float64)
    assert isinstance(numeric.as_number(1 + 2j), np.complex128)
    assert isinstance(numeric.as_number(np.int32(4)), np.float64)


def test_as_number_keeps_precision_and_tensors():
    x32 = np.float32(1.5)
    assert numeric.as_number(x32) is x32
    t = torch.tensor(1.5, dtype=torch.float32)
    assert numeric.as_number(t) is t
    assert numeric.as_number(np.array(2.0)) == np.float64(2.0)


def test_as_number_rejects_arrays():
    with pytest.raises(ValueError):
        numeric.as_number(np.array([1.0, 2.0]))


def test_eps_by_kind():
    assert numeric.eps(np.float64) == np.finfo(np.float64).eps
    assert numeric.eps(np.float32) == np.finfo(np.float32).eps
    assert numeric.eps(np.complex64) == np.finfo(np.float32).eps
    assert numeric.eps(float) == np.finfo(np.float64).eps
    assert numeric.eps(int) == np.finfo(np.float64).eps
    assert numeric.eps(np.float32(2.0)) == np.finfo(np.float32).eps


def test_eps_torch_dtypes():
    assert numeric.eps(torch.float32) == pytest.approx(np.finfo(np.float32).eps)
    assert numeric.eps(torch.complex128) == numeric.eps(torch.float64)
    assert numeric.eps(torch.tensor(1.0, dtype=torch.float16)) == pytest.approx(
        np.finfo(np.float16).eps
    )


def test_nextfloat_prevfloat():
    one = np.float64(1.0)
    assert numeric.nextfloat(one) == 1.0 + np.finfo(np.float64).eps
    assert numeric.prevfloat(one) == 1.0 - np.finfo(np.float64).eps / 2
    assert numeric.nextfloat(np.float32(1.0)).dtype == np.float32
    t = torch.tensor(1.0, dtype=torch.float64)
    assert float(numeric.nextfloat(t)) == 1.0 + np.finfo(np.float64).eps


def test_opposite_signs():
    assert numeric.opposite_signs(1.0, -2.0)
    assert not numeric.opposite_signs(0.0, -1.0)
    assert not numeric.opposite_signs(np.float64(3.0), np.float64(4.0))
    assert numeric.opposite_signs(torch.tensor(-1.0), torch.tensor(0.5))


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (1.0, 4.0, 2.0),
        (3.0, 4.0, 3.5),
        (-4.0, -3.0, -3.5),
        (-1.0, 1.0, 0.0),
    ],
)
def test_middle_bit_midpoint(a, b, expected):
    assert numeric.middle(np.float64(a), np.float64(b)) == expected


def test_middle_adjacent_floats_has_no_interior_point():
    a = np.float64(1.0)
    b = numeric.nextfloat(a)
    m = numeric.middle(a, b)
    assert m == a or m == b


def test_middle_keeps_dtype():
    m = numeric.middle(np.float32(1.0), np.float32(4.0))
    assert m.dtype == np.float32
    assert m == np.float32(2.0)


def test_middle_tensor_falls_back_to_arithmetic_mean():
    m = numeric.middle(torch.tensor(1.0), torch.tensor(4.0))
    assert float(m) == 2.5


def test_nan_and_zero_like():
    assert math.isnan(numeric.nan_like(np.float32(1.0)))
    assert numeric.nan_like(np.float32(1.0)).dtype == np.float32
    assert numeric.isnan(numeric.nan_like(torch.tensor(1.0)))
    assert numeric.zero_like(np.complex128(1j)) == 0


def test_cbrt():
    assert numeric.cbrt(8.0) == pytest.approx(2.0)
    assert numeric.cbrt(np.float32(27.0)) == pytest.approx(3.0)


def test_promote_numpy_scalars_to_common_dtype():
    a, b = numeric.promote(np.float32(3.0), 4.0)
    assert a.dtype == b.dtype == np.float64
    a, b = numeric.promote(np.float32(3.0), np.float32(4.0))
    assert a.dtype == b.dtype == np.float32


def test_promote_with_tensor_gives_tensors():
    a, b = numeric.promote(torch.tensor(3.0, dtype=torch.float32), np.float64(4.0))
    assert isinstance(a, torch.Tensor) and isinstance(b, torch.Tensor)
    assert a.dtype == b.dtype == torch.float64
    assert float(b) == 4.0
