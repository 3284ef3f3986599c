"""Tests for weight types and the infinity sentinel."""

import numpy as np
import pytest

from graphclassics.exceptions import GraphError, WeightTypeError
from graphclassics.weights import WeightType, infinity_for, is_unreachable


@pytest.mark.parametrize("dtype", [np.int8, np.int16, np.int32, np.int64, np.uint32])
def test_integer_infinity_is_max_over_ten(dtype):
    """Test the integer sentinel and that two of them still fit."""
    wt = WeightType.of(dtype)
    info = np.iinfo(dtype)
    assert wt.infinity == info.max // 10
    assert wt.infinity.dtype == np.dtype(dtype)
    assert int(wt.infinity) * 2 <= info.max


@pytest.mark.parametrize("dtype", [np.float32, np.float64])
def test_float_infinity_is_finite(dtype):
    """Test the float sentinel is finite and max / 10."""
    wt = WeightType.of(dtype)
    assert np.isfinite(wt.infinity)
    assert wt.infinity == np.finfo(dtype).max / 10


def test_python_types_resolve():
    """Test Python int and float map to 64-bit dtypes."""
    assert WeightType.of(int).dtype == np.int64
    assert WeightType.of(float).dtype == np.float64
    assert WeightType.of("int32").dtype == np.int32


def test_weight_type_passthrough():
    """Test an existing WeightType is returned unchanged."""
    wt = WeightType.of(np.int16)
    assert WeightType.of(wt) is wt


@pytest.mark.parametrize("dtype", [bool, np.complex128, object, "U4"])
def test_non_numeric_dtypes_rejected(dtype):
    """Test bool, complex, object and string dtypes are refused."""
    with pytest.raises(WeightTypeError):
        WeightType.of(dtype)


def test_weight_type_error_hierarchy():
    """Test WeightTypeError is both a GraphError and a TypeError."""
    with pytest.raises(GraphError):
        WeightType.of(bool)
    with pytest.raises(TypeError):
        WeightType.of(bool)


def test_cast_and_constants():
    """Test casting helpers."""
    wt = WeightType.of(np.int32)
    assert wt.cast(7).dtype == np.int32
    assert wt.zero == 0
    assert wt.one == 1
    assert wt.is_integer
    assert not WeightType.of(np.float64).is_integer


def test_full_defaults_to_sentinel():
    """Test full() fills with the sentinel unless told otherwise."""
    wt = WeightType.of(np.int64)
    assert (wt.full(3) == wt.infinity).all()
    assert (wt.full((2, 2), 0) == 0).all()


def test_is_unreachable():
    """Test element-wise sentinel detection."""
    inf = infinity_for(np.int64)
    dist = np.array([0, 5, inf], dtype=np.int64)
    assert is_unreachable(dist).tolist() == [False, False, True]
    assert is_unreachable(np.float32(1.0), np.float32) == False  # noqa: E712


def test_cast_rejects_fractional_values_for_integers():
    """Test integer casts refuse to truncate."""
    wt = WeightType.of(np.int64)
    with pytest.raises(WeightTypeError, match="truncation"):
        wt.cast(2.7)
    with pytest.raises(WeightTypeError):
        wt.cast(np.float64(-0.5))
    assert wt.cast(4.0) == 4


def test_cast_keeps_fractions_for_floats():
    """Test float casts keep the fractional part."""
    assert WeightType.of(np.float64).cast(2.7) == 2.7
