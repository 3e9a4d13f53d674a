import numpy as np
import pytest

from vec2d import IndexedVector, ReducedPrecisionVector
from vec2d.reduced import DTYPE


def f32(value):
    """Value after a round trip through float32 storage."""
    return float(np.float32(value))


def test_construction_truncates():
    v = ReducedPrecisionVector(0.1, 0.2)
    assert v.x == f32(0.1)
    assert v.y == f32(0.2)
    assert v.x != 0.1


def test_storage_dtype():
    assert DTYPE == np.float32
    assert ReducedPrecisionVector()._axes.dtype == np.float32


def test_setters_truncate():
    v = ReducedPrecisionVector()
    v.set_x(0.3)
    v.y = 0.7
    assert v.to_array() == [f32(0.3), f32(0.7)]
    v.set_axes(1.1, 2.2)
    assert v.to_object() == {"x": f32(1.1), "y": f32(2.2)}


def test_add_truncates_result():
    tiny = IndexedVector(1e-8, 0)
    assert ReducedPrecisionVector(1, 0).add(tiny).x == 1.0
    assert IndexedVector(1, 0).add(tiny).x == 1 + 1e-8


def test_reads_are_python_floats():
    v = ReducedPrecisionVector(1.5, 2.5)
    assert type(v.get_x()) is float
    assert all(type(value) is float for value in v.to_array())


def test_round_is_close_but_not_exact():
    v = ReducedPrecisionVector(5.222, 0.592).round()
    assert v.x == pytest.approx(5.22, abs=1e-5)
    assert v.y == pytest.approx(0.59, abs=1e-5)
    assert v.x == f32(5.22)


def test_to_string_shows_stored_value():
    v = ReducedPrecisionVector(10.9, 20.3)
    assert v.to_string() == f"({f32(10.9)!r}, {f32(20.3)!r})"
    assert v.to_string(True) == "(11, 20)"


def test_equals_is_exact_across_precisions():
    assert not ReducedPrecisionVector(0.1, 0).equals(IndexedVector(0.1, 0))
    assert ReducedPrecisionVector(0.5, 0).equals(IndexedVector(0.5, 0))


def test_repr():
    assert repr(ReducedPrecisionVector(1.5, -2)) == "ReducedPrecisionVector(1.5, -2.0)"


@pytest.mark.filterwarnings("error")
def test_float32_overflow_is_silent():
    v = ReducedPrecisionVector(3e38, -3e38).multiply_by_scalar(10)
    assert v.to_array() == [float("inf"), float("-inf")]
    v = ReducedPrecisionVector(3e38, 0).add(IndexedVector(3e38, 0))
    assert v.x == float("inf")
