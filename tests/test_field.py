import numpy as np

from vec2d import FieldVector, IndexedVector
from vec2d.field import AXES, FIELDS, RECORD_DTYPE


def test_record_layout():
    assert list(FIELDS) == list(AXES) == ["x", "y"]
    assert RECORD_DTYPE.names == ("x", "y")
    assert RECORD_DTYPE["x"] == np.float64


def test_fields_are_addressed_by_name():
    v = FieldVector(3, 4)
    assert v._record["x"][0] == 3
    assert v._record["y"][0] == 4
    v.y = 9
    assert v._record["y"][0] == 9
    assert v._record["x"][0] == 3


def test_matches_indexed_vector():
    a = FieldVector(1.7, -2.3)
    b = IndexedVector(1.7, -2.3)
    other = IndexedVector(0.3, 4.1)
    for v in (a, b):
        v.add(other).multiply_by_vector(other).divide_by_scalar(3).reverse().abs()
    assert a.to_array() == b.to_array()
    assert a.magnitude() == b.magnitude()
    assert a.to_string() == b.to_string()
    assert a == b


def test_clone_does_not_share_record():
    v = FieldVector(1, 2)
    c = v.clone()
    assert not np.shares_memory(c._record, v._record)


def test_repr():
    assert repr(FieldVector(0, -1)) == "FieldVector(0.0, -1.0)"


def test_record_holds_one_entry():
    v = FieldVector(1, 2)
    assert v._record.shape == (1,)
    assert v._record.dtype == RECORD_DTYPE
    assert all(set(f) == {"dtype"} for f in FIELDS.values())
