"""The capability set shared by every 2D vector representation.

Any of the concrete vectors (IndexedVector, ReducedPrecisionVector, FieldVector)
can be used wherever a ``Vector2D`` is expected. They do not inherit from one
another or from this protocol; they simply conform to it.

Mutating operations change the receiver in place and return it so calls can be
chained. The argument of a binary operation is never modified:

    add, subtract, multiply_by_vector, divide_by_vector,
    multiply_by_scalar, divide_by_scalar,
    reverse, abs, round, normalise, set_x, set_y, set_axes

Pure queries never modify either operand:

    dot, cross, magnitude, equals, to_string, to_array, to_object, clone

Dividing by zero and normalising a zero-length vector are not guarded; the
axes become inf or nan following IEEE-754.
"""
from typing import Iterator, Protocol, Self, runtime_checkable


# Number of decimal places kept by `round()`
ROUND_DECIMALS = 2


@runtime_checkable
class Vector2D(Protocol):

    # `x` and `y` read and write the same storage as get_*/set_*
    @property
    def x(self) -> float: ...
    @x.setter
    def x(self, value: float) -> None: ...

    @property
    def y(self) -> float: ...
    @y.setter
    def y(self, value: float) -> None: ...

    def get_x(self) -> float: ...
    def get_y(self) -> float: ...
    def set_x(self, value: float) -> Self: ...
    def set_y(self, value: float) -> Self: ...
    def set_axes(self, x: float, y: float) -> Self: ...

    def add(self, other: "Vector2D") -> Self: ...
    def subtract(self, other: "Vector2D") -> Self: ...
    def multiply_by_vector(self, other: "Vector2D") -> Self: ...
    def divide_by_vector(self, other: "Vector2D") -> Self: ...
    def multiply_by_scalar(self, k: float) -> Self: ...
    def divide_by_scalar(self, k: float) -> Self: ...

    def reverse(self) -> Self: ...
    def abs(self) -> Self: ...
    def round(self) -> Self: ...
    def normalise(self) -> Self: ...

    def dot(self, other: "Vector2D") -> float: ...
    def cross(self, other: "Vector2D") -> float: ...
    def magnitude(self) -> float: ...
    def equals(self, other: "Vector2D") -> bool: ...

    def to_string(self, round_to_int: bool = False) -> str: ...
    def to_array(self) -> list[float]: ...
    def to_object(self) -> dict[str, float]: ...
    def clone(self) -> Self: ...

    def __iter__(self) -> Iterator[float]: ...
