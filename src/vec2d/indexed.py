from typing import Iterator, Self

import numpy as np
from numpy.typing import NDArray

from vec2d import vec
from vec2d.contract import ROUND_DECIMALS, Vector2D
from vec2d.fmt import format_pair


class IndexedVector:
    """ 2D vector stored as a two-slot float64 array.

        Slot 0 holds x and slot 1 holds y. Values keep full double precision;
        only `round()` ever rounds them.
    """

    _axes: NDArray[np.float64]

    def __init__(self, x:float=0, y:float=0):
        self._axes = np.array((x, y), dtype=np.float64)

    @property
    def x(self) -> float:
        return float(self._axes[0])

    @x.setter
    def x(self, value:float):
        self._axes[0] = value

    @property
    def y(self) -> float:
        return float(self._axes[1])

    @y.setter
    def y(self, value:float):
        self._axes[1] = value

    def get_x(self) -> float:
        return self.x

    def get_y(self) -> float:
        return self.y

    def set_x(self, value:float) -> Self:
        self._axes[0] = value
        return self

    def set_y(self, value:float) -> Self:
        self._axes[1] = value
        return self

    def set_axes(self, x:float, y:float) -> Self:
        self._axes[:] = (x, y)
        return self

    # Binary operations mutate self, never `other`

    def add(self, other:Vector2D) -> Self:
        vec.v_add(self._axes, (other.x, other.y))
        return self

    def subtract(self, other:Vector2D) -> Self:
        vec.v_sub(self._axes, (other.x, other.y))
        return self

    def multiply_by_vector(self, other:Vector2D) -> Self:
        vec.v_mul(self._axes, (other.x, other.y))
        return self

    def divide_by_vector(self, other:Vector2D) -> Self:
        vec.v_div(self._axes, (other.x, other.y))
        return self

    def multiply_by_scalar(self, k:float) -> Self:
        vec.v_scale(self._axes, k)
        return self

    def divide_by_scalar(self, k:float) -> Self:
        vec.v_div_scalar(self._axes, k)
        return self

    def reverse(self) -> Self:
        vec.v_neg(self._axes)
        return self

    def abs(self) -> Self:
        vec.v_abs(self._axes)
        return self

    def round(self) -> Self:
        vec.v_round(self._axes, ROUND_DECIMALS)
        return self

    def normalise(self) -> Self:
        vec.v_unit(self._axes)
        return self

    # Queries

    def dot(self, other:Vector2D) -> float:
        return vec.v_dot((self.x, self.y), (other.x, other.y))

    def cross(self, other:Vector2D) -> float:
        return vec.v_cross((self.x, self.y), (other.x, other.y))

    def magnitude(self) -> float:
        return vec.v_norm((self.x, self.y))

    def equals(self, other:Vector2D) -> bool:
        return vec.v_equal((self.x, self.y), (other.x, other.y))

    def to_string(self, round_to_int:bool=False) -> str:
        return format_pair(self.x, self.y, round_to_int)

    def to_array(self) -> list[float]:
        return [self.x, self.y]

    def to_object(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}

    def clone(self) -> Self:
        return type(self)(self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __eq__(self, other):
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"IndexedVector({self.x!r}, {self.y!r})"
