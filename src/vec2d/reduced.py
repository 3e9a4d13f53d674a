from typing import Iterator, Self

import numpy as np
from numpy.typing import NDArray

from vec2d import vec
from vec2d.contract import ROUND_DECIMALS, Vector2D
from vec2d.fmt import format_pair


# Storage type for both axes
DTYPE = np.float32


class ReducedPrecisionVector:
    """ 2D vector stored as a two-slot float32 array.

        Every write (constructor, setters, each mutating operation) truncates
        to 32-bit precision. Reads widen the stored value back to a Python
        float, and arithmetic runs in double precision before the result is
        truncated again on store.

        Because of the truncation, `ReducedPrecisionVector(0.1, 0).x` is
        0.10000000149011612, not 0.1. `equals()` stays exact; compare with a
        tolerance when checking results against full-precision values.
    """

    _axes: NDArray[np.float32]

    def __init__(self, x:float=0, y:float=0):
        self._axes = np.array((x, y), dtype=DTYPE)

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
        self.x = value
        return self

    def set_y(self, value:float) -> Self:
        self.y = value
        return self

    def set_axes(self, x:float, y:float) -> Self:
        self._axes[:] = (x, y)
        return self

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
        """Round both axes to two decimals.

        The rounded value is itself truncated to float32, so 5.222 becomes
        5.21999979019165 rather than 5.22.
        """
        vec.v_round(self._axes, ROUND_DECIMALS)
        return self

    def normalise(self) -> Self:
        vec.v_unit(self._axes)
        return self

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
        # Stored values are already float32, the copy is exact
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
        return f"ReducedPrecisionVector({self.x!r}, {self.y!r})"
