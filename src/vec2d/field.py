from collections import OrderedDict
from typing import Iterator, Self

import numpy as np

from vec2d import logger
from vec2d.contract import ROUND_DECIMALS, Vector2D
from vec2d.fmt import format_pair, round_half_up
from vec2d.vec import IEEE, v_cross, v_dot, v_equal, v_norm


AXES = ("x", "y")

# Record layout, one named field per axis
FIELDS = OrderedDict()

FIELDS['x'] = {
    'dtype': np.float64,
}

FIELDS['y'] = {
    'dtype': np.float64,
}

RECORD_DTYPE = np.dtype([(name, f['dtype']) for name, f in FIELDS.items()])


class FieldVector:
    """ 2D vector stored as a record with two named fields.

        Each axis is addressed by name (`record['x']`, `record['y']`) rather
        than by position. Behaves exactly like IndexedVector.
    """

    def __init__(self, x:float=0, y:float=0):
        self._record = np.zeros(1, dtype=RECORD_DTYPE)
        self._record['x'] = x
        self._record['y'] = y

    def _field(self, name:str) -> np.ndarray:
        return self._record[name]

    @property
    def x(self) -> float:
        return float(self._record['x'][0])

    @x.setter
    def x(self, value:float):
        self._record['x'] = value

    @property
    def y(self) -> float:
        return float(self._record['y'][0])

    @y.setter
    def y(self, value:float):
        self._record['y'] = value

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
        self.x = x
        self.y = y
        return self

    def _apply(self, ufunc:np.ufunc, operands:tuple[float, float]) -> Self:
        """Apply `ufunc(field, operand)` to each field in place."""
        with np.errstate(**IEEE):
            for name, operand in zip(AXES, operands):
                ufunc(self._field(name), np.float64(operand), out=self._field(name))
        return self

    def add(self, other:Vector2D) -> Self:
        return self._apply(np.add, (other.x, other.y))

    def subtract(self, other:Vector2D) -> Self:
        return self._apply(np.subtract, (other.x, other.y))

    def multiply_by_vector(self, other:Vector2D) -> Self:
        return self._apply(np.multiply, (other.x, other.y))

    def divide_by_vector(self, other:Vector2D) -> Self:
        if other.x == 0 or other.y == 0:
            logger.debug("Dividing %r by a zero axis in %r.", self, other)
        return self._apply(np.divide, (other.x, other.y))

    def multiply_by_scalar(self, k:float) -> Self:
        return self._apply(np.multiply, (k, k))

    def divide_by_scalar(self, k:float) -> Self:
        if k == 0:
            logger.debug("Dividing %r by zero.", self)
        return self._apply(np.divide, (k, k))

    def reverse(self) -> Self:
        return self._apply(np.multiply, (-1, -1))

    def abs(self) -> Self:
        for name in AXES:
            np.absolute(self._field(name), out=self._field(name))
        return self

    def round(self) -> Self:
        self.x = round_half_up(self.x, ROUND_DECIMALS)
        self.y = round_half_up(self.y, ROUND_DECIMALS)
        return self

    def normalise(self) -> Self:
        m = self.magnitude()
        if m == 0:
            logger.debug("Normalising a zero-length vector.")
        return self._apply(np.divide, (m, m))

    def dot(self, other:Vector2D) -> float:
        return v_dot((self.x, self.y), (other.x, other.y))

    def cross(self, other:Vector2D) -> float:
        return v_cross((self.x, self.y), (other.x, other.y))

    def magnitude(self) -> float:
        return v_norm((self.x, self.y))

    def equals(self, other:Vector2D) -> bool:
        return v_equal((self.x, self.y), (other.x, other.y))

    def to_string(self, round_to_int:bool=False) -> str:
        return format_pair(self.x, self.y, round_to_int)

    def to_array(self) -> list[float]:
        return [self.x, self.y]

    def to_object(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in AXES}

    def clone(self) -> Self:
        return type(self)(self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        for name in AXES:
            yield getattr(self, name)

    def __eq__(self, other):
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"FieldVector({self.x!r}, {self.y!r})"
