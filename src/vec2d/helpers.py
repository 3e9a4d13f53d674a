import numpy as np

from vec2d.contract import Vector2D
from vec2d.field import FieldVector
from vec2d.indexed import IndexedVector
from vec2d.reduced import ReducedPrecisionVector

seed=0xf00d
rng = np.random.default_rng(seed)

# Implementations by the name they were originally published under
IMPLEMENTATIONS: dict[str, type] = {
    "array": IndexedVector,
    "float32": ReducedPrecisionVector,
    "object": FieldVector,
}


def get_implementation(kind:str) -> type:
    """Look up a vector class by name.

    Args:
        kind (str): One of "array", "float32" or "object".

    Raises:
        ValueError: If `kind` is not a known implementation.

    Returns:
        type: The vector class.
    """
    try:
        return IMPLEMENTATIONS[kind]
    except KeyError:
        raise ValueError(f"Unknown vector implementation {kind!r}, expected one of {sorted(IMPLEMENTATIONS)}.") from None


def create_vector(kind:str="array", x:float=0, y:float=0) -> Vector2D:
    return get_implementation(kind)(x, y)


def convert(vector:Vector2D, kind:str) -> Vector2D:
    """Copy `vector` into a new vector of another implementation.

    Converting to "float32" truncates the axes, so converting back will not
    always give an equal vector.
    """
    return create_vector(kind, vector.x, vector.y)


def random_vector(kind:str="array", *, low:float=-1.0, high:float=1.0) -> Vector2D:
    """Create a vector with both axes drawn uniformly from [low, high)."""
    x, y = rng.uniform(low, high, size=2).tolist()
    return create_vector(kind, x, y)
