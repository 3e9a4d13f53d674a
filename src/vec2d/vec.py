import math

import numpy as np
from numpy.typing import NDArray

from vec2d import logger
from vec2d.fmt import round_half_up


Vec2 = tuple[float, float]

# Two-slot storage, index 0 is x and index 1 is y
Axes = NDArray[np.floating]

# ---------------------------
# pure 2D vector queries
# ---------------------------

def v_dot(a: Vec2, b: Vec2) -> float:
    """Dot product a·b."""
    return a[0]*b[0] + a[1]*b[1]

def v_cross(a: Vec2, b: Vec2) -> float:
    """2D cross product, the z component of a × b."""
    return a[0]*b[1] - a[1]*b[0]

def v_norm(a: Vec2) -> float:
    """Euclidean norm |a|."""
    return math.sqrt(a[0]*a[0] + a[1]*a[1])

def v_equal(a: Vec2, b: Vec2) -> bool:
    """Exact axis-by-axis comparison, no tolerance."""
    return a[0] == b[0] and a[1] == b[1]

# ---------------------------
# in-place operations on storage
# ---------------------------
# Operands are widened to float64 so the arithmetic always happens in double
# precision; numpy casts the result back to the dtype of `a` on store.
# Floating-point errors are not signalled, results follow IEEE-754.
IEEE = dict(divide="ignore", invalid="ignore", over="ignore")

def v_add(a: Axes, b: Vec2) -> Axes:
    """a += b"""
    with np.errstate(**IEEE):
        np.add(a, np.asarray(b, dtype=np.float64), out=a)
    return a

def v_sub(a: Axes, b: Vec2) -> Axes:
    """a -= b"""
    with np.errstate(**IEEE):
        np.subtract(a, np.asarray(b, dtype=np.float64), out=a)
    return a

def v_mul(a: Axes, b: Vec2) -> Axes:
    """Elementwise a *= b."""
    with np.errstate(**IEEE):
        np.multiply(a, np.asarray(b, dtype=np.float64), out=a)
    return a

def v_div(a: Axes, b: Vec2) -> Axes:
    """Elementwise a /= b. Zero divisors give inf or nan."""
    b = np.asarray(b, dtype=np.float64)
    if not b.all():
        logger.debug("Dividing %s by a zero axis in %s.", a, b)
    with np.errstate(**IEEE):
        np.divide(a, b, out=a)
    return a

def v_scale(a: Axes, s: float) -> Axes:
    """Scale a by scalar s in place."""
    with np.errstate(**IEEE):
        np.multiply(a, np.float64(s), out=a)
    return a

def v_div_scalar(a: Axes, s: float) -> Axes:
    """Divide a by scalar s in place. s == 0 gives inf or nan."""
    if s == 0:
        logger.debug("Dividing %s by zero.", a)
    with np.errstate(**IEEE):
        np.divide(a, np.float64(s), out=a)
    return a

def v_neg(a: Axes) -> Axes:
    np.negative(a, out=a)
    return a

def v_abs(a: Axes) -> Axes:
    np.absolute(a, out=a)
    return a

def v_round(a: Axes, decimals: int) -> Axes:
    """Round each axis half-up to `decimals` places."""
    with np.errstate(**IEEE):
        a[:] = [round_half_up(value, decimals) for value in a]
    return a

def v_unit(a: Axes) -> Axes:
    """
    Scale a to unit length in place.
    A zero-length vector ends up with nan axes.
    """
    n = v_norm((float(a[0]), float(a[1])))
    if n == 0:
        logger.debug("Normalising a zero-length vector.")
    return v_div_scalar(a, n)
