"""Element-wise and reduction kernels on vectors: fill, iamax, sum and reciprocal."""

from __future__ import annotations

from numbers import Real

import numpy as np

from .vector import Vector

__all__ = ["fill", "iamax", "total", "reciprocal"]


def _require_vector(vector) -> Vector:
    if not isinstance(vector, Vector):
        raise TypeError(f"expected a Vector, got {type(vector).__name__}")
    return vector


def _array(vector: Vector) -> np.ndarray:
    return np.array(vector.tolist(), dtype=np.float64)


def fill(vector: Vector, value: float) -> Vector:
    """Set every element of ``vector`` to ``value`` in place and return it."""
    _require_vector(vector)
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"fill value must be a real number, got {type(value).__name__}")
    vector[:] = [float(value)] * len(vector)
    return vector


def iamax(vector: Vector) -> int:
    """Return the 1-based index of the first element of largest magnitude.

    An empty vector gives 0, following the BLAS convention.
    """
    data = _array(_require_vector(vector))
    if data.size == 0:
        return 0
    return int(np.argmax(np.abs(data))) + 1


def total(vector: Vector) -> float:
    """Return the sum of all elements."""
    return float(np.sum(_array(_require_vector(vector))))


def reciprocal(vector: Vector) -> Vector:
    """Return a new vector holding ``1 / x`` for every element ``x``.

    A zero element gives an infinity of the same sign, as in IEEE arithmetic.
    """
    data = _array(_require_vector(vector))
    with np.errstate(divide="ignore"):
        result = 1.0 / data
    return Vector(result.tolist())