"""Dense one-dimensional vectors of double-precision values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from numbers import Integral, Real
from typing import Union

import numpy as np

__all__ = ["Vector"]


def _format_value(value: float) -> str:
    return f"{value:g}"


class Vector:
    """A fixed-size vector of floats with the usual level-1 BLAS operations."""

    __slots__ = ("_data",)

    def __init__(self, size_or_values: Union[int, Iterable[float]]) -> None:
        if isinstance(size_or_values, Integral) and not isinstance(size_or_values, bool):
            size = int(size_or_values)
            if size < 0:
                raise ValueError(f"vector size must be non-negative, got {size}")
            self._data = np.zeros(size, dtype=np.float64)
        elif isinstance(size_or_values, Vector):
            self._data = size_or_values._data.copy()
        else:
            data = np.array(list(size_or_values), dtype=np.float64)
            if data.ndim != 1:
                raise ValueError("vector values must be a flat sequence of numbers")
            self._data = data

    @classmethod
    def _wrap(cls, data: np.ndarray) -> "Vector":
        vector = cls.__new__(cls)
        vector._data = data
        return vector

    def _check_same_size(self, other: "Vector") -> None:
        if not isinstance(other, Vector):
            raise TypeError(f"expected a Vector, got {type(other).__name__}")
        if len(other) != len(self):
            raise ValueError(
                f"vector sizes differ: {len(self)} and {len(other)}"
            )

    def __len__(self) -> int:
        return int(self._data.shape[0])

    def __iter__(self) -> Iterator[float]:
        return (float(v) for v in self._data)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector._wrap(self._data[index].copy())
        return float(self._data[index])

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            self._data[index] = np.asarray(list(value), dtype=np.float64)
        else:
            self._data[index] = float(value)

    def __eq__(self, other) -> bool:
        if isinstance(other, Vector):
            data = other._data
        elif isinstance(other, (list, tuple)):
            data = np.asarray(other, dtype=np.float64)
        else:
            return NotImplemented
        return data.shape == self._data.shape and bool(np.array_equal(self._data, data))

    __hash__ = None  # type: ignore[assignment]

    def __iadd__(self, other: "Vector") -> "Vector":
        self._check_same_size(other)
        self._data += other._data
        return self

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_same_size(other)
        return Vector._wrap(self._data + other._data)

    def __imul__(self, alpha: float) -> "Vector":
        if not isinstance(alpha, Real):
            return NotImplemented
        self._data *= float(alpha)
        return self

    def __mul__(self, alpha: float) -> "Vector":
        if not isinstance(alpha, Real):
            return NotImplemented
        return self.scal(alpha)

    def __rmul__(self, alpha: float) -> "Vector":
        return self.__mul__(alpha)

    def __str__(self) -> str:
        return "[" + ", ".join(_format_value(v) for v in self) + "]"

    def __repr__(self) -> str:
        return f"Vector({self.tolist()!r})"

    def tolist(self) -> list[float]:
        """Return the elements as a list of Python floats."""
        return [float(v) for v in self._data]

    def copy(self) -> "Vector":
        """Return an independent copy of this vector."""
        return Vector._wrap(self._data.copy())

    def deep_copy(self, source: "Vector") -> None:
        """Overwrite every element with the matching element of ``source``."""
        self._check_same_size(source)
        np.copyto(self._data, source._data)

    def slice(self, start: int, stop: int) -> "Vector":
        """Return a copy of the elements in ``[start, stop)``."""
        if not 0 <= start <= stop <= len(self):
            raise IndexError(
                f"slice [{start}, {stop}) out of range for size {len(self)}"
            )
        return Vector._wrap(self._data[start:stop].copy())

    def dot(self, other: "Vector") -> float:
        """Return the inner product with ``other``."""
        self._check_same_size(other)
        return float(np.dot(self._data, other._data))

    def norm1(self) -> float:
        """Return the sum of absolute values."""
        return float(np.sum(np.abs(self._data)))

    def norm2(self) -> float:
        """Return the Euclidean norm."""
        return float(np.sqrt(np.dot(self._data, self._data)))

    def norminf(self) -> float:
        """Return the largest absolute value, or 0 for an empty vector."""
        if len(self) == 0:
            return 0.0
        return float(np.max(np.abs(self._data)))

    def scal(self, alpha: float) -> "Vector":
        """Return a new vector holding ``alpha * self``."""
        return Vector._wrap(float(alpha) * self._data)

    def axpby(self, y: "Vector", alpha: float = 1.0, beta: float = 1.0) -> "Vector":
        """Set ``y = alpha * self + beta * y`` in place and return ``y``."""
        self._check_same_size(y)
        y._data[:] = float(alpha) * self._data + float(beta) * y._data
        return y