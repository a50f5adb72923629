"""Single numeric values that can be copied into and read back out."""

from __future__ import annotations

from numbers import Real
from typing import Union

__all__ = ["Scalar"]

Number = Union[int, float]


class Scalar:
    """A mutable holder for one integer or floating-point value."""

    __slots__ = ("_value",)

    def __init__(self, value: Number = 0.0) -> None:
        self._value = self._coerce(value)

    @staticmethod
    def _coerce(value) -> Number:
        if isinstance(value, Scalar):
            return value._value
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError(f"scalar value must be a real number, got {type(value).__name__}")
        if isinstance(value, int):
            return int(value)
        return float(value)

    def __float__(self) -> float:
        return float(self._value)

    def __int__(self) -> int:
        return int(self._value)

    def __eq__(self, other) -> bool:
        if isinstance(other, Scalar):
            return self._value == other._value
        if isinstance(other, Real) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        if isinstance(self._value, int):
            return str(self._value)
        return f"{self._value:g}"

    def __repr__(self) -> str:
        return f"Scalar({self._value!r})"

    def deep_copy(self, value) -> None:
        """Replace the held value with ``value``."""
        self._value = self._coerce(value)