"""Compressed sparse row matrices with sparse matrix-vector products."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

import numpy as np

from .vector import Vector

__all__ = ["CsrMatrix"]

_TRANSPOSE_MODES = {"N": False, "C": False, "T": True, "H": True}


def _fmt(value: float) -> str:
    return f"{value:g}"


def _join(items: Iterable[str]) -> str:
    return "[" + ",".join(items) + "]"


class CsrMatrix:
    """A real sparse matrix stored as row offsets, column indices and values."""

    __slots__ = ("_nrows", "_ncols", "_row_map", "_col_map", "_values")

    def __init__(
        self,
        nrows: int,
        ncols: int,
        row_map: Optional[Iterable[int]] = None,
        col_map: Optional[Iterable[int]] = None,
        values: Optional[Iterable[float]] = None,
    ) -> None:
        nrows = int(nrows)
        ncols = int(ncols)
        if nrows < 0 or ncols < 0:
            raise ValueError(f"matrix dimensions must be non-negative, got {nrows}x{ncols}")
        self._nrows = nrows
        self._ncols = ncols

        if row_map is None:
            if col_map is not None or values is not None:
                raise ValueError("column indices and values need a row map")
            self._row_map = np.zeros(nrows + 1, dtype=np.int64)
            self._col_map = np.zeros(0, dtype=np.int64)
            self._values = np.zeros(0, dtype=np.float64)
            return

        rows = np.array(list(row_map), dtype=np.int64)
        cols = np.array(list(col_map if col_map is not None else []), dtype=np.int64)
        vals = np.array(list(values if values is not None else []), dtype=np.float64)

        if rows.shape != (nrows + 1,):
            raise ValueError(
                f"row map must hold {nrows + 1} offsets, got {rows.size}"
            )
        if cols.size != vals.size:
            raise ValueError(
                f"{cols.size} column indices do not match {vals.size} values"
            )
        if rows[0] != 0:
            raise ValueError("row map must start at 0")
        if np.any(np.diff(rows) < 0):
            raise ValueError("row map offsets must not decrease")
        if rows[-1] != vals.size:
            raise ValueError(
                f"row map ends at {int(rows[-1])} but there are {vals.size} entries"
            )
        if cols.size and (cols.min() < 0 or cols.max() >= ncols):
            raise ValueError(f"column index out of range for {ncols} columns")

        self._row_map = rows
        self._col_map = cols
        self._values = vals

    @property
    def nrows(self) -> int:
        """Number of rows."""
        return self._nrows

    @property
    def ncols(self) -> int:
        """Number of columns."""
        return self._ncols

    @property
    def nnz(self) -> int:
        """Number of stored entries."""
        return int(self._values.size)

    @property
    def row_map(self) -> list[int]:
        """Row offsets into the entry arrays."""
        return [int(v) for v in self._row_map]

    @property
    def col_map(self) -> list[int]:
        """Column index of every stored entry."""
        return [int(v) for v in self._col_map]

    @property
    def values(self) -> list[float]:
        """Value of every stored entry."""
        return [float(v) for v in self._values]

    def _entry_rows(self) -> np.ndarray:
        return np.repeat(np.arange(self._nrows, dtype=np.int64), np.diff(self._row_map))

    def __eq__(self, other) -> bool:
        if not isinstance(other, CsrMatrix):
            return NotImplemented
        return (
            self._nrows == other._nrows
            and self._ncols == other._ncols
            and np.array_equal(self._row_map, other._row_map)
            and np.array_equal(self._col_map, other._col_map)
            and np.array_equal(self._values, other._values)
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return (
            f"spm_serial:(rows={self._nrows}, entries={self.nnz})\n"
            f"rowmap: {_join(str(int(v)) for v in self._row_map)}\n"
            f"entries: {_join(str(int(v)) for v in self._col_map)}\n"
            f"values: {_join(_fmt(float(v)) for v in self._values)}\n"
        )

    def __repr__(self) -> str:
        return (
            f"CsrMatrix({self._nrows}, {self._ncols}, {self.row_map!r}, "
            f"{self.col_map!r}, {self.values!r})"
        )

    def to_dense(self) -> list[list[float]]:
        """Return the matrix as a list of rows, summing repeated entries."""
        dense = np.zeros((self._nrows, self._ncols), dtype=np.float64)
        np.add.at(dense, (self._entry_rows(), self._col_map), self._values)
        return dense.tolist()

    def pattern(self) -> str:
        """Return the sparsity pattern, '+' for a stored entry and 'o' otherwise.

        Entries of a row are matched against the columns in stored order, so
        only rows whose column indices are ascending are drawn completely.
        """
        lines = []
        for i in range(self._nrows):
            start, end = int(self._row_map[i]), int(self._row_map[i + 1])
            row_cols = self._col_map[start:end]
            seen = 0
            marks = []
            for j in range(self._ncols):
                mark = "o"
                if seen < len(row_cols) and row_cols[seen] == j:
                    mark = "+"
                    seen += 1
                marks.append(mark + " ")
            lines.append("".join(marks) + "\n")
        return "".join(lines)

    def spmv(
        self,
        x,
        y: Optional[Vector] = None,
        alpha: float = 1.0,
        beta: float = 0.0,
        trans: str = "N",
    ) -> Vector:
        """Compute ``y = beta * y + alpha * op(A) * x`` and return ``y``.

        ``trans`` is "N" or "C" for A, "T" or "H" for its transpose. When
        ``y`` is omitted a new zero vector is used. With ``beta == 0`` the
        old contents of ``y`` are ignored.
        """
        if trans not in _TRANSPOSE_MODES:
            raise ValueError(f"unknown transpose mode {trans!r}")
        transpose = _TRANSPOSE_MODES[trans]
        in_size, out_size = (
            (self._nrows, self._ncols) if transpose else (self._ncols, self._nrows)
        )

        x_data = np.array(list(x), dtype=np.float64)
        if x_data.shape != (in_size,):
            raise ValueError(f"input vector must have {in_size} elements, got {x_data.size}")
        if y is None:
            y = Vector(out_size)
        elif not isinstance(y, Vector):
            raise TypeError(f"output must be a Vector, got {type(y).__name__}")
        if len(y) != out_size:
            raise ValueError(f"output vector must have {out_size} elements, got {len(y)}")

        rows = self._entry_rows()
        product = np.zeros(out_size, dtype=np.float64)
        if transpose:
            np.add.at(product, self._col_map, self._values * x_data[rows])
        else:
            np.add.at(product, rows, self._values * x_data[self._col_map])

        result = float(alpha) * product
        if beta != 0:
            result += float(beta) * np.array(y.tolist(), dtype=np.float64)
        y[:] = result.tolist()
        return y

    def matmat(self, b) -> list[list[float]]:
        """Return ``A * B`` for a dense ``B`` given as rows (or with ``tolist``)."""
        rows_of_b = b.tolist() if hasattr(b, "tolist") else b
        dense_b = np.array(rows_of_b, dtype=np.float64)
        if dense_b.ndim != 2 or dense_b.shape[0] != self._ncols:
            raise ValueError(
                f"right-hand matrix must have {self._ncols} rows, got shape {dense_b.shape}"
            )
        result = np.zeros((self._nrows, dense_b.shape[1]), dtype=np.float64)
        np.add.at(
            result,
            self._entry_rows(),
            self._values[:, None] * dense_b[self._col_map, :],
        )
        return result.tolist()