"""Coordinate-format sparse matrices kept sorted by row and column."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable
from typing import Optional

from .csr import CsrMatrix

__all__ = ["CooMatrix"]


class CooMatrix:
    """A sparse matrix stored as (row, column, value) triples in row-major order."""

    __slots__ = ("_nrows", "_ncols", "_keys", "_values")

    def __init__(
        self,
        nrows: int,
        ncols: int,
        rows: Optional[Iterable[int]] = None,
        cols: Optional[Iterable[int]] = None,
        values: Optional[Iterable[float]] = None,
    ) -> None:
        nrows = int(nrows)
        ncols = int(ncols)
        if nrows < 0 or ncols < 0:
            raise ValueError(f"matrix dimensions must be non-negative, got {nrows}x{ncols}")
        self._nrows = nrows
        self._ncols = ncols

        row_list = [int(r) for r in rows] if rows is not None else []
        col_list = [int(c) for c in cols] if cols is not None else []
        val_list = [float(v) for v in values] if values is not None else []
        if not len(row_list) == len(col_list) == len(val_list):
            raise ValueError(
                f"rows, columns and values differ in length: "
                f"{len(row_list)}, {len(col_list)}, {len(val_list)}"
            )
        for r, c in zip(row_list, col_list):
            if not 0 <= r < nrows or not 0 <= c < ncols:
                raise ValueError(f"entry ({r}, {c}) out of range for a {nrows}x{ncols} matrix")

        entries = sorted(zip(zip(row_list, col_list), val_list), key=lambda e: e[0])
        self._keys = [key for key, _ in entries]
        self._values = [value for _, value in entries]

    @property
    def nrows(self) -> int:
        """Number of rows."""
        return self._nrows

    @property
    def ncols(self) -> int:
        """Number of columns."""
        return self._ncols

    @property
    def rows(self) -> list[int]:
        """Row index of every stored entry."""
        return [r for r, _ in self._keys]

    @property
    def cols(self) -> list[int]:
        """Column index of every stored entry."""
        return [c for _, c in self._keys]

    @property
    def values(self) -> list[float]:
        """Value of every stored entry."""
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return (
            f"CooMatrix({self._nrows}, {self._ncols}, {self.rows!r}, "
            f"{self.cols!r}, {self.values!r})"
        )

    def insert(self, row: int, col: int, value: float) -> None:
        """Add an entry at its sorted position; an existing entry raises ValueError."""
        row = int(row)
        col = int(col)
        if not 0 <= row < self._nrows:
            raise IndexError(f"row {row} out of range for {self._nrows} rows")
        if not 0 <= col < self._ncols:
            raise IndexError(f"column {col} out of range for {self._ncols} columns")
        key = (row, col)
        pos = bisect_left(self._keys, key)
        if pos < len(self._keys) and self._keys[pos] == key:
            raise ValueError(f"an entry already exists at ({row}, {col})")
        self._keys.insert(pos, key)
        self._values.insert(pos, float(value))

    def to_csr(self) -> CsrMatrix:
        """Return the same matrix in compressed sparse row form."""
        counts = [0] * self._nrows
        for r, _ in self._keys:
            counts[r] += 1
        row_map = [0]
        for count in counts:
            row_map.append(row_map[-1] + count)
        return CsrMatrix(self._nrows, self._ncols, row_map, self.cols, self.values)