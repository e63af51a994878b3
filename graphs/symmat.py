"""Packed storage for symmetric matrices.

Only the upper triangular half (diagonal included) of an ``N x N`` symmetric
matrix is stored, row after row, in a flat numpy array of ``N(N+1)/2`` cells.
Cell ``(i, j)`` and cell ``(j, i)`` resolve to the same slot, so symmetry holds
by construction rather than by duplication.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from graphs.errors import MatrixIndexError


def int_sum(end: int) -> int:
    """Return the sum of the integers from 1 to ``end`` (inclusive)."""

    return end * (end + 1) // 2


class SymMatrix:
    """Fixed-size symmetric matrix keeping only cells ``(i, j)`` with ``i <= j``."""

    def __init__(self, size: int, value: Any = 0, dtype: Any = np.int64) -> None:
        if size < 0:
            raise ValueError(f"Matrix size must be non-negative, got {size}")
        self._size = int(size)
        self._values = np.full(int_sum(self._size), value, dtype=dtype)

    @classmethod
    def filled(cls, size: int, value: Any, dtype: Any = None) -> "SymMatrix":
        """Return a matrix whose cells all hold ``value``.

        ``dtype`` defaults to the type numpy infers from ``value``.
        """

        if dtype is None:
            dtype = np.asarray(value).dtype
        return cls(size, value, dtype=dtype)

    @property
    def size(self) -> int:
        return self._size

    @property
    def dtype(self) -> np.dtype:
        return self._values.dtype

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SymMatrix(size={self._size}, dtype={self._values.dtype})"

    # ------------------------------------------------------------------
    # Addressing
    # ------------------------------------------------------------------

    def index(self, a: int, b: int) -> int:
        """Return the storage offset of cell ``(a, b)``."""

        # The line must always be <= col.
        line, col = (b, a) if a > b else (a, b)
        return self._size * line + col - int_sum(line)

    def in_bounds(self, a: int, b: int) -> bool:
        return 0 <= a < self._size and 0 <= b < self._size

    def _offset(self, a: int, b: int) -> Optional[int]:
        if not self.in_bounds(a, b):
            return None
        return self.index(a, b)

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def get(self, a: int, b: int) -> Any:
        """Return the value of cell ``(a, b)`` or ``None`` when out of range."""

        offset = self._offset(a, b)
        if offset is None:
            return None
        value = self._values[offset]
        return value.item() if isinstance(value, np.generic) else value

    def get_mut(self, a: int, b: int) -> Optional[np.ndarray]:
        """Return a writable one-cell view of ``(a, b)`` or ``None`` when out of range.

        The view shares memory with the matrix, so ``view[0] += 1`` updates the
        cell in place.
        """

        offset = self._offset(a, b)
        if offset is None:
            return None
        return self._values[offset:offset + 1]

    def set(self, a: int, b: int, value: Any) -> None:
        offset = self._offset(a, b)
        if offset is None:
            raise MatrixIndexError(f"({a}, {b}) out of range.")
        self._values[offset] = value

    def values(self) -> np.ndarray:
        """Return a read-only view of the packed storage in physical order."""

        view = self._values.view()
        view.flags.writeable = False
        return view

    # ------------------------------------------------------------------
    # Bulk views
    # ------------------------------------------------------------------

    def diagonal(self) -> np.ndarray:
        """Return cells ``(k, k)`` for every ``k`` as a new array."""

        k = np.arange(self._size)
        return self._values[self._size * k + k - k * (k + 1) // 2]

    def row(self, a: int) -> np.ndarray:
        """Return the logical row ``a`` (``size`` cells) as a new array."""

        if not 0 <= a < self._size:
            raise MatrixIndexError(f"Row {a} out of range.")
        cols = np.arange(self._size)
        lines = np.minimum(a, cols)
        cols = np.maximum(a, cols)
        return self._values[self._size * lines + cols - lines * (lines + 1) // 2]

    def to_dense(self) -> np.ndarray:
        """Return the full ``size x size`` symmetric matrix."""

        dense = np.zeros((self._size, self._size), dtype=self._values.dtype)
        # triu_indices walks the upper half row by row, like the packed storage.
        rows, cols = np.triu_indices(self._size)
        dense[rows, cols] = self._values
        dense[cols, rows] = self._values
        return dense


__all__ = ["SymMatrix", "int_sum"]
