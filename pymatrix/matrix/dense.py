"""
Matrix: the dense numeric value type.

A Matrix owns a rectangular float64 buffer of exactly
row_count x column_count values. Shape is fixed at construction;
elements are mutable in place through bounds-checked indexing.

Ownership: every construction path that receives existing data copies
it, so a Matrix never aliases a caller's array. Numeric routines read
through ``view()``, which is read-only.

Linear order (construction from flat sequences, ``to_flat_array``) is
column-major: the row index varies fastest.
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import IndexOutOfRangeError
from pymatrix.core.validation import check_array, check_matrix_shape, check_positive_count
from pymatrix.matrix._formatting import render


class Matrix:
    """
    Dense row x column matrix of float64 values.

    Construction:
        Matrix(rows, columns)            # zero-filled
        Matrix.from_existing(array_2d)   # deep copy
        m.clone()                        # deep copy

    Flat-sequence, jagged, diagonal and uniform constructors live in
    pymatrix.matrix.construction.
    """

    __slots__ = ('_values',)

    def __init__(self, row_count: int, column_count: int):
        rows = check_positive_count(
            row_count, 'row_count', rows=row_count, columns=column_count
        )
        columns = check_positive_count(
            column_count, 'column_count', rows=row_count, columns=column_count
        )
        self._values = np.zeros((rows, columns), dtype=np.float64)

    @classmethod
    def from_existing(cls, values: ArrayLike) -> Matrix:
        """
        Deep-copy a rectangular 2-D buffer into a new Matrix.

        Parameters
        ----------
        values : array-like
            2-D numeric data (nested lists of equal length, 2-D ndarray,
            or another Matrix).

        Raises
        ------
        ValidationError
            Non-numeric or ragged input.
        InvalidShapeError
            Input is not 2-D, or has zero rows or zero columns.
        """
        if isinstance(values, Matrix):
            return values.clone()

        array = check_array(values, 'values')
        check_matrix_shape(array, 'values')
        return cls._adopt(array.copy())

    @classmethod
    def _adopt(cls, array: NDArray[np.float64]) -> Matrix:
        """Wrap a freshly allocated 2-D float64 buffer without copying."""
        matrix = cls.__new__(cls)
        matrix._values = np.ascontiguousarray(array, dtype=np.float64)
        return matrix

    # === Shape ===

    @property
    def row_count(self) -> int:
        """Number of rows."""
        return self._values.shape[0]

    @property
    def column_count(self) -> int:
        """Number of columns."""
        return self._values.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        """(row_count, column_count)."""
        return (self.row_count, self.column_count)

    # === Element access ===

    def _check_index(self, row: Any, column: Any) -> tuple[int, int]:
        for label, index, count in (
            ('row', row, self.row_count),
            ('column', column, self.column_count),
        ):
            if isinstance(index, bool) or not isinstance(index, numbers.Integral):
                raise TypeError(f"{label} index must be an integer, got {index!r}")
            if not 0 <= index < count:
                raise IndexOutOfRangeError(
                    f"Index ({row}, {column}) is out of range for a "
                    f"{self.row_count} x {self.column_count} matrix",
                    row=row,
                    column=column,
                    shape=self.shape,
                )
        return int(row), int(column)

    def get(self, row: int, column: int) -> float:
        """Bounds-checked element read."""
        r, c = self._check_index(row, column)
        return float(self._values[r, c])

    def set(self, row: int, column: int, value: float) -> None:
        """Bounds-checked element write."""
        r, c = self._check_index(row, column)
        self._values[r, c] = float(value)

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, column = self._unpack_key(key)
        return self.get(row, column)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, column = self._unpack_key(key)
        self.set(row, column, value)

    @staticmethod
    def _unpack_key(key: Any) -> tuple[Any, Any]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(
                f"Matrix indices must be a (row, column) pair, got {key!r}"
            )
        return key

    def row(self, index: int) -> NDArray[np.float64]:
        """Copy of one row as a 1-D array."""
        r, _ = self._check_index(index, 0)
        return self._values[r, :].copy()

    def column(self, index: int) -> NDArray[np.float64]:
        """Copy of one column as a 1-D array."""
        _, c = self._check_index(0, index)
        return self._values[:, c].copy()

    # === Copies and views ===

    def clone(self) -> Matrix:
        """Independent deep copy."""
        return Matrix._adopt(self._values.copy())

    def to_numpy(self) -> NDArray[np.float64]:
        """2-D copy of the buffer."""
        return self._values.copy()

    def view(self) -> NDArray[np.float64]:
        """Read-only 2-D view of the buffer, for numeric routines."""
        view = self._values.view()
        view.flags.writeable = False
        return view

    def to_flat_array(self) -> list[float]:
        """All values as a list in column-major order."""
        return self._values.ravel(order='F').tolist()

    def to_list(self) -> list[list[float]]:
        """Values as a list of rows."""
        return self._values.tolist()

    # === Comparison and display ===

    # Mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._values, other._values)
        )

    def __str__(self) -> str:
        return render(self._values)

    def __repr__(self) -> str:
        return f"Matrix(row_count={self.row_count}, column_count={self.column_count})"
