"""
Shape adjustment for binary operands.

Two restricted broadcasting rules make a loose right-hand operand conform
to the shape an operator needs:

    adjust_row         single row -> target row count (matrix product)
    adjust_row_column  single row / single column / scalar -> full shape
                       (elementwise operators)

Anything else raises ShapeMismatchError. Replication reuses the
wraparound fill of ``create()``: a row is laid out row-major
(transpose=True), a column column-major.
"""

from __future__ import annotations

from pymatrix.core.exceptions import ShapeMismatchError
from pymatrix.matrix.construction import create
from pymatrix.matrix.dense import Matrix


def _mismatch(
    matrix: Matrix,
    target_shape: tuple[int | None, int | None],
) -> ShapeMismatchError:
    rows, columns = target_shape
    expected = f"{rows} rows" if columns is None else f"{rows} x {columns}"
    return ShapeMismatchError(
        f"Matrix sizes are inconsistent: cannot adjust "
        f"{matrix.row_count} x {matrix.column_count} to {expected}",
        shape=matrix.shape,
        target_shape=target_shape,
    )


def adjust_row(matrix: Matrix, row_count: int) -> Matrix:
    """
    Make ``matrix`` have ``row_count`` rows.

    Returns the matrix itself when it already has that many rows, and a
    new matrix with row 0 repeated ``row_count`` times when it has one.

    Raises
    ------
    ShapeMismatchError
        Any other row count.

    Examples
    --------
    >>> adjust_row(Matrix.from_existing([[5, 6]]), 3).to_list()
    [[5.0, 6.0], [5.0, 6.0], [5.0, 6.0]]
    """
    if matrix.row_count == row_count:
        return matrix

    if matrix.row_count != 1:
        raise _mismatch(matrix, (row_count, None))

    return create(matrix.row(0), row_count, matrix.column_count, transpose=True)


def adjust_row_column(matrix: Matrix, row_count: int, column_count: int) -> Matrix:
    """
    Make ``matrix`` exactly ``row_count`` x ``column_count``.

    Permitted cases:
        - same shape: returned unchanged
        - same row count, one column: the column is repeated across
        - one row with the target column count, or 1 x 1: the row is
          repeated down (a 1 x 1 fills every cell)

    Raises
    ------
    ShapeMismatchError
        The shape fits none of the cases above.
    """
    if matrix.row_count == row_count:
        if matrix.column_count == column_count:
            return matrix

        if matrix.column_count == 1:
            return create(matrix.column(0), row_count, column_count, transpose=False)

    elif matrix.row_count == 1 and matrix.column_count in (column_count, 1):
        return create(matrix.row(0), row_count, column_count, transpose=True)

    raise _mismatch(matrix, (row_count, column_count))
