"""
Matrix construction: shape inference and factories.

The central entry point is ``create()``, which builds a matrix from a flat
sequence when at most one dimension is known. Entries are filled by
wraparound: the source index is taken modulo the sequence length, so a
short sequence is tiled across the requested shape rather than padded.

    >>> create([1, 2, 3], row_count=2, column_count=2).to_list()
    [[1.0, 3.0], [2.0, 1.0]]

With ``transpose=True`` the fill is row-major, which is how a single row
is replicated down a column of rows (see pymatrix.matrix.broadcast).
"""

from __future__ import annotations

import itertools
import math
import numbers
import warnings
from collections.abc import Mapping, Sequence
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike

from pymatrix.core.exceptions import InvalidShapeError, ValidationError
from pymatrix.core.validation import check_array, check_positive_count, check_scalar
from pymatrix.matrix.dense import Matrix

if TYPE_CHECKING:
    import pandas as pd


def _infer_count(length: int, known: int) -> int:
    """length / known, plus one if it divides to zero or leaves a remainder."""
    count = length // known
    if count == 0 or length % known != 0:
        count += 1
    return count


def create(
    values: ArrayLike,
    row_count: int | None = None,
    column_count: int | None = None,
    transpose: bool = False,
) -> Matrix:
    """
    Build a matrix from a flat sequence of values.

    Parameters
    ----------
    values : array-like
        Flat numeric sequence (any array-like is flattened). Empty input
        is treated as [0.0].
    row_count, column_count : int, optional
        Requested dimensions. With neither, the result is a column vector.
        With one, the other is the ceiling of len(values) / given. With
        both, they are used as given and the values wrap around.
    transpose : bool
        Fill row-major instead of column-major.

    Returns
    -------
    Matrix where ``m[r, c] = values[(c * R + r) % n]``, or
    ``values[(r * C + c) % n]`` when transposing.

    Raises
    ------
    InvalidShapeError
        A given count is not a positive integer.
    """
    flat = check_array(values, 'values').ravel()
    if flat.size == 0:
        flat = np.zeros(1, dtype=np.float64)
    length = flat.size

    requested = {'rows': row_count, 'columns': column_count}
    if row_count is not None:
        row_count = check_positive_count(row_count, 'row_count', **requested)
    if column_count is not None:
        column_count = check_positive_count(column_count, 'column_count', **requested)

    if column_count is None:
        if row_count is None:
            column_count = 1
            row_count = length
        else:
            column_count = _infer_count(length, row_count)
    elif row_count is None:
        row_count = _infer_count(length, column_count)

    rows = np.arange(row_count)[:, np.newaxis]
    columns = np.arange(column_count)[np.newaxis, :]
    if transpose:
        index = (rows * column_count + columns) % length
    else:
        index = (columns * row_count + rows) % length

    return Matrix._adopt(flat[index])


def from_jagged(rows: Sequence[ArrayLike]) -> Matrix:
    """
    Build a matrix from rows of unequal length.

    The column count is the longest row; shorter rows leave zeros in
    their remaining entries (no wraparound).

    Raises
    ------
    InvalidShapeError
        No rows, or every row is empty.
    """
    converted = [
        check_array(row, f'rows[{i}]').ravel() for i, row in enumerate(rows)
    ]
    row_count = len(converted)
    column_count = max((r.size for r in converted), default=0)
    if row_count < 1 or column_count < 1:
        raise InvalidShapeError(
            f"rows: jagged input must have at least one non-empty row, "
            f"got {row_count} rows of at most {column_count} values",
            rows=row_count,
            columns=column_count,
        )

    matrix = Matrix(row_count, column_count)
    for i, row in enumerate(converted):
        for j, value in enumerate(row):
            matrix[i, j] = value
    return matrix


def diagonal(
    value: float | ArrayLike,
    row_count: int = 1,
    column_count: int | None = None,
) -> Matrix:
    """
    Zero matrix with ``value`` on the main diagonal.

    Parameters
    ----------
    value : float or sequence of float
        A scalar (or one-element sequence) fills the whole diagonal. A
        longer sequence fills it in order, zero-padded when shorter than
        min(row_count, column_count) and truncated when longer.
    row_count : int
    column_count : int, optional
        Defaults to row_count.
    """
    if column_count is None:
        column_count = row_count
    matrix = Matrix(row_count, column_count)

    diag = check_array(value, 'value').ravel()
    size = min(row_count, column_count)
    if diag.size == 1:
        diag = np.full(size, diag[0])

    for i in range(min(size, diag.size)):
        matrix[i, i] = diag[i]
    return matrix


def identity(row_count: int, column_count: int | None = None) -> Matrix:
    """Identity matrix (ones on the main diagonal)."""
    return diagonal(1.0, row_count, column_count)


def with_value(
    value: float,
    row_count: int = 1,
    column_count: int | None = None,
) -> Matrix:
    """Matrix with every cell set to ``value``. column_count defaults to row_count."""
    fill = check_scalar(value, 'value')
    if column_count is None:
        column_count = row_count
    requested = {'rows': row_count, 'columns': column_count}
    row_count = check_positive_count(row_count, 'row_count', **requested)
    column_count = check_positive_count(column_count, 'column_count', **requested)
    return Matrix._adopt(np.full((row_count, column_count), fill))


def zeros(size: int, column_count: int | None = None) -> Matrix:
    """Zero matrix, square unless column_count is given."""
    if column_count is None:
        column_count = size
    return Matrix(size, column_count)


def mesh(
    row_minimum: float,
    row_maximum: float,
    row_count: int,
    column_minimum: float,
    column_maximum: float,
    column_count: int,
) -> Matrix:
    """
    Grid points over two ranges.

    Returns a (row_count * column_count) x 2 matrix. Each row is a point
    (x, y) with x taken from linspace(row_minimum, row_maximum, row_count)
    and y from linspace(column_minimum, column_maximum, column_count);
    x varies slowest.
    """
    row_count = check_positive_count(row_count, 'row_count')
    column_count = check_positive_count(column_count, 'column_count')
    xs = np.linspace(
        check_scalar(row_minimum, 'row_minimum'),
        check_scalar(row_maximum, 'row_maximum'),
        row_count,
    )
    ys = np.linspace(
        check_scalar(column_minimum, 'column_minimum'),
        check_scalar(column_maximum, 'column_maximum'),
        column_count,
    )
    grid_x, grid_y = np.meshgrid(xs, ys, indexing='ij')
    return Matrix._adopt(np.column_stack([grid_x.ravel(), grid_y.ravel()]))


def one_hot(indexes: ArrayLike, column_count: int | None = None) -> Matrix:
    """
    One-hot encoding of class indexes.

    Row i has a 1 in column int(indexes[i]). The column count defaults to
    max(indexes) + 1.

    Raises
    ------
    ValidationError
        Negative index, or an index >= column_count.
    """
    flat = check_array(indexes, 'indexes').ravel()
    if flat.size == 0:
        raise ValidationError("indexes: need at least one class index")
    classes = flat.astype(np.int64)
    if np.any(classes < 0):
        raise ValidationError(f"indexes: negative class index {int(classes.min())}")

    if column_count is None:
        column_count = int(classes.max()) + 1
    column_count = check_positive_count(
        column_count, 'column_count', rows=classes.size, columns=column_count
    )
    if classes.max() >= column_count:
        raise ValidationError(
            f"indexes: class index {int(classes.max())} does not fit in "
            f"{column_count} columns"
        )

    values = np.zeros((classes.size, column_count), dtype=np.float64)
    values[np.arange(classes.size), classes] = 1.0
    return Matrix._adopt(values)


def truth_table(symbols: int | Sequence[int]) -> Matrix:
    """
    All combinations of symbol values.

    ``symbols[j]`` is the number of values column j takes (0 .. n-1).
    Rows enumerate every combination with the last column varying
    fastest. An int k is shorthand for k binary columns.

        >>> truth_table([2, 2]).to_list()
        [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]
    """
    if isinstance(symbols, numbers.Integral):
        counts = [2] * check_positive_count(symbols, 'symbols')
    else:
        counts = [check_positive_count(s, f'symbols[{j}]') for j, s in enumerate(symbols)]
    if not counts:
        raise InvalidShapeError("symbols: need at least one column", rows=None, columns=0)

    rows = list(itertools.product(*(range(n) for n in counts)))
    return Matrix._adopt(np.array(rows, dtype=np.float64))


def _record_fields(record: Any) -> Mapping[str, Any]:
    if isinstance(record, Mapping):
        return record
    if hasattr(record, '_asdict'):
        return record._asdict()
    if hasattr(record, '__dict__'):
        return vars(record)
    raise ValidationError(
        f"records: cannot read fields from {type(record).__name__}"
    )


def _as_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, numbers.Real):
        return float(value)
    return None


def from_records(
    records: Sequence[Any],
    columns: Sequence[str] | None = None,
) -> Matrix:
    """
    Build a matrix from a sequence of records (one row per record).

    Records may be mappings, named tuples or plain objects. Columns are
    the given names, or the numeric fields of the first record in order.
    A missing or non-numeric value in a later record becomes NaN.

    Non-numeric fields of the first record are skipped with a UserWarning.
    """
    records = list(records)
    if not records:
        raise InvalidShapeError("records: need at least one record", rows=0, columns=None)

    if columns is None:
        first = _record_fields(records[0])
        columns = [k for k, v in first.items() if _as_float(v) is not None]
        skipped = [k for k in first if k not in columns]
        if skipped:
            warnings.warn(
                f"Skipping non-numeric fields: {', '.join(map(str, skipped))}",
                UserWarning,
                stacklevel=2,
            )
    columns = list(columns)
    if not columns:
        raise InvalidShapeError("records: no numeric fields to convert", rows=len(records), columns=0)

    values = np.full((len(records), len(columns)), np.nan)
    for i, record in enumerate(records):
        fields = _record_fields(record)
        for j, name in enumerate(columns):
            number = _as_float(fields.get(name))
            if number is not None:
                values[i, j] = number
    return Matrix._adopt(values)


def from_dataframe(df: 'pd.DataFrame | pd.Series') -> Matrix:
    """
    Build a matrix from a pandas DataFrame (or Series, as one column).

    Numeric and boolean columns are kept in order; others are dropped
    with a UserWarning. Missing values become NaN.
    """
    from pandas.api.types import is_numeric_dtype

    if hasattr(df, 'to_frame') and not hasattr(df, 'columns'):
        df = df.to_frame()

    numeric = [c for c in df.columns if is_numeric_dtype(df[c])]
    dropped = [c for c in df.columns if c not in numeric]
    if dropped:
        warnings.warn(
            f"Dropping non-numeric columns: {', '.join(map(str, dropped))}",
            UserWarning,
            stacklevel=2,
        )
    if not numeric or len(df) == 0:
        raise InvalidShapeError(
            f"df: need at least one row and one numeric column, "
            f"got {len(df)} rows and {len(numeric)} numeric columns",
            rows=len(df),
            columns=len(numeric),
        )
    return Matrix._adopt(df[numeric].to_numpy(dtype=np.float64, na_value=math.nan))
