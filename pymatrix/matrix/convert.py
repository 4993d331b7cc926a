"""
Conversion of caller values into a Matrix.

``as_matrix`` is the single entry point operators use on their operands.
It always returns a fresh Matrix, so an operator never shares a buffer
with its caller.

Accepted inputs:
    Matrix                  -> clone
    real number / 0-D array -> 1 x 1
    flat sequence / 1-D     -> column vector (row vector if as_column=False)
    2-D array               -> same shape
    ragged sequences        -> from_jagged (zero-padded)
    sequence of mappings    -> from_records
    pandas DataFrame/Series -> from_dataframe
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence
from typing import Any

import numpy as np

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.validation import check_array
from pymatrix.matrix.construction import (
    create,
    from_dataframe,
    from_jagged,
    from_records,
)
from pymatrix.matrix.dense import Matrix


def _is_pandas(value: Any) -> bool:
    module = type(value).__module__
    return module.startswith('pandas') and hasattr(value, 'to_numpy')


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (Sequence, np.ndarray)) and not isinstance(
        value, (str, bytes)
    )


def as_matrix(value: Any, as_column: bool = True) -> Matrix:
    """
    Convert ``value`` to a new Matrix.

    Parameters
    ----------
    value : Matrix, number, sequence, ndarray, DataFrame or records
    as_column : bool
        Orientation of flat (1-D) input: a column vector when True,
        a single row when False.

    Raises
    ------
    ValidationError
        Strings, None, and other values that are not numeric data.
    """
    if isinstance(value, Matrix):
        return value.clone()

    if isinstance(value, bool) or isinstance(value, numbers.Real):
        return create([float(value)])

    if _is_pandas(value):
        return from_dataframe(value)

    if isinstance(value, np.ndarray):
        return _from_array(check_array(value, 'value'), as_column)

    if not _is_sequence(value):
        raise ValidationError(
            f"value: cannot convert {type(value).__name__} to a matrix"
        )

    items = list(value)
    if items and all(isinstance(item, Mapping) for item in items):
        return from_records(items)

    if any(_is_sequence(item) for item in items):
        rows = [item if _is_sequence(item) else [item] for item in items]
        lengths = {len(row) for row in rows}
        if len(lengths) > 1:
            return from_jagged(rows)
        return Matrix.from_existing(rows)

    return _from_array(check_array(items, 'value'), as_column)


def _from_array(array: np.ndarray, as_column: bool) -> Matrix:
    if array.ndim == 0:
        return create([float(array)])
    if array.ndim == 1:
        if as_column:
            return create(array)
        return create(array, row_count=1)
    if array.ndim == 2:
        return Matrix.from_existing(array)
    raise ValidationError(
        f"value: expected at most 2 dimensions, got {array.ndim} with shape {array.shape}"
    )
