"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    ValidationError,
    DimensionError,
    InvalidShapeError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or ragged data)
    and non-numeric dtypes. Booleans are accepted and become 0.0 / 1.0.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype != np.bool_ and not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real data"
        )

    return result.astype(np.float64)


def check_scalar(value: Any, name: str) -> float:
    """
    Verify a parameter is a single real number.

    Accepts Python and NumPy reals. Booleans are accepted and become
    0.0 / 1.0, as in check_array.

    Args:
        value: Parameter to check
        name: Parameter name for error messages

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not a real number
    """
    if not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )
    return float(value)


def check_matrix_shape(array: NDArray[np.floating[Any]], name: str) -> tuple[int, int]:
    """
    Verify array is 2-dimensional with at least one row and one column.

    Returns:
        (rows, columns)

    Raises:
        InvalidShapeError: If array is not 2-D or has an empty dimension
    """
    if array.ndim != 2:
        raise InvalidShapeError(
            f"{name}: expected a 2D array, got {array.ndim}D with shape {array.shape}",
            rows=array.shape[0] if array.ndim else None,
            columns=None,
        )
    rows, columns = array.shape
    if rows < 1 or columns < 1:
        raise InvalidShapeError(
            f"{name}: matrix must have at least one row and one column, "
            f"got {rows} x {columns}",
            rows=rows,
            columns=columns,
        )
    return rows, columns


def check_square(shape: tuple[int, int], name: str) -> None:
    """
    Verify a (rows, columns) shape is square.

    Raises:
        DimensionError: If rows != columns
    """
    rows, columns = shape
    if rows != columns:
        raise DimensionError(
            f"{name}: expected a square matrix, got {rows} x {columns}"
        )


def check_positive_count(
    value: Any,
    name: str,
    *,
    rows: Any = None,
    columns: Any = None,
) -> int:
    """
    Verify a row or column count is a positive integer.

    Accepts Python and NumPy integers. Booleans are rejected even though
    they are integers.

    Args:
        value: Count to check
        name: Parameter name for error messages
        rows, columns: Requested shape, attached to the error so callers
            can report the offending dimensions

    Returns:
        The count as a Python int

    Raises:
        InvalidShapeError: If value is not an integer or is < 1
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidShapeError(
            f"{name}: expected a positive integer, got {value!r}",
            rows=rows,
            columns=columns,
        )
    if value < 1:
        raise InvalidShapeError(
            f"{name}: must be at least 1, got {value}",
            rows=rows,
            columns=columns,
        )
    return int(value)
