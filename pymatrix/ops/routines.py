"""
Numeric routines behind the operators.

Thin adapters over NumPy / SciPy (LAPACK under the hood). Every routine
takes conforming Matrix operands (already converted and adjusted by the
dispatch driver) plus keyword parameters, reads them through the
read-only ``view()``, and returns a new Matrix, a float, an int or a list.

SciPy ``LinAlgError`` is re-raised as the matching PyMatrix exception.
"""

from __future__ import annotations

import warnings
from typing import Callable

import numpy as np
import scipy.linalg
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    DimensionError,
    SingularMatrixError,
    ValidationError,
)
from pymatrix.core.tolerances import rank_tolerance
from pymatrix.core.validation import check_array, check_scalar, check_square
from pymatrix.matrix.dense import Matrix


def _wrap(array: ArrayLike) -> Matrix:
    """New Matrix owning a copy of a routine's 2-D output."""
    return Matrix._adopt(np.array(array, dtype=np.float64, ndmin=2))


# =====================================================================
# Elementwise, one operand
# =====================================================================


def absolute(value: Matrix) -> Matrix:
    return _wrap(np.abs(value.view()))


def ceiling(value: Matrix) -> Matrix:
    return _wrap(np.ceil(value.view()))


def floor(value: Matrix) -> Matrix:
    return _wrap(np.floor(value.view()))


def exp(value: Matrix) -> Matrix:
    return _wrap(np.exp(value.view()))


def log(value: Matrix) -> Matrix:
    """Natural log. Non-positive entries give -inf / NaN with a RuntimeWarning."""
    return _wrap(np.log(value.view()))


def round_half_even(value: Matrix) -> Matrix:
    """Round to the nearest integer, ties to even (2.5 -> 2, 3.5 -> 4)."""
    return _wrap(np.round(value.view()))


def sign(value: Matrix) -> Matrix:
    return _wrap(np.sign(value.view()))


def sqrt(value: Matrix) -> Matrix:
    return _wrap(np.sqrt(value.view()))


def power(value: Matrix, *, exponent: float) -> Matrix:
    return _wrap(np.power(value.view(), check_scalar(exponent, 'exponent')))


def signed_power(value: Matrix, *, exponent: float) -> Matrix:
    """sign(x) * |x| ** exponent."""
    x = value.view()
    return _wrap(np.sign(x) * np.power(np.abs(x), check_scalar(exponent, 'exponent')))


def sign_sqrt(value: Matrix) -> Matrix:
    """sign(x) * sqrt(|x|)."""
    x = value.view()
    return _wrap(np.sign(x) * np.sqrt(np.abs(x)))


def apply(value: Matrix, *, func: Callable[[float], float]) -> Matrix:
    """Apply a Python callable to every element."""
    if not callable(func):
        raise ValidationError(f"func: expected a callable, got {type(func).__name__}")
    return _wrap(np.vectorize(func, otypes=[np.float64])(value.view()))


def cumulative_sum(value: Matrix, *, dimension: int = 0) -> Matrix:
    """Running sums down each column (dimension=0) or along each row (1)."""
    if dimension not in (0, 1):
        raise ValidationError(f"dimension: must be 0 or 1, got {dimension!r}")
    return _wrap(np.cumsum(value.view(), axis=dimension))


# =====================================================================
# Elementwise, two operands (shapes already conform)
# =====================================================================


def add(lhs: Matrix, rhs: Matrix) -> Matrix:
    return _wrap(lhs.view() + rhs.view())


def subtract(lhs: Matrix, rhs: Matrix) -> Matrix:
    return _wrap(lhs.view() - rhs.view())


def multiply(lhs: Matrix, rhs: Matrix) -> Matrix:
    return _wrap(lhs.view() * rhs.view())


def divide(lhs: Matrix, rhs: Matrix) -> Matrix:
    """Elementwise quotient. Division by zero follows IEEE rules."""
    return _wrap(lhs.view() / rhs.view())


# =====================================================================
# Algebra
# =====================================================================


def dot(lhs: Matrix, rhs: Matrix) -> Matrix:
    """Matrix product. Requires lhs.column_count == rhs.row_count."""
    if lhs.column_count != rhs.row_count:
        raise DimensionError(
            f"dot: inner dimensions differ, "
            f"{lhs.row_count} x {lhs.column_count} times "
            f"{rhs.row_count} x {rhs.column_count}"
        )
    return _wrap(lhs.view() @ rhs.view())


def kronecker(lhs: Matrix, rhs: Matrix) -> Matrix:
    return _wrap(np.kron(lhs.view(), rhs.view()))


def transpose(value: Matrix) -> Matrix:
    return _wrap(value.view().T)


def inverse(value: Matrix) -> Matrix:
    """
    Inverse of a square matrix.

    Raises
    ------
    DimensionError
        Matrix is not square.
    SingularMatrixError
        Matrix is exactly singular.
    """
    check_square(value.shape, 'value')
    try:
        return _wrap(scipy.linalg.inv(value.view()))
    except np.linalg.LinAlgError as e:
        raise SingularMatrixError(
            f"Matrix is singular and cannot be inverted: {e}",
            matrix_name='value',
            expected_rank=value.row_count,
        ) from e


def pseudo_inverse(value: Matrix) -> Matrix:
    """Moore-Penrose pseudo-inverse (SVD based)."""
    return _wrap(scipy.linalg.pinv(value.view()))


def solve(lhs: Matrix, rhs: Matrix, *, least_squares: bool = False) -> Matrix:
    """
    Solve lhs @ x = rhs.

    Square systems use an LU solve unless ``least_squares`` is set.
    Non-square systems always use least squares; without
    ``least_squares`` that fallback is reported as a RuntimeWarning.

    Raises
    ------
    DimensionError
        Row counts of lhs and rhs differ.
    SingularMatrixError
        Square lhs is singular and least_squares is False.
    """
    if lhs.row_count != rhs.row_count:
        raise DimensionError(
            f"solve: lhs has {lhs.row_count} rows but rhs has {rhs.row_count}"
        )

    square = lhs.row_count == lhs.column_count
    if square and not least_squares:
        try:
            return _wrap(scipy.linalg.solve(lhs.view(), rhs.view()))
        except np.linalg.LinAlgError as e:
            raise SingularMatrixError(
                f"Coefficient matrix is singular: {e}. "
                f"Pass least_squares=True for a minimum-norm solution.",
                matrix_name='lhs',
                expected_rank=lhs.row_count,
            ) from e

    if not square and not least_squares:
        warnings.warn(
            f"solve: {lhs.row_count} x {lhs.column_count} system is not square, "
            f"using least squares",
            RuntimeWarning,
            stacklevel=2,
        )
    solution, _, _, _ = scipy.linalg.lstsq(lhs.view(), rhs.view())
    return _wrap(solution)


def lower_triangle(value: Matrix, *, exclude_diagonal: bool = False) -> Matrix:
    return _wrap(np.tril(value.view(), k=-1 if exclude_diagonal else 0))


def upper_triangle(value: Matrix, *, exclude_diagonal: bool = False) -> Matrix:
    return _wrap(np.triu(value.view(), k=1 if exclude_diagonal else 0))


def symmetric(value: Matrix, *, from_: str = 'upper') -> Matrix:
    """
    Symmetric matrix mirrored from one triangle.

    ``from_='upper'`` keeps the upper triangle (with diagonal) and copies
    it below; ``'lower'`` does the reverse.
    """
    check_square(value.shape, 'value')
    x = value.view()
    if from_ == 'upper':
        return _wrap(np.triu(x) + np.triu(x, k=1).T)
    if from_ == 'lower':
        return _wrap(np.tril(x) + np.tril(x, k=-1).T)
    raise ValidationError(f"from_: must be 'upper' or 'lower', got {from_!r}")


def divide_by_diagonal(value: Matrix, *, b: ArrayLike) -> Matrix:
    """value @ inv(diag(b)), i.e. column j divided by b[j]."""
    diag = check_array(b, 'b').ravel()
    if diag.size != value.column_count:
        raise DimensionError(
            f"b: expected {value.column_count} diagonal values, got {diag.size}"
        )
    return _wrap(value.view() / diag[np.newaxis, :])


# =====================================================================
# Reductions (scalar or list results)
# =====================================================================


def determinant(value: Matrix) -> float:
    check_square(value.shape, 'value')
    return float(np.linalg.det(value.view()))


def log_determinant(value: Matrix) -> float:
    """log |det|; -inf for a singular matrix."""
    check_square(value.shape, 'value')
    sign_, logdet = np.linalg.slogdet(value.view())
    if sign_ == 0:
        return float('-inf')
    return float(logdet)


def log_pseudo_determinant(value: Matrix) -> float:
    """
    Sum of the logs of the non-zero singular values.

    A matrix with no non-zero singular value has an empty product
    (pseudo-determinant 1, log 0.0); that case is reported as a
    RuntimeWarning.
    """
    singular_values = scipy.linalg.svdvals(value.view())
    nonzero = singular_values[singular_values > rank_tolerance(singular_values, value.shape)]
    if nonzero.size == 0:
        warnings.warn(
            "log_pseudo_determinant: matrix has no non-zero singular values",
            RuntimeWarning,
            stacklevel=2,
        )
        return 0.0
    return float(np.sum(np.log(nonzero)))


def rank(value: Matrix) -> int:
    return int(np.linalg.matrix_rank(value.view()))


def total(value: Matrix) -> float:
    return float(np.sum(value.view()))


def product(value: Matrix) -> float:
    return float(np.prod(value.view()))


def trace(value: Matrix) -> float:
    """Sum of the main diagonal (first min(rows, columns) entries)."""
    return float(np.trace(value.view()))


def _flat(value: Matrix) -> NDArray[np.float64]:
    return value.view().ravel(order='F')


def distinct(value: Matrix) -> list[float]:
    """Distinct values in order of first appearance (column-major)."""
    flat = _flat(value)
    _, first = np.unique(flat, return_index=True)
    return flat[np.sort(first)].tolist()


def distinct_count(value: Matrix) -> int:
    return int(np.unique(_flat(value)).size)

