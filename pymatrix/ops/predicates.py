"""
Matrix classification predicates.

Each predicate takes one Matrix and returns a bool. Comparisons are exact
by default; ``strict=False`` switches to the DEFAULT tolerance tier from
pymatrix.core.tolerances, for matrices produced by earlier arithmetic.
"""

from __future__ import annotations

import numpy as np
import scipy.linalg

from pymatrix.core.tolerances import rank_tolerance, select_tolerance
from pymatrix.core.validation import check_square
from pymatrix.matrix.dense import Matrix


def has_infinity(value: Matrix) -> bool:
    return bool(np.any(np.isinf(value.view())))


def has_nan(value: Matrix) -> bool:
    return bool(np.any(np.isnan(value.view())))


def is_diagonal(value: Matrix, *, strict: bool = True) -> bool:
    """All off-diagonal entries are zero. Non-square matrices qualify."""
    x = value.view()
    mask = np.eye(*x.shape, dtype=bool)
    return select_tolerance(strict).close(np.where(mask, 0.0, x), 0.0)


def is_lower_triangular(value: Matrix, *, strict: bool = True) -> bool:
    x = value.view()
    return select_tolerance(strict).close(np.triu(x, k=1), 0.0)


def is_upper_triangular(value: Matrix, *, strict: bool = True) -> bool:
    x = value.view()
    return select_tolerance(strict).close(np.tril(x, k=-1), 0.0)


def is_symmetric(value: Matrix, *, strict: bool = True) -> bool:
    """Square and equal to its transpose."""
    if value.row_count != value.column_count:
        return False
    x = value.view()
    return select_tolerance(strict).close(x, x.T)


def is_positive_definite(value: Matrix, *, strict: bool = True) -> bool:
    """Symmetric and admits a Cholesky factorisation."""
    if not is_symmetric(value, strict=strict):
        return False
    try:
        scipy.linalg.cholesky(value.view(), lower=True)
    except np.linalg.LinAlgError:
        return False
    return True


def is_singular(value: Matrix) -> bool:
    """
    Numerically rank-deficient square matrix.

    Rank is counted from singular values above max(shape) * eps * s_max.

    Raises
    ------
    DimensionError
        Matrix is not square.
    """
    check_square(value.shape, 'value')
    singular_values = scipy.linalg.svdvals(value.view())
    tol = rank_tolerance(singular_values, value.shape)
    return int(np.sum(singular_values > tol)) < value.row_count
