"""
Matrix decompositions.

Consistent decomposition interface over SciPy / NumPy (LAPACK). Each
function takes one Matrix plus flags and returns a frozen result
dataclass whose factors are Matrix objects. The result objects are plain
data: they are produced here and passed through the operators unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import scipy.linalg

from pymatrix.core.exceptions import NotPositiveDefiniteError
from pymatrix.core.tolerances import rank_tolerance
from pymatrix.core.validation import check_square
from pymatrix.matrix.dense import Matrix


def _wrap(array) -> Matrix:
    return Matrix._adopt(np.array(array, dtype=np.float64, ndmin=2))


def _column(values) -> Matrix:
    return Matrix._adopt(np.asarray(values, dtype=np.float64).reshape(-1, 1).copy())


# =====================================================================
# Cholesky
# =====================================================================


@dataclass(frozen=True)
class CholeskyResult:
    """
    Result of Cholesky decomposition.

    Attributes:
        factor: Triangular factor. A = L L' (lower) or A = U' U (upper).
            For the robust form, the unit triangular factor of A = L D L'.
        diagonal: D of the robust L D L' form, None otherwise
        permutation: Row permutation of the robust form, None otherwise
        lower: Whether factor is lower triangular
        robust: Whether the L D L' form was computed
    """
    factor: Matrix
    diagonal: Matrix | None
    permutation: tuple[int, ...] | None
    lower: bool
    robust: bool


def cholesky(value: Matrix, *, robust: bool = False, lower: bool = False) -> CholeskyResult:
    """
    Cholesky decomposition of a symmetric matrix.

    Only the triangle selected by ``lower`` is read.

    Args:
        value: Square matrix
        robust: Compute the pivoted L D L' form, which also exists for
            symmetric indefinite matrices
        lower: Return a lower (True) or upper (False) triangular factor

    Raises:
        DimensionError: Matrix is not square
        NotPositiveDefiniteError: Non-robust factorisation failed
    """
    check_square(value.shape, 'value')
    x = value.view()

    if robust:
        factor, d, perm = scipy.linalg.ldl(x, lower=lower)
        return CholeskyResult(
            factor=_wrap(factor),
            diagonal=_wrap(d),
            permutation=tuple(int(p) for p in perm),
            lower=lower,
            robust=True,
        )

    try:
        factor = scipy.linalg.cholesky(x, lower=lower)
    except np.linalg.LinAlgError as e:
        symmetric = np.tril(x) + np.tril(x, k=-1).T if lower else np.triu(x) + np.triu(x, k=1).T
        min_eigenvalue = float(np.min(scipy.linalg.eigvalsh(symmetric)))
        raise NotPositiveDefiniteError(
            f"Matrix is not positive definite (min eigenvalue {min_eigenvalue:.6g}). "
            f"Use robust=True for the L D L' form.",
            matrix_name='value',
            min_eigenvalue=min_eigenvalue,
        ) from e

    return CholeskyResult(
        factor=_wrap(factor),
        diagonal=None,
        permutation=None,
        lower=lower,
        robust=False,
    )


# =====================================================================
# LU
# =====================================================================


@dataclass(frozen=True)
class LUResult:
    """
    Result of LU decomposition with partial pivoting: A = P L U.

    Attributes:
        P: Permutation matrix
        L: Unit lower triangular factor
        U: Upper triangular factor
        determinant: det(A) for square A, None otherwise
        nonsingular: Whether U has no zero on its diagonal
        transposed: Whether A' was decomposed instead of A
    """
    P: Matrix
    L: Matrix
    U: Matrix
    determinant: float | None
    nonsingular: bool
    transposed: bool


def lu(value: Matrix, *, transpose: bool = False) -> LUResult:
    """LU decomposition of value (or of its transpose)."""
    x = value.view().T if transpose else value.view()
    p, l, u = scipy.linalg.lu(x)

    diag_u = np.diag(u)
    determinant = None
    if x.shape[0] == x.shape[1]:
        determinant = float(round(np.linalg.det(p)) * np.prod(diag_u))

    return LUResult(
        P=_wrap(p),
        L=_wrap(l),
        U=_wrap(u),
        determinant=determinant,
        nonsingular=bool(np.all(diag_u != 0)),
        transposed=transpose,
    )


# =====================================================================
# QR
# =====================================================================


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Orthogonal matrix (n x k with k = min(n, p) in economy mode,
           n x n otherwise)
        R: Upper triangular matrix (k x p, or n x p)
        rank: Numerical rank determined from R diagonal
        transposed: Whether A' was decomposed instead of A
    """
    Q: Matrix
    R: Matrix
    rank: int
    transposed: bool


def qr(value: Matrix, *, economy: bool = False, transpose: bool = False) -> QRResult:
    """
    QR decomposition using LAPACK (via NumPy).

    Computes A = QR where Q is orthogonal and R is upper triangular.
    """
    x = value.view().T if transpose else value.view()
    Q, R = np.linalg.qr(x, mode='reduced' if economy else 'complete')

    # Determine numerical rank from R diagonal
    diag_R = np.abs(np.diag(R))
    if len(diag_R) > 0 and diag_R[0] > 0:
        # Tolerance based on matrix size and machine epsilon
        tol = max(x.shape) * np.finfo(x.dtype).eps * diag_R[0]
        rank = int(np.sum(diag_R > tol))
    else:
        rank = 0

    return QRResult(Q=_wrap(Q), R=_wrap(R), rank=rank, transposed=transpose)


# =====================================================================
# SVD
# =====================================================================


@dataclass(frozen=True)
class SVDResult:
    """
    Result of thin singular value decomposition: A = U diag(s) V'.

    Attributes:
        U: Left singular vectors (n x k), None if not computed
        singular_values: Column vector of k singular values, descending
        V: Right singular vectors (p x k), None if not computed
        rank: Singular values above max(n, p) * eps * s_max
        condition: s_max / s_min (inf when s_min is zero)
        two_norm: s_max
    """
    U: Matrix | None
    singular_values: Matrix
    V: Matrix | None
    rank: int
    condition: float
    two_norm: float


def svd(
    value: Matrix,
    *,
    compute_left: bool = True,
    compute_right: bool = True,
    auto_transpose: bool = False,
) -> SVDResult:
    """
    Singular value decomposition.

    Args:
        value: Matrix to decompose (n x p)
        compute_left: Compute U
        compute_right: Compute V
        auto_transpose: For wide matrices (n < p), decompose A' and swap
            the roles of U and V. The factors describe A either way.
    """
    x = value.view()
    swapped = auto_transpose and x.shape[0] < x.shape[1]
    if swapped:
        x = x.T

    if compute_left or compute_right:
        u, s, vt = scipy.linalg.svd(x, full_matrices=False)
        left, right = u, vt.T
        if swapped:
            left, right = right, left
    else:
        s = scipy.linalg.svdvals(x)
        left = right = None

    s_max = float(s[0]) if s.size else 0.0
    s_min = float(s[-1]) if s.size else 0.0

    return SVDResult(
        U=_wrap(left) if compute_left else None,
        singular_values=_column(s),
        V=_wrap(right) if compute_right else None,
        rank=int(np.sum(s > rank_tolerance(s, value.shape))),
        condition=s_max / s_min if s_min > 0 else float('inf'),
        two_norm=s_max,
    )


# =====================================================================
# Eigen
# =====================================================================


@dataclass(frozen=True)
class EigenResult:
    """
    Result of eigenvalue decomposition, in real form: A V = V D.

    Complex conjugate pairs a +/- bi occupy adjacent positions j, j+1:
    columns j and j+1 of V hold the real and imaginary parts of the
    eigenvector for a + bi, and D holds the 2 x 2 block [[a, b], [-b, a]].

    Attributes:
        real_eigenvalues: Real parts, in output order
        imaginary_eigenvalues: Imaginary parts, in output order
        eigenvectors: V
        diagonal_matrix: D (block diagonal)
        symmetric: Whether the symmetric solver was used
    """
    real_eigenvalues: tuple[float, ...]
    imaginary_eigenvalues: tuple[float, ...]
    eigenvectors: Matrix
    diagonal_matrix: Matrix
    symmetric: bool


def eigen(value: Matrix, *, assume_symmetric: bool = False, sort: bool = False) -> EigenResult:
    """
    Eigenvalue decomposition of a square matrix.

    Args:
        value: Square matrix
        assume_symmetric: Use the symmetric solver (reads the lower triangle)
        sort: Order eigenvalues by descending real part

    Raises:
        DimensionError: Matrix is not square
    """
    check_square(value.shape, 'value')
    x = value.view()
    n = value.row_count

    if assume_symmetric:
        w, v = scipy.linalg.eigh(x)
        w = w.astype(np.complex128)
        v = v.astype(np.complex128)
    else:
        w, v = scipy.linalg.eig(x)

    if sort:
        # Stable, so conjugate pairs stay adjacent
        order = np.argsort(-w.real, kind='stable')
        w, v = w[order], v[:, order]

    vectors = np.zeros((n, n))
    block = np.zeros((n, n))
    j = 0
    while j < n:
        a, b = w[j].real, w[j].imag
        if b > 0 and j + 1 < n:
            vectors[:, j] = v[:, j].real
            vectors[:, j + 1] = v[:, j].imag
            block[j, j] = block[j + 1, j + 1] = a
            block[j, j + 1] = b
            block[j + 1, j] = -b
            j += 2
        else:
            vectors[:, j] = v[:, j].real
            block[j, j] = a
            j += 1

    return EigenResult(
        real_eigenvalues=tuple(float(r) for r in w.real),
        imaginary_eigenvalues=tuple(float(i) for i in w.imag),
        eigenvectors=_wrap(vectors),
        diagonal_matrix=_wrap(block),
        symmetric=assume_symmetric,
    )


# =====================================================================
# Solver decomposition
# =====================================================================


def decompose(value: Matrix, *, least_squares: bool = False) -> LUResult | QRResult:
    """
    Decomposition suitable for solving systems with ``value``.

    LU for square matrices, economy QR for non-square matrices or when
    ``least_squares`` is requested.
    """
    if value.row_count == value.column_count and not least_squares:
        return lu(value)
    return qr(value, economy=True)
