"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Each failure is local to a single operation:
a failed construction or adjustment never leaves a partially filled
matrix behind.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when shapes don't match expected dimensions or when
    operands have inconsistent shapes.
    """
    pass


class InvalidShapeError(DimensionError):
    """
    A constructor was asked for a non-positive row or column count.

    Attributes:
        rows: Requested row count (as given)
        columns: Requested column count (as given)
    """

    def __init__(
        self,
        message: str,
        rows: object | None = None,
        columns: object | None = None,
    ):
        super().__init__(message)
        self.rows = rows
        self.columns = columns


class ShapeMismatchError(DimensionError):
    """
    An operand cannot be broadcast to the required shape.

    Raised by the shape adjustment rules when none of the permitted
    cases (identity, single row, single column) applies.

    Attributes:
        shape: Shape of the operand, (rows, columns)
        target_shape: Shape it had to conform to. For row-only
            adjustment the column entry is None.
    """

    def __init__(
        self,
        message: str,
        shape: tuple[int, int] | None = None,
        target_shape: tuple[int | None, int | None] | None = None,
    ):
        super().__init__(message)
        self.shape = shape
        self.target_shape = target_shape


class IndexOutOfRangeError(PyMatrixError, IndexError):
    """
    Element access outside [0, row_count) x [0, column_count).

    Attributes:
        row: Requested row index
        column: Requested column index
        shape: Shape of the accessed matrix
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        column: int | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.column = column
        self.shape = shape


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors raised by the numeric routines (inverse,
    solve, decompositions).
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        condition_number: Estimated condition number, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically min(rows, columns))
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        condition_number: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.condition_number = condition_number
        self.rank = rank
        self.expected_rank = expected_rank


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not positive definite.

    Raised when Cholesky decomposition is requested (non-robust) for a
    matrix that fails this requirement.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        min_eigenvalue: Minimum eigenvalue, if computed
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        min_eigenvalue: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.min_eigenvalue = min_eigenvalue
