"""
PyMatrix: dense matrices with shape inference and restricted broadcasting.

A small matrix layer over NumPy / SciPy. Matrices are built from flat,
ragged or tabular input with wraparound fill, and binary operators
adjust their right operand by replicating a single row or column before
delegating to LAPACK-backed routines.

Submodules:
    matrix: Matrix type, constructors, shape adjustment, conversion
    ops: Operator catalogue and dispatch
    linalg: Decompositions (Cholesky, LU, QR, SVD, eigen)
    core: Exceptions, validation, tolerances, timing, Result envelope
"""

__version__ = "0.1.0"

from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    InvalidShapeError,
    ShapeMismatchError,
    IndexOutOfRangeError,
    NumericalError,
    SingularMatrixError,
    NotPositiveDefiniteError,
)
from pymatrix.matrix import (
    Matrix,
    create,
    from_jagged,
    diagonal,
    identity,
    with_value,
    zeros,
    mesh,
    one_hot,
    truth_table,
    from_records,
    from_dataframe,
    adjust_row,
    adjust_row_column,
    as_matrix,
)
from pymatrix import linalg
from pymatrix import ops
from pymatrix.ops import apply_operator, evaluate, get_operator, list_operators

__all__ = [
    "__version__",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "InvalidShapeError",
    "ShapeMismatchError",
    "IndexOutOfRangeError",
    "NumericalError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
    # Matrix
    "Matrix",
    "create",
    "from_jagged",
    "diagonal",
    "identity",
    "with_value",
    "zeros",
    "mesh",
    "one_hot",
    "truth_table",
    "from_records",
    "from_dataframe",
    "adjust_row",
    "adjust_row_column",
    "as_matrix",
    # Operators
    "ops",
    "linalg",
    "apply_operator",
    "evaluate",
    "get_operator",
    "list_operators",
]
