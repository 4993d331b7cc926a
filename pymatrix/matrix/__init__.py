"""
Dense matrix type and shape handling.

Public API:
    Matrix                      - dense float64 matrix
    create(values, r, c, t)     - flat sequence with shape inference
    from_jagged(rows)           - ragged rows, zero-padded
    diagonal / identity         - diagonal matrices
    with_value / zeros          - uniform matrices
    mesh / one_hot / truth_table
    from_records / from_dataframe
    as_matrix(value)            - operand conversion
    adjust_row / adjust_row_column - restricted broadcasting
"""

from pymatrix.matrix.dense import Matrix
from pymatrix.matrix.construction import (
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
)
from pymatrix.matrix.broadcast import adjust_row, adjust_row_column
from pymatrix.matrix.convert import as_matrix

__all__ = [
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
]
