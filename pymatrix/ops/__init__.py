"""
Matrix operators.

Every operator converts its operands with ``as_matrix``, adjusts the right
operand where its kind calls for it, and delegates to a NumPy / SciPy
routine.

    >>> from pymatrix import ops
    >>> ops.add([[1, 2], [3, 4]], [10, 20]).to_list()
    [[11.0, 12.0], [23.0, 24.0]]
    >>> ops.get_operator('mat.t') is ops.transpose
    True

Note that ``abs``, ``round``, ``pow`` and ``sum`` are operators here and
shadow the builtins when star-imported.
"""

from pymatrix.ops.dispatch import (
    Operator,
    OperatorKind,
    apply_operator,
    evaluate,
)
from pymatrix.ops.operators import (
    OPERATORS,
    get_operator,
    list_operators,
    # elementwise, one operand
    abs,
    ceiling,
    floor,
    exp,
    log,
    round,
    sign,
    sqrt,
    pow,
    signed_pow,
    sign_sqrt,
    apply,
    cumulative_sum,
    # elementwise, two operands
    add,
    subtract,
    multiply,
    divide,
    # algebra
    dot,
    kronecker,
    solve,
    transpose,
    inverse,
    pseudo_inverse,
    lower_triangle,
    upper_triangle,
    symmetric,
    divide_by_diagonal,
    # reductions
    determinant,
    log_determinant,
    log_pseudo_determinant,
    rank,
    sum,
    product,
    trace,
    distinct,
    distinct_count,
    # decompositions
    cholesky,
    lu,
    qr,
    svd,
    eigen,
    decompose,
    # predicates
    has_infinity,
    has_nan,
    is_diagonal,
    is_lower_triangular,
    is_upper_triangular,
    is_positive_definite,
    is_singular,
    is_symmetric,
)

__all__ = [
    "Operator",
    "OperatorKind",
    "apply_operator",
    "evaluate",
    "OPERATORS",
    "get_operator",
    "list_operators",
] + [op.name for op in OPERATORS]
