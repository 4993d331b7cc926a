"""
The operator catalogue.

Each operator is an Operator instance; calling it converts and adjusts
the operands and runs its routine. Names follow NumPy where they
coincide (abs, round, sum shadow the builtins inside this namespace).

Lookup by canonical name or alias:
    get_operator('add') is get_operator('mat.add')
"""

from __future__ import annotations

from pymatrix.core.exceptions import ValidationError
from pymatrix.linalg import decompositions
from pymatrix.ops import predicates, routines
from pymatrix.ops.dispatch import Operator, OperatorKind

UNARY = OperatorKind.UNARY
BINARY = OperatorKind.BINARY
ELEMENTWISE = OperatorKind.ELEMENTWISE
MULTIPLY = OperatorKind.MULTIPLY
PREDICATE = OperatorKind.PREDICATE


def _scipy(name, kind, routine, alias, description):
    return Operator(name, kind, routine, alias, description, backend_name='cpu_scipy')


# --- Elementwise, one operand ---

abs = Operator('abs', UNARY, routines.absolute, 'mat.abs', 'Absolute value')
ceiling = Operator('ceiling', UNARY, routines.ceiling, 'mat.ceiling', 'Round up')
floor = Operator('floor', UNARY, routines.floor, 'mat.floor', 'Round down')
exp = Operator('exp', UNARY, routines.exp, 'mat.exp', 'Exponential')
log = Operator('log', UNARY, routines.log, 'mat.log', 'Natural logarithm')
round = Operator('round', UNARY, routines.round_half_even, 'mat.round', 'Round half to even')
sign = Operator('sign', UNARY, routines.sign, 'mat.sign', 'Sign (-1, 0, 1)')
sqrt = Operator('sqrt', UNARY, routines.sqrt, 'mat.sqrt', 'Square root')
pow = Operator('pow', UNARY, routines.power, 'mat.pow', 'Raise to a power (exponent=)')
signed_pow = Operator(
    'signed_pow', UNARY, routines.signed_power, 'mat.signedpow',
    'sign(x) * |x| ** exponent (exponent=)',
)
sign_sqrt = Operator('sign_sqrt', UNARY, routines.sign_sqrt, 'mat.signsqrt', 'sign(x) * sqrt(|x|)')
apply = Operator('apply', UNARY, routines.apply, 'mat.apply', 'Apply a function to every element (func=)')
cumulative_sum = Operator(
    'cumulative_sum', UNARY, routines.cumulative_sum, 'mat.cumsum',
    'Running sum down columns (dimension=0) or along rows (dimension=1)',
)

# --- Elementwise, two operands (right operand broadcast) ---

add = Operator('add', ELEMENTWISE, routines.add, 'mat.add', 'Elementwise sum')
subtract = Operator('subtract', ELEMENTWISE, routines.subtract, 'mat.sub', 'Elementwise difference')
multiply = Operator('multiply', ELEMENTWISE, routines.multiply, 'mat.mul', 'Elementwise product')
divide = Operator('divide', ELEMENTWISE, routines.divide, 'mat.div', 'Elementwise quotient')

# --- Algebra ---

dot = Operator('dot', MULTIPLY, routines.dot, 'mat.dot', 'Matrix product (single-row rhs broadcast)')
kronecker = Operator('kronecker', BINARY, routines.kronecker, 'mat.kronecker', 'Kronecker product')
solve = _scipy('solve', BINARY, routines.solve, 'mat.solve', 'Solve lhs @ x = rhs (least_squares=)')
transpose = Operator('transpose', UNARY, routines.transpose, 'mat.t', 'Transpose')
inverse = _scipy('inverse', UNARY, routines.inverse, 'mat.inv', 'Inverse')
pseudo_inverse = _scipy(
    'pseudo_inverse', UNARY, routines.pseudo_inverse, 'mat.pseudoinv', 'Moore-Penrose pseudo-inverse',
)
lower_triangle = Operator(
    'lower_triangle', UNARY, routines.lower_triangle, 'mat.lowertri',
    'Lower triangle (exclude_diagonal=)',
)
upper_triangle = Operator(
    'upper_triangle', UNARY, routines.upper_triangle, 'mat.uppertri',
    'Upper triangle (exclude_diagonal=)',
)
symmetric = Operator(
    'symmetric', UNARY, routines.symmetric, 'mat.symmetric',
    "Mirror one triangle (from_='upper' or 'lower')",
)
divide_by_diagonal = Operator(
    'divide_by_diagonal', UNARY, routines.divide_by_diagonal, 'mat.divdiagonal',
    'Divide column j by b[j] (b=)',
)

# --- Reductions ---

determinant = Operator('determinant', UNARY, routines.determinant, 'mat.det', 'Determinant')
log_determinant = Operator(
    'log_determinant', UNARY, routines.log_determinant, 'mat.logdet', 'log |det|',
)
log_pseudo_determinant = _scipy(
    'log_pseudo_determinant', UNARY, routines.log_pseudo_determinant, 'mat.logpseudodet',
    'Sum of logs of non-zero singular values',
)
rank = Operator('rank', UNARY, routines.rank, 'mat.rank', 'Numerical rank')
sum = Operator('sum', UNARY, routines.total, 'mat.sum', 'Sum of all elements')
product = Operator('product', UNARY, routines.product, 'mat.product', 'Product of all elements')
trace = Operator('trace', UNARY, routines.trace, 'mat.trace', 'Sum of the main diagonal')
distinct = Operator('distinct', UNARY, routines.distinct, 'mat.distinct', 'Distinct values')
distinct_count = Operator(
    'distinct_count', UNARY, routines.distinct_count, 'mat.distinctcount', 'Number of distinct values',
)

# --- Decompositions ---

cholesky = _scipy(
    'cholesky', UNARY, decompositions.cholesky, 'mat.cholesky',
    'Cholesky decomposition (robust=, lower=)',
)
lu = _scipy('lu', UNARY, decompositions.lu, 'mat.lu', 'LU decomposition (transpose=)')
qr = Operator('qr', UNARY, decompositions.qr, 'mat.qr', 'QR decomposition (economy=, transpose=)')
svd = _scipy(
    'svd', UNARY, decompositions.svd, 'mat.svd',
    'Singular value decomposition (compute_left=, compute_right=, auto_transpose=)',
)
eigen = _scipy(
    'eigen', UNARY, decompositions.eigen, 'mat.eigenvalue',
    'Eigenvalue decomposition (assume_symmetric=, sort=)',
)
decompose = _scipy(
    'decompose', UNARY, decompositions.decompose, 'mat.decompose',
    'LU or QR decomposition for solving (least_squares=)',
)

# --- Predicates ---

has_infinity = Operator('has_infinity', PREDICATE, predicates.has_infinity, 'mat.hasinf', 'Any infinite element')
has_nan = Operator('has_nan', PREDICATE, predicates.has_nan, 'mat.hasnan', 'Any NaN element')
is_diagonal = Operator('is_diagonal', PREDICATE, predicates.is_diagonal, 'mat.isdiagonal', 'Off-diagonal all zero')
is_lower_triangular = Operator(
    'is_lower_triangular', PREDICATE, predicates.is_lower_triangular, 'mat.islowertri',
    'Above-diagonal all zero',
)
is_upper_triangular = Operator(
    'is_upper_triangular', PREDICATE, predicates.is_upper_triangular, 'mat.isuppertri',
    'Below-diagonal all zero',
)
is_positive_definite = _scipy(
    'is_positive_definite', PREDICATE, predicates.is_positive_definite, 'mat.ispositive',
    'Symmetric positive definite',
)
is_singular = _scipy('is_singular', PREDICATE, predicates.is_singular, 'mat.issingular', 'Rank deficient')
is_symmetric = Operator('is_symmetric', PREDICATE, predicates.is_symmetric, 'mat.issymmetric', 'Equal to transpose')


OPERATORS: tuple[Operator, ...] = (
    abs, ceiling, floor, exp, log, round, sign, sqrt, pow, signed_pow,
    sign_sqrt, apply, cumulative_sum,
    add, subtract, multiply, divide,
    dot, kronecker, solve, transpose, inverse, pseudo_inverse,
    lower_triangle, upper_triangle, symmetric, divide_by_diagonal,
    determinant, log_determinant, log_pseudo_determinant, rank, sum,
    product, trace, distinct, distinct_count,
    cholesky, lu, qr, svd, eigen, decompose,
    has_infinity, has_nan, is_diagonal, is_lower_triangular,
    is_upper_triangular, is_positive_definite, is_singular, is_symmetric,
)

_REGISTRY: dict[str, Operator] = {}
for _op in OPERATORS:
    _REGISTRY[_op.name] = _op
    if _op.alias:
        _REGISTRY[_op.alias] = _op
del _op


def get_operator(name: str) -> Operator:
    """
    Look up an operator by name or alias.

    Raises:
        ValidationError: Unknown name, with the available names listed
    """
    try:
        return _REGISTRY[name]
    except KeyError:
        available = ", ".join(op.name for op in OPERATORS)
        raise ValidationError(
            f"Unknown operator {name!r}. Available: {available}"
        ) from None


def list_operators(kind: OperatorKind | None = None) -> list[Operator]:
    """All operators in definition order, optionally filtered by kind."""
    return [op for op in OPERATORS if kind is None or op.kind is kind]
