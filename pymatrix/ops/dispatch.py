"""
Operator dispatch.

Every operator is data: a name, one of five call conventions
(OperatorKind), and the numeric routine it delegates to. A single driver
converts the operands, applies the shape adjustment the kind calls for,
runs the routine, and shapes the output.

    Kind         Operands  Adjustment before the routine
    UNARY        1         none
    BINARY       2         none
    ELEMENTWISE  2         rhs -> adjust_row_column(rhs, lhs.rows, lhs.cols)
    MULTIPLY     2         rhs -> adjust_row(rhs, lhs.cols); a flat lhs
                           becomes a row vector
    PREDICATE    1         none; result coerced to bool
"""

from __future__ import annotations

import inspect
import warnings
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.result import Result
from pymatrix.core.timing import Timer
from pymatrix.matrix.broadcast import adjust_row, adjust_row_column
from pymatrix.matrix.convert import as_matrix
from pymatrix.matrix.dense import Matrix


class OperatorKind(Enum):
    """Call convention of an operator."""
    UNARY = 'unary'
    BINARY = 'binary'
    ELEMENTWISE = 'elementwise'
    MULTIPLY = 'multiply'
    PREDICATE = 'predicate'

    @property
    def arity(self) -> int:
        """Number of matrix operands."""
        if self in (OperatorKind.UNARY, OperatorKind.PREDICATE):
            return 1
        return 2


@dataclass(frozen=True)
class Operator:
    """
    A named operator.

    Attributes:
        name: Canonical name, e.g. 'add'
        kind: Call convention
        routine: Numeric routine taking Matrix operands and keyword
            parameters
        alias: Short alias, e.g. 'mat.add'
        description: One-line help text
        backend_name: Library the routine delegates to

    Calling an Operator runs ``apply_operator``:

        >>> add([[1, 2], [3, 4]], 10).to_list()
        [[11.0, 12.0], [13.0, 14.0]]
    """
    name: str
    kind: OperatorKind
    routine: Callable[..., Any]
    alias: str | None = None
    description: str = ''
    backend_name: str = 'cpu_numpy'

    @property
    def parameters(self) -> tuple[str, ...]:
        """Names of the keyword parameters the routine accepts."""
        signature = inspect.signature(self.routine)
        return tuple(
            name for name, p in signature.parameters.items()
            if p.kind is inspect.Parameter.KEYWORD_ONLY
        )

    @property
    def required_parameters(self) -> tuple[str, ...]:
        """Keyword parameters without a default."""
        signature = inspect.signature(self.routine)
        return tuple(
            name for name, p in signature.parameters.items()
            if p.kind is inspect.Parameter.KEYWORD_ONLY and p.default is inspect.Parameter.empty
        )

    def __call__(self, *operands: Any, as_array: bool = False, **params: Any) -> Any:
        return apply_operator(self, *operands, as_array=as_array, **params)


def _prepare(op: Operator, operands: tuple[Any, ...], timer: Timer) -> list[Matrix]:
    """Convert and adjust the operands for the operator's kind."""
    if len(operands) != op.kind.arity:
        raise ValidationError(
            f"{op.name}: expected {op.kind.arity} operand(s), got {len(operands)}"
        )

    with timer.section('convert'):
        if op.kind is OperatorKind.MULTIPLY:
            lhs = as_matrix(operands[0], as_column=False)
            matrices = [lhs, as_matrix(operands[1], as_column=True)]
        else:
            matrices = [as_matrix(o, as_column=True) for o in operands]

    with timer.section('adjust'):
        if op.kind is OperatorKind.ELEMENTWISE:
            lhs, rhs = matrices
            matrices[1] = adjust_row_column(rhs, lhs.row_count, lhs.column_count)
        elif op.kind is OperatorKind.MULTIPLY:
            lhs, rhs = matrices
            matrices[1] = adjust_row(rhs, lhs.column_count)

    return matrices


def _run(
    op: Operator,
    operands: tuple[Any, ...],
    as_array: bool,
    params: dict[str, Any],
    timer: Timer,
) -> tuple[Any, list[Matrix]]:
    unknown = set(params) - set(op.parameters)
    if unknown:
        raise ValidationError(
            f"{op.name}: unknown parameter(s) {sorted(unknown)}; "
            f"accepted: {list(op.parameters)}"
        )
    missing = set(op.required_parameters) - set(params)
    if missing:
        raise ValidationError(f"{op.name}: missing parameter(s) {sorted(missing)}")

    matrices = _prepare(op, operands, timer)

    with timer.section('routine'):
        value = op.routine(*matrices, **params)

    if op.kind is OperatorKind.PREDICATE:
        value = bool(value)
    elif as_array and isinstance(value, Matrix):
        value = value.to_flat_array()
    return value, matrices


def apply_operator(op: Operator, *operands: Any, as_array: bool = False, **params: Any) -> Any:
    """
    Run an operator on raw operands.

    Args:
        op: Operator to run
        *operands: One or two values accepted by ``as_matrix``
        as_array: Return a Matrix result flattened to a column-major list
        **params: Keyword parameters for the routine

    Returns:
        Matrix (or list when as_array), float, int, bool, list, or a
        decomposition result

    Raises:
        ValidationError: Wrong operand count, unknown parameter, or an
            operand that cannot be converted
        ShapeMismatchError: The right operand cannot be adjusted
        NumericalError: The routine failed
    """
    value, _ = _run(op, operands, as_array, params, Timer())
    return value


def evaluate(op: Operator, *operands: Any, as_array: bool = False, **params: Any) -> Result[Any]:
    """
    Run an operator and return the Result envelope.

    Same semantics as ``apply_operator``; additionally records timing
    ('convert', 'adjust', 'routine' sections) and captures warnings
    raised during the call into ``Result.warnings``.
    """
    timer = Timer()
    timer.start()
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter('always')
        value, matrices = _run(op, operands, as_array, params, timer)
    timer.stop()

    info: dict[str, Any] = {
        'operator': op.name,
        'kind': op.kind.value,
        'operand_shapes': [m.shape for m in matrices],
    }
    if isinstance(value, Matrix):
        info['result_shape'] = value.shape

    return Result(
        params=value,
        info=info,
        timing=timer.result(),
        backend_name=op.backend_name,
        warnings=tuple(str(w.message) for w in caught),
    )
