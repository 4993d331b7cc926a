"""
Generic result container for PyMatrix operator evaluations.

The Result class is the envelope produced by ``evaluate()``: the operator
output plus metadata about how it was produced. Plain operator calls
return the bare value; the envelope is for callers (the CLI, profiling)
that also want timing and warnings.

Design decisions:
    - Generic over payload P (Matrix, float, bool, decomposition result)
    - info dict for flexible metadata (operator name, kind, shapes)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for an operator evaluation.

    Attributes:
        params: The operator output
        info: Structured metadata (operator, kind, operand shapes)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the numeric backend that produced it
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=Matrix.from_existing([[2.0]]),
        ...     info={'operator': 'add', 'kind': 'elementwise'},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_numpy'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
