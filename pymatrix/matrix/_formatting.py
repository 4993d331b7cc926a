"""
Text rendering for Matrix.

The layout is a shape header followed by one line per row, every cell
right-justified to the widest rendered value plus one space:

    [2 x 3]
         1   2.5     3
         4     5 0.125

Values show at most DISPLAY_DECIMALS fractional digits with trailing
zeros dropped. Ties round away from zero on the shortest decimal form of
the value, so 1.000005 shows as 1.00001. Rendering has no numeric effect.
"""

from __future__ import annotations

import decimal
import math
from typing import Any

import numpy as np
from numpy.typing import NDArray

DISPLAY_DECIMALS = 5

_QUANTUM = decimal.Decimal(1).scaleb(-DISPLAY_DECIMALS)
# Wide enough for the integer digits of the largest float64
_CONTEXT = decimal.Context(prec=330, rounding=decimal.ROUND_HALF_UP)


def format_value(value: float) -> str:
    """Render one element: '1', '2.5', '0.33333', 'NaN', 'Inf', '-Inf'."""
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Inf' if value > 0 else '-Inf'

    rounded = decimal.Decimal(repr(float(value))).quantize(_QUANTUM, context=_CONTEXT)
    text = f"{rounded:f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    # Values that round to zero from below print as '-0'
    if text == '-0':
        text = '0'
    return text


def render(values: NDArray[np.floating[Any]]) -> str:
    """Render a 2-D buffer with its '[R x C]' header."""
    rows, columns = values.shape
    cells = [
        [format_value(float(values[r, c])) for c in range(columns)]
        for r in range(rows)
    ]
    width = max(len(s) for row in cells for s in row) + 1

    lines = [f"[{rows} x {columns}]"]
    lines.extend("".join(s.rjust(width) for s in row) for row in cells)
    return "\n".join(lines) + "\n"
