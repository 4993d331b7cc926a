"""
Tests for shape adjustment (restricted broadcasting).

Validates:
    - adjust_row: identity, single-row replication, mismatch
    - adjust_row_column: identity, column / row / scalar replication,
      every rejected shape
    - ShapeMismatchError diagnostics
"""

import pytest

from pymatrix.core.exceptions import DimensionError, ShapeMismatchError
from pymatrix.matrix import Matrix, adjust_row, adjust_row_column


def M(rows):
    return Matrix.from_existing(rows)


# ═══════════════════════════════════════════════════════════════════════
# adjust_row
# ═══════════════════════════════════════════════════════════════════════


class TestAdjustRow:

    def test_matching_rows_returns_same_object(self):
        m = M([[1, 2], [3, 4], [5, 6]])
        assert adjust_row(m, 3) is m

    def test_single_row_replicated(self):
        result = adjust_row(M([[5, 6]]), 3)
        assert result == M([[5, 6], [5, 6], [5, 6]])

    def test_single_row_does_not_alias(self):
        m = M([[5, 6]])
        result = adjust_row(m, 2)
        result[0, 0] = 0.0
        assert m[0, 0] == 5.0

    def test_single_row_to_one_row(self):
        m = M([[1, 2, 3]])
        assert adjust_row(m, 1) is m

    def test_mismatch(self):
        with pytest.raises(ShapeMismatchError) as excinfo:
            adjust_row(M([[1, 2], [3, 4]]), 3)
        err = excinfo.value
        assert err.shape == (2, 2)
        assert err.target_shape == (3, None)
        assert str(err).startswith("Matrix sizes are inconsistent")


# ═══════════════════════════════════════════════════════════════════════
# adjust_row_column
# ═══════════════════════════════════════════════════════════════════════


class TestAdjustRowColumn:

    def test_matching_shape_returns_same_object(self):
        m = M([[1, 2, 3], [4, 5, 6]])
        assert adjust_row_column(m, 2, 3) is m

    def test_column_replicated_across(self):
        result = adjust_row_column(M([[1], [2]]), 2, 3)
        assert result == M([[1, 1, 1], [2, 2, 2]])

    def test_row_replicated_down(self):
        result = adjust_row_column(M([[1, 2, 3]]), 4, 3)
        assert result.shape == (4, 3)
        assert all(row == [1.0, 2.0, 3.0] for row in result.to_list())

    def test_scalar_fills(self):
        result = adjust_row_column(M([[7]]), 2, 3)
        assert result == M([[7, 7, 7], [7, 7, 7]])

    def test_scalar_to_single_row(self):
        assert adjust_row_column(M([[7]]), 1, 3) == M([[7, 7, 7]])

    def test_scalar_to_scalar(self):
        m = M([[7]])
        assert adjust_row_column(m, 1, 1) is m

    @pytest.mark.parametrize("rows,target", [
        ([[1, 2, 3], [4, 5, 6]], (4, 5)),
        ([[1, 2]], (3, 4)),
        ([[1], [2]], (3, 1)),
        ([[1], [2]], (3, 3)),
        ([[1, 2], [3, 4]], (2, 3)),
    ])
    def test_mismatch(self, rows, target):
        m = M(rows)
        with pytest.raises(ShapeMismatchError) as excinfo:
            adjust_row_column(m, *target)
        assert excinfo.value.shape == m.shape
        assert excinfo.value.target_shape == target

    def test_mismatch_is_dimension_error(self):
        with pytest.raises(DimensionError):
            adjust_row_column(M([[1, 2, 3], [4, 5, 6]]), 4, 5)

    def test_mismatch_message_names_shapes(self):
        with pytest.raises(ShapeMismatchError, match=r"2 x 3 to 4 x 5"):
            adjust_row_column(M([[1, 2, 3], [4, 5, 6]]), 4, 5)
