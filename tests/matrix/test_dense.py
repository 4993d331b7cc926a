"""
Tests for the Matrix value type.

Validates:
    - Zero-filled construction and shape validation
    - from_existing deep copies, rejects empty / non-2-D input
    - Bounds-checked element access
    - Copies (clone, to_numpy, row, column) are independent
    - Read-only view, flat column-major export
    - Equality and hashing
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import (
    IndexOutOfRangeError,
    InvalidShapeError,
    ValidationError,
)
from pymatrix.matrix import Matrix


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_zero_filled(self):
        m = Matrix(2, 3)
        assert m.shape == (2, 3)
        assert m.row_count == 2
        assert m.column_count == 3
        np.testing.assert_array_equal(m.to_numpy(), np.zeros((2, 3)))

    @pytest.mark.parametrize("rows,columns", [(0, 1), (1, 0), (-2, 3), (0, 3)])
    def test_non_positive_dimensions(self, rows, columns):
        with pytest.raises(InvalidShapeError) as info:
            Matrix(rows, columns)
        assert (info.value.rows, info.value.columns) == (rows, columns)

    def test_non_integer_dimension_reported(self):
        with pytest.raises(InvalidShapeError) as info:
            Matrix(2, 1.5)
        assert (info.value.rows, info.value.columns) == (2, 1.5)

    def test_from_existing_copies(self):
        source = np.array([[1.0, 2.0], [3.0, 4.0]])
        m = Matrix.from_existing(source)
        source[0, 0] = 99.0
        assert m[0, 0] == 1.0

    def test_from_existing_nested_list(self):
        m = Matrix.from_existing([[1, 2, 3], [4, 5, 6]])
        assert m.shape == (2, 3)
        assert m[1, 2] == 6.0

    def test_from_existing_matrix_clones(self):
        m = Matrix.from_existing([[1.0]])
        copy = Matrix.from_existing(m)
        assert copy == m
        assert copy is not m

    def test_from_existing_empty(self):
        with pytest.raises(InvalidShapeError) as info:
            Matrix.from_existing(np.zeros((0, 3)))
        assert (info.value.rows, info.value.columns) == (0, 3)

    @pytest.mark.parametrize("values", [[], [[]]])
    def test_from_existing_empty_list(self, values):
        with pytest.raises(InvalidShapeError):
            Matrix.from_existing(values)

    def test_from_existing_1d(self):
        with pytest.raises(InvalidShapeError, match="expected a 2D array"):
            Matrix.from_existing([1.0, 2.0])

    def test_from_existing_3d(self):
        with pytest.raises(InvalidShapeError):
            Matrix.from_existing(np.zeros((2, 2, 2)))

    def test_from_existing_non_numeric(self):
        with pytest.raises(ValidationError):
            Matrix.from_existing([["a", "b"]])


# ═══════════════════════════════════════════════════════════════════════
# Element access
# ═══════════════════════════════════════════════════════════════════════


class TestElementAccess:

    def test_get_set(self):
        m = Matrix(2, 2)
        m.set(1, 0, 7.5)
        assert m.get(1, 0) == 7.5
        m[0, 1] = 3
        assert m[0, 1] == 3.0

    @pytest.mark.parametrize("row,column", [(2, 0), (0, 3), (-1, 0), (0, -1)])
    def test_out_of_range(self, row, column):
        m = Matrix(2, 3)
        with pytest.raises(IndexOutOfRangeError) as excinfo:
            m[row, column]
        assert excinfo.value.shape == (2, 3)
        assert excinfo.value.row == row
        assert excinfo.value.column == column

    def test_out_of_range_is_index_error(self):
        with pytest.raises(IndexError):
            Matrix(1, 1).set(1, 0, 1.0)

    def test_failed_set_leaves_matrix_unchanged(self):
        m = Matrix(2, 2)
        with pytest.raises(IndexOutOfRangeError):
            m[2, 2] = 5.0
        assert m == Matrix(2, 2)

    def test_non_integer_index(self):
        m = Matrix(2, 2)
        with pytest.raises(TypeError):
            m[0.5, 0]
        with pytest.raises(TypeError):
            m[True, 0]

    def test_key_must_be_pair(self):
        with pytest.raises(TypeError):
            Matrix(2, 2)[0]

    def test_numpy_integer_index(self):
        m = Matrix.from_existing([[1, 2], [3, 4]])
        assert m[np.int64(1), np.int32(0)] == 3.0

    def test_row_and_column_are_copies(self):
        m = Matrix.from_existing([[1, 2], [3, 4]])
        row = m.row(1)
        column = m.column(1)
        np.testing.assert_array_equal(row, [3.0, 4.0])
        np.testing.assert_array_equal(column, [2.0, 4.0])
        row[0] = 100.0
        column[0] = 100.0
        assert m[1, 0] == 3.0
        assert m[0, 1] == 2.0

    def test_row_out_of_range(self):
        with pytest.raises(IndexOutOfRangeError):
            Matrix(2, 2).row(2)


# ═══════════════════════════════════════════════════════════════════════
# Copies, views, export
# ═══════════════════════════════════════════════════════════════════════


class TestCopies:

    def test_clone_is_independent(self):
        m = Matrix.from_existing([[1, 2], [3, 4]])
        copy = m.clone()
        copy[0, 0] = 10.0
        assert m[0, 0] == 1.0
        assert copy[0, 0] == 10.0

    def test_to_numpy_is_copy(self):
        m = Matrix.from_existing([[1.0]])
        m.to_numpy()[0, 0] = 5.0
        assert m[0, 0] == 1.0

    def test_view_is_read_only(self):
        m = Matrix.from_existing([[1.0, 2.0]])
        view = m.view()
        with pytest.raises(ValueError):
            view[0, 0] = 5.0
        m[0, 0] = 3.0
        assert view[0, 0] == 3.0

    def test_view_does_not_freeze_matrix(self):
        m = Matrix(1, 1)
        m.view()
        m[0, 0] = 2.0
        assert m[0, 0] == 2.0

    def test_flat_array_column_major(self):
        m = Matrix.from_existing([[1, 2, 3], [4, 5, 6]])
        assert m.to_flat_array() == [1.0, 4.0, 2.0, 5.0, 3.0, 6.0]

    def test_to_list(self):
        m = Matrix.from_existing([[1, 2], [3, 4]])
        assert m.to_list() == [[1.0, 2.0], [3.0, 4.0]]


# ═══════════════════════════════════════════════════════════════════════
# Equality and display
# ═══════════════════════════════════════════════════════════════════════


class TestEqualityAndDisplay:

    def test_equal(self):
        assert Matrix.from_existing([[1, 2]]) == Matrix.from_existing([[1.0, 2.0]])

    def test_shape_matters(self):
        assert Matrix.from_existing([[1, 2]]) != Matrix.from_existing([[1], [2]])

    def test_values_matter(self):
        assert Matrix.from_existing([[1, 2]]) != Matrix.from_existing([[1, 3]])

    def test_not_equal_to_list(self):
        assert Matrix.from_existing([[1.0]]) != [[1.0]]

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Matrix(1, 1))

    def test_str_header(self):
        assert str(Matrix(2, 3)).startswith("[2 x 3]\n")

    def test_repr(self):
        assert repr(Matrix(2, 3)) == "Matrix(row_count=2, column_count=3)"
