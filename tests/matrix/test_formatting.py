"""
Tests for text rendering.
"""

import math

import pytest

from pymatrix.matrix import Matrix
from pymatrix.matrix._formatting import DISPLAY_DECIMALS, format_value, render


class TestFormatValue:

    @pytest.mark.parametrize("value,expected", [
        (1.0, "1"),
        (2.5, "2.5"),
        (-3.0, "-3"),
        (1 / 3, "0.33333"),
        (2 / 3, "0.66667"),
        (123.456789, "123.45679"),
        (1e6, "1000000"),
        (0.0, "0"),
        (-0.0, "0"),
        (-1e-7, "0"),
    ])
    def test_finite(self, value, expected):
        assert format_value(value) == expected

    def test_non_finite(self):
        assert format_value(math.nan) == "NaN"
        assert format_value(math.inf) == "Inf"
        assert format_value(-math.inf) == "-Inf"

    @pytest.mark.parametrize("value,expected", [
        (1.000005, "1.00001"),
        (-1.000005, "-1.00001"),
        (2.5e-05, "0.00003"),
        (-2.5e-05, "-0.00003"),
        (0.000004, "0"),
    ])
    def test_ties_round_away_from_zero(self, value, expected):
        assert format_value(value) == expected

    def test_large_values_keep_every_digit(self):
        assert format_value(1e20) == "100000000000000000000"
        assert format_value(1e300) == "1" + "0" * 300

    def test_decimals_constant(self):
        assert DISPLAY_DECIMALS == 5


class TestRender:

    def test_layout(self):
        m = Matrix.from_existing([[1, 2.5, 3], [4, 5, 0.125]])
        assert str(m) == (
            "[2 x 3]\n"
            "     1   2.5     3\n"
            "     4     5 0.125\n"
        )

    def test_header(self):
        assert str(Matrix(4, 1)).splitlines()[0] == "[4 x 1]"

    def test_one_line_per_row(self):
        assert len(str(Matrix(3, 2)).splitlines()) == 4

    def test_width_from_widest_value(self):
        text = render(Matrix.from_existing([[-1.5, 10]]).view())
        assert text.splitlines()[1] == " -1.5   10"

    def test_does_not_round_values(self):
        m = Matrix.from_existing([[1 / 3]])
        str(m)
        assert m[0, 0] == 1 / 3
