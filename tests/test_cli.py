"""
Tests for the command-line front end.
"""

import pytest

from pymatrix.cli import main


# ═══════════════════════════════════════════════════════════════════════
# list
# ═══════════════════════════════════════════════════════════════════════


class TestList:

    def test_lists_operators(self, capsys):
        assert main(['list']) == 0
        out = capsys.readouterr().out
        assert 'add' in out
        assert 'mat.add' in out
        assert 'elementwise' in out
        assert '[exponent]' in out


# ═══════════════════════════════════════════════════════════════════════
# run
# ═══════════════════════════════════════════════════════════════════════


class TestRun:

    def test_matrix_result(self, capsys):
        assert main(['run', 'add', '[[1, 2], [3, 4]]', '10']) == 0
        out = capsys.readouterr().out
        assert out == "[2 x 2]\n 11 12\n 13 14\n"

    def test_alias_and_param(self, capsys):
        assert main(['run', 'mat.pow', '[[2, 3]]', '--param', 'exponent=2']) == 0
        assert capsys.readouterr().out.splitlines()[1] == " 4 9"

    def test_as_array(self, capsys):
        assert main(['run', 'transpose', '[[1, 2], [3, 4]]', '--as-array']) == 0
        assert capsys.readouterr().out.strip() == "[1, 2, 3, 4]"

    def test_scalar_result(self, capsys):
        assert main(['run', 'trace', '[[1, 2], [3, 4.5]]']) == 0
        assert capsys.readouterr().out.strip() == "5.5"

    def test_predicate_result(self, capsys):
        assert main(['run', 'is_symmetric', '[[1, 2], [2, 1]]']) == 0
        assert capsys.readouterr().out.strip() == "True"

    def test_decomposition_result(self, capsys):
        assert main(['run', 'lu', '[[4, 3], [6, 3]]']) == 0
        out = capsys.readouterr().out
        assert out.startswith("P:\n[2 x 2]")
        assert "nonsingular: True" in out
        assert "determinant: -6" in out

    def test_warning_on_stderr(self, capsys):
        assert main(['run', 'solve', '[[1, 0], [0, 1], [1, 1]]', '[1, 2, 3]']) == 0
        err = capsys.readouterr().err
        assert "WARNING: solve:" in err

    def test_timing_on_stderr(self, capsys):
        assert main(['run', 'add', '1', '2', '--timing']) == 0
        err = capsys.readouterr().err
        assert "total_seconds:" in err
        assert "routine:" in err

    def test_shape_mismatch_exit_code(self, capsys):
        assert main(['run', 'add', '[[1, 2, 3], [4, 5, 6]]', '[[1, 2], [3, 4]]']) == 1
        assert capsys.readouterr().err.startswith("ERROR: Matrix sizes are inconsistent")

    def test_unknown_operator(self, capsys):
        assert main(['run', 'nope', '1']) == 1
        assert "Unknown operator" in capsys.readouterr().err

    def test_bad_json(self, capsys):
        assert main(['run', 'add', '[1, 2', '1']) == 1
        assert "not a JSON literal" in capsys.readouterr().err

    def test_bad_param_syntax(self, capsys):
        assert main(['run', 'pow', '1', '--param', 'exponent']) == 1
        assert "KEY=JSON" in capsys.readouterr().err

    @pytest.mark.parametrize("operator", ['pow', 'signed_pow'])
    def test_non_numeric_exponent(self, capsys, operator):
        assert main(['run', operator, '[[1]]', '--param', 'exponent="x"']) == 1
        assert capsys.readouterr().err.startswith("ERROR: exponent: expected a real number")


# ═══════════════════════════════════════════════════════════════════════
# new
# ═══════════════════════════════════════════════════════════════════════


class TestNew:

    def test_identity(self, capsys):
        assert main(['new', 'identity', '2']) == 0
        assert capsys.readouterr().out == "[2 x 2]\n 1 0\n 0 1\n"

    def test_create_with_null_count(self, capsys):
        assert main(['new', 'create', '[1, 2, 3, 4, 5]', '2']) == 0
        assert capsys.readouterr().out.splitlines()[0] == "[2 x 3]"

    def test_truth_table(self, capsys):
        assert main(['new', 'truth-table', '[2, 3]']) == 0
        assert capsys.readouterr().out.splitlines()[0] == "[6 x 2]"

    def test_invalid_shape(self, capsys):
        assert main(['new', 'zero', '0']) == 1
        assert capsys.readouterr().err.startswith("ERROR:")

    def test_non_numeric_fill_value(self, capsys):
        assert main(['new', 'with-value', '"a"', '2']) == 1
        assert capsys.readouterr().err.startswith("ERROR: value: expected a real number")

    def test_non_numeric_mesh_bound(self, capsys):
        assert main(['new', 'mesh', '0', '1', '2', '0', '[1]', '2']) == 1
        assert capsys.readouterr().err.startswith("ERROR: column_maximum")

    def test_wrong_argument_count(self, capsys):
        assert main(['new', 'mesh', '0', '1']) == 1
        assert "mesh" in capsys.readouterr().err

    def test_unknown_factory_is_usage_error(self):
        with pytest.raises(SystemExit) as excinfo:
            main(['new', 'magic', '3'])
        assert excinfo.value.code == 2


class TestUsage:

    def test_no_command(self):
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 2
