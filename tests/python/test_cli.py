"""
Tests for the command-line interface.
"""

import pytest

from tilematrix.cli import build_parser, main

LITERAL = "1, 2, 0; 4, -100, 0; 7, 8, 9"


class TestCommands:
    """Test each command's output."""

    def test_show(self, capsys):
        assert main(["show", "1, 2, 3; 4, 5"]) == 0
        assert capsys.readouterr().out == "| 1  2  3 |\n| 4  5  0 |\n"

    def test_transpose(self, capsys):
        assert main(["transpose", "1, 2, 3; 4, 5, 6"]) == 0
        assert capsys.readouterr().out == "| 1  4 |\n| 2  5 |\n| 3  6 |\n"

    def test_row(self, capsys):
        assert main(["row", "1", LITERAL]) == 0
        assert capsys.readouterr().out == "| 4  -100  0 |\n"

    def test_col(self, capsys):
        assert main(["col", "2", LITERAL]) == 0
        assert capsys.readouterr().out == "| 0 |\n| 0 |\n| 9 |\n"

    def test_diag(self, capsys):
        assert main(["diag", "1, 2; 3, 4"]) == 0
        assert capsys.readouterr().out == "| 1  0 |\n| 0  4 |\n"

    def test_sum(self, capsys):
        assert main(["sum", LITERAL]) == 0
        assert capsys.readouterr().out.strip() == "-69"

    def test_dtype_option(self, capsys):
        assert main(["--dtype", "float64", "show", "1.5; 2.5, 3.5"]) == 0
        assert capsys.readouterr().out == "| 1.5  0.0 |\n| 2.5  3.5 |\n"

    def test_dtype_option_converts_integers(self, capsys):
        assert main(["--dtype", "float64", "show", "1, 2; 3"]) == 0
        assert capsys.readouterr().out == "| 1.0  2.0 |\n| 3.0  0.0 |\n"


class TestErrors:
    """Test error reporting."""

    def test_diag_non_square(self, capsys):
        assert main(["diag", "1, 2, 3; 4, 5, 6"]) == 1
        assert "not square" in capsys.readouterr().err

    def test_row_out_of_bounds(self, capsys):
        assert main(["row", "3", LITERAL]) == 1
        assert "out of bounds" in capsys.readouterr().err

    def test_bad_literal(self, capsys):
        assert main(["show", "1, x"]) == 1
        assert "Cannot parse" in capsys.readouterr().err

    def test_missing_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_value_not_convertible_to_dtype(self, capsys):
        assert main(["--dtype", "int64", "show", "1, 'abc'"]) == 1
        assert capsys.readouterr().err
