"""
Tests for Row, Col, Diag and MatrixIterator views.
"""

from decimal import Decimal

import pytest

from tilematrix import (
    Col,
    Diag,
    Matrix,
    MatrixIndexError,
    MatrixIterator,
    NotSquareError,
    Row,
)


class TestRow:
    """Test row views."""

    def test_iterates_row(self, square_matrix):
        assert list(square_matrix.row(1)) == [4, -100, 0]

    def test_bound_is_cols(self, wide_matrix):
        row = wide_matrix.row(0)
        assert isinstance(row, Row)
        assert len(row) == 3

    def test_indexing(self, wide_matrix):
        row = wide_matrix.row(1)
        assert row[0] == 4
        assert row[2] == 6

    def test_indexing_out_of_bounds(self, wide_matrix):
        with pytest.raises(MatrixIndexError):
            wide_matrix.row(0)[3]

    def test_invalid_row(self, wide_matrix):
        with pytest.raises(MatrixIndexError):
            wide_matrix.row(2)
        with pytest.raises(MatrixIndexError):
            wide_matrix.row(-1)

    def test_single_pass(self, wide_matrix):
        """A view is exhausted after one traversal."""
        row = wide_matrix.row(0)
        assert list(row) == [1, 2, 3]
        assert list(row) == []
        with pytest.raises(StopIteration):
            next(row)

    def test_step_by_step(self, wide_matrix):
        row = wide_matrix.row(0)
        assert next(row) == 1
        assert row.remaining == 2
        assert next(row) == 2
        assert next(row) == 3
        assert row.remaining == 0

    def test_to_matrix(self, square_matrix):
        """Materialized row is 1 x cols with the row's values."""
        mat = square_matrix.row(1).to_matrix()
        assert mat.size == (1, 3)
        assert mat.to_list() == [[square_matrix.get(1, j) for j in range(3)]]
        assert mat.dtype == square_matrix.dtype

    def test_to_matrix_is_independent(self, wide_matrix):
        mat = wide_matrix.row(0).to_matrix()
        mat.set(0, 0, 99)
        assert wide_matrix.get(0, 0) == 1

    def test_to_matrix_after_partial_iteration(self, wide_matrix):
        """Materialization takes the remaining elements."""
        row = wide_matrix.row(0)
        next(row)
        assert row.to_matrix().to_list() == [[2, 3]]

    def test_empty_row(self):
        mat = Matrix.new(2, 0)
        assert list(mat.row(1)) == []
        assert mat.row(1).to_matrix().size == (1, 0)

    def test_repr(self, wide_matrix):
        assert repr(wide_matrix.row(1)) == "<Row 1 of 2x3 Matrix>"


class TestCol:
    """Test column views."""

    def test_iterates_column(self, square_matrix):
        assert list(square_matrix.col(1)) == [2, -100, 8]

    def test_bound_is_rows(self, wide_matrix):
        col = wide_matrix.col(2)
        assert isinstance(col, Col)
        assert len(col) == 2

    def test_indexing(self, wide_matrix):
        col = wide_matrix.col(2)
        assert col[0] == 3
        assert col[1] == 6
        with pytest.raises(MatrixIndexError):
            col[2]

    def test_invalid_col(self, wide_matrix):
        with pytest.raises(MatrixIndexError):
            wide_matrix.col(3)

    def test_to_matrix(self, wide_matrix):
        """Materialized column is rows x 1."""
        mat = wide_matrix.col(1).to_matrix()
        assert mat.size == (2, 1)
        assert mat.to_list() == [[2], [5]]


class TestDiag:
    """Test diagonal views."""

    def test_iterates_diagonal(self, square_matrix):
        diag = square_matrix.diag()
        assert isinstance(diag, Diag)
        assert list(diag) == [1, -100, 9]

    def test_indexing(self, square_matrix):
        diag = square_matrix.diag()
        assert len(diag) == 3
        assert diag[2] == 9
        with pytest.raises(MatrixIndexError):
            diag[3]

    @pytest.mark.parametrize("rows,cols", [(2, 3), (3, 2), (1, 0)])
    def test_non_square_fails_at_construction(self, rows, cols):
        mat = Matrix.new(rows, cols)
        with pytest.raises(NotSquareError):
            mat.diag()

    def test_non_square_is_value_error(self, wide_matrix):
        with pytest.raises(ValueError):
            wide_matrix.diag()

    def test_to_matrix_expands_to_square(self, square_matrix):
        """Materialized diagonal is n x n with defaults off the diagonal."""
        mat = square_matrix.diag().to_matrix()
        assert mat.size == (3, 3)
        for i in range(3):
            for j in range(3):
                if i == j:
                    assert mat.get(i, j) == square_matrix.get(i, i)
                else:
                    assert mat.get(i, j) == 0

    def test_to_matrix_uses_element_default(self):
        mat = Matrix.from_rows([["a", "b"], ["c", "d"]])
        assert mat.diag().to_matrix().to_list() == [["a", ""], ["", "d"]]

    def test_to_matrix_uses_element_class_default(self):
        mat = Matrix.from_rows([[Decimal("1.5"), Decimal("2")], [Decimal("3"), Decimal("4.25")]])
        expanded = mat.diag().to_matrix()
        assert expanded.dtype == "Decimal"
        assert expanded.to_list() == [
            [Decimal("1.5"), Decimal(0)],
            [Decimal(0), Decimal("4.25")],
        ]
        assert isinstance(expanded.get(0, 1), Decimal)

    def test_empty_square(self):
        mat = Matrix.new(0, 0)
        assert list(mat.diag()) == []
        assert mat.diag().to_matrix().size == (0, 0)


class TestMatrixIterator:
    """Test full-matrix iteration."""

    def test_row_major_order(self, wide_matrix):
        assert list(wide_matrix.iter()) == [1, 2, 3, 4, 5, 6]

    def test_iter_protocol(self, wide_matrix):
        it = iter(wide_matrix)
        assert isinstance(it, MatrixIterator)
        assert list(it) == [1, 2, 3, 4, 5, 6]

    @pytest.mark.parametrize("rows,cols", [(0, 0), (0, 4), (4, 0), (3, 5)])
    def test_count(self, rows, cols):
        assert len(list(Matrix.new(rows, cols).iter())) == rows * cols

    def test_matches_rows(self, square_matrix):
        expected = []
        for i in range(square_matrix.rows):
            expected.extend(square_matrix.row(i))
        assert list(square_matrix.iter()) == expected

    def test_sum(self, square_matrix):
        assert sum(square_matrix.iter()) == -69

    def test_indexing(self, wide_matrix):
        it = wide_matrix.iter()
        assert it[4] == 5
        with pytest.raises(MatrixIndexError):
            it[6]

    def test_to_matrix_flattens(self, wide_matrix):
        mat = wide_matrix.iter().to_matrix()
        assert mat.size == (1, 6)


class TestViewLifetime:
    """Views read through the source matrix on every step."""

    def test_many_readers(self, square_matrix):
        rows = [square_matrix.row(i) for i in range(3)]
        cols = [square_matrix.col(j) for j in range(3)]
        assert [list(r) for r in rows] == square_matrix.to_list()
        assert [list(c) for c in cols] == square_matrix.transpose().to_list()

    def test_view_keeps_source(self, wide_matrix):
        row = wide_matrix.row(0)
        assert row.matrix is wide_matrix
        assert row.index == 0
