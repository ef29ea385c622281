"""
Matrix Views

Lazy, read-only traversals over part of a ``Matrix``:

    MatrixView (ABC)
    ├── Row            one row, left to right
    ├── Col            one column, top to bottom
    ├── Diag           main diagonal of a square matrix
    └── MatrixIterator every element in row-major order

A view holds the source matrix and a cursor; it owns no data. Elements are
re-fetched through the matrix's checked accessors on every step. Views are
single-pass iterators: ``iter(view)`` returns the view itself, and a fresh
view must be requested to traverse again.

The source matrix must not be mutated while a view is live. This is not
checked; a mutation mid-traversal makes the remaining elements reflect the
new values.

Every view can be materialized into a new, independently owned matrix with
``to_matrix()``. Rows and columns flatten to ``1 x n`` / ``n x 1`` vectors,
whereas a diagonal expands to an ``n x n`` diagonal matrix whose off-diagonal
cells hold the element type's default value.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, List

from ._dtypes import clone
from .error import check_index, check_square

if TYPE_CHECKING:
    from ._matrix import Matrix

__all__ = ['MatrixView', 'Row', 'Col', 'Diag', 'MatrixIterator']

logger = logging.getLogger("tilematrix.views")


class MatrixView(ABC):
    """
    Base class for position-tracking views over a matrix.

    Subclasses define the view's bound (its length) and how a position maps
    onto the source matrix.
    """

    __slots__ = ("_matrix", "_cursor")

    def __init__(self, matrix: "Matrix"):
        self._matrix = matrix
        self._cursor = 0

    @property
    def matrix(self) -> "Matrix":
        """Source matrix."""
        return self._matrix

    @property
    @abstractmethod
    def bound(self) -> int:
        """Number of elements in the view."""
        ...

    @abstractmethod
    def _at(self, k: int) -> Any:
        """Element at position ``k`` of the view (checked by the matrix)."""
        ...

    @abstractmethod
    def to_matrix(self) -> "Matrix":
        """Materialize the remaining elements into a new matrix."""
        ...

    # =========================================================================
    # Sequence / Iterator Protocol
    # =========================================================================

    def __getitem__(self, k: int) -> Any:
        return self._at(k)

    def __len__(self) -> int:
        return self.bound

    def __length_hint__(self) -> int:
        return self.remaining

    @property
    def remaining(self) -> int:
        """Elements not yet produced by iteration."""
        return max(self.bound - self._cursor, 0)

    def __iter__(self) -> "MatrixView":
        return self

    def __next__(self) -> Any:
        if self._cursor < self.bound:
            value = self._at(self._cursor)
            self._cursor += 1
            return value
        raise StopIteration

    def _collect(self) -> List[Any]:
        """Clone every remaining element, exhausting the view."""
        return [clone(value) for value in self]

    def to_list(self) -> List[Any]:
        """Clones of the remaining elements as a list (exhausts the view)."""
        return self._collect()


class Row(MatrixView):
    """
    Row ``i`` of a matrix.

    ``row[j]`` is ``matrix.get(i, j)``.
    """

    __slots__ = ("_row",)

    def __init__(self, matrix: "Matrix", i: int):
        super().__init__(matrix)
        self._row = check_index(i, matrix.rows, "row")

    @property
    def index(self) -> int:
        """Row index in the source matrix."""
        return self._row

    @property
    def bound(self) -> int:
        return self._matrix.cols

    def _at(self, j: int) -> Any:
        return self._matrix.get(self._row, j)

    def to_matrix(self) -> "Matrix":
        """Produce a ``1 x n`` matrix of cloned row elements."""
        data = self._collect()
        logger.debug("materialized row %d into 1x%d", self._row, len(data))
        return self._matrix._from_buffer(data, 1, len(data), self._matrix.element_type)

    def __repr__(self) -> str:
        rows, cols = self._matrix.size
        return f"<Row {self._row} of {rows}x{cols} Matrix>"


class Col(MatrixView):
    """
    Column ``j`` of a matrix.

    ``col[i]`` is ``matrix.get(i, j)``.
    """

    __slots__ = ("_col",)

    def __init__(self, matrix: "Matrix", j: int):
        super().__init__(matrix)
        self._col = check_index(j, matrix.cols, "col")

    @property
    def index(self) -> int:
        """Column index in the source matrix."""
        return self._col

    @property
    def bound(self) -> int:
        return self._matrix.rows

    def _at(self, i: int) -> Any:
        return self._matrix.get(i, self._col)

    def to_matrix(self) -> "Matrix":
        """Produce an ``n x 1`` matrix of cloned column elements."""
        data = self._collect()
        logger.debug("materialized col %d into %dx1", self._col, len(data))
        return self._matrix._from_buffer(data, len(data), 1, self._matrix.element_type)

    def __repr__(self) -> str:
        rows, cols = self._matrix.size
        return f"<Col {self._col} of {rows}x{cols} Matrix>"


class Diag(MatrixView):
    """
    Main diagonal of a square matrix.

    ``diag[k]`` is ``matrix.get(k, k)``.

    Raises:
        NotSquareError: At construction, if the matrix is not square
    """

    __slots__ = ()

    def __init__(self, matrix: "Matrix"):
        check_square(matrix.rows, matrix.cols, "Matrix.diag")
        super().__init__(matrix)

    @property
    def bound(self) -> int:
        return self._matrix.rows

    def _at(self, k: int) -> Any:
        return self._matrix.get(k, k)

    def to_matrix(self) -> "Matrix":
        """
        Produce an ``n x n`` diagonal matrix.

        Diagonal cells hold clones of the viewed values; every other cell
        holds the element type's default.
        """
        values = self._collect()
        n = len(values)
        result = self._matrix.new(n, n, dtype=self._matrix.element_type)
        for k, value in enumerate(values):
            result.set(k, k, value)
        logger.debug("materialized diagonal into %dx%d", n, n)
        return result

    def __repr__(self) -> str:
        n = self._matrix.rows
        return f"<Diag of {n}x{n} Matrix>"


class MatrixIterator(MatrixView):
    """
    Every element of a matrix in row-major order.

    Row 0 left to right, then row 1, and so on::

        | 1  2  3 |
        | 4  5  6 |
    """

    __slots__ = ()

    @property
    def bound(self) -> int:
        return self._matrix.numel

    def _at(self, k: int) -> Any:
        return self._matrix._flat(k)

    def to_matrix(self) -> "Matrix":
        """Produce a ``1 x n`` row vector of the remaining elements."""
        data = self._collect()
        return self._matrix._from_buffer(data, 1, len(data), self._matrix.element_type)

    def __repr__(self) -> str:
        rows, cols = self._matrix.size
        return f"<MatrixIterator at {self._cursor} of {rows}x{cols} Matrix>"
