"""
Dense Matrix

Row-major dense storage over an arbitrary element type.

Storage layout:

    data  = flat list of rows * cols elements
    (i, j) lives at data[i * cols + j]

The shape is fixed at construction. Only element values change, through
``set`` / ``m[i, j] = value``. All element access is bounds-checked and
negative indices are rejected rather than wrapped.

Example:
    >>> from tilematrix import Matrix
    >>> m = Matrix.from_rows([[1, 2, 3], [4, 5]])
    >>> m.size
    (2, 3)
    >>> m.get(1, 2)
    0
    >>> print(m)
    | 1  2  3 |
    | 4  5  0 |
    >>> m.row(0).to_matrix().size
    (1, 3)
"""

from __future__ import annotations

import logging
import operator
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ._base import MatrixBase
from ._construct import pad_rows, parse_rows
from ._display import format_matrix, render
from ._dtypes import ElementType, clone, infer_dtype, resolve_dtype, to_numpy_dtype
from ._views import Col, Diag, MatrixIterator, Row
from .error import check_index

__all__ = ['Matrix']

logger = logging.getLogger("tilematrix.matrix")


def _check_dim(value: int, name: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got bool")
    try:
        value = operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an int, got {type(value).__name__}") from None
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


class Matrix(MatrixBase):
    """
    Fixed-shape, row-major dense matrix.

    Attributes:
        rows (int): Number of rows
        cols (int): Number of columns
        dtype (str): Element type name
        element_type (ElementType): Element type with its default factory
    """

    __slots__ = ("_data", "_rows", "_cols", "_etype")

    def __init__(self, rows: int = 0, cols: int = 0, dtype=None):
        """
        Allocate a ``rows x cols`` matrix of default values.

        Args:
            rows: Number of rows (>= 0)
            cols: Number of columns (>= 0)
            dtype: Element type specification (see ``tilematrix._dtypes``)
        """
        rows = _check_dim(rows, "rows")
        cols = _check_dim(cols, "cols")
        etype = resolve_dtype(dtype)
        self._rows = rows
        self._cols = cols
        self._etype = etype
        self._data = [etype.default() for _ in range(rows * cols)]

    @classmethod
    def _from_buffer(
        cls,
        data: List[Any],
        rows: int,
        cols: int,
        etype: ElementType,
    ) -> "Matrix":
        """Wrap an already laid out row-major buffer (takes ownership)."""
        if len(data) != rows * cols:
            raise ValueError(
                f"buffer of length {len(data)} does not fit shape ({rows}, {cols})"
            )
        obj = cls.__new__(cls)
        obj._data = data
        obj._rows = rows
        obj._cols = cols
        obj._etype = etype
        return obj

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def new(cls, rows: int, cols: int, dtype=None) -> "Matrix":
        """
        Create a ``rows x cols`` matrix with every element set to the
        element type's default value.

        Example:
            >>> Matrix.new(2, 3).to_list()
            [[0, 0, 0], [0, 0, 0]]
        """
        return cls(rows, cols, dtype=dtype)

    @classmethod
    def from_rows(cls, nested: Iterable[Iterable[Any]], dtype=None) -> "Matrix":
        """
        Build a matrix from rows of possibly unequal length.

        The matrix has one row per inner sequence and as many columns as the
        longest one (0 if there are no rows). Shorter rows are padded with
        the element type's default value. Never fails on ragged input.

        An explicit numeric dtype also converts the given elements, so a
        ``float64`` matrix holds only floats. Inferred dtypes keep the
        elements unchanged.

        Args:
            nested: Sequence of row sequences
            dtype: Element type; inferred from the first element if None

        Raises:
            ValueError, TypeError, OverflowError: If an element cannot be
                converted to an explicit dtype

        Example:
            >>> Matrix.from_rows([[1, 2, 3], [4, 5]]).to_list()
            [[1, 2, 3], [4, 5, 0]]
            >>> Matrix.from_rows([[1, 2], [3]], dtype='float64').to_list()
            [[1.0, 2.0], [3.0, 0.0]]
        """
        nested = [list(row) for row in nested]
        if dtype is None:
            etype = infer_dtype(value for row in nested for value in row)
        else:
            etype = resolve_dtype(dtype)
            nested = [[etype.coerce(value) for value in row] for row in nested]
        data, rows, cols = pad_rows(nested, etype.factory)
        logger.debug("built %dx%d matrix from %d rows", rows, cols, len(nested))
        return cls._from_buffer(data, rows, cols, etype)

    @classmethod
    def parse(
        cls,
        text: str,
        dtype=None,
        convert: Optional[Callable[[str], Any]] = None,
    ) -> "Matrix":
        """
        Build a matrix from the semicolon notation.

        Rows are separated by ``;`` and elements by ``,``.

        Example:
            >>> Matrix.parse("1, 2, 0; 4, -100, 0; 7, 8, 9").size
            (3, 3)
        """
        return cls.from_rows(parse_rows(text, convert=convert), dtype=dtype)

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> "Matrix":
        """
        Copy a numpy array into a matrix.

        1D arrays become a single row. Elements are stored as Python scalars.

        Raises:
            ValueError: If the array has more than 2 dimensions
        """
        array = np.asarray(array)
        if array.ndim == 1:
            array = array.reshape(1, -1)
        elif array.ndim != 2:
            raise ValueError(f"Expected 1D or 2D array, got {array.ndim}D")
        rows, cols = array.shape
        etype = resolve_dtype(array.dtype)
        return cls._from_buffer(array.ravel(order="C").tolist(), rows, cols, etype)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def dtype(self) -> str:
        return self._etype.name

    @property
    def element_type(self) -> ElementType:
        """Resolved element type (name and default factory)."""
        return self._etype

    # =========================================================================
    # Element Access
    # =========================================================================

    def _offset(self, i: int, j: int) -> int:
        """Buffer offset of ``(i, j)``; bounds-checked."""
        i = check_index(i, self._rows, "row")
        j = check_index(j, self._cols, "col")
        return i * self._cols + j

    def _flat(self, k: int) -> Any:
        """Element at row-major position ``k``."""
        return self._data[check_index(k, len(self._data), "position")]

    def get(self, i: int, j: int) -> Any:
        """
        Element at row ``i``, column ``j``.

        Raises:
            MatrixIndexError: If ``i >= rows`` or ``j >= cols`` (or negative)
        """
        return self._data[self._offset(i, j)]

    def set(self, i: int, j: int, value: Any) -> None:
        """
        Overwrite the element at row ``i``, column ``j``.

        Raises:
            MatrixIndexError: If ``i >= rows`` or ``j >= cols`` (or negative)
        """
        self._data[self._offset(i, j)] = value

    def __getitem__(self, key: Tuple[int, int]) -> Any:
        """Get element at (row, col)."""
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Index must be (row, col) tuple")
        return self.get(key[0], key[1])

    def __setitem__(self, key: Tuple[int, int], value: Any) -> None:
        """Set element at (row, col)."""
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Index must be (row, col) tuple")
        self.set(key[0], key[1], value)

    # =========================================================================
    # Views
    # =========================================================================

    def row(self, i: int) -> Row:
        """View of row ``i``."""
        return Row(self, i)

    def col(self, j: int) -> Col:
        """View of column ``j``."""
        return Col(self, j)

    def diag(self) -> Diag:
        """
        View of the main diagonal.

        Raises:
            NotSquareError: If the matrix is not square
        """
        return Diag(self)

    def iter(self) -> MatrixIterator:
        """View of every element in row-major order."""
        return MatrixIterator(self)

    def __iter__(self) -> MatrixIterator:
        return MatrixIterator(self)

    # =========================================================================
    # Conversion
    # =========================================================================

    def transpose(self) -> "Matrix":
        """
        Produce the transpose as a new ``cols x rows`` matrix.

        The source matrix is left unmodified.
        """
        rows, cols = self.size
        data = []
        for j in range(cols):
            for i in range(rows):
                data.append(clone(self._data[i * cols + j]))
        logger.debug("transposed %dx%d matrix", rows, cols)
        return self._from_buffer(data, cols, rows, self._etype)

    @property
    def T(self) -> "Matrix":
        """Transpose (alias)."""
        return self.transpose()

    def copy(self) -> "Matrix":
        """Independent copy with cloned elements."""
        return self._from_buffer(
            [clone(value) for value in self._data], self._rows, self._cols, self._etype
        )

    def to_list(self) -> List[List[Any]]:
        """Nested list of cloned elements, one inner list per row."""
        cols = self._cols
        return [
            [clone(value) for value in self._data[i * cols:(i + 1) * cols]]
            for i in range(self._rows)
        ]

    def to_numpy(self, dtype=None) -> np.ndarray:
        """
        Copy into a 2D numpy array of shape ``(rows, cols)``.

        Object arrays hold each element as is, even when the element is
        itself a sequence.

        Args:
            dtype: numpy dtype; derived from the element type if None
        """
        if dtype is None:
            dtype = to_numpy_dtype(self._etype)
        if dtype is not None and np.dtype(dtype).kind == 'O':
            out = np.empty((self._rows, self._cols), dtype=object)
            for k, value in enumerate(self._data):
                out[divmod(k, self._cols)] = value
            return out
        return np.array(self._data, dtype=dtype).reshape(self._rows, self._cols)

    # =========================================================================
    # Magic Methods
    # =========================================================================

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.size == other.size and self._data == other._data

    __hash__ = None

    def __str__(self) -> str:
        return "\n".join(format_matrix(self))

    def render(self) -> str:
        """Bordered text table, one newline-terminated line per row."""
        return render(self)

    def __repr__(self) -> str:
        rows, cols = self.size
        return f"<Matrix {rows}x{cols} dtype={self.dtype}>"


def matrix(*rows: Sequence[Any], dtype=None) -> Matrix:
    """
    Matrix literal.

    Accepts either rows as separate arguments or a single string in the
    semicolon notation.

    Example:
        >>> matrix([1, 2, 3], [4, 5, 6]).size
        (2, 3)
        >>> matrix("1, 2, 3; 4, 5, 6").size
        (2, 3)
    """
    if len(rows) == 1 and isinstance(rows[0], str):
        return Matrix.parse(rows[0], dtype=dtype)
    return Matrix.from_rows(rows, dtype=dtype)
