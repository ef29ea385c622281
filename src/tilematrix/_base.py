"""
Matrix Base Class

Defines the minimal interface shared by dense two-dimensional containers.
Shape-derived properties are implemented here once; storage classes supply
the dimensions, the element type and checked element access.

    MatrixBase (ABC)
    └── Matrix - row-major dense storage
"""

from abc import ABC, abstractmethod
from typing import Any, Tuple

__all__ = ['MatrixBase']


class MatrixBase(ABC):
    """
    Abstract base class for dense matrices.

    Required Properties (subclasses must implement):
        rows: Number of rows
        cols: Number of columns
        dtype: Element type name

    Required Methods (subclasses must implement):
        get(i, j): Checked element access
        set(i, j, value): Checked element assignment
    """

    # =========================================================================
    # Abstract Interface
    # =========================================================================

    @property
    @abstractmethod
    def rows(self) -> int:
        """Number of rows."""
        ...

    @property
    @abstractmethod
    def cols(self) -> int:
        """Number of columns."""
        ...

    @property
    @abstractmethod
    def dtype(self) -> str:
        """Element type name."""
        ...

    @abstractmethod
    def get(self, i: int, j: int) -> Any:
        """Element at row ``i``, column ``j``."""
        ...

    @abstractmethod
    def set(self, i: int, j: int, value: Any) -> None:
        """Overwrite element at row ``i``, column ``j``."""
        ...

    # =========================================================================
    # Derived Properties
    # =========================================================================

    @property
    def size(self) -> Tuple[int, int]:
        """Dimensions as ``(rows, cols)``."""
        return (self.rows, self.cols)

    @property
    def shape(self) -> Tuple[int, int]:
        """Alias of ``size``."""
        return self.size

    @property
    def ndim(self) -> int:
        """Number of dimensions (always 2)."""
        return 2

    @property
    def numel(self) -> int:
        """Total number of elements (rows * cols)."""
        return self.rows * self.cols

    @property
    def is_square(self) -> bool:
        """Whether rows == cols."""
        return self.rows == self.cols

    @property
    def is_empty(self) -> bool:
        """Whether the matrix holds no elements."""
        return self.numel == 0

    def __len__(self) -> int:
        return self.rows
