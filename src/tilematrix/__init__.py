"""
tilematrix - Dense two-dimensional containers

Fixed-shape, row-major matrices over an arbitrary element type, with lazy
row / column / diagonal views, construction from ragged rows and bordered
text rendering.

Matrices:
    Matrix: Row-major dense storage with checked element access
    matrix: Literal builder (rows as arguments, or the "1, 2; 3, 4" notation)

Views:
    Row, Col, Diag, MatrixIterator: single-pass, materializable traversals

Usage:
    >>> import tilematrix as tm
    >>> m = tm.matrix("1, 2, 0; 4, -100, 0; 7, 8, 9")
    >>> print(m.row(1).to_matrix())
    | 4  -100  0 |
    >>> m.diag().to_matrix().to_list()
    [[1, 0, 0], [0, -100, 0], [0, 0, 9]]
    >>> sum(m.iter())
    -69
"""

__version__ = '0.1.0'

from ._base import MatrixBase
from ._matrix import Matrix, matrix
from ._views import MatrixView, Row, Col, Diag, MatrixIterator
from ._construct import pad_rows, parse_rows
from ._display import format_matrix, render, write_matrix
from ._dtypes import (
    DType,
    ElementType,
    resolve_dtype,
    # Type constants
    int8,
    int16,
    int32,
    int64,
    uint8,
    uint16,
    uint32,
    uint64,
    float32,
    float64,
    bool_,
    complex128,
    str_,
    object_,
)
from .error import (
    MatrixError,
    MatrixIndexError,
    NotSquareError,
    DTypeError,
    check_index,
    check_square,
)
from .config import (
    get_config,
    set_default_dtype,
    get_default_dtype,
    set_board_size,
    get_board_size,
    reset_config,
)
from .game import Direction, SlideGame

__all__ = [
    # Version
    '__version__',
    # Matrices
    'MatrixBase',
    'Matrix',
    'matrix',
    # Views
    'MatrixView',
    'Row',
    'Col',
    'Diag',
    'MatrixIterator',
    # Construction / display
    'pad_rows',
    'parse_rows',
    'format_matrix',
    'render',
    'write_matrix',
    # Element types
    'DType',
    'ElementType',
    'resolve_dtype',
    'int8',
    'int16',
    'int32',
    'int64',
    'uint8',
    'uint16',
    'uint32',
    'uint64',
    'float32',
    'float64',
    'bool_',
    'complex128',
    'str_',
    'object_',
    # Errors
    'MatrixError',
    'MatrixIndexError',
    'NotSquareError',
    'DTypeError',
    'check_index',
    'check_square',
    # Configuration
    'get_config',
    'set_default_dtype',
    'get_default_dtype',
    'set_board_size',
    'get_board_size',
    'reset_config',
    # Game
    'Direction',
    'SlideGame',
]
