"""
Text rendering of matrices.

Each column is as wide as its widest element plus one; elements are
right-aligned and rows are framed by ``|``::

    | 1     2  3 |
    | 4  -100  0 |
    | 7     8  9 |
"""

import sys
from typing import TYPE_CHECKING, List, Optional, TextIO

if TYPE_CHECKING:
    from ._matrix import Matrix

__all__ = ['column_widths', 'format_matrix', 'render', 'write_matrix']


def column_widths(matrix: "Matrix") -> List[int]:
    """Field width of each column: longest rendered element + 1."""
    widths = []
    for j in range(matrix.cols):
        width = max((len(str(el)) for el in matrix.col(j)), default=0)
        widths.append(width + 1)
    return widths


def format_matrix(matrix: "Matrix") -> List[str]:
    """Render each row of the matrix as one line (without newline)."""
    widths = column_widths(matrix)
    lines = []
    for i in range(matrix.rows):
        cells = "".join(
            str(matrix.get(i, j)).rjust(widths[j]) + " "
            for j in range(matrix.cols)
        )
        lines.append(f"|{cells}|")
    return lines


def render(matrix: "Matrix") -> str:
    """Full table with every line newline-terminated."""
    return "".join(line + "\n" for line in format_matrix(matrix))


def write_matrix(matrix: "Matrix", stream: Optional[TextIO] = None) -> None:
    """Write the rendered table to ``stream`` (default: stdout)."""
    if stream is None:
        stream = sys.stdout
    stream.write(render(matrix))
