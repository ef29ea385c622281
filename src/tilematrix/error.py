"""
Error handling for tilematrix.

Precondition violations (out-of-bounds access, diagonal of a non-square
matrix) are raised immediately and are never recovered from inside the
package. Construction, padding and display have no error path.
"""

from __future__ import annotations

import operator
from typing import Optional


# =============================================================================
# Error Codes
# =============================================================================

# Success
TM_OK = 0

# Argument errors (10-19)
TM_ERROR_INVALID_ARGUMENT = 10
TM_ERROR_INDEX_OUT_OF_BOUNDS = 14
TM_ERROR_NOT_SQUARE = 15

# Type errors (20-29)
TM_ERROR_TYPE_ERROR = 20


_ERROR_MESSAGES = {
    TM_OK: "Success",
    TM_ERROR_INVALID_ARGUMENT: "Invalid argument",
    TM_ERROR_INDEX_OUT_OF_BOUNDS: "Index out of bounds",
    TM_ERROR_NOT_SQUARE: "Matrix is not square",
    TM_ERROR_TYPE_ERROR: "Type error",
}


# =============================================================================
# Exception Classes
# =============================================================================

class MatrixError(Exception):
    """
    Base exception for all tilematrix errors.

    Every error carries a numeric ``code`` from the table above, so callers
    can branch on the kind without matching message text.
    """

    OK = TM_OK
    ERROR_INVALID_ARGUMENT = TM_ERROR_INVALID_ARGUMENT
    ERROR_INDEX_OUT_OF_BOUNDS = TM_ERROR_INDEX_OUT_OF_BOUNDS
    ERROR_NOT_SQUARE = TM_ERROR_NOT_SQUARE
    ERROR_TYPE_ERROR = TM_ERROR_TYPE_ERROR

    default_code = TM_ERROR_INVALID_ARGUMENT

    def __init__(self, message: Optional[str] = None, code: Optional[int] = None):
        """
        Create a tilematrix exception.

        Args:
            message: Detailed message (falls back to the code's message)
            code: Error code (falls back to the class default)
        """
        if code is None:
            code = self.default_code
        self.code = code
        if message is None:
            message = _ERROR_MESSAGES.get(code, f"Unknown error (code={code})")
        self.message = message
        super().__init__(message)

    @classmethod
    def from_code(cls, code: int, context: str = "") -> "MatrixError":
        """Create exception from error code with optional context."""
        base_msg = _ERROR_MESSAGES.get(code, "Unknown error")
        msg = f"{context}: {base_msg}" if context else base_msg
        return cls(msg, code)


class MatrixIndexError(MatrixError, IndexError):
    """Row, column or element index outside the matrix."""

    default_code = TM_ERROR_INDEX_OUT_OF_BOUNDS


class NotSquareError(MatrixError, ValueError):
    """Operation requires a square matrix."""

    default_code = TM_ERROR_NOT_SQUARE


class DTypeError(MatrixError, TypeError):
    """Element type cannot be resolved."""

    default_code = TM_ERROR_TYPE_ERROR


# =============================================================================
# Precondition Checks
# =============================================================================

def check_index(index: int, bound: int, axis: str = "index") -> int:
    """
    Check that ``0 <= index < bound``.

    Negative indices are rejected rather than wrapped. Integer-like objects
    (numpy integers) are accepted; booleans are not.

    Returns:
        The index as a plain int

    Raises:
        MatrixIndexError: If the index is outside the bound
        TypeError: If the index is not an integer
    """
    if isinstance(index, bool):
        raise TypeError(f"{axis} must be an int, got bool")
    try:
        index = operator.index(index)
    except TypeError:
        raise TypeError(
            f"{axis} must be an int, got {type(index).__name__}"
        ) from None
    if index < 0 or index >= bound:
        raise MatrixIndexError(
            f"{axis} {index} out of bounds for size {bound}"
        )
    return index


def check_square(rows: int, cols: int, context: str = "") -> None:
    """
    Check that a ``rows x cols`` shape is square.

    Raises:
        NotSquareError: If ``rows != cols``
    """
    if rows != cols:
        prefix = f"{context}: " if context else ""
        raise NotSquareError(
            f"{prefix}matrix of shape ({rows}, {cols}) is not square"
        )
