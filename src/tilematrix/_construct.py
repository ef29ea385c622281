"""
Construction from nested sequences.

Two entry points feed ``Matrix.from_rows``:

- ``pad_rows``: lays out ragged rows as a row-major buffer. Two passes: the
  first finds the widest row, the second copies each row and pads it with
  default values up to that width. Total over any nested sequence.

- ``parse_rows``: reads the semicolon notation, rows separated by ``;`` and
  elements by ``,``::

      "1, 2, 3;
       4, 5"        ->  [[1, 2, 3], [4, 5]]
"""

import ast
from typing import Any, Callable, List, Optional, Sequence, Tuple

from ._dtypes import clone

__all__ = ['pad_rows', 'parse_rows']


def pad_rows(
    nested: Sequence[Sequence[Any]],
    default_factory: Callable[[], Any],
) -> Tuple[List[Any], int, int]:
    """
    Lay out rows of unequal length as a padded row-major buffer.

    Args:
        nested: Rows (each a sized sequence)
        default_factory: Produces the value for each padded slot

    Returns:
        Tuple of (data, rows, cols) with ``len(data) == rows * cols``
    """
    rows = len(nested)
    cols = max((len(row) for row in nested), default=0)

    data: List[Any] = []
    for row in nested:
        data.extend(clone(value) for value in row)
        # Trailing defaults
        data.extend(default_factory() for _ in range(cols - len(row)))

    return data, rows, cols


def _literal(token: str) -> Any:
    """Evaluate a Python literal ('3', '-1.5', "'a'", 'True')."""
    try:
        return ast.literal_eval(token)
    except (ValueError, SyntaxError):
        raise ValueError(f"Cannot parse matrix element {token!r}") from None


def parse_rows(
    text: str,
    convert: Optional[Callable[[str], Any]] = None,
) -> List[List[Any]]:
    """
    Parse the semicolon notation into a list of rows.

    An empty (or whitespace-only) text has no rows. An empty segment between
    semicolons is an empty row, which ``from_rows`` pads with defaults.

    Args:
        text: Rows separated by ';', elements by ','
        convert: Token converter (default: Python literal evaluation)

    Raises:
        ValueError: If a token is empty or cannot be converted

    Example:
        >>> parse_rows("1, 2, 3; 4, 5")
        [[1, 2, 3], [4, 5]]
    """
    if convert is None:
        convert = _literal

    if not text.strip():
        return []

    rows = []
    for segment in text.split(";"):
        segment = segment.strip()
        if not segment:
            rows.append([])
            continue

        row = []
        for token in segment.split(","):
            token = token.strip()
            if not token:
                raise ValueError(f"Empty element in row {segment!r}")
            row.append(convert(token))
        rows.append(row)

    return rows
