"""
Global configuration for tilematrix.

Provides:
- Default element type for matrices created without an explicit dtype
- Default board size for the sliding game

Initial values may be set through environment variables:

    TILEMATRIX_DEFAULT_DTYPE   e.g. 'int64', 'float64', 'str'
    TILEMATRIX_BOARD_SIZE      e.g. '4x4', '5x3'
"""

from __future__ import annotations

import logging
import os
from typing import Tuple, Union

from ._dtypes import DType, resolve_dtype

logger = logging.getLogger("tilematrix.config")

ENV_DEFAULT_DTYPE = "TILEMATRIX_DEFAULT_DTYPE"
ENV_BOARD_SIZE = "TILEMATRIX_BOARD_SIZE"

DEFAULT_DTYPE = DType.int64
DEFAULT_BOARD_SIZE = (4, 4)


def _parse_board_size(text: str) -> Tuple[int, int]:
    """Parse 'RxC' into (rows, cols)."""
    parts = text.lower().replace(" ", "").split("x")
    if len(parts) != 2:
        raise ValueError(f"Board size must look like '4x4', got {text!r}")
    rows, cols = int(parts[0]), int(parts[1])
    if rows <= 0 or cols <= 0:
        raise ValueError(f"Board size must be positive, got {text!r}")
    return rows, cols


# =============================================================================
# Global Configuration State
# =============================================================================

class _Config:
    """
    Global configuration singleton.

    Values are read from the environment once, at construction.
    """

    def __init__(self):
        self._default_dtype = DEFAULT_DTYPE
        self._board_size = DEFAULT_BOARD_SIZE
        self._load_env()

    def _load_env(self) -> None:
        # Malformed values are reported and ignored; the defaults stay
        dtype = os.environ.get(ENV_DEFAULT_DTYPE)
        if dtype:
            try:
                self.default_dtype = dtype
            except (ValueError, TypeError) as exc:
                logger.warning("ignoring %s=%r: %s", ENV_DEFAULT_DTYPE, dtype, exc)
            else:
                logger.debug("default dtype from environment: %s", dtype)

        size = os.environ.get(ENV_BOARD_SIZE)
        if size:
            try:
                self.board_size = _parse_board_size(size)
            except ValueError as exc:
                logger.warning("ignoring %s=%r: %s", ENV_BOARD_SIZE, size, exc)
            else:
                logger.debug("board size from environment: %s", size)

    @property
    def default_dtype(self):
        """Get default element type specification."""
        return self._default_dtype

    @default_dtype.setter
    def default_dtype(self, value):
        """Set default element type (validated eagerly)."""
        if value is None:
            raise ValueError("default dtype cannot be None")
        resolve_dtype(value)
        self._default_dtype = value

    @property
    def board_size(self) -> Tuple[int, int]:
        """Get default game board size (rows, cols)."""
        return self._board_size

    @board_size.setter
    def board_size(self, value: Union[str, Tuple[int, int]]):
        if isinstance(value, str):
            value = _parse_board_size(value)
        rows, cols = value
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Board size must be positive, got {value!r}")
        self._board_size = (int(rows), int(cols))


# Global config instance
_config = _Config()


# =============================================================================
# Public API
# =============================================================================

def get_config() -> _Config:
    """Get global configuration instance."""
    return _config


def set_default_dtype(dtype) -> None:
    """
    Set the element type used when no dtype is given.

    Example:
        >>> tilematrix.set_default_dtype('float64')
        >>> Matrix.new(1, 1).get(0, 0)
        0.0
    """
    _config.default_dtype = dtype


def get_default_dtype():
    """Get the element type used when no dtype is given."""
    return _config.default_dtype


def set_board_size(size: Union[str, Tuple[int, int]]) -> None:
    """Set the default board size for new games."""
    _config.board_size = size


def get_board_size() -> Tuple[int, int]:
    """Get the default board size for new games."""
    return _config.board_size


def reset_config() -> None:
    """Restore built-in defaults, ignoring the environment."""
    _config._default_dtype = DEFAULT_DTYPE
    _config._board_size = DEFAULT_BOARD_SIZE
