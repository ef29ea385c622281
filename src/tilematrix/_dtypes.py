"""
Element Type Definitions

A matrix holds elements of one type. The element type decides the default
value used to initialize new matrices, pad short rows and fill the
off-diagonal cells of a materialized diagonal.

Accepted dtype specifications:

    None                  configured default (see ``config.get_default_dtype``)
    DType / str name      'int64', 'float32', 'bool', 'str', 'object', ...
    numpy dtype / type    np.dtype('float32'), np.int16
    Python class          int, float, Fraction, list (default is ``cls()``)
    ElementType           returned unchanged
"""

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Union

import numpy as np

from .error import DTypeError

__all__ = [
    'DType', 'ElementType',
    'int8', 'int16', 'int32', 'int64',
    'uint8', 'uint16', 'uint32', 'uint64',
    'float32', 'float64', 'bool_', 'complex128', 'str_', 'object_',
    'resolve_dtype', 'infer_dtype', 'to_numpy_dtype', 'clone',
]


class DType(Enum):
    """
    Named element types.

    Example:
        >>> from tilematrix import Matrix, DType
        >>> m = Matrix.new(2, 2, dtype=DType.float64)
        >>> m.get(0, 0)
        0.0
    """

    int8 = 'int8'
    int16 = 'int16'
    int32 = 'int32'
    int64 = 'int64'
    uint8 = 'uint8'
    uint16 = 'uint16'
    uint32 = 'uint32'
    uint64 = 'uint64'
    float32 = 'float32'
    float64 = 'float64'
    bool_ = 'bool'
    complex128 = 'complex128'
    str_ = 'str'
    object_ = 'object'

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"DType.{self.name}"


# =============================================================================
# Module-Level Constants
# =============================================================================

int8 = DType.int8
int16 = DType.int16
int32 = DType.int32
int64 = DType.int64
uint8 = DType.uint8
uint16 = DType.uint16
uint32 = DType.uint32
uint64 = DType.uint64
float32 = DType.float32
float64 = DType.float64
bool_ = DType.bool_
complex128 = DType.complex128
str_ = DType.str_
object_ = DType.object_


_NAMES = {d.value: d for d in DType}

# Python scalar type -> DType used when inferring from data
_PY_SCALARS = {
    bool: DType.bool_,
    int: DType.int64,
    float: DType.float64,
    complex: DType.complex128,
    str: DType.str_,
}


@dataclass(frozen=True)
class ElementType:
    """
    Resolved element type.

    Attributes:
        name: Display name ('int64', 'Fraction', ...)
        factory: Zero-argument callable producing a fresh default value
        convert: Maps a value onto the element type (None keeps values as is)
    """

    name: str
    factory: Callable[[], Any]
    convert: Optional[Callable[[Any], Any]] = None

    def default(self) -> Any:
        """Produce a fresh default value."""
        return self.factory()

    def coerce(self, value: Any) -> Any:
        """Convert ``value`` to the element type, if the type converts."""
        if self.convert is None:
            return value
        return self.convert(value)

    def __str__(self) -> str:
        return self.name


DTypeLike = Union[None, str, DType, ElementType, type, np.dtype]


# =============================================================================
# Resolution
# =============================================================================

def _numpy_default(dt: np.dtype) -> Any:
    """Zero of a numpy dtype as a plain Python scalar."""
    if dt.kind == 'O':
        return None
    return np.zeros((), dtype=dt).item()


def _from_numpy(dt: np.dtype, name: Optional[str] = None) -> ElementType:
    value = _numpy_default(dt)
    if dt.kind == 'O':
        return ElementType(name or dt.name, lambda: value)
    # Round-trip through the numpy scalar to get e.g. 1 -> 1.0 for float64
    return ElementType(name or dt.name, lambda: value, lambda v: dt.type(v).item())


def _from_named(dtype: DType) -> ElementType:
    if dtype is DType.object_:
        return ElementType(dtype.value, lambda: None)
    if dtype is DType.str_:
        return ElementType(dtype.value, str)
    return _from_numpy(np.dtype(dtype.value), dtype.value)


def resolve_dtype(dtype: DTypeLike = None) -> ElementType:
    """
    Resolve a dtype specification into an ``ElementType``.

    Args:
        dtype: Any accepted specification (see module docstring)

    Returns:
        ElementType with name and default factory

    Raises:
        DTypeError: If the specification is not recognized
    """
    if dtype is None:
        from .config import get_default_dtype
        dtype = get_default_dtype()

    if isinstance(dtype, ElementType):
        return dtype
    if isinstance(dtype, DType):
        return _from_named(dtype)
    if isinstance(dtype, str):
        if dtype in _NAMES:
            return _from_named(_NAMES[dtype])
        try:
            return _from_numpy(np.dtype(dtype))
        except TypeError:
            raise DTypeError(
                f"Unsupported dtype: {dtype!r}. "
                f"Supported names: {sorted(_NAMES)}"
            ) from None
    if isinstance(dtype, np.dtype):
        return _from_numpy(dtype)
    if isinstance(dtype, type):
        if issubclass(dtype, np.generic):
            return _from_numpy(np.dtype(dtype))
        return ElementType(dtype.__name__, dtype)

    raise DTypeError(f"Cannot interpret {dtype!r} as an element type")


def infer_dtype(values: Iterable[Any]) -> ElementType:
    """
    Infer the element type from the first non-None value.

    Python scalars map to their named dtype, numpy scalars to their numpy
    dtype. Any other value's class is used as the element type (default
    ``cls()``, e.g. ``Fraction(0)``); classes that cannot be built without
    arguments fall back to ``object`` (default ``None``).
    With no usable value the configured default dtype is used.
    """
    for value in values:
        if value is None:
            continue
        if isinstance(value, np.generic):
            return _from_numpy(value.dtype)
        named = _PY_SCALARS.get(type(value))
        if named is not None:
            return _from_named(named)
        cls = type(value)
        try:
            cls()
        except Exception:
            # No zero-argument constructor, so no default of its own
            return _from_named(DType.object_)
        return resolve_dtype(cls)
    return resolve_dtype(None)


def to_numpy_dtype(etype: ElementType) -> Optional[np.dtype]:
    """
    numpy dtype matching an element type.

    Returns None for strings (numpy sizes the unicode dtype itself) and the
    object dtype for names numpy does not know.
    """
    if etype.name == DType.str_.value:
        return None
    try:
        return np.dtype(etype.name)
    except TypeError:
        return np.dtype(object)


def clone(value: Any) -> Any:
    """Duplicate an element (shallow copy)."""
    return copy.copy(value)
