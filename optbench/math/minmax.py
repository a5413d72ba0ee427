"""Element-wise ``minimum`` / ``maximum`` over a closed catalog of numeric types.

The catalog is:

* signed and unsigned integers: ``numpy.int8`` ... ``numpy.int64`` and
  ``numpy.uint8`` ... ``numpy.uint64``;
* floats: ``numpy.float32`` and ``numpy.float64``;
* complex numbers over each of those component types: ``numpy.complex64``,
  ``numpy.complex128`` and :class:`Complex` for any real catalog type;
* ``numpy.ndarray`` with one of the catalog dtypes (element-wise).

Real values use their native ordering. Complex values are ordered
lexicographically, real part first and imaginary part on ties. This order is
only good for consistent tie-breaking, not for comparing magnitudes.

Anything outside the catalog, including Python's builtin ``int``, ``float``
and ``complex``, raises ``TypeError``. Values are never widened to a common
type.

Example
-------
>>> import numpy as np
>>> int(minimum(np.int8(5), np.int8(10)))
5
>>> z = maximum(Complex(np.uint8(1), np.uint8(9)), Complex(np.uint8(2), np.uint8(0)))
>>> int(z.re), int(z.im)
(2, 0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import numpy as np

INTEGER_TYPES: tuple[type, ...] = (
    np.int8,
    np.int16,
    np.int32,
    np.int64,
    np.uint8,
    np.uint16,
    np.uint32,
    np.uint64,
)
FLOAT_TYPES: tuple[type, ...] = (np.float32, np.float64)
REAL_TYPES: tuple[type, ...] = INTEGER_TYPES + FLOAT_TYPES
NUMPY_COMPLEX_TYPES: tuple[type, ...] = (np.complex64, np.complex128)
SUPPORTED_TYPES: tuple[type, ...] = REAL_TYPES + NUMPY_COMPLEX_TYPES

_REAL_DTYPES = frozenset(np.dtype(t) for t in REAL_TYPES)
_SUPPORTED_DTYPES = frozenset(np.dtype(t) for t in SUPPORTED_TYPES)

OrderingFn = Callable[[Any, Any], Any]


@dataclass(frozen=True, order=True)
class Complex:
    """Complex number whose two components share one real catalog type.

    ``numpy`` only provides complex types over float32/float64; this type
    covers integer components as well. Instances compare lexicographically.
    """

    re: Any
    im: Any

    def __post_init__(self) -> None:
        if not (isinstance(self.re, np.generic) and isinstance(self.im, np.generic)):
            raise TypeError(
                "Unsupported Complex component types "
                f"{type(self.re).__name__} and {type(self.im).__name__}"
            )
        if self.re.dtype != self.im.dtype:
            raise TypeError(
                "Complex components must share one type, got "
                f"{type(self.re).__name__} and {type(self.im).__name__}"
            )
        if self.re.dtype not in _REAL_DTYPES:
            raise TypeError(
                f"Unsupported Complex component type {type(self.re).__name__}"
            )

    @property
    def real(self):
        return self.re

    @property
    def imag(self):
        return self.im

    @property
    def component_type(self) -> type:
        return type(self.re)


def _real_min(x, y):
    return x if x <= y else y


def _real_max(x, y):
    return y if x <= y else x


def _lex_le(x, y) -> bool:
    if x.real != y.real:
        return x.real < y.real
    return x.imag <= y.imag


def _complex_min(x, y):
    return x if _lex_le(x, y) else y


def _complex_max(x, y):
    return y if _lex_le(x, y) else x


def _array_min(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    # numpy orders complex arrays lexicographically as well.
    return np.minimum(x, y)


def _array_max(x: np.ndarray, y: np.ndarray) -> np.ndarray:
    return np.maximum(x, y)


def _build_orderings() -> dict[Any, tuple[OrderingFn, OrderingFn]]:
    table: dict[Any, tuple[OrderingFn, OrderingFn]] = {}
    for t in REAL_TYPES:
        table[(np.generic, np.dtype(t))] = (_real_min, _real_max)
    for t in NUMPY_COMPLEX_TYPES:
        table[(np.generic, np.dtype(t))] = (_complex_min, _complex_max)
    for t in REAL_TYPES:
        table[(Complex, np.dtype(t))] = (_complex_min, _complex_max)
    return table


_ORDERINGS = _build_orderings()


def _dispatch_key(value: Any) -> Any:
    if isinstance(value, Complex):
        return (Complex, value.re.dtype)
    if isinstance(value, np.ndarray):
        return (np.ndarray, value.dtype)
    # Platform aliases such as longlong share a dtype with their sized type.
    if isinstance(value, np.generic):
        return (np.generic, value.dtype)
    return type(value)


def is_supported(value: Any) -> bool:
    """Return True if ``value`` belongs to the ordering catalog."""
    key = _dispatch_key(value)
    if isinstance(value, np.ndarray):
        return key[1] in _SUPPORTED_DTYPES
    return key in _ORDERINGS


def _resolve(x: Any, y: Any) -> tuple[OrderingFn, OrderingFn]:
    key_x = _dispatch_key(x)
    key_y = _dispatch_key(y)
    if key_x != key_y:
        raise TypeError(
            f"minimum/maximum need operands of one element type, got {_describe(x)} "
            f"and {_describe(y)}"
        )
    if isinstance(x, np.ndarray):
        if key_x[1] not in _SUPPORTED_DTYPES:
            raise TypeError(f"Unsupported array dtype {x.dtype}")
        return _array_min, _array_max
    try:
        return _ORDERINGS[key_x]
    except KeyError:
        raise TypeError(f"Unsupported element type {_describe(x)}") from None


def _describe(value: Any) -> str:
    if isinstance(value, Complex):
        return f"Complex[{value.component_type.__name__}]"
    if isinstance(value, np.ndarray):
        return f"ndarray[{value.dtype}]"
    return type(value).__name__


def minimum(x, y):
    """Return the lesser of ``x`` and ``y``.

    Returns ``x`` when the two compare equal. Arrays are compared
    element-wise with broadcasting.

    Raises:
        TypeError: If the operands are of different element types or outside
            the supported catalog.
    """
    min_fn, _ = _resolve(x, y)
    return min_fn(x, y)


def maximum(x, y):
    """Return the greater of ``x`` and ``y``.

    Returns ``y`` when the two compare equal. Arrays are compared
    element-wise with broadcasting.

    Raises:
        TypeError: If the operands are of different element types or outside
            the supported catalog.
    """
    _, max_fn = _resolve(x, y)
    return max_fn(x, y)


__all__ = [
    "Complex",
    "FLOAT_TYPES",
    "INTEGER_TYPES",
    "NUMPY_COMPLEX_TYPES",
    "REAL_TYPES",
    "SUPPORTED_TYPES",
    "is_supported",
    "maximum",
    "minimum",
]
