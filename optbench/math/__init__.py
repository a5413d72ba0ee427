"""Numeric primitives shared across optbench."""

from .minmax import (
    FLOAT_TYPES,
    INTEGER_TYPES,
    NUMPY_COMPLEX_TYPES,
    REAL_TYPES,
    SUPPORTED_TYPES,
    Complex,
    is_supported,
    maximum,
    minimum,
)

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
