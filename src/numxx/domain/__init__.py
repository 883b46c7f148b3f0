"""
Domain layer: value types, protocols, errors and dispatch utilities.

Nothing in this package depends on the storage backend.
"""

from ._errors import (
    NumxxError,
    ShapeError,
    ArrayValueError,
    ArrayIndexError,
    ConversionError,
    ArgumentError,
)
from ._dtype import DType, NumericDomain, promote_types, result_type
from ._shape import Shape, MatmulType
from ._complex import Complex, j
from ._narray import INArray, SupportsNArray

__all__ = [
    NumxxError.__name__,
    ShapeError.__name__,
    ArrayValueError.__name__,
    ArrayIndexError.__name__,
    ConversionError.__name__,
    ArgumentError.__name__,
    DType.__name__,
    NumericDomain.__name__,
    promote_types.__name__,
    result_type.__name__,
    Shape.__name__,
    MatmulType.__name__,
    Complex.__name__,
    "j",
    INArray.__name__,
    SupportsNArray.__name__,
]
