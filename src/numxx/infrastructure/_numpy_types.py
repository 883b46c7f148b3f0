"""
Bridging between NumXX element types and NumPy.

This module maps :class:`DType` to NumPy dtypes and back, classifies scalar
operands and converts stored values to Python scalars (complex elements are
returned as :class:`Complex`).
"""

from __future__ import annotations

from numbers import Number
from typing import Any, Optional

import numpy as np

from ..domain._complex import Complex
from ..domain._dtype import DType
from ..domain._errors import ArrayValueError, ConversionError

_TO_NUMPY = {dt: np.dtype(dt.value) for dt in DType}

_PYTHON_TYPES = {
    bool: DType.BOOL,
    int: DType.INT64,
    float: DType.FLOAT64,
    complex: DType.COMPLEX128,
    Complex: DType.COMPLEX128,
}


def to_numpy_dtype(dtype: DType) -> np.dtype:
    return _TO_NUMPY[dtype]


def from_numpy_dtype(dtype: Any) -> DType:
    """
    Map a NumPy dtype (or anything ``np.dtype`` accepts) to a :class:`DType`.

    Neighbouring widths are normalized (``int16 -> int32``,
    ``float16 -> float32``, ...).

    Raises
    ------
    ArrayValueError
        For non-numeric dtypes (strings, objects, datetimes).
    """
    npdt = np.dtype(dtype)
    if npdt.kind not in "biufc":
        raise ArrayValueError(f"Unsupported element type {npdt.name!r}.")
    return DType.from_name(npdt.name)


def as_dtype(value: Any) -> Optional[DType]:
    """
    Resolve a user-supplied element type.

    Accepts ``None`` (returned unchanged), a :class:`DType`, a type name, a
    Python scalar type (``int``, ``float``, ``complex``, ``bool``,
    ``Complex``) or a NumPy dtype/scalar type.
    """
    if value is None or isinstance(value, DType):
        return value
    if isinstance(value, str):
        return DType.from_name(value)
    if isinstance(value, type) and value in _PYTHON_TYPES:
        return _PYTHON_TYPES[value]
    try:
        return from_numpy_dtype(value)
    except TypeError:
        raise ArrayValueError(f"Unsupported element type {value!r}.") from None


def is_scalar(value: Any) -> bool:
    """True for Python numbers, NumPy numeric scalars and :class:`Complex`."""
    if isinstance(value, (Complex, np.bool_, np.number)):
        return True
    return isinstance(value, Number)


def scalar_dtype(value: Any) -> DType:
    """Element type carried by a scalar operand."""
    if isinstance(value, Complex):
        return DType.COMPLEX128
    if isinstance(value, np.generic):
        return from_numpy_dtype(value.dtype)
    return DType.of_python_scalar(value)


def storage_value(value: Any, dtype: DType) -> Any:
    """
    Convert a scalar into a value NumPy can store as ``dtype``.

    Raises
    ------
    ConversionError
        If a complex value would be stored into a real element type.
    """
    if scalar_dtype(value).is_complex:
        if not dtype.is_complex:
            raise ConversionError((), dtype.value)
        return complex(value)
    return value


def to_python(value: Any) -> Any:
    """Convert a stored element (NumPy or Python scalar) to a Python scalar."""
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, complex):
        return Complex(value.real, value.imag)
    return value
